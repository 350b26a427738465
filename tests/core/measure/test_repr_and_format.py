import pytest

from measures.units import Dimensionless, Length, Mass, Velocity


def test_repr():
    assert repr(Length(1.5)) == "Measure(1.5, 'm')"
    assert repr(Mass(2.5, Mass.hectogram)) == "Measure(2.5, 'hg')"

def test_str_includes_quantity_name():
    assert str(Length(1.5)) == "1.5 m (Length)"
    assert str(Velocity(3.0)) == "3.0 m s⁻¹ (Velocity)"

def test_str_of_symbol_less_unit_has_no_double_space():
    assert str(Dimensionless(0.5)) == "0.5 (Dimensionless)"

def test_format_empty_is_str():
    m = Length(150.0, Length.centimeter)
    assert f"{m}" == str(m)

def test_format_numeric_spec_applies_to_amount():
    m = Length(150.0, Length.centimeter)
    assert f"{m:.1f}" == "150.0 cm"

@pytest.mark.regression(reason="Width and alignment padding must survive formatting")
def test_format_width_pads_the_amount():
    m = Length(150.0, Length.centimeter)
    assert f"{m:>8.2f}" == "  150.00 cm"
    assert f"{m:<8.1f}" == "150.0    cm"

def test_format_symbol_less_unit_has_no_trailing_space():
    assert f"{Dimensionless(0.5):.2f}" == "0.50"
    assert f"{Dimensionless(0.5):>6.2f}" == "  0.50"

def test_format_std_converts_to_standard_unit():
    m = Length(150.0, Length.centimeter)
    assert f"{m:std}" == "1.5 m (Length)"

def test_format_bad_spec_raises():
    with pytest.raises(ValueError):
        format(Length(1.0), "not-a-spec")
