import pytest

from measures.core.dimensions import DIM_0, LENGTH, MASS, TIME, Dimension
from measures.core.errors import InvalidUnitError, QuantityMismatchError
from measures.core.measure import Measure
from measures.core.quantity import Quantity, QuantityLike
from measures.units.prefixes import CENTI, KILO


@pytest.fixture()
def length():
    q = Quantity("Length", LENGTH, "m", "meter")
    q.add_prefixed_unit(CENTI)
    q.add_prefixed_unit(KILO)
    return q


@pytest.fixture()
def mass():
    return Quantity("Mass", MASS, "kg", "kilogram", prefixable=False)


# -------------------------------
# Descriptor basics
# -------------------------------

def test_descriptor_exposes_dimension_and_standard_unit(length):
    assert isinstance(length, QuantityLike)
    assert length.name == "Length"
    assert length.dimension == LENGTH
    assert isinstance(length.dimension, Dimension)
    assert length.standard_unit.symbol == "m"
    assert length.standard_unit.quantity is length

def test_units_are_listed_in_definition_order(length):
    assert [u.symbol for u in length.units] == ["m", "cm", "km"]
    assert list(length) == list(length.units)

def test_unit_lookup_by_attribute_and_symbol(length):
    assert length.centimeter is length.unit("cm")
    assert length.meter is length.standard_unit

def test_unknown_unit_lookups(length):
    with pytest.raises(AttributeError):
        _ = length.furlong
    with pytest.raises(ValueError):
        length.unit("fur")

def test_contains_accepts_symbol_or_unit(length, mass):
    assert "cm" in length
    assert length.kilometer in length
    assert "kg" not in length
    assert mass.standard_unit not in length

def test_dir_lists_unit_names(length):
    names = dir(length)
    assert "centimeter" in names
    assert "kilometer" in names
    assert "add_unit" in names

def test_repr(length):
    assert repr(length) == "Quantity('Length', [L^1])"

def test_same_quantity_is_decided_by_dimension(length, mass):
    other_length = Quantity("Distance", LENGTH, "dist_m", "distance_meter")
    assert length.is_same_quantity(other_length)
    assert not length.is_same_quantity(mass)


# -------------------------------
# Building measures
# -------------------------------

def test_call_defaults_to_standard_unit(length):
    m = length(3.0)
    assert isinstance(m, Measure)
    assert m.unit is length.standard_unit
    assert m.amount == 3.0

def test_call_with_unit(length):
    m = length(250.0, length.centimeter)
    assert m.unit is length.centimeter
    assert m.standard_amount == pytest.approx(2.5)

def test_call_with_foreign_unit_raises(length, mass):
    with pytest.raises(QuantityMismatchError):
        length(1.0, mass.standard_unit)

def test_call_with_non_unit_raises(length):
    with pytest.raises(InvalidUnitError):
        length(1.0, "cm")  # type: ignore[arg-type]


# -------------------------------
# validate_unit
# -------------------------------

def test_validate_unit_accepts_same_dimension_from_other_descriptor(length):
    other = Quantity("Distance", LENGTH, "dist_m", "distance_meter")
    assert length.validate_unit(other.standard_unit, "convert") is other.standard_unit

def test_validate_unit_none_is_invalid_unit(length):
    with pytest.raises(InvalidUnitError) as exc:
        length.validate_unit(None, "convert")
    assert isinstance(exc.value, TypeError)

def test_validate_unit_reports_quantities(length, mass):
    with pytest.raises(QuantityMismatchError) as exc:
        length.validate_unit(mass.standard_unit, "convert")
    assert exc.value.expected == "Length"
    assert exc.value.actual == "Mass"


# -------------------------------
# Definition rules
# -------------------------------

def test_duplicate_name_or_symbol_rejected(length):
    with pytest.raises(ValueError):
        length.add_unit("cm2", "centimeter", 0.01)
    with pytest.raises(ValueError):
        length.add_unit("cm", "other_centimeter", 0.01)

def test_sealed_quantity_rejects_new_units(length):
    length.seal()
    assert length.sealed
    with pytest.raises(ValueError):
        length.add_unit("ft", "foot", 0.3048)

def test_prefixed_base_must_belong_to_quantity(length, mass):
    with pytest.raises(ValueError):
        length.add_prefixed_unit(CENTI, mass.standard_unit)


# -------------------------------
# Composed (anonymous) quantities
# -------------------------------

def test_compose_is_cached_and_sealed():
    dim = Dimension((1, 1, 1, 0, 0, 0, 0))
    q = Quantity.compose(dim)
    assert q is Quantity.compose((1, 1, 1, 0, 0, 0, 0))
    assert q.sealed
    assert q.dimension == dim
    assert q.name == "kg·m·s"
    assert q.standard_unit.symbol == "kg·m·s"

def test_compose_dimensionless():
    q = Quantity.compose(DIM_0)
    assert q.name == "1"
    assert q.dimension.is_dimensionless

def test_compose_inverse_time_label():
    assert Quantity.compose(TIME ** -1).name == "1/s"
