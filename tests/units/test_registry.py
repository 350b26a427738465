# pytest tests for measures.units.registry
#
# These tests exercise registration rules, lookups by name, symbol and
# dimension, sealing, replacement and thread-safety. Most use an isolated
# registry instance so DEFAULT_REGISTRY is never mutated.

import logging
import threading

import pytest

from measures.core.dimensions import DIM_0, LENGTH, MASS, TIME, Dimension
from measures.core.quantity import Quantity
import measures.units.registry as regmod
from measures.units.registry import QuantityRegistry


@pytest.fixture()
def reg():
    """Empty registry."""
    return QuantityRegistry()


def _length(name="Length", symbol="m", unit_name="meter"):
    return Quantity(name, LENGTH, symbol, unit_name)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_register_and_get(reg):
    q = reg.register(_length())
    assert reg.get("Length") is q
    assert reg.has("Length")
    assert "Length" in reg
    assert q in reg
    assert len(reg) == 1

def test_register_seals_quantity(reg):
    q = reg.register(_length())
    assert q.sealed
    with pytest.raises(ValueError):
        q.add_unit("ft", "foot", 0.3048)

def test_duplicate_name_rejected(reg):
    reg.register(_length())
    with pytest.raises(ValueError):
        reg.register(_length(symbol="m2", unit_name="meter2"))

def test_duplicate_symbol_across_quantities_rejected(reg):
    reg.register(_length())
    clash = Quantity("Distance", LENGTH, "m", "meter")
    with pytest.raises(ValueError):
        reg.register(clash)
    assert not reg.has("Distance")

def test_replace_swaps_quantity_and_units(reg):
    old = reg.register(_length())
    new = _length()
    new.add_unit("ft", "foot", 0.3048)
    reg.register(new, replace=True)

    assert reg.get("Length") is new
    assert old not in reg
    assert reg.unit("m") is new.standard_unit
    assert reg.unit("ft") is new.foot
    assert reg.quantities_for(LENGTH) == (new,)

def test_register_logs_debug(reg, caplog):
    with caplog.at_level(logging.DEBUG, logger="measures.units.registry"):
        reg.register(_length())
    assert any("Registered quantity Length" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def test_unknown_lookups_raise_value_error(reg):
    with pytest.raises(ValueError):
        reg.get("Nope")
    with pytest.raises(ValueError):
        reg.unit("nope")
    assert not reg.has("Nope")
    assert "Nope" not in reg

def test_find_prefers_first_registered(reg):
    dose = reg.register(Quantity("AbsorbedDose", (2, 0, -2, 0, 0, 0, 0), "Gy", "gray"))
    equiv = reg.register(Quantity("DoseEquivalent", (2, 0, -2, 0, 0, 0, 0), "Sv", "sievert"))
    assert reg.find((2, 0, -2, 0, 0, 0, 0)) is dose
    assert reg.quantities_for(Dimension((2, 0, -2, 0, 0, 0, 0))) == (dose, equiv)

def test_find_missing_dimension_is_none(reg):
    assert reg.find(MASS) is None
    assert reg.quantities_for(MASS) == ()

def test_all_returns_copy(reg):
    reg.register(_length())
    snapshot = reg.all()
    snapshot.clear()  # type: ignore[attr-defined]
    assert reg.has("Length")


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------

def test_default_registry_contents(qreg):
    for name, dim in [("Length", LENGTH), ("Mass", MASS), ("Time", TIME), ("Dimensionless", DIM_0)]:
        q = qreg.get(name)
        assert q.dimension == dim
        assert q.sealed

def test_default_registry_symbol_lookup(qreg):
    assert qreg.unit("hg") is qreg.get("Mass").hectogram
    assert qreg.unit("m s⁻²") is qreg.get("Acceleration").standard_unit

def test_bootstrap_builds_independent_quantities(fresh_registry, qreg):
    assert fresh_registry.get("Length") is not qreg.get("Length")
    assert fresh_registry.get("Length").dimension == qreg.get("Length").dimension
    assert set(fresh_registry.all()) == set(qreg.all())

def test_bootstrap_logs_info(caplog):
    with caplog.at_level(logging.INFO, logger="measures.units.registry"):
        regmod._bootstrap_default_registry()
    assert any("initialized" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# Thread-safety
# ---------------------------------------------------------------------------

def test_concurrent_registration_and_lookup(reg):
    names = [f"Q{i}" for i in range(50)]
    errors = []

    def worker(i):
        try:
            reg.register(Quantity(names[i], (i, 1, 0, 0, 0, 0, 0), f"u{i}", f"unit{i}"))
            assert reg.get(names[i]).name == names[i]
            assert reg.unit(f"u{i}").quantity.name == names[i]
        except Exception as e:  # pragma: no cover - surfaced below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(names))]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(reg) == len(names)

def test_concurrent_measure_arithmetic_is_consistent(qreg):
    Length = qreg.get("Length")
    Time = qreg.get("Time")
    results = []

    def worker():
        for _ in range(200):
            results.append((Length(10.0) / Time(2.0)).amount)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    assert set(results) == {5.0}
