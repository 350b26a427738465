import pytest

import measures.units.registry as regmod


def test__get_default_registry_returns_DEFAULT(monkeypatch, fresh_registry):
    # Patch the DEFAULT_REGISTRY and verify the helper returns it
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import measures.units as units
    get_default = getattr(units, "_get_default_registry")

    assert get_default() is fresh_registry


def test_lazy_quantity_binds_to_default_registry(monkeypatch, fresh_registry):
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    from measures.units import Length
    assert Length is fresh_registry.get("Length")


def test_from_import_of_quantities():
    from measures.units import Mass, Velocity

    assert Mass.name == "Mass"
    assert Velocity.name == "Velocity"


def test_unknown_module_attribute_raises_attributeerror():
    import measures.units as units
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")
    with pytest.raises(AttributeError):
        _ = getattr(units, "_private")


def test_dir_includes_quantities():
    import measures.units as units
    names = dir(units)
    assert "Length" in names
    assert "AbsorbedDose" in names
    # Should be sorted for better discoverability
    assert names == sorted(names)
