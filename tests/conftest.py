# tests/conftest.py
import pytest
from measures.units.registry import DEFAULT_REGISTRY as _reg
from measures.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def qreg():
    return _reg


@pytest.fixture
def fresh_registry():
    """Fully-bootstrapped QuantityRegistry with its own Quantity objects."""
    return _bootstrap_default_registry()
