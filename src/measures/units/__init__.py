from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measures.units.registry import QuantityRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "QuantityRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from measures.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``measures.units.Length`` (or
    ``from measures.units import Length``) returns the quantity registered
    under that name in the default registry.
    """
    if name.startswith("_"):
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    reg = _get_default_registry()
    if reg.has(name):
        return reg.get(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_get_default_registry().all()))
