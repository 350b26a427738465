"""
measures.units.registry
=======================

A thread-safe registry of `Quantity` descriptors.

Key points
----------
- Encapsulates global state in a `QuantityRegistry` class (thread-safe).
- Data-driven registration from the declarative catalog table.
- Lookup by quantity name, by unit symbol, and by dimension (the first
  quantity registered for a dimension is the preferred one).
- Registration seals a quantity: no units can be added afterwards.
- Easily testable (build isolated registries with
  `_bootstrap_default_registry`).

This registry does *not* parse unit expressions such as "m/s^2"; symbols
are looked up verbatim.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Mapping, Optional, Tuple

from measures.core.dimensions import Dimension, DimLike
from measures.core.quantity import Quantity
from measures.core.unit import Unit
from measures.units.catalog import build_quantities

logger = logging.getLogger(__name__)


class QuantityRegistry:
    """Thread-safe registry of quantities and their units."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._quantities: Dict[str, Quantity] = {}
        self._by_dimension: Dict[Dimension, List[Quantity]] = {}
        self._units: Dict[str, Unit] = {}

    def __contains__(self, item: object) -> bool:
        with self._lock:
            if isinstance(item, Quantity):
                return self._quantities.get(item.name) is item
            return item in self._quantities

    def __len__(self) -> int:
        with self._lock:
            return len(self._quantities)

    # -------------------------- public API ---------------------------------
    def register(self, quantity: Quantity, replace: bool = False) -> Quantity:
        """Register (or overwrite if replace is True) a quantity under its name.

        The quantity is sealed; its unit symbols must not clash with units of
        other registered quantities.
        """
        # The lock must wrap the entire check-and-set operation.
        with self._lock:
            previous = self._quantities.get(quantity.name)
            if previous is not None and not replace:
                raise ValueError(
                    f"Cannot register quantity '{quantity.name}': "
                    "a quantity with this name already exists."
                )

            for unit in quantity.units:
                owner = self._units.get(unit.symbol)
                if owner is not None and owner.quantity is not previous:
                    raise ValueError(
                        f"Cannot register quantity '{quantity.name}': unit symbol "
                        f"'{unit.symbol}' already belongs to '{owner.quantity.name}'."
                    )

            if previous is not None:
                self._forget(previous)

            quantity.seal()
            self._quantities[quantity.name] = quantity
            self._by_dimension.setdefault(quantity.dimension, []).append(quantity)
            for unit in quantity.units:
                self._units[unit.symbol] = unit

        logger.debug(
            "Registered quantity %s %r with %d units",
            quantity.name, quantity.dimension, len(quantity.units),
        )
        return quantity

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._quantities

    def get(self, name: str) -> Quantity:
        """Lookup a quantity by name. Raises `ValueError` if unknown."""
        with self._lock:
            q = self._quantities.get(name)
        if q is None:
            raise ValueError(f"Unknown quantity: {name}")
        return q

    def unit(self, symbol: str) -> Unit:
        """Lookup a unit of any registered quantity by its symbol. Raises `ValueError` if unknown."""
        with self._lock:
            u = self._units.get(symbol)
        if u is None:
            raise ValueError(f"Unknown unit symbol: {symbol}")
        return u

    def find(self, dimension: DimLike) -> Optional[Quantity]:
        """Preferred quantity for `dimension`, or None if none is registered."""
        with self._lock:
            found = self._by_dimension.get(Dimension(dimension))
            return found[0] if found else None

    def quantities_for(self, dimension: DimLike) -> Tuple[Quantity, ...]:
        """All quantities sharing `dimension`, in registration order."""
        with self._lock:
            return tuple(self._by_dimension.get(Dimension(dimension), ()))

    def all(self) -> Mapping[str, Quantity]:
        with self._lock:
            return dict(self._quantities)

    # ------------------------- internals -----------------------------------
    def _forget(self, quantity: Quantity) -> None:
        del self._quantities[quantity.name]
        same_dim = self._by_dimension[quantity.dimension]
        same_dim.remove(quantity)
        if not same_dim:
            del self._by_dimension[quantity.dimension]
        for unit in quantity.units:
            if self._units.get(unit.symbol) is unit:
                del self._units[unit.symbol]


# ---------------------------------------------------------------------------
# Bootstrap a default registry from the catalog
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> QuantityRegistry:
    reg = QuantityRegistry()
    for quantity in build_quantities().values():
        reg.register(quantity)
    logger.info("Quantity registry initialized with %d quantities.", len(reg))
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: QuantityRegistry = _bootstrap_default_registry()


__all__ = [
    "QuantityRegistry",
    "DEFAULT_REGISTRY",
]
