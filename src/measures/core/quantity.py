"""
measures.core.quantity
======================

Defines the `Quantity` descriptor: one instance per physical quantity
(length, mass, acceleration, absorbed dose, ...), pairing a fixed
`Dimension` with a designated standard unit and the derived units that
belong to it.

This module provides:
- `QuantityLike`, the capability protocol the arithmetic operations are
  written against (a dimension and a standard unit).
- `Quantity`, the concrete descriptor. It owns its units, looks them up by
  attribute name or symbol, validates units presented to measures, and
  builds measures via ``Length(3.0)`` / ``Length(3.0, Length.centimeter)``.

Quantities are filled with units while the catalog is built and sealed when
they are registered; after that they are read-only.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional, Protocol, runtime_checkable

from measures.core.dimensions import Dimension, DimLike
from measures.core.errors import InvalidUnitError, QuantityMismatchError
from measures.core.unit import ConvertedUnit, LinearUnit, Unit
from measures.core.utils import Amount, format_dim

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measures.core.measure import Measure
    from measures.units.prefixes import Prefix


@runtime_checkable
class QuantityLike(Protocol):
    """Capability every quantity exposes to the arithmetic operations."""

    @property
    def name(self) -> str: ...

    @property
    def dimension(self) -> Dimension: ...

    @property
    def standard_unit(self) -> Unit: ...


class Quantity:
    """
    Descriptor of one physical quantity.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"Acceleration"``.
    dimension : DimLike
        Exponents over (L, M, T, I, Θ, N, J).
    standard_symbol : str
        Symbol of the standard (SI) unit, e.g. ``"m s⁻²"``.
    standard_name : str
        Attribute name of the standard unit, e.g. ``"meter_per_second_squared"``.
    prefixable : bool, optional
        Whether the standard unit accepts SI prefixes (``False`` for ``kg``).
    """

    __slots__ = ("_name", "_dimension", "_standard_unit", "_by_name", "_by_symbol", "_sealed")

    def __init__(
        self,
        name: str,
        dimension: DimLike,
        standard_symbol: str,
        standard_name: str,
        *,
        prefixable: bool = True,
    ) -> None:
        self._name = name
        self._dimension = Dimension(dimension)
        self._by_name: Dict[str, Unit] = {}
        self._by_symbol: Dict[str, Unit] = {}
        self._sealed = False
        self._standard_unit = self._add(
            LinearUnit(standard_symbol, standard_name, 1.0, self, prefixable=prefixable)
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def standard_unit(self) -> LinearUnit:
        return self._standard_unit  # type: ignore[return-value]

    @property
    def units(self) -> tuple[Unit, ...]:
        return tuple(self._by_name.values())

    @property
    def sealed(self) -> bool:
        return self._sealed

    def is_same_quantity(self, other: QuantityLike) -> bool:
        """Two quantities are the same iff their dimensions match."""
        return self._dimension == other.dimension

    def unit(self, symbol: str) -> Unit:
        """Lookup a unit of this quantity by its symbol. Raises `ValueError` if unknown."""
        u = self._by_symbol.get(symbol)
        if u is None:
            raise ValueError(f"Unknown unit symbol for {self._name}: {symbol}")
        return u

    def __getattr__(self, name: str) -> Unit:
        # only called when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._by_name[name]
        except KeyError:
            raise AttributeError(
                f"{self._name!r} has no unit named {name!r}"
            ) from None

    def __dir__(self) -> list[str]:
        """List methods plus unit names for autocomplete."""
        return sorted(set(super().__dir__()) | set(self._by_name))

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __contains__(self, unit: object) -> bool:
        if isinstance(unit, str):
            return unit in self._by_symbol
        return any(u is unit for u in self._by_name.values())

    def __call__(self, amount: Amount, unit: Optional[Unit] = None) -> "Measure":
        from measures.core.measure import Measure

        if unit is None:
            unit = self._standard_unit
        self.validate_unit(unit, "construct measure")
        return Measure(amount, unit)

    def __repr__(self) -> str:
        return f"Quantity({self._name!r}, {self._dimension!r})"

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate_unit(self, unit: object, operation: str) -> Unit:
        """Ensure `unit` is a unit of this quantity (by dimension)."""
        if unit is None or not isinstance(unit, Unit):
            raise InvalidUnitError(unit, operation)
        other = unit.quantity
        if other is not self and other.dimension != self._dimension:
            raise QuantityMismatchError(self._name, other.name, operation)
        return unit

    # ------------------------------------------------------------------
    # Definition (catalog build time)
    # ------------------------------------------------------------------
    def add_unit(self, symbol: str, name: str, scale: float, *, prefixable: bool = True) -> LinearUnit:
        """Define a unit as ``scale`` times the standard unit."""
        return self._add(LinearUnit(symbol, name, float(scale), self, prefixable=prefixable))  # type: ignore[return-value]

    def add_prefixed_unit(self, prefix: "Prefix", base: Optional[LinearUnit] = None) -> LinearUnit:
        """Define a metric-prefixed unit from ``base`` (the standard unit by default)."""
        if base is None:
            base = self.standard_unit
        elif base.quantity is not self:
            raise ValueError(f"Base unit '{base.name}' does not belong to {self._name}")
        return self._add(LinearUnit.prefixed(prefix, base))  # type: ignore[return-value]

    def add_converted_unit(
        self,
        symbol: str,
        name: str,
        forward: Callable[[float], float],
        inverse: Callable[[float], float],
    ) -> ConvertedUnit:
        """Define a unit from a conversion pair (amount -> standard, standard -> amount)."""
        return self._add(ConvertedUnit(symbol, name, forward, inverse, self))  # type: ignore[return-value]

    def seal(self) -> "Quantity":
        self._sealed = True
        return self

    def _add(self, unit: Unit) -> Unit:
        if self._sealed:
            raise ValueError(f"Cannot add unit '{unit.name}': {self._name} is sealed.")
        if unit.name in self._by_name:
            raise ValueError(f"{self._name} already has a unit named '{unit.name}'.")
        if unit.symbol in self._by_symbol:
            raise ValueError(f"{self._name} already has a unit with symbol '{unit.symbol}'.")
        self._by_name[unit.name] = unit
        self._by_symbol[unit.symbol] = unit
        return unit

    # ------------------------------------------------------------------
    # Anonymous quantities
    # ------------------------------------------------------------------
    @staticmethod
    def compose(dimension: DimLike) -> "Quantity":
        """Return the cached anonymous quantity for a dimension with no catalog entry."""
        return _composed(Dimension(dimension))


@lru_cache(maxsize=None)
def _composed(dimension: Dimension) -> Quantity:
    label = format_dim(dimension)
    return Quantity(label, dimension, label, "standard").seal()


__all__ = ["Quantity", "QuantityLike"]
