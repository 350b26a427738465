from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from math import isfinite
from typing import TYPE_CHECKING, Callable, Optional, Protocol, runtime_checkable

from measures.core.utils import Amount, coerce_like, is_amount

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measures.core.measure import Measure
    from measures.core.quantity import Quantity
    from measures.units.prefixes import Prefix


@runtime_checkable
class Unit(Protocol):
    """A unit of one quantity, convertible to and from that quantity's standard unit."""

    symbol: str
    name: str
    quantity: "Quantity"

    # Amount in this unit -> amount in the standard unit
    def to_standard(self, amount: Amount) -> Amount: ...

    # Amount in the standard unit -> amount in this unit
    def from_standard(self, standard_amount: Amount) -> Amount: ...


def _decimal_product(a: float, b: float) -> float:
    """Product of two scale factors, rounded once (1e-3 * 1e-3 gives exactly 1e-06)."""
    return float(Decimal(repr(a)) * Decimal(repr(b)))


class _UnitOps:
    """Behaviour shared by the concrete unit classes."""

    __slots__ = ()

    @property
    def is_standard(self) -> bool:
        return self.quantity.standard_unit is self  # type: ignore[attr-defined]

    def __rmul__(self, value: Amount) -> "Measure":
        from measures.core.measure import Measure

        if not is_amount(value):
            return NotImplemented
        return Measure(value, self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.symbol  # type: ignore[attr-defined]


@dataclass(frozen=True, slots=True)
class LinearUnit(_UnitOps):
    """A unit whose conversion to the standard unit is a pure scale factor."""

    symbol: str
    name: str
    scale_to_standard: float
    quantity: "Quantity" = field(repr=False)
    prefix: Optional["Prefix"] = field(default=None, repr=False)
    prefixable: bool = field(default=True, repr=False)

    def __post_init__(self) -> None:
        if not (self.scale_to_standard > 0 and isfinite(self.scale_to_standard)):
            raise ValueError("scale_to_standard must be a positive, finite number")
        if not self.name.isidentifier():
            raise ValueError(f"unit name must be a valid identifier, got {self.name!r}")

    @classmethod
    def prefixed(cls, prefix: "Prefix", base: "LinearUnit") -> LinearUnit:
        """Derive a metric-prefixed unit, e.g. (MILLI, meter) -> millimeter 'mm'."""
        if base.prefix is not None:
            raise ValueError(
                f"Cannot apply prefix '{prefix.name}' to '{base.name}': "
                "stacked prefixes are not allowed."
            )
        if not base.prefixable:
            raise ValueError(f"Unit '{base.name}' does not accept SI prefixes.")
        return cls(
            prefix.symbol + base.symbol,
            prefix.name + base.name,
            _decimal_product(prefix.factor, base.scale_to_standard),
            base.quantity,
            prefix=prefix,
        )

    def to_standard(self, amount: Amount) -> Amount:
        # the scale is taken in the numeric type of the amount
        return amount * coerce_like(self.scale_to_standard, amount)

    def from_standard(self, standard_amount: Amount) -> Amount:
        return standard_amount / coerce_like(self.scale_to_standard, standard_amount)


@dataclass(frozen=True, slots=True)
class ConvertedUnit(_UnitOps):
    """
    A unit converted through a caller-supplied pair of functions.

    ``forward`` maps an amount in this unit to the standard unit and
    ``inverse`` maps it back. The two must be mutual inverses; this is
    not verified.
    """

    symbol: str
    name: str
    forward: Callable[[Amount], Amount] = field(repr=False)
    inverse: Callable[[Amount], Amount] = field(repr=False)
    quantity: "Quantity" = field(repr=False)

    def __post_init__(self) -> None:
        if not (callable(self.forward) and callable(self.inverse)):
            raise TypeError("forward and inverse conversions must be callable")
        if not self.name.isidentifier():
            raise ValueError(f"unit name must be a valid identifier, got {self.name!r}")

    def to_standard(self, amount: Amount) -> Amount:
        return self.forward(amount)

    def from_standard(self, standard_amount: Amount) -> Amount:
        return self.inverse(standard_amount)


__all__ = ["Unit", "LinearUnit", "ConvertedUnit"]
