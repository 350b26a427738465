"""
measures.core.measure
=====================

Defines the `Measure` value type: an amount expressed in one unit of one
quantity.

A measure never changes its unit; re-expression (`to`, ``m[unit]``)
returns a new measure. Same-quantity arithmetic keeps the unit of the left
operand, comparisons and hashing use the *standard amount* (the amount in
the quantity's standard unit), and operations mixing different quantities
are routed through `measures.core.arithmetic`, which checks dimensions.

Numbers take part in arithmetic and comparisons as dimensionless values,
so ``Length(1.0) < 2`` raises `QuantityMismatchError` while a dimensionless
measure compares freely with floats. The integer ``0`` is the exception on
the left of ``+``: it is the start value of ``sum()``, so summing a list of
lengths works.

The amount keeps the numeric type the caller chose (``int``, ``float``,
``Decimal`` or ``Fraction``). Unit scales and scalars are converted into
that type, so a ``Decimal`` measure stays exact through conversions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from measures.core.dimensions import DIM_0, Dimension
from measures.core.errors import InvalidUnitError, QuantityMismatchError
from measures.core.unit import Unit
from measures.core.utils import Amount, coerce_like, is_amount, real_div

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measures.core.quantity import Quantity

Number = Amount


def _result_quantity(dimension: Dimension) -> "Quantity":
    """Catalog quantity for `dimension`, or an anonymous composed one."""
    # Local imports avoid a cycle: the registry builds units, units build measures.
    from measures.core.quantity import Quantity
    from measures.units.registry import DEFAULT_REGISTRY

    found = DEFAULT_REGISTRY.find(dimension)
    return found if found is not None else Quantity.compose(dimension)


def _is_number(x: object) -> bool:
    return is_amount(x)


class Measure:
    """
    An amount tagged with a unit (and, through it, a quantity).

    Attributes
    ----------
    amount : int, float, Decimal or Fraction
        The amount expressed in `unit` (not pre-converted), in the numeric
        type it was given in.
    unit : Unit
        The unit the amount is expressed in.
    """
    __slots__ = ("_amount", "_unit")

    def __init__(self, amount: Number, unit: Unit):
        if unit is None or not isinstance(unit, Unit):
            raise InvalidUnitError(unit, "construct measure")
        if not _is_number(amount):
            raise TypeError(f"Measure amount must be a real number, got {type(amount).__name__}")
        self._amount = amount
        self._unit = unit

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def amount(self) -> Number:
        return self._amount

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def quantity(self) -> "Quantity":
        return self._unit.quantity

    @property
    def dimension(self) -> Dimension:
        return self._unit.quantity.dimension

    @property
    def standard_amount(self) -> Number:
        return self._unit.to_standard(self._amount)

    def amount_in(self, unit: Unit) -> Number:
        """The amount of this measure expressed in `unit`, as a plain number."""
        unit = self.quantity.validate_unit(unit, "convert")
        if unit is self._unit:
            return self._amount
        return unit.from_standard(self.standard_amount)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to(self, unit: Unit) -> Measure:
        """Return this measure re-expressed in `unit` (same quantity required)."""
        amount = self.amount_in(unit)
        if unit is self._unit:
            return self
        return Measure(amount, unit)

    def to_standard(self) -> Measure:
        return self.to(self.quantity.standard_unit)

    def __getitem__(self, unit: Unit) -> Measure:
        return self.to(unit)

    # ------------------------------------------------------------------
    # Same-quantity helpers
    # ------------------------------------------------------------------
    def _is_dimensionless(self) -> bool:
        return self.dimension == DIM_0

    def _check_same(self, other: "Measure | Number", operation: str) -> None:
        """Raise `QuantityMismatchError` unless `other` has this measure's dimension."""
        if isinstance(other, Measure):
            if other.dimension != self.dimension:
                raise QuantityMismatchError(self.quantity.name, other.quantity.name, operation)
        elif not self._is_dimensionless():
            raise QuantityMismatchError(self.quantity.name, "dimensionless number", operation)

    def _other_standard(self, other: "Measure | Number", operation: str) -> Number:
        self._check_same(other, operation)
        if isinstance(other, Measure):
            return other.standard_amount
        return other

    def _other_amount(self, other: "Measure | Number", operation: str) -> Number:
        """`other` expressed in this measure's unit and numeric type."""
        self._check_same(other, operation)
        if isinstance(other, Measure):
            if other._unit is self._unit:
                return coerce_like(other._amount, self._amount)
            return coerce_like(self._unit.from_standard(other.standard_amount), self._amount)
        return coerce_like(self._unit.from_standard(other), self._amount)

    # ------------------------------------------------------------------
    # Named operations
    # ------------------------------------------------------------------
    def add(self, other: "Measure | Number") -> Measure:
        """Sum expressed in this measure's unit."""
        return Measure(self._amount + self._other_amount(other, "add"), self._unit)

    def subtract(self, other: "Measure | Number") -> Measure:
        """Difference expressed in this measure's unit."""
        return Measure(self._amount - self._other_amount(other, "subtract"), self._unit)

    def scale(self, scalar: Number) -> Measure:
        """Multiply the amount by a dimensionless scalar, keeping the unit."""
        return Measure(self._amount * coerce_like(scalar, self._amount), self._unit)

    def compare(self, other: "Measure | Number") -> int:
        """Three-way comparison of standard amounts: -1, 0 or 1."""
        a = self.standard_amount
        b = self._other_standard(other, "compare")
        return (a > b) - (a < b)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        # exact equality of standard amounts, no tolerance
        return self.standard_amount == self._other_standard(other, "compare")  # type: ignore[arg-type]

    def __hash__(self) -> int:
        # dimensionless measures compare equal to plain numbers, so hash like them
        if self._is_dimensionless():
            return hash(self.standard_amount)
        return hash((self.dimension, self.standard_amount))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.standard_amount < self._other_standard(other, "compare")  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.standard_amount <= self._other_standard(other, "compare")  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.standard_amount > self._other_standard(other, "compare")  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.standard_amount >= self._other_standard(other, "compare")  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Measure | Number") -> Measure:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Number) -> Measure:
        # number + measure: only reached for numbers, which are dimensionless
        if not _is_number(other):
            return NotImplemented
        # sum() starts from the int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return self.add(other)

    def __sub__(self, other: "Measure | Number") -> Measure:
        if not isinstance(other, Measure) and not _is_number(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Number) -> Measure:
        if not _is_number(other):
            return NotImplemented
        return (-self).add(other)

    def __neg__(self) -> Measure:
        return Measure(-self._amount, self._unit)

    def __pos__(self) -> Measure:
        return self

    def __abs__(self) -> Measure:
        return Measure(abs(self._amount), self._unit)

    def __mul__(self, other: "Measure | Number") -> Measure:
        # measure × scalar
        if _is_number(other):
            return self.scale(other)  # type: ignore[arg-type]
        if not isinstance(other, Measure):
            return NotImplemented

        # measure × measure
        from measures.core.arithmetic import times

        return times(_result_quantity(self.dimension * other.dimension), self, other)

    def __rmul__(self, other: Number) -> Measure:
        # allows 3 * (2 m) -> 6 m
        if not _is_number(other):
            return NotImplemented
        return self.scale(other)

    def __truediv__(self, other: "Measure | Number") -> Measure:
        # measure / scalar; a zero scalar gives inf/nan, as for measure / measure
        if _is_number(other):
            return Measure(real_div(self._amount, coerce_like(other, self._amount)), self._unit)  # type: ignore[arg-type]
        if not isinstance(other, Measure):
            return NotImplemented

        from measures.core.arithmetic import divide

        return divide(_result_quantity(self.dimension / other.dimension), self, other)

    def __rtruediv__(self, other: Number) -> Measure:
        # scalar / measure -> measure of the inverse dimension
        if not _is_number(other):
            return NotImplemented
        from measures.core.arithmetic import divide

        one = _result_quantity(DIM_0)
        numerator = Measure(other, one.standard_unit)
        return divide(_result_quantity(DIM_0 / self.dimension), numerator, self)

    def __pow__(self, n: int) -> Measure:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        from measures.core.arithmetic import power

        return power(_result_quantity(self.dimension ** n), self, n)

    def __float__(self) -> float:
        if not self._is_dimensionless():
            raise QuantityMismatchError("dimensionless", self.quantity.name, "convert to float")
        return float(self.standard_amount)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Measure({self._amount!r}, {self._unit.symbol!r})"

    def __str__(self) -> str:
        parts = [str(self._amount), self._unit.symbol, f"({self.quantity.name})"]
        return " ".join(p for p in parts if p)

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Measure objects.

        Supported specifiers
        --------------------
        "" (empty)
            Same as ``str(measure)``.
        "std"
            ``str`` of the measure expressed in its standard unit.
        any float format spec (e.g. ".2f")
            Applied to the amount, followed by the unit symbol.

        Examples
        --------
        >>> m = Length(150.0, Length.centimeter)
        >>> f"{m:.1f}"
        '150.0 cm'
        >>> f"{m:std}"
        '1.5 m (Length)'
        """
        if not spec:
            return str(self)
        if spec == "std":
            return str(self.to_standard())
        # width and alignment apply to the amount; a unitless measure gets no trailing space
        return " ".join(p for p in (format(self._amount, spec), self._unit.symbol) if p)


__all__ = ["Measure"]
