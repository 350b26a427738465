"""
measures.core.errors
====================

Exception hierarchy for the measures engine.

Every error derives from :class:`MeasureError` and from :class:`TypeError`,
so code written against plain ``TypeError`` keeps working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measures.core.dimensions import Dimension


class MeasureError(Exception):
    """Base class for all errors raised by the measures engine."""


class InvalidUnitError(MeasureError, TypeError):
    """A missing (``None``) or non-unit object was supplied where a unit is required."""

    def __init__(self, unit: object, context: str = "unit") -> None:
        if unit is None:
            msg = f"A unit is required for {context}, got None."
        else:
            msg = f"Expected a Unit for {context}, got {type(unit).__name__}."
        super().__init__(msg)
        self.unit = unit


class QuantityMismatchError(MeasureError, TypeError):
    """A unit or measure of a different quantity was used where the same quantity is required."""

    def __init__(self, expected: str, actual: str, operation: str) -> None:
        super().__init__(
            f"Cannot {operation}: expected quantity '{expected}', got '{actual}'."
        )
        self.expected = expected
        self.actual = actual
        self.operation = operation


class DimensionMismatchError(MeasureError, TypeError):
    """The dimension computed by an arithmetic operation differs from the declared result."""

    def __init__(self, computed: "Dimension", expected: "Dimension", quantity_name: str) -> None:
        super().__init__(
            f"Actual quantity dimension: {computed!r}, expected {expected!r} "
            f"for quantity {quantity_name}"
        )
        self.computed = computed
        self.expected = expected
        self.quantity_name = quantity_name


__all__ = [
    "MeasureError",
    "InvalidUnitError",
    "QuantityMismatchError",
    "DimensionMismatchError",
]
