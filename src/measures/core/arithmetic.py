"""
measures.core.arithmetic
========================

Arithmetic operations that combine measures of *different* quantities.

Each operation computes the dimension of its result from the operand
dimensions, checks it against the dimension of the caller-declared result
quantity, and returns a measure in that quantity's standard unit. The
check is the single point where dimensional correctness is enforced; the
``*``, ``/`` and ``**`` operators on `Measure` delegate here.

Degenerate numeric results are not errors: a zero denominator yields
``inf`` (or ``nan`` for 0/0) and overflow in `power`/`product` yields
``inf``, following IEEE 754 float semantics.

The result amount takes the numeric type of the first operand; a
``Decimal`` left operand gives a ``Decimal`` result.

Examples
--------
>>> from measures.units import Length, Time, Velocity
>>> divide(Velocity, Length(10.0), Time(2.0))
Measure(5.0, 'm s⁻¹')
"""

from __future__ import annotations

from functools import reduce
from typing import Tuple

from measures.core.dimensions import DIM_0, Dimension
from measures.core.errors import DimensionMismatchError
from measures.core.measure import Measure
from measures.core.quantity import QuantityLike
from measures.core.utils import coerce_like, real_div, real_pow

Factor = Tuple[Measure, int]

MAX_PRODUCT_FACTORS = 4


def times(result: QuantityLike, first: Measure, second: Measure) -> Measure:
    """Multiply two measures, returning a measure of quantity `result`."""
    _require_measures(first, second)
    _assert_matching_dimension(result, first.dimension * second.dimension)
    a = first.standard_amount
    return Measure(a * coerce_like(second.standard_amount, a), result.standard_unit)


def divide(result: QuantityLike, numerator: Measure, denominator: Measure) -> Measure:
    """
    Divide two measures, returning a measure of quantity `result`.

    A zero standard amount in the denominator gives ``±inf`` (``nan`` for
    0/0) rather than raising.
    """
    _require_measures(numerator, denominator)
    _assert_matching_dimension(result, numerator.dimension / denominator.dimension)
    a = numerator.standard_amount
    return Measure(
        real_div(a, coerce_like(denominator.standard_amount, a)),
        result.standard_unit,
    )


def power(result: QuantityLike, base: Measure, exponent: int) -> Measure:
    """Raise a measure to an integer power, returning a measure of quantity `result`."""
    _require_measures(base)
    _require_exponent(exponent)
    _assert_matching_dimension(result, base.dimension ** exponent)
    return Measure(real_pow(base.standard_amount, exponent), result.standard_unit)


def product(result: QuantityLike, *factors: Factor) -> Measure:
    """
    Multiply up to four measures, each raised to its own integer exponent.

    Usage:
    >>> product(Force, (Mass(2.0), 1), (Length(3.0), 1), (Time(1.0), -2))
    Measure(6.0, 'N')
    """
    if not 1 <= len(factors) <= MAX_PRODUCT_FACTORS:
        raise ValueError(
            f"product takes 1 to {MAX_PRODUCT_FACTORS} (measure, exponent) factors, "
            f"got {len(factors)}"
        )
    for factor in factors:
        if not (isinstance(factor, tuple) and len(factor) == 2):
            raise TypeError(f"Each factor must be a (measure, exponent) pair, got {factor!r}")
        _require_measures(factor[0])
        _require_exponent(factor[1])

    computed = reduce(
        lambda acc, f: acc * (f[0].dimension ** f[1]), factors, DIM_0
    )
    _assert_matching_dimension(result, computed)

    # the first factor sets the numeric type of the result
    amount = None
    for measure, exponent in factors:
        term = real_pow(measure.standard_amount, exponent)
        amount = term if amount is None else amount * coerce_like(term, amount)
    return Measure(amount, result.standard_unit)


# ---------------------------------------------------------------------------
# Support
# ---------------------------------------------------------------------------

def _assert_matching_dimension(result: QuantityLike, computed: Dimension) -> None:
    if not isinstance(result, QuantityLike):
        raise TypeError(f"Result must be a quantity, got {type(result).__name__}")
    if result.dimension == computed:
        return
    raise DimensionMismatchError(computed, result.dimension, result.name)


def _require_measures(*operands: object) -> None:
    for operand in operands:
        if not isinstance(operand, Measure):
            raise TypeError(f"Expected a Measure operand, got {type(operand).__name__}")


def _require_exponent(exponent: object) -> None:
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")


__all__ = ["times", "divide", "power", "product"]
