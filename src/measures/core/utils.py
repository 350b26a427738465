"""
measures.core.utils
===================

Helper functions shared by the measures engine.

This module provides:
- Formatting of dimension vectors as SI base-unit strings (e.g. 'kg·m/s²'),
  used to label composed quantities that have no catalog entry.
- Coercion of numbers into the numeric type of an amount, so that
  ``Decimal`` and ``Fraction`` amounts keep their precision through unit
  conversions and arithmetic.
- Real-valued division and exponentiation that follow IEEE 754 semantics
  (``inf``/``nan``) instead of raising ``ZeroDivisionError`` or
  ``OverflowError``.
"""

from __future__ import annotations

import decimal
import math
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import List, Union

from measures.core.dimensions import Dimension

Amount = Union[int, float, Decimal, Fraction]

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


# ---------- Dimension → pretty unit string ----------
def format_dim(dim: Dimension) -> str:
    """
    Turn a dimension tuple (L,M,T,I,Θ,N,J) into 'kg·m/s²' style.
    Conventional order: M, L, T, I, Θ, N, J.
    """
    # indices: L=0 M=1 T=2 I=3 Θ=4 N=5 J=6
    labels: List[str] = ["m", "kg", "s", "A", "K", "mol", "cd"]
    order: List[int] = [1, 0, 2, 3, 4, 5, 6]  # M, L, T, I, Θ, N, J  (fixed order)

    num: List[str] = []
    den: List[str] = []
    for i in order:
        e = dim[i]
        if e > 0:
            num.append(labels[i] + _sup(e))
        elif e < 0:
            den.append(labels[i] + _sup(-e))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator


# ---------- Numeric types ----------
def is_amount(x: object) -> bool:
    """True for real numbers and ``Decimal``; bools are rejected."""
    return isinstance(x, (Real, Decimal)) and not isinstance(x, bool)


def coerce_like(value: Amount, like: Amount) -> Amount:
    """
    Express ``value`` in the numeric type of ``like``.

    A ``Decimal`` or ``Fraction`` reference keeps its type: floats are read
    through their shortest repr, so ``0.01`` becomes ``Decimal('0.01')``
    rather than its binary expansion. Non-finite floats cannot be fractions
    and stay floats. Against an ``int`` or ``float`` reference, a
    ``Decimal`` becomes a float and everything else is returned unchanged.
    """
    if isinstance(like, Decimal):
        if isinstance(value, Decimal):
            return value
        if isinstance(value, int):
            return Decimal(value)
        if isinstance(value, Fraction):
            return Decimal(value.numerator) / Decimal(value.denominator)
        return Decimal(repr(float(value)))
    if isinstance(like, Fraction):
        if isinstance(value, (int, Fraction)):
            return value
        if isinstance(value, Decimal):
            return Fraction(value) if value.is_finite() else float(value)
        f = float(value)
        return Fraction(repr(f)) if math.isfinite(f) else f
    if isinstance(value, Decimal):
        return float(value)
    return value


# ---------- IEEE-style numerics ----------
def _is_odd(n: Union[int, float]) -> bool:
    return float(n).is_integer() and int(n) % 2 == 1


def _overflow(x: Amount, n: Union[int, float]) -> float:
    return -math.inf if x < 0 and _is_odd(n) else math.inf


def _zero_to_negative(x: Amount, n: Union[int, float]) -> float:
    # odd integer powers keep the sign of a negative zero
    return math.copysign(math.inf, x) if _is_odd(n) else math.inf


def real_div(x: Amount, y: Amount) -> Amount:
    """Divide ``x`` by ``y``; a zero divisor yields ±inf, or nan for 0/0."""
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return coerce_like(math.nan, x)
    # sign follows IEEE: sign(x) * sign(y), where y may be -0.0
    return coerce_like(math.copysign(math.inf, x) * math.copysign(1.0, y), x)


def real_pow(x: Amount, n: Union[int, float]) -> Amount:
    """Raise ``x`` to ``n``; overflow and 0 to a negative power yield inf."""
    if isinstance(x, (Decimal, Fraction)) and float(n).is_integer():
        try:
            return x ** int(n)
        except ZeroDivisionError:
            return coerce_like(_zero_to_negative(x, n), x)
        except decimal.Overflow:
            return coerce_like(_overflow(x, n), x)
    try:
        return math.pow(x, n)
    except OverflowError:
        return _overflow(x, n)
    except ValueError:
        if x == 0.0 and n < 0:
            return _zero_to_negative(x, n)
        return math.nan


__all__ = ["Amount", "format_dim", "is_amount", "coerce_like", "real_div", "real_pow"]
