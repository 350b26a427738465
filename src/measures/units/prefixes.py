"""
measures.units.prefixes
=======================

SI metric prefixes used to derive scaled units from a base unit.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    """A decimal SI prefix, e.g. ``Prefix("milli", "m", -3)``."""

    name: str
    symbol: str
    exponent: int

    @property
    def factor(self) -> float:
        return 10.0 ** self.exponent


YOCTO = Prefix("yocto", "y", -24)
ZEPTO = Prefix("zepto", "z", -21)
ATTO  = Prefix("atto",  "a", -18)
FEMTO = Prefix("femto", "f", -15)
PICO  = Prefix("pico",  "p", -12)
NANO  = Prefix("nano",  "n", -9)
MICRO = Prefix("micro", "µ", -6)
MILLI = Prefix("milli", "m", -3)
CENTI = Prefix("centi", "c", -2)
DECI  = Prefix("deci",  "d", -1)
DEKA  = Prefix("deka",  "da", 1)
HECTO = Prefix("hecto", "h", 2)
KILO  = Prefix("kilo",  "k", 3)
MEGA  = Prefix("mega",  "M", 6)
GIGA  = Prefix("giga",  "G", 9)
TERA  = Prefix("tera",  "T", 12)
PETA  = Prefix("peta",  "P", 15)
EXA   = Prefix("exa",   "E", 18)
ZETTA = Prefix("zetta", "Z", 21)
YOTTA = Prefix("yotta", "Y", 24)

PREFIXES: tuple[Prefix, ...] = (
    YOCTO, ZEPTO, ATTO, FEMTO, PICO, NANO, MICRO, MILLI, CENTI, DECI,
    DEKA, HECTO, KILO, MEGA, GIGA, TERA, PETA, EXA, ZETTA, YOTTA,
)

__all__ = ["Prefix", "PREFIXES"] + [p.name.upper() for p in PREFIXES]
