"""
Measures: strongly-typed physical quantities and units of measure for Python.

Measures represents an amount tagged with a physical quantity (length, mass,
acceleration, absorbed dose, ...) and a concrete unit, converts between units
of the same quantity, and rejects arithmetic that mixes incompatible
dimensions. The catalog of quantities lives in `measures.units` and is
loaded lazily on first access.
"""

from importlib import metadata as _metadata

from measures.core.arithmetic import divide, power, product, times
from measures.core.dimensions import (
    AMOUNT,
    CURRENT,
    DIM_0,
    LENGTH,
    LUMINOUS,
    MASS,
    TEMPERATURE,
    TIME,
    Dimension,
)
from measures.core.errors import (
    DimensionMismatchError,
    InvalidUnitError,
    MeasureError,
    QuantityMismatchError,
)
from measures.core.measure import Measure
from measures.core.quantity import Quantity, QuantityLike
from measures.core.unit import ConvertedUnit, LinearUnit, Unit
from measures.units.prefixes import Prefix


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject for local dev.
try:
    __version__ = _metadata.version("measures")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__", "__author__", "__license__",
    "Dimension", "DIM_0", "LENGTH", "MASS", "TIME", "CURRENT", "TEMPERATURE", "AMOUNT", "LUMINOUS",
    "Unit", "LinearUnit", "ConvertedUnit", "Prefix",
    "Quantity", "QuantityLike", "Measure",
    "times", "divide", "power", "product",
    "MeasureError", "InvalidUnitError", "QuantityMismatchError", "DimensionMismatchError",
]
