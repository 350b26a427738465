"""
measures.units.catalog
======================

Declarative table of the quantities shipped with measures.

Each row names a quantity, its dimension over (L, M, T, I, Θ, N, J), its
standard unit, and its derived units: explicit scale factors relative to
the standard unit, and SI prefixes applied to a base unit (the standard
unit unless another one is named). `build_quantities` turns the table into
`Quantity` objects; `measures.units.registry` registers them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

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
    dim_div,
    dim_mul,
    dim_pow,
)
from measures.core.quantity import Quantity
from measures.core.utils import coerce_like
from measures.units.prefixes import (
    CENTI,
    DECI,
    DEKA,
    GIGA,
    HECTO,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    NANO,
    Prefix,
)

ScaledUnit = Tuple[str, str, float]                          # (symbol, name, scale)
PrefixedUnits = Tuple[Optional[str], Tuple[Prefix, ...]]     # (base name or None, prefixes)


@dataclass(frozen=True)
class QuantitySpec:
    """One row of the catalog."""

    name: str
    dimension: Dimension
    symbol: str
    unit_name: str
    units: Tuple[ScaledUnit, ...] = ()
    prefixed: Tuple[PrefixedUnits, ...] = ()
    prefixable: bool = True


# --- Helpful composite dimensions (readable + reuse) ---
AREA         = dim_pow(LENGTH, 2)
VOLUME       = dim_pow(LENGTH, 3)
VELOCITY     = dim_div(LENGTH, TIME)
ACCELERATION = dim_div(LENGTH, dim_pow(TIME, 2))
FORCE        = dim_mul(MASS, ACCELERATION)
PRESSURE     = dim_div(FORCE, AREA)
ENERGY       = dim_mul(FORCE, LENGTH)
POWER        = dim_div(ENERGY, TIME)
FREQUENCY    = dim_pow(TIME, -1)
CHARGE       = dim_mul(CURRENT, TIME)
VOLTAGE      = dim_div(POWER, CURRENT)
RESISTANCE   = dim_div(VOLTAGE, CURRENT)
DENSITY      = dim_div(MASS, VOLUME)
DOSE         = dim_div(ENERGY, MASS)
DOSE_RATE    = dim_div(DOSE, TIME)
LUMINANCE    = dim_div(LUMINOUS, AREA)


# The first quantity registered for a dimension is the one `*`, `/` and
# `**` on measures resolve to.
QUANTITY_TABLE: Tuple[QuantitySpec, ...] = (
    QuantitySpec(
        "Dimensionless", DIM_0, "", "one",
        units=(("%", "percent", 1e-2),),
        prefixable=False,
    ),
    # --- Base quantities ---
    QuantitySpec(
        "Length", LENGTH, "m", "meter",
        prefixed=((None, (NANO, MICRO, MILLI, CENTI, DECI, KILO)),),
    ),
    QuantitySpec(
        "Mass", MASS, "kg", "kilogram",
        units=(("g", "gram", 1e-3), ("t", "tonne", 1e3)),
        prefixed=(("gram", (MICRO, MILLI, HECTO)),),
        prefixable=False,
    ),
    QuantitySpec(
        "Time", TIME, "s", "second",
        units=(("min", "minute", 60.0), ("h", "hour", 3600.0), ("d", "day", 86400.0)),
        prefixed=((None, (NANO, MICRO, MILLI)),),
    ),
    QuantitySpec(
        "ElectricCurrent", CURRENT, "A", "ampere",
        prefixed=((None, (MICRO, MILLI, KILO)),),
    ),
    QuantitySpec("ThermodynamicTemperature", TEMPERATURE, "K", "kelvin"),
    QuantitySpec(
        "AmountOfSubstance", AMOUNT, "mol", "mole",
        prefixed=((None, (NANO, MICRO, MILLI, KILO)),),
    ),
    QuantitySpec("LuminousIntensity", LUMINOUS, "cd", "candela"),
    # --- Derived quantities ---
    QuantitySpec(
        "Area", AREA, "m²", "square_meter",
        units=(
            ("cm²", "square_centimeter", 1e-4),
            ("km²", "square_kilometer", 1e6),
            ("ha", "hectare", 1e4),
        ),
        prefixable=False,
    ),
    QuantitySpec(
        "Volume", VOLUME, "m³", "cubic_meter",
        units=(("L", "liter", 1e-3), ("cm³", "cubic_centimeter", 1e-6)),
        prefixed=(("liter", (MILLI, CENTI, DECI)),),
        prefixable=False,
    ),
    QuantitySpec(
        "Velocity", VELOCITY, "m s⁻¹", "meter_per_second",
        units=(("km h⁻¹", "kilometer_per_hour", 1.0 / 3.6),),
    ),
    QuantitySpec(
        "Acceleration", ACCELERATION, "m s⁻²", "meter_per_second_squared",
        prefixed=((None, (MILLI, CENTI, DECI, DEKA, HECTO, KILO)),),
    ),
    QuantitySpec(
        "Force", FORCE, "N", "newton",
        prefixed=((None, (MILLI, KILO)),),
    ),
    QuantitySpec(
        "Pressure", PRESSURE, "Pa", "pascal",
        units=(("bar", "bar", 1e5),),
        prefixed=((None, (HECTO, KILO, MEGA)),),
    ),
    QuantitySpec(
        "Energy", ENERGY, "J", "joule",
        units=(("Wh", "watt_hour", 3600.0), ("kWh", "kilowatt_hour", 3.6e6)),
        prefixed=((None, (KILO, MEGA)),),
    ),
    QuantitySpec(
        "Power", POWER, "W", "watt",
        prefixed=((None, (MILLI, KILO, MEGA)),),
    ),
    QuantitySpec(
        "Frequency", FREQUENCY, "Hz", "hertz",
        prefixed=((None, (KILO, MEGA, GIGA)),),
    ),
    QuantitySpec("ElectricCharge", CHARGE, "C", "coulomb"),
    QuantitySpec(
        "ElectricPotential", VOLTAGE, "V", "volt",
        prefixed=((None, (MILLI, KILO)),),
    ),
    QuantitySpec(
        "ElectricResistance", RESISTANCE, "Ω", "ohm",
        prefixed=((None, (KILO, MEGA)),),
    ),
    QuantitySpec(
        "Density", DENSITY, "kg m⁻³", "kilogram_per_cubic_meter",
        units=(("g cm⁻³", "gram_per_cubic_centimeter", 1e3),),
        prefixable=False,
    ),
    QuantitySpec(
        "AbsorbedDose", DOSE, "Gy", "gray",
        prefixed=((None, (MILLI, CENTI)),),
    ),
    QuantitySpec(
        "AbsorbedDoseRate", DOSE_RATE, "Gy s⁻¹", "gray_per_second",
        units=(("Gy min⁻¹", "gray_per_minute", 1.0 / 60.0),),
        prefixable=False,
    ),
    QuantitySpec("Luminance", LUMINANCE, "cd/m²", "candela_per_square_meter"),
)


def build_quantity(spec: QuantitySpec) -> Quantity:
    """Create one unsealed `Quantity` from its catalog row."""
    q = Quantity(spec.name, spec.dimension, spec.symbol, spec.unit_name, prefixable=spec.prefixable)
    for symbol, name, scale in spec.units:
        q.add_unit(symbol, name, scale)
    for base_name, prefixes in spec.prefixed:
        base = q.standard_unit if base_name is None else getattr(q, base_name)
        for prefix in prefixes:
            q.add_prefixed_unit(prefix, base)
    return q


def build_quantities(table: Tuple[QuantitySpec, ...] = QUANTITY_TABLE) -> Dict[str, Quantity]:
    quantities: Dict[str, Quantity] = {}
    for spec in table:
        quantities[spec.name] = build_quantity(spec)

    # Celsius is an offset (affine) unit, so it is defined by a conversion pair
    temperature = quantities.get("ThermodynamicTemperature")
    if temperature is not None:
        temperature.add_converted_unit(
            "°C", "degree_celsius",
            lambda c: c + coerce_like(273.15, c),
            lambda k: k - coerce_like(273.15, k),
        )
    return quantities


__all__ = ["QuantitySpec", "QUANTITY_TABLE", "build_quantity", "build_quantities"]
