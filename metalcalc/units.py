"""
Unit handling.

Every linear dimension is normalized to millimeters before any geometry.
Angles are dimensionless and never pass through here.
"""

import enum

MM_PER_INCH = 25.4

# Multiply kilograms by these to display in another weight unit
WEIGHT_FACTORS = {
    "g": 1000.0,
    "kg": 1.0,
    "lb": 2.20462,
    "oz": 35.274,
    "t": 0.001,
}


class Unit(str, enum.Enum):
    MILLIMETER = "mm"
    INCH = "in"


def parse_unit(value, default: Unit = Unit.MILLIMETER) -> Unit:
    """Parse 'mm' / 'in' (or a Unit). Anything unrecognized falls back to default."""
    if isinstance(value, Unit):
        return value
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in ("in", "inch", "inches", '"'):
        return Unit.INCH
    if text in ("mm", "millimeter", "millimeters", "millimetre", "millimetres"):
        return Unit.MILLIMETER
    return default


def normalize(value: float, unit) -> float:
    """Convert a linear dimension to millimeters."""
    if parse_unit(unit) is Unit.INCH:
        return value * MM_PER_INCH
    return value


def convert_weight(weight_kg: float, unit: str) -> float:
    """Convert a weight in kg to g, kg, lb, oz or t."""
    if unit not in WEIGHT_FACTORS:
        raise ValueError(
            f"Unknown weight unit: {unit}. "
            f"Available: {list(WEIGHT_FACTORS.keys())}"
        )
    return weight_kg * WEIGHT_FACTORS[unit]
