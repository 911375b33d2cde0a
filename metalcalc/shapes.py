"""
Shape descriptors.

A caller describes a shape with a (type, subType) pair of strings. The pair is
resolved once, here, into a closed ShapeKind. Everything downstream (calculator
registry, name templates) is keyed by ShapeKind and checked for completeness
at import time.
"""

import enum
import re
from typing import Optional


class ShapeType(str, enum.Enum):
    PLATE = "plate"
    PROFILE = "profile"
    PIPE = "pipe"
    ANGLE = "angle"
    BAR = "bar"
    PRESS_BRAKE_ANGLE = "pressBrakeAngle"
    PRESS_BRAKE_U = "pressBrakeU"


class ShapeKind(enum.Enum):
    """Every (type, subType) combination the engine can weigh."""

    PLATE = "plate"
    STANDARD_PROFILE = "standard_profile"
    ROUND_PIPE = "round_pipe"
    SQUARE_PIPE = "square_pipe"
    RECTANGULAR_PIPE = "rectangular_pipe"
    EQUAL_ANGLE = "equal_angle"
    UNEQUAL_ANGLE = "unequal_angle"
    FLAT_BAR = "flat_bar"
    ROUND_BAR = "round_bar"
    SQUARE_BAR = "square_bar"
    PRESS_BRAKE_ANGLE = "press_brake_angle"
    PRESS_BRAKE_U = "press_brake_u"


# None stands for "no subtype given"
SHAPE_TABLE = {
    (ShapeType.PLATE, None): ShapeKind.PLATE,
    (ShapeType.PROFILE, None): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "standard"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "pressBrakeU"): ShapeKind.PRESS_BRAKE_U,
    # Catalog families are all standard profiles
    (ShapeType.PROFILE, "ipe"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "ipn"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "upn"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "hea"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PROFILE, "heb"): ShapeKind.STANDARD_PROFILE,
    (ShapeType.PIPE, "round"): ShapeKind.ROUND_PIPE,
    (ShapeType.PIPE, "square"): ShapeKind.SQUARE_PIPE,
    (ShapeType.PIPE, "rectangular"): ShapeKind.RECTANGULAR_PIPE,
    (ShapeType.ANGLE, "equal"): ShapeKind.EQUAL_ANGLE,
    (ShapeType.ANGLE, "unequal"): ShapeKind.UNEQUAL_ANGLE,
    (ShapeType.ANGLE, "pressBrake"): ShapeKind.PRESS_BRAKE_ANGLE,
    (ShapeType.BAR, "flat"): ShapeKind.FLAT_BAR,
    (ShapeType.BAR, "round"): ShapeKind.ROUND_BAR,
    (ShapeType.BAR, "square"): ShapeKind.SQUARE_BAR,
    (ShapeType.PRESS_BRAKE_ANGLE, None): ShapeKind.PRESS_BRAKE_ANGLE,
    (ShapeType.PRESS_BRAKE_U, None): ShapeKind.PRESS_BRAKE_U,
}


def _camel(value: str) -> str:
    """'press_brake_angle' / 'press-brake-angle' -> 'pressBrakeAngle'."""
    parts = [p for p in re.split(r"[_\-\s]+", value.strip()) if p]
    if not parts:
        return ""
    return parts[0][0].lower() + parts[0][1:] + "".join(p[0].upper() + p[1:] for p in parts[1:])


def _parse_type(shape_type) -> Optional[ShapeType]:
    if isinstance(shape_type, ShapeType):
        return shape_type
    if not shape_type:
        return None
    key = _camel(str(shape_type))
    for member in ShapeType:
        if member.value.lower() == key.lower():
            return member
    return None


def _parse_sub_type(sub_type) -> Optional[str]:
    if sub_type is None:
        return None
    text = _camel(str(sub_type))
    if not text:
        return None
    for (_, known) in SHAPE_TABLE:
        if known and known.lower() == text.lower():
            return known
    return text


def resolve_shape(shape_type, sub_type=None) -> Optional[ShapeKind]:
    """
    Resolve a (type, subType) pair to a ShapeKind.
    Returns None for any combination not in SHAPE_TABLE. Never guesses.
    """
    if isinstance(shape_type, ShapeKind):
        return shape_type
    parsed = _parse_type(shape_type)
    if parsed is None:
        return None
    return SHAPE_TABLE.get((parsed, _parse_sub_type(sub_type)))
