"""
Calculation names.

Names are stored as opaque labels by callers, so each template's field order,
separators and unit suffix are fixed. Same inputs always give the same string.
"""

import math

from .schemas import Dimensions, as_dimensions
from .shapes import ShapeKind, resolve_shape
from .units import parse_unit

LABELS = {
    "en": {
        "plate": "Plate",
        "profile": "Profile",
        "roundPipe": "Round Pipe",
        "squarePipe": "Square Pipe",
        "rectangularPipe": "Rectangular Pipe",
        "equalAngle": "Equal Angle",
        "unequalAngle": "Unequal Angle",
        "flatBar": "Flat Bar",
        "squareBar": "Square Bar",
        "roundBar": "Round Bar",
        "pressBrakeAngle": "Press Brake Angle",
        "pressBrakeU": "Press Brake U-Shape",
    },
    "bs": {
        "plate": "Ploča",
        "profile": "Profil",
        "roundPipe": "Okrugla cijev",
        "squarePipe": "Kvadratna cijev",
        "rectangularPipe": "Pravougaona cijev",
        "equalAngle": "Jednaki ugaonik",
        "unequalAngle": "Nejednaki ugaonik",
        "flatBar": "Pljosnata šipka",
        "squareBar": "Kvadratna šipka",
        "roundBar": "Okrugla šipka",
        "pressBrakeAngle": "Savijeni Ugaonik",
        "pressBrakeU": "Savijeni U-Profil",
    },
}

DEFAULT_LANGUAGE = "en"

# ShapeKind -> (label key, template). {u} is the unit suffix.
NAME_TEMPLATES = {
    ShapeKind.PLATE: ("plate", "{width}x{length}x{thickness}{u}"),
    ShapeKind.STANDARD_PROFILE: ("profile", "{size} L={length}{u}"),
    ShapeKind.ROUND_PIPE: ("roundPipe", "Ø{outer_diameter}x{thickness} L={length}{u}"),
    ShapeKind.SQUARE_PIPE: ("squarePipe", "{size}x{size}x{thickness} L={length}{u}"),
    ShapeKind.RECTANGULAR_PIPE: ("rectangularPipe", "{width}x{height}x{thickness} L={length}{u}"),
    ShapeKind.EQUAL_ANGLE: ("equalAngle", "{width}x{width}x{thickness} L={length}{u}"),
    ShapeKind.UNEQUAL_ANGLE: ("unequalAngle", "{width}x{height}x{thickness} L={length}{u}"),
    ShapeKind.FLAT_BAR: ("flatBar", "{width}x{height} L={length}{u}"),
    ShapeKind.ROUND_BAR: ("roundBar", "Ø{diameter} L={length}{u}"),
    ShapeKind.SQUARE_BAR: ("squareBar", "{side_length}x{side_length} L={length}{u}"),
    ShapeKind.PRESS_BRAKE_ANGLE: ("pressBrakeAngle", "{width}x{height}x{thickness} {angle}° L={length}{u}"),
    ShapeKind.PRESS_BRAKE_U: ("pressBrakeU", "{width}x{flange_width}x{thickness} L={length}{u}"),
}

_missing = set(ShapeKind) - set(NAME_TEMPLATES)
if _missing:
    raise RuntimeError(f"No name template for: {sorted(k.name for k in _missing)}")


def format_value(value) -> str:
    """6000.0 -> '6000', 33.7 -> '33.7', None -> '0'. Strings pass through."""
    if value is None:
        return "0"
    if isinstance(value, str):
        return value
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def label(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    labels = LABELS.get(language) or LABELS[DEFAULT_LANGUAGE]
    return labels.get(key) or LABELS[DEFAULT_LANGUAGE][key]


def generate_name(shape_type, dimensions, unit="mm", language: str = DEFAULT_LANGUAGE,
                  sub_type=None) -> str:
    """
    Human-readable label, e.g. 'Round Pipe Ø33.7x2.6 L=6000mm'.

    sub_type may also be passed inside the dimensions mapping as "type" or
    "subType". Returns '' for a shape the engine does not know.
    """
    if not shape_type or dimensions is None:
        return ""
    if sub_type is None and not isinstance(dimensions, Dimensions):
        sub_type = dimensions.get("subType", dimensions.get("sub_type", dimensions.get("type")))
    shape = resolve_shape(shape_type, sub_type)
    if shape is None:
        return ""

    dims = as_dimensions(dimensions)

    values = {name: format_value(getattr(dims, name)) for name in Dimensions.model_fields}
    if shape is ShapeKind.SQUARE_PIPE and dims.size is None:
        values["size"] = format_value(dims.side_length)
    if not dims.angle:
        values["angle"] = format_value(90)

    key, template = NAME_TEMPLATES[shape]
    values["u"] = parse_unit(unit).value
    return f"{label(key, language)} {template.format(**values)}"
