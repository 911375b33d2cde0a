"""
Name generator tests. Names are stored as opaque labels, so every template is
pinned character for character.
"""

import pytest

from metalcalc.naming import generate_name, format_value, LABELS, NAME_TEMPLATES
from metalcalc.schemas import Dimensions
from metalcalc.shapes import ShapeKind


@pytest.mark.parametrize("shape_type, dims, expected", [
    ("plate", {"width": 1000, "length": 2000, "thickness": 3}, "Plate 1000x2000x3mm"),
    ("profile", {"size": "HEA 200", "length": 6000}, "Profile HEA 200 L=6000mm"),
    ("pipe", {"type": "round", "outerDiameter": 33.7, "thickness": 2.6, "length": 6000},
     "Round Pipe Ø33.7x2.6 L=6000mm"),
    ("pipe", {"type": "square", "size": 40, "thickness": 3, "length": 6000},
     "Square Pipe 40x40x3 L=6000mm"),
    ("pipe", {"type": "rectangular", "width": 60, "height": 40, "thickness": 3, "length": 6000},
     "Rectangular Pipe 60x40x3 L=6000mm"),
    ("angle", {"type": "equal", "width": 50, "thickness": 5, "length": 6000},
     "Equal Angle 50x50x5 L=6000mm"),
    ("angle", {"type": "unequal", "width": 60, "height": 40, "thickness": 5, "length": 6000},
     "Unequal Angle 60x40x5 L=6000mm"),
    ("bar", {"type": "flat", "width": 40, "height": 10, "length": 6000}, "Flat Bar 40x10 L=6000mm"),
    ("bar", {"type": "round", "diameter": 12, "length": 6000}, "Round Bar Ø12 L=6000mm"),
    ("bar", {"type": "square", "sideLength": 20, "length": 6000}, "Square Bar 20x20 L=6000mm"),
    ("pressBrakeAngle", {"width": 50, "height": 30, "thickness": 2, "angle": 120, "length": 2000},
     "Press Brake Angle 50x30x2 120° L=2000mm"),
    ("pressBrakeU", {"width": 100, "flangeWidth": 20, "thickness": 2, "length": 2000},
     "Press Brake U-Shape 100x20x2 L=2000mm"),
])
def test_templates(shape_type, dims, expected):
    assert generate_name(shape_type, dims, "mm") == expected


def test_every_shape_kind_has_a_template_and_labels():
    assert set(NAME_TEMPLATES) == set(ShapeKind)
    for key, _template in NAME_TEMPLATES.values():
        assert key in LABELS["en"]
        assert key in LABELS["bs"]


def test_inch_suffix_and_fractions():
    name = generate_name("bar", {"type": "flat", "width": 1.5, "height": 0.25, "length": 120}, "in")
    assert name == "Flat Bar 1.5x0.25 L=120in"


def test_localized_label():
    dims = {"type": "round", "outerDiameter": 33.7, "thickness": 2.6, "length": 6000}
    assert generate_name("pipe", dims, "mm", "bs") == "Okrugla cijev Ø33.7x2.6 L=6000mm"
    assert generate_name("plate", {"width": 1, "length": 2, "thickness": 3}, "mm", "bs") == "Ploča 1x2x3mm"


def test_unknown_language_falls_back_to_english():
    assert generate_name("plate", {"width": 1, "length": 2, "thickness": 3}, "mm", "xx") == "Plate 1x2x3mm"


def test_sub_type_argument_and_model_input():
    dims = Dimensions(outer_diameter=33.7, thickness=2.6, length=6000)
    assert generate_name("pipe", dims, "mm", sub_type="round") == "Round Pipe Ø33.7x2.6 L=6000mm"
    assert generate_name("angle", {"width": 50, "height": 50, "thickness": 2, "length": 1000},
                         "mm", sub_type="pressBrake") == "Press Brake Angle 50x50x2 90° L=1000mm"


def test_missing_values_render_as_zero():
    assert generate_name("plate", {"width": 1000}, "mm") == "Plate 1000x0x0mm"


def test_unknown_shapes_give_empty_string():
    assert generate_name("pipe", {"type": "hexagonal", "length": 1}, "mm") == ""
    assert generate_name("sphere", {}, "mm") == ""
    assert generate_name("", {"width": 1}, "mm") == ""
    assert generate_name("plate", None, "mm") == ""


def test_idempotent():
    dims = {"type": "unequal", "width": 60.5, "height": 40, "thickness": 5, "length": 6000}
    assert generate_name("angle", dims, "mm", "bs") == generate_name("angle", dict(dims), "mm", "bs")


def test_format_value():
    assert format_value(6000.0) == "6000"
    assert format_value(33.7) == "33.7"
    assert format_value(0.1 + 0.2) == "0.30000000000000004"
    assert format_value(None) == "0"
    assert format_value("HEA 200") == "HEA 200"


def test_profile_family_as_sub_type():
    dims = {"type": "hea", "size": "HEA 200", "length": 6000}
    assert generate_name("profile", dims, "mm") == "Profile HEA 200 L=6000mm"
