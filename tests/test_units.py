"""
Unit normalization and weight conversion.
"""

import pytest

from metalcalc.units import Unit, normalize, parse_unit, convert_weight, MM_PER_INCH


def test_inches_become_millimeters():
    assert normalize(1, "in") == pytest.approx(25.4)
    assert normalize(10, Unit.INCH) == pytest.approx(254.0)


def test_millimeters_pass_through():
    assert normalize(33.7, "mm") == 33.7
    assert normalize(0, Unit.MILLIMETER) == 0


def test_parse_unit_spellings():
    assert parse_unit("IN") is Unit.INCH
    assert parse_unit("inches") is Unit.INCH
    assert parse_unit("mm") is Unit.MILLIMETER
    assert parse_unit(None) is Unit.MILLIMETER
    assert parse_unit("furlong") is Unit.MILLIMETER  # unrecognized -> default


def test_unit_is_a_string_enum():
    """Unit values are the suffixes used in names and on the wire."""
    assert Unit.INCH.value == "in"
    assert Unit("mm") is Unit.MILLIMETER
    assert MM_PER_INCH == 25.4


def test_convert_weight():
    assert convert_weight(1.0, "kg") == 1.0
    assert convert_weight(2.5, "g") == pytest.approx(2500.0)
    assert convert_weight(10.0, "lb") == pytest.approx(22.0462)
    assert convert_weight(1500.0, "t") == pytest.approx(1.5)


def test_convert_weight_unknown_unit_raises():
    with pytest.raises(ValueError, match="Unknown weight unit"):
        convert_weight(1.0, "stone")
