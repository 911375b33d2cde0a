"""
Press-brake (bent sheet) calculators.

Weight comes from the developed (flat pattern) width of the sheet before it
was bent, times thickness, times length.

Single bend, legs measured to the outside:
    developed = width + height - thickness
              + angle·r - 2·r·tan(angle/2)        (only when a radius is given)

U channel, two 90° bends:
    web = width - 2·flange
    developed = 2·flange + web + 2·(π·r - 2·r)    (r defaults to thickness)
"""

import math

from .base import BaseCalculator
from ..errors import InvalidGeometryError

DEFAULT_BEND_ANGLE = 90.0


def bend_allowance(angle_deg: float, radius_mm: float) -> float:
    """Flat-pattern correction for one bend of angle_deg at radius_mm."""
    theta = math.radians(angle_deg)
    return theta * radius_mm - 2 * radius_mm * math.tan(theta / 2)


class PressBrakeAngleCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        height = self.mm(dims, "height", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)
        radius = self.optional_mm(dims, "radius", unit)

        angle = dims.angle or DEFAULT_BEND_ANGLE
        if angle < 0 or angle >= 180:
            raise InvalidGeometryError(f"bend angle must be between 0 and 180 degrees, got {angle}")

        developed = width + height - thickness
        if radius > 0:
            developed += bend_allowance(angle, radius)
        if developed <= 0:
            raise InvalidGeometryError(f"developed width {developed:.3f}mm is not positive")
        return self.weight_from_area(developed * thickness, length, density)


class PressBrakeUCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        flange = self.mm(dims, "flange_width", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)
        radius = self.optional_mm(dims, "radius", unit) or thickness

        web = width - 2 * flange
        developed = 2 * flange + web + 2 * (math.pi * radius - 2 * radius)
        if developed <= 0:
            raise InvalidGeometryError(f"developed width {developed:.3f}mm is not positive")
        return self.weight_from_area(developed * thickness, length, density)
