"""
Rolled angle calculators. The two legs share one thickness² corner.
"""

from .base import BaseCalculator
from ..errors import InvalidGeometryError


class EqualAngleCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)

        area = 2 * width * thickness - thickness ** 2
        if area <= 0:
            raise InvalidGeometryError(f"thickness {thickness}mm too large for {width}mm legs")
        return self.weight_from_area(area, length, density)


class UnequalAngleCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        height = self.mm(dims, "height", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)

        area = (width + height) * thickness - thickness ** 2
        if area <= 0:
            raise InvalidGeometryError(
                f"thickness {thickness}mm too large for {width}x{height}mm legs"
            )
        return self.weight_from_area(area, length, density)
