"""
Hollow section calculators: round, square and rectangular pipe.

Area is outer minus inner section. Inner dimensions are outer - 2·thickness;
a wall that meets or passes the centerline has no cavity and weighs 0.
"""

import math

from .base import BaseCalculator
from ..errors import InvalidGeometryError, MissingInputError


class RoundPipeCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        outer = self.mm(dims, "outer_diameter", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)

        inner = outer - 2 * thickness
        if inner <= 0:
            raise InvalidGeometryError(
                f"wall thickness {thickness}mm leaves no bore in Ø{outer}mm pipe"
            )
        area = math.pi / 4.0 * (outer ** 2 - inner ** 2)
        return self.weight_from_area(area, length, density)


class SquarePipeCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        # Side is stored as "size"; accept side_length too
        if isinstance(dims.size, (int, float)) and dims.size > 0:
            side = self.mm(dims, "size", unit)
        elif dims.side_length is not None and dims.side_length > 0:
            side = self.mm(dims, "side_length", unit)
        else:
            raise MissingInputError("size (side) is required and must be > 0")
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)

        inner = side - 2 * thickness
        if inner <= 0:
            raise InvalidGeometryError(
                f"wall thickness {thickness}mm leaves no cavity in {side}mm square pipe"
            )
        area = side ** 2 - inner ** 2
        return self.weight_from_area(area, length, density)


class RectangularPipeCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        height = self.mm(dims, "height", unit)
        thickness = self.mm(dims, "thickness", unit)
        length = self.mm(dims, "length", unit)

        inner_width = width - 2 * thickness
        inner_height = height - 2 * thickness
        if inner_width <= 0 or inner_height <= 0:
            raise InvalidGeometryError(
                f"wall thickness {thickness}mm leaves no cavity in {width}x{height}mm pipe"
            )
        area = width * height - inner_width * inner_height
        return self.weight_from_area(area, length, density)
