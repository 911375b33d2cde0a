import math

from .base import BaseCalculator


class FlatBarCalculator(BaseCalculator):
    """Flat bar: width × height section."""

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        height = self.mm(dims, "height", unit)
        length = self.mm(dims, "length", unit)
        return self.weight_from_area(width * height, length, density)


class RoundBarCalculator(BaseCalculator):
    """Round bar: π·(d/2)² section."""

    def weigh(self, dims, unit, density):
        diameter = self.mm(dims, "diameter", unit)
        length = self.mm(dims, "length", unit)
        return self.weight_from_area(math.pi * (diameter / 2.0) ** 2, length, density)


class SquareBarCalculator(BaseCalculator):
    """Square bar: side² section."""

    def weigh(self, dims, unit, density):
        side = self.mm(dims, "side_length", unit)
        length = self.mm(dims, "length", unit)
        return self.weight_from_area(side ** 2, length, density)
