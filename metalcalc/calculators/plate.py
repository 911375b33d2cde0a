"""
Plate / sheet calculator.

Plate has no "length" axis in the generic sense: width × length is the face
and thickness is the depth, so volume = (w/10)·(l/10)·(t/10) cm³ directly.
"""

from .base import BaseCalculator
from ..weights import weight_from_volume


class PlateCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        width = self.mm(dims, "width", unit)
        length = self.mm(dims, "length", unit)
        thickness = self.mm(dims, "thickness", unit)
        volume_cm3 = (width / 10.0) * (length / 10.0) * (thickness / 10.0)
        return weight_from_volume(volume_cm3, density)
