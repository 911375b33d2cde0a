"""
metalcalc: weight and price estimating for metal stock.

Plate, standard profiles, pipe, angle, bar and press-brake shapes, in
millimeters or inches, for any material density.
"""

from .engine import WeightEngine, calculate, compute_weight
from .naming import generate_name
from .pricing import compute_price, price_by_model
from .units import Unit, convert_weight, normalize

__all__ = [
    "WeightEngine",
    "calculate",
    "compute_price",
    "compute_weight",
    "convert_weight",
    "generate_name",
    "normalize",
    "price_by_model",
    "Unit",
]
