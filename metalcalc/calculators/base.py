"""
Abstract base class for all shape calculators.

Input: Dimensions (or a plain dict of dimension values), unit, density in g/cm³
Output: weight in kg

Every calculator follows the same pipeline: normalize linear dimensions to mm,
build a cross-sectional area in cm², multiply by length in cm, then by density.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..catalog import Catalog
from ..errors import CalculationError, MissingInputError, UnknownLookupError
from ..schemas import Dimensions, as_dimensions
from ..units import normalize, parse_unit
from ..weights import weight_from_volume

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All shape calculators inherit from this."""

    def __init__(self, catalog: Catalog = None,
                 on_warning: Optional[Callable[[CalculationError], None]] = None):
        self.catalog = catalog or Catalog()
        self.on_warning = on_warning

    @abstractmethod
    def weigh(self, dims: Dimensions, unit, density: float) -> float:
        """
        Returns the weight in kg.
        Raises a CalculationError subclass when the weight is undefined.
        """
        pass

    def calculate(self, dimensions, unit="mm", density: float = 0.0) -> float:
        """Permissive entry point: any CalculationError becomes 0.0."""
        try:
            return self.calculate_strict(dimensions, unit, density)
        except CalculationError as e:
            self.report(e)
            return 0.0

    def calculate_strict(self, dimensions, unit="mm", density: float = 0.0) -> float:
        """Same as calculate() but lets CalculationError propagate."""
        dims = as_dimensions(dimensions)
        self.require_positive("density", density)
        weight = self.weigh(dims, parse_unit(unit), density)
        return max(weight, 0.0)

    def report(self, error: CalculationError):
        """Log a calculation problem; unknown lookups also go to on_warning."""
        if isinstance(error, UnknownLookupError):
            logger.warning("%s: %s", type(self).__name__, error)
            if self.on_warning is not None:
                self.on_warning(error)
        else:
            logger.debug("%s returned 0 (%s): %s", type(self).__name__, error.kind, error)

    # --- Helper methods for all calculators ---

    def require_positive(self, name: str, value) -> float:
        """Return value if it is a number > 0, else raise MissingInputError."""
        try:
            valid = value is not None and not isinstance(value, str) and math.isfinite(value) and value > 0
        except (TypeError, OverflowError):
            valid = False
        if not valid:
            raise MissingInputError(f"{name} is required and must be > 0 (got {value!r})")
        return value

    def mm(self, dims: Dimensions, name: str, unit) -> float:
        """Required linear dimension, normalized to millimeters."""
        return normalize(self.require_positive(name, getattr(dims, name)), unit)

    def optional_mm(self, dims: Dimensions, name: str, unit) -> float:
        """Optional linear dimension in mm; absent or non-positive -> 0.0."""
        value = getattr(dims, name)
        if value is None or isinstance(value, str) or value <= 0:
            return 0.0
        return normalize(value, unit)

    def weight_from_area(self, area_mm2: float, length_mm: float, density: float) -> float:
        """Area in mm² and length in mm -> kg, via cm² and cm³."""
        area_cm2 = area_mm2 / 100.0
        volume_cm3 = area_cm2 * (length_mm / 10.0)
        return weight_from_volume(volume_cm3, density)
