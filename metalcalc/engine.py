"""
Weight / price orchestration.

caller -> resolve_shape -> calculator (normalize, area, volume, density)
       -> weight kg -> compute_price -> CalculationResult

All functions are pure over their inputs. A WeightEngine only holds the
read-only catalog and the warning callback it was built with.
"""

import logging
from typing import Callable, Optional

from .calculators.registry import get_calculator
from .catalog import Catalog
from .errors import CalculationError, UnknownLookupError
from .naming import generate_name
from .pricing import price_by_model
from .schemas import CalculationResult, as_dimensions
from .shapes import resolve_shape
from .units import normalize

logger = logging.getLogger(__name__)

_default_catalog = None


def default_catalog() -> Catalog:
    """Catalog built from settings on first use, shared afterwards."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = Catalog.from_settings()
    return _default_catalog


class WeightEngine:
    """Dispatches a shape to its calculator against one catalog."""

    def __init__(self, catalog: Catalog = None,
                 on_warning: Optional[Callable[[CalculationError], None]] = None):
        self.catalog = catalog or default_catalog()
        self.on_warning = on_warning

    def _warn(self, error: CalculationError):
        logger.warning("%s", error)
        if self.on_warning is not None:
            self.on_warning(error)

    def compute_weight(self, shape_type, sub_type, dimensions, unit="mm",
                       material_density: float = 0.0, strict: bool = False) -> float:
        """
        Weight in kg for one piece.

        Never raises for bad input unless strict=True; an unknown shape, missing
        dimension or impossible geometry gives 0.0.
        """
        shape = resolve_shape(shape_type, sub_type)
        if shape is None:
            error = UnknownLookupError(f"Unknown shape: type={shape_type!r} subType={sub_type!r}")
            if strict:
                raise error
            self._warn(error)
            return 0.0

        calculator = get_calculator(shape, catalog=self.catalog, on_warning=self.on_warning)
        if strict:
            return calculator.calculate_strict(dimensions, unit, material_density)
        return calculator.calculate(dimensions, unit, material_density)

    def density_for(self, material: str) -> float:
        return self.catalog.get_density(material)

    def calculate(self, shape_type, sub_type, dimensions, unit="mm",
                  material_density: float = 0.0, price_per_kg: float = 0.0,
                  quantity=1, language: str = "en", pricing_model="per_kg") -> CalculationResult:
        """
        Weight, price and name in one result. Warnings are collected, not raised.
        price_per_kg is read as price per piece or per meter under those pricing models.
        """
        warnings = []

        def collect(error):
            warnings.append(str(error))
            if self.on_warning is not None:
                self.on_warning(error)

        dims = as_dimensions(dimensions)
        engine = WeightEngine(self.catalog, on_warning=collect)
        weight = engine.compute_weight(shape_type, sub_type, dims, unit, material_density)
        length_m = normalize(dims.length, unit) / 1000.0 if dims.length and dims.length > 0 else 0.0
        price = price_by_model(pricing_model, price_per_kg, weight, length_m, quantity)
        shape = resolve_shape(shape_type, sub_type)

        return CalculationResult(
            shape=shape.value if shape else None,
            name=generate_name(shape_type, dims, unit, language, sub_type=sub_type),
            weight_kg=weight,
            unit_price=price.unit_price,
            quantity=quantity,
            total=price.total,
            warnings=warnings,
        )


def compute_weight(shape_type, sub_type, dimensions, unit="mm", material_density: float = 0.0,
                   catalog: Catalog = None, on_warning=None, strict: bool = False) -> float:
    """Module-level shortcut for WeightEngine(catalog, on_warning).compute_weight(...)."""
    engine = WeightEngine(catalog, on_warning=on_warning)
    return engine.compute_weight(shape_type, sub_type, dimensions, unit, material_density, strict=strict)


def calculate(shape_type, sub_type, dimensions, unit="mm", material_density: float = 0.0,
              price_per_kg: float = 0.0, quantity=1, language: str = "en",
              pricing_model="per_kg", catalog: Catalog = None) -> CalculationResult:
    return WeightEngine(catalog).calculate(
        shape_type, sub_type, dimensions, unit, material_density,
        price_per_kg, quantity, language, pricing_model,
    )
