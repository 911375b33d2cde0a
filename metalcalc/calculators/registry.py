"""
Calculator registry: maps every ShapeKind to a calculator class.

The registry must cover ShapeKind exactly; a missing entry is an import-time
error rather than a silently unweighable shape.
"""

from .plate import PlateCalculator
from .profile import StandardProfileCalculator
from .pipe import RoundPipeCalculator, SquarePipeCalculator, RectangularPipeCalculator
from .angle import EqualAngleCalculator, UnequalAngleCalculator
from .bar import FlatBarCalculator, RoundBarCalculator, SquareBarCalculator
from .press_brake import PressBrakeAngleCalculator, PressBrakeUCalculator
from .base import BaseCalculator
from ..shapes import ShapeKind, resolve_shape

CALCULATOR_REGISTRY: dict[ShapeKind, type] = {
    ShapeKind.PLATE: PlateCalculator,
    ShapeKind.STANDARD_PROFILE: StandardProfileCalculator,
    ShapeKind.ROUND_PIPE: RoundPipeCalculator,
    ShapeKind.SQUARE_PIPE: SquarePipeCalculator,
    ShapeKind.RECTANGULAR_PIPE: RectangularPipeCalculator,
    ShapeKind.EQUAL_ANGLE: EqualAngleCalculator,
    ShapeKind.UNEQUAL_ANGLE: UnequalAngleCalculator,
    ShapeKind.FLAT_BAR: FlatBarCalculator,
    ShapeKind.ROUND_BAR: RoundBarCalculator,
    ShapeKind.SQUARE_BAR: SquareBarCalculator,
    ShapeKind.PRESS_BRAKE_ANGLE: PressBrakeAngleCalculator,
    ShapeKind.PRESS_BRAKE_U: PressBrakeUCalculator,
}

_missing = set(ShapeKind) - set(CALCULATOR_REGISTRY)
if _missing:
    raise RuntimeError(f"No calculator registered for: {sorted(k.name for k in _missing)}")


def get_calculator(shape: ShapeKind, **kwargs) -> BaseCalculator:
    """Returns an instance of the calculator for a shape kind, or raises ValueError."""
    if shape not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for shape: {shape}. "
            f"Available: {[k.value for k in CALCULATOR_REGISTRY]}"
        )
    return CALCULATOR_REGISTRY[shape](**kwargs)


def has_calculator(shape_type, sub_type=None) -> bool:
    """Check if a (type, subType) pair resolves to a calculator."""
    return resolve_shape(shape_type, sub_type) in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered shape kinds."""
    return [k.value for k in CALCULATOR_REGISTRY]
