import math

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Union, Dict, Literal

from .config import settings


def _coerce_number(value):
    """Numbers and numeric strings -> float, anything else -> None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (ValueError, TypeError, OverflowError):
        return None
    return number if math.isfinite(number) else None


class Dimensions(BaseModel):
    """
    A Dimension Set. Which fields matter depends on the shape.
    Accepts snake_case or camelCase keys; unparseable values become None.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    width: Optional[float] = None
    height: Optional[float] = None
    thickness: Optional[float] = None
    length: Optional[float] = None
    diameter: Optional[float] = None
    outer_diameter: Optional[float] = None
    size: Optional[Union[float, str]] = None
    side_length: Optional[float] = None
    radius: Optional[float] = None
    angle: Optional[float] = None
    flange_width: Optional[float] = None

    @field_validator(
        "width", "height", "thickness", "length", "diameter", "outer_diameter",
        "side_length", "radius", "angle", "flange_width",
        mode="before",
    )
    @classmethod
    def _numeric(cls, value):
        return _coerce_number(value)

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, value):
        # Square pipe side (number) or profile designation ("HEA 200")
        number = _coerce_number(value)
        if number is not None:
            return number
        if value is None or isinstance(value, bool):
            return None
        text = str(value).strip()
        return text or None


class CalculationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    sub_type: Optional[str] = Field(default=None, alias="subType")
    dimensions: Dimensions = Dimensions()
    unit: str = settings.DEFAULT_UNIT
    material: Optional[str] = None
    density: Optional[float] = None
    # Price per kg, per piece or per meter depending on pricing_model
    price_per_kg: float = Field(default=0.0, alias="pricePerKg")
    pricing_model: Literal["per_kg", "per_unit", "per_meter"] = Field(
        default=settings.DEFAULT_PRICING_MODEL, alias="pricingModel"
    )
    quantity: float = 1
    language: str = settings.DEFAULT_LANGUAGE


class PriceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight_kg: float = Field(alias="weightKg")
    price_per_kg: float = Field(alias="pricePerKg")
    quantity: float = 1


class PriceResult(BaseModel):
    unit_price: float = 0.0
    total: float = 0.0


class WeightResult(BaseModel):
    weight_kg: float


class NameResult(BaseModel):
    name: str


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Optional[str] = None
    name: str = ""
    weight_kg: float = 0.0
    unit_price: float = 0.0
    quantity: float = 1
    total: float = 0.0
    warnings: List[str] = []


class MaterialInfo(BaseModel):
    id: str
    name: str
    density: float
    names: Dict[str, str] = {}


class ProfileFamily(BaseModel):
    id: str
    name: str
    sizes: List[str] = []


def as_dimensions(dimensions) -> Dimensions:
    """Accept a Dimensions model or any mapping with snake_case/camelCase keys."""
    if isinstance(dimensions, Dimensions):
        return dimensions
    if dimensions is None:
        return Dimensions()
    return Dimensions.model_validate(dict(dimensions))
