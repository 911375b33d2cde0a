from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..catalog import Catalog
from ..dependencies import get_catalog
from ..engine import WeightEngine
from ..naming import generate_name
from ..pricing import compute_price

router = APIRouter(prefix="/calculations", tags=["calculations"])


def resolve_density(request: schemas.CalculationRequest, catalog: Catalog) -> float:
    """Material identifier wins over a raw density. Unknown material is a 404."""
    if request.material:
        if not catalog.has_material(request.material):
            raise HTTPException(status_code=404, detail=f"Unknown material: {request.material}")
        return catalog.get_density(request.material)
    return request.density or 0.0


@router.post("/weight", response_model=schemas.WeightResult)
def calculate_weight(request: schemas.CalculationRequest, catalog: Catalog = Depends(get_catalog)):
    engine = WeightEngine(catalog)
    weight = engine.compute_weight(
        request.type, request.sub_type, request.dimensions, request.unit,
        resolve_density(request, catalog),
    )
    return {"weight_kg": weight}


@router.post("/price", response_model=schemas.PriceResult)
def calculate_price(request: schemas.PriceRequest):
    return compute_price(request.weight_kg, request.price_per_kg, request.quantity)


@router.post("/name", response_model=schemas.NameResult)
def calculation_name(request: schemas.CalculationRequest):
    name = generate_name(request.type, request.dimensions, request.unit,
                         request.language, sub_type=request.sub_type)
    return {"name": name}


@router.post("/", response_model=schemas.CalculationResult)
def calculate(request: schemas.CalculationRequest, catalog: Catalog = Depends(get_catalog)):
    """Weight, price and name for one line. Bad dimensions give zeros, never an error."""
    engine = WeightEngine(catalog)
    return engine.calculate(
        request.type, request.sub_type, request.dimensions, request.unit,
        resolve_density(request, catalog), request.price_per_kg,
        request.quantity, request.language, request.pricing_model,
    )
