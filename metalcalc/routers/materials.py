from fastapi import APIRouter, Depends, HTTPException
from typing import List

from .. import schemas
from ..catalog import Catalog
from ..dependencies import get_catalog

router = APIRouter(prefix="/materials", tags=["materials"])


def _material_info(catalog: Catalog, material_id: str, language: str) -> schemas.MaterialInfo:
    entry = catalog.materials[material_id]
    return schemas.MaterialInfo(
        id=material_id,
        name=catalog.material_name(material_id, language),
        density=entry["density"],
        names=dict(entry["names"]),
    )


@router.get("/", response_model=List[schemas.MaterialInfo])
def list_materials(language: str = "en", catalog: Catalog = Depends(get_catalog)):
    return [_material_info(catalog, key, language) for key in catalog.materials]


@router.get("/{material_id}", response_model=schemas.MaterialInfo)
def get_material(material_id: str, language: str = "en", catalog: Catalog = Depends(get_catalog)):
    if not catalog.has_material(material_id):
        raise HTTPException(status_code=404, detail=f"Unknown material: {material_id}")
    return _material_info(catalog, material_id, language)
