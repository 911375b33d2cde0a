from fastapi import APIRouter, Depends, HTTPException
from typing import List

from .. import schemas
from ..catalog import Catalog
from ..dependencies import get_catalog

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/", response_model=List[schemas.ProfileFamily])
def list_families(catalog: Catalog = Depends(get_catalog)):
    return [
        schemas.ProfileFamily(id=key, name=name, sizes=catalog.profile_sizes(key))
        for key, (name, _prefix) in catalog.families.items()
    ]


@router.get("/{family}", response_model=schemas.ProfileFamily)
def get_family(family: str, catalog: Catalog = Depends(get_catalog)):
    if family not in catalog.families:
        raise HTTPException(status_code=404, detail=f"Unknown profile family: {family}")
    name, _prefix = catalog.families[family]
    return schemas.ProfileFamily(id=family, name=name, sizes=catalog.profile_sizes(family))
