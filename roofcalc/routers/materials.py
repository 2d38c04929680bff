from fastapi import APIRouter, HTTPException
from typing import Dict, List
from .. import schemas
from ..calculators.material_lookup import MaterialLookup

router = APIRouter(prefix="/materials", tags=["materials"])

lookup = MaterialLookup()


@router.get("/", response_model=Dict[str, List[schemas.MaterialOption]])
def list_all_materials():
    """Material options for every roofing type, keyed by type."""
    return {
        roofing_type: lookup.list_materials(roofing_type)
        for roofing_type in lookup.roofing_types()
    }


@router.get("/{roofing_type}", response_model=List[schemas.MaterialOption])
def list_materials(roofing_type: str):
    """Options for the material dropdown; changes when roofing type changes."""
    if roofing_type.strip().lower() not in lookup.roofing_types():
        raise HTTPException(status_code=404, detail=f"Unknown roofing type: {roofing_type}")
    return lookup.list_materials(roofing_type)
