"""Component vocabulary endpoints."""
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse
from typing import Any, Dict

from app.models.schemas.component_catalog import (
    export_component_catalog as export_component_catalog_payload,
    get_component_definition,
    normalize_component_type,
)

router = APIRouter()


@router.get(
    "/components",
    tags=["Components"],
    summary="Get wireframe vocabularies",
    description="Component types, navigation types, icons, default theme and the per-type component catalog."
)
async def get_component_catalog() -> Dict[str, Any]:
    return export_component_catalog_payload()


@router.get(
    "/components/export",
    tags=["Components"],
    summary="Export component catalog as JSON",
    description="Downloads the vocabularies and component catalog as a JSON file."
)
async def export_component_catalog() -> JSONResponse:
    response = JSONResponse(content=export_component_catalog_payload())
    response.headers["Content-Disposition"] = 'attachment; filename="wireframe_components.json"'
    return response


@router.get(
    "/components/{component_type}",
    tags=["Components"],
    summary="Get one component definition",
    description="Case-insensitive lookup of a single component type."
)
async def get_component(component_type: str) -> Dict[str, Any]:
    name = normalize_component_type(component_type)
    definition = get_component_definition(name) if name else None
    if definition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown component type '{component_type}'"
        )
    return {"type": name, **definition}
