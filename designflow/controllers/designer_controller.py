# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Designer pool endpoints.
Thin HTTP layer: delegates ALL logic to DesignerService.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from designflow.core.dependencies import get_designer_service
from designflow.models.domain import Designer
from designflow.schemas.design import DesignerCreateRequest, DesignerResponse
from designflow.services.designer_service import DesignerService

router = APIRouter(prefix="/api/v1", tags=["Designers"])


def designer_out(designer: Designer) -> dict[str, Any]:
    data = designer.model_dump()
    data["utilization"] = round(designer.utilization, 4)
    data["overallocated"] = designer.is_overallocated
    return data


@router.get("/designers", response_model=list[DesignerResponse])
def list_designers(
    service: DesignerService = Depends(get_designer_service),
):
    """List the designer pool with current load."""
    return [designer_out(d) for d in service.list_designers()]


@router.post("/designers", status_code=201, response_model=DesignerResponse)
async def create_designer(
    payload: DesignerCreateRequest,
    service: DesignerService = Depends(get_designer_service),
):
    """Register a designer with no current load."""
    try:
        designer = service.create_designer(
            name=payload.name,
            role=payload.role,
            capacity_hours=payload.capacity_hours,
            skills=payload.skills,
            avatar=payload.avatar,
            designer_id=payload.id,
        )
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return designer_out(designer)


@router.get("/designers/{designer_id}", response_model=DesignerResponse)
def get_designer(
    designer_id: str,
    service: DesignerService = Depends(get_designer_service),
):
    """Get one designer's snapshot."""
    try:
        return designer_out(service.get_designer(designer_id))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
