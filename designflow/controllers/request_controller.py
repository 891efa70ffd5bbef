# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Design request intake, assignment, feedback, status endpoints.
Thin HTTP layer: delegates ALL logic to RequestService / AssignmentService.

Mutating handlers are ``async def`` with no await inside the mutation, so
they run to completion on the event loop and never interleave.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from designflow.core.dependencies import get_assignment_service, get_request_service
from designflow.models.domain import RequestStatus
from designflow.schemas.design import (
    AssignRequest,
    DesignRequestCreate,
    DesignRequestResponse,
    FeedbackCreateRequest,
    FeedbackResponse,
    StatusUpdateRequest,
)
from designflow.services.assignment_service import AssignmentService
from designflow.services.request_service import RequestService

router = APIRouter(prefix="/api/v1", tags=["Requests"])


@router.post("/requests", status_code=201, response_model=DesignRequestResponse)
async def submit_request(
    payload: DesignRequestCreate,
    service: RequestService = Depends(get_request_service),
):
    """Accept a new design request into the Pending queue."""
    return service.submit_request(payload.model_dump())


@router.get("/requests", response_model=list[DesignRequestResponse])
def list_requests(
    status: Optional[RequestStatus] = None,
    service: RequestService = Depends(get_request_service),
):
    """List design requests, optionally filtered by status."""
    return service.list_requests(status=status)


@router.get("/requests/{request_id}", response_model=DesignRequestResponse)
def get_request(
    request_id: str,
    service: RequestService = Depends(get_request_service),
):
    """Get one design request with its feedback thread."""
    try:
        return service.get_request(request_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/requests/{request_id}/assign", response_model=DesignRequestResponse)
async def assign_request(
    request_id: str,
    payload: AssignRequest,
    service: AssignmentService = Depends(get_assignment_service),
):
    """Assign an unowned request to a designer and start it today."""
    try:
        return service.assign(request_id, payload.designer_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post(
    "/requests/{request_id}/feedback",
    status_code=201,
    response_model=FeedbackResponse,
)
async def add_feedback(
    request_id: str,
    payload: FeedbackCreateRequest,
    service: RequestService = Depends(get_request_service),
):
    """Record client/designer feedback; approvals complete the request."""
    try:
        return service.record_feedback(
            request_id,
            payload.type,
            content=payload.content,
            author=payload.author,
            role=payload.role,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.patch("/requests/{request_id}/status", response_model=DesignRequestResponse)
async def update_status(
    request_id: str,
    payload: StatusUpdateRequest,
    service: RequestService = Depends(get_request_service),
):
    """Administrative status override."""
    try:
        return service.set_status(request_id, payload.status)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
