# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Advisory suggestion endpoints.
Suggestions are only ever proposed here; applying one is a separate call.
"""

from fastapi import APIRouter, Depends

from designflow.core.dependencies import get_assignment_service
from designflow.models.domain import Suggestion
from designflow.schemas.design import SuggestionApplyResponse, SuggestionPayload
from designflow.services.assignment_service import AssignmentService

router = APIRouter(prefix="/api/v1", tags=["Suggestions"])


@router.post("/suggestions", response_model=list[SuggestionPayload])
async def request_suggestions(
    service: AssignmentService = Depends(get_assignment_service),
):
    """Ask the advisory oracle for pairings. An empty list means none."""
    suggestions = await service.request_suggestions()
    return [s.model_dump() for s in suggestions]


@router.post("/suggestions/apply", response_model=SuggestionApplyResponse)
async def apply_suggestion(
    payload: SuggestionPayload,
    service: AssignmentService = Depends(get_assignment_service),
):
    """Apply one suggestion after re-validating it against current state."""
    request = service.apply_suggestion(Suggestion(**payload.model_dump()))
    return {
        "status": "applied" if request is not None else "discarded",
        "request_id": payload.request_id,
        "designer_id": payload.designer_id,
        "request": request.model_dump() if request is not None else None,
    }
