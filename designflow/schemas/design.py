# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from designflow.models.domain import (
    FeedbackRole,
    FeedbackType,
    Priority,
    RequestStatus,
)


# ── Designer Schemas ──

class DesignerCreateRequest(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    avatar: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    capacity_hours: float = Field(default=40, gt=0, le=168)


class DesignerResponse(BaseModel):
    id: str
    name: str
    role: str
    avatar: Optional[str] = None
    skills: list[str]
    capacity_hours: float
    assigned_hours: float
    utilization: float
    overallocated: bool


# ── Design Request Schemas ──

class DesignRequestCreate(BaseModel):
    """Validated intake draft. Status, id and feedback are set server-side."""
    title: str = Field(..., min_length=1, max_length=500)
    client: str = Field(..., min_length=1, max_length=255)
    requestor: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    type: str = Field(default="Web Design", min_length=1, max_length=100)
    business_function: str = Field(default="Marketing", min_length=1, max_length=100)
    priority: Priority = Priority.MEDIUM
    estimated_hours: float = Field(default=0, ge=0)
    due_date: date


class FeedbackResponse(BaseModel):
    id: str
    author: str
    role: FeedbackRole
    content: str
    date: datetime
    type: FeedbackType


class DesignRequestResponse(BaseModel):
    id: str
    title: str
    client: str
    requestor: str
    description: str
    type: str
    business_function: str
    priority: Priority
    status: RequestStatus
    estimated_hours: float
    due_date: date
    assigned_to: Optional[str] = None
    start_date: Optional[date] = None
    feedback: list[FeedbackResponse] = []
    created_at: datetime


class AssignRequest(BaseModel):
    designer_id: str = Field(..., min_length=1)


class FeedbackCreateRequest(BaseModel):
    author: str = Field(default="Current User (Client)", min_length=1, max_length=255)
    role: FeedbackRole = FeedbackRole.CLIENT
    content: str = Field(default="", max_length=5000)
    type: FeedbackType = FeedbackType.GENERAL


class StatusUpdateRequest(BaseModel):
    status: RequestStatus


# ── Suggestion Schemas ──

class SuggestionPayload(BaseModel):
    request_id: str = Field(..., min_length=1)
    designer_id: str = Field(..., min_length=1)
    rationale: str = ""


class SuggestionApplyResponse(BaseModel):
    status: str
    request_id: str
    designer_id: str
    request: Optional[DesignRequestResponse] = None


# ── Reporting Schemas ──

class InsightsRequest(BaseModel):
    period: str = Field(default="Monthly", min_length=1, max_length=50)


class InsightsResponse(BaseModel):
    period: str
    insight: str
    stats: dict[str, Any]
