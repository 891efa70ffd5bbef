# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class RequestStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    REVIEW = "Review"
    COMPLETED = "Completed"
    BLOCKED = "Blocked"


class FeedbackRole(str, Enum):
    CLIENT = "Client"
    DESIGNER = "Designer"
    MANAGER = "Manager"


class FeedbackType(str, Enum):
    GENERAL = "General"
    APPROVAL = "Approval"
    CHANGE_REQUEST = "Change Request"


class Feedback(BaseModel):
    """A single comment on a request. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str
    author: str = Field(..., min_length=1, max_length=255)
    role: FeedbackRole
    content: str = ""
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: FeedbackType = FeedbackType.GENERAL

    @model_validator(mode="after")
    def content_required_unless_approval(self) -> "Feedback":
        if self.type != FeedbackType.APPROVAL and not self.content.strip():
            raise ValueError(f"{self.type.value} feedback requires content")
        return self


class Designer(BaseModel):
    """A designer with a finite weekly capacity."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    avatar: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    capacity_hours: float = Field(..., gt=0)
    assigned_hours: float = Field(default=0, ge=0)

    @field_validator("skills")
    @classmethod
    def unique_skills(cls, v: list[str]) -> list[str]:
        seen: list[str] = []
        for skill in v:
            skill = skill.strip()
            if skill and skill not in seen:
                seen.append(skill)
        return seen

    @property
    def utilization(self) -> float:
        return self.assigned_hours / self.capacity_hours

    @property
    def is_overallocated(self) -> bool:
        return self.assigned_hours > self.capacity_hours


class DesignRequest(BaseModel):
    """A unit of design work tracked from intake to client approval."""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    client: str
    requestor: str
    description: str = ""
    type: str = Field(..., min_length=1)
    business_function: str = Field(..., min_length=1)
    priority: Priority = Priority.MEDIUM
    status: RequestStatus = RequestStatus.PENDING
    estimated_hours: float = Field(default=0, ge=0)
    due_date: date
    assigned_to: Optional[str] = None
    start_date: Optional[date] = None
    feedback: list[Feedback] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def owner_and_start_date_together(self) -> "DesignRequest":
        if (self.assigned_to is None) != (self.start_date is None):
            raise ValueError("assigned_to and start_date must be set together")
        if self.status == RequestStatus.PENDING and self.assigned_to is not None:
            raise ValueError("A pending request cannot have an owner")
        return self

    @property
    def is_scheduled(self) -> bool:
        return self.start_date is not None and self.due_date is not None


class Suggestion(BaseModel):
    """An advisory request-to-designer pairing. Never trusted until re-validated."""
    model_config = ConfigDict(frozen=True)

    request_id: str = Field(..., min_length=1)
    designer_id: str = Field(..., min_length=1)
    rationale: str = ""
