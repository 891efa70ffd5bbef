# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Request lifecycle: pure transitions, no I/O, no metrics, no logging.

    Pending ─► In Progress ─► Review ─► Completed
    (any non-terminal) ─► Blocked

Every function either mutates the given entities completely or raises
before touching them.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Optional

from designflow.core.errors import InvalidTransition
from designflow.models.domain import (
    Designer,
    DesignRequest,
    Feedback,
    FeedbackRole,
    FeedbackType,
    RequestStatus,
)

DEFAULT_APPROVAL_MESSAGE = "Design Approved."

TERMINAL_STATUSES = frozenset({RequestStatus.COMPLETED})

FEEDBACK_STATUS_EFFECTS: dict[FeedbackType, Optional[RequestStatus]] = {
    FeedbackType.APPROVAL: RequestStatus.COMPLETED,
    FeedbackType.CHANGE_REQUEST: RequestStatus.IN_PROGRESS,
    FeedbackType.GENERAL: None,
}


def assign(
    request: DesignRequest,
    designer: Designer,
    today: date,
    hours: float,
) -> None:
    """Bind an unowned Pending request to a designer and start it today."""
    if request.assigned_to is not None:
        raise InvalidTransition(
            f"Request '{request.id}' is already assigned to '{request.assigned_to}'",
            request_id=request.id,
        )
    if request.status != RequestStatus.PENDING:
        raise InvalidTransition(
            f"Request '{request.id}' is {request.status.value}; "
            "only Pending requests can be assigned",
            request_id=request.id,
        )
    request.assigned_to = designer.id
    request.start_date = today
    request.status = RequestStatus.IN_PROGRESS
    designer.assigned_hours += hours


def record_feedback(
    request: DesignRequest,
    feedback_type: FeedbackType,
    content: str = "",
    author: str = "Current User (Client)",
    role: FeedbackRole = FeedbackRole.CLIENT,
    now: Optional[datetime] = None,
) -> Feedback:
    """
    Append a feedback entry and apply its status effect.
    Approval may omit content; the other types may not.
    """
    text = (content or "").strip()
    if not text:
        if feedback_type != FeedbackType.APPROVAL:
            raise InvalidTransition(
                f"{feedback_type.value} feedback requires content",
                request_id=request.id,
            )
        text = DEFAULT_APPROVAL_MESSAGE

    entry = Feedback(
        id=str(uuid.uuid4()),
        author=author,
        role=role,
        content=text,
        date=now or datetime.now(timezone.utc),
        type=feedback_type,
    )
    request.feedback.append(entry)

    target = FEEDBACK_STATUS_EFFECTS[feedback_type]
    if target is not None:
        request.status = target
    return entry


def set_status(request: DesignRequest, status: RequestStatus) -> RequestStatus:
    """
    Administrative override. Returns the previous status.
    An owned request cannot be sent back to Pending.
    """
    if status == RequestStatus.PENDING and request.assigned_to is not None:
        raise InvalidTransition(
            f"Request '{request.id}' is assigned to '{request.assigned_to}' "
            "and cannot return to Pending",
            request_id=request.id,
        )
    previous = request.status
    request.status = status
    return previous


def is_terminal(status: RequestStatus) -> bool:
    return status in TERMINAL_STATUSES
