# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Design request intake, feedback, and status changes.
Coordinates lifecycle transitions with metrics, activity log, and logging.
"""

import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Optional

from designflow.core.errors import InvalidTransition, NotFound
from designflow.core.logging import get_logger
from designflow.metrics.prometheus import (
    FEEDBACK_REJECTED,
    FEEDBACK_TOTAL,
    REQUESTS_SUBMITTED,
    STATUS_CHANGES,
)
from designflow.models.domain import (
    DesignRequest,
    Feedback,
    FeedbackRole,
    FeedbackType,
    Priority,
    RequestStatus,
)
from designflow.repositories.activity_repository import ActivityRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services import lifecycle

logger = get_logger(__name__)


class RequestService:
    """Business logic for the design request queue."""

    def __init__(
        self,
        request_repo: RequestRepository,
        activity_repo: ActivityRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._requests = request_repo
        self._activity = activity_repo
        self._today = today

    # ── Commands ──

    def submit_request(self, draft: dict[str, Any]) -> DesignRequest:
        """Accept a validated intake draft as a new Pending request."""
        request = DesignRequest(**{
            **draft,
            "id": f"r-{uuid.uuid4().hex[:12]}",
            "status": RequestStatus.PENDING,
            "assigned_to": None,
            "start_date": None,
            "feedback": [],
        })
        self._requests.save(request)

        REQUESTS_SUBMITTED.labels(priority=request.priority.value).inc()
        STATUS_CHANGES.labels(to_status=request.status.value).inc()
        self._activity.record_event(
            "request_submitted",
            request.id,
            {
                "title": request.title,
                "client": request.client,
                "priority": request.priority.value,
                "due_date": request.due_date.isoformat(),
            },
        )
        logger.info(
            "Request submitted: id=%s, type=%s, priority=%s",
            request.id, request.type, request.priority.value,
        )
        return request

    def record_feedback(
        self,
        request_id: str,
        feedback_type: FeedbackType,
        content: str = "",
        author: str = "Current User (Client)",
        role: FeedbackRole = FeedbackRole.CLIENT,
    ) -> Feedback:
        """Append feedback and apply its status effect. Raises NotFound / InvalidTransition."""
        request = self.get_request(request_id)
        previous = request.status
        try:
            entry = lifecycle.record_feedback(
                request, feedback_type, content=content, author=author, role=role,
            )
        except InvalidTransition:
            FEEDBACK_REJECTED.labels(type=feedback_type.value).inc()
            logger.info(
                "Feedback rejected: request=%s, type=%s, reason=empty content",
                request_id, feedback_type.value,
            )
            raise

        FEEDBACK_TOTAL.labels(type=feedback_type.value).inc()
        self._activity.record_event(
            "feedback_added",
            request_id,
            {"feedback_id": entry.id, "type": feedback_type.value, "author": author},
        )
        if request.status != previous:
            self._status_changed(request, previous, source="feedback")
        logger.info(
            "Feedback added: request=%s, type=%s, status=%s",
            request_id, feedback_type.value, request.status.value,
        )
        return entry

    def set_status(self, request_id: str, status: RequestStatus) -> DesignRequest:
        """
        Administrative override: writes the status and nothing else.
        Raises InvalidTransition when an owned request is sent back to Pending.
        """
        request = self.get_request(request_id)
        try:
            previous = lifecycle.set_status(request, status)
        except InvalidTransition:
            logger.info(
                "Status override rejected: request=%s, owner=%s, to=%s",
                request_id, request.assigned_to, status.value,
            )
            raise
        if previous != status:
            if lifecycle.is_terminal(previous):
                logger.warning(
                    "Completed request reopened by override: request=%s, to=%s",
                    request_id, status.value,
                )
            self._status_changed(request, previous, source="override")
        return request

    # ── Queries ──

    def list_requests(self, status: Optional[RequestStatus] = None) -> list[DesignRequest]:
        return self._requests.get_all(status=status)

    def get_request(self, request_id: str) -> DesignRequest:
        request = self._requests.get_by_id(request_id)
        if request is None:
            raise NotFound("request", request_id)
        return request

    # ── Internal ──

    def _status_changed(
        self, request: DesignRequest, previous: RequestStatus, source: str
    ) -> None:
        STATUS_CHANGES.labels(to_status=request.status.value).inc()
        self._activity.record_event(
            "status_changed",
            request.id,
            {"from": previous.value, "to": request.status.value, "source": source},
        )
        logger.info(
            "Status changed: request=%s, %s -> %s (%s)",
            request.id, previous.value, request.status.value, source,
        )

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Load the demo request queue, dated relative to today."""
        today = self._today()
        now = datetime.now(timezone.utc)

        def day(offset: int) -> date:
            return today + timedelta(days=offset)

        def stamp(offset: int) -> datetime:
            return now + timedelta(days=offset)

        defaults = [
            DesignRequest(
                id="r1", title="Q4 Marketing Campaign Assets",
                client="Marketing Team", requestor="Sarah Connor",
                description="Need social media banners and email headers for Q4.",
                type="Social Media", business_function="Marketing",
                status=RequestStatus.IN_PROGRESS, priority=Priority.HIGH,
                assigned_to="d1", due_date=day(5), estimated_hours=12,
                start_date=day(-1),
                feedback=[
                    Feedback(
                        id="f1", author="Sarah Connor", role=FeedbackRole.CLIENT,
                        content="Can we make the blue a bit more vibrant?",
                        date=stamp(-1), type=FeedbackType.CHANGE_REQUEST,
                    ),
                    Feedback(
                        id="f2", author="Alice Chen", role=FeedbackRole.DESIGNER,
                        content="Sure, I updated the palette. How does this look?",
                        date=now, type=FeedbackType.GENERAL,
                    ),
                ],
            ),
            DesignRequest(
                id="r2", title="Annual Report Layout",
                client="Executive Board", requestor="John Doe",
                description="Layout and design for the annual report PDF.",
                type="Print", business_function="Corporate",
                status=RequestStatus.IN_PROGRESS, priority=Priority.URGENT,
                assigned_to="d2", due_date=day(10), estimated_hours=40,
                start_date=day(0),
            ),
            DesignRequest(
                id="r3", title="Product Demo Video",
                client="Product Team", requestor="Mike Ross",
                description="30s animated explainer video for the new feature.",
                type="Video", business_function="Product",
                priority=Priority.MEDIUM, due_date=day(14), estimated_hours=20,
            ),
            DesignRequest(
                id="r4", title="Sales Deck Refresh",
                client="Sales Team", requestor="Jessica Pearson",
                description="Update the master sales deck with new branding.",
                type="Presentation", business_function="Sales",
                status=RequestStatus.COMPLETED, priority=Priority.LOW,
                assigned_to="d1", due_date=day(-2), estimated_hours=5,
                start_date=day(-5),
                feedback=[
                    Feedback(
                        id="f3", author="Jessica Pearson", role=FeedbackRole.CLIENT,
                        content="Looks perfect, approved!",
                        date=stamp(-2), type=FeedbackType.APPROVAL,
                    ),
                ],
            ),
            DesignRequest(
                id="r5", title="Website Hero Refresh",
                client="Web Team", requestor="Louis Litt",
                description="New hero images for homepage.",
                type="Web Design", business_function="Marketing",
                priority=Priority.HIGH, due_date=day(3), estimated_hours=8,
            ),
            DesignRequest(
                id="r6", title="Internal Newsletter Template",
                client="HR", requestor="Donna Paulsen",
                description="HTML template for monthly HR updates.",
                type="Email", business_function="HR",
                priority=Priority.LOW, due_date=day(7), estimated_hours=4,
            ),
        ]
        for request in defaults:
            self._requests.save(request)
        logger.info("Seeded %d default design requests", len(defaults))
