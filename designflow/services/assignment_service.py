# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Assignment orchestration.
Binds pending requests to designers, keeps designer load in step, and
re-validates advisory suggestions against current state before applying them.
"""

from datetime import date
from typing import Callable, Optional

from designflow.core.config import settings
from designflow.core.errors import NotFound
from designflow.core.logging import get_logger
from designflow.metrics.prometheus import (
    ASSIGNMENTS_TOTAL,
    DESIGNER_LOAD_HOURS,
    STATUS_CHANGES,
    SUGGESTIONS_TOTAL,
)
from designflow.models.domain import DesignRequest, RequestStatus, Suggestion
from designflow.repositories.activity_repository import ActivityRepository
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services import lifecycle
from designflow.services.advisory_client import AdvisoryClient

logger = get_logger(__name__)

VALID_HOURS_POLICIES = ("flat", "estimated")


class HoursPolicy:
    """How much load an assignment adds to the designer."""

    def __init__(self, mode: str = "flat", flat_hours: float = 5.0) -> None:
        if mode not in VALID_HOURS_POLICIES:
            raise ValueError(f"hours policy must be one of {VALID_HOURS_POLICIES}")
        if flat_hours < 0:
            raise ValueError("flat_hours must be non-negative")
        self.mode = mode
        self.flat_hours = flat_hours

    @classmethod
    def from_settings(cls) -> "HoursPolicy":
        return cls(settings.ASSIGNMENT_HOURS_POLICY, settings.FLAT_ASSIGNMENT_HOURS)

    def hours_for(self, request: DesignRequest) -> float:
        if self.mode == "estimated":
            return request.estimated_hours
        return self.flat_hours


class AssignmentService:
    """Business logic for binding requests to designers."""

    def __init__(
        self,
        request_repo: RequestRepository,
        designer_repo: DesignerRepository,
        activity_repo: ActivityRepository,
        advisory_client: AdvisoryClient,
        hours_policy: Optional[HoursPolicy] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._requests = request_repo
        self._designers = designer_repo
        self._activity = activity_repo
        self._advisory = advisory_client
        self._policy = hours_policy or HoursPolicy.from_settings()
        self._today = today

    # ── Commands ──

    def assign(self, request_id: str, designer_id: str) -> DesignRequest:
        """
        Assign a request to a designer and start it today.
        Raises NotFound for unknown ids, InvalidTransition if already owned.
        """
        request = self._requests.get_by_id(request_id)
        if request is None:
            raise NotFound("request", request_id)
        designer = self._designers.get_by_id(designer_id)
        if designer is None:
            raise NotFound("designer", designer_id)

        previous = request.status
        hours = self._policy.hours_for(request)
        lifecycle.assign(request, designer, self._today(), hours)

        ASSIGNMENTS_TOTAL.labels(designer=designer.id).inc()
        DESIGNER_LOAD_HOURS.labels(designer=designer.id).set(designer.assigned_hours)
        STATUS_CHANGES.labels(to_status=request.status.value).inc()
        self._activity.record_event(
            "request_assigned",
            request.id,
            {
                "designer_id": designer.id,
                "hours_added": hours,
                "policy": self._policy.mode,
                "from": previous.value,
                "start_date": request.start_date.isoformat(),
            },
        )
        logger.info(
            "Request assigned: request=%s, designer=%s, load=%.1f/%.1f",
            request.id, designer.id, designer.assigned_hours, designer.capacity_hours,
        )
        if designer.is_overallocated:
            logger.warning(
                "Designer over capacity: designer=%s, assigned=%.1f, capacity=%.1f",
                designer.id, designer.assigned_hours, designer.capacity_hours,
            )
        return request

    async def request_suggestions(self) -> list[Suggestion]:
        """Ask the advisory oracle for pairings. Never raises; [] means none."""
        pending = self._requests.get_all(status=RequestStatus.PENDING)
        designers = self._designers.get_all()
        suggestions = await self._advisory.suggest_assignments(designers, pending)
        SUGGESTIONS_TOTAL.labels(outcome="proposed").inc(len(suggestions))
        return suggestions

    def apply_suggestion(self, suggestion: Suggestion) -> Optional[DesignRequest]:
        """
        Apply a suggestion if it still holds against current state.
        Stale or dangling suggestions are discarded and None is returned.
        """
        reason = self._stale_reason(suggestion)
        if reason is not None:
            SUGGESTIONS_TOTAL.labels(outcome="discarded").inc()
            self._activity.record_event(
                "suggestion_discarded",
                suggestion.request_id,
                {"designer_id": suggestion.designer_id, "reason": reason},
            )
            logger.info(
                "Suggestion discarded: request=%s, designer=%s, reason=%s",
                suggestion.request_id, suggestion.designer_id, reason,
            )
            return None

        request = self.assign(suggestion.request_id, suggestion.designer_id)
        SUGGESTIONS_TOTAL.labels(outcome="applied").inc()
        return request

    # ── Internal ──

    def _stale_reason(self, suggestion: Suggestion) -> Optional[str]:
        request = self._requests.get_by_id(suggestion.request_id)
        if request is None:
            return "unknown request"
        if request.status != RequestStatus.PENDING or request.assigned_to is not None:
            return f"request no longer pending ({request.status.value})"
        if not self._designers.exists(suggestion.designer_id):
            return "unknown designer"
        return None
