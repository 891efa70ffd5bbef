# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Unit tests for the assignment service: hours policy, assignment, and
re-validation of advisory suggestions.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from designflow.core.errors import InvalidTransition, NotFound
from designflow.models.domain import FeedbackType, RequestStatus, Suggestion
from designflow.repositories.activity_repository import ActivityRepository
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services.assignment_service import AssignmentService, HoursPolicy
from designflow.services.designer_service import DesignerService
from designflow.services.request_service import RequestService

TODAY = date(2026, 10, 19)


# ============================================
# Fixtures
# ============================================
@pytest.fixture
def repos():
    designers, requests, activity = DesignerRepository(), RequestRepository(), ActivityRepository()
    DesignerService(designers, activity).seed_defaults()
    RequestService(requests, activity, today=lambda: TODAY).seed_defaults()
    return designers, requests, activity


@pytest.fixture
def advisory():
    client = MagicMock()
    client.suggest_assignments = AsyncMock(return_value=[])
    return client


def make_service(repos, advisory, policy=None):
    designers, requests, activity = repos
    return AssignmentService(
        requests, designers, activity, advisory,
        hours_policy=policy or HoursPolicy("flat", 5),
        today=lambda: TODAY,
    )


# ============================================
# Hours policy
# ============================================
class TestHoursPolicy:
    def test_flat_ignores_estimate(self, repos):
        _, requests, _ = repos
        assert HoursPolicy("flat", 5).hours_for(requests.get_by_id("r3")) == 5

    def test_estimated_uses_request_hours(self, repos):
        _, requests, _ = repos
        assert HoursPolicy("estimated").hours_for(requests.get_by_id("r3")) == 20

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            HoursPolicy("hourly")

    def test_negative_flat_hours_rejected(self):
        with pytest.raises(ValueError):
            HoursPolicy("flat", -1)


# ============================================
# Assignment
# ============================================
class TestAssign:
    def test_assign_r5_to_d1(self, repos, advisory):
        designers, requests, _ = repos
        service = make_service(repos, advisory)

        request = service.assign("r5", "d1")

        assert request.status == RequestStatus.IN_PROGRESS
        assert request.assigned_to == "d1"
        assert request.start_date == TODAY
        assert designers.get_by_id("d1").assigned_hours == 30
        assert requests.get_by_id("r5") is request

    def test_estimated_policy(self, repos, advisory):
        designers, _, _ = repos
        service = make_service(repos, advisory, HoursPolicy("estimated"))
        service.assign("r5", "d1")
        assert designers.get_by_id("d1").assigned_hours == 33

    def test_already_assigned(self, repos, advisory):
        designers, requests, _ = repos
        service = make_service(repos, advisory)
        with pytest.raises(InvalidTransition):
            service.assign("r1", "d3")
        assert requests.get_by_id("r1").assigned_to == "d1"
        assert designers.get_by_id("d3").assigned_hours == 10

    def test_unknown_request(self, repos, advisory):
        service = make_service(repos, advisory)
        with pytest.raises(NotFound) as exc_info:
            service.assign("r404", "d1")
        assert exc_info.value.kind == "request"

    def test_unknown_designer(self, repos, advisory):
        _, requests, _ = repos
        service = make_service(repos, advisory)
        with pytest.raises(NotFound) as exc_info:
            service.assign("r5", "d404")
        assert exc_info.value.kind == "designer"
        assert requests.get_by_id("r5").status == RequestStatus.PENDING

    def test_records_activity(self, repos, advisory):
        _, _, activity = repos
        service = make_service(repos, advisory)
        service.assign("r6", "d4")
        event = activity.get_all(event_type="request_assigned")[-1]
        assert event["request_id"] == "r6"
        assert event["details"]["hours_added"] == 5
        assert event["details"]["from"] == "Pending"
        assert event["details"]["start_date"] == TODAY.isoformat()


# ============================================
# Suggestions
# ============================================
class TestRequestSuggestions:
    @pytest.mark.asyncio
    async def test_passes_pending_requests_and_all_designers(self, repos, advisory):
        proposed = [Suggestion(request_id="r5", designer_id="d1", rationale="Web skills")]
        advisory.suggest_assignments.return_value = proposed
        service = make_service(repos, advisory)

        result = await service.request_suggestions()

        assert result == proposed
        designers, pending = advisory.suggest_assignments.await_args.args
        assert [d.id for d in designers] == ["d1", "d2", "d3", "d4"]
        assert [r.id for r in pending] == ["r3", "r5", "r6"]

    @pytest.mark.asyncio
    async def test_suggestions_do_not_mutate(self, repos, advisory):
        designers, requests, _ = repos
        advisory.suggest_assignments.return_value = [
            Suggestion(request_id="r5", designer_id="d1"),
        ]
        service = make_service(repos, advisory)
        await service.request_suggestions()
        assert requests.get_by_id("r5").status == RequestStatus.PENDING
        assert designers.get_by_id("d1").assigned_hours == 25


class TestApplySuggestion:
    def test_apply_valid(self, repos, advisory):
        designers, _, _ = repos
        service = make_service(repos, advisory)
        request = service.apply_suggestion(Suggestion(request_id="r3", designer_id="d3"))
        assert request.assigned_to == "d3"
        assert designers.get_by_id("d3").assigned_hours == 15

    def test_stale_after_manual_assignment(self, repos, advisory):
        designers, requests, activity = repos
        service = make_service(repos, advisory)
        service.assign("r3", "d1")

        result = service.apply_suggestion(Suggestion(request_id="r3", designer_id="d2"))

        assert result is None
        assert requests.get_by_id("r3").assigned_to == "d1"
        assert designers.get_by_id("d2").assigned_hours == 38
        event = activity.get_all(event_type="suggestion_discarded")[-1]
        assert event["details"]["reason"].startswith("request no longer pending")

    def test_not_pending_without_owner(self, repos, advisory):
        _, requests, _ = repos
        requests.get_by_id("r3").status = RequestStatus.BLOCKED
        service = make_service(repos, advisory)
        assert service.apply_suggestion(Suggestion(request_id="r3", designer_id="d3")) is None
        assert requests.get_by_id("r3").assigned_to is None

    @pytest.mark.parametrize("request_id, designer_id, reason", [
        ("r404", "d1", "unknown request"),
        ("r5", "d404", "unknown designer"),
    ])
    def test_dangling_ids(self, repos, advisory, request_id, designer_id, reason):
        _, _, activity = repos
        service = make_service(repos, advisory)
        assert service.apply_suggestion(
            Suggestion(request_id=request_id, designer_id=designer_id)
        ) is None
        assert activity.get_all(event_type="suggestion_discarded")[-1]["details"]["reason"] == reason

    def test_apply_is_idempotent(self, repos, advisory):
        designers, _, _ = repos
        service = make_service(repos, advisory)
        suggestion = Suggestion(request_id="r6", designer_id="d4")
        assert service.apply_suggestion(suggestion) is not None
        assert service.apply_suggestion(suggestion) is None
        assert designers.get_by_id("d4").assigned_hours == 35


class TestInvariants:
    def test_owner_and_start_date_stay_paired(self, repos, advisory):
        _, requests, _ = repos
        service = make_service(repos, advisory)
        request_service = RequestService(requests, repos[2], today=lambda: TODAY)

        service.assign("r5", "d2")
        service.apply_suggestion(Suggestion(request_id="r6", designer_id="d3"))
        service.apply_suggestion(Suggestion(request_id="r5", designer_id="d3"))
        request_service.set_status("r3", RequestStatus.BLOCKED)
        with pytest.raises(InvalidTransition):
            service.assign("r1", "d4")

        for request in requests.get_all():
            assert (request.assigned_to is None) == (request.start_date is None)

    def test_pending_requests_never_have_owners(self, repos, advisory):
        designers, requests, activity = repos
        service = make_service(repos, advisory)
        request_service = RequestService(requests, activity, today=lambda: TODAY)

        request_service.record_feedback("r3", FeedbackType.APPROVAL)
        with pytest.raises(InvalidTransition):
            service.assign("r3", "d3")
        assert service.apply_suggestion(Suggestion(request_id="r3", designer_id="d3")) is None

        service.assign("r5", "d1")
        request_service.record_feedback("r4", FeedbackType.CHANGE_REQUEST, "Use the new palette")
        request_service.record_feedback("r6", FeedbackType.GENERAL, "Any news?")
        with pytest.raises(InvalidTransition):
            request_service.set_status("r1", RequestStatus.PENDING)
        request_service.set_status("r2", RequestStatus.REVIEW)
        request_service.set_status("r6", RequestStatus.BLOCKED)
        request_service.set_status("r6", RequestStatus.PENDING)
        service.assign("r6", "d4")
        with pytest.raises(InvalidTransition):
            request_service.set_status("r6", RequestStatus.PENDING)

        for request in requests.get_all():
            assert (request.assigned_to is None) == (request.start_date is None)
            if request.status == RequestStatus.PENDING:
                assert request.assigned_to is None
        assert requests.get_by_id("r3").status == RequestStatus.COMPLETED
        assert designers.get_by_id("d1").assigned_hours == 30
        assert designers.get_by_id("d3").assigned_hours == 10
        assert designers.get_by_id("d4").assigned_hours == 35
