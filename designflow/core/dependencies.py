# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.
The repositories below are the one owned entity store; every consumer
receives it through these functions.
"""

from designflow.core.config import settings
from designflow.repositories.activity_repository import ActivityRepository
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services.advisory_client import AdvisoryClient
from designflow.services.assignment_service import AssignmentService, HoursPolicy
from designflow.services.designer_service import DesignerService
from designflow.services.reporting import ReportService
from designflow.services.request_service import RequestService
from designflow.services.timeline import TimelineService

# ── Singleton repository instances (in-memory stores) ──
_designer_repo = DesignerRepository()
_request_repo = RequestRepository()
_activity_repo = ActivityRepository()
_advisory_client = AdvisoryClient()

# ── Service instances (with injected dependencies) ──
_designer_service = DesignerService(
    designer_repo=_designer_repo,
    activity_repo=_activity_repo,
)
_request_service = RequestService(
    request_repo=_request_repo,
    activity_repo=_activity_repo,
)
_assignment_service = AssignmentService(
    request_repo=_request_repo,
    designer_repo=_designer_repo,
    activity_repo=_activity_repo,
    advisory_client=_advisory_client,
    hours_policy=HoursPolicy.from_settings(),
)
_timeline_service = TimelineService(
    request_repo=_request_repo,
    designer_repo=_designer_repo,
    days=settings.TIMELINE_DAYS,
    min_width=settings.TIMELINE_MIN_WIDTH,
)
_report_service = ReportService(
    request_repo=_request_repo,
    designer_repo=_designer_repo,
    advisory_client=_advisory_client,
)


# ── FastAPI dependency functions ──
def get_designer_service() -> DesignerService:
    return _designer_service


def get_request_service() -> RequestService:
    return _request_service


def get_assignment_service() -> AssignmentService:
    return _assignment_service


def get_timeline_service() -> TimelineService:
    return _timeline_service


def get_report_service() -> ReportService:
    return _report_service


def get_designer_repo() -> DesignerRepository:
    return _designer_repo


def get_request_repo() -> RequestRepository:
    return _request_repo


def get_activity_repo() -> ActivityRepository:
    return _activity_repo
