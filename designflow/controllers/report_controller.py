# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Timeline, reports, dashboard, and activity endpoints.
Read-only views: no mutation happens behind these routes.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from designflow.core.dependencies import (
    get_activity_repo,
    get_report_service,
    get_timeline_service,
)
from designflow.repositories.activity_repository import ActivityRepository
from designflow.schemas.design import InsightsRequest, InsightsResponse
from designflow.services.reporting import ReportService
from designflow.services.timeline import TimelineService, TimelineWindow

router = APIRouter(prefix="/api/v1", tags=["Reports"])


@router.get("/timeline", response_model=TimelineWindow)
def get_timeline(
    start: Optional[date] = Query(default=None, description="Window start (default: this week's Sunday)"),
    days: Optional[int] = Query(default=None, ge=1, le=92, description="Window length in days"),
    service: TimelineService = Depends(get_timeline_service),
):
    """Per-designer bar layout over a fixed day window."""
    return service.build(start=start, days=days)


@router.get("/reports/volume")
def get_volume(
    service: ReportService = Depends(get_report_service),
):
    """Request counts by type and by business function."""
    return service.volume()


@router.get("/dashboard")
def get_dashboard(
    service: ReportService = Depends(get_report_service),
):
    """Headline counts, recent requests, and designer utilization."""
    return service.dashboard()


@router.post("/reports/insights", response_model=InsightsResponse)
async def generate_insights(
    payload: InsightsRequest,
    service: ReportService = Depends(get_report_service),
):
    """AI executive summary of the report stats, or a fallback message."""
    return await service.generate_insights(payload.period)


@router.get("/activity")
def get_activity(
    request_id: Optional[str] = None,
    event_type: Optional[str] = None,
    limit: int = Query(default=None, ge=1, description="Max results"),
    activity_repo: ActivityRepository = Depends(get_activity_repo),
):
    """Audit log of lifecycle events."""
    return activity_repo.get_all(request_id=request_id, event_type=event_type, limit=limit)
