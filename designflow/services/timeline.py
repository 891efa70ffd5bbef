# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Timeline layout: pure computation, no side effects.
Projects each scheduled request onto a fixed N-day window as a fractional
(left, width) bar inside its designer's row.
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from pydantic import BaseModel

from designflow.models.domain import Designer, DesignRequest, RequestStatus

DEFAULT_WINDOW_DAYS = 14
DEFAULT_MIN_WIDTH = 0.02


class TimelineBar(BaseModel):
    request_id: str
    title: str
    status: RequestStatus
    estimated_hours: float
    start_date: date
    due_date: date
    offset_days: int
    duration_days: int
    left: float
    width: float


class TimelineRow(BaseModel):
    designer_id: str
    designer_name: str
    designer_role: str
    bars: list[TimelineBar]


class TimelineWindow(BaseModel):
    window_start: date
    days: list[date]
    rows: list[TimelineRow]


def week_start(today: date) -> date:
    """Sunday on or before ``today``."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


def window_days(start: date, days: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    return [start + timedelta(days=i) for i in range(days)]


def layout_request(
    request: DesignRequest,
    start: date,
    days: int = DEFAULT_WINDOW_DAYS,
    min_width: float = DEFAULT_MIN_WIDTH,
) -> Optional[TimelineBar]:
    """
    Return the bar for one request, or None when it is unscheduled or falls
    entirely outside the window.
    """
    if days <= 0:
        raise ValueError("Timeline window must span at least one day")
    if not request.is_scheduled:
        return None

    offset_days = (request.start_date - start).days
    duration_days = (request.due_date - request.start_date).days + 1

    # Started before the window: keep only the visible part.
    if offset_days < 0:
        duration_days += offset_days
        offset_days = 0

    if duration_days <= 0 or offset_days >= days:
        return None

    return TimelineBar(
        request_id=request.id,
        title=request.title,
        status=request.status,
        estimated_hours=request.estimated_hours,
        start_date=request.start_date,
        due_date=request.due_date,
        offset_days=offset_days,
        duration_days=duration_days,
        left=offset_days / days,
        width=max(duration_days / days, min_width),
    )


def layout_timeline(
    designers: Iterable[Designer],
    requests: Iterable[DesignRequest],
    start: date,
    days: int = DEFAULT_WINDOW_DAYS,
    min_width: float = DEFAULT_MIN_WIDTH,
) -> TimelineWindow:
    """
    One row per designer, bars in request insertion order.
    Overlapping bars are left overlapping.
    """
    requests = list(requests)
    rows: list[TimelineRow] = []
    for designer in designers:
        bars: list[TimelineBar] = []
        for request in requests:
            if request.assigned_to != designer.id or not request.is_scheduled:
                continue
            bar = layout_request(request, start, days, min_width)
            if bar is not None:
                bars.append(bar)
        rows.append(
            TimelineRow(
                designer_id=designer.id,
                designer_name=designer.name,
                designer_role=designer.role,
                bars=bars,
            )
        )
    return TimelineWindow(
        window_start=start,
        days=window_days(start, days),
        rows=rows,
    )


class TimelineService:
    """Read-only timeline view over the stores."""

    def __init__(
        self,
        request_repo,
        designer_repo,
        days: int = DEFAULT_WINDOW_DAYS,
        min_width: float = DEFAULT_MIN_WIDTH,
        today=date.today,
    ) -> None:
        self._requests = request_repo
        self._designers = designer_repo
        self._days = days
        self._min_width = min_width
        self._today = today

    def build(self, start: Optional[date] = None, days: Optional[int] = None) -> TimelineWindow:
        """Lay out the window starting at ``start`` (default: this week's Sunday)."""
        return layout_timeline(
            self._designers.get_all(),
            self._requests.get_all(),
            start or week_start(self._today()),
            days or self._days,
            self._min_width,
        )
