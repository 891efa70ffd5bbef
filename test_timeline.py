# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Unit tests for the timeline layout engine.
"""

from datetime import date, timedelta

import pytest

from designflow.models.domain import Designer, DesignRequest
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services.timeline import (
    TimelineService,
    layout_request,
    layout_timeline,
    week_start,
    window_days,
)

WINDOW_START = date(2026, 10, 18)  # a Sunday


def scheduled(request_id="r1", owner="d1", start=0, due=5, **overrides) -> DesignRequest:
    data = {
        "id": request_id,
        "title": f"Task {request_id}",
        "client": "Marketing Team",
        "requestor": "Sarah Connor",
        "type": "Social Media",
        "business_function": "Marketing",
        "status": "In Progress",
        "assigned_to": owner,
        "start_date": WINDOW_START + timedelta(days=start),
        "due_date": WINDOW_START + timedelta(days=due),
        "estimated_hours": 12,
    }
    data.update(overrides)
    return DesignRequest(**data)


def designer(designer_id, name="Designer") -> Designer:
    return Designer(id=designer_id, name=name, role="Designer", capacity_hours=40)


class TestWeekStart:
    @pytest.mark.parametrize("today", [
        date(2026, 10, 18),
        date(2026, 10, 19),
        date(2026, 10, 24),
    ])
    def test_sunday_on_or_before(self, today):
        assert week_start(today) == WINDOW_START

    def test_window_days(self):
        days = window_days(WINDOW_START, 14)
        assert len(days) == 14
        assert days[0] == WINDOW_START
        assert days[-1] == date(2026, 10, 31)


class TestLayoutRequest:
    def test_inside_window(self):
        bar = layout_request(scheduled(start=2, due=4), WINDOW_START, 14)
        assert bar.offset_days == 2
        assert bar.duration_days == 3
        assert bar.left == pytest.approx(2 / 14)
        assert bar.width == pytest.approx(3 / 14)

    def test_started_before_window_is_clipped(self):
        bar = layout_request(scheduled(start=-3, due=2), WINDOW_START, 14)
        assert bar.offset_days == 0
        assert bar.duration_days == 3
        assert bar.left == 0

    def test_due_before_window_is_excluded(self):
        assert layout_request(scheduled(start=-6, due=-2), WINDOW_START, 14) is None

    def test_due_day_before_window_is_excluded(self):
        assert layout_request(scheduled(start=-4, due=-1), WINDOW_START, 14) is None

    def test_after_window_is_excluded(self):
        assert layout_request(scheduled(start=14, due=20), WINDOW_START, 14) is None

    def test_same_day_task_is_one_day(self):
        bar = layout_request(scheduled(start=3, due=3), WINDOW_START, 14)
        assert bar.duration_days == 1

    def test_due_before_start_is_excluded(self):
        assert layout_request(scheduled(start=5, due=3), WINDOW_START, 14) is None

    def test_minimum_width(self):
        bar = layout_request(scheduled(start=0, due=0), WINDOW_START, 92, min_width=0.02)
        assert bar.width == 0.02

    def test_overrun_past_window_end_is_not_clipped(self):
        bar = layout_request(scheduled(start=10, due=30), WINDOW_START, 14)
        assert bar.duration_days == 21
        assert bar.left + bar.width > 1

    def test_unscheduled_request_has_no_bar(self):
        request = DesignRequest(
            id="r3", title="Product Demo Video", client="Product Team",
            requestor="Mike Ross", type="Video", business_function="Product",
            due_date=WINDOW_START,
        )
        assert layout_request(request, WINDOW_START, 14) is None

    def test_zero_day_window_rejected(self):
        with pytest.raises(ValueError):
            layout_request(scheduled(), WINDOW_START, 0)


class TestLayoutTimeline:
    def test_rows_follow_designer_order(self):
        window = layout_timeline(
            [designer("d2"), designer("d1"), designer("d3")],
            [scheduled("r1", owner="d1"), scheduled("r2", owner="d2")],
            WINDOW_START,
        )
        assert [row.designer_id for row in window.rows] == ["d2", "d1", "d3"]
        assert window.rows[2].bars == []

    def test_bars_keep_insertion_order_and_overlap(self):
        requests = [
            scheduled("r1", owner="d1", start=0, due=5),
            scheduled("r7", owner="d1", start=2, due=3),
            scheduled("r8", owner="d2", start=1, due=2),
        ]
        window = layout_timeline([designer("d1")], requests, WINDOW_START)
        bars = window.rows[0].bars
        assert [b.request_id for b in bars] == ["r1", "r7"]
        assert bars[1].left < bars[0].left + bars[0].width

    def test_requests_for_unknown_designers_are_ignored(self):
        window = layout_timeline([designer("d1")], [scheduled("r9", owner="d9")], WINDOW_START)
        assert window.rows[0].bars == []


class TestTimelineService:
    def test_default_window_from_today(self):
        designers, requests = DesignerRepository(), RequestRepository()
        designers.save(designer("d1", "Alice Chen"))
        requests.save(scheduled("r1", owner="d1", start=1, due=3))
        service = TimelineService(requests, designers, days=7, today=lambda: date(2026, 10, 21))

        window = service.build()
        assert window.window_start == WINDOW_START
        assert len(window.days) == 7
        assert window.rows[0].designer_name == "Alice Chen"
        assert window.rows[0].bars[0].offset_days == 1

    def test_explicit_window(self):
        designers, requests = DesignerRepository(), RequestRepository()
        designers.save(designer("d1"))
        requests.save(scheduled("r1", owner="d1", start=1, due=3))
        service = TimelineService(requests, designers)

        window = service.build(start=WINDOW_START + timedelta(days=2), days=3)
        bar = window.rows[0].bars[0]
        assert bar.offset_days == 0
        assert bar.duration_days == 2
