# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Aggregation & reporting: read-only views over the stores.
"""

from typing import Any, Iterable

from designflow.core.logging import get_logger
from designflow.models.domain import Designer, DesignRequest, RequestStatus
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository
from designflow.services.advisory_client import AdvisoryClient

logger = get_logger(__name__)

RECENT_REQUESTS_LIMIT = 5


def count_by(requests: Iterable[DesignRequest], field: str) -> list[dict[str, Any]]:
    """(category, count) pairs in first-seen order. Unseen categories never appear."""
    counts: dict[str, int] = {}
    for r in requests:
        key = getattr(r, field)
        counts[key] = counts.get(key, 0) + 1
    return [{"name": name, "value": value} for name, value in counts.items()]


def type_data(requests: Iterable[DesignRequest]) -> list[dict[str, Any]]:
    return count_by(requests, "type")


def function_data(requests: Iterable[DesignRequest]) -> list[dict[str, Any]]:
    return count_by(requests, "business_function")


def designer_utilization(designers: Iterable[Designer]) -> list[dict[str, Any]]:
    return [
        {
            "designer_id": d.id,
            "name": d.name,
            "assigned_hours": d.assigned_hours,
            "capacity_hours": d.capacity_hours,
            "utilization": round(d.utilization, 4),
            "overallocated": d.is_overallocated,
        }
        for d in designers
    ]


def dashboard_summary(
    requests: list[DesignRequest], designers: list[Designer]
) -> dict[str, Any]:
    recent = sorted(requests, key=lambda r: r.created_at, reverse=True)
    return {
        "total_requests": len(requests),
        "pending": sum(1 for r in requests if r.status == RequestStatus.PENDING),
        "in_progress": sum(1 for r in requests if r.status == RequestStatus.IN_PROGRESS),
        "designers_active": len(designers),
        "recent_requests": [
            {
                "id": r.id,
                "title": r.title,
                "status": r.status.value,
                "due_date": r.due_date.isoformat(),
            }
            for r in recent[:RECENT_REQUESTS_LIMIT]
        ],
        "utilization": designer_utilization(designers),
    }


class ReportService:
    """Assembles report data and the optional AI executive summary."""

    def __init__(
        self,
        request_repo: RequestRepository,
        designer_repo: DesignerRepository,
        advisory_client: AdvisoryClient,
    ) -> None:
        self._requests = request_repo
        self._designers = designer_repo
        self._advisory = advisory_client

    def volume(self) -> dict[str, Any]:
        requests = self._requests.get_all()
        return {
            "total_requests": len(requests),
            "type_data": type_data(requests),
            "function_data": function_data(requests),
            "status_counts": self._requests.count_by_status(),
        }

    def dashboard(self) -> dict[str, Any]:
        return dashboard_summary(self._requests.get_all(), self._designers.get_all())

    async def generate_insights(self, period: str) -> dict[str, Any]:
        stats = self.volume()
        stats["utilization"] = designer_utilization(self._designers.get_all())
        insight = await self._advisory.summarize(period, stats)
        logger.info("Insights generated: period=%s, chars=%d", period, len(insight))
        return {"period": period, "insight": insight, "stats": stats}
