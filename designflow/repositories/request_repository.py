# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Design request data access.
Keeps insertion order, which is also the timeline render order.
"""

from typing import Optional

from designflow.models.domain import DesignRequest, RequestStatus


class RequestRepository:
    """In-memory design request storage."""

    def __init__(self) -> None:
        self._store: dict[str, DesignRequest] = {}

    # ── Read ──

    def get_all(self, status: Optional[RequestStatus] = None) -> list[DesignRequest]:
        if status is None:
            return list(self._store.values())
        return [r for r in self._store.values() if r.status == status]

    def get_by_id(self, request_id: str) -> Optional[DesignRequest]:
        return self._store.get(request_id)

    def count(self) -> int:
        return len(self._store)

    def count_by_status(self) -> dict[str, int]:
        """Return a dict of status -> count."""
        counts: dict[str, int] = {}
        for r in self._store.values():
            counts[r.status.value] = counts.get(r.status.value, 0) + 1
        return counts

    # ── Write ──

    def save(self, request: DesignRequest) -> None:
        self._store[request.id] = request

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
