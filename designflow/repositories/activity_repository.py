# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Activity log data access.
Bounded append-only log of every lifecycle event.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from designflow.core.config import settings


class ActivityRepository:
    """In-memory event log (bounded ring buffer)."""

    def __init__(self) -> None:
        self._events: list[dict[str, Any]] = []

    # ── Read ──

    def get_all(
        self,
        request_id: Optional[str] = None,
        event_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        effective_limit = limit or settings.DEFAULT_ACTIVITY_LIMIT
        result = list(self._events)
        if request_id:
            result = [e for e in result if e["request_id"] == request_id]
        if event_type:
            result = [e for e in result if e["event_type"] == event_type]
        return result[-effective_limit:]

    # ── Write ──

    def record_event(
        self, event_type: str, request_id: Optional[str], details: dict[str, Any]
    ) -> dict[str, Any]:
        """Append an event to the log, trimming oldest if over max."""
        event: dict[str, Any] = {
            "event_id": str(uuid.uuid4()),
            "event_type": event_type,
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "details": details,
        }
        self._events.append(event)
        if len(self._events) > settings.MAX_ACTIVITY_SIZE:
            del self._events[: len(self._events) - settings.MAX_ACTIVITY_SIZE]
        return event

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._events.clear()
