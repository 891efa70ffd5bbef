# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Designer data access.
Encapsulates all read/write operations on the designers in-memory store.
NO business rules here: pure CRUD.
"""

from typing import Optional

from designflow.models.domain import Designer


class DesignerRepository:
    """In-memory designer storage, keyed by designer id."""

    def __init__(self) -> None:
        self._store: dict[str, Designer] = {}

    # ── Read ──

    def get_all(self) -> list[Designer]:
        return list(self._store.values())

    def get_by_id(self, designer_id: str) -> Optional[Designer]:
        return self._store.get(designer_id)

    def exists(self, designer_id: str) -> bool:
        return designer_id in self._store

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, designer: Designer) -> None:
        self._store[designer.id] = designer

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
