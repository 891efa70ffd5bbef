# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Designer administration: creation and lookups.
assigned_hours is never written here; only assignment moves it.
"""

import uuid
from typing import Any, Optional

from designflow.core.errors import NotFound
from designflow.core.logging import get_logger
from designflow.metrics.prometheus import DESIGNER_LOAD_HOURS
from designflow.models.domain import Designer
from designflow.repositories.activity_repository import ActivityRepository
from designflow.repositories.designer_repository import DesignerRepository

logger = get_logger(__name__)

DEFAULT_DESIGNERS: list[dict[str, Any]] = [
    {
        "id": "d1", "name": "Alice Chen", "role": "Senior UI Designer",
        "avatar": "https://picsum.photos/32/32?random=1",
        "skills": ["Web", "Mobile", "Figma"],
        "capacity_hours": 40, "assigned_hours": 25,
    },
    {
        "id": "d2", "name": "Bob Smith", "role": "Graphic Designer",
        "avatar": "https://picsum.photos/32/32?random=2",
        "skills": ["Print", "Branding", "Illustrator"],
        "capacity_hours": 40, "assigned_hours": 38,
    },
    {
        "id": "d3", "name": "Charlie Kim", "role": "Motion Designer",
        "avatar": "https://picsum.photos/32/32?random=3",
        "skills": ["Motion", "Video", "After Effects"],
        "capacity_hours": 35, "assigned_hours": 10,
    },
    {
        "id": "d4", "name": "Diana Prince", "role": "UX Researcher",
        "avatar": "https://picsum.photos/32/32?random=4",
        "skills": ["Research", "Testing", "Wireframing"],
        "capacity_hours": 40, "assigned_hours": 30,
    },
]


class DesignerService:
    """Business logic for the designer pool."""

    def __init__(
        self,
        designer_repo: DesignerRepository,
        activity_repo: ActivityRepository,
    ) -> None:
        self._designers = designer_repo
        self._activity = activity_repo

    # ── Commands ──

    def create_designer(
        self,
        name: str,
        role: str,
        capacity_hours: float,
        skills: Optional[list[str]] = None,
        avatar: Optional[str] = None,
        designer_id: Optional[str] = None,
    ) -> Designer:
        """Register a designer with no current load. Raises ValueError on duplicate id."""
        designer_id = designer_id or f"d-{uuid.uuid4().hex[:8]}"
        if self._designers.exists(designer_id):
            raise ValueError(f"Designer '{designer_id}' already exists")

        designer = Designer(
            id=designer_id,
            name=name,
            role=role,
            avatar=avatar,
            skills=skills or [],
            capacity_hours=capacity_hours,
            assigned_hours=0,
        )
        self._designers.save(designer)
        DESIGNER_LOAD_HOURS.labels(designer=designer.id).set(0)
        self._activity.record_event(
            "designer_created",
            None,
            {"designer_id": designer.id, "name": name, "capacity_hours": capacity_hours},
        )
        logger.info("Designer created: id=%s, name=%s", designer.id, name)
        return designer

    # ── Queries ──

    def list_designers(self) -> list[Designer]:
        return self._designers.get_all()

    def get_designer(self, designer_id: str) -> Designer:
        designer = self._designers.get_by_id(designer_id)
        if designer is None:
            raise NotFound("designer", designer_id)
        return designer

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Load the demo designer pool so the service is usable immediately."""
        for data in DEFAULT_DESIGNERS:
            designer = Designer(**data)
            self._designers.save(designer)
            DESIGNER_LOAD_HOURS.labels(designer=designer.id).set(designer.assigned_hours)
        logger.info("Seeded %d default designers", len(DEFAULT_DESIGNERS))
