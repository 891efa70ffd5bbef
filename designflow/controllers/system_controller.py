# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints (health, readiness, metrics).
Pure HTTP layer: no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from designflow.core.config import settings
from designflow.core.dependencies import get_designer_repo, get_request_repo
from designflow.repositories.designer_repository import DesignerRepository
from designflow.repositories.request_repository import RequestRepository

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(
    designer_repo: DesignerRepository = Depends(get_designer_repo),
    request_repo: RequestRepository = Depends(get_request_repo),
):
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "designers_count": designer_repo.count(),
        "requests_count": request_repo.count(),
    }


@router.get("/health/ready")
def readiness_check(
    designer_repo: DesignerRepository = Depends(get_designer_repo),
):
    """Readiness probe: assignments need at least one designer."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "designers_loaded": designer_repo.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
