# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
DesignFlow Scheduling Service
=============================
Tracks design requests from intake through assignment, execution, review,
and client approval across a pool of designers with weekly capacity.

Request lifecycle:
    Pending ─► In Progress ─► Review ─► Completed
    Approval feedback   ─► Completed
    Change Request      ─► In Progress
    (any non-terminal)  ─► Blocked

Port: 8010
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from designflow.controllers import (
    designer_controller,
    report_controller,
    request_controller,
    suggestion_controller,
    system_controller,
)
from designflow.core.config import settings
from designflow.core.dependencies import get_designer_service, get_request_service
from designflow.core.logging import get_logger
from designflow.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)

SERVICE_NAME = settings.SERVICE_NAME
SERVICE_VERSION = settings.SERVICE_VERSION


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Seed demo data on startup when enabled."""
    if settings.SEED_DEMO_DATA:
        get_designer_service().seed_defaults()
        get_request_service().seed_defaults()
    logger.info(
        "%s v%s starting: hours policy=%s, timeline days=%d",
        SERVICE_NAME, SERVICE_VERSION,
        settings.ASSIGNMENT_HOURS_POLICY, settings.TIMELINE_DAYS,
    )
    yield
    logger.info("%s shutting down", SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="DesignFlow Scheduling Service",
    description="Design request intake, capacity-aware assignment, review "
                "feedback, and per-designer timeline layout.",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(designer_controller.router)
app.include_router(request_controller.router)
app.include_router(suggestion_controller.router)
app.include_router(report_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
