"""FastAPI application entry point.

Hosts the student, admin, university and employer portals as routers over
the Workstream REST API, with CORS, logging and lifespan hooks.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from workstream.api.client import ApiError, reset_api_client
from workstream.core.config import settings
from workstream.core.logging import setup_logging
from workstream.routers import admin, employer, health, student, university

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Set up logging on startup; drop the API client on shutdown."""
    setup_logging()
    logger.info("Portal gateway starting up", extra={"api_url": settings.API_URL})
    yield
    reset_api_client()
    logger.info("Portal gateway shutting down")


app = FastAPI(
    title="Workstream Portals",
    description="Student, admin, university and employer portals over the Workstream API",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Upstream errors
# ---------------------------------------------------------------------------
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Relay the API's status and message; unreachable API becomes 502."""
    status_code = exc.status_code or 502
    logger.error(
        "portal_request_failed",
        extra={
            "path": request.url.path,
            "status_code": status_code,
            "error_message": exc.message,
        },
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(student.router, prefix="/portals/student", tags=["Student"])
app.include_router(admin.router, prefix="/portals/admin", tags=["Admin"])
app.include_router(university.router, prefix="/portals/university", tags=["University"])
app.include_router(employer.router, prefix="/portals/employer", tags=["Employer"])
