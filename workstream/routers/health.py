"""Health check endpoint.

Reports whether the gateway can reach the REST API it fronts.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from workstream.api.client import ApiError, get_api_client
from workstream.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> Any:
    """Return 200 when the API answers a one-item program listing, 503 otherwise."""
    api_status = "disconnected"

    try:
        await get_api_client().request("/programs?limit=1")
        api_status = "connected"
    except ApiError as exc:
        logger.warning(
            "health_check_api_unreachable",
            extra={"status_code": exc.status_code, "error_message": exc.message},
        )

    payload: dict[str, str | None] = {
        "status": "ok" if api_status == "connected" else "degraded",
        "api": api_status,
        "api_url": settings.API_URL,
    }

    if api_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
