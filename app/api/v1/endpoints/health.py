"""Health check endpoints: liveness and readiness (database ping)."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 if the catalog backend can serve reads; 503 otherwise.

    The memory backend is always ready. Postgres must answer SELECT 1.
    """
    backend = get_settings().database_backend
    if backend == "memory" or await database.ping():
        return ReadinessResponse(backend=backend)
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(message="Database unreachable").model_dump(),
    )
