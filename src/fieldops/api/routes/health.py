"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fieldops.api.dependencies import AppSettings, DbSession, get_preview_registry
from fieldops.permissions import ALL_PERMISSIONS, PreviewRegistry

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime
    database: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(db: DbSession, app_settings: AppSettings) -> HealthResponse:
    """Report API version and whether the store answers."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        db_status = "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        version=app_settings.app_version,
        timestamp=datetime.now(timezone.utc),
        database=db_status,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check(
    registry: Annotated[PreviewRegistry, Depends(get_preview_registry)],
) -> dict[str, Any]:
    """Readiness check for container orchestration."""
    return {
        "status": "ready",
        "permissions": len(ALL_PERMISSIONS),
        "preview_sessions": len(registry),
    }


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
