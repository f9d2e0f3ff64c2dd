"""Administrative endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

from profiles.core.config import settings

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health")
async def healthcheck() -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "environment": settings.ENVIRONMENT}


@router.get("/config")
async def configuration_snapshot() -> Dict[str, str]:
    """Return a limited configuration snapshot for admins."""

    return {
        "api_title": settings.API_TITLE,
        "environment": settings.ENVIRONMENT,
        "name_separator": settings.NAME_SEPARATOR,
    }
