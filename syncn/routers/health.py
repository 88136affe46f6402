"""Health check endpoint — public, no auth required."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from syncn.config import get_settings
from syncn.cycle_calendar.config_loader import get_calendar_config

router = APIRouter(tags=["system"])
logger = logging.getLogger("syncn.health")


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe. Returns 200 if the API process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "calendar_config": get_calendar_config().version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
