"""SyncN Calendar API — FastAPI application entry point.

Run locally:
    uvicorn syncn.main:app --reload --port 8000
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from syncn.config import get_settings
from syncn.cycle_calendar.config_loader import get_calendar_config, reload_calendar_config
from syncn.middleware.security import SecurityHeadersMiddleware
from syncn.routers import calendar, health

# ---------- Logging ----------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger("syncn")


# ---------- Lifespan ----------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup / shutdown hooks."""
    settings = get_settings()
    logging.getLogger("syncn").setLevel(settings.log_level.upper())
    logger.info(
        "Starting %s v%s [%s]",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )
    if settings.calendar_config_path:
        reload_calendar_config(Path(settings.calendar_config_path))
    else:
        get_calendar_config()
    yield
    logger.info("%s shut down", settings.app_name)


# ---------- App factory ----------

def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="SyncN Calendar API",
        description=(
            "Cycle-phase calendar annotations — month grids, per-day phases "
            "and widening-window flags for the SyncN app."
        ),
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Security headers on every response
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS: must be the innermost middleware so it can handle preflight
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- Health check (outside v1 prefix, always at /health) ----------
    app.include_router(health.router)

    # ---------- API v1 routes ----------
    app.include_router(calendar.router, prefix="/api/v1")

    return app


app = create_app()
