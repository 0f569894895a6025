"""FastAPI application factory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI

from .metrics import instrument_app
from .metrics import router as metrics_router
from .routers.silence import router as silence_router
from .schemas import HealthResponse
from .settings import get_settings

LOGGER = logging.getLogger("quietcut.api")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, version=settings.version)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(
            ok=True,
            version=settings.version,
            timestamp=datetime.now(timezone.utc),
        )

    app.include_router(silence_router)
    app.include_router(metrics_router)
    instrument_app(app)
    LOGGER.info(
        "Starting %s (threshold=%.4f, step=%d)",
        settings.app_name,
        settings.silence_threshold,
        settings.scan_step,
    )
    return app
