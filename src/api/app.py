from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings
from core.logging import get_logger

from api.routes.health import router as health_router
from api.routes.matches import router as matches_router

logger = get_logger("api.app")


def create_app() -> FastAPI:
    app = FastAPI(title="H2H Board API", version="0.1.0")
    try:
        get_settings()
    except Exception as exc:  # pragma: no cover
        logger.error("Impossibile caricare settings: %s", exc)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(health_router)
    app.include_router(matches_router)
    return app


app = create_app()
