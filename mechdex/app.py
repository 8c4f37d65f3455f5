"""
FastAPI application entry point for the Mech-Dex backend.
"""

from __future__ import annotations

from fastapi import FastAPI

from mechdex.config import get_settings
from mechdex.routes import router


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Mech-Dex KeySwitch Admin", version="0.1.0")
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
