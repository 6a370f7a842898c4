"""FastAPI application for the map loader."""
from __future__ import annotations

from fastapi import FastAPI

from maploader.incremental_clone.routes import router


def create_app() -> FastAPI:
    app = FastAPI(title="Map Loader", version="0.1.0")
    app.include_router(router)
    return app


app = create_app()
