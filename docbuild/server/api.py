from __future__ import annotations

from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .settings import ServerSettings


def create_app(site_dir: Path) -> FastAPI:
    """Serve a generated documentation directory, with ``index.html`` for directory requests."""

    if not site_dir.is_dir():
        raise FileNotFoundError(f"Site directory not found: {site_dir}")

    app = FastAPI(title="volplugin docs", version="0.1.0")

    @app.get("/api/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    app.mount("/", StaticFiles(directory=site_dir, html=True), name="site")
    return app


def serve(settings: ServerSettings) -> None:
    app = create_app(settings.site_dir)
    uvicorn.run(app, host=settings.host, port=settings.port)


__all__ = ["create_app", "serve"]
