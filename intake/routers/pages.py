"""Frontend routes: static files from the public directory, index.html otherwise."""
from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from intake.core.logging import get_logger

INDEX_FILE = "index.html"
logger = get_logger("pages")


class FrontendStaticFiles(StaticFiles):
    """StaticFiles that answers unknown paths with the frontend entry file."""

    async def get_response(self, path, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response(INDEX_FILE, scope)


def mount_frontend(app: FastAPI, public_dir: Path) -> bool:
    """Mount the catch-all last so the API routes are matched first."""
    if not public_dir.is_dir():
        logger.warning("Public directory %s not found; frontend disabled", public_dir)
        return False
    app.mount(
        "/",
        FrontendStaticFiles(directory=str(public_dir), html=True, check_dir=False),
        name="frontend",
    )
    return True
