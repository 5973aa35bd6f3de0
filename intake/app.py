from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intake.core.config import Settings, get_settings
from intake.core.logging import get_logger
from intake.repositories.json_storage import SubmissionRepository
from intake.routers import pages as pages_router
from intake.routers import projects as projects_router
from intake.services.submission_service import SubmissionService


def create_app(settings: Settings | None = None, service: SubmissionService | None = None) -> FastAPI:
    """Build the intake API; compatible with ``uvicorn --factory``."""
    settings = settings or get_settings()
    app = FastAPI(title="Project Intake API")

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # credentials only with an explicit origin list
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    if service is None:
        repository = SubmissionRepository(settings.data_dir)
        repository.ensure_directory()
        service = SubmissionService(repository, logger=get_logger("submissions"))
    app.state.submission_service = service

    app.include_router(projects_router.router)
    pages_router.mount_frontend(app, settings.public_dir)
    return app
