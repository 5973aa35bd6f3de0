from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from intake.core.logging import get_logger
from intake.services.submission_service import SubmissionService

router = APIRouter(prefix="/api", tags=["projects"])
logger = get_logger("api")


def _get_submission_service(request: Request) -> SubmissionService:
    svc = getattr(getattr(request.app, "state", None), "submission_service", None)
    if not svc:
        raise RuntimeError("SubmissionService not configured")
    return svc


def _failure(message: str) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=500)


def _respond(action: Callable[[], dict[str, Any]], message: str) -> JSONResponse:
    # JSONResponse renders in its constructor, so serialization errors land here too
    try:
        return JSONResponse(action())
    except Exception:
        logger.exception(message)
        return _failure(message)


@router.post("/submit")
def submit(payload: dict, request: Request):
    return _respond(lambda: _get_submission_service(request).submit(payload), "Error saving project")


@router.get("/projects")
def list_projects(request: Request):
    return _respond(lambda: _get_submission_service(request).list_projects(), "Error reading projects")


@router.get("/stats")
def stats(request: Request):
    return _respond(lambda: _get_submission_service(request).stats(), "Error getting stats")
