"""Submission use cases (store, list, aggregate)."""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Any, Callable, Mapping
import logging

from intake.core.logging import get_logger
from intake.domain.stats import build_stats, iso_timestamp
from intake.repositories.json_storage import SubmissionRepository

SUMMARY_FIELDS = ("projectName", "websiteType", "email", "submittedAt")


class SubmissionError(Exception):
    """Base exception for the submission workflow."""


class StorageWriteError(SubmissionError):
    """Raised when a submission cannot be written to the storage directory."""


class StorageReadError(SubmissionError):
    """Raised when the storage directory cannot be listed or a file cannot be parsed."""


def _field(record: Mapping[str, Any], key: str) -> str:
    if key not in record:
        return "undefined"
    value = record[key]
    return "null" if value is None else str(value)


class SubmissionService:
    """Stores submissions and answers the listing/stats queries."""

    def __init__(
        self,
        repository: SubmissionRepository,
        logger: logging.Logger | None = None,
        today: Callable[[], date] | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self.repository = repository
        self.logger = logger or get_logger("submissions")
        self._today = today or date.today
        self._tz = tz

    def submit(self, record: Mapping[str, Any]) -> dict[str, Any]:
        try:
            filename = self.repository.append(record)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageWriteError("Error saving project") from exc
        self.logger.info(
            "New project submission: project=%s type=%s email=%s time=%s file=%s",
            *(_field(record, key) for key in SUMMARY_FIELDS),
            filename,
        )
        return {
            "success": True,
            "message": "Project saved successfully!",
            "filename": filename,
            "timestamp": iso_timestamp(),
        }

    def list_projects(self) -> dict[str, Any]:
        try:
            projects = self.repository.list_all()
        except (OSError, ValueError, RecursionError) as exc:
            raise StorageReadError("Error reading projects") from exc
        return {"success": True, "count": len(projects), "projects": projects}

    def stats(self) -> dict[str, Any]:
        try:
            filenames, records = self.repository.scan()
        except (OSError, ValueError, RecursionError) as exc:
            raise StorageReadError("Error getting stats") from exc
        return {"success": True, "stats": build_stats(filenames, records, self._today(), self._tz)}
