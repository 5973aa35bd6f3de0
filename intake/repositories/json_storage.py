"""
Directory-backed JSON persistence.

Each submission lives in its own ``project-<timestamp>.json`` file. There is
no index: every read re-scans the directory and re-parses every file.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable
import json

from intake.domain.stats import submission_filename

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


class SubmissionRepository:
    """One pretty-printed JSON file per submission inside ``directory``."""

    def __init__(self, directory: Path | str, clock: Clock | None = None) -> None:
        self.directory = Path(directory)
        self._clock = clock or _utcnow

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def append(self, record: Any) -> str:
        """Write ``record`` and return the generated filename.

        Names only resolve to the millisecond; a second append within the same
        millisecond replaces the first file. NaN and Infinity raise ValueError
        before anything is written.
        """
        filename = submission_filename(self._clock())
        path = self.directory / filename
        path.write_text(json.dumps(record, ensure_ascii=False, indent=2, allow_nan=False), encoding="utf-8")
        return filename

    def list_filenames(self) -> list[str]:
        return sorted(entry.name for entry in self.directory.iterdir() if entry.is_file())

    def read(self, filename: str) -> Any:
        with (self.directory / filename).open("r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant)

    def list_all(self) -> list[Any]:
        return [self.read(name) for name in self.list_filenames()]

    def scan(self) -> tuple[list[str], list[Any]]:
        """Filenames and their parsed records from a single directory listing."""
        names = self.list_filenames()
        return names, [self.read(name) for name in names]
