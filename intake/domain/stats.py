"""Domain helpers for submission filenames and aggregate stats."""
from __future__ import annotations

import json
import re
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Iterable, Mapping

FILENAME_PREFIX = "project-"
FILENAME_SUFFIX = ".json"
FILENAME_PATTERN = re.compile(r"project-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.json")
DEFAULT_TYPE = "other"


def iso_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def submission_filename(moment: datetime | None = None) -> str:
    """Build ``project-<timestamp>.json`` with ``:`` and ``.`` replaced by ``-``."""
    stamp = re.sub(r"[:.]", "-", iso_timestamp(moment))
    return f"{FILENAME_PREFIX}{stamp}{FILENAME_SUFFIX}"


def filename_day(filename: str, tz: tzinfo | None = None) -> date | None:
    """
    Date recovered from a stored filename, the way the stats endpoint has
    always done it: tokens 2 and 3 of the ``-`` split joined as ``YYYY-MM``.

    For ``project-2024-03-15T...`` this yields the first of the month, not the
    day the file was written. The ``YYYY-MM`` value is read as UTC midnight and
    converted to ``tz`` (server local time when None), so west of UTC it lands
    on the last day of the previous month. Both quirks are kept until the
    intended meaning of "today" is confirmed. Unparseable names return None.
    """
    parts = filename.split("-")
    if len(parts) < 3:
        return None
    try:
        month_start = datetime.strptime(f"{parts[1]}-{parts[2]}", "%Y-%m")
    except ValueError:
        return None
    return month_start.replace(tzinfo=timezone.utc).astimezone(tz).date()


def count_today(filenames: Iterable[str], today: date | None = None, tz: tzinfo | None = None) -> int:
    today = today or date.today()
    return sum(1 for name in filenames if filename_day(name, tz) == today)


def type_key(value: Any) -> str:
    """Bucket name for a ``websiteType`` value, spelled as JSON spells scalars."""
    if not value:
        return DEFAULT_TYPE
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def count_by_type(records: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    """Group records by ``websiteType``; missing or empty values go to ``other``."""
    counts: dict[str, int] = {}
    for record in records:
        key = type_key(record.get("websiteType") if isinstance(record, Mapping) else None)
        counts[key] = counts.get(key, 0) + 1
    return counts


def build_stats(
    filenames: list[str],
    records: Iterable[Mapping[str, Any]],
    today: date | None = None,
    tz: tzinfo | None = None,
) -> dict[str, Any]:
    return {
        "total": len(filenames),
        "today": count_today(filenames, today, tz),
        "byType": count_by_type(records),
    }
