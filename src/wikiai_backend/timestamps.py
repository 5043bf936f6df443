"""
wikiai_backend.timestamps

Wire timestamp format shared by every JSON response.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_timestamp(now: datetime | None = None) -> str:
    # ISO-8601, UTC, millisecond precision, "Z" suffix (e.g. 2024-05-01T12:00:00.123Z).
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
