"""Datetime formatting utilities for note headers."""

from __future__ import annotations

from datetime import date, datetime

# Local wall-clock time, e.g. "2025-01-31 09:15:02".
_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_user_friendly_local(dt: datetime | None = None) -> str:
    """Format ``dt`` (default: now) in local time using the header format."""

    if dt is None:
        dt = datetime.now()
    elif dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime(_DISPLAY_FORMAT)


def today_iso(today: date | None = None) -> str:
    """Return the local calendar date as ``YYYY-MM-DD``, not the UTC date.

    Late in the evening west of UTC the two differ; the daily note follows
    the user's own calendar day.
    """

    return (today or date.today()).isoformat()
