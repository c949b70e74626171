"""Text and date helpers shared by the section renderers."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

ELLIPSIS = "…"
INVALID_DATE = "Invalid Date"


def truncate(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, ending in an ellipsis.

    Counts raw characters, so the cut can land mid-word.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + ELLIPSIS


def time_ago(timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    if timestamp is None:
        return ""
    now = now or datetime.now(timezone.utc)
    seconds = math.floor((now - timestamp).total_seconds())
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def format_calendar_date(dt: Optional[datetime]) -> str:
    """en-US numeric date (``M/D/YYYY``) in the local timezone."""
    if dt is None:
        return INVALID_DATE
    local = dt.astimezone()
    return f"{local.month}/{local.day}/{local.year}"


def format_long_date(dt: datetime) -> str:
    """en-US long date, e.g. ``Saturday, October 17, 2026``."""
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"
