"""Page output: the HTML document wrapper and the section renderers."""

from .formatting import format_calendar_date, format_long_date, time_ago, truncate
from .page import Page
from .sections import (
    render_current_date,
    render_error,
    render_hero,
    render_latest,
    render_tech,
)

__all__ = [
    "Page",
    "truncate",
    "time_ago",
    "format_calendar_date",
    "format_long_date",
    "render_hero",
    "render_latest",
    "render_tech",
    "render_error",
    "render_current_date",
]
