"""Template filter registry — maps filter names to pagekit helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pagekit.daterange import DateRange
from pagekit.uri import format_link, format_uri
from pagekit.utils import (
    contains,
    ends_with,
    normalize_headings,
    ordinal,
    sanitize_html,
    starts_with,
    time_since,
    truncate,
    truncate_words,
)


def date_range(start: Any, end: Any = None, tolerance: int = 0) -> str:
    """Render a start/end pair as a compact range."""
    dr = DateRange(start, end)
    dr.set_range_tolerance(tolerance)
    return dr.get_range()


def interval(start: Any, end: Any) -> int | str:
    """Human-readable interval between two times, e.g. "2 days"."""
    return DateRange(start, end).get_interval()


FILTERS: dict[str, Callable[..., Any]] = {
    "contains": contains,
    "starts_with": starts_with,
    "ends_with": ends_with,
    "ordinal": ordinal,
    "truncate": truncate,
    "truncate_words": truncate_words,
    "time_since": time_since,
    "format_uri": format_uri,
    "format_link": format_link,
    "normalize_headings": normalize_headings,
    "sanitize_html": sanitize_html,
    "date_range": date_range,
    "interval": interval,
}


def register(env: Any) -> Any:
    """Add every filter to ``env.filters`` (e.g. a Jinja2 environment)."""
    env.filters.update(FILTERS)
    return env
