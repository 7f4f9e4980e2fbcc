"""Date and time ranges — input normalization, range collapsing, intervals."""

from __future__ import annotations

import time
import warnings
from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone, tzinfo
from typing import Any

from dateutil import parser as dateutil_parser

from pagekit.utils import humanize_seconds

DEFAULT_FORMAT = "%H:%M %d %B %Y"
MYSQL_FORMAT = "%Y-%m-%d %H:%M:%S"

# Granularity -> (start format, separator, end format)
DEFAULT_RANGE_FORMATS: dict[str, tuple[str, str, str]] = {
    "time": ("%H:%M", "&ndash;", "%H:%M %d %B %Y"),
    "day": ("%d", "&ndash;", "%d %B %Y"),
    "month": ("%d %B", "&ndash;", "%d %B %Y"),
    "year": ("%d %B %Y", "&ndash;", "%d %B %Y"),
}


class InvalidRangeOrderWarning(UserWarning):
    """Raised when an end time earlier than the start time is rejected."""


def _system_clock() -> int:
    return int(time.time())


def parse_free_text(text: str, tz: tzinfo = timezone.utc) -> int | None:
    """Parse a free-text date string to Unix time, or None if it can't be read."""
    try:
        dt = dateutil_parser.parse(text)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return int(dt.timestamp())


def normalize_instant(
    value: Any,
    tz: tzinfo = timezone.utc,
    parser: Callable[[str, tzinfo], int | None] = parse_free_text,
) -> int | None:
    """Convert anything time-like to Unix time.

    Integers and all-digit strings are taken as Unix time directly and never
    reach the free-text parser. Datetimes are converted, naive ones read in
    ``tz``. Other strings go through ``parser``. Anything else gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if value.isascii() and value.isdigit():
            return int(value)
        if not value.strip():
            return None
        return parser(value, tz)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=tz)
        return int(value.timestamp())
    if isinstance(value, date):
        return int(datetime(value.year, value.month, value.day, tzinfo=tz).timestamp())
    return None


def _valid_range_formats(formats: Mapping[str, Any] | None) -> dict[str, tuple[str, str, str]]:
    """Keep only overrides for known granularities with exactly three parts."""
    valid: dict[str, tuple[str, str, str]] = {}
    for key, value in (formats or {}).items():
        if key not in DEFAULT_RANGE_FORMATS:
            continue
        if not isinstance(value, (list, tuple)) or len(value) != 3:
            continue
        valid[key] = (str(value[0]), str(value[1]), str(value[2]))
    return valid


class DateRange:
    """A start time with an optional end time, rendered as a compact range.

    ``tz`` is the calendar used both to compare the two instants and to render
    them. ``clock`` supplies "now" when no start is given.
    """

    def __init__(
        self,
        start: Any = None,
        end: Any = None,
        *,
        tz: tzinfo = timezone.utc,
        clock: Callable[[], int] | None = None,
        parser: Callable[[str, tzinfo], int | None] | None = None,
    ) -> None:
        self.tz = tz
        self.clock = clock or _system_clock
        self.parser = parser or parse_free_text
        self.start: int | None = None
        self.end: int | None = None
        self.format = DEFAULT_FORMAT
        self.range_formats = dict(DEFAULT_RANGE_FORMATS)
        self.tolerance = 0
        self.set(start, end)

    def __str__(self) -> str:
        return self.get_range()

    def __repr__(self) -> str:
        return f"DateRange(start={self.start!r}, end={self.end!r})"

    # ── setters ───────────────────────────────────────────────────────────────

    def set(self, start: Any = None, end: Any = None) -> None:
        """Set the start time and, optionally, the end time."""
        self.set_start(start)
        self.set_end(end)

    def set_start(self, value: Any = None) -> None:
        if value is None:
            value = self.clock()
        self.start = self._normalize(value)

    def set_end(self, value: Any = None) -> None:
        """Set the end time. An end before the start is rejected with a warning."""
        end = self._normalize(value)
        if end is not None and self.start is not None and end < self.start:
            warnings.warn(
                "End time cannot be before start time",
                InvalidRangeOrderWarning,
                stacklevel=2,
            )
            return
        self.end = end

    def set_format(self, fmt: str) -> None:
        """Set the default format. ``"mysql"`` is an alias for a MySQL datetime."""
        if fmt.lower() == "mysql":
            fmt = MYSQL_FORMAT
        self.format = fmt

    def set_range_formats(self, formats: Mapping[str, Any]) -> None:
        """Merge range format overrides; unknown keys and bad shapes are ignored."""
        self.range_formats.update(_valid_range_formats(formats))

    def set_range_tolerance(self, seconds: int) -> None:
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 0:
            raise ValueError(f"Range tolerance must be a non-negative integer, got {seconds!r}")
        self.tolerance = seconds

    # ── rendering ─────────────────────────────────────────────────────────────

    def get(self, fmt: str | None = None) -> str:
        return self.get_start(fmt)

    def get_start(self, fmt: str | None = None) -> str:
        return self._render(self.start, fmt or self.format)

    def get_end(self, fmt: str | None = None) -> str:
        return self._render(self.end, fmt or self.format)

    def has_range(self) -> bool:
        """True if start and end are far enough apart to be shown as a range."""
        if self.start is None:
            return False
        end = self.start if self.end is None else self.end
        return not (end == self.start or end - self.start < self.tolerance)

    def granularity(self) -> str | None:
        """Return the narrowest shared calendar unit, or None without a range."""
        if not self.has_range():
            return None
        start = self._datetime(self.start)
        end = self._datetime(self.end)
        if start is None or end is None:
            return None

        granularity = "year"
        if start.year == end.year:
            granularity = "month"
        if (start.year, start.month) == (end.year, end.month):
            granularity = "day"
        if start.date() == end.date():
            granularity = "time"
        return granularity

    def get_range(self, formats: Mapping[str, Any] | None = None) -> str:
        """Render the range using the format for its granularity.

        ``formats`` overrides the range formats for this call only.
        """
        granularity = self.granularity()
        if granularity is None:
            return self.get()

        range_formats = {**self.range_formats, **_valid_range_formats(formats)}
        start_fmt, separator, end_fmt = range_formats[granularity]
        return self._render(self.start, start_fmt) + separator + self._render(self.end, end_fmt)

    def get_interval(self, raw: bool = False) -> int | str:
        """Return the time between start and end, in seconds or as "3 days"."""
        if self.start is None:
            difference = 0
        else:
            end = self.start if self.end is None else self.end
            difference = end - self.start

        if raw:
            return difference
        return humanize_seconds(difference) or 0

    # ── internals ─────────────────────────────────────────────────────────────

    def _normalize(self, value: Any) -> int | None:
        return normalize_instant(value, self.tz, self.parser)

    def _datetime(self, instant: int | None) -> datetime | None:
        """Calendar time for an instant, or None outside the years 1-9999."""
        if instant is None:
            return None
        try:
            return datetime.fromtimestamp(instant, self.tz)
        except (ValueError, OverflowError, OSError):
            return None

    def _render(self, instant: int | None, fmt: str) -> str:
        dt = self._datetime(instant)
        if dt is None:
            return ""
        return dt.strftime(fmt)
