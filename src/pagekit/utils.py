"""Utility functions — predicates, ordinals, relative time, truncation, headings."""

from __future__ import annotations

import html
import re
import time
from collections.abc import Callable, Sequence
from typing import Any

# Approximate unit lengths, largest first
PERIODS: dict[str, int] = {
    "year": 60 * 60 * 24 * 365,
    "month": 60 * 60 * 24 * 30,
    "week": 60 * 60 * 24 * 7,
    "day": 60 * 60 * 24,
    "hour": 60 * 60,
    "minute": 60,
    "second": 1,
}

DEFAULT_AFTER = " &#8230;"

_TAG_RE = re.compile(r"<[^>]+>")
_WORD_RE = re.compile(r"[A-Za-z'-]+")
_HEADING_RE = re.compile(r"(</?)h(\d)", re.IGNORECASE)


def contains(obj: str | Sequence[Any], term: Any) -> bool:
    """Does a string contain a substring, or a sequence contain a value?"""
    return term in obj


def starts_with(obj: str | Sequence[Any], term: Any) -> bool:
    if isinstance(obj, str):
        return obj.startswith(term)
    return len(obj) > 0 and obj[0] == term


def ends_with(obj: str | Sequence[Any], term: Any) -> bool:
    if isinstance(obj, str):
        return obj.endswith(term)
    return len(obj) > 0 and obj[-1] == term


def ordinal(number: int) -> str:
    """English ordinal, e.g. 1st, 2nd, 23rd, 111th."""
    n = abs(number)
    if n % 100 not in (11, 12, 13):
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10)
        if suffix:
            return f"{number}{suffix}"
    return f"{number}th"


def strip_tags(text: str | None) -> str:
    if not text:
        return ""
    return _TAG_RE.sub("", text)


def sanitize_html(text: str | None) -> str:
    """Strip HTML tags and decode entities from text."""
    if not text:
        return ""
    # Decode HTML entities
    text = html.unescape(text)
    # Strip HTML tags
    text = strip_tags(text)
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text).strip()
    return text


def truncate(text: str | None, limit: int = 200, after: str = DEFAULT_AFTER) -> str:
    """Truncate to at most ``limit`` characters, backing off to a whole word.

    Tags are removed first. ``after`` is appended only when text was cut.
    """
    text = strip_tags(text)
    if len(text) <= limit:
        return text

    truncated = text[:limit]
    following = text[limit]

    # Don't leave half a word behind unless it's the only word
    if following != " " and " " in truncated:
        truncated = truncated[: truncated.rfind(" ")]

    return truncated + after


def truncate_words(text: str | None, limit: int, after: str = DEFAULT_AFTER) -> str:
    """Truncate to at most ``limit`` words. Tags are removed first."""
    text = strip_tags(text)
    words = list(_WORD_RE.finditer(text))
    if len(words) <= limit:
        return text
    return text[: words[limit].start()].rstrip() + after


def humanize_seconds(seconds: float) -> str | None:
    """Render seconds as the largest whole unit, e.g. "1 day" or "3 weeks".

    Returns None for anything under one second.
    """
    for period, length in PERIODS.items():
        if length <= seconds:
            n = int(seconds // length)
            s = "s" if n > 1 else ""
            return f"{n} {period}{s}"
    return None


def time_since(
    value: int,
    suffix: str = "ago",
    now: str = "Just now",
    *,
    clock: Callable[[], float] | None = None,
) -> str:
    """Human-readable time since a Unix timestamp, e.g. "3 days ago"."""
    elapsed = (clock or time.time)() - value
    since = humanize_seconds(elapsed)
    if since is None:
        return now
    return f"{since} {suffix}".rstrip()


def normalize_headings(content: str, limit: int = 2) -> str:
    """Shift heading levels so the top heading in ``content`` becomes ``h{limit}``.

    Headings pushed outside h1-h6 become paragraphs.
    """
    levels = range(1, 7)
    if limit not in levels:
        return content

    diff = 0
    lowered = content.lower()
    for level in levels:
        if f"<h{level}" in lowered:
            diff = limit - level
            break
    if diff == 0:
        return content

    def _shift(match: re.Match[str]) -> str:
        level = int(match.group(2)) + diff
        tag = f"h{level}" if level in levels else "p"
        return match.group(1) + tag

    return _HEADING_RE.sub(_shift, content)
