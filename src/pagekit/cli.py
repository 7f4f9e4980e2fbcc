"""CLI entry point — Click commands for the date, text, URI and video helpers."""

import html
import warnings
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click

from pagekit import config as cfg
from pagekit.daterange import DateRange, InvalidRangeOrderWarning
from pagekit.display import display_error, display_result, display_video
from pagekit.uri import format_link, format_uri
from pagekit.utils import ordinal, time_since, truncate, truncate_words
from pagekit.video import Video

user_config = cfg.load()


def _timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        display_error(f"Unknown timezone: {name}")
        raise SystemExit(1)


def _build_range(start: str, end: str | None, tz_name: str | None) -> DateRange:
    """Build a DateRange from CLI input, exiting on unusable times."""
    tz = _timezone(tz_name or user_config["timezone"])

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", InvalidRangeOrderWarning)
        dr = DateRange(start, end, tz=tz)

    if dr.start is None:
        display_error(f"Could not read start time: {start}", "Use Unix time or a date such as 2024-06-01 12:00.")
        raise SystemExit(1)
    if end is not None and dr.end is None:
        order_warnings = [w for w in caught if issubclass(w.category, InvalidRangeOrderWarning)]
        if order_warnings:
            display_error(str(order_warnings[0].message))
        else:
            display_error(f"Could not read end time: {end}")
        raise SystemExit(1)

    try:
        dr.set_format(user_config["format"])
        dr.set_range_formats(user_config["range_formats"])
        dr.set_range_tolerance(user_config["range_tolerance"])
    except (ValueError, AttributeError) as e:
        display_error(f"Invalid config: {e}", f"Check {cfg.CONFIG_PATH}")
        raise SystemExit(1)
    return dr


@click.group()
def main() -> None:
    """Presentation helpers for dates, text, links and video embeds."""


@main.command("range")
@click.argument("start")
@click.argument("end", required=False, default=None)
@click.option("--format", "-f", "fmt", default=None, help="strftime format for single times, or 'mysql'.")
@click.option("--tolerance", "-t", default=None, type=click.IntRange(min=0), help="Seconds below which start and end count as one time.")
@click.option("--tz", default=None, help="Timezone for comparing and rendering times.")
@click.option("--text", "as_text", is_flag=True, help="Decode HTML entities in the output.")
def range_(
    start: str,
    end: str | None,
    fmt: str | None,
    tolerance: int | None,
    tz: str | None,
    as_text: bool,
) -> None:
    """Render START (and optionally END) as a compact date range."""
    dr = _build_range(start, end, tz)
    if fmt:
        dr.set_format(fmt)
    if tolerance is not None:
        dr.set_range_tolerance(tolerance)

    result = dr.get_range()
    display_result(dr.granularity() or "single", html.unescape(result) if as_text else result)


@main.command()
@click.argument("start")
@click.argument("end")
@click.option("--raw", is_flag=True, help="Print the difference in seconds.")
def interval(start: str, end: str, raw: bool) -> None:
    """Show the time between START and END."""
    dr = _build_range(start, end, None)
    display_result("interval", dr.get_interval(raw=raw))


@main.command()
@click.argument("timestamp")
@click.option("--suffix", default="ago", help="Text appended to the result.")
@click.option("--now-label", default="Just now", help="Text shown for times under a second ago.")
def since(timestamp: str, suffix: str, now_label: str) -> None:
    """Show how long ago TIMESTAMP was."""
    dr = _build_range(timestamp, None, None)
    display_result("since", time_since(dr.start, suffix, now_label))


@main.command("ordinal")
@click.argument("number", type=int)
def ordinal_(number: int) -> None:
    """Show NUMBER with its English ordinal suffix."""
    display_result("ordinal", ordinal(number))


@main.command("truncate")
@click.argument("text")
@click.option("--limit", "-l", default=200, type=click.IntRange(min=0), help="Maximum characters (or words).")
@click.option("--words", is_flag=True, help="Count words instead of characters.")
@click.option("--after", default=None, help="Text appended when truncated.")
def truncate_(text: str, limit: int, words: bool, after: str | None) -> None:
    """Truncate TEXT to a whole word."""
    if after is None:
        after = user_config["truncate_suffix"]
    if words:
        result = truncate_words(text, limit, after)
    else:
        result = truncate(text, limit, after)
    display_result("truncated", result)


@main.command()
@click.argument("text")
@click.option("--human", is_flag=True, help="Drop the scheme for display.")
@click.option("--link", "as_link", is_flag=True, help="Print an HTML link.")
def uri(text: str, human: bool, as_link: bool) -> None:
    """Normalize a URI-like TEXT."""
    result = format_uri(text, human=human)
    if result is None:
        display_error(f"Invalid URI: {text}")
        raise SystemExit(1)
    display_result("link" if as_link else "uri", format_link(text) if as_link else result)


@main.command()
@click.argument("code")
def video(code: str) -> None:
    """Derive embed and thumbnail URIs from a YouTube or Vimeo URL or embed CODE."""
    v = Video(code)
    if v.provider is None:
        display_error("Not a YouTube or Vimeo video.")
        raise SystemExit(1)
    display_video(v)
