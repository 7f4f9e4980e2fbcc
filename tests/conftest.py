"""Shared fixtures for pagekit tests."""

from datetime import datetime, timezone

import pytest


def utc_ts(*args: int) -> int:
    """Unix time for a UTC calendar date, e.g. utc_ts(2020, 1, 1, 12, 30)."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


@pytest.fixture()
def ts():
    """The utc_ts helper, for tests that build timestamps inline."""
    return utc_ts


@pytest.fixture()
def fixed_clock():
    """Factory fixture: returns a clock that always reports the given time."""

    def _make(now: int = 1_700_000_000):
        return lambda: now

    return _make


@pytest.fixture()
def wsgi_environ():
    """A minimal WSGI environ for a plain HTTP request."""
    return {
        "HTTP_HOST": "example.com",
        "PATH_INFO": "/news/",
        "QUERY_STRING": "",
        "wsgi.url_scheme": "http",
    }
