"""URI helpers — normalized URIs, links, request URIs, data URIs."""

from __future__ import annotations

import base64
import re
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlsplit

from pagekit.markup import format_attributes

# Common media types by extension
MEDIA_TYPES: dict[str, str] = {
    "gif": "image/gif",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "png": "image/png",
    "svg": "image/svg+xml",
}

_SCHEME_RE = re.compile(r"^[^/]*//")


def format_uri(text: str, human: bool = False) -> str | None:
    """Normalize a URI-like string, or return None if it isn't a valid URI.

    Without a scheme separator the string is made protocol-relative. With
    ``human`` the scheme is dropped, along with a bare trailing slash.
    """
    if "//" not in text:
        text = "//" + text

    try:
        urlsplit(text)
    except ValueError:
        return None

    if not human:
        return text

    text = _SCHEME_RE.sub("", text)
    if text.count("/") == 1 and text.endswith("/"):
        text = text[:-1]
    return text


def format_link(text: str, label: str | None = None) -> str:
    """Build an HTML link; the label defaults to the human-readable URI."""
    uri = format_uri(text)
    if not label:
        label = format_uri(text, human=True) or text
    return f"<a {format_attributes({'href': uri})}>{label}</a>"


def current_uri(environ: Mapping[str, str]) -> str:
    """Rebuild the full URI of the current request from a WSGI environ."""
    scheme = "http"
    if environ.get("HTTPS", "").lower() == "on" or environ.get("wsgi.url_scheme") == "https":
        scheme += "s"

    uri = environ.get("HTTP_HOST") or environ.get("SERVER_NAME", "")
    if "REQUEST_URI" in environ:
        uri += environ["REQUEST_URI"]
    else:
        uri += environ.get("PATH_INFO", "")
        if environ.get("QUERY_STRING"):
            uri += "?" + environ["QUERY_STRING"]

    return f"{scheme}://{uri}"


def data_uri(path: str | Path, media_type: str | None = None) -> str:
    """Encode a file as a base64 data URI.

    The media type is guessed from the extension if not given.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    if not media_type:
        extension = path.suffix.lstrip(".").lower()
        if extension not in MEDIA_TYPES:
            raise ValueError(f"Unknown extension: {extension!r}")
        media_type = MEDIA_TYPES[extension]

    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{media_type};base64,{payload}"
