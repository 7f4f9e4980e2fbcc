"""HTML element assembly — attributes, images, responsive picture elements."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from typing import Any

IMAGE_ATTRIBUTES = ("alt", "class", "id", "style", "title")


def format_attributes(atts: Mapping[str, Any]) -> str:
    """Render attributes as ``key="value"`` pairs.

    None and False values are skipped; True renders a bare attribute.
    """
    parts = []
    for key, value in atts.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(key)
        else:
            parts.append(f'{key}="{escape(str(value), quote=True)}"')
    return " ".join(parts)


def filter_attributes(atts: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """Drop attributes that aren't allowed. ``data-*`` attributes always pass."""
    allowed = set(allowed)
    if not allowed:
        return dict(atts)
    return {k: v for k, v in atts.items() if k in allowed or k.startswith("data-")}


def _attribute_name(key: str) -> str:
    # Python keywords can't carry dashes or "class"
    return key.rstrip("_").replace("_", "-")


def image_element(src: str, alt: str = "", **atts: Any) -> str:
    """Build an ``<img>`` element: src and alt first, the rest alphabetical."""
    atts = {_attribute_name(k): v for k, v in atts.items()}
    atts = filter_attributes(atts, IMAGE_ATTRIBUTES)
    atts.pop("alt", None)
    ordered = {"src": src, "alt": alt, **dict(sorted(atts.items()))}
    return f"<img {format_attributes(ordered)} />"


def picture_element(sources: Mapping[str, str], alt: str = "", **atts: Any) -> str:
    """Build a responsive ``<picture>`` element.

    ``sources`` maps image URLs to media queries, in order. The fallback
    ``<img>`` uses the last URL and carries the alt text.
    """
    if not sources:
        raise ValueError("A picture element needs at least one source")

    picture_atts = dict(sorted((_attribute_name(k), v) for k, v in atts.items()))
    elements = [
        f"<source {format_attributes({'srcset': url, 'media': media})} />"
        for url, media in sources.items()
    ]
    elements.append(image_element(list(sources)[-1], alt))

    opening = f"<picture {format_attributes(picture_atts)}>" if picture_atts else "<picture>"
    return opening + "\n".join(elements) + "</picture>"
