"""Video embed detection for YouTube and Vimeo."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

from pagekit.markup import format_attributes, image_element
from pagekit.uri import format_link

_IFRAME_SRC_RE = re.compile(r"""<iframe[^>]*\ssrc=["']([^"']+)["']""", re.IGNORECASE)
_VIMEO_RE = re.compile(r"vimeo\.com", re.IGNORECASE)
_YOUTUBE_RE = re.compile(r"youtu\.?be(\.com)?", re.IGNORECASE)
_ID_RE = re.compile(r"^[\w-]+$")


def _split(uri: str):
    return urlsplit(uri if "//" in uri else "//" + uri)


def _last_segment(uri: str) -> str | None:
    segments = [s for s in _split(uri).path.split("/") if s]
    if segments and _ID_RE.match(segments[-1]):
        return segments[-1]
    return None


def _youtube_id(uri: str) -> str | None:
    query = parse_qs(_split(uri).query)
    if query.get("v") and _ID_RE.match(query["v"][0]):
        return query["v"][0]
    return _last_segment(uri)


class Video:
    """Canonical, embed and thumbnail URIs derived from a video URL or embed code.

    Attributes are None until a supported video has been recognized.
    """

    def __init__(self, code: str) -> None:
        self._reset()
        self.update(code)

    def __repr__(self) -> str:
        return f"Video(provider={self.provider!r}, video_id={self.video_id!r})"

    def update(self, code: str) -> bool:
        """Recognize a YouTube or Vimeo URL or iframe embed code.

        Returns False, leaving the current values alone, if the input isn't
        from a known video service.
        """
        match = _IFRAME_SRC_RE.search(code)
        uri = match.group(1) if match else code.strip()

        if _VIMEO_RE.search(uri):
            provider, video_id = "vimeo", _last_segment(uri)
        elif _YOUTUBE_RE.search(uri):
            provider, video_id = "youtube", _youtube_id(uri)
        else:
            return False

        if not video_id:
            return False

        self._reset()
        self.input = uri
        self.provider = provider
        self.video_id = video_id
        if provider == "vimeo":
            self._update_vimeo()
        else:
            self._update_youtube()
        self._update_embed()
        return True

    def _reset(self) -> None:
        self.input: str | None = None
        self.provider: str | None = None
        self.video_id: str | None = None
        self.uri: str | None = None
        self.embed_uri: str | None = None
        self.image: str | None = None
        self.embed: str | None = None
        self.link: str | None = None

    def _update_vimeo(self) -> None:
        # Thumbnails need the Vimeo API, so there is no image
        self.uri = f"//player.vimeo.com/video/{self.video_id}"
        self.embed_uri = self.uri

    def _update_youtube(self) -> None:
        self.uri = f"//www.youtube.com/watch?v={self.video_id}"
        self.embed_uri = f"//www.youtube.com/embed/{self.video_id}"
        self.image = f"//i.ytimg.com/vi/{self.video_id}/hqdefault.jpg"

    def _update_embed(self) -> None:
        iframe_atts = {"src": self.embed_uri, "frameborder": "0", "allowfullscreen": True}
        self.embed = f"<iframe {format_attributes(iframe_atts)}></iframe>"
        if self.image:
            self.link = f"<a {format_attributes({'href': self.uri})}>{image_element(self.image)}</a>"
        else:
            self.link = format_link(self.uri)
