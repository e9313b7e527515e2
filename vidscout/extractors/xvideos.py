"""Videos from XVIDEOS."""

from __future__ import annotations

from typing import Optional

from ..models import Media, MediaURL, Stream
from ..request import HttpClient
from ..utils import match_one_of

SITE = "XVIDEOS xvideos.com"

QUALITY_LOW = "low"
QUALITY_HIGH = "high"

_LOW_FLAG = "html5player.setVideoUrlLow('"
_LOW_FINAL_FLAG = "');\n\t    html5player.setVideoUrlHigh("
_HIGH_FLAG = "html5player.setVideoUrlHigh('"
_HIGH_FINAL_FLAG = "');\n\t    html5player.setVideoHLS("


def _between(html: str, start_flag: str, end_flag: str) -> Optional[str]:
    start = html.find(start_flag)
    end = html.find(end_flag)
    if start == -1 or end == -1:
        return None
    return html[start + len(start_flag):end]


def get_src(html: str) -> list[tuple[str, str]]:
    """Return (url, quality) pairs for the low and high quality sources found."""
    sources = []
    for start_flag, end_flag, quality in (
        (_LOW_FLAG, _LOW_FINAL_FLAG, QUALITY_LOW),
        (_HIGH_FLAG, _HIGH_FINAL_FLAG, QUALITY_HIGH),
    ):
        src = _between(html, start_flag, end_flag)
        if src is not None:
            sources.append((src, quality))
    return sources


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Return the low and high quality streams of a video page."""
    client = client or HttpClient()
    html = client.get(url, url)
    found = match_one_of(html, r"<title>(.+?)</title>")
    page_title = found[1] if found and len(found) > 1 else "xvideos"

    streams: dict[str, Stream] = {}
    for src, quality in get_src(html):
        size = client.size(src, url)
        streams[quality] = Stream(
            urls=[MediaURL(url=src, size=size, ext="mp4")],
            size=size,
            quality=quality,
        )
    return [Media(site=SITE, title=page_title, type="video", streams=streams, url=url)]