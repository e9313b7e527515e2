"""Videos from udn.com."""

from __future__ import annotations

import re
from typing import Optional

from ..models import ExtractorError, Media, MediaURL, Stream, URLParseError
from ..request import HttpClient
from ..utils import match_one_of

SITE = "udn udn.com"
EMBED_PREFIX = "https://video.udn.com/embed/"
NEWS_EMBED_PREFIX = "https://video.udn.com/embed/news/"

_START_FLAG = "',\n            mp4: '//"
_END_FLAG = "'\n        },\n        subtitles"
_CDN_PATTERN = re.escape(_START_FLAG) + "(.+?)" + re.escape(_END_FLAG)
_TITLE_PATTERN = "title: '(.+?)',\n        link:"


def get_cdn_url(html: str) -> str:
    """Return the CDN address (without scheme) of the MP4 source, or ""."""
    found = match_one_of(html, _CDN_PATTERN)
    if found and len(found) > 1 and found[1]:
        return found[1]
    return ""


def prepare_embed_url(url: str) -> str:
    """Turn a news video URL into its embed page URL."""
    if EMBED_PREFIX not in url:
        return NEWS_EMBED_PREFIX + url.split("/")[-1]
    return url


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Return the video of a udn.com news page."""
    client = client or HttpClient()
    url = prepare_embed_url(url)
    if not url:
        raise URLParseError()

    html = client.get(url, url)
    found = match_one_of(html, _TITLE_PATTERN)
    page_title = found[1] if found and len(found) > 1 else "udn"

    cdn_url = get_cdn_url(html)
    if not cdn_url:
        raise ExtractorError("empty list")
    src_url = client.get("http://" + cdn_url, url)
    size = client.size(src_url, url)

    quality = "normal"
    streams = {
        quality: Stream(
            urls=[MediaURL(url=src_url, size=size, ext="mp4")],
            size=size,
            quality=quality,
        )
    }
    return [Media(site=SITE, title=page_title, type="video", streams=streams, url=url)]