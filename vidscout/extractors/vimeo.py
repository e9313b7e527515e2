"""Videos from Vimeo."""

from __future__ import annotations

import json
from typing import Optional

from ..models import ExtractorError, Media, MediaURL, Stream, URLParseError
from ..request import HttpClient
from ..utils import match_one_of

SITE = "Vimeo vimeo.com"
PLAYER_URL = "https://player.vimeo.com/video/"

_CONFIG_PATTERN = r"var \w+\s?=\s?({.+?});"


def _dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Return the progressive streams of a Vimeo video."""
    client = client or HttpClient()
    if "player.vimeo.com" in url:
        html = client.get(url, url)
    else:
        found = match_one_of(url, r"vimeo\.com/(\d+)")
        if not found:
            raise URLParseError()
        html = client.get(PLAYER_URL + found[1], url)

    found = match_one_of(html, _CONFIG_PATTERN)
    if not found or len(found) < 2:
        raise URLParseError()
    try:
        config = json.loads(found[1])
    except json.JSONDecodeError as exc:
        raise ExtractorError(f"invalid player config: {exc}") from exc
    config = _dict(config)

    progressive = _dict(_dict(_dict(config.get("request")).get("files"))).get("progressive") or []
    streams: dict[str, Stream] = {}
    for video in progressive:
        video = _dict(video)
        video_url = video.get("url", "")
        size = client.size(video_url, url)
        streams[str(video.get("profile", 0))] = Stream(
            urls=[MediaURL(url=video_url, size=size, ext="mp4")],
            size=size,
            quality=video.get("quality", ""),
        )

    video_title = _dict(config.get("video")).get("title", "")
    return [Media(site=SITE, title=video_title, type="video", streams=streams, url=url)]