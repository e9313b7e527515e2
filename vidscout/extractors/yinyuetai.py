"""Music videos from yinyuetai.com."""

from __future__ import annotations

import json
from typing import Any, Optional

from ..models import ExtractorError, Media, MediaURL, Stream, URLParseError
from ..request import HttpClient
from ..utils import match_one_of

SITE = "音悦台 yinyuetai.com"
API = "https://ext.yinyuetai.com/main/"
ACTION_GET_MV_INFO = "get-h-mv-info"

_VID_PATTERNS = (
    r"https?://v.yinyuetai.com/video/(\d+)(?:\?vid=\d+)?",
    r"https?://v.yinyuetai.com/video/h5/(\d+)(?:\?vid=\d+)?",
    r"https?://m2.yinyuetai.com/video.html\?id=(\d+)",
)


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def gen_api(action: str, param: str) -> str:
    """Return the API address for an action with its query parameters."""
    return f"{API}{action}?json=true&{param}"


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Return the streams of a yinyuetai music video."""
    client = client or HttpClient()
    found = match_one_of(url, *_VID_PATTERNS)
    if not found or len(found) < 2:
        raise ExtractorError("invalid url for yinyuetai")

    api_url = gen_api(ACTION_GET_MV_INFO, f"videoId={found[1]}")
    text = client.get(api_url, url)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise URLParseError() from exc
    if not isinstance(data, dict):
        raise URLParseError()

    if data.get("error"):
        raise ExtractorError(data.get("message", ""))
    core = _dict(_dict(data.get("videoInfo")).get("coreVideoInfo"))
    if core.get("error"):
        raise ExtractorError(core.get("errorMsg", ""))

    streams: dict[str, Stream] = {}
    for model in core.get("videoURLModels") or []:
        model = _dict(model)
        size = int(model.get("fileSize") or 0)
        streams[model.get("qualityLevel", "")] = Stream(
            urls=[MediaURL(url=model.get("videoURL", ""), size=size, ext="mp4")],
            size=size,
            quality=model.get("qualityLevelName", ""),
        )
    return [
        Media(
            site=SITE,
            title=core.get("videoName", ""),
            type="video",
            streams=streams,
            url=url,
        )
    ]