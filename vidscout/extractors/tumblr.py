"""Images and videos from Tumblr posts."""

from __future__ import annotations

import json
from typing import Optional

from ..models import ExtractorError, Media, MediaURL, Stream, URLParseError
from ..parser import get_doc, title
from ..request import HttpClient
from ..utils import get_name_and_ext, match_one_of

SITE = "Tumblr tumblr.com"

_LD_JSON_PATTERN = r'<script type="application/ld\+json">\s*(.+?)</script>'
_IFRAME_PATTERN = r"<iframe src='(.+?)'"
_SOURCE_PATTERN = r'source src="(.+?)"'
_IMAGE_LIST_MARKER = '"image":{"@list"'


def _url_data(client: HttpClient, url: str, referer: str) -> MediaURL:
    size = client.size(url, referer)
    _, ext = get_name_and_ext(url, client)
    return MediaURL(url=url, size=size, ext=ext)


def _image_urls(json_string: str) -> list[str]:
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as exc:
        raise ExtractorError(f"invalid JSON-LD data: {exc}") from exc
    if not isinstance(data, dict):
        raise ExtractorError("JSON-LD data is not an object")
    image = data.get("image")

    # The "image" field holds either a single URL or an object with a list of URLs.
    if _IMAGE_LIST_MARKER in json_string:
        images = image.get("@list") if isinstance(image, dict) else None
        if images is None:
            return []
        if not isinstance(images, list) or not all(isinstance(u, str) for u in images):
            raise ExtractorError("unexpected image list in JSON-LD data")
        return images

    if image is None:
        image = ""
    if not isinstance(image, str):
        raise ExtractorError("unexpected image value in JSON-LD data")
    return [image]


def _image_download(client: HttpClient, url: str, html: str, page_title: str) -> list[Media]:
    found = match_one_of(html, _LD_JSON_PATTERN)
    if not found or len(found) < 2:
        raise URLParseError()
    urls = [_url_data(client, image_url, url) for image_url in _image_urls(found[1])]
    streams = {"default": Stream(urls=urls, size=sum(u.size for u in urls))}
    return [Media(site=SITE, title=page_title, type="image", streams=streams, url=url)]


def _video_download(client: HttpClient, url: str, html: str, page_title: str) -> list[Media]:
    found = match_one_of(html, _IFRAME_PATTERN)
    if not found or len(found) < 2:
        raise URLParseError()
    video_url = found[1]
    if "tumblr.com/video" not in video_url:
        raise ExtractorError("this URL is not supported right now")

    video_html = client.get(video_url, url)
    real = match_one_of(video_html, _SOURCE_PATTERN)
    if not real or len(real) < 2:
        raise URLParseError()

    url_data = _url_data(client, real[1], url)
    streams = {"default": Stream(urls=[url_data], size=url_data.size)}
    return [Media(site=SITE, title=page_title, type="video", streams=streams, url=url)]


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Return the media of a Tumblr post."""
    client = client or HttpClient()
    html = client.get(url, url)
    page_title = title(get_doc(html))
    if "<iframe src=" in html:
        return _video_download(client, url, html, page_title)
    return _image_download(client, url, html, page_title)