"""Direct download of any URL that no other extractor handles."""

from __future__ import annotations

from typing import Optional

from ..models import Media, MediaURL, Stream
from ..request import HttpClient
from ..utils import get_name_and_ext

SITE = "Universal"


def extract(url: str, client: Optional[HttpClient] = None) -> list[Media]:
    """Describe a URL as a single file to download as it is."""
    client = client or HttpClient()
    print("\nthis URL is not supported right now, but a direct download will be tried")

    filename, ext = get_name_and_ext(url, client)
    size = client.size(url, url)
    streams = {
        "default": Stream(urls=[MediaURL(url=url, size=size, ext=ext)], size=size),
    }
    content_type = client.content_type(url, url)
    return [Media(site=SITE, title=filename, type=content_type, streams=streams, url=url)]