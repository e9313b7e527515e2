"""HTML helpers shared by the extractors."""

from __future__ import annotations

from typing import Callable, Optional

from bs4 import BeautifulSoup

from .models import MediaURL
from .request import HttpClient
from .utils import get_name_and_ext


def get_doc(html: str) -> BeautifulSoup:
    """Parse an HTML string; attributes such as class stay plain strings."""
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def get_images(
    client: HttpClient,
    url: str,
    html: str,
    img_class: str,
    url_handler: Optional[Callable[[str], str]] = None,
) -> tuple[str, list[MediaURL]]:
    """Return the page title and the images whose class is exactly ``img_class``."""
    doc = get_doc(html)
    page_title = title(doc)
    urls = []
    for img in doc.find_all("img"):
        if img.get("class") != img_class:
            continue
        src = img.get("src", "")
        if url_handler is not None:
            src = url_handler(src)
        size = client.size(src, url)
        _, ext = get_name_and_ext(src, client)
        urls.append(MediaURL(url=src, size=size, ext=ext))
    return page_title, urls


def title(doc: BeautifulSoup) -> str:
    """Return the page title from the first h1, og:title or the title tag."""
    heading = doc.find("h1")
    text = heading.get_text().strip().replace("\n", "") if heading else ""
    if not text:
        meta = doc.find("meta", attrs={"property": "og:title"})
        text = meta.get("content", "") if meta else ""
    if not text:
        text = "".join(tag.get_text() for tag in doc.find_all("title"))
    return text