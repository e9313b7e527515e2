"""Data that extractors hand to the downloader."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


class ExtractorError(Exception):
    """Raised when a page cannot be turned into downloadable media."""


class URLParseError(ExtractorError):
    """Raised when the expected data cannot be found in a page."""

    def __init__(self, message: str = "url parse failed") -> None:
        super().__init__(message)


@dataclass
class MediaURL:
    """One downloadable part of a stream."""

    url: str
    size: int = 0
    ext: str = ""


@dataclass
class Stream:
    """One quality variant of a media item, made of one or more parts."""

    urls: list[MediaURL] = field(default_factory=list)
    size: int = 0
    quality: str = ""


@dataclass
class Media:
    """Everything known about one media item on a site."""

    site: str
    title: str
    type: str
    streams: dict[str, Stream] = field(default_factory=dict)
    url: str = ""
    err: Optional[Exception] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable description of the item."""
        return {
            "site": self.site,
            "title": self.title,
            "type": self.type,
            "streams": {key: asdict(stream) for key, stream in self.streams.items()},
            "url": self.url,
            "err": str(self.err) if self.err is not None else None,
        }