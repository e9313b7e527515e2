"""Command-line entry point: extract media from URLs and download it."""

from __future__ import annotations

import json
import os
import sys
from typing import Callable, Optional
from urllib.parse import urlsplit

from termcolor import colored

from . import ffmpeg
from .config import Options
from .extractors import tumblr, udn, universal, vimeo, xvideos, yinyuetai, youku
from .models import ExtractorError, Media, Stream
from .request import HttpClient
from .utils import domain, file_path, file_size, match_one_of, parse_input_file, print_version

_SHORT_LINK_PREFIXES = {
    "av": "https://www.bilibili.com/video/",
    "ep": "https://www.bilibili.com/bangumi/play/",
}

_EXTRACTORS: dict[str, Callable[..., list[Media]]] = {
    "tumblr": tumblr.extract,
    "udn": udn.extract,
    "vimeo": vimeo.extract,
    "xvideos": xvideos.extract,
    "yinyuetai": yinyuetai.extract,
}

_DEFAULT_CHUNK = 1024 * 1024


def resolve_cookie(value: str) -> str:
    """Return the cookie text, reading it from a file when ``value`` names one."""
    if value and os.path.exists(value):
        with open(value, encoding="utf-8") as handle:
            return handle.read().strip()
    return value


def _site_of(video_url: str) -> tuple[str, str]:
    short = match_one_of(video_url, r"^(av|ep)\d+")
    if short and len(short) > 1:
        return "bilibili", _SHORT_LINK_PREFIXES[short[1]] + video_url
    if not video_url:
        raise ValueError("empty url")
    parts = urlsplit(video_url)
    if not parts.scheme and not video_url.startswith("/"):
        raise ValueError(f"invalid URI for request: {video_url!r}")
    return domain(parts.netloc), video_url


def _extract(site: str, video_url: str, options: Options, client: HttpClient) -> list[Media]:
    if site == "youku":
        return youku.extract(video_url, client, options)
    extractor = _EXTRACTORS.get(site, universal.extract)
    return extractor(video_url, client)


def _select_stream(media: Media, options: Options) -> tuple[str, Stream]:
    if options.stream:
        if options.stream not in media.streams:
            raise ExtractorError(f"no stream named {options.stream}")
        return options.stream, media.streams[options.stream]
    if not media.streams:
        raise ExtractorError("no streams found")
    return max(media.streams.items(), key=lambda pair: pair[1].size)


def _print_info(media: Media, key: str, stream: Stream) -> None:
    print()
    print(f" Site:      {media.site}")
    print(f" Title:     {media.title}")
    print(f" Type:      {media.type}")
    print(" Stream:")
    print(f"     [{key}]  -------------------")
    if stream.quality:
        print(f"     Quality:         {stream.quality}")
    print(f"     Size:            {stream.size} Bytes")
    print(f"     # download with: vidscout -f {key} ...")
    print()


def _fetch(client: HttpClient, url: str, referer: str, path: str, size: int, chunk: int) -> None:
    existing, exists = file_size(path)
    if exists and size and existing == size:
        return
    with client.request("GET", url, None, {"Referer": referer}) as response:
        with open(path, "wb") as handle:
            for block in response.iter_content(chunk_size=chunk):
                handle.write(block)


def _save(media: Media, referer: str, options: Options, client: HttpClient) -> None:
    key, stream = _select_stream(media, options)
    _print_info(media, key, stream)
    if options.info_only:
        return
    if not stream.urls:
        raise ExtractorError("stream has no parts")
    chunk = options.chunk_size_mb * 1024 * 1024 if options.chunk_size_mb > 0 else _DEFAULT_CHUNK
    name = options.output_name or media.title
    if len(stream.urls) == 1:
        part = stream.urls[0]
        path = file_path(name, part.ext, True, options.output_path)
        _fetch(client, part.url, referer, path, part.size, chunk)
        return
    parts = []
    for index, part in enumerate(stream.urls):
        path = file_path(f"{name}[{index}]", part.ext, True, options.output_path)
        _fetch(client, part.url, referer, path, part.size, chunk)
        parts.append(path)
    merged = file_path(name, "mp4", True, options.output_path)
    ffmpeg.merge_to_mp4(parts, merged, os.path.splitext(os.path.basename(merged))[0])


def download(
    video_url: str, options: Optional[Options] = None, client: Optional[HttpClient] = None
) -> None:
    """Extract the media of one URL and download it, or print it as JSON."""
    options = options if options is not None else Options()
    client = client if client is not None else HttpClient(options)
    site, video_url = _site_of(video_url)
    data = _extract(site, video_url, options, client)

    if options.extracted_data:
        print(json.dumps([item.to_dict() for item in data], indent="\t", ensure_ascii=False))
        return

    errors: list[Exception] = []
    for item in data:
        if item.err is not None:
            errors.append(item.err)
            continue
        try:
            _save(item, video_url, options, client)
        except Exception as exc:  # noqa: BLE001 - every failure is reported per item
            errors.append(exc)
    if errors:
        raise errors[0]


def _print_error(url: str, error: Exception) -> None:
    print(f"Downloading {colored(url, 'cyan')} error:\n{colored(str(error), 'red')}")


def main(argv=None) -> int:
    """Run the command line; return the process exit status."""
    options = Options.from_args(argv)
    urls = list(options.urls)
    if options.version:
        print_version()
        return 0
    if options.debug:
        print_version()
    if options.file:
        try:
            with open(options.file, encoding="utf-8") as handle:
                urls += parse_input_file(
                    handle, options.items, options.item_start, options.item_end
                )
        except OSError as exc:
            print(f"Error {exc}", end="")
            return 0
    if not urls:
        print("Too few arguments")
        print("Usage: vidscout [args] URLs...")
        return 0
    if options.cookie:
        try:
            options.cookie = resolve_cookie(options.cookie)
        except OSError as exc:
            print(colored(str(exc), "red"))
            return 0

    client = HttpClient(options)
    failed = False
    for raw in urls:
        url = raw.strip()
        try:
            download(url, options, client)
        except Exception as exc:  # noqa: BLE001 - reported and turned into the exit status
            _print_error(url, exc)
            failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())