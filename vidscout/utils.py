"""Helpers for matching, naming and selecting what to download."""

from __future__ import annotations

import hashlib
import json
import os
import re
import sys
from typing import IO, Any, Optional
from urllib.parse import urljoin, urlsplit

from termcolor import colored

from .request import HttpClient

MAX_LENGTH = 80
VERSION = "0.1.0"

_ELLIPSES = "..."
_CHUNK_SIZE = 32 * 1024
_MISSING = object()

_DOMAIN_PATTERN = (
    r"([a-z0-9][-a-z0-9]{0,62})\."
    r"(com\.cn|com\.hk|"
    r"cn|com|net|edu|gov|biz|org|info|pro|name|xxx|xyz|be|"
    r"me|top|cc|tv|tt)"
)

# Earlier keys win where two could match at the same position.
_NAME_REPLACEMENTS = {
    "\n": " ",
    "/": " ",
    "|": "-",
    ": ": "：",
    ":": "：",
    "'": "’",
}
_WINDOWS_REPLACEMENTS = {
    '"': " ",
    "?": " ",
    "*": " ",
    "\\": " ",
    "<": " ",
    ">": " ",
}


def _replace_all(text: str, table: dict[str, str]) -> str:
    pattern = "|".join(re.escape(key) for key in table)
    return re.sub(pattern, lambda match: table[match.group(0)], text)


def _split_json_path(path: str) -> list[str]:
    return [part.replace("\\.", ".") for part in re.split(r"(?<!\\)\.", path)]


def _step(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key, _MISSING)
    if isinstance(value, list):
        if key == "#":
            return len(value)
        try:
            index = int(key)
        except ValueError:
            return _MISSING
        if 0 <= index < len(value):
            return value[index]
    return _MISSING


def _json_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def get_string_from_json(json_text: str, path: str) -> str:
    """Return the value at a dotted path of a JSON document as text, or ""."""
    try:
        value = json.loads(json_text)
    except (json.JSONDecodeError, TypeError):
        return ""
    for key in _split_json_path(path):
        value = _step(value, key)
        if value is _MISSING:
            return ""
    return _json_text(value)


def match_one_of(text: str, *args: str) -> Optional[list[str]]:
    """Return the whole match and its groups for the first pattern that matches."""
    for pattern in args:
        match = re.search(pattern, text)
        if match:
            return [match.group(0), *(group or "" for group in match.groups())]
    return None


def match_all(text: str, pattern: str) -> list[list[str]]:
    """Return the whole match and groups of every match of a pattern."""
    return [
        [match.group(0), *(group or "" for group in match.groups())]
        for match in re.finditer(pattern, text)
    ]


def file_size(file_path: str) -> tuple[int, bool]:
    """Return the size of a file and whether it exists."""
    try:
        return os.stat(file_path).st_size, True
    except FileNotFoundError:
        return 0, False


def domain(url: str) -> str:
    """Return the second-level name of the host in a URL, or "Universal"."""
    found = match_one_of(url, _DOMAIN_PATTERN)
    return found[1] if found else "Universal"


def limit_length(s: str, length: int) -> str:
    """Cut a string to at most ``length`` characters, ending it with "..."."""
    if len(s) > length:
        return s[: length - len(_ELLIPSES)] + _ELLIPSES
    return s


def file_name(name: str, ext: str = "") -> str:
    """Turn a title into a valid file name, with an optional extension."""
    name = _replace_all(name, _NAME_REPLACEMENTS)
    if sys.platform.startswith("win"):
        name = _replace_all(name, _WINDOWS_REPLACEMENTS)
    limited = limit_length(name, MAX_LENGTH)
    return f"{limited}.{ext}" if ext else limited


def file_path(name: str, ext: str, escape: bool, output_path: str = "") -> str:
    """Build the output path of a file; the output directory must exist."""
    if output_path:
        os.stat(output_path)
    name_with_ext = file_name(name, ext) if escape else f"{name}.{ext}"
    return os.path.join(output_path, name_with_ext)


def file_line_counter(stream: IO) -> int:
    """Count the newline characters in a text or binary stream."""
    count = 0
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            return count
        count += chunk.count(b"\n" if isinstance(chunk, bytes) else "\n")


def _atoi(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def need_download_list(
    length: int, items: str = "", item_start: int = 1, item_end: int = 0
) -> list[int]:
    """Return the 1-based positions of a playlist or file that are wanted."""
    if items:
        selected: list[int] = []
        for part in items.split(","):
            bounds = part.split("-")
            start = _atoi(bounds[0])
            end = _atoi(bounds[1]) if len(bounds) >= 2 else start
            selected.extend(range(start, end + 1))
        return selected
    start = max(item_start, 1)
    end = item_end if item_end != 0 else length
    if end < start:
        end = start
    return inclusive_range(start, end)


def parse_input_file(
    stream: IO, items: str = "", item_start: int = 1, item_end: int = 0
) -> list[str]:
    """Read URLs, one per line, keeping the lines that the selection wants.

    Line indices are 0-based while the selection is 1-based.
    """
    lines = [
        (line.decode("utf-8", errors="replace") if isinstance(line, bytes) else line).strip()
        for line in stream
    ]
    wanted = set(need_download_list(len(lines), items, item_start, item_end))
    return [line for index, line in enumerate(lines) if index in wanted]


def item_in_slice(item: Any, items) -> bool:
    """Tell whether an int or str is in a sequence, comparing types strictly."""
    if isinstance(item, bool) or not isinstance(item, (int, str)):
        return False
    return any(type(candidate) is type(item) and candidate == item for candidate in items)


def _request_uri_path(uri: str) -> str:
    if not uri:
        raise ValueError("empty url")
    parts = urlsplit(uri)
    if not parts.scheme and not uri.startswith("/"):
        raise ValueError(f"invalid URI for request: {uri!r}")
    return parts.path


def get_name_and_ext(uri: str, client: Optional[HttpClient] = None) -> tuple[str, str]:
    """Return the file name and extension of a URL.

    When the path has no extension it is taken from the Content-Type.
    """
    path = _request_uri_path(uri)
    filename = path.split("/")[-1].split(".")
    if len(filename) > 1:
        return filename[0], filename[1]
    content_type = (client or HttpClient()).content_type(uri, uri)
    _, slash, subtype = content_type.partition("/")
    if not slash:
        raise ValueError(f"cannot tell the extension of {uri}: no media type")
    return filename[0], subtype.split("/")[0]


def md5(text: str) -> str:
    """Return the hex MD5 digest of a string."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def m3u8_urls(uri: str, client: Optional[HttpClient] = None) -> list[str]:
    """Return every segment URL listed in an m3u8 playlist."""
    if not uri:
        raise ValueError("url is null")
    text = (client or HttpClient()).get(uri)
    urls = []
    for line in text.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line if line.startswith("http") else urljoin(uri, line))
    return urls


def print_version() -> str:
    """Print the program name and version, and return the printed text."""
    text = (
        f"\n{colored('vidscout', 'cyan')}: version {colored(VERSION, 'blue')}, "
        "A fast, simple and clean video downloader.\n"
    )
    print(text)
    return text


def reverse(s: str) -> str:
    """Return a string with its characters in reverse order."""
    return s[::-1]


def inclusive_range(start: int, end: int) -> list[int]:
    """Return the integers from ``start`` to ``end``, both included."""
    if end < start - 1:
        raise ValueError(f"invalid range {start}..{end}")
    return list(range(start, end + 1))