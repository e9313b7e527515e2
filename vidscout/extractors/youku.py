"""Videos from youku.com."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import random
import struct
import time
from typing import Any, Optional
from urllib.parse import quote_plus

from ..config import Options
from ..models import ExtractorError, Media, MediaURL, Stream, URLParseError
from ..request import HttpClient
from ..utils import match_one_of

SITE = "优酷 youku.com"
REFERER = "https://v.youku.com"
UTID_URL = "http://log.mmstat.com/eg.js"
UTDID_CCODE = "0103010102"

_UTDID_SALT = b"d6fc3a4a06adbde89223bvefedc24fecde188aaa9161"

_AUDIO_LANG = {
    "guoyu": "国语",
    "ja": "日语",
    "yue": "粤语",
}


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _pack(value: int) -> bytes:
    return struct.pack(">i", _int32(value))


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def get_audio_lang(lang: str) -> str:
    """Return the display name of an audio language code."""
    return _AUDIO_LANG.get(lang, lang)


def hash_code(s: str) -> int:
    """Return the 32-bit signed string hash (31 * h + char)."""
    result = 0
    for char in s:
        result = _int32(result * 0x1F + ord(char))
    return result


def generate_utdid() -> str:
    """Generate a random device identifier in the form the player sends."""
    timestamp = _int32(int(time.time()))
    buffer = bytearray()
    buffer += _pack(timestamp - 60 * 60 * 8)
    buffer += _pack(random.randrange(2**31))
    buffer += b"\x03\x00"
    imei = str(random.randrange(2**31))
    buffer += _pack(hash_code(imei))
    digest = hmac.new(_UTDID_SALT, bytes(buffer), hashlib.sha1).digest()
    buffer += _pack(hash_code(base64.b64encode(digest).decode("ascii")))
    return base64.b64encode(bytes(buffer)).decode("ascii")


def gen_streams(data: dict) -> dict[str, Stream]:
    """Build the streams from the "data" object of an ups response."""
    streams: dict[str, Stream] = {}
    for stream in data.get("stream") or []:
        stream = _dict(stream)
        stream_type = stream.get("stream_type", "")
        audio_lang = stream.get("audio_lang", "")
        width = int(stream.get("width") or 0)
        height = int(stream.get("height") or 0)
        if audio_lang == "default":
            key = stream_type
            quality = f"{stream_type} {width}x{height}"
        else:
            key = f"{stream_type}-{audio_lang}"
            quality = f"{stream_type} {width}x{height} {get_audio_lang(audio_lang)}"

        segs = [_dict(seg) for seg in stream.get("segs") or []]
        if not segs:
            raise ExtractorError(f"stream {key} has no segments")
        ext = segs[0].get("cdn_url", "").split("?")[0].split(".")[-1]
        urls = [
            MediaURL(url=seg.get("cdn_url", ""), size=int(seg.get("size") or 0), ext=ext)
            for seg in segs
        ]
        streams[key] = Stream(urls=urls, size=int(stream.get("size") or 0), quality=quality)
    return streams


def _utid(client: HttpClient, options: Options) -> str:
    if "cna" in options.cookie:
        found = match_one_of(
            options.cookie, r"cna=(.+?);", r"cna\s+(.+?)\s", r"cna\s+(.+?)$"
        )
    else:
        set_cookie = client.headers(UTID_URL, REFERER).get("Set-Cookie", "")
        found = match_one_of(set_cookie, r"cna=(.+?);")
    if not found or len(found) < 2:
        raise URLParseError()
    return found[1]


def _ups(vid: str, client: HttpClient, options: Options) -> dict:
    utid = _utid(client, options)
    data: dict = {}
    for ccode in [options.youku_ccode]:
        if ccode == UTDID_CCODE:
            utid = generate_utdid()
        url = (
            f"https://ups.youku.com/ups/get.json?vid={vid}&ccode={ccode}"
            f"&client_ip=192.168.1.1&client_ts={int(time.time()) // 1000}"
            f"&utid={quote_plus(utid)}&ckey={quote_plus(options.youku_ckey)}"
        )
        if options.youku_password:
            url = f"{url}&password={options.youku_password}"
        body = client.get_bytes(url, REFERER)
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ExtractorError(f"invalid ups response: {exc}") from exc
        data = _dict(data)
        if not _dict(_dict(data.get("data")).get("error")):
            return data
    return data


def extract(
    url: str, client: Optional[HttpClient] = None, options: Optional[Options] = None
) -> list[Media]:
    """Return the streams of a Youku video."""
    client = client or HttpClient(options)
    options = options or client.options
    found = match_one_of(url, r"id_(.+?)\.html", r"id_(.+)")
    if not found or len(found) < 2:
        raise URLParseError()

    data = _dict(_ups(found[1], client, options).get("data"))
    error = _dict(data.get("error"))
    if int(error.get("code") or 0) != 0:
        raise ExtractorError(error.get("note", ""))

    streams = gen_streams(data)
    video_title = _dict(data.get("video")).get("title", "")
    show_title = _dict(data.get("show")).get("title", "")
    if not show_title or show_title in video_title:
        media_title = video_title
    else:
        media_title = f"{show_title} {video_title}"
    return [Media(site=SITE, title=media_title, type="video", streams=streams, url=url)]