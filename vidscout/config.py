"""Command-line options shared by the downloader."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

DEFAULT_YOUKU_CKEY = (
    "7B19C0AB12633B22E7FE81271162026020570708D6CC189E4924503C49D243A0"
    "DE6CD84A766832C2C99898FC5ED31F3709BB3CDD82C96492E721BDD381735026"
)

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Charset": "UTF-8,*;q=0.5",
    "Accept-Language": "en-US,en;q=0.8",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/81.0.4044.138 Safari/537.36"
    ),
}


@dataclass
class Options:
    """Every setting that the command line can change."""

    urls: list[str] = field(default_factory=list)
    multi_thread: bool = False
    debug: bool = False
    version: bool = False
    info_only: bool = False
    cookie: str = ""
    playlist: bool = False
    refer: str = ""
    stream: str = ""
    output_path: str = ""
    output_name: str = ""
    extracted_data: bool = False
    chunk_size_mb: int = 0
    use_aria2_rpc: bool = False
    aria2_token: str = ""
    aria2_addr: str = "localhost:6800"
    aria2_method: str = "http"
    thread_number: int = 10
    file: str = ""
    item_start: int = 1
    item_end: int = 0
    items: str = ""
    episode_title_only: bool = False
    caption: bool = False
    retry_times: int = 10
    youku_ccode: str = "0590"
    youku_ckey: str = DEFAULT_YOUKU_CKEY
    youku_password: str = ""
    fake_headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @classmethod
    def from_args(cls, args=None) -> "Options":
        """Build options from command-line arguments (``sys.argv[1:]`` if None)."""
        namespace = _build_parser().parse_args(args)
        return cls(**vars(namespace))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidscout",
        usage="vidscout [args] URLs...",
        allow_abbrev=False,
    )
    flag = parser.add_argument

    flag("-m", dest="multi_thread", action="store_true",
         help="Multiple threads to download single video")
    flag("-d", dest="debug", action="store_true", help="Debug mode")
    flag("-v", dest="version", action="store_true", help="Show version")
    flag("-i", dest="info_only", action="store_true", help="Information only")
    flag("-c", dest="cookie", default="", help="Cookie")
    flag("-p", dest="playlist", action="store_true", help="Download playlist")
    flag("-r", dest="refer", default="", help="Use specified Referrer")
    flag("-f", dest="stream", default="", help="Select specific stream to download")
    flag("-o", dest="output_path", default="", help="Specify the output path")
    flag("-O", dest="output_name", default="", help="Specify the output file name")
    flag("-j", dest="extracted_data", action="store_true", help="Print extracted data")
    flag("-cs", dest="chunk_size_mb", type=int, default=0,
         help="HTTP chunk size for downloading (in MB)")
    flag("-aria2", dest="use_aria2_rpc", action="store_true",
         help="Use Aria2 RPC to download")
    flag("-aria2token", dest="aria2_token", default="", help="Aria2 RPC Token")
    flag("-aria2addr", dest="aria2_addr", default="localhost:6800", help="Aria2 Address")
    flag("-aria2method", dest="aria2_method", default="http", help="Aria2 Method")
    flag("-n", dest="thread_number", type=int, default=10,
         help="The number of download thread (only works for multiple-parts video)")
    flag("-F", dest="file", default="", help="URLs file path")
    flag("-start", dest="item_start", type=int, default=1,
         help="Define the starting item of a playlist or a file input")
    flag("-end", dest="item_end", type=int, default=0,
         help="Define the ending item of a playlist or a file input")
    flag("-items", dest="items", default="",
         help="Define wanted items from a file or playlist. "
              "Separated by commas like: 1,5,6,8-10")
    flag("-eto", dest="episode_title_only", action="store_true",
         help="File name of each bilibili episode doesn't include the playlist title")
    flag("-C", dest="caption", action="store_true", help="Download captions")
    flag("-retry", dest="retry_times", type=int, default=10,
         help="How many times to retry when the download failed")
    flag("-ccode", dest="youku_ccode", default="0590", help="Youku ccode")
    flag("-ckey", dest="youku_ckey", default=DEFAULT_YOUKU_CKEY, help="Youku ckey")
    flag("-password", dest="youku_password", default="", help="Youku password")
    flag("urls", nargs="*", help="URLs to download")
    return parser