"""HTTP access with retries, cookies and referer handling."""

from __future__ import annotations

import time
import warnings
from typing import Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict
from termcolor import colored

from .config import Options

warnings.filterwarnings("ignore", message="Unverified HTTPS request")

_TIMEOUT = (10, 15 * 60)
_HTTP_ONLY_PREFIX = "#HttpOnly_"


def parse_cookie_string(text: str) -> list[tuple[str, str]]:
    """Parse cookies in the Netscape cookies.txt format into (name, value) pairs.

    Raises ValueError for a line that is not a cookie record.
    """
    cookies = []
    for raw in text.splitlines():
        line = raw.strip(" \r\n")
        if line.startswith(_HTTP_ONLY_PREFIX):
            line = line[len(_HTTP_ONLY_PREFIX):]
        elif not line or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) != 7:
            raise ValueError(f"malformed cookie line: {raw!r}")
        cookies.append((parts[5], parts[6]))
    return cookies


class HttpClient:
    """Sends requests the way every extractor expects them."""

    def __init__(self, options: Optional[Options] = None) -> None:
        self.options = options if options is not None else Options()
        self._session = requests.Session()
        self._session.headers.clear()
        self._session.verify = False

    def _cookie_header(self) -> str:
        text = self.options.cookie
        try:
            cookies = parse_cookie_string(text)
        except ValueError:
            cookies = []
        if not cookies:
            return text
        return "; ".join(f"{name}={value}" for name, value in cookies)

    def request(
        self,
        method: str,
        url: str,
        body=None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a request, retrying failures; the response body is left unread."""
        headers = dict(headers or {})
        merged = CaseInsensitiveDict(self.options.fake_headers)
        merged.update(headers)
        if "Referer" not in headers:
            merged["Referer"] = url
        if self.options.cookie:
            merged["Cookie"] = self._cookie_header()
        if self.options.refer:
            merged["Referer"] = self.options.refer

        prepared = self._session.prepare_request(
            requests.Request(method, url, data=body, headers=merged)
        )
        settings = self._session.merge_environment_settings(
            prepared.url, {}, True, False, None
        )

        attempt = 0
        while True:
            attempt += 1
            response = None
            error = None
            try:
                response = self._session.send(prepared, timeout=_TIMEOUT, **settings)
            except requests.RequestException as exc:
                error = exc
            if error is None and response.status_code < 400:
                break
            if attempt >= self.options.retry_times:
                if error is not None:
                    raise requests.RequestException(f"request error: {error}") from error
                response.close()
                raise requests.HTTPError(
                    f"{url} request error: HTTP {response.status_code}",
                    response=response,
                )
            if response is not None:
                response.close()
            time.sleep(1)

        if self.options.debug:
            self._print_debug(method, url, prepared, response)
        return response

    @staticmethod
    def _print_debug(method, url, prepared, response) -> None:
        print()
        print(colored("URL:         ", "blue") + url)
        print(colored("Method:      ", "blue") + method)
        print(colored("Headers:     ", "blue") + repr(dict(prepared.headers)))
        status_color = "red" if response.status_code >= 400 else "green"
        print(colored("Status Code: ", "blue") + colored(str(response.status_code), status_color))

    def get(self, url: str, refer: str = "", headers=None) -> str:
        """Fetch a page and return its body as text."""
        return self.get_bytes(url, refer, headers).decode("utf-8", errors="replace")

    def get_bytes(self, url: str, refer: str = "", headers=None) -> bytes:
        """Fetch a page and return its decoded body."""
        headers = dict(headers or {})
        if refer:
            headers["Referer"] = refer
        with self.request("GET", url, None, headers) as response:
            return response.content

    def headers(self, url: str, refer: str = "") -> CaseInsensitiveDict:
        """Return the response headers of a GET request."""
        response = self.request("GET", url, None, {"Referer": refer})
        response.close()
        return response.headers

    def size(self, url: str, refer: str = "") -> int:
        """Return the Content-Length of a resource."""
        value = self.headers(url, refer).get("Content-Length", "")
        if not value:
            raise ValueError("Content-Length is not present")
        return int(value)

    def content_type(self, url: str, refer: str = "") -> str:
        """Return the media type of a resource without its parameters."""
        value = self.headers(url, refer).get("Content-Type", "")
        return value.split(";")[0]