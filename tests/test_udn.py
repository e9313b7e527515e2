import pytest
import responses

from vidscout.config import Options
from vidscout.extractors.udn import extract, get_cdn_url, prepare_embed_url
from vidscout.models import ExtractorError
from vidscout.request import HttpClient

EMBED_URL = "https://video.udn.com/embed/news/300040"
TITLE = '生物老師男變女 全校挺"做自己"'


def _page(title_block=True, cdn="cdn.example.com/video/300040"):
    title = f"        title: '{TITLE}',\n        link: 'https://video.udn.com/news/300040',\n" if title_block else ""
    source = (
        "        sources: {\n"
        "            hls: '//hls.example.com/300040.m3u8',\n"
        f"            mp4: '//{cdn}'\n"
        "        },\n"
        "        subtitles: []\n"
    )
    return "<script>\n    var options = {\n" + title + source + "    };\n</script>"


@pytest.fixture
def client():
    return HttpClient(Options(retry_times=1))


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_prepare_embed_url_from_news_url():
    assert prepare_embed_url("https://video.udn.com/news/300040") == EMBED_URL


def test_prepare_embed_url_keeps_embed_url():
    assert prepare_embed_url(EMBED_URL) == EMBED_URL


def test_get_cdn_url():
    assert get_cdn_url(_page()) == "cdn.example.com/video/300040"


def test_get_cdn_url_missing():
    assert get_cdn_url("<html></html>") == ""


def test_extract(client, mocked):
    size = 12740874
    mocked.add(responses.GET, EMBED_URL, body=_page().encode("utf-8"), content_type="text/html")
    mocked.add(
        responses.GET,
        "http://cdn.example.com/video/300040",
        body="https://media.example.com/300040.mp4",
    )
    mocked.add(
        responses.GET,
        "https://media.example.com/300040.mp4",
        body=bytes(size),
        headers={"Content-Length": str(size)},
        content_type="video/mp4",
    )

    data = extract(EMBED_URL, client)

    assert len(data) == 1
    media = data[0]
    assert media.title == TITLE
    assert media.site == "udn udn.com"
    assert media.url == EMBED_URL
    stream = media.streams["normal"]
    assert stream.size == size
    assert stream.quality == "normal"
    assert stream.urls[0].url == "https://media.example.com/300040.mp4"
    assert stream.urls[0].ext == "mp4"


def test_extract_default_title(client, mocked):
    mocked.add(responses.GET, EMBED_URL, body=_page(title_block=False), content_type="text/html")
    mocked.add(responses.GET, "http://cdn.example.com/video/300040", body="https://media.example.com/a.mp4")
    mocked.add(
        responses.GET,
        "https://media.example.com/a.mp4",
        body=bytes(10),
        headers={"Content-Length": "10"},
    )
    assert extract(EMBED_URL, client)[0].title == "udn"


def test_extract_without_source_raises(client, mocked):
    mocked.add(responses.GET, EMBED_URL, body="<html></html>", content_type="text/html")
    with pytest.raises(ExtractorError, match="empty list"):
        extract(EMBED_URL, client)