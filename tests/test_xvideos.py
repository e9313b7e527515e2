import pytest
import responses

from vidscout.config import Options
from vidscout.extractors.xvideos import extract, get_src
from vidscout.request import HttpClient

PAGE_URL = "https://www.xvideos.com/video29018757/asian_chick_enjoying_sex_debut._hd_full_at_nanairo.co"
TITLE = "Asian chick enjoying sex debut&period; HD FULL at&colon; nanairo&period;co - XVIDEOS.COM"
LOW = "https://cdn.example.com/low.mp4"
HIGH = "https://cdn.example.com/high.mp4"

PLAYER = (
    "<script>\n\t    html5player.setVideoTitle('x');\n"
    f"\t    html5player.setVideoUrlLow('{LOW}');\n"
    f"\t    html5player.setVideoUrlHigh('{HIGH}');\n"
    "\t    html5player.setVideoHLS('https://cdn.example.com/hls.m3u8');\n</script>"
)


@pytest.fixture
def client():
    return HttpClient(Options(retry_times=1))


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_get_src():
    assert get_src(PLAYER) == [(LOW, "low"), (HIGH, "high")]


def test_get_src_without_player():
    assert get_src("<html></html>") == []


def test_extract(client, mocked):
    html = f"<html><head><title>{TITLE}</title></head><body>{PLAYER}</body></html>"
    mocked.add(responses.GET, PAGE_URL, body=html, content_type="text/html")
    high_size = 16574766
    for src, size in ((LOW, 1000), (HIGH, high_size)):
        mocked.add(
            responses.GET,
            src,
            body=bytes(size),
            headers={"Content-Length": str(size)},
            content_type="video/mp4",
        )

    data = extract(PAGE_URL, client)

    assert len(data) == 1
    media = data[0]
    assert media.title == TITLE
    assert media.site == "XVIDEOS xvideos.com"
    best = max(media.streams.values(), key=lambda s: s.size)
    assert best.size == high_size
    assert best.quality == "high"
    assert media.streams["low"].urls[0].url == LOW
    assert media.streams["low"].size == 1000


def test_extract_default_title(client, mocked):
    mocked.add(responses.GET, PAGE_URL, body="<html><body></body></html>", content_type="text/html")
    media = extract(PAGE_URL, client)[0]
    assert media.title == "xvideos"
    assert media.streams == {}