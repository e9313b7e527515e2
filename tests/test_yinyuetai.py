import pytest
import responses

from vidscout.config import Options
from vidscout.extractors.yinyuetai import extract, gen_api
from vidscout.models import ExtractorError, URLParseError
from vidscout.request import HttpClient

VIDEO_URL = "http://v.yinyuetai.com/video/3386385"
API_URL = "https://ext.yinyuetai.com/main/get-h-mv-info?json=true&videoId=3386385"


@pytest.fixture
def client():
    return HttpClient(Options(retry_times=1))


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _payload(**overrides):
    payload = {
        "error": False,
        "message": "",
        "videoInfo": {
            "coreVideoInfo": {
                "artistNames": "artist",
                "duration": 200,
                "error": False,
                "errorMsg": "",
                "videoID": 3386385,
                "videoName": "什么是爱/ What is Love",
                "videoURLModels": [
                    {
                        "bitrate": 400,
                        "bitrateType": 1,
                        "fileSize": 20028736,
                        "qualityLevel": "sh",
                        "qualityLevelName": "流畅",
                        "videoURL": "http://he.yinyuetai.com/a.mp4",
                    },
                    {
                        "bitrate": 200,
                        "bitrateType": 0,
                        "fileSize": 10000,
                        "qualityLevel": "lo",
                        "qualityLevelName": "低清",
                        "videoURL": "http://he.yinyuetai.com/b.mp4",
                    },
                ],
            }
        },
    }
    payload.update(overrides)
    return payload


def test_gen_api():
    assert gen_api("get-h-mv-info", "videoId=1") == (
        "https://ext.yinyuetai.com/main/get-h-mv-info?json=true&videoId=1"
    )


def test_extract_normal(client, mocked):
    mocked.add(responses.GET, API_URL, json=_payload())
    data = extract(VIDEO_URL, client)
    media = data[0]
    assert media.title == "什么是爱/ What is Love"
    assert media.site == "音悦台 yinyuetai.com"
    best = max(media.streams.values(), key=lambda s: s.size)
    assert best.size == 20028736
    assert best.quality == "流畅"
    assert media.streams["sh"].urls[0].url == "http://he.yinyuetai.com/a.mp4"
    assert media.streams["lo"].urls[0].ext == "mp4"


@pytest.mark.parametrize(
    "url",
    [
        "https://v.yinyuetai.com/video/h5/3386385",
        "http://m2.yinyuetai.com/video.html?id=3386385",
    ],
)
def test_extract_other_url_forms(client, mocked, url):
    mocked.add(responses.GET, API_URL, json=_payload())
    data = extract(url, client)
    assert data[0].url == url
    assert "videoId=3386385" in mocked.calls[0].request.url


def test_invalid_url(client):
    with pytest.raises(ExtractorError, match="invalid url for yinyuetai"):
        extract("http://example.com/video", client)


def test_api_error(client, mocked):
    mocked.add(responses.GET, API_URL, json=_payload(error=True, message="not found"))
    with pytest.raises(ExtractorError, match="not found"):
        extract(VIDEO_URL, client)


def test_core_error(client, mocked):
    payload = _payload()
    payload["videoInfo"]["coreVideoInfo"]["error"] = True
    payload["videoInfo"]["coreVideoInfo"]["errorMsg"] = "offline"
    mocked.add(responses.GET, API_URL, json=payload)
    with pytest.raises(ExtractorError, match="offline"):
        extract(VIDEO_URL, client)


def test_invalid_json(client, mocked):
    mocked.add(responses.GET, API_URL, body="not json")
    with pytest.raises(URLParseError):
        extract(VIDEO_URL, client)