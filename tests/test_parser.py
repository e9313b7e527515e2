import pytest
import requests
import responses

from vidscout.config import Options
from vidscout.models import MediaURL
from vidscout.parser import get_doc, get_images, title
from vidscout.request import HttpClient


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return HttpClient(Options(retry_times=1))


def test_get_doc():
    doc = get_doc("<html><head><title>hello</title></head><body>hello</body></html>")
    assert doc.find("title").get_text() == "hello"


@pytest.mark.parametrize(
    "html, want",
    [
        ("<html><head><title>hello</title></head><body>hello</body></html>", "hello"),
        ("<html><head><title>hello</title></head><body><h1> aa</h1></body></html>", "aa"),
        (
            '<html><head><meta property="og:title" content="你的名字。"></head>'
            "<body>hello</body></html>",
            "你的名字。",
        ),
    ],
)
def test_title(html, want):
    assert title(get_doc(html)) == want


def test_title_drops_newlines():
    assert title(get_doc("<h1>\n a\nb \n</h1>")) == "ab"


def test_get_images_fails(mocked, client):
    html = '<html><head><title>hello</title></head><body><img class="test" src="test" /></body></html>'
    with pytest.raises(requests.RequestException):
        get_images(client, "test", html, "test")


def test_get_images(mocked, client):
    image = "https://img.example.com/pics/a.png"
    mocked.add(responses.GET, image, body=b"12345", headers={"Content-Length": "5"})
    html = (
        "<html><head><title>gallery</title></head><body>"
        f'<img class="pic" src="{image}" />'
        '<img class="other" src="https://img.example.com/pics/b.png" />'
        "</body></html>"
    )
    page_title, urls = get_images(client, "https://page.example.com/", html, "pic")
    assert page_title == "gallery"
    assert urls == [MediaURL(url=image, size=5, ext="png")]


def test_get_images_with_handler(mocked, client):
    image = "https://img.example.com/pics/a.jpg"
    mocked.add(responses.GET, image, body=b"123", headers={"Content-Length": "3"})
    html = '<body><img class="pic" src="https://img.example.com/pics/a.jpg/small" /></body>'
    _, urls = get_images(
        client,
        "https://page.example.com/",
        html,
        "pic",
        lambda src: src.rsplit("/", 1)[0],
    )
    assert urls == [MediaURL(url=image, size=3, ext="jpg")]