import json

from vidscout.models import ExtractorError, Media, MediaURL, Stream, URLParseError


def _sample_media(err=None):
    part = MediaURL(url="https://example.com/a.mp4", size=1051042, ext="mp4")
    stream = Stream(urls=[part], size=1051042, quality="normal")
    return Media(
        site="Universal",
        title="a",
        type="video",
        streams={"default": stream},
        url="https://example.com/a.mp4",
        err=err,
    )


def test_to_dict_survives_json_round_trip():
    data = _sample_media().to_dict()
    assert json.loads(json.dumps(data)) == data


def test_to_dict_describes_streams_and_parts():
    data = _sample_media().to_dict()
    assert data["site"] == "Universal"
    assert data["type"] == "video"
    stream = data["streams"]["default"]
    assert stream["size"] == 1051042
    assert stream["quality"] == "normal"
    assert stream["urls"] == [
        {"url": "https://example.com/a.mp4", "size": 1051042, "ext": "mp4"}
    ]
    assert data["err"] is None


def test_to_dict_renders_error_as_text():
    data = _sample_media(err=ValueError("broken page")).to_dict()
    assert data["err"] == "broken page"


def test_stream_defaults_are_not_shared():
    first = Stream()
    second = Stream()
    first.urls.append(MediaURL(url="x"))
    assert second.urls == []
    assert first.size == 0 and first.quality == ""


def test_url_parse_error_is_an_extractor_error():
    error = URLParseError()
    assert str(error) == "url parse failed"
    assert issubclass(URLParseError, ExtractorError)


def test_url_parse_error_keeps_custom_message():
    assert str(URLParseError("no json here")) == "no json here"