from unittest.mock import MagicMock

import pytest
import requests

from f1stats.errors import ImageLookupError
from f1stats.services.wikipedia import WikipediaImageSource


def make_source(status_code=200, payload=None, side_effect=None):
    session = MagicMock()
    session.headers = {}
    response = MagicMock(status_code=status_code)
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    session.get.return_value = response
    if side_effect is not None:
        session.get.side_effect = side_effect
    return WikipediaImageSource(thumb_size=400, timeout=8, user_agent="F1Stats-test/1.0", session=session), session


def test_lookup_returns_thumbnail():
    payload = {"query": {"pages": {"123": {"title": "Lewis Hamilton", "thumbnail": {
        "source": "https://upload.wikimedia.org/hamilton.jpg", "width": 400, "height": 533}}}}}
    source, session = make_source(payload=payload)

    assert source.lookup("Lewis Hamilton") == "https://upload.wikimedia.org/hamilton.jpg"

    _, kwargs = session.get.call_args
    assert kwargs["params"]["titles"] == "Lewis Hamilton"
    assert kwargs["params"]["prop"] == "pageimages"
    assert kwargs["params"]["pithumbsize"] == 400
    assert kwargs["timeout"] == 8
    assert session.headers["User-Agent"] == "F1Stats-test/1.0"


def test_missing_page_returns_none():
    source, _ = make_source(payload={"query": {"pages": {"-1": {"title": "Nobody Real", "missing": ""}}}})
    assert source.lookup("Nobody Real") is None


def test_page_without_image_returns_none():
    source, _ = make_source(payload={"query": {"pages": {"42": {"title": "Some Page"}}}})
    assert source.lookup("Some Page") is None


def test_non_200_returns_none():
    source, _ = make_source(status_code=503, payload={})
    assert source.lookup("Lewis Hamilton") is None


def test_network_error_raises():
    source, _ = make_source(side_effect=requests.Timeout("read timed out"))
    with pytest.raises(ImageLookupError):
        source.lookup("Lewis Hamilton")


@pytest.mark.parametrize("payload", [ValueError("not json"), {"batchcomplete": ""}, ["unexpected"]])
def test_unreadable_payload_raises(payload):
    source, _ = make_source(payload=payload)
    with pytest.raises(ImageLookupError):
        source.lookup("Lewis Hamilton")
