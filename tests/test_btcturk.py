from __future__ import annotations

import json

import pytest
import requests

from peybot.errors import NetworkError, ParseError, UpstreamRejectedError
from peybot.ingestion.btcturk import BTCTURK_TICKER_URL, fetch_cross_rate


class _DummyResponse:
    def __init__(self, text: str) -> None:
        self.text = text
        self.status_code = 200

    def json(self):
        return json.loads(self.text)


class _DummySession:
    def __init__(self, *, payload: object | None = None, text: str | None = None, exc: Exception | None = None) -> None:
        self._text = text if text is not None else json.dumps(payload)
        self._exc = exc
        self.urls: list[str] = []

    def get(self, url: str, timeout: float | None = None, **_kwargs):
        self.urls.append(url)
        if self._exc is not None:
            raise self._exc
        return _DummyResponse(self._text)


def test_fetch_cross_rate_returns_first_last_price() -> None:
    session = _DummySession(
        payload={"success": True, "data": [{"pair": "USDTTRY", "last": 34.2}, {"last": 1.0}]}
    )

    assert fetch_cross_rate(session) == 34.2
    assert session.urls == [BTCTURK_TICKER_URL]


def test_fetch_cross_rate_accepts_integer_last() -> None:
    session = _DummySession(payload={"success": True, "data": [{"last": 30}]})
    rate = fetch_cross_rate(session)
    assert rate == 30.0
    assert isinstance(rate, float)


@pytest.mark.parametrize(
    "payload",
    [
        {"success": False, "data": []},
        {"success": False, "data": [{"last": 34.2}]},
        {"success": True, "data": []},
    ],
)
def test_fetch_cross_rate_rejected_by_upstream(payload: dict) -> None:
    with pytest.raises(UpstreamRejectedError):
        fetch_cross_rate(_DummySession(payload=payload))


def test_fetch_cross_rate_malformed_json() -> None:
    with pytest.raises(ParseError, match="<html>"):
        fetch_cross_rate(_DummySession(text="<html>busy</html>"))


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"data": [{"last": 1.0}]},
        {"success": True},
        {"success": True, "data": [{"bid": 1.0}]},
        {"success": True, "data": [{"last": "34.2"}]},
    ],
)
def test_fetch_cross_rate_unexpected_shape(payload: object) -> None:
    with pytest.raises(ParseError):
        fetch_cross_rate(_DummySession(payload=payload))


def test_fetch_cross_rate_transport_error() -> None:
    with pytest.raises(NetworkError):
        fetch_cross_rate(_DummySession(exc=requests.Timeout("slow")))


def test_fetch_cross_rate_rejects_integer_beyond_float_range() -> None:
    body = '{"success": true, "data": [{"last": 1' + "0" * 400 + "}]}"
    with pytest.raises(ParseError, match="out of range"):
        fetch_cross_rate(_DummySession(text=body))


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_fetch_cross_rate_rejects_non_finite_last(literal: str) -> None:
    body = '{"success": true, "data": [{"last": ' + literal + "}]}"
    with pytest.raises(ParseError, match="non-finite"):
        fetch_cross_rate(_DummySession(text=body))
