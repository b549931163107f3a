"""Client for the BTCTurk public ticker used as the USDT/TRY cross-rate."""

from __future__ import annotations

import math
from typing import Any, Final

import requests

from peybot.errors import DecodeError, NetworkError, ParseError, UpstreamRejectedError
from peybot.ingestion.http import DEFAULT_TIMEOUT

BTCTURK_TICKER_URL: Final[str] = "https://api.btcturk.com/api/v2/ticker?pairSymbol=USDT_TRY"


def _parse_ticker(payload: Any, body: str) -> float:
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ParseError(f"BTCTurk json parse error: unexpected shape / body: {body}")
    success = payload.get("success")
    if not isinstance(success, bool):
        raise ParseError(f"BTCTurk json parse error: missing success flag / body: {body}")
    data = payload["data"]
    if not success or not data:
        raise UpstreamRejectedError("BTCTurk responded with success=false or empty data")
    first = data[0]
    last = first.get("last") if isinstance(first, dict) else None
    if isinstance(last, bool) or not isinstance(last, (int, float)):
        raise ParseError(f"BTCTurk json parse error: missing numeric 'last' / body: {body}")
    try:
        rate = float(last)
    except OverflowError as exc:
        raise ParseError(f"BTCTurk json parse error: 'last' out of range / body: {body}") from exc
    if not math.isfinite(rate):
        raise ParseError(f"BTCTurk json parse error: non-finite 'last' / body: {body}")
    return rate


def fetch_cross_rate(
    session: requests.Session,
    url: str = BTCTURK_TICKER_URL,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> float:
    """Return the last USDT/TRY trade price reported by the ticker."""

    try:
        response = session.get(url, timeout=timeout)
    except (requests.exceptions.ContentDecodingError, requests.exceptions.ChunkedEncodingError) as exc:
        raise DecodeError(f"BTCTurk read body error: {exc}") from exc
    except requests.RequestException as exc:
        raise NetworkError(f"BTCTurk request error: {exc}") from exc
    body = response.text
    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"BTCTurk json parse error: {exc} / body: {body}") from exc
    return _parse_ticker(payload, body)


__all__ = ["BTCTURK_TICKER_URL", "fetch_cross_rate"]
