"""Scraper for the rial prices published on tgju.org profile pages."""

from __future__ import annotations

import re
from typing import Final

import requests
from bs4 import BeautifulSoup

from peybot.errors import ParseError, SelectorNotFoundError
from peybot.ingestion.http import DEFAULT_TIMEOUT, fetch_text
from peybot.ingestion.models import CurrencyTag, SourceEndpoint
from peybot.utils.logger import get_logger

LOGGER = get_logger(__name__)

TGJU_URLS: Final[dict[CurrencyTag, str]] = {
    "USD": "https://www.tgju.org/profile/price_dollar_rl",
    "EUR": "https://www.tgju.org/profile/price_eur",
    "AED": "https://www.tgju.org/profile/price_aed",
    "CNY": "https://www.tgju.org/profile/sana_sell_cny",
}

PRICE_SELECTOR = ".top-mobile-block .block-last-change-percentage .price"

_ZWNJ = "\u200c"
_DIGITS = re.compile(r"[0-9]+")


def default_endpoints() -> list[SourceEndpoint]:
    return [SourceEndpoint(tag=tag, url=url) for tag, url in TGJU_URLS.items()]


def _clean_price_text(raw: str) -> str:
    # Digit groups use commas and a ZWNJ may sit before the currency glyph.
    return raw.strip().replace(",", "").replace(" ", "").replace(_ZWNJ, "")


def extract_price(body: str) -> int:
    """Return the headline price on a tgju.org profile page.

    The value lives in the first ``.price`` element nested under
    ``.block-last-change-percentage`` inside ``.top-mobile-block``. Only ASCII
    digits survive the cleanup; Persian digits, signs or stray glyphs raise
    :class:`ParseError`.
    """

    soup = BeautifulSoup(body, "html.parser")
    element = soup.select_one(PRICE_SELECTOR)
    if element is None:
        raise SelectorNotFoundError(f"Selector {PRICE_SELECTOR!r} not found")
    clean = _clean_price_text(element.get_text())
    if not _DIGITS.fullmatch(clean):
        raise ParseError(f"Parse int error for {clean!r}")
    return int(clean)


def fetch_tgju_rate(
    session: requests.Session, url: str, *, timeout: float = DEFAULT_TIMEOUT
) -> int:
    """Download ``url`` and extract its price in rial."""

    body = fetch_text(session, url, timeout=timeout)
    LOGGER.debug("Fetched %s (%s chars)", url, len(body))
    try:
        return extract_price(body)
    except SelectorNotFoundError as exc:
        raise SelectorNotFoundError(f"Selector not found on {url}") from exc


__all__ = [
    "TGJU_URLS",
    "PRICE_SELECTOR",
    "default_endpoints",
    "extract_price",
    "fetch_tgju_rate",
]
