"""Periodic loop that publishes the rate bulletin to Telegram."""

from __future__ import annotations

import time
from typing import Callable, Iterable

import requests

from peybot.errors import MissingCredentialError, PeybotError
from peybot.ingestion.btcturk import BTCTURK_TICKER_URL, fetch_cross_rate
from peybot.ingestion.http import DEFAULT_TIMEOUT, build_session
from peybot.ingestion.models import CurrencyTag, RateSnapshot, SourceEndpoint
from peybot.ingestion.tgju import default_endpoints, fetch_tgju_rate
from peybot.messaging.formatter import format_message
from peybot.messaging.telegram import TelegramNotifier
from peybot.settings import Settings, load_settings
from peybot.utils.conversion import derive_lira_price, format_int
from peybot.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["collect_quotes", "run_tick", "run_forever", "main"]


def collect_quotes(
    session: requests.Session,
    endpoints: Iterable[SourceEndpoint],
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[CurrencyTag, int]:
    """Fetch every endpoint in order, skipping the ones that fail."""

    quotes: dict[CurrencyTag, int] = {}
    for endpoint in endpoints:
        try:
            value = fetch_tgju_rate(session, endpoint.url, timeout=timeout)
        except PeybotError as exc:
            LOGGER.warning("⚠️ دریافت %s ناموفق: %s", endpoint.tag, exc)
            continue
        quotes[endpoint.tag] = value
        LOGGER.info("%s = %s", endpoint.tag, format_int(value))
    return quotes


def run_tick(
    session: requests.Session,
    notifier: TelegramNotifier,
    settings: Settings,
    *,
    endpoints: Iterable[SourceEndpoint] | None = None,
    ticker_url: str = BTCTURK_TICKER_URL,
) -> str | None:
    """Run one collect/convert/publish pass.

    Returns the text handed to the notifier, or ``None`` when the tick was
    skipped because the dollar price or the cross-rate is unavailable.
    """

    snapshot = RateSnapshot(
        quotes=collect_quotes(
            session,
            endpoints if endpoints is not None else default_endpoints(),
            timeout=settings.request_timeout,
        )
    )
    if snapshot.usd is None:
        LOGGER.warning("⚠️ نرخ دلار پیدا نشد; skipping tick")
        return None

    try:
        snapshot.cross_rate = fetch_cross_rate(session, ticker_url, timeout=settings.request_timeout)
    except PeybotError as exc:
        LOGGER.warning("⚠️ خطا در دریافت USDT_TRY: %s", exc)
        return None

    lira_price = derive_lira_price(snapshot.usd, snapshot.cross_rate)
    LOGGER.info("TRY = %s toman (USDT_TRY=%s)", format_int(lira_price), snapshot.cross_rate)
    text = format_message(snapshot.quotes, lira_price, channel_id=settings.channel_id)
    notifier.notify(text)
    return text


def run_forever(
    session: requests.Session,
    notifier: TelegramNotifier,
    settings: Settings,
    *,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
    **tick_kwargs,
) -> int:
    """Repeat :func:`run_tick` with a fixed pause after every tick.

    ``max_ticks`` bounds the loop; ``None`` keeps it running until the
    process is stopped. Returns the number of ticks executed.
    """

    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        try:
            run_tick(session, notifier, settings, **tick_kwargs)
        except PeybotError as exc:
            LOGGER.error("Tick failed: %s", exc)
        ticks += 1
        LOGGER.debug("Sleeping %s seconds before next tick", settings.interval_seconds)
        sleep(settings.interval_seconds)
    return ticks


def main() -> None:
    try:
        settings = load_settings()
    except MissingCredentialError as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc

    session = build_session()
    notifier = TelegramNotifier(
        session, settings.bot_token, settings.channel_id, timeout=settings.request_timeout
    )
    LOGGER.info("▶️ peybot started. Updating every %s seconds...", settings.interval_seconds)
    try:
        run_forever(session, notifier, settings)
    except KeyboardInterrupt:
        LOGGER.info("Interrupted; stopping peybot")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
