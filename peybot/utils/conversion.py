"""Rial to toman conversions used when building the channel message."""

from __future__ import annotations

import math

from peybot.errors import InvalidInputError

RIAL_PER_TOMAN = 10


def derive_lira_price(usd_quote: int, cross_rate: float) -> int:
    """Price of one Turkish lira in toman, rounded up.

    ``usd_quote`` is the rial price of one dollar and ``cross_rate`` the lira
    price of one USDT, so ``usd_quote / cross_rate`` is rial per lira.
    """

    if not cross_rate > 0:
        raise InvalidInputError(f"cross rate must be positive, got {cross_rate!r}")
    try:
        toman = float(usd_quote) / cross_rate / RIAL_PER_TOMAN
    except OverflowError as exc:
        raise InvalidInputError(f"dollar quote out of range: {usd_quote!r}") from exc
    if not math.isfinite(toman):
        raise InvalidInputError(f"lira price is not finite for cross rate {cross_rate!r}")
    return math.ceil(toman)


def display_value(quote: int) -> int:
    # Truncates; source prices are whole toman already.
    return quote // RIAL_PER_TOMAN


def format_int(value: int) -> str:
    return f"{value:,}"


__all__ = ["RIAL_PER_TOMAN", "derive_lira_price", "display_value", "format_int"]
