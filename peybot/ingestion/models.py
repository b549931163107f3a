"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Literal

CurrencyTag = Literal["USD", "EUR", "AED", "CNY"]

# Message lines follow this order regardless of fetch order.
CURRENCY_ORDER: Final[tuple[CurrencyTag, ...]] = ("USD", "EUR", "AED", "CNY")


@dataclass(frozen=True, slots=True)
class SourceEndpoint:
    """A market-data page publishing the rial price of one currency."""

    tag: CurrencyTag
    url: str


@dataclass(slots=True)
class RateSnapshot:
    """Prices gathered during a single tick.

    ``quotes`` maps a currency tag to its rial price and only holds the tags
    whose fetch succeeded. ``cross_rate`` is the USDT/TRY last price once the
    ticker has been read.
    """

    quotes: dict[CurrencyTag, int] = field(default_factory=dict)
    cross_rate: float | None = None

    @property
    def usd(self) -> int | None:
        return self.quotes.get("USD")


__all__ = ["CurrencyTag", "CURRENCY_ORDER", "SourceEndpoint", "RateSnapshot"]
