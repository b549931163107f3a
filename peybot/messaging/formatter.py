"""Render the Persian rate bulletin posted to the channel."""

from __future__ import annotations

from typing import Final, Mapping

from peybot.ingestion.models import CURRENCY_ORDER, CurrencyTag
from peybot.utils.conversion import display_value, format_int

HEADER: Final[str] = "📊 نرخ لحظه‌ای ارز (به تومان):"
FOOTER: Final[str] = "🔄 به‌روزرسانی هر ۱ دقیقه"
UNIT: Final[str] = "تومان"

# (emoji, Persian name) per currency.
CURRENCY_LABELS: Final[dict[CurrencyTag, tuple[str, str]]] = {
    "USD": ("💵", "دلار"),
    "EUR": ("💶", "یورو"),
    "AED": ("🇦🇪", "درهم"),
    "CNY": ("🇨🇳", "یوآن چین"),
}
LIRA_LABEL: Final[tuple[str, str]] = ("🇹🇷", "لیر ترکیه")


def _rate_line(label: tuple[str, str], value: int) -> str:
    emoji, name = label
    return f"{emoji} {name}: {format_int(value)} {UNIT}"


def format_message(quotes: Mapping[str, int], lira_price: int, *, channel_id: str) -> str:
    """Build the message text for one tick.

    ``quotes`` holds rial prices; each present currency gets one line in
    :data:`CURRENCY_ORDER`. The channel id is appended as the last line.
    """

    lines = [HEADER, ""]
    for tag in CURRENCY_ORDER:
        if tag in quotes:
            lines.append(_rate_line(CURRENCY_LABELS[tag], display_value(quotes[tag])))
    lines.extend(["", _rate_line(LIRA_LABEL, lira_price), "", FOOTER, "", channel_id])
    return "\n".join(lines)


__all__ = ["HEADER", "FOOTER", "UNIT", "CURRENCY_LABELS", "LIRA_LABEL", "format_message"]
