from __future__ import annotations

from peybot.messaging.formatter import CURRENCY_LABELS, FOOTER, HEADER, LIRA_LABEL, format_message

ALL_QUOTES = {"CNY": 145_000, "USD": 1_050_000, "AED": 286_000, "EUR": 1_220_000}


def _line_for(tag: str, lines: list[str]) -> int:
    emoji, name = CURRENCY_LABELS[tag]
    matches = [i for i, line in enumerate(lines) if line.startswith(f"{emoji} {name}:")]
    assert len(matches) == 1
    return matches[0]


def test_format_message_full_layout() -> None:
    text = format_message(ALL_QUOTES, 3071, channel_id="@peyrates")
    lines = text.split("\n")

    assert lines == [
        HEADER,
        "",
        "💵 دلار: 105,000 تومان",
        "💶 یورو: 122,000 تومان",
        "🇦🇪 درهم: 28,600 تومان",
        "🇨🇳 یوآن چین: 14,500 تومان",
        "",
        "🇹🇷 لیر ترکیه: 3,071 تومان",
        "",
        FOOTER,
        "",
        "@peyrates",
    ]


def test_format_message_orders_lines_regardless_of_input_order() -> None:
    lines = format_message(ALL_QUOTES, 1, channel_id="@c").split("\n")
    positions = [_line_for(tag, lines) for tag in ("USD", "EUR", "AED", "CNY")]
    assert positions == sorted(positions)


def test_format_message_skips_missing_currencies() -> None:
    quotes = {"USD": 1_050_000, "AED": 286_000, "CNY": 145_000}
    text = format_message(quotes, 3071, channel_id="@c")

    emoji, name = CURRENCY_LABELS["EUR"]
    assert f"{emoji} {name}" not in text
    assert "28,600" in text
    assert f"{LIRA_LABEL[0]} {LIRA_LABEL[1]}: 3,071" in text


def test_format_message_display_values_truncate() -> None:
    text = format_message({"USD": 1_050_009}, 10, channel_id="@c")
    assert "105,000" in text
    assert "105,001" not in text


def test_format_message_ends_with_channel_id() -> None:
    text = format_message({"USD": 900_000}, 3000, channel_id="-100123")
    assert text.endswith(f"{FOOTER}\n\n-100123")
