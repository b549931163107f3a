"""Telegram Bot API delivery for the rate bulletin."""

from __future__ import annotations

import requests

from peybot.errors import NotifyFailedError
from peybot.ingestion.http import DEFAULT_TIMEOUT
from peybot.utils.logger import get_logger

LOGGER = get_logger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class TelegramNotifier:
    """Post messages to a single chat through ``sendMessage``."""

    def __init__(
        self,
        session: requests.Session,
        bot_token: str,
        chat_id: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        api_base: str = TELEGRAM_API_BASE,
    ) -> None:
        self.session = session
        self.chat_id = chat_id
        self.timeout = timeout
        self._url = f"{api_base}/bot{bot_token}/sendMessage"

    def send(self, text: str) -> None:
        """Deliver ``text`` or raise :class:`NotifyFailedError`."""

        try:
            response = self.session.post(
                self._url,
                data={"chat_id": self.chat_id, "text": text},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise NotifyFailedError(f"transport error: {exc}") from exc
        if not 200 <= response.status_code < 300:
            body = response.text
            raise NotifyFailedError(
                f"status {response.status_code} / body: {body}",
                status_code=response.status_code,
                body=body,
            )

    def notify(self, text: str) -> bool:
        """Send ``text`` and log the outcome; never raises."""

        try:
            self.send(text)
        except NotifyFailedError as exc:
            if exc.status_code is None:
                LOGGER.error("❌ خطا در ارسال به تلگرام: %s", exc)
            else:
                LOGGER.warning("⚠️ تلگرام پاسخ غیرموفق داد: %s", exc)
            return False
        LOGGER.info("✅ پیام به تلگرام ارسال شد")
        return True


__all__ = ["TELEGRAM_API_BASE", "TelegramNotifier"]
