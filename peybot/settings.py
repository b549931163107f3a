"""Runtime configuration loaded once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from peybot.errors import MissingCredentialError
from peybot.ingestion.http import DEFAULT_TIMEOUT
from peybot.utils.logger import get_logger

LOGGER = get_logger(__name__)

BOT_TOKEN_VAR = "BOT_TOKEN"
CHANNEL_ID_VAR = "CHANNEL_ID"
TICK_INTERVAL_SECONDS = 60


@dataclass(frozen=True, slots=True)
class Settings:
    """Credentials and timing used by the notifier loop."""

    bot_token: str
    channel_id: str
    interval_seconds: float = TICK_INTERVAL_SECONDS
    request_timeout: float = DEFAULT_TIMEOUT


def _require(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise MissingCredentialError(name)
    return value


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Merge ``.env`` into the environment and read the bot credentials.

    ``env_file`` defaults to ``.env`` in the current working directory.
    Variables already present in the environment take precedence.
    """

    path = Path(env_file) if env_file else Path.cwd() / ".env"
    if load_dotenv(dotenv_path=path, override=False):
        LOGGER.debug("Loaded environment overrides from %s", path)
    return Settings(bot_token=_require(BOT_TOKEN_VAR), channel_id=_require(CHANNEL_ID_VAR))


__all__ = ["BOT_TOKEN_VAR", "CHANNEL_ID_VAR", "TICK_INTERVAL_SECONDS", "Settings", "load_settings"]
