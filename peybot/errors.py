"""Exception hierarchy raised by peybot components."""

from __future__ import annotations


class PeybotError(Exception):
    """Base class for every error raised by the notifier."""


class MissingCredentialError(PeybotError):
    """A required environment variable is absent or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} env var not set")
        self.name = name


class NetworkError(PeybotError):
    """The HTTP request could not be completed."""


class DecodeError(PeybotError):
    """The response body could not be read or decoded."""


class ParseError(PeybotError):
    """A response body did not contain the expected value."""


class SelectorNotFoundError(PeybotError):
    """The price element is missing from a market-data page."""


class UpstreamRejectedError(PeybotError):
    """The ticker API answered with ``success=false`` or no data."""


class InvalidInputError(PeybotError, ValueError):
    """A conversion was asked to work with an unusable value."""


class NotifyFailedError(PeybotError):
    """Telegram did not accept the message."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "PeybotError",
    "MissingCredentialError",
    "NetworkError",
    "DecodeError",
    "ParseError",
    "SelectorNotFoundError",
    "UpstreamRejectedError",
    "InvalidInputError",
    "NotifyFailedError",
]
