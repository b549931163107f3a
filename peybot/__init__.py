"""Public interface for the peybot package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from peybot.errors import (
    DecodeError,
    InvalidInputError,
    MissingCredentialError,
    NetworkError,
    NotifyFailedError,
    ParseError,
    PeybotError,
    SelectorNotFoundError,
    UpstreamRejectedError,
)
from peybot.ingestion.models import CURRENCY_ORDER, RateSnapshot, SourceEndpoint
from peybot.settings import Settings, load_settings

__all__ = [
    "__version__",
    "CURRENCY_ORDER",
    "RateSnapshot",
    "SourceEndpoint",
    "Settings",
    "load_settings",
    "run",
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

try:
    __version__ = importlib_metadata.version("peybot")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def run() -> None:
    from peybot.runner import main as _main

    _main()
