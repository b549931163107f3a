"""Shared HTTP session and plain-text GET helper."""

from __future__ import annotations

import requests

from peybot.errors import DecodeError, NetworkError

# Some upstream pages refuse the default python-requests identifier.
BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/128.0"
DEFAULT_TIMEOUT = 30.0


def build_session(user_agent: str = BROWSER_USER_AGENT) -> requests.Session:
    """Return the process-wide session used for every outbound request."""

    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def fetch_text(session: requests.Session, url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET ``url`` and return the decoded body.

    The browser user agent is sent with the request itself so callers may
    pass any session, not only one from :func:`build_session`. The status
    code is not checked: error pages are returned like any other body and
    fail later when the expected markup is missing.
    """

    try:
        response = session.get(url, headers={"User-Agent": BROWSER_USER_AGENT}, timeout=timeout)
    except (requests.exceptions.ContentDecodingError, requests.exceptions.ChunkedEncodingError) as exc:
        raise DecodeError(f"Read body error for {url}: {exc}") from exc
    except requests.RequestException as exc:
        raise NetworkError(f"Request error for {url}: {exc}") from exc
    return response.text


__all__ = ["BROWSER_USER_AGENT", "DEFAULT_TIMEOUT", "build_session", "fetch_text"]
