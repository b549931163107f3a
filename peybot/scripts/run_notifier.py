"""CLI entry point for the Telegram rate notifier."""

from __future__ import annotations

from peybot.runner import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
