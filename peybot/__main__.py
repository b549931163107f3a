from __future__ import annotations

from peybot.runner import main

main()
