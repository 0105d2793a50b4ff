"""Append-only debug log shared by the session and the app."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from coffee_cart import config


def log_debug(event: str, **fields: Any) -> None:
    """Write one ``<utc iso> <event> key=value ...`` line. An empty log path disables logging."""
    if not config.DEBUG_LOG_PATH:
        return
    ts = datetime.now(timezone.utc).isoformat()
    parts = [ts, event]
    parts.extend(f"{key}={value!r}" for key, value in fields.items())
    try:
        path = Path(config.DEBUG_LOG_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(" ".join(parts) + "\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
