"""Rendering of how long the last command took."""

from __future__ import annotations

import re

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def render_time(raw_seconds: int) -> str:
    """Render seconds as a compact string such as ``2h48m30s``; zero parts are omitted."""
    raw_minutes, seconds = divmod(raw_seconds, 60)
    raw_hours, minutes = divmod(raw_minutes, 60)
    days, hours = divmod(raw_hours, 24)
    parts = zip((days, hours, minutes, seconds), ("d", "h", "m", "s"))
    return "".join(f"{amount}{suffix}" for amount, suffix in parts if amount)


def parse_elapsed(value: str | None) -> int | None:
    """Parse an elapsed time in whole seconds; None if missing or not an unsigned integer."""
    if value is None or not _UNSIGNED.fullmatch(value):
        return None
    seconds = int(value)
    return seconds if seconds <= _U64_MAX else None