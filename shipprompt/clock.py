"""Formatting of the current time, locally or at a fixed UTC offset."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_DIRECTIVE = re.compile(r"%.", re.DOTALL)
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_OFFSET_LIMIT_HOURS = 24.0


def _expand(time_format: str, moment: datetime) -> str:
    """Expand directives whose output must not depend on the C library or locale."""

    def replace(match: re.Match[str]) -> str:
        directive = match.group(0)
        if directive == "%T":
            return "%H:%M:%S"
        if directive == "%r":
            return "%I:%M:%S " + ("AM" if moment.hour < 12 else "PM")
        if directive == "%p":
            return "AM" if moment.hour < 12 else "PM"
        return directive

    return _DIRECTIVE.sub(replace, time_format)


def format_time(time_format: str, moment: datetime) -> str:
    """Format ``moment`` with a strftime-style format string."""
    return moment.strftime(_expand(time_format, moment))


def _parse_offset_hours(text: str) -> float | None:
    if not _FLOAT.fullmatch(text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format ``utc_time`` shifted by an offset given in (possibly fractional) hours.

    Raises ValueError when the offset is not a number strictly between -24 and 24.
    """
    hours = _parse_offset_hours(utc_time_offset)
    if hours is None or not -_OFFSET_LIMIT_HOURS < hours < _OFFSET_LIMIT_HOURS:
        raise ValueError("Invalid timezone offset.")
    offset = timezone(timedelta(seconds=int(hours * 3600)))
    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    target_time = utc_time.astimezone(offset)
    log.debug("Time in target timezone now is %s", target_time)
    return format_time(time_format, target_time)


def current_time_string(time_format: str, utc_time_offset: str = "local") -> str:
    """Format the current time, at ``utc_time_offset`` hours or in local time.

    An invalid offset falls back to local time.
    """
    if utc_time_offset != "local":
        try:
            return create_offset_time_string(
                datetime.now(timezone.utc), utc_time_offset, time_format
            )
        except ValueError:
            log.warning(
                'Invalid utc_time_offset configuration provided! Falling back to "local".'
            )
    return format_time(time_format, datetime.now().astimezone())