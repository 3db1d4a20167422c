"""Formatting of memory and swap usage."""

from __future__ import annotations

import math

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_kib(n_kib: int) -> str:
    """Render an amount given in KiB with the largest fitting binary unit, e.g. ``8GiB``."""
    n_bytes = n_kib * 1024
    exponent = 0
    while exponent + 1 < len(_BINARY_UNITS) and n_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = n_bytes / 1024**exponent
    return f"{value:.0f}{_BINARY_UNITS[exponent]}"


def percent_sign(shell: str) -> str:
    """The percent sign escaped for the prompt syntax of ``shell``."""
    if shell == "zsh":
        return "%%"
    if shell == "powershell":
        return "`%"
    return "%"


def format_usage(used_kib: int, total_kib: int, show_percentage: bool, sign: str) -> str:
    """Render usage either as a rounded percentage or as ``used/total``."""
    if not show_percentage:
        return f"{format_kib(used_kib)}/{format_kib(total_kib)}"
    percent = used_kib / total_kib * 100 if total_kib else math.nan
    if math.isnan(percent):
        return f"NaN{sign}"
    return f"{percent:.0f}{sign}"