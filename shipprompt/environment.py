"""Helpers for the hostname, environment variable, nix-shell and username segments."""

from __future__ import annotations

import os
import re
import subprocess

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
ROOT_UID = 0


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut ``host`` at the first occurrence of ``trim_at``; an empty marker keeps it whole."""
    if not trim_at:
        return host
    index = host.find(trim_at)
    return host if index == -1 else host[:index]


def get_env_value(name: str, default: str | None = None) -> str | None:
    """The value of an environment variable, or ``default`` when it is unset.

    A value that is not valid Unicode gives None.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def nix_shell_label(
    shell_type: str | None,
    use_name: bool = False,
    name: str | None = None,
    impure_msg: str = "impure",
    pure_msg: str = "pure",
) -> str | None:
    """The text for the nix-shell segment, or None when not inside a nix-shell.

    ``shell_type`` is ``$IN_NIX_SHELL``; some tools set it to ``1`` for impure shells.
    """
    if shell_type in ("1", "impure"):
        message = impure_msg
    elif shell_type == "pure":
        message = pure_msg
    else:
        return None
    if use_name and name is not None:
        return f"{name} ({message})"
    return message


def get_uid() -> int | None:
    """The current user's id as reported by ``id -u``."""
    try:
        result = subprocess.run(["id", "-u"], capture_output=True, check=False)
    except OSError:
        return None
    try:
        text = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None
    if not _UNSIGNED.fullmatch(text):
        return None
    uid = int(text)
    return uid if uid <= _U32_MAX else None


def should_show_username(
    user: str | None,
    logname: str | None,
    ssh_connection: str | None,
    uid: int | None,
    show_always: bool,
) -> bool:
    """Whether the username is worth showing: another user, SSH, root, or forced."""
    return (
        user != logname
        or ssh_connection is not None
        or uid == ROOT_UID
        or show_always
    )