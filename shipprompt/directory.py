"""Contraction and truncation of the current directory path."""

from __future__ import annotations

import os
from pathlib import PurePath

HOME_SYMBOL = "~"


def _replace_c_dir(path: str) -> str:
    """Turn ``C:/`` into ``/c`` on Windows; leave the path alone elsewhere."""
    if os.name == "nt":
        return path.replace("C:/", "/c")
    return path


def contract_path(
    full_path: str | os.PathLike[str],
    top_level_path: str | os.PathLike[str],
    top_level_replacement: str,
) -> str:
    """Replace the leading ``top_level_path`` of ``full_path`` with a replacement."""
    full = PurePath(full_path)
    top = PurePath(top_level_path)
    if not full.is_relative_to(top):
        return _replace_c_dir(full.as_posix())
    if full == top:
        return _replace_c_dir(top_level_replacement)
    relative = full.relative_to(top).as_posix()
    return f"{top_level_replacement}/{_replace_c_dir(relative)}"


def truncate(dir_string: str, length: int) -> str:
    """Keep only the last ``length`` components of a path; 0 means no truncation."""
    if length == 0:
        return dir_string
    components = dir_string.split("/")
    if components[0] == "":
        components = components[1:]
    if len(components) <= length:
        return dir_string
    return "/".join(components[-length:])


def _abbreviate(word: str, length: int) -> str:
    if not word or len(word) <= length:
        return word
    if word.startswith("."):
        return word[: length + 1]
    return word[:length]


def to_fish_style(pwd_dir_length: int, dir_string: str, truncated_dir_string: str) -> str:
    """Abbreviate each directory before the truncated part to its first letters.

    ``~/.starship/engines/booster/rocket`` with ``engines/booster/rocket``
    kept and a length of 1 becomes ``~/.s/``.
    """
    replaced = dir_string
    if truncated_dir_string:
        while replaced.endswith(truncated_dir_string):
            replaced = replaced[: -len(truncated_dir_string)]
    return "/".join(_abbreviate(word, pwd_dir_length) for word in replaced.split("/"))