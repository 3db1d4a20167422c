"""Small file helpers."""

from __future__ import annotations

import os


def read_file(file_name: str | os.PathLike[str]) -> str:
    """Return the text contents of a file; raises OSError if it cannot be read."""
    with open(file_name, encoding="utf-8") as handle:
        return handle.read()