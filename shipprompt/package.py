"""Detection of the version declared by the project in a directory."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

from shipprompt.utils import read_file


def format_version(version: str) -> str:
    """Prefix a version with ``v``, dropping quotes and surrounding whitespace."""
    cleaned = version.replace('"', "").strip()
    return f"v{cleaned}"


def _dig(node: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _load_toml(file_contents: str) -> dict[str, Any] | None:
    try:
        return tomllib.loads(file_contents)
    except tomllib.TOMLDecodeError:
        return None


def extract_cargo_version(file_contents: str) -> str | None:
    """The ``package.version`` of a Cargo.toml text, formatted."""
    version = _dig(_load_toml(file_contents), "package", "version")
    return format_version(version) if isinstance(version, str) else None


def extract_package_version(file_contents: str) -> str | None:
    """The ``version`` of a package.json text, formatted."""
    try:
        package_json = json.loads(file_contents)
    except ValueError:
        return None
    version = _dig(package_json, "version")
    if not isinstance(version, str) or version == "null":
        return None
    return format_version(version)


def extract_poetry_version(file_contents: str) -> str | None:
    """The ``tool.poetry.version`` of a pyproject.toml text, formatted."""
    version = _dig(_load_toml(file_contents), "tool", "poetry", "version")
    return format_version(version) if isinstance(version, str) else None


_MANIFESTS = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
)


def get_package_version(directory: str | os.PathLike[str] = ".") -> str | None:
    """Read the version from the first manifest found in ``directory``.

    Only the first readable manifest is consulted, in the order
    Cargo.toml, package.json, pyproject.toml.
    """
    base = Path(directory)
    for file_name, extract in _MANIFESTS:
        try:
            contents = read_file(base / file_name)
        except (OSError, UnicodeDecodeError):
            continue
        return extract(contents)
    return None