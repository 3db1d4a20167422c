"""Version detection for the Go, Dart, Python, Ruby and Node.js toolchains."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import PurePath

log = logging.getLogger(__name__)


def format_go_version(go_stdout: str) -> str | None:
    """Turn ``go version go1.12 darwin/amd64`` into ``v1.12``."""
    parts = go_stdout.split("go version go", 1)
    if len(parts) < 2:
        return None
    words = parts[1].split()
    if not words:
        return None
    return f"v{words[0]}"


def format_dart_version(dart_stdout: str) -> str | None:
    """Take the fourth space-separated word of ``dart --version`` output."""
    words = dart_stdout.split(" ")
    if len(words) < 4:
        return None
    return f"v{words[3]}"


def format_python_version(python_stdout: str) -> str:
    """Turn ``Python 3.7.2`` into ``v3.7.2``."""
    text = python_stdout
    while text.startswith("Python "):
        text = text[len("Python ") :]
    return f"v{text.strip()}"


def format_ruby_version(ruby_version: str) -> str | None:
    """Take the first five bytes of the second word of ``ruby -v`` output."""
    words = ruby_version.split()
    if len(words) < 2:
        return None
    raw = words[1].encode("utf-8")
    if len(raw) < 5:
        return None
    try:
        version = raw[:5].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def format_node_version(node_stdout: str) -> str:
    """The ``node --version`` output without surrounding whitespace."""
    return node_stdout.strip()


def get_python_virtual_env() -> str | None:
    """The final path component of ``$VIRTUAL_ENV``, if set."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if name in ("", ".."):
        return None
    return name


def _run(*command: str) -> subprocess.CompletedProcess[bytes] | None:
    try:
        return subprocess.run(list(command), capture_output=True, check=False)
    except OSError:
        return None


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def get_go_version() -> str | None:
    """The raw output of ``go version``."""
    result = _run("go", "version")
    return None if result is None else _decode(result.stdout)


def get_dart_version() -> str | None:
    """The raw output of ``dart --version``, which Dart writes to stderr."""
    result = _run("dart", "--version")
    if result is None:
        return None
    if result.returncode != 0:
        log.warning(
            "Non-Zero exit code '%s' when executing `dart --version`", result.returncode
        )
        return None
    return _decode(result.stderr)


def get_python_version() -> str | None:
    """The raw output of ``python --version``, from stdout or, for old versions, stderr."""
    result = _run("python", "--version")
    if result is None:
        return None
    if result.returncode != 0:
        log.warning(
            "Non-Zero exit code '%s' when executing `python --version`",
            result.returncode,
        )
        return None
    output = result.stdout if result.stdout else result.stderr
    return output.decode("utf-8")


def get_pyenv_version() -> str | None:
    """The raw output of ``pyenv version-name``."""
    result = _run("pyenv", "version-name")
    return None if result is None else _decode(result.stdout)


def get_ruby_version() -> str | None:
    """The raw output of ``ruby -v``."""
    result = _run("ruby", "-v")
    return None if result is None else result.stdout.decode("utf-8")


def get_node_version() -> str | None:
    """The raw output of ``node --version``."""
    result = _run("node", "--version")
    return None if result is None else result.stdout.decode("utf-8")