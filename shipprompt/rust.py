"""Detection of the rustc toolchain version, honouring rustup overrides."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Union

from shipprompt.utils import read_file

_NOT_INSTALLED_PREFIX = "error: toolchain '"
_NOT_INSTALLED_SUFFIX = "' is not installed\n"
TOOLCHAIN_FILE = "rust-toolchain"


@dataclass(frozen=True)
class RustcVersion:
    """``rustup run`` succeeded; holds the raw ``rustc --version`` output."""

    output: str


@dataclass(frozen=True)
class ToolchainName:
    """The requested toolchain is not installed; holds its name."""

    name: str


@dataclass(frozen=True)
class RustupNotWorking:
    """rustup could not be started at all."""


@dataclass(frozen=True)
class RustupError:
    """rustup ran but its output could not be understood."""


RustupOutcome = Union[RustcVersion, ToolchainName, RustupNotWorking, RustupError]


def env_rustup_toolchain() -> str | None:
    """The toolchain named by ``$RUSTUP_TOOLCHAIN``, trimmed, if set."""
    value = os.environ.get("RUSTUP_TOOLCHAIN")
    return None if value is None else value.strip()


def extract_toolchain_from_rustup_override_list(
    stdout: str, cwd: str | os.PathLike[str]
) -> str | None:
    """Find the override toolchain that applies to ``cwd`` in ``rustup override list`` output."""
    if stdout == "no overrides\n":
        return None
    current = PurePath(cwd)
    for line in stdout.splitlines():
        words = line.split()
        if len(words) < 2:
            continue
        directory, toolchain = words[0], words[1]
        if current.is_relative_to(directory):
            return toolchain
    return None


def extract_toolchain_from_rustup_run_rustc_version(
    returncode: int, stdout: bytes, stderr: bytes
) -> RustupOutcome:
    """Interpret the result of ``rustup run <toolchain> rustc --version``."""
    if returncode == 0:
        try:
            return RustcVersion(stdout.decode("utf-8"))
        except UnicodeDecodeError:
            return RustupError()
    try:
        message = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return RustupError()
    if (
        message.startswith(_NOT_INSTALLED_PREFIX)
        and message.endswith(_NOT_INSTALLED_SUFFIX)
        and len(message) >= len(_NOT_INSTALLED_PREFIX) + len(_NOT_INSTALLED_SUFFIX)
    ):
        return ToolchainName(
            message[len(_NOT_INSTALLED_PREFIX) : len(message) - len(_NOT_INSTALLED_SUFFIX)]
        )
    return RustupError()


def _read_first_line(path: Path) -> str | None:
    try:
        content = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    if not content:
        return None
    return content.split("\n", 1)[0].strip()


def find_rust_toolchain_file(current_dir: str | os.PathLike[str]) -> str | None:
    """Return the first line of the nearest ``rust-toolchain`` file, searching upwards."""
    start = Path(current_dir)
    for directory in (start, *start.parents):
        toolchain = _read_first_line(directory / TOOLCHAIN_FILE)
        if toolchain is not None:
            return toolchain
    return None


def format_rustc_version(rustc_stdout: str) -> str:
    """Turn ``rustc 1.34.0 (hash date)`` into ``v1.34.0``."""
    paren = rustc_stdout.find("(")
    head = rustc_stdout if paren == -1 else rustc_stdout[:paren]
    return f"v{head.replace('rustc', '').strip()}"


def _execute_rustup_override_list(cwd: Path) -> str | None:
    try:
        result = subprocess.run(
            ["rustup", "override", "list"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return extract_toolchain_from_rustup_override_list(stdout, cwd)


def _execute_rustup_run_rustc_version(toolchain: str) -> RustupOutcome:
    try:
        result = subprocess.run(
            ["rustup", "run", toolchain, "rustc", "--version"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return RustupNotWorking()
    return extract_toolchain_from_rustup_run_rustc_version(
        result.returncode, result.stdout, result.stderr
    )


def _execute_rustc_version() -> str | None:
    try:
        result = subprocess.run(["rustc", "--version"], capture_output=True, check=False)
    except OSError:
        return None
    return result.stdout.decode("utf-8")


def _rustc_version_string() -> str | None:
    output = _execute_rustc_version()
    return None if output is None else format_rustc_version(output)


def get_rust_version(current_dir: str | os.PathLike[str]) -> str | None:
    """Determine the rustc version for ``current_dir`` without triggering toolchain installs.

    Overrides are looked up in this order: ``$RUSTUP_TOOLCHAIN``, then
    ``rustup override list``, then a ``rust-toolchain`` file.
    """
    cwd = Path(current_dir)
    toolchain = env_rustup_toolchain()
    if toolchain is None:
        toolchain = _execute_rustup_override_list(cwd)
    if toolchain is None:
        toolchain = find_rust_toolchain_file(cwd)

    if toolchain is None:
        return _rustc_version_string()

    outcome = _execute_rustup_run_rustc_version(toolchain)
    match outcome:
        case RustcVersion(output):
            return format_rustc_version(output)
        case ToolchainName(name):
            return name
        case RustupNotWorking():
            return _rustc_version_string()
        case _:
            return None