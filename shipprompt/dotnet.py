"""Detection of the .NET SDK version in use for the current directory."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterable

from shipprompt.utils import read_file

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"
_PROJECT_EXTENSIONS = frozenset({".csproj", ".fsproj", ".xproj"})


class FileType(Enum):
    """The kinds of file that mark a .NET project."""

    PROJECT_JSON = auto()
    PROJECT_FILE = auto()
    GLOBAL_JSON = auto()
    SOLUTION_FILE = auto()


@dataclass(frozen=True)
class DotNetFile:
    """A file in the current directory that is relevant to .NET."""

    path: Path
    file_type: FileType


def get_pinned_sdk_version(json_text: str) -> str | None:
    """Return ``v<version>`` from the ``sdk.version`` field of a global.json text."""
    try:
        root = json.loads(json_text)
    except ValueError:
        return None
    if not isinstance(root, dict):
        return None
    sdk = root.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | os.PathLike[str]) -> str | None:
    """Read a global.json file and return the SDK version it pins, if any."""
    try:
        json_text = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def get_dotnet_file_type(path: str | os.PathLike[str]) -> FileType | None:
    """Classify a path as a .NET file, or return None when it is not one."""
    candidate = Path(path)
    name = candidate.name.lower()
    if name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON
    extension = candidate.suffix.lower()
    if extension == ".sln":
        return FileType.SOLUTION_FILE
    if extension in _PROJECT_EXTENSIONS:
        return FileType.PROJECT_FILE
    return None


def get_local_dotnet_files(paths: Iterable[str | os.PathLike[str]]) -> list[DotNetFile]:
    """Pick out the .NET files from a listing of directory entries."""
    files = []
    for entry in paths:
        file_type = get_dotnet_file_type(entry)
        if file_type is not None:
            files.append(DotNetFile(Path(entry), file_type))
    return files


def check_directory_for_global_json(path: str | os.PathLike[str]) -> str | None:
    """Return the version pinned by a global.json inside ``path``, if there is one."""
    global_json_path = Path(path) / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json_path)
    if global_json_path.exists():
        return get_pinned_sdk_version_from_file(global_json_path)
    return None


def try_find_nearby_global_json(
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Look for a pinning global.json in the parent directory or the repository root.

    The parent is skipped when the current directory is itself the repository root.
    """
    current = Path(current_dir)
    root = Path(repo_root) if repo_root is not None else None

    parent: Path | None = None
    if root != current and current.parent != current:
        parent = current.parent

    check_dirs: list[Path] = []
    for directory in (parent, root):
        if directory is None:
            continue
        if check_dirs and check_dirs[-1] == directory:
            continue
        check_dirs.append(directory)

    for directory in check_dirs:
        if directory == current:
            continue
        version = check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def estimate_dotnet_version(
    files: Iterable[DotNetFile],
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Guess the SDK version from the .NET files present, using the CLI as a fallback."""
    files = list(files)

    def first_of(file_type: FileType) -> DotNetFile | None:
        return next((f for f in files if f.file_type == file_type), None)

    relevant = (
        first_of(FileType.GLOBAL_JSON)
        or first_of(FileType.SOLUTION_FILE)
        or (files[0] if files else None)
    )
    if relevant is None:
        return None

    if relevant.file_type is FileType.GLOBAL_JSON:
        return get_pinned_sdk_version_from_file(relevant.path) or get_latest_sdk_from_cli()
    if relevant.file_type is FileType.SOLUTION_FILE:
        # A global.json is assumed not to live above a solution file.
        return get_latest_sdk_from_cli()
    return try_find_nearby_global_json(current_dir, repo_root) or get_latest_sdk_from_cli()


def get_version_from_cli() -> str | None:
    """Return ``v`` plus the output of ``dotnet --version``."""
    try:
        result = subprocess.run(
            ["dotnet", "--version"], capture_output=True, check=False
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --version`. %s", error)
        return None
    try:
        version = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def _latest_sdk_version(output: str) -> str | None:
    """Extract ``v<version>`` from the last line of a ``--list-sdks`` listing."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        return None
    latest_sdk = lines[-1]
    take_until = latest_sdk.find("[") - 1
    if take_until <= 1:
        return None
    return f"v{latest_sdk[:take_until]}"


def get_latest_sdk_from_cli() -> str | None:
    """Return the newest SDK listed by ``dotnet --list-sdks``.

    Falls back to ``dotnet --version`` when the listing command fails.
    """
    try:
        result = subprocess.run(
            ["dotnet", "--list-sdks"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --list-sdks`. %s", error)
        return None

    if result.returncode != 0:
        # Older CLIs do not know --list-sdks.
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    version = _latest_sdk_version(output)
    if version is None:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
    return version