"""Java version detection from ``java -Xinternalversion`` output."""

from __future__ import annotations

import os
import re
import subprocess

_VERSION = re.compile(r"[0-9.]+")
_PREFIXES = ("JRE (", "VM (")


def _leading_version(text: str) -> str | None:
    match = _VERSION.match(text)
    return match.group(0) if match else None


def _zulu_version(text: str) -> str | None:
    paren = text.find("(")
    if paren == -1:
        return None
    return _leading_version(text[paren + 1 :])


def parse_jre_version(text: str) -> str | None:
    """Parse the Java version from ``java -Xinternalversion`` output.

    Recognised shapes include ``JRE (1.8.0_222-b10)``,
    ``JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)`` and
    ``VM (1.8.0_222-b10)``. Returns None when nothing matches.
    """
    for marker in _PREFIXES:
        index = text.find(marker)
        if index != -1:
            rest = text[index + len(marker) :]
            break
    else:
        return None
    return _leading_version(rest) or _zulu_version(rest)


def format_java_version(java_out: str) -> str | None:
    """Extract the version from ``java_out`` and prefix it with ``v``."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def get_java_version() -> str | None:
    """Run Java and return its combined stdout and stderr, or None if it cannot start."""
    java_home = os.environ.get("JAVA_HOME")
    command = f"{java_home}/bin/java" if java_home is not None else "java"
    try:
        result = subprocess.run(
            [command, "-Xinternalversion"], capture_output=True, check=False
        )
    except OSError:
        return None
    # Some vendors report the version on stderr.
    return result.stdout.decode("utf-8") + result.stderr.decode("utf-8")