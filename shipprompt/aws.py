"""Discovery of the active AWS profile and region."""

from __future__ import annotations

import os
from pathlib import Path


def _config_location() -> Path | None:
    configured = os.environ.get("AWS_CONFIG_FILE")
    if configured is not None:
        return Path(configured)
    try:
        return Path.home() / ".aws" / "config"
    except RuntimeError:
        return None


def _read_lines(path: Path) -> list[str] | None:
    try:
        with open(path, "rb") as handle:
            raw_lines = handle.read().split(b"\n")
    except OSError:
        return None
    if raw_lines and raw_lines[-1] == b"":
        raw_lines.pop()
    lines = []
    for raw in raw_lines:
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return lines


def get_aws_region_from_config(aws_profile: str | None) -> str | None:
    """Read the region of ``aws_profile`` (or of the default profile) from the AWS config."""
    location = _config_location()
    if location is None:
        return None
    lines = _read_lines(location)
    if lines is None:
        return None

    header = f"[profile {aws_profile}]" if aws_profile is not None else "[default]"
    remaining = iter(lines)
    for line in remaining:
        if line == header:
            break
    else:
        return None

    for line in remaining:
        if line.startswith("["):
            return None
        if line.startswith("region"):
            parts = line.split("=")
            return parts[1].strip() if len(parts) > 1 else None
    return None


def get_aws_region() -> tuple[str, str] | None:
    """Return ``(profile, region)``; either may be empty, None when nothing is known."""
    default_region = os.environ.get("AWS_DEFAULT_REGION")
    if default_region is not None:
        return "", default_region

    aws_profile = os.environ.get("AWS_PROFILE")
    aws_region = get_aws_region_from_config(aws_profile)
    if aws_profile is not None or aws_region is not None:
        return aws_profile or "", aws_region or ""

    region = os.environ.get("AWS_REGION")
    if region is not None:
        return "", region
    return None


def format_aws_region(aws_profile: str, aws_region: str) -> str | None:
    """The region as shown next to the profile: parenthesised when both are present.

    Returns None when both are empty.
    """
    if not aws_profile and not aws_region:
        return None
    if not aws_profile or not aws_region:
        return aws_region
    return f"({aws_region})"