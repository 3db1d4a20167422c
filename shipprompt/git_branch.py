"""Grapheme-aware truncation of git branch names."""

from __future__ import annotations

import logging

import regex

log = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


def get_graphemes(text: str, length: int | None) -> str:
    """The first ``length`` grapheme clusters of ``text``; None means all of them."""
    clusters = _GRAPHEME.findall(text)
    return "".join(clusters if length is None else clusters[:length])


def graphemes_len(text: str) -> int:
    """The number of grapheme clusters in ``text``."""
    return len(_GRAPHEME.findall(text))


def truncate_branch_name(
    branch_name: str, truncation_length: int, truncation_symbol: str
) -> str:
    """Cut a branch name to ``truncation_length`` graphemes, marking the cut.

    Only the first grapheme of ``truncation_symbol`` is used, and only when
    something was cut. A length of zero or less means no truncation.
    """
    if truncation_length <= 0:
        log.warning(
            '"truncation_length" should be a positive value, found %s',
            truncation_length,
        )
        return branch_name
    symbol = get_graphemes(truncation_symbol, 1)
    truncated = get_graphemes(branch_name, truncation_length)
    if truncation_length < graphemes_len(branch_name):
        return truncated + symbol
    return truncated