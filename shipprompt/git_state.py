"""Description of an in-progress git operation such as a merge or rebase."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from shipprompt.utils import read_file

_UNSIGNED = re.compile(r"\+?[0-9]+")


class RepositoryState(Enum):
    """The states a git repository can be in."""

    CLEAN = auto()
    MERGE = auto()
    REVERT = auto()
    REVERT_SEQUENCE = auto()
    CHERRY_PICK = auto()
    CHERRY_PICK_SEQUENCE = auto()
    BISECT = auto()
    REBASE = auto()
    REBASE_INTERACTIVE = auto()
    REBASE_MERGE = auto()
    APPLY_MAILBOX = auto()
    APPLY_MAILBOX_OR_REBASE = auto()


@dataclass(frozen=True)
class StateLabel:
    """The segment name and default message shown for a repository state."""

    segment_name: str
    message_default: str


@dataclass(frozen=True)
class StateProgress:
    """How far an operation has got, such as step 3 of 10 of a rebase."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """A label for the repository state, with progress when it is known.

    A description without a label means the repository is clean.
    """

    label: StateLabel | None = None
    progress: StateProgress | None = None

    @property
    def is_clean(self) -> bool:
        return self.label is None


CLEAN = StateDescription()

MERGE_LABEL = StateLabel("merge", "MERGING")
REVERT_LABEL = StateLabel("revert", "REVERTING")
CHERRY_LABEL = StateLabel("cherry_pick", "CHERRY-PICKING")
BISECT_LABEL = StateLabel("bisect", "BISECTING")
AM_LABEL = StateLabel("am", "AM")
REBASE_LABEL = StateLabel("rebase", "REBASING")
AM_OR_REBASE_LABEL = StateLabel("am_or_rebase", "AM/REBASE")

_LABELS = {
    RepositoryState.MERGE: MERGE_LABEL,
    RepositoryState.REVERT: REVERT_LABEL,
    RepositoryState.REVERT_SEQUENCE: REVERT_LABEL,
    RepositoryState.CHERRY_PICK: CHERRY_LABEL,
    RepositoryState.CHERRY_PICK_SEQUENCE: CHERRY_LABEL,
    RepositoryState.BISECT: BISECT_LABEL,
    RepositoryState.APPLY_MAILBOX: AM_LABEL,
    RepositoryState.APPLY_MAILBOX_OR_REBASE: AM_OR_REBASE_LABEL,
}

_REBASE_STATES = frozenset(
    {
        RepositoryState.REBASE,
        RepositoryState.REBASE_INTERACTIVE,
        RepositoryState.REBASE_MERGE,
    }
)


def _file_to_int(path: Path) -> int | None:
    try:
        contents = read_file(path).strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not _UNSIGNED.fullmatch(contents):
        return None
    return int(contents)


def _paths_to_progress(dot_git: Path, current: str, total: str) -> StateProgress | None:
    current_value = _file_to_int(dot_git / current)
    if current_value is None:
        return None
    total_value = _file_to_int(dot_git / total)
    if total_value is None:
        return None
    return StateProgress(current_value, total_value)


def describe_rebase(root: str | os.PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from the files inside ``.git``."""
    dot_git = Path(root) / ".git"
    if (dot_git / "rebase-merge").exists():
        progress = _paths_to_progress(dot_git, "rebase-merge/msgnum", "rebase-merge/end")
    elif (dot_git / "rebase-apply").exists():
        progress = _paths_to_progress(dot_git, "rebase-apply/next", "rebase-apply/last")
    else:
        progress = None
    return StateDescription(REBASE_LABEL, progress)


def get_state_description(
    state: RepositoryState, root: str | os.PathLike[str]
) -> StateDescription:
    """Describe ``state`` for the repository rooted at ``root``."""
    if state is RepositoryState.CLEAN:
        return CLEAN
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(_LABELS[state])