"""Building blocks for an informative shell prompt: paths, timing, tool versions, git state and environment details."""

__version__ = "0.1.0"