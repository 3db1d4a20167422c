"""Reading the current Kubernetes context and namespace from a kubeconfig file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from shipprompt.utils import read_file


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _lookup(node: Any, key: str) -> Any:
    return node.get(key) if isinstance(node, dict) else None


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return ``(context, namespace)`` from kubeconfig text.

    The namespace is empty when the current context does not set one.
    Returns None when the text is not valid YAML or names no current context.
    """
    try:
        documents = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not documents:
        return None
    conf = documents[0]

    current_ctx = _as_str(_lookup(conf, "current-context"))
    if not current_ctx:
        return None

    namespace = ""
    contexts = _lookup(conf, "contexts")
    if isinstance(contexts, list):
        match = next(
            (ctx for ctx in contexts if _as_str(_lookup(ctx, "name")) == current_ctx),
            None,
        )
        if match is not None:
            namespace = _as_str(_lookup(_lookup(match, "context"), "namespace")) or ""

    return current_ctx, namespace


def _kubeconfig_path() -> Path | None:
    configured = os.environ.get("KUBECONFIG")
    if configured is not None:
        return Path(configured)
    try:
        return Path.home() / ".kube" / "config"
    except RuntimeError:
        return None


def read_kube_context() -> tuple[str, str] | None:
    """Read the kubeconfig named by ``$KUBECONFIG`` or ``~/.kube/config``."""
    path = _kubeconfig_path()
    if path is None:
        return None
    try:
        contents = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)