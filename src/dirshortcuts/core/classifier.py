from __future__ import annotations

"""
Path Classification.

Decides how a discovered directory is rendered and derives the parent and
child components of its shortcut. A STANDARD parent is only the base name
of the parent directory: the rendered value `$<parent>/<child>` points at
the parent's own shortcut variable, so nested shortcuts compose through
shell variable chaining and must be sourced ancestors first.
"""

import os
from typing import Optional

from dirshortcuts.core.home import TILDE, starts_with_home_alias
from dirshortcuts.domain.shortcut_models import PathKind, PathVariant, ShortcutPath


def classify_path(path: str, home: Optional[str]) -> PathKind:
    """
    Label a path as home-rooted (ENVIRONMENT) or plain (STANDARD).

    Classification is textual: only paths still carrying a home alias, with
    a home directory actually known, are ENVIRONMENT. Expanded absolute
    paths are always STANDARD.
    """
    if home and starts_with_home_alias(path):
        return PathKind.ENVIRONMENT
    return PathKind.STANDARD


def child_component(path: str) -> str:
    """Return the last segment of path, ignoring trailing separators."""
    return os.path.basename(os.path.normpath(path))


def parent_component(path: str, kind: PathKind) -> PathVariant:
    """
    Derive the parent variant of a shortcut.

    Args:
        path: Directory path being converted.
        kind: Classification of the path.

    Returns:
        PathVariant: Parent base name for STANDARD, '~' for ENVIRONMENT.
    """
    if kind is PathKind.ENVIRONMENT:
        return PathVariant(path=TILDE, kind=kind)

    parent_dir = os.path.dirname(os.path.normpath(path))
    return PathVariant(path=os.path.basename(parent_dir), kind=kind)


def to_shortcut_path(path: str, home: Optional[str]) -> ShortcutPath:
    """Classify path and split it into its shortcut components."""
    kind = classify_path(path, home)
    return ShortcutPath(parent=parent_component(path, kind), child=child_component(path))
