from __future__ import annotations

"""
Shortcut Builder.

Turns the expanded root and the collected directories into the ordered
list of named shortcuts. The root shortcut is always first, so every
chained `$<parent>/<child>` value is defined after the variable it
references. Names are not deduplicated: a later shortcut with the same
name silently shadows an earlier one when the script is sourced.
"""

import logging
from typing import Dict, Iterable, List, Optional

from dirshortcuts.core.classifier import child_component, to_shortcut_path
from dirshortcuts.core.emitter import render_value
from dirshortcuts.core.home import TILDE, HomeAliasResolver
from dirshortcuts.domain.errors import RootUnnamed
from dirshortcuts.domain.shortcut_models import PathKind, PathVariant, Shortcut, ShortcutPath

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NAMING
# -----------------------------------------------------------------------------

def shortcut_name(child: str) -> str:
    """
    Derive a shell variable name from a directory name.

    Only '-' characters are removed; other characters pass through as-is.
    """
    return child.replace("-", "")

# -----------------------------------------------------------------------------
# PATH CONVERSION
# -----------------------------------------------------------------------------

def to_shortcut_paths(folders: Iterable[str], home: Optional[str]) -> List[ShortcutPath]:
    """Classify every collected directory and split it into components."""
    shortcut_paths: List[ShortcutPath] = []
    for folder in folders:
        sp = to_shortcut_path(folder, home)
        logger.debug(f"Path kind for {folder}: {sp.kind.value}")
        shortcut_paths.append(sp)
    return shortcut_paths


def build_root_shortcut_path(
        expanded_root: str,
        resolver: HomeAliasResolver,
        alias: str = TILDE,
) -> ShortcutPath:
    """
    Build the root's shortcut path.

    The parent is the whole root compacted back to alias form when it lives
    under the home directory, otherwise the absolute root. It is always
    rendered literally.

    Raises:
        RootUnnamed: If the root has no final segment (e.g. '/').
    """
    child = child_component(expanded_root)
    if not child:
        raise RootUnnamed(expanded_root)

    compacted = resolver.compact(expanded_root, alias)
    if compacted is None:
        logger.info(f"Root {expanded_root} is outside {resolver.home}; using absolute path.")
        literal = expanded_root
    else:
        literal = compacted

    return ShortcutPath(parent=PathVariant(path=literal, kind=PathKind.ENVIRONMENT), child=child)


def to_shortcuts(shortcut_paths: Iterable[ShortcutPath]) -> List[Shortcut]:
    return [Shortcut(name=shortcut_name(sp.child), path=sp) for sp in shortcut_paths]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_shortcuts(
        expanded_root: str,
        folders: Iterable[str],
        resolver: HomeAliasResolver,
        alias: str = TILDE,
) -> List[Shortcut]:
    """
    Assemble the ordered shortcut list with the root at index 0.

    Args:
        expanded_root: Absolute root directory.
        folders: Collected directories in walk order.
        resolver: Home alias resolver for the root compaction.
        alias: Alias used when compacting the root.

    Returns:
        List[Shortcut]: Root shortcut followed by child shortcuts.
    """
    root_path = build_root_shortcut_path(expanded_root, resolver, alias)
    child_paths = to_shortcut_paths(folders, resolver.home)
    return to_shortcuts([root_path, *child_paths])


def find_name_collisions(shortcuts: Iterable[Shortcut]) -> Dict[str, List[str]]:
    """
    Report shortcut names that occur more than once.

    Purely informational; the shortcut list is never altered.

    Returns:
        Dict[str, List[str]]: Name mapped to its rendered values in order.
    """
    seen: Dict[str, List[str]] = {}
    for s in shortcuts:
        seen.setdefault(s.name, []).append(render_value(s.path))
    return {name: values for name, values in seen.items() if len(values) > 1}
