from __future__ import annotations

"""
Directory Tree Collector.

Enumerates every directory strictly under the expanded root, down to the
requested depth. The root is left out: it is turned into its own
shortcut by the builder.

Depth counting follows the walk primitive: the root is level 0, its direct
children level 1. Depth 0 therefore collects nothing and depth N collects
directories at most N levels below the root.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from dirshortcuts.core.filters import compile_patterns, matches_any
from dirshortcuts.infra.fs import walk_directories

logger = logging.getLogger(__name__)

Walker = Callable[..., Iterator[Tuple[str, int]]]


def collect_directories(
        root: str,
        depth: int,
        exclude_patterns: Optional[Iterable[str]] = None,
        walker: Walker = walk_directories,
) -> List[str]:
    """
    Collect directories under root in walk order.

    Unreadable or vanished entries are skipped by the walker; traversal
    problems never abort collection.

    Args:
        root: Expanded root directory.
        depth: Maximum depth below root (non-negative).
        exclude_patterns: Regexes on directory base names. Matching
                          directories and their subtrees are dropped.
                          None disables exclusion entirely.
        walker: Directory walk primitive, injectable for tests.

    Returns:
        List[str]: Directory paths, root excluded.
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}.")

    prune = None
    if exclude_patterns is not None:
        compiled = compile_patterns(exclude_patterns)
        if compiled:
            prune = lambda name: matches_any(name, compiled)  # noqa: E731

    folders = [path for path, _level in walker(root, depth, prune)]
    logger.info(f"Collected {len(folders)} directories under {root} (depth {depth}).")
    return folders
