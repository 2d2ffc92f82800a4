from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the directory walking primitive used by the collector, along with
path helpers for locating persistent application data. Acts as the only
module that walks the filesystem directly.
"""

import logging
import os
from typing import Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

UNIX_APP_DIR_NAME = ".dirshortcuts"
CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(home: Optional[str] = None) -> str:
    """
    Resolve the directory for persistent application data.

    The directory is not created here; writers create it on demand.

    Args:
        home: Resolved home directory. Falls back to '~' expansion.

    Returns:
        str: Absolute path to the application data directory.
    """
    base = home or os.path.expanduser("~")
    return os.path.abspath(os.path.join(base, UNIX_APP_DIR_NAME))


def get_default_config_path(home: Optional[str] = None) -> str:
    """Return the default location of the persisted JSON configuration."""
    return os.path.join(get_user_data_dir(home), CONFIG_FILE_NAME)


def normalize_path(path: str) -> str:
    """
    Normalize a path string into an absolute path without expanding aliases.

    Home aliases are handled by the resolver; this only anchors relative
    paths to the working directory and drops redundant separators.
    """
    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# DIRECTORY WALK API
# -----------------------------------------------------------------------------

def walk_directories(
        root: str,
        max_depth: int,
        prune: Optional[Callable[[str], bool]] = None,
) -> Iterator[Tuple[str, int]]:
    """
    Walk the tree under root depth-first and yield every directory found.

    The root itself sits at depth 0 and is never yielded. Entries are visited
    in name order and each directory is yielded before its own children.
    Symbolic links that point to directories are yielded but not descended
    into. Directories that cannot be listed are yielded without children.

    Args:
        root: Directory to start from.
        max_depth: Deepest level to yield (1 = direct children only).
        prune: Optional predicate on a directory's base name. Matching
               directories are neither yielded nor descended into.

    Yields:
        Tuple[str, int]: (directory path, depth below root).
    """
    if max_depth < 1:
        return

    # Directories os.walk failed to list, in visiting order
    unreadable: List[str] = []

    def _on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory '{error.filename}': {error}")
        if error.filename and error.filename != root:
            unreadable.append(error.filename)

    # followlinks=True so linked directories are visited in order; they are
    # never descended into because their dirs list is cleared below.
    for dirpath, dirs, _files in os.walk(root, onerror=_on_error, followlinks=True):
        yield from _drain_unreadable(unreadable, root)

        depth = _depth_below(root, dirpath)
        if depth:
            yield dirpath, depth

        if depth >= max_depth or (depth and os.path.islink(dirpath)):
            dirs[:] = []
            continue

        # In-place directory pruning
        if prune is not None:
            kept = []
            for d in dirs:
                if prune(d):
                    logger.debug(f"Pruned excluded directory: {os.path.join(dirpath, d)}")
                else:
                    kept.append(d)
            dirs[:] = kept
        dirs.sort()

    yield from _drain_unreadable(unreadable, root)


def _drain_unreadable(unreadable: List[str], root: str) -> Iterator[Tuple[str, int]]:
    while unreadable:
        path = unreadable.pop(0)
        yield path, _depth_below(root, path)


def _depth_below(root: str, path: str) -> int:
    rel = os.path.relpath(path, root)
    if rel == ".":
        return 0
    return rel.count(os.sep) + 1
