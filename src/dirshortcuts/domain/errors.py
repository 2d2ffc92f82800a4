from __future__ import annotations

"""
Shortcut Generation Error Taxonomy.

Every fatal condition of a run is a subclass of ShortcutError so the
orchestrator can catch the whole family at a single boundary. Traversal
errors on individual entries are not represented here: they are skipped.
"""


class ShortcutError(Exception):
    """Base class for all fatal shortcut generation failures."""


class HomeUnavailable(ShortcutError):
    """Raised when no home directory can be resolved for the current user."""


class RootNotFound(ShortcutError, FileNotFoundError):
    """Raised when the expanded root directory does not exist."""

    def __init__(self, root: str):
        super().__init__(f"{root} does not exist.")
        self.root = root


class RootUnnamed(ShortcutError, ValueError):
    """Raised when the root has no final path segment to name a shortcut after."""

    def __init__(self, root: str):
        super().__init__(f"Cannot derive a shortcut name from root '{root}'.")
        self.root = root


class PrefixSubstitutionFailed(ShortcutError, ValueError):
    """Raised when a prefix substitution is attempted on a path lacking that prefix."""

    def __init__(self, path: str, prefix: str):
        super().__init__(f"Could not substitute prefix '{prefix}' in '{path}'.")
        self.path = path
        self.prefix = prefix


class WriteFailed(ShortcutError, OSError):
    """Raised when the destination script cannot be created or written."""

    def __init__(self, dest: str, reason: str):
        super().__init__(f"Could not write shortcuts to '{dest}': {reason}")
        self.dest = dest
        self.reason = reason


class ConfigError(ShortcutError, ValueError):
    """Raised when configuration input is invalid."""
