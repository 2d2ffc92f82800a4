from __future__ import annotations

"""
Home Directory Alias Resolution.

Rewrites the textual home aliases ('~', '$HOME', '${HOME}') into the
resolved home directory and back. The home directory is resolved once at
startup and carried by a HomeAliasResolver instance, so every component
sees the same value and tests can inject a fake one.

Prefix matching works on whole path components: '~/src' starts with '~'
but '~alice/src' and '$HOMEDIR/src' do not.
"""

import logging
import os
import posixpath
from typing import Mapping, Optional, Tuple

from dirshortcuts.domain.errors import HomeUnavailable, PrefixSubstitutionFailed

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

TILDE = "~"
HOME_VAR = "$HOME"
HOME_VAR_CURLY = "${HOME}"

# Expansion tries the aliases in this exact order
HOME_ALIASES: Tuple[str, ...] = (TILDE, HOME_VAR, HOME_VAR_CURLY)

SEP = "/"

# -----------------------------------------------------------------------------
# PREFIX PRIMITIVES
# -----------------------------------------------------------------------------

def has_prefix(path: str, prefix: str) -> bool:
    """
    Check whether path starts with prefix on a component boundary.

    Args:
        path: Path text to inspect.
        prefix: Leading components to look for.

    Returns:
        bool: True if prefix equals path or is followed by a separator.
    """
    if not prefix:
        return False
    if prefix == SEP:
        return path.startswith(SEP)
    prefix = prefix.rstrip(SEP)
    return path == prefix or path.startswith(prefix + SEP)


def substitute_prefix(path: str, prefix: str, replacement: str) -> str:
    """
    Replace the leading prefix of path with replacement.

    The remainder after the prefix is joined onto the replacement; an empty
    remainder yields the replacement alone.

    Raises:
        PrefixSubstitutionFailed: If path does not start with prefix.
    """
    if not has_prefix(path, prefix):
        raise PrefixSubstitutionFailed(path, prefix)

    remainder = path[len(prefix):].lstrip(SEP)
    if not remainder:
        return replacement
    return posixpath.join(replacement, remainder)


def starts_with_home_alias(path: str) -> bool:
    """Return True if path begins with any recognised home alias."""
    return any(has_prefix(path, alias) for alias in HOME_ALIASES)


def matching_alias(path: str) -> Optional[str]:
    """Return the first alias (in expansion order) that prefixes path."""
    for alias in HOME_ALIASES:
        if has_prefix(path, alias):
            return alias
    return None

# -----------------------------------------------------------------------------
# HOME RESOLUTION
# -----------------------------------------------------------------------------

def resolve_home_dir(
        override: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve the current user's home directory exactly once.

    Resolution order: explicit override, the HOME variable of env (defaults
    to os.environ), then the password database via os.path.expanduser.

    Args:
        override: Explicit home directory, e.g. from configuration.
        env: Environment mapping to read HOME from.

    Returns:
        str: Home directory without trailing separators.

    Raises:
        HomeUnavailable: If no home directory can be determined.
    """
    environ = os.environ if env is None else env

    home = (override or "").strip() or (environ.get("HOME") or "").strip()
    if not home and env is None:
        expanded = os.path.expanduser(TILDE)
        if expanded != TILDE:
            home = expanded

    if not home:
        raise HomeUnavailable("No home directory is known for the current user or environment.")

    if home != SEP:
        home = home.rstrip(SEP) or SEP

    logger.debug(f"Resolved home directory: {home}")
    return home

# -----------------------------------------------------------------------------
# RESOLVER SERVICE
# -----------------------------------------------------------------------------

class HomeAliasResolver:
    """
    Expands and compacts home aliases against one resolved home directory.
    """

    def __init__(self, home: str):
        """
        Args:
            home: Resolved absolute home directory (see resolve_home_dir).
        """
        if not home:
            raise HomeUnavailable("An empty home directory cannot be used for alias resolution.")
        self.home = home

    def expand(self, path: str) -> Optional[str]:
        """
        Rewrite a home-alias prefixed path into an absolute path.

        Aliases are tried in the order '~', '$HOME', '${HOME}'. A None result
        means the path carries no alias and is already resolved; it is not
        a failure.

        Args:
            path: User supplied path text.

        Returns:
            Optional[str]: Expanded path, or None if no alias matched.
        """
        for alias in HOME_ALIASES:
            if has_prefix(path, alias):
                expanded = substitute_prefix(path, alias, self.home)
                logger.debug(f"Expanded '{path}' via '{alias}' to '{expanded}'")
                return expanded
        return None

    def compact(self, path: str, alias: str = TILDE) -> Optional[str]:
        """
        Rewrite an absolute path under the home directory into alias form.

        Args:
            path: Absolute path to compact.
            alias: Alias to put in place of the home directory.

        Returns:
            Optional[str]: Compacted path, or None if path is not under home.
        """
        if not has_prefix(path, self.home):
            return None
        return substitute_prefix(path, self.home, alias)

    def resolve(self, path: str) -> str:
        """Expand path if it carries an alias, otherwise return it unchanged."""
        expanded = self.expand(path)
        return path if expanded is None else expanded
