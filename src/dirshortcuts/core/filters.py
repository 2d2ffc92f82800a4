from __future__ import annotations

"""
Directory Name Filtering.

Compiles user supplied exclusion patterns and matches directory base names
against them. Used only when exclusion is explicitly enabled.
"""

import logging
import re
from typing import Iterable, List

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded with a warning instead of aborting
    the run.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Return True if name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)
