from __future__ import annotations

"""
Run Result Data Models.

Defines the result object returned by the orchestration engine to the
interface layer, together with the factories that build it for successful
and failed runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RunResult:
    """
    Unified result of a complete shortcut generation run.

    Attributes:
        ok: True if the script was generated (and written unless dry-run).
        error: Human readable failure message, empty on success.
        error_kind: Class name of the failure, empty on success.
        root: Root path as given by the user.
        expanded_root: Root after home alias expansion.
        dest: Destination script path.
        depth: Requested traversal depth.
        dry_run: Whether the write step was skipped.
        shortcuts: Rendered (name, value) pairs in emission order.
        script: Full script text.
        collisions: Names emitted more than once mapped to their values.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str
    error_kind: str
    root: str
    expanded_root: str
    dest: str
    depth: int
    dry_run: bool = False
    shortcuts: List[Tuple[str, str]] = field(default_factory=list)
    script: str = ""
    collisions: Dict[str, List[str]] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: BaseException,
        cfg: Dict[str, Any],
        expanded_root: str = "",
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> RunResult:
    """
    Create a failed run result instance.

    Args:
        error: The exception that aborted the run.
        cfg: The configuration used during the failed run.
        expanded_root: Root after expansion, if expansion got that far.
        dry_run: Whether the write step was to be skipped.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        RunResult: An immutable error result object.
    """
    return RunResult(
        ok=False,
        error=str(error),
        error_kind=type(error).__name__,
        root=cfg.get("root") or "",
        expanded_root=expanded_root,
        dest=cfg.get("dest") or "",
        depth=int(cfg.get("depth") or 0),
        dry_run=dry_run,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        expanded_root: str,
        shortcuts: List[Tuple[str, str]],
        script: str,
        collisions: Optional[Dict[str, List[str]]] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> RunResult:
    """
    Create a successful run result instance.

    Args:
        cfg: Final configuration used during execution.
        expanded_root: Root after expansion.
        shortcuts: Rendered (name, value) pairs.
        script: Generated script text.
        collisions: Duplicate names found, if collision reporting ran.
        dry_run: Whether the write step was skipped.
        summary_extra: Final execution metrics.

    Returns:
        RunResult: An immutable success result object.
    """
    return RunResult(
        ok=True,
        error="",
        error_kind="",
        root=cfg.get("root") or "",
        expanded_root=expanded_root,
        dest=cfg.get("dest") or "",
        depth=int(cfg.get("depth") or 0),
        dry_run=dry_run,
        shortcuts=shortcuts,
        script=script,
        collisions=collisions or {},
        summary=summary_extra or {},
    )
