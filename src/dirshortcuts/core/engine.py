from __future__ import annotations

"""
Core orchestration engine.

Coordinates a complete shortcut generation run:
1. Validates configuration.
2. Resolves the home directory once.
3. Expands the root alias and checks the root exists.
4. Collects child directories.
5. Builds the ordered shortcut list.
6. Renders and writes the script.

Every fatal condition surfaces as a ShortcutError from the component that
detected it and is turned into a failed RunResult here. Nothing is
written once any step has failed.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from dirshortcuts.core.builder import build_shortcuts, find_name_collisions
from dirshortcuts.core.collector import collect_directories
from dirshortcuts.core.emitter import render_script, render_value, write_script
from dirshortcuts.core.home import HomeAliasResolver, resolve_home_dir
from dirshortcuts.core.validator import validate_config
from dirshortcuts.domain.errors import ConfigError, RootNotFound, ShortcutError
from dirshortcuts.domain.run_models import (
    RunResult,
    create_error_result,
    create_success_result,
)
from dirshortcuts.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_shortcuts(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
        env: Optional[Mapping[str, str]] = None,
) -> RunResult:
    """
    Execute the full shortcut generation run.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, render the script without writing it.
        env: Environment mapping used to resolve HOME. Defaults to os.environ.

    Returns:
        RunResult: Object containing status, shortcuts and script text.
    """
    logger.info("Shortcut generation started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    expanded_root = ""
    try:
        # 1) Required inputs
        if not cfg["root"]:
            raise ConfigError("A root directory is required.")
        if not cfg["dest"] and not dry_run:
            raise ConfigError("A destination file is required.")

        # 2) Home directory and root expansion
        resolver = HomeAliasResolver(resolve_home_dir(cfg["home"], env))
        expanded_root = normalize_path(resolver.resolve(cfg["root"]))

        if not os.path.exists(expanded_root):
            raise RootNotFound(cfg["root"])
        if not os.path.isdir(expanded_root):
            logger.warning(f"Root {expanded_root} is not a directory; no children will be collected.")

        # 3) Collection
        excludes = cfg["excludes"] if cfg["apply_excludes"] else None
        if cfg["excludes"] and not cfg["apply_excludes"]:
            logger.debug("Exclude patterns given but exclusion is disabled; ignoring them.")

        folders = collect_directories(expanded_root, cfg["depth"], exclude_patterns=excludes)

        # 4) Shortcut assembly
        shortcuts = build_shortcuts(expanded_root, folders, resolver, cfg["alias"])

        collisions: Dict[str, Any] = {}
        if cfg["warn_collisions"]:
            collisions = find_name_collisions(shortcuts)
            for name, values in collisions.items():
                logger.warning(f"Shortcut '{name}' is defined {len(values)} times; the last one wins: {values}")

        # 5) Rendering and persistence
        if dry_run:
            script = render_script(shortcuts)
        else:
            script = write_script(cfg["dest"], shortcuts, atomic=cfg["atomic_write"])
            logger.info(f"Wrote {len(shortcuts)} shortcuts to {cfg['dest']}")

    except ShortcutError as e:
        logger.info(f"Shortcut generation aborted ({type(e).__name__}): {e}")
        return create_error_result(e, cfg, expanded_root, dry_run=dry_run)

    return create_success_result(
        cfg,
        expanded_root,
        shortcuts=[(s.name, render_value(s.path)) for s in shortcuts],
        script=script,
        collisions=collisions,
        dry_run=dry_run,
        summary_extra={"directories": len(folders), "shortcuts": len(shortcuts)},
    )
