from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, persisted file, CLI overrides), engine execution and
result rendering. Failures are reported as a single line on stderr.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirshortcuts.core.engine import run_shortcuts
from dirshortcuts.core.validator import validate_config
from dirshortcuts.domain.config import get_default_config, load_config, save_config
from dirshortcuts.domain.errors import ConfigError
from dirshortcuts.domain.run_models import RunResult
from dirshortcuts.infra.logging import LoggingConfig, configure_logging, get_logger
from dirshortcuts.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for any failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs persisted state)
    try:
        base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 4. Merge command-line overrides and validate
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        try:
            saved_to = save_config(clean_conf, args.config_path)
        except ConfigError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        logger.info(f"Configuration saved to {saved_to}")

    # 5. Engine execution phase
    try:
        result = run_shortcuts(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    None values in overrides mean "not given" and keep the base value.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: RunResult) -> None:
    """
    Print the run result to the terminal.

    Args:
        result: The run result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print("Creating shortcuts for: ")
    for _name, value in result.shortcuts:
        print(f"\t{value}")

    if result.dry_run:
        print()
        print(result.script, end="")
        print(f"Dry run: nothing written to {result.dest or '(no destination)'}")
        return

    print(f"Wrote shortcuts to {result.dest}")
