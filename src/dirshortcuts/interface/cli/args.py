from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides for the engine.
"""

import argparse
from typing import Any, Dict, List, Optional

from dirshortcuts import __version__
from dirshortcuts.core.home import HOME_ALIASES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirshortcuts CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirshortcuts",
        description="Generate a sourceable bash script of directory shortcuts.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # --- Required inputs ---
    p.add_argument(
        "-r", "--root",
        required=True,
        help="Top level directory for creating shortcuts within. "
             "May start with ~, $HOME or ${HOME}.",
    )
    p.add_argument(
        "--depth",
        required=True,
        type=non_negative_int,
        help="How many layers of folders below the root get shortcuts.",
    )
    p.add_argument(
        "-d", "--dest",
        required=True,
        help="Destination file path for the generated script.",
    )

    # --- Traversal ---
    p.add_argument(
        "-e", "--excludes",
        action="append",
        default=None,
        help="Comma-separated directory name regexes. Accepted but ignored "
             "unless --apply-excludes is given. May be repeated.",
    )
    p.add_argument(
        "--apply-excludes",
        action="store_true",
        help="Skip directories (and their subtrees) whose name matches --excludes.",
    )

    # --- Home handling ---
    p.add_argument(
        "--alias",
        choices=HOME_ALIASES,
        default=None,
        help="Alias written in place of the home directory in the root shortcut (default: ~).",
    )
    p.add_argument(
        "--home",
        default=None,
        help="Use this path as the home directory instead of $HOME.",
    )

    # --- Output ---
    p.add_argument(
        "--atomic",
        action="store_true",
        help="Write through a temporary file and rename it over the destination.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the script instead of writing it.",
    )
    p.add_argument(
        "--warn-collisions",
        action="store_true",
        help="Warn about shortcut names that are defined more than once.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a JSON config file (default: ~/.dirshortcuts/config.json).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted config file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration before running.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress at INFO level.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root"] = args.root
    overrides["depth"] = args.depth
    overrides["dest"] = args.dest
    overrides["alias"] = args.alias
    overrides["home"] = args.home

    if args.excludes:
        overrides["excludes"] = [item for value in args.excludes for item in _split_csv(value) or []]
    if args.apply_excludes:
        overrides["apply_excludes"] = True
    if args.atomic:
        overrides["atomic_write"] = True
    if args.warn_collisions:
        overrides["warn_collisions"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def non_negative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth '{value}': expected an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth '{value}': must be non-negative")
    return number


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
