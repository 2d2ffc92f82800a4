from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Required arguments and depth validation.
2. Mapping of flags to configuration overrides.
3. CSV and repeated --excludes parsing.
"""

import pytest

from dirshortcuts.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


REQUIRED = ["--root", "~/projects", "--depth", "2", "--dest", "out.sh"]


def test_required_arguments_mapping():
    overrides = args_to_overrides(parse_args(REQUIRED))

    assert overrides["root"] == "~/projects"
    assert overrides["depth"] == 2
    assert overrides["dest"] == "out.sh"
    assert overrides["alias"] is None
    assert "excludes" not in overrides


@pytest.mark.parametrize("missing", ["--root", "--depth", "--dest"])
def test_missing_required_argument_exits(missing):
    args = list(REQUIRED)
    idx = args.index(missing)
    del args[idx:idx + 2]
    with pytest.raises(SystemExit):
        parse_args(args)


@pytest.mark.parametrize("depth", ["-1", "two"])
def test_invalid_depth_rejected(depth):
    with pytest.raises(SystemExit):
        parse_args(["--root", "/r", "--depth", depth, "--dest", "o.sh"])


def test_excludes_accepts_csv_and_repeats():
    overrides = args_to_overrides(parse_args(REQUIRED + ["-e", "node_modules,.git", "-e", "build"]))
    assert overrides["excludes"] == ["node_modules", ".git", "build"]
    assert "apply_excludes" not in overrides


def test_boolean_flags_mapping():
    overrides = args_to_overrides(parse_args(
        REQUIRED + ["--apply-excludes", "--atomic", "--warn-collisions", "--alias", "$HOME"]
    ))
    assert overrides["apply_excludes"] is True
    assert overrides["atomic_write"] is True
    assert overrides["warn_collisions"] is True
    assert overrides["alias"] == "$HOME"


def test_alias_choices_enforced():
    with pytest.raises(SystemExit):
        parse_args(REQUIRED + ["--alias", "%HOME%"])
