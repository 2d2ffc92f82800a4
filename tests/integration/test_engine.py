from __future__ import annotations

"""
Integration tests for the orchestration engine.

Runs complete generations against real directory trees under a fake home
and checks the emitted script, ordering guarantees and failure results.
"""

import os
import re
from pathlib import Path

import pytest

from dirshortcuts.core.engine import run_shortcuts

EXPORT_RX = re.compile(r'^export (?P<name>[^=]+)="(?P<value>.*)"$')


def _exports(script: str):
    lines = script.splitlines()
    assert lines[0] == "#!/bin/bash"
    assert lines[1] == ""
    return [EXPORT_RX.match(line).groupdict() for line in lines[2:]]


def test_projects_scenario(projects_tree, home_env, mock_config_dict):
    result = run_shortcuts(mock_config_dict, env=home_env)

    assert result.ok, result.error
    script = Path(mock_config_dict["dest"]).read_text(encoding="utf-8")
    assert script == (
        "#!/bin/bash\n"
        "\n"
        'export projects="~/projects"\n'
        'export app="$projects/app"\n'
        'export lib="$projects/lib"\n'
    )
    assert result.shortcuts == [
        ("projects", "~/projects"),
        ("app", "$projects/app"),
        ("lib", "$projects/lib"),
    ]
    assert result.expanded_root == str(projects_tree)


@pytest.mark.parametrize("root", ["$HOME/projects", "${HOME}/projects"])
def test_variable_aliases_expand(projects_tree, home_env, mock_config_dict, root):
    mock_config_dict["root"] = root
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert result.ok, result.error
    assert result.shortcuts[0] == ("projects", "~/projects")


def test_compaction_alias_is_configurable(projects_tree, home_env, mock_config_dict):
    mock_config_dict["alias"] = "$HOME"
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert result.shortcuts[0] == ("projects", "$HOME/projects")


def test_export_count_is_children_plus_root(projects_tree, home_env, mock_config_dict):
    mock_config_dict["depth"] = 3
    result = run_shortcuts(mock_config_dict, env=home_env)

    exports = _exports(result.script)
    # app, app/src, app/src/core, lib, lib/my-utils
    assert len(exports) == 5 + 1
    assert exports[0]["name"] == "projects"
    assert [e["name"] for e in exports[1:]] == ["app", "src", "core", "lib", "myutils"]
    for e in exports[1:]:
        assert re.fullmatch(r"\$[^/]+/[^/]+", e["value"])
    assert {"name": "myutils", "value": "$lib/my-utils"} in exports


def test_parents_are_defined_before_children(projects_tree, home_env, mock_config_dict):
    mock_config_dict["depth"] = 3
    result = run_shortcuts(mock_config_dict, env=home_env)

    defined = set()
    for e in _exports(result.script):
        if e["value"].startswith("$"):
            parent = e["value"][1:].split("/", 1)[0]
            assert parent in defined
        defined.add(e["name"])


def test_depth_zero_emits_root_only(projects_tree, home_env, mock_config_dict):
    mock_config_dict["depth"] = 0
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert len(_exports(result.script)) == 1


def test_absolute_root_outside_home(tmp_path, home_env, mock_config_dict):
    data = tmp_path / "srv" / "data"
    (data / "raw").mkdir(parents=True)
    mock_config_dict["root"] = str(data)

    result = run_shortcuts(mock_config_dict, env=home_env)

    assert result.ok, result.error
    assert result.shortcuts == [("data", str(data)), ("raw", "$data/raw")]


def test_absolute_root_inside_home_is_compacted(projects_tree, home_env, mock_config_dict):
    mock_config_dict["root"] = str(projects_tree)
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert result.shortcuts[0] == ("projects", "~/projects")


def test_sibling_collision_keeps_both_lines(fake_home, home_env, mock_config_dict):
    root = fake_home / "projects"
    (root / "a-b").mkdir(parents=True)
    (root / "ab").mkdir()
    mock_config_dict["warn_collisions"] = True

    result = run_shortcuts(mock_config_dict, env=home_env)

    lines = Path(mock_config_dict["dest"]).read_text(encoding="utf-8").splitlines()
    assert lines[3:] == ['export ab="$projects/a-b"', 'export ab="$projects/ab"']
    assert result.collisions == {"ab": ["$projects/a-b", "$projects/ab"]}


def test_rerun_is_byte_identical(projects_tree, home_env, mock_config_dict):
    dest = Path(mock_config_dict["dest"])
    run_shortcuts(mock_config_dict, env=home_env)
    first = dest.read_bytes()
    run_shortcuts(mock_config_dict, env=home_env)
    assert dest.read_bytes() == first


def test_excludes_ignored_unless_enabled(projects_tree, home_env, mock_config_dict):
    mock_config_dict["excludes"] = ["^app$"]
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert [n for n, _ in result.shortcuts] == ["projects", "app", "lib"]

    mock_config_dict["apply_excludes"] = True
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert [n for n, _ in result.shortcuts] == ["projects", "lib"]


def test_missing_root_fails_without_writing(fake_home, home_env, mock_config_dict):
    mock_config_dict["root"] = "~/does-not-exist"
    result = run_shortcuts(mock_config_dict, env=home_env)

    assert result.ok is False
    assert result.error_kind == "RootNotFound"
    assert not Path(mock_config_dict["dest"]).exists()


def test_missing_home_fails(projects_tree, mock_config_dict):
    result = run_shortcuts(mock_config_dict, env={})
    assert result.ok is False
    assert result.error_kind == "HomeUnavailable"


def test_unwritable_destination_fails(projects_tree, home_env, mock_config_dict, tmp_path):
    mock_config_dict["dest"] = str(tmp_path / "no" / "such" / "dir" / "out.sh")
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert result.ok is False
    assert result.error_kind == "WriteFailed"


@pytest.mark.parametrize("atomic", [False, True])
def test_undecodable_directory_name_keeps_previous_script(projects_tree, home_env, mock_config_dict, atomic):
    os.mkdir(os.path.join(os.fsencode(str(projects_tree)), b"bad\xff"))
    dest = Path(mock_config_dict["dest"])
    dest.write_text("previous good script\n", encoding="utf-8")
    mock_config_dict["atomic_write"] = atomic

    result = run_shortcuts(mock_config_dict, env=home_env)

    assert result.ok is False
    assert result.error_kind == "WriteFailed"
    assert dest.read_text(encoding="utf-8") == "previous good script\n"
    assert not [p for p in dest.parent.iterdir() if p.name.startswith(".dirshortcuts-")]


def test_dry_run_renders_without_writing(projects_tree, home_env, mock_config_dict):
    result = run_shortcuts(mock_config_dict, dry_run=True, env=home_env)
    assert result.ok
    assert result.dry_run is True
    assert result.script.startswith("#!/bin/bash\n\n")
    assert not Path(mock_config_dict["dest"]).exists()


def test_missing_root_setting_is_config_error(home_env, mock_config_dict):
    mock_config_dict["root"] = None
    result = run_shortcuts(mock_config_dict, env=home_env)
    assert result.error_kind == "ConfigError"


def test_home_override_from_config(projects_tree, fake_home, mock_config_dict):
    mock_config_dict["home"] = str(fake_home)
    result = run_shortcuts(mock_config_dict, env={})
    assert result.ok, result.error
    assert result.shortcuts[0] == ("projects", "~/projects")
