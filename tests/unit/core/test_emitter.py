from __future__ import annotations

"""
Unit tests for the Shell Script Emitter.

Verifies value rendering, the exact file layout and write failure
handling in both plain and atomic modes.
"""

import os
import stat
from pathlib import Path

import pytest

from dirshortcuts.core import emitter
from dirshortcuts.core.emitter import render_script, render_value, write_script
from dirshortcuts.domain.errors import WriteFailed
from dirshortcuts.domain.shortcut_models import PathKind, PathVariant, Shortcut, ShortcutPath


@pytest.fixture
def shortcuts():
    return [
        Shortcut("projects", ShortcutPath(PathVariant("~/projects", PathKind.ENVIRONMENT), "projects")),
        Shortcut("app", ShortcutPath(PathVariant("projects", PathKind.STANDARD), "app")),
    ]


def test_render_standard_value_chains_parent_variable():
    sp = ShortcutPath(PathVariant("projects", PathKind.STANDARD), "app")
    assert render_value(sp) == "$projects/app"


def test_render_environment_value_is_literal():
    sp = ShortcutPath(PathVariant("/srv/data", PathKind.ENVIRONMENT), "data")
    assert render_value(sp) == "/srv/data"


def test_render_script_layout(shortcuts):
    assert render_script(shortcuts) == (
        "#!/bin/bash\n"
        "\n"
        'export projects="~/projects"\n'
        'export app="$projects/app"\n'
    )


def test_render_script_empty_list_is_header_only():
    assert render_script([]) == "#!/bin/bash\n\n"


@pytest.mark.parametrize("atomic", [False, True])
def test_write_script_overwrites_identically(tmp_path: Path, shortcuts, atomic):
    dest = tmp_path / "shortcuts.sh"
    dest.write_text("stale content\n" * 50, encoding="utf-8")

    write_script(str(dest), shortcuts, atomic=atomic)
    first = dest.read_bytes()
    write_script(str(dest), shortcuts, atomic=atomic)

    assert dest.read_bytes() == first
    assert first.decode("utf-8") == render_script(shortcuts)


@pytest.mark.parametrize("atomic", [False, True])
def test_write_script_missing_parent_fails(tmp_path: Path, shortcuts, atomic):
    dest = tmp_path / "missing" / "shortcuts.sh"
    with pytest.raises(WriteFailed) as exc:
        write_script(str(dest), shortcuts, atomic=atomic)
    assert exc.value.dest == str(dest)
    assert not dest.exists()


def test_atomic_write_leaves_no_temp_files(tmp_path: Path, shortcuts):
    write_script(str(tmp_path / "out.sh"), shortcuts, atomic=True)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.sh"]


@pytest.fixture
def undecodable_shortcuts():
    # A directory name read from disk that is not valid UTF-8 arrives as a surrogate escape
    return [Shortcut("bad", ShortcutPath(PathVariant("projects", PathKind.STANDARD), "bad\udcff"))]


@pytest.mark.parametrize("atomic", [False, True])
def test_unencodable_name_fails_without_touching_existing_script(tmp_path: Path, undecodable_shortcuts, atomic):
    dest = tmp_path / "shortcuts.sh"
    dest.write_text("previous good script\n", encoding="utf-8")

    with pytest.raises(WriteFailed) as exc:
        write_script(str(dest), undecodable_shortcuts, atomic=atomic)

    assert exc.value.dest == str(dest)
    assert dest.read_text(encoding="utf-8") == "previous good script\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["shortcuts.sh"]


def test_atomic_write_cleans_up_temp_file_on_failure(tmp_path: Path, shortcuts, monkeypatch):
    def failing_replace(src, dst):
        raise OSError("rename refused")

    monkeypatch.setattr(emitter.os, "replace", failing_replace)
    with pytest.raises(WriteFailed):
        write_script(str(tmp_path / "out.sh"), shortcuts, atomic=True)
    assert list(tmp_path.iterdir()) == []


def test_atomic_write_keeps_mode_of_existing_destination(tmp_path: Path, shortcuts):
    dest = tmp_path / "out.sh"
    dest.write_text("old\n", encoding="utf-8")
    os.chmod(dest, 0o750)

    write_script(str(dest), shortcuts, atomic=True)
    assert stat.S_IMODE(os.stat(dest).st_mode) == 0o750


def test_atomic_write_matches_plain_write_mode_for_new_file(tmp_path: Path, shortcuts):
    plain = tmp_path / "plain.sh"
    atomic = tmp_path / "atomic.sh"

    write_script(str(plain), shortcuts)
    write_script(str(atomic), shortcuts, atomic=True)
    assert stat.S_IMODE(os.stat(atomic).st_mode) == stat.S_IMODE(os.stat(plain).st_mode)
