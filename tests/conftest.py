from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A fake home directory and a sample project tree on disk.
3. Shared configuration dictionaries used across tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """Return an existing directory standing in for /home/alice."""
    home = tmp_path / "home" / "alice"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def projects_tree(fake_home: Path) -> Path:
    """
    Create a small project hierarchy under the fake home.

    Structure:
    ~/projects
      /app
        /src
          /core
        README.md
      /lib
        /my-utils
      notes.txt
    """
    projects = fake_home / "projects"
    (projects / "app" / "src" / "core").mkdir(parents=True)
    (projects / "app" / "README.md").write_text("# app", encoding="utf-8")
    (projects / "lib" / "my-utils").mkdir(parents=True)
    (projects / "notes.txt").write_text("notes", encoding="utf-8")
    return projects


@pytest.fixture
def home_env(fake_home: Path) -> Dict[str, str]:
    """Environment mapping that resolves HOME to the fake home."""
    return {"HOME": str(fake_home)}


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys defined in 'dirshortcuts.domain.config'.
    """
    return {
        "root": "~/projects",
        "dest": str(tmp_path / "shortcuts.sh"),
        "depth": 1,
        "excludes": [],
        "apply_excludes": False,
        "alias": "~",
        "home": None,
        "atomic_write": False,
        "warn_collisions": False,
    }
