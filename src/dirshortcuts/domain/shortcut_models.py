from __future__ import annotations

"""
Shortcut Data Models.

Defines the immutable records that flow from directory classification to
script rendering. A shortcut is split into a parent component (either a
reference to another shortcut variable or a literal path) and the
directory's own name.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

class PathKind(str, Enum):
    """
    Rendering category of a shortcut's parent component.

    STANDARD parents are rendered as a shell variable reference
    (`$<parent>/<child>`). ENVIRONMENT parents are rendered as a literal
    path, which is always the case for the root shortcut.
    """
    STANDARD = "standard"
    ENVIRONMENT = "environment"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathVariant:
    """
    Parent component of a shortcut, before rendering.

    Attributes:
        path: Parent directory name (STANDARD) or literal path (ENVIRONMENT).
        kind: How the parent is rendered.
    """
    path: str
    kind: PathKind


@dataclass(frozen=True)
class ShortcutPath:
    """
    Composite of a parent variant and the directory's own name.

    Attributes:
        parent: The parent component.
        child: Last segment of the directory path.
    """
    parent: PathVariant
    child: str

    @property
    def kind(self) -> PathKind:
        return self.parent.kind


@dataclass(frozen=True)
class Shortcut:
    """
    Final named shortcut record.

    Attributes:
        name: Shell variable name derived from the child segment.
        path: Structured target of the shortcut.
    """
    name: str
    path: ShortcutPath
