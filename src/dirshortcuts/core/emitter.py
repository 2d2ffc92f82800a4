from __future__ import annotations

"""
Shell Script Emitter.

Renders the ordered shortcut list into a bash script of `export` lines and
persists it. The script is meant to be sourced; each chained value is
resolved by the shell at source time.

Output Format:
#!/bin/bash
<blank line>
export NAME="VALUE"
...
"""

import logging
import os
import stat
import tempfile
from typing import Iterable, List

from dirshortcuts.domain.errors import WriteFailed
from dirshortcuts.domain.shortcut_models import PathKind, Shortcut, ShortcutPath

logger = logging.getLogger(__name__)

SHEBANG = "#!/bin/bash"

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def render_value(shortcut_path: ShortcutPath) -> str:
    """
    Render the value of a shortcut.

    STANDARD: `$<parent>/<child>`, left unresolved for the shell.
    ENVIRONMENT: the literal parent path.
    """
    if shortcut_path.parent.kind is PathKind.STANDARD:
        return f"${shortcut_path.parent.path}/{shortcut_path.child}"
    return shortcut_path.parent.path


def render_export(shortcut: Shortcut) -> str:
    return f'export {shortcut.name}="{render_value(shortcut.path)}"\n'


def render_script(shortcuts: Iterable[Shortcut]) -> str:
    """Render the complete script text, one export per shortcut in order."""
    lines: List[str] = [f"{SHEBANG}\n", "\n"]
    lines.extend(render_export(s) for s in shortcuts)
    return "".join(lines)

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def write_script(dest: str, shortcuts: Iterable[Shortcut], atomic: bool = False) -> str:
    """
    Write the shortcut script to dest, replacing any existing file.

    The script is encoded before dest is touched, so a name that cannot be
    written as UTF-8 fails without truncating an existing file. The default
    mode then truncates and writes in place, so an I/O failure midway can
    leave a partial file. With atomic=True the script is written to a
    temporary file beside dest and renamed over it on success.

    Args:
        dest: Destination file path. Its parent directory must exist.
        shortcuts: Ordered shortcut list.
        atomic: Write through a temporary file and rename.

    Returns:
        str: The script text that was written.

    Raises:
        WriteFailed: If the script cannot be encoded, created or written.
    """
    script = render_script(shortcuts)
    try:
        data = script.encode("utf-8")
        if atomic:
            _atomic_write(dest, data)
        else:
            with open(dest, "wb") as f:
                f.write(data)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Failed to write shortcuts to '{dest}': {e}")
        raise WriteFailed(dest, str(e)) from e

    logger.debug(f"Wrote {len(data)} bytes to {dest}")
    return script


def _atomic_write(dest: str, data: bytes) -> None:
    """Write data to a sibling temp file and rename it over dest."""
    directory = os.path.dirname(os.path.abspath(dest))
    mode = _target_mode(dest)
    fd, tmp_path = tempfile.mkstemp(prefix=".dirshortcuts-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, dest)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def _target_mode(dest: str) -> int:
    """Permission bits a plain write to dest would end up with."""
    try:
        return stat.S_IMODE(os.stat(dest).st_mode)
    except OSError:
        pass
    # mkstemp creates 0600; a fresh file honours the process umask instead
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
