"""Path resolution and existence guards.

All paths handed to the filesystem are absolute. Relative user input is
resolved against the session's current directory. ``pathmod`` selects the
path flavour (``posixpath`` or ``ntpath``) and defaults to the host's.
"""

from __future__ import annotations

import errno
import ntpath
import os
import re
import stat
from types import ModuleType

from file_manager.exceptions import PathExistsError

_DRIVE_RE = re.compile(r"^[a-zA-Z]:\\?$")

# stat() errors meaning "nothing there"; anything else must surface.
_NOT_FOUND_ERRNOS = {errno.ENOENT, errno.ENOTDIR}


def _is_windows(pathmod: ModuleType) -> bool:
    return pathmod is ntpath


def resolve_path(raw_path: str, current_dir: str, pathmod: ModuleType = os.path) -> str:
    """Return ``raw_path`` as an absolute path relative to ``current_dir``."""
    if _is_windows(pathmod) and _DRIVE_RE.match(raw_path):
        # 'd:' jumps to the root of drive D
        if len(raw_path) == 2:
            return raw_path + "\\"
        return raw_path

    if pathmod.isabs(raw_path):
        return raw_path
    return pathmod.normpath(pathmod.join(current_dir, raw_path))


def drive_root(path: str, pathmod: ModuleType = os.path) -> str:
    if _is_windows(pathmod):
        drive, _ = pathmod.splitdrive(path)
        return drive + "\\"
    return "/"


def parent_dir(path: str, pathmod: ModuleType = os.path) -> str:
    return pathmod.normpath(pathmod.join(path, ".."))


def _probe(path: str) -> os.stat_result | None:
    try:
        return os.stat(path)
    except OSError as e:
        if e.errno in _NOT_FOUND_ERRNOS:
            return None
        raise


def is_directory(path: str) -> bool:
    """True if ``path`` exists and is a directory; other probe errors propagate."""
    st = _probe(path)
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_file(path: str) -> bool:
    """True if ``path`` exists and is a regular file; other probe errors propagate."""
    st = _probe(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def ensure_absent(path: str, operation: str) -> None:
    """Raise PathExistsError if something already lives at ``path``."""
    if _probe(path) is not None:
        raise PathExistsError(f"Cannot {operation}: target already exists: {path}")
