"""Platform-aware helpers for the filesystem queries the relocator relies on."""

import os
import stat
import sys
from pathlib import Path

IS_WINDOWS = sys.platform == "win32"
IS_MACOS = sys.platform == "darwin"

# Owner bits that must be set for the owner to delete or replace a file
_OWNER_RW = stat.S_IRUSR | stat.S_IWUSR


def is_hidden(path: Path) -> bool:
    """
    Check whether a file or folder is flagged hidden by the filesystem.

    Windows uses the hidden attribute, macOS the ``UF_HIDDEN`` flag, and every
    POSIX system treats dot-names (``.git``, ``.svn``) as hidden.

    Args:
        path: Path to check

    Returns:
        True if the entry is hidden
    """
    path = Path(path)

    if IS_WINDOWS:
        try:
            attributes = path.stat().st_file_attributes
        except OSError:
            return False
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)

    if path.name.startswith(".") and path.name not in {".", ".."}:
        return True

    if IS_MACOS:
        try:
            flags = path.lstat().st_flags
        except (OSError, AttributeError):
            return False
        return bool(flags & stat.UF_HIDDEN)

    return False


def reset_file_attributes(path: Path) -> None:
    """
    Reset the attributes of a moved file so it can be deleted later.

    On Windows this clears the read-only attribute, which is the only one
    ``os.chmod`` can change. On POSIX the owner read/write bits are added and
    the remaining permission bits are kept.

    Args:
        path: File to reset

    Raises:
        OSError: If the attributes cannot be changed
    """
    path = Path(path)

    if IS_WINDOWS:
        os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        return

    mode = stat.S_IMODE(path.stat().st_mode)
    if mode & _OWNER_RW != _OWNER_RW:
        os.chmod(path, mode | _OWNER_RW)


def has_normal_attributes(path: Path) -> bool:
    """Check that nothing in a file's attributes blocks deleting it."""
    st = Path(path).stat()

    if IS_WINDOWS:
        return not st.st_file_attributes & stat.FILE_ATTRIBUTE_READONLY

    return stat.S_IMODE(st.st_mode) & _OWNER_RW == _OWNER_RW


def is_within(path: Path, other: Path) -> bool:
    """Check whether ``path`` is ``other`` or lies somewhere below it."""
    path = Path(path).resolve()
    other = Path(other).resolve()
    return path == other or other in path.parents
