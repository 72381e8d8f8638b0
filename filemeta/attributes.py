# filemeta/attributes.py

from __future__ import annotations
import os
import stat
from pathlib import Path
from typing import Union

from .errors import AttributeLookupError
from .model import FileAttributes

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def file_type_of(mode: int) -> str:
    """Map an st_mode to directory / regular file / symlink / unknown."""
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISREG(mode):
        return "regular file"
    if stat.S_ISLNK(mode):
        return "symlink"
    return "unknown"


def permission_string(mode: int) -> str:
    """Render an st_mode as a 10-character string such as ``-rwxr-xr--``.

    Args:
        mode (int): Full st_mode (type bits are needed for the leading char).

    Returns:
        str: Type char ('d', 'l' or '-') followed by owner/group/other rwx.
    """
    if stat.S_ISDIR(mode):
        kind = "d"
    elif stat.S_ISLNK(mode):
        kind = "l"
    else:
        kind = "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSION_BITS)


def stat_path(path: Union[str, Path], follow_symlinks: bool = True) -> FileAttributes:
    """Look up filesystem attributes for a path.

    With ``follow_symlinks=False`` the link itself is inspected, so the
    "symlink" type is reported instead of the target's type.

    Raises:
        AttributeLookupError: If the path cannot be stat-ed.
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise AttributeLookupError.from_os_error(str(path), "stat", exc) from exc

    return FileAttributes(
        size=st.st_size,
        creation_time=st.st_ctime,
        modification_time=st.st_mtime,
        file_type=file_type_of(st.st_mode),
        permissions=permission_string(st.st_mode),
    )
