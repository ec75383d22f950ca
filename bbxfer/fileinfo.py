"""Description of a file or directory as seen by a copy."""

from __future__ import annotations

import os
import stat as _stat
from dataclasses import dataclass

try:
    import grp as _grp
except ImportError:  # pragma: no cover - non-POSIX platforms
    _grp = None

__all__ = ["FileInfo", "stat_path"]


@dataclass
class FileInfo:
    """Attributes of a filesystem object.

    otype is 'd' for a directory, 'f' for a regular file, 'p' for a pipe
    and '?' for anything else; xtype is 'x' or empty.
    """

    fileid: int = 0
    size: int = 0
    mode: int = 0
    atime: int = 0
    mtime: int = 0
    ctime: int = 0
    group: str | None = None
    otype: str = "?"
    xtype: str = ""

    @classmethod
    def from_stat(cls, st: os.stat_result, group: str | None = None) -> "FileInfo":
        """Build the description from a stat result."""
        if _stat.S_ISDIR(st.st_mode):
            otype = "d"
        elif _stat.S_ISREG(st.st_mode):
            otype = "f"
        elif _stat.S_ISFIFO(st.st_mode):
            otype = "p"
        else:
            otype = "?"
        return cls(
            fileid=st.st_ino,
            size=st.st_size,
            mode=_stat.S_IMODE(st.st_mode),
            atime=int(st.st_atime),
            mtime=int(st.st_mtime),
            ctime=int(st.st_ctime),
            group=group,
            otype=otype,
        )


def _group_name(gid: int) -> str:
    if _grp is None:
        return str(gid)
    try:
        return _grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def stat_path(path, follow_links: bool = True) -> FileInfo:
    """Return the description of path; raises OSError when it cannot be examined."""
    st = os.stat(path) if follow_links else os.lstat(path)
    return FileInfo.from_stat(st, _group_name(st.st_gid))