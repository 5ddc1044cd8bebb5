"""
Summary: Immutable metadata snapshot for one node visited during a walk.
Why: Decouple filtering and rendering from live ``os.stat_result`` objects.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Final

EXECUTABLE_BITS: Final[int] = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class EntryKind(str, Enum):
    """Coarse node type as seen through ``lstat``."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @staticmethod
    def from_mode(mode: int) -> "EntryKind":
        """Classify a raw ``st_mode`` value."""

        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryKind.FILE
        if stat.S_ISLNK(mode):
            return EntryKind.SYMLINK
        return EntryKind.OTHER


@dataclass(slots=True, frozen=True)
class Entry:
    """One filesystem node encountered during traversal."""

    path: str
    name: str
    depth: int
    kind: EntryKind
    size: int
    modified: int
    accessed: int
    uid: int
    gid: int
    mode: int

    @classmethod
    def from_stat(cls, path: str, depth: int, st: os.stat_result) -> "Entry":
        """Build an entry from a walk path, its depth and its ``lstat`` result.

        Args:
            path: Path as it will be printed (root joined with child names).
            depth: Nesting level below the walk root, the root being 0.
            st: Metadata for ``path``; symlinks are not followed.

        Returns:
            Entry: Snapshot with timestamps truncated to whole seconds.
        """
        return cls(
            path=path,
            name=os.path.basename(path) or path,
            depth=depth,
            kind=EntryKind.from_mode(st.st_mode),
            size=st.st_size,
            modified=int(st.st_mtime),
            accessed=int(st.st_atime),
            uid=st.st_uid,
            gid=st.st_gid,
            mode=st.st_mode,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_executable(self) -> bool:
        """Whether any of the user, group or other execute bits is set."""

        return bool(self.mode & EXECUTABLE_BITS)

    @property
    def permissions(self) -> str:
        """Symbolic permission bits such as ``rwxr-xr-x``."""

        # filemode() prefixes the type character, drop it
        return stat.filemode(self.mode)[1:]


__all__ = ["EXECUTABLE_BITS", "Entry", "EntryKind"]
