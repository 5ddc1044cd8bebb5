"""Owner and group name resolution backed by the POSIX account databases."""

from __future__ import annotations

import grp
import pwd
from functools import lru_cache
from typing import final


@final
class PosixAccountLookup:
    """Resolve numeric owner and group ids through ``pwd`` and ``grp``.

    Results are memoised per id for the lifetime of the instance since a walk
    typically sees the same handful of owners many times.
    """

    def __init__(self) -> None:
        self.user_name = lru_cache(maxsize=256)(self._user_name)
        self.group_name = lru_cache(maxsize=256)(self._group_name)

    @staticmethod
    def _user_name(uid: int) -> str | None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    @staticmethod
    def _group_name(gid: int) -> str | None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None


__all__ = ["PosixAccountLookup"]
