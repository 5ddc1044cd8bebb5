"""Ports for walk use cases.

Where: features/walk/usecases.
What: Protocols describing the collaborators the traversal and renderers rely on.
Why: Let tests and adapters stand in for account databases and output sinks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from p9walk.features.walk.domain.entry import Entry


@runtime_checkable
class AccountLookup(Protocol):
    """Resolve numeric owner and group ids into names."""

    def user_name(self, uid: int) -> str | None:
        """Return the login name for ``uid`` or ``None`` when unknown."""
        ...

    def group_name(self, gid: int) -> str | None:
        """Return the group name for ``gid`` or ``None`` when unknown."""
        ...


@runtime_checkable
class EntryHandler(Protocol):
    """Consumer for entries that survived every filter."""

    def __call__(self, entry: "Entry") -> None:
        """Handle one entry, reporting its own failures."""
        ...


__all__ = ["AccountLookup", "EntryHandler"]
