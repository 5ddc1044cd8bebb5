"""
Summary: Depth-first, pre-order walk applying type, executable and depth filters.
Why: Thread an explicit depth counter so filtering never depends on path spelling.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Final, final

from p9walk.features.walk.domain.depth_range import DepthRange
from p9walk.features.walk.domain.entry import Entry
from p9walk.features.walk.usecases.ports import EntryHandler
from p9walk.platform.logging import logger

PSEUDO_ENTRIES: Final[frozenset[str]] = frozenset({os.curdir, os.pardir})


@dataclass(slots=True, frozen=True)
class WalkFilter:
    """Immutable selection rules shared by every root of an invocation."""

    dirs_only: bool = False
    files_only: bool = False
    executable_only: bool = False
    depth: DepthRange = field(default_factory=DepthRange)

    def selects(self, entry: Entry) -> bool:
        """Return whether ``entry`` should be handed to the output handler.

        Checks run in a fixed order and stop at the first failure: type flags,
        then the executable bit, then the depth range.
        """
        if self.dirs_only and not entry.is_dir:
            return False
        if self.files_only and entry.is_dir:
            return False
        if self.executable_only and not entry.is_executable:
            return False
        return self.depth.admits(entry.depth)

    def descends_into(self, entry: Entry) -> bool:
        """Return whether the children of ``entry`` should be enumerated."""

        return entry.is_dir and self.depth.allows_descent(entry.depth)


@dataclass(slots=True)
class WalkReport:
    """Counters gathered while walking one root."""

    root: str
    visited: int = 0
    reported: int = 0
    pruned: int = 0
    entry_errors: int = 0
    root_error: bool = False
    duration_seconds: float = 0.0


def normalize_root(root: str) -> str:
    """Drop trailing separators so child paths never contain ``//``."""

    if len(root) > 1:
        return root.rstrip(os.sep) or os.sep
    return root


def child_path(parent: str, name: str) -> str:
    """Join ``name`` onto ``parent`` the way it is printed (``./a`` becomes ``a``)."""

    return os.path.normpath(os.path.join(parent, name))


@final
class Walker:
    """Walk roots and dispatch every selected entry to a handler."""

    walk_filter: WalkFilter
    handler: EntryHandler

    def __init__(self, walk_filter: WalkFilter, handler: EntryHandler) -> None:
        self.walk_filter = walk_filter
        self.handler = handler

    def walk(self, root: str) -> WalkReport:
        """Walk a single root.

        Args:
            root: Path as supplied on the command line.

        Returns:
            WalkReport: Counters for this root; ``root_error`` is set when the
            root is missing or cannot be listed.
        """
        root_path = normalize_root(root)
        report = WalkReport(root=root_path)
        started = time.perf_counter()

        logger.debug(
            "Walking %s",
            root_path,
            extra={"walk_event": "walk.root.start", "path": root_path},
        )

        try:
            root_stat = os.lstat(root_path)
        except OSError as e:
            report.root_error = True
            logger.error(
                "Cannot walk %s: %s",
                root_path,
                e.strerror or e,
                extra={
                    "walk_event": "walk.root.error",
                    "path": root_path,
                    "error_message": e.strerror or str(e),
                },
            )
            return report

        # Children are pushed in reverse so they pop in name order.
        stack: list[Entry] = [Entry.from_stat(root_path, 0, root_stat)]
        while stack:
            entry = stack.pop()
            report.visited += 1

            if self.walk_filter.selects(entry):
                report.reported += 1
                self.handler(entry)

            if not entry.is_dir:
                continue
            if not self.walk_filter.descends_into(entry):
                report.pruned += 1
                continue

            children = self._list_children(entry, report)
            stack.extend(reversed(children))

        report.duration_seconds = time.perf_counter() - started
        logger.debug(
            "Finished %s",
            root_path,
            extra={
                "walk_event": "walk.root.complete",
                "path": root_path,
                "visited": report.visited,
                "reported": report.reported,
                "pruned": report.pruned,
                "entry_errors": report.entry_errors,
                "duration_seconds": report.duration_seconds,
            },
        )
        return report

    def _list_children(self, directory: Entry, report: WalkReport) -> list[Entry]:
        """Return the sorted children of ``directory``, logging unreadable ones."""

        try:
            with os.scandir(directory.path) as scanned:
                dir_entries = sorted(scanned, key=lambda dir_entry: dir_entry.name)
        except OSError as e:
            if directory.depth == 0:
                report.root_error = True
                event = "walk.root.error"
            else:
                report.entry_errors += 1
                event = "walk.entry.error"
            logger.error(
                "Cannot read directory %s: %s",
                directory.path,
                e.strerror or e,
                extra={
                    "walk_event": event,
                    "path": directory.path,
                    "error_message": e.strerror or str(e),
                },
            )
            return []

        children: list[Entry] = []
        child_depth = directory.depth + 1
        for dir_entry in dir_entries:
            if dir_entry.name in PSEUDO_ENTRIES:
                continue
            path = child_path(directory.path, dir_entry.name)
            try:
                st = dir_entry.stat(follow_symlinks=False)
            except OSError as e:
                report.entry_errors += 1
                logger.error(
                    "Cannot stat %s: %s",
                    path,
                    e.strerror or e,
                    extra={
                        "walk_event": "walk.entry.error",
                        "path": path,
                        "error_message": e.strerror or str(e),
                    },
                )
                continue
            children.append(Entry.from_stat(path, child_depth, st))
        return children


__all__ = [
    "PSEUDO_ENTRIES",
    "WalkFilter",
    "WalkReport",
    "Walker",
    "child_path",
    "normalize_root",
]
