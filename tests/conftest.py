"""Shared pytest fixtures for the p9walk test suite."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from p9walk.config import Config
from p9walk.features.walk import Entry, EntryKind


@pytest.fixture(autouse=True)
def config_file(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config location at a private file and reset the cached instance."""

    path = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("P9WALK_CONFIG", str(path))
    Config.reset()
    yield path
    Config.reset()


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small tree under ``<tmp>/root`` and chdir into ``<tmp>``.

    Layout (depth relative to ``root``)::

        root/                 0
            a.txt             1  42 bytes, rw-r--r--
            bin/              1
                tool          2  rwxr-xr-x
            sub/              1
                deep/         2
                    leaf.txt  3
                file.txt      2
    """
    root = tmp_path / "root"
    (root / "bin").mkdir(parents=True)
    (root / "sub" / "deep").mkdir(parents=True)

    a_txt = root / "a.txt"
    _ = a_txt.write_bytes(b"x" * 42)
    os.chmod(a_txt, 0o644)

    tool = root / "bin" / "tool"
    _ = tool.write_text("#!/bin/sh\n")
    os.chmod(tool, 0o755)

    _ = (root / "sub" / "file.txt").write_text("hello")
    _ = (root / "sub" / "deep" / "leaf.txt").write_text("leaf")

    for directory in (root, root / "bin", root / "sub", root / "sub" / "deep"):
        os.chmod(directory, 0o755)

    monkeypatch.chdir(tmp_path)
    return root


def make_entry(
    path: str = "sub/file.txt",
    *,
    depth: int = 1,
    kind: EntryKind = EntryKind.FILE,
    size: int = 42,
    modified: int = 1_700_000_000,
    accessed: int = 1_700_000_100,
    uid: int = 1000,
    gid: int = 100,
    mode: int = 0o100644,
) -> Entry:
    """Build an ``Entry`` without touching the filesystem."""

    return Entry(
        path=path,
        name=os.path.basename(path) or path,
        depth=depth,
        kind=kind,
        size=size,
        modified=modified,
        accessed=accessed,
        uid=uid,
        gid=gid,
        mode=mode,
    )


class FakeAccounts:
    """In-memory account lookup."""

    def __init__(self, users: dict[int, str] | None = None, groups: dict[int, str] | None = None) -> None:
        self.users = users or {}
        self.groups = groups or {}

    def user_name(self, uid: int) -> str | None:
        return self.users.get(uid)

    def group_name(self, gid: int) -> str | None:
        return self.groups.get(gid)


@pytest.fixture
def entry_factory() -> Callable[..., Entry]:
    """Expose ``make_entry`` to tests."""

    return make_entry


@pytest.fixture
def accounts() -> FakeAccounts:
    """Account lookup knowing uid 1000 and gid 100 only."""

    return FakeAccounts(users={1000: "glenda"}, groups={100: "sys"})
