"""
Summary: Compile ``-e`` format strings into field/literal tokens and render entries.
Why: Tokenize once at startup so every entry replays the same program.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from p9walk.features.walk.domain.entry import Entry
from p9walk.platform.logging import logger

if TYPE_CHECKING:
    from p9walk.features.walk.usecases.ports import AccountLookup

FIELD_SEPARATOR: Final[str] = " "
LINE_TERMINATOR: Final[str] = "\n"

FIELD_DESCRIPTIONS: Final[dict[str, str]] = {
    "U": "owner name",
    "G": "group name",
    "M": "name of the last user to modify the entry",
    "a": "last access time (epoch seconds)",
    "m": "last modification time (epoch seconds)",
    "n": "final path element (name)",
    "p": "path",
    "s": "size (bytes)",
    "x": "permissions",
}
FIELD_CODES: Final[frozenset[str]] = frozenset(FIELD_DESCRIPTIONS)


@dataclass(slots=True, frozen=True)
class FieldToken:
    """A single-character metadata field code."""

    code: str


@dataclass(slots=True, frozen=True)
class LiteralToken:
    """A run of characters echoed verbatim."""

    text: str


FormatToken: TypeAlias = FieldToken | LiteralToken


def tokenize_format(text: str) -> Iterator[FormatToken]:
    """Split a format string into field codes and merged literal runs."""

    literal: list[str] = []
    for char in text:
        if char in FIELD_CODES:
            if literal:
                yield LiteralToken("".join(literal))
                literal.clear()
            yield FieldToken(char)
        else:
            literal.append(char)
    if literal:
        yield LiteralToken("".join(literal))


def _owner(entry: Entry, accounts: AccountLookup) -> str:
    name = accounts.user_name(entry.uid)
    if name is None:
        logger.debug(
            "No user name for uid %d",
            entry.uid,
            extra={"walk_event": "walk.lookup.failed", "path": entry.path, "field_code": "U"},
        )
        return ""
    return name


def _group(entry: Entry, accounts: AccountLookup) -> str:
    name = accounts.group_name(entry.gid)
    if name is None:
        logger.debug(
            "No group name for gid %d",
            entry.gid,
            extra={"walk_event": "walk.lookup.failed", "path": entry.path, "field_code": "G"},
        )
        return ""
    return name


# POSIX keeps no record of the last modifier, the owner stands in for it.
_FIELD_RENDERERS: Final[dict[str, Callable[[Entry, AccountLookup], str]]] = {
    "U": _owner,
    "G": _group,
    "M": _owner,
    "a": lambda entry, _accounts: str(entry.accessed),
    "m": lambda entry, _accounts: str(entry.modified),
    "n": lambda entry, _accounts: entry.name,
    "p": lambda entry, _accounts: entry.path,
    "s": lambda entry, _accounts: str(entry.size),
    "x": lambda entry, _accounts: entry.permissions,
}


@dataclass(slots=True, frozen=True)
class FormatProgram:
    """Compiled output format applied to every reported entry."""

    tokens: tuple[FormatToken, ...]

    @classmethod
    def compile(cls, text: str) -> "FormatProgram":
        """Compile ``text`` into a reusable program."""

        return cls(tokens=tuple(tokenize_format(text)))

    def render(self, entry: Entry, accounts: AccountLookup) -> str:
        """Render one newline-terminated output line for ``entry``.

        Every field except the final token is followed by a single space;
        literal runs are emitted exactly as written.

        Args:
            entry: Entry to describe.
            accounts: Owner and group name resolver for ``U``, ``G`` and ``M``.

        Returns:
            str: The formatted line including its trailing newline.
        """
        parts: list[str] = []
        last_index = len(self.tokens) - 1
        for index, token in enumerate(self.tokens):
            if isinstance(token, LiteralToken):
                parts.append(token.text)
                continue
            parts.append(_FIELD_RENDERERS[token.code](entry, accounts))
            if index != last_index:
                parts.append(FIELD_SEPARATOR)
        parts.append(LINE_TERMINATOR)
        return "".join(parts)


__all__ = [
    "FIELD_CODES",
    "FIELD_DESCRIPTIONS",
    "FieldToken",
    "FormatProgram",
    "FormatToken",
    "LiteralToken",
    "tokenize_format",
]
