"""
Summary: Tokenize ``! cmd`` templates and substitute the entry path for ``%``.
Why: Resolve escapes once so each entry only pays for a string join.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, TypeAlias

PLACEHOLDER: Final[str] = "%"
ESCAPE: Final[str] = "\\"


@dataclass(slots=True, frozen=True)
class LiteralText:
    """Template text copied verbatim into the expanded command."""

    text: str


@dataclass(slots=True, frozen=True)
class PathPlaceholder:
    """Position where the entry path is inserted."""


TemplateToken: TypeAlias = LiteralText | PathPlaceholder


class _State(Enum):
    NORMAL = auto()
    ESCAPE = auto()


def tokenize_template(text: str) -> Iterator[TemplateToken]:
    """Scan a command template into literal runs and path placeholders.

    A backslash only escapes a following ``%``; anywhere else it is kept as
    written, so ``\\%`` yields a literal ``%`` and ``a\\b`` stays ``a\\b``.
    """
    literal: list[str] = []
    state = _State.NORMAL
    for char in text:
        if state is _State.ESCAPE:
            if char == PLACEHOLDER:
                literal.append(PLACEHOLDER)
                state = _State.NORMAL
            elif char == ESCAPE:
                literal.append(ESCAPE)
            else:
                literal.append(ESCAPE + char)
                state = _State.NORMAL
        elif char == ESCAPE:
            state = _State.ESCAPE
        elif char == PLACEHOLDER:
            if literal:
                yield LiteralText("".join(literal))
                literal.clear()
            yield PathPlaceholder()
        else:
            literal.append(char)

    if state is _State.ESCAPE:
        literal.append(ESCAPE)
    if literal:
        yield LiteralText("".join(literal))


@dataclass(slots=True, frozen=True)
class CommandTemplate:
    """Compiled shell command template."""

    source: str
    tokens: tuple[TemplateToken, ...]

    @classmethod
    def compile(cls, text: str) -> "CommandTemplate":
        return cls(source=text, tokens=tuple(tokenize_template(text)))

    def expand(self, path: str) -> str:
        """Return the command line for ``path`` with every placeholder filled."""

        return "".join(
            path if isinstance(token, PathPlaceholder) else token.text
            for token in self.tokens
        )


__all__ = [
    "CommandTemplate",
    "LiteralText",
    "PathPlaceholder",
    "TemplateToken",
    "tokenize_template",
]
