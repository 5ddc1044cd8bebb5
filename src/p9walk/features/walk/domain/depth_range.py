"""
Summary: Inclusive depth bounds parsed from the ``-n min,max`` option.
Why: Keep range parsing pure so usage errors surface before any traversal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

RANGE_SEPARATOR: Final[str] = ","
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


class InvalidRangeError(ValueError):
    """Raised when a depth range specification cannot be parsed."""

    def __init__(self, spec: str, reason: str) -> None:
        super().__init__(f"invalid range {spec!r}: {reason}")
        self.spec: str = spec
        self.reason: str = reason


@dataclass(slots=True, frozen=True)
class DepthRange:
    """Inclusive ``(minimum, maximum)`` depth pair, ``None`` meaning unset.

    An unset bound takes the depth of the entry being tested, so it never
    excludes that entry.
    """

    minimum: int | None = None
    maximum: int | None = None

    def admits(self, depth: int) -> bool:
        """Return whether an entry at ``depth`` falls inside the range."""

        effective_min = self.minimum if self.minimum is not None else depth
        effective_max = self.maximum if self.maximum is not None else depth
        return effective_min <= depth <= effective_max

    def allows_descent(self, depth: int) -> bool:
        """Return whether children of a directory at ``depth`` may be visited."""

        return self.maximum is None or depth < self.maximum


def _parse_bound(spec: str, part: str) -> int | None:
    if not part:
        return None
    if not _INTEGER_PATTERN.fullmatch(part):
        raise InvalidRangeError(spec, f"{part!r} is not an integer")
    return int(part)


def parse_range(spec: str) -> DepthRange:
    """Parse a depth range specification.

    Args:
        spec: ``""``, a bare integer ``"N"`` or ``"min,max"`` with either side
            optionally empty.

    Returns:
        DepthRange: ``(None, None)`` for an empty spec, ``(0, N)`` for a bare
        integer, otherwise each side parsed independently.

    Raises:
        InvalidRangeError: If ``spec`` holds more than one comma or a
            non-empty side is not a base-10 integer.
    """
    if not spec:
        return DepthRange()

    parts = spec.split(RANGE_SEPARATOR)
    if len(parts) > 2:
        raise InvalidRangeError(spec, "expected at most one comma")

    if len(parts) == 1:
        maximum = _parse_bound(spec, parts[0])
        return DepthRange(minimum=0, maximum=maximum)

    return DepthRange(
        minimum=_parse_bound(spec, parts[0]),
        maximum=_parse_bound(spec, parts[1]),
    )


__all__ = ["DepthRange", "InvalidRangeError", "parse_range"]
