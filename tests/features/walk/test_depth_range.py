"""
Summary: Tests for depth range parsing and per-entry bound evaluation.
Why: Pin the bare-number and unset-bound conventions of the -n option.
"""

from __future__ import annotations

import pytest

from p9walk.features.walk import DepthRange, InvalidRangeError, parse_range


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("", DepthRange(None, None)),
        ("3", DepthRange(0, 3)),
        ("1,4", DepthRange(1, 4)),
        ("2,", DepthRange(2, None)),
        (",5", DepthRange(None, 5)),
        (",", DepthRange(None, None)),
        ("-1,2", DepthRange(-1, 2)),
        ("+1,+2", DepthRange(1, 2)),
    ],
)
def test_parse_range_valid_specs(spec: str, expected: DepthRange) -> None:
    """Valid specifications map onto the documented bounds."""

    assert parse_range(spec) == expected


@pytest.mark.parametrize(
    "spec",
    ["1,2,3", ",,", "a", "1,b", "x,", "1.5", "1_0", "0x10,", "   ", " 1 , 2 ", "1, 2", " 3"],
)
def test_parse_range_rejects_malformed_specs(spec: str) -> None:
    """Extra commas, whitespace and non-integer parts raise ``InvalidRangeError``."""

    with pytest.raises(InvalidRangeError) as excinfo:
        _ = parse_range(spec)

    assert excinfo.value.spec == spec
    assert isinstance(excinfo.value, ValueError)


def test_admits_inclusive_bounds() -> None:
    depth_range = DepthRange(1, 2)

    assert not depth_range.admits(0)
    assert depth_range.admits(1)
    assert depth_range.admits(2)
    assert not depth_range.admits(3)


def test_unset_bound_never_excludes_the_tested_entry() -> None:
    """An unset side takes the entry's own depth at evaluation time."""

    assert all(DepthRange(None, None).admits(depth) for depth in range(10))
    assert all(DepthRange(2, None).admits(depth) for depth in range(2, 10))
    assert not DepthRange(2, None).admits(1)
    assert all(DepthRange(None, 3).admits(depth) for depth in range(4))
    assert not DepthRange(None, 3).admits(4)


def test_allows_descent_stops_at_maximum() -> None:
    assert DepthRange(None, 2).allows_descent(1)
    assert not DepthRange(None, 2).allows_descent(2)
    assert DepthRange(1, None).allows_descent(100)
