# Path: `src/p9walk/features/walk/__init__.py`
# Summary: Export walk feature domain and use case symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain.depth_range import DepthRange, InvalidRangeError, parse_range
from .domain.entry import Entry, EntryKind
from .domain.format_program import FIELD_DESCRIPTIONS, FormatProgram
from .domain.command_template import CommandTemplate
from .usecases.ports import AccountLookup, EntryHandler
from .usecases.traversal import WalkFilter, WalkReport, Walker
from .usecases.dispatch import CommandDispatcher, FormatPrinter

__all__ = [
    "AccountLookup",
    "CommandDispatcher",
    "CommandTemplate",
    "DepthRange",
    "Entry",
    "EntryHandler",
    "EntryKind",
    "FIELD_DESCRIPTIONS",
    "FormatPrinter",
    "FormatProgram",
    "InvalidRangeError",
    "WalkFilter",
    "WalkReport",
    "Walker",
    "parse_range",
]
