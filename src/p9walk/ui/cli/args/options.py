"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from p9walk.features.walk import WalkFilter


@final
@dataclass(slots=True, frozen=True)
class WalkArgs:
    """Immutable configuration for one walk invocation."""

    roots: tuple[str, ...]
    walk_filter: WalkFilter
    format: str
    command: str | None
    shell: str


@final
@dataclass(slots=True, frozen=True)
class WriteConfigArgs:
    """Arguments for ``--write-config``: persist the effective defaults."""

    target: Path
    format: str
    shell: str
    log_file: Path | None


CLIArgs = WalkArgs | WriteConfigArgs

__all__ = ["CLIArgs", "WalkArgs", "WriteConfigArgs"]
