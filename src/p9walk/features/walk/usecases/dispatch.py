"""
Summary: Entry handlers that print formatted lines or run the ``! cmd`` template.
Why: Give the walker one callable per output mode and isolate subprocess failures.
"""

from __future__ import annotations

import subprocess
from typing import IO, final

from p9walk.features.walk.domain.command_template import CommandTemplate
from p9walk.features.walk.domain.entry import Entry
from p9walk.features.walk.domain.format_program import FormatProgram
from p9walk.features.walk.usecases.ports import AccountLookup
from p9walk.platform.logging import logger


@final
class FormatPrinter:
    """Write one formatted line per entry to a text stream."""

    def __init__(self, program: FormatProgram, accounts: AccountLookup, stdout: IO[str]) -> None:
        self.program = program
        self.accounts = accounts
        self.stdout = stdout

    def __call__(self, entry: Entry) -> None:
        _ = self.stdout.write(self.program.render(entry, self.accounts))


@final
class CommandDispatcher:
    """Run the expanded command template through a shell for every entry.

    The child's standard output is captured and copied to ``stdout`` as raw
    bytes; its standard error is inherited. A failing command is logged and
    counted in ``failures`` but never stops the walk.
    """

    def __init__(self, template: CommandTemplate, shell: str, stdout: IO[bytes]) -> None:
        self.template = template
        self.shell = shell
        self.stdout = stdout
        self.failures = 0

    def __call__(self, entry: Entry) -> None:
        command = self.template.expand(entry.path)
        logger.debug("Running %s", command)
        try:
            completed = subprocess.run(
                [self.shell, "-c", command],
                stdout=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            self.failures += 1
            logger.error(
                "Could not start %s: %s",
                self.shell,
                e.strerror or e,
                extra={
                    "walk_event": "walk.command.failed",
                    "path": entry.path,
                    "error_message": e.strerror or str(e),
                },
            )
            return

        if completed.stdout:
            _ = self.stdout.write(completed.stdout)
            self.stdout.flush()

        if completed.returncode != 0:
            self.failures += 1
            logger.error(
                "Command %r exited with status %d",
                command,
                completed.returncode,
                extra={
                    "walk_event": "walk.command.failed",
                    "path": entry.path,
                    "returncode": completed.returncode,
                },
            )


__all__ = ["CommandDispatcher", "FormatPrinter"]
