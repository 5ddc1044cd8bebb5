"""src/p9walk/ui/cli/commands/walk.py
What: Wire parsed arguments to the walker and the selected entry handler.
Why: Keep the CLI processor free of traversal and output plumbing.
"""

import sys
from typing import TextIO, final

from p9walk.features.walk import (
    AccountLookup,
    CommandDispatcher,
    CommandTemplate,
    EntryHandler,
    FormatPrinter,
    FormatProgram,
    Walker,
    WalkReport,
)
from p9walk.platform.accounts import PosixAccountLookup
from p9walk.platform.logging import logger
from p9walk.ui.cli.args.options import WalkArgs


@final
class WalkCommand:
    """Walk every root sequentially with one shared handler."""

    args: WalkArgs
    handler: EntryHandler
    walker: Walker

    def __init__(
        self,
        args: WalkArgs,
        *,
        stdout: TextIO | None = None,
        accounts: AccountLookup | None = None,
    ) -> None:
        """Initialize the walk command.

        Args:
            args: Parsed invocation.
            stdout: Text stream for formatted lines, defaults to ``sys.stdout``.
            accounts: Owner/group resolver, defaults to the POSIX databases.
        """
        self.args = args
        self.stdout = stdout if stdout is not None else sys.stdout
        self.handler = self._build_handler(accounts or PosixAccountLookup())
        self.walker = Walker(args.walk_filter, self.handler)

    def _build_handler(self, accounts: AccountLookup) -> EntryHandler:
        if self.args.command is not None:
            return CommandDispatcher(
                CommandTemplate.compile(self.args.command),
                shell=self.args.shell,
                stdout=self.stdout.buffer,
            )
        return FormatPrinter(FormatProgram.compile(self.args.format), accounts, self.stdout)

    def execute(self) -> list[WalkReport]:
        """Walk all roots in order.

        Returns:
            list[WalkReport]: One report per root, in argument order.
        """
        reports: list[WalkReport] = []
        try:
            for root in self.args.roots:
                reports.append(self.walker.walk(root))
        finally:
            self.stdout.flush()

        if isinstance(self.handler, CommandDispatcher) and self.handler.failures:
            logger.warning("%d command(s) failed", self.handler.failures)
        return reports


__all__ = ["WalkCommand"]
