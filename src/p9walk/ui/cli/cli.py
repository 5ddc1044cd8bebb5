"""Command line interface for p9walk."""

import os
import sys
from typing import final

from p9walk.platform.logging import logger
from p9walk.ui.cli.args import ArgumentParser
from p9walk.ui.cli.args.options import CLIArgs, WriteConfigArgs
from p9walk.ui.cli.commands import WalkCommand, WriteConfigCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when any root could not be walked; per-entry
        failures are reported but leave the status untouched.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, WriteConfigArgs):
                written = WriteConfigCommand(args).execute()
                print(written)
                return

            reports = WalkCommand(args).execute()
            if any(report.root_error for report in reports):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.warning("Walk cancelled by user")
            sys.exit(130)
        except BrokenPipeError:
            # Reader went away (e.g. piped into head); silence the flush at exit.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
