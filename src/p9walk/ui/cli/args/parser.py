"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Final, final

from p9walk.config import Config, default_config_path
from p9walk.features.walk import (
    FIELD_DESCRIPTIONS,
    DepthRange,
    InvalidRangeError,
    WalkFilter,
    parse_range,
)
from p9walk.platform.logging import setup_logger
from p9walk.ui.cli.args.options import CLIArgs, WalkArgs, WriteConfigArgs

COMMAND_MARKER: Final[str] = "!"
_VALUE_OPTIONS: Final[dict[str, str]] = {
    "-n": "--depth",
    "--depth": "--depth",
    "-e": "--format",
    "--format": "--format",
}
_SHORT_BOOL_FLAGS: Final[str] = "dfxvq"

USAGE: Final[str] = "%(prog)s [-dfx] [-n min,max] [-e fmt] [-v | -q] [root ...] [! cmd ...]"


def _format_epilog() -> str:
    lines = ["format codes for -e (any other character is printed as-is):"]
    lines.extend(f"  {code}  {description}" for code, description in FIELD_DESCRIPTIONS.items())
    lines.append("")
    lines.append("after '!', every '%' in the command is replaced by the entry path")
    lines.append("and '\\%' stands for a literal percent sign.")
    return "\n".join(lines)


def _depth_range(value: str) -> DepthRange:
    """Argparse ``type`` hook turning range errors into usage errors."""

    try:
        return parse_range(value)
    except InvalidRangeError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _value_option(token: str) -> tuple[str, str] | None:
    """Return ``(flags, long_option)`` when ``token`` takes the next token as its value.

    ``flags`` holds any boolean short flags clustered in front of the value
    option (``-xn`` gives ``("-x", "--depth")``), or ``""`` when there are none.
    """

    if token in _VALUE_OPTIONS:
        return "", _VALUE_OPTIONS[token]
    # Clustered short flags such as -xn, where the last letter takes a value.
    if token.startswith("-") and not token.startswith("--") and len(token) > 2:
        body = token[1:]
        long_option = _VALUE_OPTIONS.get("-" + body[-1])
        if long_option is not None and all(c in _SHORT_BOOL_FLAGS for c in body[:-1]):
            return "-" + body[:-1], long_option
    return None


def split_command(args: Sequence[str]) -> tuple[list[str], str | None]:
    """Separate walk arguments from a trailing ``! cmd`` template.

    The first token equal to ``!`` or starting with ``!`` (and not consumed
    as the value of ``-n``/``-e``) starts the command. The text after the
    marker and all following tokens are joined with single spaces.

    Option values are attached as ``--depth=<value>``/``--format=<value>`` so
    argparse accepts values that look like flags, such as ``-n -1,2``.

    Args:
        args: Raw command line tokens without the program name.

    Returns:
        tuple[list[str], str | None]: Tokens for argparse and the command
        template, or ``None`` when no marker is present.
    """
    walk_tokens: list[str] = []
    pending: tuple[str, str] | None = None
    for index, token in enumerate(args):
        if pending is not None:
            flags, long_option = pending
            if flags:
                walk_tokens.append(flags)
            walk_tokens.append(f"{long_option}={token}")
            pending = None
            continue
        pending = _value_option(token)
        if pending is not None:
            continue
        if token.startswith(COMMAND_MARKER):
            head = token[len(COMMAND_MARKER):]
            pieces = ([head] if head else []) + list(args[index + 1:])
            return walk_tokens, " ".join(pieces)
        walk_tokens.append(token)

    if pending is not None:
        # Dangling value option, left for argparse to report.
        walk_tokens.append(args[-1])
    return walk_tokens, None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="p9walk",
            usage=USAGE,
            description="Walk directory hierarchies, printing entry metadata or running a command per entry.",
            epilog=_format_epilog(),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "roots",
            nargs="*",
            default=["."],
            help="Root paths to walk (defaults to the current directory)",
            metavar="root",
        )
        _ = parser.add_argument(
            "-d",
            "--dirs",
            action="store_true",
            help="Print only directories",
        )
        _ = parser.add_argument(
            "-f",
            "--files",
            action="store_true",
            help="Print only non-directories",
        )
        _ = parser.add_argument(
            "-x",
            "--executable",
            action="store_true",
            help="Print only entries with an executable bit set",
        )
        _ = parser.add_argument(
            "-n",
            "--depth",
            type=_depth_range,
            default=DepthRange(),
            help='Inclusive depth range "min,max", either side optional; a bare N means "0,N"',
            metavar="min,max",
        )
        _ = parser.add_argument(
            "-e",
            "--format",
            type=str,
            default=None,
            help="Output format built from the codes listed below (default: p)",
            metavar="fmt",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show per-root progress and lookup diagnostics",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "--write-config",
            action="store_true",
            help=f"Write the effective defaults to {default_config_path()} and exit",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors such as a malformed depth range.
        """
        if args_list is None:
            args_list = sys.argv[1:]

        walk_tokens, command = split_command(args_list)
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_intermixed_args(walk_tokens)

        if command is not None and not command.strip():
            parser.error("missing command after '!'")

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        output_format: str = (
            parsed_args.format if parsed_args.format is not None else configuration.format
        )

        if parsed_args.write_config:
            return WriteConfigArgs(
                target=default_config_path(),
                format=output_format,
                shell=configuration.shell,
                log_file=configuration.log_file,
            )

        return WalkArgs(
            roots=tuple(parsed_args.roots or ["."]),
            walk_filter=WalkFilter(
                dirs_only=parsed_args.dirs,
                files_only=parsed_args.files,
                executable_only=parsed_args.executable,
                depth=parsed_args.depth,
            ),
            format=output_format,
            command=command,
            shell=configuration.shell,
        )
