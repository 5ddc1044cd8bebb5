"""Command line argument handling package."""

from p9walk.ui.cli.args.parser import ArgumentParser, split_command
from p9walk.ui.cli.args.options import CLIArgs, WalkArgs, WriteConfigArgs

__all__ = ["ArgumentParser", "CLIArgs", "WalkArgs", "WriteConfigArgs", "split_command"]
