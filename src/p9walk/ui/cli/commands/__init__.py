"""Command executors for the CLI."""

from p9walk.ui.cli.commands.walk import WalkCommand
from p9walk.ui.cli.commands.write_config import WriteConfigCommand

__all__ = ["WalkCommand", "WriteConfigCommand"]
