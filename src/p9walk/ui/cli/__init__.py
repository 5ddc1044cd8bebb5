"""Command line interface exports."""

from p9walk.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
