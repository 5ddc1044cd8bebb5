"""src/p9walk/ui/cli/commands/write_config.py
What: Persist the effective defaults as a commented TOML file.
Why: Give users a starting config without hand-writing the schema.
"""

from pathlib import Path
from typing import final

from p9walk.config import Config
from p9walk.ui.cli.args.options import WriteConfigArgs


@final
class WriteConfigCommand:
    """Write ``format``, ``shell`` and ``log_file`` to the config location."""

    def __init__(self, args: WriteConfigArgs) -> None:
        self.args = args

    def execute(self) -> Path:
        configuration = Config(
            format=self.args.format,
            shell=self.args.shell,
            log_file=self.args.log_file,
        )
        return configuration.save(self.args.target)


__all__ = ["WriteConfigCommand"]
