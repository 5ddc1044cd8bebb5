"""Configuration management for p9walk."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from p9walk.config.file_ops import write_text_file
from p9walk.config.paths import default_config_path
from p9walk.platform.logging import logger

DEFAULT_FORMAT: Final[str] = "p"
DEFAULT_SHELL: Final[str] = "/bin/sh"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Default output format when -e is not given
    format: str = DEFAULT_FORMAT

    # Shell used to run "! cmd" templates
    shell: str = DEFAULT_SHELL

    # Log file path
    log_file: Path | None = _path_field()

    # Cached instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields flagged with ``metadata={"path": True}`` by
        ``_path_field`` are converted; empty strings become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if not self.format:
            self.format = DEFAULT_FORMAT
        if not self.shell:
            self.shell = DEFAULT_SHELL

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file, defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# p9walk configuration file")
        lines.append("")

        lines.append("# Output format used when -e is not given")
        lines.append("# Codes: U G M a m n p s x, any other character is printed as-is")
        lines.append(f"format = {self._format_toml_value(config['format'])}")
        lines.append("")

        lines.append("# Shell that runs '! cmd' templates as: <shell> -c <cmd>")
        lines.append(f"shell = {self._format_toml_value(config['shell'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "~/.local/state/p9walk/p9walk.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            TypeError: If the file holds keys the configuration does not know.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
                instance = cls(**config_dict)
            except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None


__all__ = ["Config", "DEFAULT_FORMAT", "DEFAULT_SHELL"]
