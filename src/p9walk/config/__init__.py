"""Configuration loading and location policy."""

from p9walk.config.config import DEFAULT_FORMAT, DEFAULT_SHELL, Config
from p9walk.config.paths import default_config_path

__all__ = ["Config", "DEFAULT_FORMAT", "DEFAULT_SHELL", "default_config_path"]
