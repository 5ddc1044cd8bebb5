"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers where its config
file lives.

Policy:
- Config: ``$P9WALK_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/p9walk/config.toml`` falling back to
  ``~/.config/p9walk/config.toml``.
- Nothing is ever created next to the trees being walked.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "P9WALK_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_APP_DIR_NAME: Final[str] = "p9walk"


def resolve_overridable_path(
    *,
    env: Mapping[str, str] | None,
    env_var: str,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path, letting a non-blank ``env_var`` override the default."""

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip()
    if candidate:
        return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory for the application."""

    return resolve_overridable_path(
        env=env,
        env_var=_ENV_XDG_CONFIG_HOME,
        default_factory=lambda: Path.home() / ".config",
    ) / _APP_DIR_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file.

    Args:
        env: Environment mapping to consult (defaults to ``os.environ``).

    Returns:
        Path: ``$P9WALK_CONFIG`` when set, else ``<config dir>/config.toml``.
    """
    return resolve_overridable_path(
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / "config.toml",
    )


__all__ = [
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
