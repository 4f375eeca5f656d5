"""
Configuration loader — reads fnm-desk.yml into a DeskConfig model.

The file is optional: without one every setting takes its default and
fnm itself is auto-detected.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "fnm-desk.yml"


class ConfigError(Exception):
    """Raised when the configuration file is invalid."""


class DeskConfig(BaseModel):
    """Settings for how fnm-desk drives fnm."""

    model_config = ConfigDict(extra="forbid")

    fnm_path: str | None = None      # explicit fnm executable
    fnm_dir: str | None = None       # override FNM_DIR
    default_mirror: str | None = None
    log_level: str | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for fnm-desk.yml starting from the given directory, walking up."""
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> DeskConfig:
    """Load and validate configuration.

    Args:
        path: Explicit path to fnm-desk.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return DeskConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return DeskConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return DeskConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
