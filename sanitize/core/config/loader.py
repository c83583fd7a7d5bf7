"""
Configuration loader — reads .sanitize.yml into a typed model.

The file is optional.  It supplies defaults for the command-line flags;
flags given on the command line always take precedence (or, for the
list-valued ones, are layered after the configured entries).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sanitize.core.models.profile import ProfilePolicy

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = ".sanitize.yml"

# Environment variable pointing at an explicit config file
CONFIG_ENV_VAR = "SANITIZE_CONFIG"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing."""

    exit_code = 1


class SanitizeConfig(BaseModel):
    """Defaults for every command-line flag."""

    model_config = ConfigDict(extra="forbid")

    system: str | None = None
    profiles: list[str] = Field(default_factory=list)
    prepend_path: list[str] = Field(default_factory=list)
    append_path: list[str] = Field(default_factory=list)
    unknown_profile: ProfilePolicy = ProfilePolicy.SKIP
    fork: bool = False
    shell: str | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for .sanitize.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
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


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file: explicit path, then $SANITIZE_CONFIG, then search."""
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return find_config_file()


def load_config(path: Path | None = None) -> SanitizeConfig:
    """Load and validate the configuration.

    Args:
        path: Config file to read.  None means "no config": defaults.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        logger.debug("No config file, using defaults")
        return SanitizeConfig()

    if not path.is_file():
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
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = SanitizeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config
