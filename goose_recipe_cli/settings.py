"""Config store for goose's config.yaml key-value file.

Lookup order for a key:
1. Environment variable with the upper-cased key name - highest priority
2. ~/.config/goose/config.yaml (or the file named by GOOSE_CONFIG_PATH)
3. None
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

GOOSE_CONFIG_PATH_ENV_VAR = "GOOSE_CONFIG_PATH"


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Location of the goose config file."""
    if environ is None:
        environ = os.environ
    if override := environ.get(GOOSE_CONFIG_PATH_ENV_VAR):
        return Path(override)
    return Path.home() / ".config" / "goose" / "config.yaml"


class ConfigStore:
    """Reads single string parameters from env and config.yaml."""

    def __init__(self, config_path: Path | None = None, environ: Mapping[str, str] | None = None):
        """Initialize config store.

        Args:
            config_path: Config file to read (for testing).
                         If None, uses the default goose config location.
            environ: Environment mapping (for testing). If None, uses os.environ.
        """
        self.environ = os.environ if environ is None else environ
        self.config_path = config_path or default_config_path(self.environ)

    def get_param(self, key: str) -> str | None:
        """Get a string parameter.

        Args:
            key: Parameter name (e.g. GOOSE_RECIPE_GITHUB_REPO)

        Returns:
            Parameter value, or None if unset or empty
        """
        if env_value := self.environ.get(key.upper()):
            return env_value

        value = self._read_config().get(key)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            logger.warning(f"Config value for {key} in {self.config_path} is not a string, ignoring")
            return None
        return value

    def _read_config(self) -> dict[str, Any]:
        """Read config file, treating a missing or broken file as empty."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read config from {self.config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}
        return data

    def __repr__(self) -> str:
        return f"ConfigStore({self.config_path})"
