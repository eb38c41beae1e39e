"""Configuration manager for loading and validating .phrase-search.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from phrasesearch.domain.config import SearchConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".phrase-search.yml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


class ConfigManager:
    """Manages configuration from .phrase-search.yml, environment and CLI

    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .phrase-search.yml file (searched from current directory upwards)
    3. Environment variables (PHRASESEARCH_*)
    4. Explicit overrides (passed by the CLI layer)
    """

    DEFAULT_CONFIG = {
        "directories": [],
        "patterns": [],
        "filters": {
            "file_types": [],
            "exclude_dirs": ["node_modules", ".git"],
        },
        "output": {
            "folder": "./search-results",
            "file_name": "search-results",
        },
        "verbose": False,
    }

    def __init__(
        self,
        config_path: Optional[Path] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        """Initialize config manager

        Args:
            config_path: Path to .phrase-search.yml (searches from current dir if None)
            overrides: Values that take precedence over file and environment

        Raises:
            ConfigurationError: If the file cannot be read or validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        self.overrides = overrides or {}
        try:
            self.config: SearchConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .phrase-search.yml starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> SearchConfig:
        """Load configuration from file, environment and overrides

        Returns:
            Validated SearchConfig instance

        Raises:
            ValidationError: If configuration is invalid
            ConfigurationError: If the config file cannot be read or parsed
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path:
            file_config = self._read_config_file(self.config_path)
            config_dict = self._merge_config(config_dict, file_config)
            logger.info(f"Loaded configuration from {self.config_path}")

        config_dict = self._apply_env_overrides(config_dict)
        config_dict = self._merge_config(config_dict, self.overrides)

        return SearchConfig(**config_dict)

    def _read_config_file(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config from {path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return file_config

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Lists are replaced, not concatenated.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        output = config.setdefault("output", {})
        if os.getenv("PHRASESEARCH_OUTPUT_FOLDER"):
            output["folder"] = os.getenv("PHRASESEARCH_OUTPUT_FOLDER")

        if os.getenv("PHRASESEARCH_FILE_NAME"):
            output["file_name"] = os.getenv("PHRASESEARCH_FILE_NAME")

        if os.getenv("PHRASESEARCH_VERBOSE"):
            config["verbose"] = os.getenv("PHRASESEARCH_VERBOSE").strip().lower() in _TRUE_VALUES

        return config

    def get_search_config(self) -> SearchConfig:
        """Get the validated search configuration"""
        return self.config

