"""Configuration file loading with validation."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import cast

from core.exceptions import ConfigFileNotFoundError, ConfigValidationError, ConfigurationError
from models.config import PublisherConfig


class ConfigManager:
    """Manages loading and validating the publisher configuration file."""

    DEFAULT_FILENAME = "PublisherConfig.json"

    def __init__(self, config_file: str | Path | None = None) -> None:
        """Initialize ConfigManager.

        Args:
            config_file: Path to the configuration file.
                         Defaults to PublisherConfig.json in current directory.
        """
        self.config_file = Path(config_file) if config_file else Path(self.DEFAULT_FILENAME)

    def validate_config_dict(self, config: dict[str, object]) -> list[str]:
        """Validate configuration dictionary structure.

        Args:
            config: Configuration dictionary to validate.

        Returns:
            List of error messages (empty if valid).
        """
        errors: list[str] = []

        # Required identity of the content repository
        for key in ("github_username", "github_repo"):
            if key not in config:
                errors.append(f"Missing required field: '{key}'")
            elif not isinstance(config[key], str) or not str(config[key]).strip():
                errors.append(f"Field '{key}' must be a non-empty string")

        # Optional non-empty strings
        for key in ("branch", "remote", "base_url"):
            if key in config:
                if not isinstance(config[key], str) or not str(config[key]).strip():
                    errors.append(f"Field '{key}' must be a non-empty string")

        # Optional strings that may be empty
        for key in ("repo_root", "default_description", "default_author"):
            if key in config and not isinstance(config[key], str):
                errors.append(f"Field '{key}' must be a string")

        if "base_url" in config and isinstance(config["base_url"], str):
            if not config["base_url"].startswith(("http://", "https://")):
                errors.append("Field 'base_url' must start with http:// or https://")

        if "ignore_entries" in config:
            entries = config["ignore_entries"]
            if not isinstance(entries, list) or not entries:
                errors.append("Field 'ignore_entries' must be a non-empty list")
            elif not all(isinstance(e, str) and e.strip() for e in cast(list[object], entries)):
                errors.append("Field 'ignore_entries' must only contain non-empty strings")

        return errors

    def read(self, repo_root: Path | None = None) -> PublisherConfig:
        """Read and validate the configuration.

        Args:
            repo_root: Optional repository root overriding the file's value.

        Returns:
            PublisherConfig instance.

        Raises:
            ConfigFileNotFoundError: If the file does not exist.
            ConfigValidationError: If the file fails validation.
            ConfigurationError: If the file cannot be read or parsed.
        """
        if not self.config_file.exists():
            raise ConfigFileNotFoundError(str(self.config_file))

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data: object = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Error parsing {self.config_file}", str(e)) from e
        except OSError as e:
            raise ConfigurationError(f"Error reading {self.config_file}", str(e)) from e

        if not isinstance(data, dict):
            raise ConfigValidationError(["Expected a JSON object at the root"])

        config_dict = cast(dict[str, object], data)
        errors = self.validate_config_dict(config_dict)
        if errors:
            raise ConfigValidationError(errors)

        config = PublisherConfig.from_dict(config_dict, repo_root=repo_root)
        if not config.repo_root.is_dir():
            raise ConfigValidationError([f"Repository root is not a directory: {config.repo_root}"])
        return config

    def load_config(self, repo_root: Path | None = None) -> PublisherConfig:
        """Load the configuration, exiting with a message if it is unusable.

        Args:
            repo_root: Optional repository root overriding the file's value.

        Returns:
            PublisherConfig instance.

        Raises:
            SystemExit: If configuration file is missing or invalid.
        """
        try:
            return self.read(repo_root=repo_root)
        except ConfigurationError as e:
            sys.exit(f"{e}\nSee README.md for configuration documentation.")
