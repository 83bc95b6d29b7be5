"""
Manages loading and saving of the command-line INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dj_youtube_source.exceptions import AuthConfigError, ConfigurationError
from dj_youtube_source.models.config import SourceConfig

log = logging.getLogger(__name__)

AUTH_SECTION = "auth"


class ConfigManager:
    """Handles all operations related to the CLI's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> SourceConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing file is fine when the CLI options alone carry a credential.

        Args:
            cli_options: Auth values provided on the command line (type/key/token).

        Returns:
            A validated SourceConfig object.

        Raises:
            ConfigurationError: If the file cannot be parsed or no credential is found.
            AuthConfigError: If the auth settings fail validation.
        """
        auth = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(f"Error parsing configuration file: {e}") from e
            auth = self.get_auth_as_dict()
        elif not cli_options:
            raise ConfigurationError(
                f"Configuration file not found at '{self.config_file_path}'. "
                "Please run 'dj-youtube init' first."
            )

        if cli_options:
            auth.update({k: v for k, v in cli_options.items() if v is not None})

        try:
            return SourceConfig(auth=auth)
        except ValidationError as e:
            raise AuthConfigError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, str]) -> None:
        """
        Creates and saves a new configuration file.

        Args:
            settings: The auth values to save (type/key/token).
        """
        config = configparser.ConfigParser(interpolation=None)
        config[AUTH_SECTION] = {
            "type": settings.get("type", "key"),
            "key": settings.get("key", ""),
            "token": settings.get("token", ""),
        }

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e
        log.debug(f"Saved configuration to '{self.config_file_path}'")

    def get_auth_as_dict(self) -> dict[str, str]:
        """Reads the `[auth]` section of the INI file into a dictionary."""
        if not self._parser.has_section(AUTH_SECTION):
            return {}
        section = self._parser[AUTH_SECTION]
        return {
            "type": section.get("type", "key"),
            "key": section.get("key", ""),
            "token": section.get("token", ""),
        }
