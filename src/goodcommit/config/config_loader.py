"""
Configuration loader for Good Commit.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from goodcommit.config.config_schema import AppConfigSchema

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOODCOMMIT_"
CONFIG_FILE_NAME = ".goodcommit.yml"

# Environment variables take the form GOODCOMMIT_<SECTION>_<KEY>
MIN_ENV_VAR_PARTS = 2


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


class ConfigLoader:
	"""
	Loads and manages configuration for Good Commit using Pydantic schemas.

	Values come from the defaults in :class:`AppConfigSchema`, then the
	configuration file, then ``GOODCOMMIT_*`` environment variables.

	"""

	_instance = None  # For singleton pattern

	@classmethod
	def get_instance(cls, config_file: Path | None = None, reload: bool = False) -> ConfigLoader:
		"""
		Get the singleton instance of ConfigLoader.

		Args:
			config_file: Path to configuration file (optional)
			reload: Whether to reload config even if already loaded

		Returns:
			ConfigLoader: Singleton instance

		"""
		if cls._instance is None or reload:
			cls._instance = cls(config_file)
		return cls._instance

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)

		"""
		self._resolved_config_file = self._resolve_config_file(config_file)
		self._app_config = self._load_config()

	def _resolve_config_file(self, config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.goodcommit.yml in the current directory
		2. $XDG_CONFIG_HOME/goodcommit/config.yml

		Args:
			config_file: Explicitly provided config file path (optional)

		Returns:
			Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			return Path(config_file).expanduser().resolve()

		local_config = Path(CONFIG_FILE_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "goodcommit" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		"""
		Parse a YAML file.

		Args:
			file_path: Path to the YAML file to parse

		Returns:
			Parsed YAML content as a dictionary

		Raises:
			yaml.YAMLError: If the file cannot be parsed as valid YAML
		"""
		with file_path.open(encoding="utf-8") as f:
			content = yaml.safe_load(f)
			if content is None:  # Empty file
				return {}
			if not isinstance(content, dict):
				msg = f"File {file_path} does not contain a valid YAML dictionary"
				raise yaml.YAMLError(msg)
			return content

	def _load_config(self) -> AppConfigSchema:
		"""
		Load configuration from file and environment and parse it into AppConfigSchema.

		Returns:
			AppConfigSchema: Loaded and parsed configuration.

		Raises:
			ConfigParsingError: If the configuration file cannot be read, parsed or validated.

		"""
		file_config_dict: dict[str, Any] = {}
		if self._resolved_config_file:
			if not self._resolved_config_file.exists():
				msg = f"Configuration file not found: {self._resolved_config_file}"
				raise ConfigParsingError(msg)
			try:
				file_config_dict = self._parse_yaml_file(self._resolved_config_file)
				logger.debug("Loaded configuration from %s", self._resolved_config_file)
			except yaml.YAMLError as e:
				msg = f"Configuration file {self._resolved_config_file} does not contain a valid YAML dictionary."
				raise ConfigParsingError(msg) from e
			except OSError as e:
				msg = f"Error accessing configuration file {self._resolved_config_file}: {e}"
				raise ConfigParsingError(msg) from e
		else:
			logger.debug("No configuration file found. Using default configuration.")

		self._merge_configs(file_config_dict, self._env_overrides())

		try:
			return AppConfigSchema(**file_config_dict)
		except ValidationError as e:
			msg = f"Error parsing configuration into schema: {e}"
			raise ConfigParsingError(msg) from e

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
			base: Base configuration dictionary to merge into
			override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	@staticmethod
	def _env_overrides() -> dict[str, dict[str, Any]]:
		"""Collect GOODCOMMIT_SECTION_KEY environment variables as nested overrides."""
		overrides: dict[str, dict[str, Any]] = {}
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var[len(ENV_PREFIX) :].lower().split("_")
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])
			overrides.setdefault(section, {})[key] = value
			logger.debug("Applied environment override %s", env_var)
		return overrides

	@property
	def get(self) -> AppConfigSchema:
		"""
		Get the current application configuration.

		Returns:
			AppConfigSchema: The current configuration
		"""
		return self._app_config
