"""Configuration for Good Commit."""

from .config_loader import ConfigError, ConfigLoader, ConfigParsingError
from .config_schema import AppConfigSchema, HookSchema, LintSchema, LogSchema

__all__ = [
	"AppConfigSchema",
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"HookSchema",
	"LintSchema",
	"LogSchema",
]
