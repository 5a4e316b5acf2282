"""Schemas for the Good Commit configuration file."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class HookSchema(BaseModel):
	"""Settings for the interactive hook."""

	color: Literal["always", "never", "auto"] | None = None
	editor: str | None = None
	tty: str = "/dev/tty"


class LintSchema(BaseModel):
	"""Settings for reading commit messages."""

	comment_char: str | None = None

	@field_validator("comment_char")
	@classmethod
	def check_single_character(cls, value: str | None) -> str | None:
		"""Comment markers are a single character, as in git."""
		if value is not None and len(value) != 1:
			msg = "comment_char must be a single character"
			raise ValueError(msg)
		return value


class LogSchema(BaseModel):
	"""Settings for diagnostic logging."""

	verbose: bool = False
	file: str | None = None


class AppConfigSchema(BaseModel):
	"""Top-level configuration schema."""

	hook: HookSchema = Field(default_factory=HookSchema)
	lint: LintSchema = Field(default_factory=LintSchema)
	log: LogSchema = Field(default_factory=LogSchema)
