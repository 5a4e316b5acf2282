"""Git utilities for Good Commit."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import TYPE_CHECKING, Literal

from goodcommit.lint.constants import DEFAULT_COMMENT_CHAR

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)

ColorMode = Literal["always", "never", "auto"]

# git's color.ui accepts booleans as well as always/never/auto
_COLOR_UI_MODES: dict[str, ColorMode] = {
	"always": "always",
	"never": "never",
	"false": "never",
	"auto": "auto",
	"true": "auto",
}


class GitError(Exception):
	"""Custom exception for Git-related errors."""


class EditorError(Exception):
	"""Raised when no editor is available or the editor cannot be launched."""


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""Run a Git command and return its output.

	Args:
	    command: Git command to run
	    cwd: Working directory (optional)

	Returns:
	    Command output as string

	Raises:
	    GitError: If the command fails or git is not installed
	"""
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	except OSError as e:
		error_msg = f"Unable to run git: {e}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	else:
		return result.stdout


def get_git_config(key: str) -> str | None:
	"""Get a git configuration value.

	Args:
	    key: Configuration key, e.g. ``color.ui``

	Returns:
	    The configured value, or None if it is unset or git is unavailable
	"""
	try:
		value = run_git_command(["git", "config", "--get", key]).strip()
	except GitError:
		return None
	return value or None


def resolve_color_mode(override: str | None = None) -> ColorMode:
	"""Decide whether output should be coloured.

	Args:
	    override: Explicit mode from the command line or configuration

	Returns:
	    One of ``always``, ``never`` or ``auto``
	"""
	value = override or get_git_config("color.ui") or "auto"
	mode = _COLOR_UI_MODES.get(value.lower())
	if mode is None:
		logger.debug("Unknown color mode %r, falling back to auto", value)
		return "auto"
	return mode


def resolve_editor(override: str | None = None) -> str:
	"""Determine the editor command used to edit the commit message.

	Args:
	    override: Editor command from the command line or configuration

	Returns:
	    The editor command line

	Raises:
	    EditorError: If no editor could be determined
	"""
	if override:
		return override

	editor = os.environ.get("EDITOR")
	if editor:
		return editor

	try:
		editor = run_git_command(["git", "var", "GIT_EDITOR"]).strip()
	except GitError as e:
		msg = "No editor configured. Set $EDITOR or git's core.editor."
		raise EditorError(msg) from e
	if not editor:
		msg = "No editor configured. Set $EDITOR or git's core.editor."
		raise EditorError(msg)
	return editor


def resolve_comment_char(override: str | None = None) -> str:
	"""Determine the character that starts a comment line.

	Args:
	    override: Comment character from the configuration

	Returns:
	    A single comment character
	"""
	if override:
		return override

	value = get_git_config("core.commentChar")
	# "auto" makes git pick a character per message; the default is what it writes first
	if value and len(value) == 1:
		return value
	return DEFAULT_COMMENT_CHAR
