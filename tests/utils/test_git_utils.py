"""Tests for the git helpers."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from goodcommit.utils.git_utils import (
	EditorError,
	GitError,
	get_git_config,
	resolve_color_mode,
	resolve_comment_char,
	resolve_editor,
	run_git_command,
)


@pytest.mark.unit
@pytest.mark.git
class TestRunGitCommand:
	"""Test cases for run_git_command."""

	@patch("goodcommit.utils.git_utils.subprocess.run")
	def test_returns_stdout(self, mock_run: MagicMock) -> None:
		"""The command's output is returned."""
		mock_run.return_value = subprocess.CompletedProcess(["git"], 0, stdout="auto\n", stderr="")

		assert run_git_command(["git", "config", "--get", "color.ui"]) == "auto\n"
		mock_run.assert_called_once_with(
			["git", "config", "--get", "color.ui"], cwd=None, capture_output=True, text=True, check=True
		)

	@patch("goodcommit.utils.git_utils.subprocess.run")
	def test_failure_raises_git_error(self, mock_run: MagicMock) -> None:
		"""A failing command raises GitError."""
		mock_run.side_effect = subprocess.CalledProcessError(1, ["git"], stderr="boom")

		with pytest.raises(GitError, match="boom"):
			run_git_command(["git", "status"])

	@patch("goodcommit.utils.git_utils.subprocess.run")
	def test_missing_git_raises_git_error(self, mock_run: MagicMock) -> None:
		"""A missing git binary raises GitError."""
		mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "git")

		with pytest.raises(GitError, match="Unable to run git"):
			run_git_command(["git", "status"])


@pytest.mark.unit
@pytest.mark.git
class TestGitConfig:
	"""Test cases for reading git configuration."""

	@patch("goodcommit.utils.git_utils.run_git_command", return_value="always\n")
	def test_get_git_config(self, mock_git: MagicMock) -> None:
		"""The value is stripped."""
		assert get_git_config("color.ui") == "always"
		mock_git.assert_called_once_with(["git", "config", "--get", "color.ui"])

	@patch("goodcommit.utils.git_utils.run_git_command", side_effect=GitError("unset"))
	def test_unset_key(self, _mock_git: MagicMock) -> None:
		"""Unset keys give None."""
		assert get_git_config("color.ui") is None

	@pytest.mark.parametrize(
		("override", "git_value", "expected"),
		[
			("always", "never", "always"),
			("never", "always", "never"),
			(None, "always", "always"),
			(None, "never", "never"),
			(None, "auto", "auto"),
			(None, "true", "auto"),
			(None, "false", "never"),
			(None, "Always", "always"),
			(None, None, "auto"),
			(None, "bogus", "auto"),
		],
	)
	def test_resolve_color_mode(self, override: str | None, git_value: str | None, expected: str) -> None:
		"""Explicit settings win, then color.ui, then auto."""
		with patch("goodcommit.utils.git_utils.get_git_config", return_value=git_value):
			assert resolve_color_mode(override) == expected

	@pytest.mark.parametrize(
		("override", "git_value", "expected"),
		[
			(";", "%", ";"),
			(None, "%", "%"),
			(None, "auto", "#"),
			(None, None, "#"),
		],
	)
	def test_resolve_comment_char(self, override: str | None, git_value: str | None, expected: str) -> None:
		"""Explicit settings win, then core.commentChar, then '#'."""
		with patch("goodcommit.utils.git_utils.get_git_config", return_value=git_value):
			assert resolve_comment_char(override) == expected


@pytest.mark.unit
@pytest.mark.git
class TestResolveEditor:
	"""Test cases for resolve_editor."""

	def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""An explicit editor is used as is."""
		monkeypatch.setenv("EDITOR", "vim")
		assert resolve_editor("nano") == "nano"

	def test_editor_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""$EDITOR comes next."""
		monkeypatch.setenv("EDITOR", "vim")
		assert resolve_editor() == "vim"

	@patch("goodcommit.utils.git_utils.run_git_command", return_value="vi\n")
	def test_falls_back_to_git(self, mock_git: MagicMock) -> None:
		"""Without $EDITOR, git decides."""
		assert resolve_editor() == "vi"
		mock_git.assert_called_once_with(["git", "var", "GIT_EDITOR"])

	@patch("goodcommit.utils.git_utils.run_git_command", side_effect=GitError("no git"))
	def test_no_editor_available(self, _mock_git: MagicMock) -> None:
		"""Without any editor, EditorError is raised."""
		with pytest.raises(EditorError, match="No editor configured"):
			resolve_editor()
