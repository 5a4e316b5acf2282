"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from goodcommit.config import ConfigLoader

if TYPE_CHECKING:
	from collections.abc import Callable, Iterator
	from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
	"""Keep user configuration and editor settings out of the tests."""
	for env_var in list(os.environ):
		if env_var.startswith("GOODCOMMIT_"):
			monkeypatch.delenv(env_var)
	monkeypatch.delenv("EDITOR", raising=False)
	monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
	monkeypatch.chdir(tmp_path)
	ConfigLoader._instance = None
	yield
	ConfigLoader._instance = None


@pytest.fixture
def write_commit_msg(tmp_path: Path) -> Callable[[str], Path]:
	"""Return a helper that writes a COMMIT_EDITMSG file and returns its path."""

	def _write(content: str) -> Path:
		path = tmp_path / "COMMIT_EDITMSG"
		path.write_text(content, encoding="utf-8")
		return path

	return _write
