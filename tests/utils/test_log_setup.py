"""Tests for logging setup and error display helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import typer
from rich.logging import RichHandler

from goodcommit.utils.cli_utils import EXIT_INTERRUPTED, exit_with_error, handle_keyboard_interrupt
from goodcommit.utils.log_setup import setup_logging

if TYPE_CHECKING:
	from collections.abc import Iterator
	from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
	"""Put the root logger back the way pytest configured it."""
	root_logger = logging.getLogger()
	handlers = root_logger.handlers[:]
	level = root_logger.level
	yield
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)
		handler.close()
	for handler in handlers:
		root_logger.addHandler(handler)
	root_logger.setLevel(level)


@pytest.mark.unit
def test_default_level_is_warning() -> None:
	"""Without --verbose only warnings and errors are logged."""
	setup_logging()
	root_logger = logging.getLogger()

	assert root_logger.level == logging.WARNING
	assert [type(h) for h in root_logger.handlers] == [RichHandler]


@pytest.mark.unit
def test_verbose_level_is_debug() -> None:
	"""--verbose enables debug logging."""
	setup_logging(is_verbose=True)
	assert logging.getLogger().level == logging.DEBUG


@pytest.mark.unit
def test_repeated_setup_does_not_duplicate_handlers() -> None:
	"""Calling setup twice replaces the handlers."""
	setup_logging()
	setup_logging()
	assert len(logging.getLogger().handlers) == 1


@pytest.mark.unit
@pytest.mark.fs
def test_file_logging(tmp_path: Path) -> None:
	"""A log file receives debug records while the console stays at warning level."""
	log_file = tmp_path / "logs" / "goodcommit.log"
	setup_logging(log_file_path=log_file)
	logging.getLogger("goodcommit.test").debug("rule 6 flagged line 3")

	root_logger = logging.getLogger()
	for handler in root_logger.handlers:
		handler.flush()
	assert root_logger.level == logging.DEBUG
	assert [h.level for h in root_logger.handlers] == [logging.WARNING, logging.DEBUG]
	assert "rule 6 flagged line 3" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
@pytest.mark.fs
def test_unusable_log_file_is_skipped(tmp_path: Path) -> None:
	"""A log file that cannot be created leaves console logging in place."""
	blocker = tmp_path / "not-a-directory"
	blocker.write_text("", encoding="utf-8")

	with patch("goodcommit.utils.log_setup.console.print") as mock_print:
		setup_logging(log_file_path=blocker / "goodcommit.log")

	root_logger = logging.getLogger()
	assert [type(h) for h in root_logger.handlers] == [RichHandler]
	assert root_logger.level == logging.WARNING
	assert "not logging to" in str(mock_print.call_args.args[0])


@pytest.mark.unit
def test_exit_with_error_raises_exit() -> None:
	"""exit_with_error shows the summary and exits with the given code."""
	with patch("goodcommit.utils.cli_utils.display_error_summary") as mock_display:
		with pytest.raises(typer.Exit) as exc_info:
			exit_with_error("it broke", exit_code=1)

	mock_display.assert_called_once_with("it broke")
	assert exc_info.value.exit_code == 1


@pytest.mark.unit
def test_keyboard_interrupt_exit_code() -> None:
	"""Ctrl-C exits with the SIGINT status."""
	with pytest.raises(typer.Exit) as exc_info:
		handle_keyboard_interrupt()

	assert exc_info.value.exit_code == EXIT_INTERRUPTED
