"""Utility functions for CLI operations in Good Commit."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer

from goodcommit.utils.log_setup import console, display_error_summary

logger = logging.getLogger(__name__)

EXIT_ALLOW = 0
EXIT_ABORT = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	if exception:
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(message)


def exit_with_error(message: str, exit_code: int = EXIT_ABORT, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> NoReturn:
	"""Handles KeyboardInterrupt by printing a message and exiting."""
	console.print("\n[yellow]Commit cancelled by user.[/yellow]")
	raise typer.Exit(EXIT_INTERRUPTED)
