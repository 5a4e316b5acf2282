"""
Logging setup for Good Commit.

Log records go to stderr so they never mix with the warnings and prompt the
hook writes to stdout.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

# Initialize console for rich output
console = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"


def _create_file_handler(log_file_path: Path | str) -> logging.FileHandler | None:
	"""
	Create a debug-level handler appending to the given file.

	A log file that cannot be opened is reported on the console and skipped;
	the hook carries on without it.

	"""
	path = Path(log_file_path).expanduser()
	try:
		path.parent.mkdir(parents=True, exist_ok=True)
		handler = logging.FileHandler(path, mode="a", encoding="utf-8")
	except OSError as e:
		console.print(Text(f"Good Commit: not logging to {path}: {e}", style="yellow"))
		return None

	handler.setLevel(logging.DEBUG)
	handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
	return handler


def setup_logging(is_verbose: bool = False, log_file_path: Path | str | None = None) -> None:
	"""
	Set up logging configuration.

	Safe to call more than once: the CLI configures logging first from its
	flags and again once the configuration file has been read.

	Args:
	    is_verbose: Log debug records to the console instead of warnings only
	    log_file_path: Optional file that receives every record at debug level

	"""
	console_level = logging.DEBUG if is_verbose else logging.WARNING
	handlers: list[logging.Handler] = [
		RichHandler(
			level=console_level,
			console=console,
			rich_tracebacks=True,
			show_time=is_verbose,
			show_path=is_verbose,
		)
	]
	file_handler = _create_file_handler(log_file_path) if log_file_path else None
	if file_handler is not None:
		handlers.append(file_handler)

	root_logger = logging.getLogger()
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)
	for handler in handlers:
		root_logger.addHandler(handler)
	# The root level must let file records through even when the console is quiet
	root_logger.setLevel(logging.DEBUG if file_handler is not None else console_level)

	if file_handler is not None:
		root_logger.debug("Logging to file: %s", file_handler.baseFilename)


def log_environment_info() -> None:
	"""Log information about the execution environment."""
	import platform

	from goodcommit import __version__

	logger = logging.getLogger(__name__)
	logger.debug("Good Commit version: %s", __version__)
	logger.debug("Python version: %s", platform.python_version())
	logger.debug("Platform: %s", platform.platform())


def display_error_summary(error_message: str) -> None:
	"""
	Display an error summary with a divider and a title.

	Args:
	        error_message: The error message to display

	"""
	title = Text("Error Summary", style="bold red")

	console.print()
	console.print(Rule(title, style="red"))
	console.print(Text(f"\n{error_message}\n"))
	console.print(Rule(style="red"))
	console.print()
