"""Command-line interface for the Good Commit hook."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from goodcommit import __version__
from goodcommit.config import ConfigError, ConfigLoader
from goodcommit.hook import HookController, WarningPresenter, create_console
from goodcommit.lint import MessageReadError, create_linter
from goodcommit.utils.cli_utils import EXIT_ABORT, EXIT_ALLOW, exit_with_error, handle_keyboard_interrupt
from goodcommit.utils.git_utils import EditorError, resolve_color_mode, resolve_comment_char
from goodcommit.utils.log_setup import log_environment_info, setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
	help="Good Commit - a git hook to help you write good commit messages.",
	add_completion=False,
	context_settings={"help_option_names": ["-h", "--help"]},
)


class ColorChoice(str, Enum):
	"""Values accepted by --color."""

	ALWAYS = "always"
	NEVER = "never"
	AUTO = "auto"


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"Good Commit version: {__version__}")
		raise typer.Exit


CommitMsgFileArg = Annotated[
	Path,
	typer.Argument(
		help="Path to the commit message file (passed by git to the commit-msg hook)",
		dir_okay=False,
	),
]

ColorOpt = Annotated[
	ColorChoice | None,
	typer.Option("--color", help="Colour output: always, never or auto. Defaults to git's color.ui."),
]

EditorOpt = Annotated[
	str | None,
	typer.Option("--editor", help="Editor command used for the edit choice. Defaults to $EDITOR."),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to a configuration file", dir_okay=False),
]

VerboseFlag = Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging")]

VersionFlag = Annotated[
	bool,
	typer.Option("--version", help="Show the version and exit.", callback=_version_callback, is_eager=True),
]


@app.command()
def check(
	commit_msg_file: CommitMsgFileArg,
	color: ColorOpt = None,
	editor: EditorOpt = None,
	config_file: ConfigOpt = None,
	is_verbose: VerboseFlag = False,
	version: VersionFlag = False,  # noqa: ARG001
) -> None:
	"""
	Check a commit message and ask how to proceed when it breaks a rule.

	Exits with 0 to let the commit proceed and 1 to abort it.

	"""
	setup_logging(is_verbose=is_verbose)

	try:
		config = ConfigLoader.get_instance(config_file=config_file, reload=True).get
		if config.log.verbose or config.log.file:
			setup_logging(is_verbose=is_verbose or config.log.verbose, log_file_path=config.log.file)
		log_environment_info()

		color_mode = resolve_color_mode(color.value if color else config.hook.color)
		controller = HookController(
			commit_msg_file,
			linter=create_linter(),
			presenter=WarningPresenter(create_console(color_mode)),
			editor=editor or config.hook.editor,
			tty_path=config.hook.tty,
			comment_char=resolve_comment_char(config.lint.comment_char),
		)
		accepted = controller.run()
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except (MessageReadError, EditorError, ConfigError) as e:
		exit_with_error(str(e), exception=e)

	logger.debug("Commit %s", "accepted" if accepted else "aborted")
	raise typer.Exit(EXIT_ALLOW if accepted else EXIT_ABORT)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
