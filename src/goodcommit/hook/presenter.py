"""Rendering of lint warnings and the commit prompt."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
	from goodcommit.lint.message import CommitMessage
	from goodcommit.lint.warnings import WarningSet
	from goodcommit.utils.git_utils import ColorMode

# Column the "[line N]" tag is aligned to
LINE_TEXT_WIDTH = 74

LINE_TAG_STYLE = "bold white"
WARNING_STYLE = "bold yellow"
PROMPT_STYLE = "bold blue"
HELP_STYLE = "bold red"

PROMPT = "Proceed with commit? [e/y/n/?] "

HELP_TEXT = """\
e - edit commit message
y - proceed with commit
n - abort commit
? - print help"""


def create_console(color_mode: ColorMode, file: IO[str] | None = None) -> Console:
	"""
	Create the console used for hook output.

	Args:
	    color_mode: ``always`` forces ANSI colours, ``never`` disables them and
	        ``auto`` colours only when the output is a terminal
	    file: Output stream, defaults to stdout

	Returns:
	    Console: Configured console

	"""
	if color_mode == "always":
		return Console(file=file, force_terminal=True, color_system="standard", highlight=False)
	if color_mode == "never":
		return Console(file=file, color_system=None, highlight=False)
	return Console(file=file, highlight=False)


class WarningPresenter:
	"""Displays warnings grouped by line, the prompt and its help text."""

	def __init__(self, console: Console | None = None) -> None:
		"""Initialize the presenter."""
		self.console = console or Console(highlight=False)

	def display(self, message: CommitMessage, warnings: WarningSet) -> None:
		"""
		Print every flagged line followed by its warnings.

		Args:
		    message: The message the warnings refer to
		    warnings: Warnings for the message

		"""
		for line_number, messages in warnings.items():
			line_text = message.line(line_number) if line_number <= len(message) else ""
			# Pad the rendered width, not the raw length
			line_text = line_text.expandtabs(self.console.tab_size)
			header = Text.assemble(f"{line_text:<{LINE_TEXT_WIDTH}} ", (f"[line {line_number}]", LINE_TAG_STYLE))
			self.console.print(header, soft_wrap=True)
			for warning in messages:
				self.console.print(Text(f" - {warning}", style=WARNING_STYLE), soft_wrap=True)

	def display_help(self) -> None:
		"""Print what each prompt choice does."""
		self.console.print(Text(HELP_TEXT, style=HELP_STYLE), soft_wrap=True)

	def prompt_text(self) -> Text:
		"""The question asked before committing."""
		return Text(PROMPT, style=PROMPT_STYLE)
