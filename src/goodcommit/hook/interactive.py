"""Interactive validate-and-prompt loop run by the commit-msg hook."""

from __future__ import annotations

import logging
import shlex
import subprocess
from enum import Enum, auto
from pathlib import Path
from typing import IO, TYPE_CHECKING

from goodcommit.lint.constants import DEFAULT_COMMENT_CHAR
from goodcommit.lint.message import CommitMessage, read_commit_message
from goodcommit.lint.warnings import WarningSet
from goodcommit.utils.git_utils import EditorError, resolve_editor

if TYPE_CHECKING:
	from collections.abc import Callable

	from goodcommit.hook.presenter import WarningPresenter
	from goodcommit.lint.linter import CommitLinter

logger = logging.getLogger(__name__)

DEFAULT_TTY = "/dev/tty"


class HookAction(Enum):
	"""Choices offered at the commit prompt."""

	EDIT = auto()
	ACCEPT = auto()
	ABORT = auto()
	HELP = auto()


class HookState(Enum):
	"""States of the hook's validation loop."""

	READING = auto()
	VALIDATING = auto()
	PRESENTING = auto()
	PROMPTING = auto()
	ACCEPTED = auto()
	REJECTED = auto()


TERMINAL_STATES = frozenset({HookState.ACCEPTED, HookState.REJECTED})

_REPLY_ACTIONS = {
	"e": HookAction.EDIT,
	"y": HookAction.ACCEPT,
	"n": HookAction.ABORT,
}


def parse_reply(reply: str) -> HookAction:
	"""
	Map a prompt reply to an action using its first character.

	Anything unrecognised, including an empty reply, asks for help.

	"""
	return _REPLY_ACTIONS.get(reply[:1].lower(), HookAction.HELP)


class HookController:
	"""
	Drives the read, validate, present and prompt loop for one commit.

	The commit message is re-read and re-validated on every pass, so edits
	made in the editor are always checked from scratch.

	"""

	def __init__(
		self,
		path: Path | str,
		linter: CommitLinter,
		presenter: WarningPresenter,
		editor: str | None = None,
		tty_path: Path | str = DEFAULT_TTY,
		comment_char: str = DEFAULT_COMMENT_CHAR,
		reply_stream: IO[str] | None = None,
	) -> None:
		"""
		Initialize the controller.

		Args:
		    path: Commit message file written by git
		    linter: Linter used on every pass
		    presenter: Presenter for warnings, prompt and help
		    editor: Editor command; resolved from the environment when None
		    tty_path: Terminal to read replies from
		    comment_char: Character that marks a comment line
		    reply_stream: Already open stream to read replies from instead of ``tty_path``

		"""
		self.path = Path(path)
		self.linter = linter
		self.presenter = presenter
		self.editor = editor
		self.tty_path = Path(tty_path)
		self.comment_char = comment_char

		self.state = HookState.READING
		self.suppress_next_display = False
		self.message = CommitMessage()
		self.warnings = WarningSet()

		self._terminal: IO[str] | None = reply_stream
		self._owns_terminal = False

	def run(self) -> bool:
		"""
		Run the loop until the commit is accepted or rejected.

		Returns:
		    True if the commit may proceed, False if it should be aborted

		Raises:
		    MessageReadError: If the commit message file cannot be read
		    EditorError: If the editor cannot be launched

		"""
		self.state = HookState.READING
		self.suppress_next_display = False
		try:
			while self.state not in TERMINAL_STATES:
				self.step()
		finally:
			self._close_terminal()
		return self.state is HookState.ACCEPTED

	def step(self) -> HookState:
		"""Advance the loop by one state and return the new state."""
		handlers: dict[HookState, Callable[[], None]] = {
			HookState.READING: self._read,
			HookState.VALIDATING: self._validate,
			HookState.PRESENTING: self._present,
			HookState.PROMPTING: self._prompt,
		}
		handlers[self.state]()
		return self.state

	def _read(self) -> None:
		self.message = read_commit_message(self.path, comment_char=self.comment_char)
		self.state = HookState.VALIDATING

	def _validate(self) -> None:
		self.warnings = self.linter.lint(self.message)
		if not self.warnings:
			logger.debug("Commit message passed validation")
			self.state = HookState.ACCEPTED
		elif self.suppress_next_display:
			# Warnings were shown right before the help text
			self.suppress_next_display = False
			self.state = HookState.PROMPTING
		else:
			self.state = HookState.PRESENTING

	def _present(self) -> None:
		self.presenter.display(self.message, self.warnings)
		self.state = HookState.PROMPTING

	def _prompt(self) -> None:
		reply = self._read_reply()
		if reply is None:
			logger.warning("No reply from the terminal, aborting commit")
			self.state = HookState.REJECTED
			return

		action = parse_reply(reply)
		logger.debug("Prompt reply %r -> %s", reply, action.name)
		if action is HookAction.EDIT:
			self.launch_editor()
			self.state = HookState.READING
		elif action is HookAction.ACCEPT:
			self.state = HookState.ACCEPTED
		elif action is HookAction.ABORT:
			self.state = HookState.REJECTED
		else:
			self.presenter.display_help()
			self.suppress_next_display = True
			self.state = HookState.READING

	def _read_reply(self) -> str | None:
		"""
		Ask the question and read one line from the terminal.

		Returns:
		    The reply without its line ending, or None at end of input or
		    when no terminal is available

		"""
		terminal = self._open_terminal()
		if terminal is None:
			return None
		reply = self.presenter.console.input(self.presenter.prompt_text(), stream=terminal)
		if not reply:
			return None
		return reply.rstrip("\r\n")

	def _open_terminal(self) -> IO[str] | None:
		if self._terminal is None:
			try:
				self._terminal = self.tty_path.open(encoding="utf-8")
			except OSError as e:
				logger.error("Unable to open terminal %s: %s", self.tty_path, e)  # noqa: TRY400
				return None
			self._owns_terminal = True
		return self._terminal

	def _close_terminal(self) -> None:
		if self._owns_terminal and self._terminal is not None:
			self._terminal.close()
			self._terminal = None
			self._owns_terminal = False

	def _editor_stdin(self) -> IO[str] | None:
		terminal = self._open_terminal()
		if terminal is None:
			return None
		try:
			terminal.fileno()
		except (OSError, ValueError):
			return None
		return terminal

	def launch_editor(self) -> None:
		"""
		Open the commit message file in the editor and wait for it to exit.

		Raises:
		    EditorError: If no editor is configured or it cannot be started

		"""
		editor = resolve_editor(self.editor)
		try:
			args = shlex.split(editor)
		except ValueError as e:
			msg = f"Invalid editor command {editor!r}: {e}"
			raise EditorError(msg) from e
		if not args:
			msg = "No editor configured. Set $EDITOR or git's core.editor."
			raise EditorError(msg)

		command = [*args, str(self.path)]
		logger.debug("Launching editor: %s", command)
		try:
			result = subprocess.run(command, stdin=self._editor_stdin(), check=False)  # noqa: S603
		except OSError as e:
			msg = f"Unable to launch editor {editor!r}: {e}"
			raise EditorError(msg) from e
		if result.returncode != 0:
			logger.warning("Editor exited with status %d", result.returncode)
