"""Reading commit message files into a sequence of lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from goodcommit.lint.constants import DEFAULT_COMMENT_CHAR, SCISSORS_MARKER

if TYPE_CHECKING:
	from collections.abc import Iterator

logger = logging.getLogger(__name__)

TRAILING_WHITESPACE = " \t"


class MessageReadError(Exception):
	"""Raised when the commit message file cannot be read."""


@dataclass(frozen=True)
class CommitMessage:
	"""
	A commit message as an ordered, immutable sequence of lines.

	Lines have their trailing whitespace stripped and comment lines removed.
	Line numbers exposed to callers are 1-indexed.

	"""

	lines: tuple[str, ...] = ()

	@classmethod
	def from_text(cls, text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> CommitMessage:
		"""
		Build a commit message from raw file contents.

		Args:
		    text: Raw commit message text
		    comment_char: Character that marks a comment line

		Returns:
		    CommitMessage: The cleaned message

		"""
		scissors = f"{comment_char} {SCISSORS_MARKER}"
		# Only "\n" ends a line; str.splitlines would also break on U+2028 and friends
		raw_lines = text.split("\n")
		if raw_lines[-1] == "":
			raw_lines.pop()

		lines: list[str] = []
		for raw_line in raw_lines:
			line = raw_line.rstrip(TRAILING_WHITESPACE)
			if line == scissors:
				break
			if line.lstrip(TRAILING_WHITESPACE).startswith(comment_char):
				continue
			lines.append(line)
		return cls(tuple(lines))

	@property
	def subject(self) -> str:
		"""The first line of the message, or an empty string."""
		return self.lines[0] if self.lines else ""

	@property
	def is_blank(self) -> bool:
		"""Whether the message has no content other than whitespace."""
		return not "".join(self.lines).strip()

	def line(self, number: int) -> str:
		"""
		Get a line by its 1-indexed line number.

		Raises:
		    IndexError: If the line number is out of range

		"""
		if number < 1 or number > len(self.lines):
			msg = f"Line {number} is out of range"
			raise IndexError(msg)
		return self.lines[number - 1]

	def __len__(self) -> int:
		"""Return the number of lines."""
		return len(self.lines)

	def __iter__(self) -> Iterator[str]:
		"""Iterate over the lines."""
		return iter(self.lines)


def read_commit_message(path: Path | str, comment_char: str = DEFAULT_COMMENT_CHAR) -> CommitMessage:
	"""
	Read a commit message file from disk.

	Each call re-reads the file, so it can be used again after the file has
	been edited.

	Args:
	    path: Path to the commit message file
	    comment_char: Character that marks a comment line

	Returns:
	    CommitMessage: The message read from the file

	Raises:
	    MessageReadError: If the file does not exist or cannot be read

	"""
	file_path = Path(path)
	try:
		text = file_path.read_text(encoding="utf-8", errors="replace")
	except OSError as e:
		msg = f"Unable to read commit message file {file_path}: {e.strerror or e}"
		logger.debug(msg)
		raise MessageReadError(msg) from e

	message = CommitMessage.from_text(text, comment_char=comment_char)
	logger.debug("Read %d line(s) from %s", len(message), file_path)
	return message
