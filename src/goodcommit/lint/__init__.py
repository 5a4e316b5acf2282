"""
Commit linter package for validating git commit messages.

This package provides modules for reading commit message files, the style
rules they are checked against, and the linter that applies those rules.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .linter import CommitLinter
from .message import CommitMessage, MessageReadError, read_commit_message
from .rules import RULES, Rule
from .warnings import LintWarning, WarningSet

if TYPE_CHECKING:
	from collections.abc import Sequence

__all__ = [
	"RULES",
	"CommitLinter",
	"CommitMessage",
	"LintWarning",
	"MessageReadError",
	"Rule",
	"WarningSet",
	"create_linter",
	"read_commit_message",
]


def create_linter(rules: Sequence[Rule] | None = None) -> CommitLinter:
	"""
	Create a CommitLinter.

	Args:
	    rules: Override the default rule set

	Returns:
	    CommitLinter: Configured commit linter instance

	"""
	return CommitLinter(rules=RULES if rules is None else rules)
