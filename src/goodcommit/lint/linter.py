"""Main linter module for commit messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from goodcommit.lint.rules import RULES, Rule
from goodcommit.lint.warnings import WarningSet

if TYPE_CHECKING:
	from collections.abc import Sequence

	from goodcommit.lint.message import CommitMessage

logger = logging.getLogger(__name__)


class CommitLinter:
	"""
	Validates commit messages against a fixed, ordered set of style rules.

	The linter keeps no state between calls: every call to :meth:`lint`
	returns a new :class:`WarningSet`.

	"""

	def __init__(self, rules: Sequence[Rule] = RULES) -> None:
		"""
		Initialize the linter.

		Args:
		    rules: Rules to apply, in display order

		"""
		self.rules = tuple(rules)

	def lint(self, message: CommitMessage) -> WarningSet:
		"""
		Validate a commit message.

		An empty or whitespace-only message is not validated at all.

		Args:
		    message: The commit message to validate

		Returns:
		    WarningSet: Warnings grouped by line, empty if the message passes

		"""
		warnings = WarningSet()
		if message.is_blank:
			logger.debug("Commit message is empty, skipping validation")
			return warnings

		for rule in self.rules:
			if rule.check is None:
				continue
			found = rule.check(message)
			if found:
				logger.debug("Rule %d (%s) flagged line(s) %s", rule.number, rule.name, [w.line for w in found])
			warnings.extend(found)
		return warnings
