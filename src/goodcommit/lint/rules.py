"""
Style rules for commit messages.

Each rule is a plain function that takes a :class:`CommitMessage` and returns
the warnings it raises. Rules are independent of each other; their order in
:data:`RULES` only decides the display order of warnings on the same line.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from goodcommit.lint.constants import (
	BODY_MAX_LENGTH,
	CAPITALIZED_SUBJECT_PATTERN,
	IMPERATIVE_MOOD_PATTERN,
	LEADING_WHITESPACE_PATTERN,
	MSG_BODY_LENGTH,
	MSG_CAPITALIZE,
	MSG_IMPERATIVE_MOOD,
	MSG_LEADING_WHITESPACE,
	MSG_SEPARATE_SUBJECT,
	MSG_SINGLE_WORD,
	MSG_SUBJECT_LENGTH,
	MSG_TRAILING_PERIOD,
	SUBJECT_MAX_LENGTH,
	URL_PATTERN,
)
from goodcommit.lint.message import CommitMessage
from goodcommit.lint.warnings import LintWarning

SUBJECT_LINE = 1
SEPARATOR_LINE = 2

RuleCheck = Callable[[CommitMessage], list[LintWarning]]


@dataclass(frozen=True)
class Rule:
	"""A numbered style rule and the check that enforces it."""

	number: int
	name: str
	check: RuleCheck | None = None

	@property
	def is_automated(self) -> bool:
		"""Whether the rule can be checked automatically."""
		return self.check is not None


def check_blank_line_after_subject(message: CommitMessage) -> list[LintWarning]:
	"""1. Separate subject from body with a blank line."""
	if len(message) >= SEPARATOR_LINE and message.line(SEPARATOR_LINE):
		return [LintWarning(SEPARATOR_LINE, MSG_SEPARATE_SUBJECT)]
	return []


def check_subject_length(message: CommitMessage) -> list[LintWarning]:
	"""2. Limit the subject line to 50 characters."""
	length = len(message.subject)
	if length > SUBJECT_MAX_LENGTH:
		return [LintWarning(SUBJECT_LINE, MSG_SUBJECT_LENGTH.format(limit=SUBJECT_MAX_LENGTH, length=length))]
	return []


def check_subject_capitalized(message: CommitMessage) -> list[LintWarning]:
	"""3. Capitalize the subject line."""
	if CAPITALIZED_SUBJECT_PATTERN.match(message.subject):
		return []
	return [LintWarning(SUBJECT_LINE, MSG_CAPITALIZE)]


def check_subject_trailing_period(message: CommitMessage) -> list[LintWarning]:
	"""4. Do not end the subject line with a period."""
	if message.subject.endswith("."):
		return [LintWarning(SUBJECT_LINE, MSG_TRAILING_PERIOD)]
	return []


def check_imperative_mood(message: CommitMessage) -> list[LintWarning]:
	"""
	5. Use the imperative mood in the subject line.

	Matches blacklisted verb forms anywhere in the subject, ignoring case.
	The first hit is enough; the rule warns at most once.

	"""
	if IMPERATIVE_MOOD_PATTERN.search(message.subject):
		return [LintWarning(SUBJECT_LINE, MSG_IMPERATIVE_MOOD)]
	return []


def check_line_length(message: CommitMessage) -> list[LintWarning]:
	"""6. Wrap the body at 72 characters, URLs excepted."""
	warnings = []
	for number, line in enumerate(message, start=1):
		length = len(line)
		if length <= BODY_MAX_LENGTH or URL_PATTERN.fullmatch(line):
			continue
		warnings.append(LintWarning(number, MSG_BODY_LENGTH.format(limit=BODY_MAX_LENGTH, length=length)))
	return warnings


def check_subject_word_count(message: CommitMessage) -> list[LintWarning]:
	"""8. Do not write single worded commits."""
	if len(message.subject.split()) > 1:
		return []
	return [LintWarning(SUBJECT_LINE, MSG_SINGLE_WORD)]


def check_subject_leading_whitespace(message: CommitMessage) -> list[LintWarning]:
	"""9. Do not start the subject line with whitespace."""
	if LEADING_WHITESPACE_PATTERN.match(message.subject):
		return [LintWarning(SUBJECT_LINE, MSG_LEADING_WHITESPACE)]
	return []


RULES: tuple[Rule, ...] = (
	Rule(1, "Separate subject from body with a blank line", check_blank_line_after_subject),
	Rule(2, "Limit the subject line to 50 characters", check_subject_length),
	Rule(3, "Capitalize the subject line", check_subject_capitalized),
	Rule(4, "Do not end the subject line with a period", check_subject_trailing_period),
	Rule(5, "Use the imperative mood in the subject line", check_imperative_mood),
	Rule(6, "Wrap the body at 72 characters", check_line_length),
	# Whether the body explains what and why rather than how cannot be judged mechanically
	Rule(7, "Use the body to explain what and why vs. how"),
	Rule(8, "Do not write single worded commits", check_subject_word_count),
	Rule(9, "Do not start the subject line with whitespace", check_subject_leading_whitespace),
)
