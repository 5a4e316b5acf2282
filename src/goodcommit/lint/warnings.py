"""Aggregation of lint warnings by line number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class LintWarning:
	"""A single rule violation tied to a 1-indexed line number."""

	line: int
	message: str


class WarningSet:
	"""
	Warnings collected during one validation pass, grouped by line.

	A line only appears once at least one warning has been added for it.
	Warnings for the same line keep the order in which they were added.

	"""

	def __init__(self, warnings: Iterable[LintWarning] = ()) -> None:
		"""Initialize the set, optionally from existing warnings."""
		self._by_line: dict[int, list[str]] = {}
		for warning in warnings:
			self.add(warning.line, warning.message)

	def add(self, line: int, message: str) -> None:
		"""Append a warning message to a line."""
		self._by_line.setdefault(line, []).append(message)

	def extend(self, warnings: Iterable[LintWarning]) -> None:
		"""Append several warnings in order."""
		for warning in warnings:
			self.add(warning.line, warning.message)

	def lines(self) -> list[int]:
		"""Flagged line numbers in ascending order."""
		return sorted(self._by_line)

	def for_line(self, line: int) -> list[str]:
		"""Warning messages for a line, empty if the line was not flagged."""
		return list(self._by_line.get(line, ()))

	def items(self) -> Iterator[tuple[int, list[str]]]:
		"""Yield ``(line, messages)`` pairs in ascending line order."""
		for line in self.lines():
			yield line, self.for_line(line)

	@property
	def total(self) -> int:
		"""Total number of warnings across all lines."""
		return sum(len(messages) for messages in self._by_line.values())

	def __len__(self) -> int:
		"""Return the number of flagged lines."""
		return len(self._by_line)

	def __bool__(self) -> bool:
		"""Whether any line was flagged."""
		return bool(self._by_line)

	def __eq__(self, other: object) -> bool:
		"""Compare by content, including per-line order."""
		if not isinstance(other, WarningSet):
			return NotImplemented
		return self._by_line == other._by_line

	__hash__ = None  # type: ignore[assignment]

	def __repr__(self) -> str:
		"""Return a debugging representation."""
		return f"WarningSet({self._by_line!r})"
