"""Text emission in the consumer's Fortran 90 dialect."""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Sequence, TextIO, Tuple


@dataclass(frozen=True)
class OutputDialect:
	"""
	Syntax of the generated code.

	Attributes:
		assignment: Assignment operator between target and expression
		continuation: Marker ending a wrapped line and starting the next one
		line_width: Data characters per wrapped line, marker excluded
		switch_variable: Variable the branch chain tests
		first_branch: Template of the opening branch, ``{variable}``/``{code}``
		next_branch: Template of every following branch
		default_branch: Keyword of the trailing catch-all branch
		end_branch: Keyword closing the chain
		axis_index: Loop index used by re-based vector entries
	"""

	assignment: str = " = "
	continuation: str = "&"
	line_width: int = 79
	switch_variable: str = "l1l2switch"
	first_branch: str = "if ({variable}.eq.{code}) then"
	next_branch: str = "else if ({variable}.eq.{code}) then"
	default_branch: str = "else"
	end_branch: str = "end if"
	axis_index: str = "i"

	def __post_init__(self):
		if self.line_width < 1:
			raise ValueError(f"Line width must be positive, got {self.line_width}")
		if not self.continuation:
			raise ValueError("Continuation marker must not be empty")

	def assign(self, target: str, expression: str) -> str:
		return f"{target}{self.assignment}{expression}"

	def branch(self, code: int, position: int, count: int) -> str:
		"""Header of branch ``position`` (0-based) in a chain of ``count`` branches."""
		if position == count - 1 and count > 1:
			return self.default_branch
		template = self.first_branch if position == 0 else self.next_branch
		return template.format(variable=self.switch_variable, code=code)


FORTRAN90 = OutputDialect()


def wrap_line(text: str, dialect: OutputDialect = FORTRAN90) -> str:
	"""
	Split ``text`` into continuation lines.

	While more than ``line_width - 1`` characters remain, the next
	``line_width`` characters are emitted followed by the continuation marker,
	a newline and the marker again. The remainder follows unchanged, so a
	string of exactly ``line_width`` characters ends in an empty final line.
	"""
	width = dialect.line_width
	marker = dialect.continuation
	pieces = []
	start = 0
	while start + width - 1 < len(text):
		pieces.append(text[start : start + width] + marker + "\n" + marker)
		start += width
	pieces.append(text[start:])
	return "".join(pieces)


def unwrap_line(text: str, dialect: OutputDialect = FORTRAN90) -> str:
	"""Inverse of ``wrap_line``."""
	marker = dialect.continuation
	return text.replace(marker + "\n" + marker, "")


def wrapped_chunks(text: str, dialect: OutputDialect = FORTRAN90) -> List[str]:
	"""Physical lines of ``wrap_line(text)``."""
	return wrap_line(text, dialect).split("\n")


@contextmanager
def open_output(path: str) -> Iterator[TextIO]:
	"""
	Open an output artifact for writing.

	Raises:
		RuntimeError: If the file cannot be opened; the run must stop
	"""
	try:
		handle = open(path, "w")
	except OSError as e:
		raise RuntimeError(f"Error opening file {path}: {e}") from e
	try:
		yield handle
	finally:
		handle.close()


# (switch code, wrapped raw entries, re-based lines)
Branch = Tuple[int, Sequence[str], Sequence[str]]


def render_switch(branches: Sequence[Branch], dialect: OutputDialect = FORTRAN90) -> str:
	"""
	Render the complete branch chain.

	Each branch is its header and a blank line, every raw entry followed by a
	blank line, then one re-based line per cell. Branches other than the last
	are separated by a blank line and the chain closes with ``end if``.
	"""
	parts = []
	for position, (code, raw_entries, rebased) in enumerate(branches):
		parts.append(dialect.branch(code, position, len(branches)) + "\n\n")
		for entry in raw_entries:
			parts.append(entry + "\n\n")
		for line in rebased:
			parts.append(line + "\n")
		if position != len(branches) - 1:
			parts.append("\n")
	parts.append(dialect.end_branch)
	return "".join(parts)


def write_text(path: str, text: str) -> None:
	with open_output(path) as f:
		f.write(text)
	logging.info(f"Wrote {os.path.basename(path)} ({len(text)} characters)")
