"""Fixed linear re-basing of raw triad integrals onto the 16-function basis."""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

import numpy as np

from .rebasing_tables.data import KINETIC_MOMENTUM, KINETIC_MOMENTUM_VERSION, NUCLEAR, NUCLEAR_VERSION

Cell = Tuple[int, int]
Weight = Tuple[int, int, int]


@dataclass(frozen=True)
class RebasingTable:
	"""
	Table of basis cells expressed as integer-weighted sums of raw entries.

	Attributes:
		name: Table name used in log messages and comparisons
		version: Data version string
		cells: Map from (b1, b2) to ((weight, raw_row, raw_col), ...)
	"""

	name: str
	version: str
	cells: Mapping[Cell, Tuple[Weight, ...]]

	def formula(self, b1: int, b2: int) -> Tuple[Weight, ...]:
		if (b1, b2) not in self.cells:
			raise ValueError(f"Basis cell ({b1},{b2}) not in table {self.name}")
		return self.cells[(b1, b2)]

	def render_cell(
		self, b1: int, b2: int, target: str = "g", source: str = "wo", index: str = "", assignment: str = " = "
	) -> str:
		"""
		Render one assignment such as ``g(1,9) = +2*wo(1,7) - wo(1,5) - wo(1,6)``.

		Args:
			b1, b2: Basis cell indices
			target: Name of the basis matrix
			source: Name of the raw matrix
			index: Optional leading index for both matrices, e.g. "i" for momentum
			assignment: Assignment operator
		"""
		prefix = f"{index}," if index else ""
		text = f"{target}({prefix}{b1},{b2}){assignment.rstrip()}"
		for position, (weight, row, col) in enumerate(self.formula(b1, b2)):
			sign = "-" if weight < 0 else "+"
			magnitude = "" if abs(weight) == 1 else f"{abs(weight)}*"
			reference = f"{source}({prefix}{row},{col})"
			if position == 0:
				text += f" {sign}{magnitude}{reference}"
			else:
				text += f" {sign} {magnitude}{reference}"
		return text

	def render(
		self, dim1: int, dim2: int, target: str = "g", source: str = "wo", index: str = "", assignment: str = " = "
	) -> List[str]:
		"""Render every cell of a dim1 x dim2 block, second index outermost."""
		return [
			self.render_cell(b1, b2, target, source, index, assignment)
			for b2 in range(1, dim2 + 1)
			for b1 in range(1, dim1 + 1)
		]

	def raw_extent(self, dim1: int, dim2: int) -> Tuple[int, int]:
		"""Largest raw row and column referenced by a dim1 x dim2 block."""
		rows = [row for b1 in range(1, dim1 + 1) for b2 in range(1, dim2 + 1) for _, row, _ in self.formula(b1, b2)]
		cols = [col for b1 in range(1, dim1 + 1) for b2 in range(1, dim2 + 1) for _, _, col in self.formula(b1, b2)]
		return max(rows), max(cols)

	def apply(self, raw: np.ndarray, dim1: int, dim2: int) -> np.ndarray:
		"""
		Numerically re-base a raw matrix.

		Args:
			raw: Array of shape (n1, n2) or (..., n1, n2) of raw values, 0-based
			dim1, dim2: Basis block dimensions

		Returns:
			Array of shape (..., dim1, dim2)
		"""
		raw = np.asarray(raw, dtype=float)
		result = np.zeros(raw.shape[:-2] + (dim1, dim2))
		for b1 in range(1, dim1 + 1):
			for b2 in range(1, dim2 + 1):
				for weight, row, col in self.formula(b1, b2):
					result[..., b1 - 1, b2 - 1] += weight * raw[..., row - 1, col - 1]
		return result


NUCLEAR_TABLE = RebasingTable("nuclear", NUCLEAR_VERSION, NUCLEAR)
KINETIC_MOMENTUM_TABLE = RebasingTable("kinetic-momentum", KINETIC_MOMENTUM_VERSION, KINETIC_MOMENTUM)


def table_differences(first: RebasingTable, second: RebasingTable) -> Dict[Cell, Tuple[Tuple[Weight, ...], Tuple[Weight, ...]]]:
	"""
	Cells whose formulas differ between two tables.

	The nuclear and kinetic/momentum tables disagree on how the f-shell cells
	use triads 14 and 15. Both are emitted exactly as stored; this listing
	exists so the disagreement stays visible.
	"""
	differences = {}
	for cell in sorted(set(first.cells) | set(second.cells)):
		a = first.cells.get(cell, ())
		b = second.cells.get(cell, ())
		if a != b:
			differences[cell] = (a, b)
	return differences
