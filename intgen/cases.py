"""Generation cases selected by the consumer's ``l1l2switch`` code."""

from dataclasses import dataclass
from typing import Tuple

from .triads import BASIS_DIMENSIONS, RAW_DIMENSIONS

SHELL_NAMES = "spdf"


def switch_code(shell1: int, shell2: int) -> int:
	"""Switch code 2**l1 + 16 * 2**l2 for shells l1, l2 in 0..3."""
	for shell in (shell1, shell2):
		if not 0 <= shell < len(SHELL_NAMES):
			raise ValueError(f"Shell {shell} outside 0..{len(SHELL_NAMES) - 1}")
	return 2**shell1 + 16 * 2**shell2


@dataclass(frozen=True)
class GenerationCase:
	"""One (shell1, shell2) combination and the matrix sizes it produces."""

	shell1: int
	shell2: int

	@property
	def switch_code(self) -> int:
		return switch_code(self.shell1, self.shell2)

	@property
	def label(self) -> str:
		return f"{SHELL_NAMES[self.shell1]}-{SHELL_NAMES[self.shell2]}"

	@property
	def raw_dims(self) -> Tuple[int, int]:
		return RAW_DIMENSIONS[self.shell1], RAW_DIMENSIONS[self.shell2]

	@property
	def basis_dims(self) -> Tuple[int, int]:
		return BASIS_DIMENSIONS[self.shell1], BASIS_DIMENSIONS[self.shell2]


# Order of the branches in the consumer's if/else-if chain; f-f is the final
# else branch.
GENERATION_CASES: Tuple[GenerationCase, ...] = tuple(
	GenerationCase(s1, s2)
	for s1, s2 in (
		(1, 1),
		(0, 0),
		(0, 1),
		(0, 2),
		(0, 3),
		(1, 0),
		(1, 2),
		(1, 3),
		(2, 0),
		(2, 1),
		(2, 2),
		(2, 3),
		(3, 0),
		(3, 1),
		(3, 2),
		(3, 3),
	)
)


def case_for_switch(code: int) -> GenerationCase:
	for case in GENERATION_CASES:
		if case.switch_code == code:
			return case
	raise ValueError(f"No generation case for switch code {code}")
