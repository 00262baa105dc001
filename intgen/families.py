"""
The three integral families and the symbols, rules and tables each one uses.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .expansion import kinetic_energy, momentum, nuclear_attraction
from .expression import Node
from .rebasing import KINETIC_MOMENTUM_TABLE, NUCLEAR_TABLE, RebasingTable
from .simplify import KINETIC_ALIASES, MOMENTUM_ALIASES, NUCLEAR_ALIASES, RewriteRule, simplify, standard_rules
from .triads import Triad, triad_of


def _expand_nuclear(triad1: Triad, triad2: Triad, axis: Optional[int]) -> Node:
	return nuclear_attraction(triad1, triad2)


def _expand_kinetic(triad1: Triad, triad2: Triad, axis: Optional[int]) -> Node:
	return kinetic_energy(triad1, triad2)


def _expand_momentum(triad1: Triad, triad2: Triad, axis: Optional[int]) -> Node:
	if axis is None:
		raise ValueError("Momentum integrals need an axis (0, 1 or 2)")
	return momentum(triad1, triad2, axis)


@dataclass(frozen=True)
class IntegralFamily:
	"""
	Everything that distinguishes one integral family from another.

	Attributes:
		name: Family name used on the command line and in configuration
		output_name: Name of the generated artifact
		expander: Builds the unsimplified expression for a triad pair
		rules: Simplification passes, in order
		table: Re-basing table for the basis block
		axes: (None,) for scalar integrals, (0, 1, 2) for vector ones
		raw_name: Name of the raw matrix in the generated code
		basis_name: Name of the re-based matrix in the generated code
	"""

	name: str
	output_name: str
	expander: Callable[[Triad, Triad, Optional[int]], Node]
	rules: Tuple[RewriteRule, ...]
	table: RebasingTable
	axes: Tuple[Optional[int], ...] = (None,)
	raw_name: str = "wo"
	basis_name: str = "g"

	@property
	def is_vector(self) -> bool:
		return self.axes != (None,)

	def expand(self, orbital1: int, orbital2: int, axis: Optional[int] = None, simplified: bool = True) -> Node:
		"""
		Expression for one raw entry.

		Args:
			orbital1, orbital2: 1-based orbital indices
			axis: Cartesian axis 0..2 for vector families
			simplified: Apply the family's rewrite rules
		"""
		node = self.expander(triad_of(orbital1), triad_of(orbital2), axis)
		if simplified:
			node = simplify(node, self.rules)
		return node

	def raw_label(self, orbital1: int, orbital2: int, axis: Optional[int] = None) -> str:
		if axis is None:
			return f"{self.raw_name}({orbital1},{orbital2})"
		return f"{self.raw_name}({axis + 1},{orbital1},{orbital2})"


NUCLEAR = IntegralFamily(
	name="nuclear",
	output_name="NucIntg",
	expander=_expand_nuclear,
	rules=standard_rules(NUCLEAR_ALIASES),
	table=NUCLEAR_TABLE,
)

KINETIC = IntegralFamily(
	name="kinetic",
	output_name="KE_Intg",
	expander=_expand_kinetic,
	rules=standard_rules(KINETIC_ALIASES),
	table=KINETIC_MOMENTUM_TABLE,
)

MOMENTUM = IntegralFamily(
	name="momentum",
	output_name="momIntg",
	expander=_expand_momentum,
	rules=standard_rules(MOMENTUM_ALIASES),
	table=KINETIC_MOMENTUM_TABLE,
	axes=(0, 1, 2),
)

FAMILIES: Dict[str, IntegralFamily] = {family.name: family for family in (NUCLEAR, KINETIC, MOMENTUM)}


def get_family(name: str) -> IntegralFamily:
	if name not in FAMILIES:
		raise ValueError(f"Integral family '{name}' not found. Available families: {list(FAMILIES.keys())}")
	return FAMILIES[name]
