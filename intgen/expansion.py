# ruff: noqa: E741  # Allow ambiguous variable names (l, I, O) due to physics notation
"""
Closed-form term expansions over Cartesian Gaussian triads.

Three families are built here:

* three-center nuclear attraction (Cook's formalism), a nine-index sum per
  orbital pair whose terms carry a Boys function symbol ``F<N>``;
* the two-center overlap sum for one Cartesian axis, multiplied over the
  three axes to give a 3-D overlap;
* kinetic energy and momentum integrals as fixed weighted combinations of
  3-D overlaps with orbital 2's triad shifted along one axis.

All functions return unsimplified expression trees; see ``simplify``.
"""

import itertools
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator, List, Tuple

from .combinatorics import binomial, double_factorial, factorial
from .expression import ZERO, Const, Group, Node, Power, Product, Sum, Symbol
from .triads import Triad

AXES = (0, 1, 2)


@dataclass(frozen=True)
class ExpansionTerm:
	"""
	One summand of a closed-form integral expression.

	Attributes:
		coefficient: Signed exact coefficient
		powers: (symbol, exponent) pairs, rendered as ``(symbol**exponent)``
		symbols: Bare trailing symbols such as the Boys function ``F2``
		zero: True when a binomial factor vanished; the term then renders as 0
	"""

	coefficient: Fraction
	powers: Tuple[Tuple[str, int], ...] = ()
	symbols: Tuple[str, ...] = ()
	zero: bool = False

	def as_node(self) -> Node:
		if self.zero or self.coefficient == 0:
			return ZERO
		factors = [Const(self.coefficient)]
		factors.extend(Power(symbol, exponent) for symbol, exponent in self.powers)
		factors.extend(Symbol(symbol) for symbol in self.symbols)
		return Product(tuple(factors))


def shifted(triad: Triad, axis: int, delta: int) -> Triad:
	"""Copy of ``triad`` with the exponent on ``axis`` changed by ``delta``."""
	values = list(triad)
	values[axis] += delta
	return (values[0], values[1], values[2])


# ---------------------------------------------------------------------------
# Three-center nuclear attraction
# ---------------------------------------------------------------------------


def _reduction_indices(total: int) -> Iterator[Tuple[int, int, int]]:
	"""Yield (l, r, i) with l in [0, total], r <= l/2, i <= (l - 2r)/2."""
	for l in range(total + 1):
		for r in range(l // 2 + 1):
			for i in range((l - 2 * r) // 2 + 1):
				yield l, r, i


def nuclear_attraction_terms(triad1: Triad, triad2: Triad) -> List[ExpansionTerm]:
	"""
	Enumerate every term of the three-center nuclear attraction sum.

	The x, y and z axes each contribute indices (l, r, i, u); terms are
	generated with the reduction indices of all three axes outermost and the
	binomial indices u, v, w innermost.

	Args:
		triad1: Cartesian exponents of orbital 1 (center A)
		triad2: Cartesian exponents of orbital 2 (center B)

	Returns:
		List of terms in summation order, zero terms included
	"""
	outer = [list(_reduction_indices(triad1[axis] + triad2[axis])) for axis in AXES]

	terms = []
	for indices in itertools.product(*outer):
		inner = [range(l + 1) for l, _, _ in indices]
		for choices in itertools.product(*inner):
			terms.append(_nuclear_term(triad1, triad2, indices, choices))
	return terms


def _nuclear_term(
	triad1: Triad, triad2: Triad, indices: Tuple[Tuple[int, int, int], ...], choices: Tuple[int, ...]
) -> ExpansionTerm:
	coefficient = Fraction(1)
	powers = []
	sign_exponent = 0
	eps_power = 0
	boys_order = 0

	for axis in AXES:
		e1, e2 = triad1[axis], triad2[axis]
		l, r, i = indices[axis]
		u = choices[axis]

		binomials = binomial(e1, u) * binomial(e2, l - u)
		if binomials == 0:
			return ExpansionTerm(Fraction(0), zero=True)

		coefficient *= binomials * Fraction(
			factorial(l), factorial(i) * factorial(r) * factorial(l - 2 * r - 2 * i)
		)
		dim = axis + 1
		powers.append((f"PA({dim})", e1 - u))
		powers.append((f"PB({dim})", e2 - l + u))
		powers.append((f"PC({dim})", l - 2 * r - 2 * i))

		sign_exponent += l + i
		eps_power += r + i
		boys_order += l - 2 * r - i

	if sign_exponent % 2:
		coefficient = -coefficient
	powers.append(("eps", eps_power))
	return ExpansionTerm(coefficient, tuple(powers), (f"F{boys_order}",))


def nuclear_attraction(triad1: Triad, triad2: Triad, prefactor: str = "preFactor") -> Node:
	"""Full nuclear attraction expression ``prefactor*(term + term + ...)``."""
	terms = nuclear_attraction_terms(triad1, triad2)
	return Product((Symbol(prefactor), Sum(tuple(t.as_node() for t in terms))))


# ---------------------------------------------------------------------------
# Two-center overlap
# ---------------------------------------------------------------------------


def overlap_sum_terms(e1: int, e2: int, axis: int) -> List[ExpansionTerm]:
	"""
	Terms of the one-axis two-center overlap sum.

	sum_{j=0}^{(e1+e2)/2} sum_{s=0}^{2j} C(e1,s) C(e2,2j-s) (2j-1)!!/2^j
		* PA^(e1-s) * PB^(e2-2j+s) * Y^(-j)

	Args:
		e1, e2: Exponents of the two orbitals along this axis
		axis: 0, 1 or 2 for x, y, z
	"""
	dim = axis + 1
	terms = []
	for j in range((e1 + e2) // 2 + 1):
		for s in range(2 * j + 1):
			binomials = binomial(e1, s) * binomial(e2, 2 * j - s)
			if binomials == 0:
				terms.append(ExpansionTerm(Fraction(0), zero=True))
				continue
			coefficient = Fraction(binomials * double_factorial(2 * j - 1), 2**j)
			powers = ((f"PA({dim})", e1 - s), (f"PB({dim})", e2 - 2 * j + s), ("Y", -j))
			terms.append(ExpansionTerm(coefficient, powers))
	return terms


def overlap_sum(e1: int, e2: int, axis: int) -> Sum:
	return Sum(tuple(t.as_node() for t in overlap_sum_terms(e1, e2, axis)))


def overlap_3d(triad1: Triad, triad2: Triad) -> Product:
	"""Product of the x, y and z overlap sums for a pair of triads."""
	return Product(tuple(overlap_sum(triad1[axis], triad2[axis], axis) for axis in AXES))


# ---------------------------------------------------------------------------
# Kinetic energy and momentum
# ---------------------------------------------------------------------------


def kinetic_energy(triad1: Triad, triad2: Triad, prefactor: str = "coef") -> Node:
	"""
	Kinetic energy as a seven-term weighted sum of 3-D overlaps.

	coef*(w0*a2*S - 2*a2**2*S(+2x) - 2*a2**2*S(+2y) - 2*a2**2*S(+2z)
	      - cx*S(-2x) - cy*S(-2y) - cz*S(-2z))

	with w0 = (2l2+1)+(2m2+1)+(2n2+1) and ca = (d**2 - d)/2 for the
	unperturbed degree d of orbital 2 along axis a. A lowered triad with a
	negative exponent contributes an explicit zero.
	"""
	base = sum(2 * degree + 1 for degree in triad2)
	terms = [Product((Const(base), Symbol("a2"), overlap_3d(triad1, triad2)))]

	for axis in AXES:
		raised = shifted(triad2, axis, 2)
		terms.append(Product((Const(-2), Power("a2", 2), overlap_3d(triad1, raised))))

	for axis in AXES:
		degree = triad2[axis]
		weight = Fraction(degree * degree - degree, 2)
		lowered = shifted(triad2, axis, -2)
		overlap = overlap_3d(triad1, lowered) if lowered[axis] >= 0 else ZERO
		terms.append(Product((Const(-weight), overlap)))

	return Product((Symbol(prefactor), Sum(tuple(terms))))


def momentum(triad1: Triad, triad2: Triad, axis: int, prefactor: str = "preFactor") -> Node:
	"""
	One Cartesian component of the momentum integral.

	preFactor*(d*(S(-1)) - 2*a2*(S(+1)))

	where d is orbital 2's exponent along ``axis`` and S(+-1) the 3-D overlap
	with that exponent raised or lowered by one. The first sub-term is an
	explicit zero when the lowered exponent would be negative.
	"""
	degree = triad2[axis]
	lowered = shifted(triad2, axis, -1)
	if lowered[axis] >= 0:
		first = Group(overlap_3d(triad1, lowered))
	else:
		first = Group(ZERO)
	second = Group(overlap_3d(triad1, shifted(triad2, axis, 1)))
	return Product(
		(
			Symbol(prefactor),
			Sum((Product((Const(degree), first)), Product((Const(-2), Symbol("a2"), second)))),
		)
	)


def momentum_components(triad1: Triad, triad2: Triad, prefactor: str = "preFactor") -> List[Node]:
	"""The x, y and z momentum expressions for one orbital pair."""
	return [momentum(triad1, triad2, axis, prefactor) for axis in AXES]


def boys_orders(node: Node) -> List[int]:
	"""Sorted Boys function orders referenced by an expression."""
	orders = {int(name[1:]) for name in node.symbols() if name.startswith("F") and name[1:].isdigit()}
	return sorted(orders)

