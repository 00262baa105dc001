"""
Sum-of-products expression trees for generated integral formulas.

The expansion engine builds trees out of the node types below, the simplifier
rewrites them, and text is only produced by ``render()`` at emission time.
Every node can also be evaluated numerically, which is how rewrites are
checked to be value preserving.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Iterator, Mapping, Set, Tuple, Union

import numpy as np

Number = Union[int, Fraction]
Values = Mapping[str, Union[float, np.ndarray]]


def format_number(value: Number) -> str:
	"""Render an exact rational as an integer literal or a 15-digit decimal."""
	value = Fraction(value)
	if value.denominator == 1:
		return str(value.numerator)
	return f"{float(value):.15g}"


class Node:
	"""Base class of all expression tree nodes."""

	def children(self) -> Tuple["Node", ...]:
		return ()

	def rebuild(self, children: Tuple["Node", ...]) -> "Node":
		return self

	def render(self) -> str:
		raise NotImplementedError

	def evaluate(self, values: Values):
		raise NotImplementedError

	def walk(self) -> Iterator["Node"]:
		"""Yield this node and all of its descendants, parents first."""
		yield self
		for child in self.children():
			yield from child.walk()

	def symbols(self) -> Set[str]:
		"""Names of all symbols appearing in the rendered expression."""
		names = set()
		for node in self.walk():
			if isinstance(node, (Symbol, Alias)):
				names.add(node.name)
			elif isinstance(node, Power):
				names.add(node.symbol)
		return names

	def __str__(self) -> str:
		return self.render()


@dataclass(frozen=True)
class Const(Node):
	"""Exact rational constant."""

	value: Fraction

	def __post_init__(self):
		object.__setattr__(self, "value", Fraction(self.value))

	def render(self) -> str:
		return format_number(self.value)

	def evaluate(self, values: Values):
		return float(self.value)


@dataclass(frozen=True)
class Symbol(Node):
	"""Bare symbol such as ``PA(1)``, ``a2`` or ``F3``."""

	name: str

	def render(self) -> str:
		return self.name

	def evaluate(self, values: Values):
		return np.asarray(values[self.name], dtype=float)


@dataclass(frozen=True)
class Power(Node):
	"""Symbol raised to an integer power, rendered as ``(s**e)``."""

	symbol: str
	exponent: int

	def render(self) -> str:
		if self.exponent < 0:
			return f"({self.symbol}**({self.exponent}))"
		return f"({self.symbol}**{self.exponent})"

	def evaluate(self, values: Values):
		return np.asarray(values[self.symbol], dtype=float) ** self.exponent


@dataclass(frozen=True)
class Alias(Node):
	"""Short name standing for a longer subexpression the consumer defines."""

	name: str
	target: Node

	def render(self) -> str:
		return self.name

	def evaluate(self, values: Values):
		if self.name in values:
			return np.asarray(values[self.name], dtype=float)
		return self.target.evaluate(values)

	def symbols(self) -> Set[str]:
		return {self.name}


@dataclass(frozen=True)
class Group(Node):
	"""Subexpression that keeps its enclosing parentheses when rendered."""

	body: Node

	def children(self) -> Tuple[Node, ...]:
		return (self.body,)

	def rebuild(self, children: Tuple[Node, ...]) -> Node:
		return Group(children[0])

	def render(self) -> str:
		return f"({self.body.render()})"

	def evaluate(self, values: Values):
		return self.body.evaluate(values)


@dataclass(frozen=True)
class Product(Node):
	"""Product of factors joined with ``*``."""

	factors: Tuple[Node, ...]

	def children(self) -> Tuple[Node, ...]:
		return self.factors

	def rebuild(self, children: Tuple[Node, ...]) -> Node:
		return Product(tuple(children))

	def render(self) -> str:
		if not self.factors:
			return "1"
		parts = [_render_factor(factor) for factor in self.factors]
		lead = self.factors[0]
		if len(parts) > 1 and isinstance(lead, Const) and lead.value == -1:
			return "-" + "*".join(parts[1:])
		return "*".join(parts)

	def evaluate(self, values: Values):
		result = 1.0
		for factor in self.factors:
			result = result * factor.evaluate(values)
		return result


@dataclass(frozen=True)
class Sum(Node):
	"""Sum of terms; negative terms are written with a binary minus."""

	terms: Tuple[Node, ...]

	def children(self) -> Tuple[Node, ...]:
		return self.terms

	def rebuild(self, children: Tuple[Node, ...]) -> Node:
		return Sum(tuple(children))

	def render(self) -> str:
		if not self.terms:
			return "0"
		text = _render_term(self.terms[0])
		for term in self.terms[1:]:
			piece = _render_term(term)
			if piece.startswith("-"):
				text += " - " + piece[1:]
			else:
				text += " + " + piece
		return text

	def evaluate(self, values: Values):
		result = 0.0
		for term in self.terms:
			result = result + term.evaluate(values)
		return result


ZERO = Const(0)
ONE = Const(1)


def _render_factor(node: Node) -> str:
	if isinstance(node, Sum):
		return f"({node.render()})"
	return node.render()


def _render_term(node: Node) -> str:
	if isinstance(node, Sum):
		return f"({node.render()})"
	return node.render()


def is_zero(node: Node) -> bool:
	"""True for the literal 0 and for a parenthesized literal 0."""
	if isinstance(node, Group):
		return is_zero(node.body)
	return isinstance(node, Const) and node.value == 0


def is_one(node: Node) -> bool:
	return isinstance(node, Const) and node.value == 1


def term(coefficient: Number, *factors: Node) -> Product:
	"""Build ``coefficient*factor1*factor2*...``."""
	return Product((Const(coefficient),) + tuple(factors))


def transform(node: Node, rewrite: Callable[[Node], Node]) -> Node:
	"""Apply ``rewrite`` to every node of the tree, children before parents."""
	children = node.children()
	if children:
		new_children = tuple(transform(child, rewrite) for child in children)
		if any(new is not old for new, old in zip(new_children, children)):
			node = node.rebuild(new_children)
	return rewrite(node)


def count_nodes(node: Node) -> int:
	return sum(1 for _ in node.walk())
