"""
Ordered rewrite rules that canonicalize expanded integral expressions.

The rules must run in the order of ``standard_rules``: the unit-factor
collapse only finds the 1's produced by the power rules, and zero removal
relies on single-term sums already being unwrapped.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

from .expression import ONE, ZERO, Alias, Group, Node, Power, Product, Sum, Symbol, is_one, is_zero, transform

# (symbol, exponent) -> alias name
AliasMap = Mapping[Tuple[str, int], str]

NUCLEAR_ALIASES: Dict[Tuple[str, int], str] = {
	("eps", 1): "e1",
	("eps", 2): "e2",
	("eps", 3): "e3",
}

KINETIC_ALIASES: Dict[Tuple[str, int], str] = {
	("Y", -1): "Y1",
	("Y", -2): "Y2",
	("Y", -3): "Y3",
	("Y", -4): "Y4",
	("a2", 2): "a2_2",
}

MOMENTUM_ALIASES: Dict[Tuple[str, int], str] = {}


@dataclass(frozen=True)
class RewriteRule:
	"""A named rewrite applied to every node of a tree, bottom-up."""

	name: str
	rewrite: Callable[[Node], Node]

	def __call__(self, node: Node) -> Node:
		return transform(node, self.rewrite)


def _flatten(factors: Sequence[Node]) -> List[Node]:
	flat = []
	for factor in factors:
		if isinstance(factor, Product):
			flat.extend(_flatten(factor.factors))
		else:
			flat.append(factor)
	return flat


def _zero_power(node: Node) -> Node:
	if isinstance(node, Power) and node.exponent == 0:
		return ONE
	return node


def _unit_power(node: Node) -> Node:
	if isinstance(node, Power) and node.exponent == 1:
		return Symbol(node.symbol)
	return node


def _unit_factors(node: Node) -> Node:
	if isinstance(node, Product):
		factors = [factor for factor in _flatten(node.factors) if not is_one(factor)]
		if not factors:
			return ONE
		if len(factors) == 1:
			return factors[0]
		return Product(tuple(factors))
	if isinstance(node, Sum) and len(node.terms) == 1:
		return node.terms[0]
	return node


def _zero_terms(node: Node) -> Node:
	if isinstance(node, Product):
		factors = _flatten(node.factors)
		if any(is_zero(factor) for factor in factors):
			return ZERO
		if len(factors) == 1:
			return factors[0]
		return Product(tuple(factors))
	if isinstance(node, Group) and is_zero(node.body):
		return ZERO
	if isinstance(node, Sum):
		if not node.terms:
			return ZERO
		# A leading zero stays as the literal 0; later zero placeholders go.
		kept = [node.terms[0]] + [t for t in node.terms[1:] if not is_zero(t)]
		if len(kept) == 1:
			return kept[0]
		return Sum(tuple(kept))
	return node


def alias_rule(aliases: AliasMap) -> RewriteRule:
	"""Rule replacing listed symbol powers with the consumer's short names."""

	def rewrite(node: Node) -> Node:
		if isinstance(node, Power) and (node.symbol, node.exponent) in aliases:
			return Alias(aliases[(node.symbol, node.exponent)], node)
		if isinstance(node, Symbol) and (node.name, 1) in aliases:
			return Alias(aliases[(node.name, 1)], node)
		return node

	return RewriteRule("aliases", rewrite)


ZERO_POWER = RewriteRule("zero-power", _zero_power)
UNIT_POWER = RewriteRule("unit-power", _unit_power)
UNIT_FACTORS = RewriteRule("unit-factors", _unit_factors)
ZERO_TERMS = RewriteRule("zero-terms", _zero_terms)


def standard_rules(aliases: AliasMap = MOMENTUM_ALIASES) -> Tuple[RewriteRule, ...]:
	"""The five passes in their required order, with family aliases last."""
	return (ZERO_POWER, UNIT_POWER, UNIT_FACTORS, ZERO_TERMS, alias_rule(aliases))


@dataclass
class Simplifier:
	"""Applies a sequence of rules in order, logging each one that fires."""

	rules: Sequence[RewriteRule] = field(default_factory=standard_rules)

	def __call__(self, node: Node) -> Node:
		for rule in self.rules:
			rewritten = rule(node)
			if rewritten is not node:
				logging.debug(f"Rule {rule.name} rewrote expression")
			node = rewritten
		return node


def simplify(node: Node, rules: Sequence[RewriteRule] = None) -> Node:
	"""Simplify an expression tree with ``rules`` (default: standard rules, no aliases)."""
	if rules is None:
		rules = standard_rules()
	return Simplifier(rules)(node)
