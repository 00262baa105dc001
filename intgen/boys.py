"""
Boys function formulas for the nuclear attraction consumer.

F_N(T) = integral_0^1 t^(2N) exp(-T t^2) dt

For T above the consumer's stability threshold the closed form

F_N(T) = (2N)!/(2 N!) * [ sqrt(pi)/(4^N T^(N+1/2)) erf(sqrt(T))
                          - exp(-T) sum_{k=0}^{N-1} (N-k)!/(4^k (2N-2k)!) T^-(k+1) ]

is used (Petersson & Hellsing, Eur. J. Phys. 31, 37). Small T uses Cook's
series, truncated after seven terms:

F_N(T) ~ 1/2 exp(-T) sum_{i=0}^{6} Gamma(N+1/2) T^i / Gamma(N+i+3/2)

The generated text uses the consumer's names ``XX`` (T), ``sqrt_pi``,
``erf_XX`` (erf(sqrt(T))) and ``exp_XX`` (exp(-T)).
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Tuple

import numpy as np
from scipy.special import erf, gamma, hyp1f1

from .combinatorics import factorial
from .expression import format_number

MAX_ORDER = 10
SERIES_TERMS = 7


@dataclass(frozen=True)
class BoysClosedForm:
	"""Coefficients of the closed-form F_N(T) expression."""

	order: int
	scale: Fraction
	tail: Tuple[Fraction, ...]

	@property
	def erf_denominator(self) -> int:
		return 4**self.order

	def render(self, simplify: bool = True) -> str:
		"""
		Render ``FN = ...``.

		With ``simplify`` unit tail coefficients are written without ``(1)*``
		and the empty N = 0 tail is left out; otherwise the tail for N = 0 is
		the literal zero ``0d0``.
		"""
		n = self.order
		text = f"F{n} = {format_number(self.scale)}*("
		text += f"(sqrt_pi/({self.erf_denominator}*XX**({n}.5d0)))*erf_XX"
		if self.tail:
			pieces = []
			for k, coefficient in enumerate(self.tail):
				if simplify and coefficient == 1:
					pieces.append(f"XX**({-(k + 1)})")
				else:
					pieces.append(f"({format_number(coefficient)})*XX**({-(k + 1)})")
			text += "-exp_XX*(" + "+".join(pieces) + ")"
		elif not simplify:
			text += "-exp_XX*(0d0)"
		return text + ")"

	def evaluate(self, t: float) -> float:
		"""Numeric value of the closed form at T = t (t > 0)."""
		n = self.order
		value = np.sqrt(np.pi) / (self.erf_denominator * t ** (n + 0.5)) * erf(np.sqrt(t))
		tail = sum(float(c) * t ** (-(k + 1)) for k, c in enumerate(self.tail))
		return float(self.scale) * (value - np.exp(-t) * tail)


def closed_form(order: int) -> BoysClosedForm:
	"""Closed-form coefficients of F_order(T)."""
	if not 0 <= order <= MAX_ORDER:
		raise ValueError(f"Boys function order {order} outside 0..{MAX_ORDER}")
	scale = Fraction(factorial(2 * order), 2 * factorial(order))
	tail = tuple(
		Fraction(factorial(order - k), 4**k * factorial(2 * order - 2 * k)) for k in range(order)
	)
	return BoysClosedForm(order, scale, tail)


def closed_forms(max_order: int = MAX_ORDER) -> List[str]:
	"""Rendered closed forms F0..F<max_order>."""
	return [closed_form(n).render() for n in range(max_order + 1)]


def series_approximation(terms: int = SERIES_TERMS) -> str:
	"""Rendered small-T series ``S(N+1) = ...`` with ``terms`` terms."""
	pieces = [f"(gamma(N + 0.5d0)*XX**{i})/gamma(N + {i} + 1.5d0)" for i in range(terms)]
	return "S(N+1) = 0.5d0*exp_XX*(" + " + ".join(pieces) + ")"


def boys_function(n: int, t: float) -> float:
	"""
	Reference value of F_n(t) from the confluent hypergeometric function.

	F_n(t) = 1F1(n + 1/2; n + 3/2; -t) / (2n + 1)
	"""
	return float(hyp1f1(n + 0.5, n + 1.5, -t) / (2 * n + 1))


def series_value(n: int, t: float, terms: int = SERIES_TERMS) -> float:
	"""Numeric value of the truncated small-T series for F_n(t)."""
	total = sum(gamma(n + 0.5) * t**i / gamma(n + i + 1.5) for i in range(terms))
	return float(0.5 * np.exp(-t) * total)
