"""Exact integer combinatorics used by the term expansions."""

from scipy.special import comb, factorial2
from scipy.special import factorial as _factorial


def binomial(n: int, k: int) -> int:
	"""
	Binomial coefficient n choose k.

	Returns 0 when k < 0 or k > n, so that expansion terms whose index runs
	past an exponent vanish instead of picking up a spurious value.
	"""
	if k < 0 or k > n:
		return 0
	if k == 0:
		return 1
	return int(comb(n, k, exact=True))


def factorial(n: int) -> int:
	"""Factorial n! for n >= 0."""
	if n < 0:
		raise ValueError(f"Factorial of negative number {n} is undefined")
	if n < 2:
		return 1
	return int(_factorial(n, exact=True))


def double_factorial(n: int) -> int:
	"""
	Product of all odd integers from 1 up to n.

	This is the usual n!! for odd n; for even n only the odd factors are kept.
	For n <= 0 the empty product 1 is returned, which covers (2j - 1)!! at
	j = 0 in the two-center overlap sum.
	"""
	if n <= 0:
		return 1
	odd = n if n % 2 == 1 else n - 1
	if odd <= 1:
		return 1
	return int(factorial2(odd, exact=True))
