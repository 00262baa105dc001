import pytest

from intgen.combinatorics import binomial, double_factorial, factorial


@pytest.mark.parametrize("n", range(6))
def test_binomial_out_of_range_is_zero(n):
	assert binomial(n, -1) == 0
	assert binomial(n, n + 1) == 0


@pytest.mark.parametrize("n", range(6))
def test_binomial_k_zero_is_one(n):
	assert binomial(n, 0) == 1


def test_binomial_values():
	assert binomial(4, 2) == 6
	assert binomial(6, 3) == 20
	assert binomial(3, 3) == 1
	assert isinstance(binomial(5, 2), int)


def test_factorial():
	assert factorial(0) == 1
	assert factorial(1) == 1
	assert factorial(5) == 120
	assert factorial(10) == 3628800


def test_factorial_negative():
	with pytest.raises(ValueError):
		factorial(-1)


@pytest.mark.parametrize("n, expected", [(-1, 1), (0, 1), (1, 1), (3, 3), (5, 15), (7, 105)])
def test_double_factorial(n, expected):
	assert double_factorial(n) == expected


def test_double_factorial_even_keeps_odd_factors():
	assert double_factorial(6) == double_factorial(5)
