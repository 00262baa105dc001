import numpy as np
import pytest
from numpy.testing import assert_allclose

from intgen.expansion import (
	boys_orders,
	kinetic_energy,
	momentum,
	momentum_components,
	nuclear_attraction,
	nuclear_attraction_terms,
	overlap_3d,
	overlap_sum,
	overlap_sum_terms,
	shifted,
)
from intgen.families import KINETIC, MOMENTUM, NUCLEAR
from intgen.simplify import NUCLEAR_ALIASES, simplify, standard_rules
from intgen.triads import triad_of


def test_shifted():
	assert shifted((1, 2, 0), 0, 2) == (3, 2, 0)
	assert shifted((1, 2, 0), 2, -1) == (1, 2, -1)


def test_ss_nuclear_attraction_reduces_to_f0():
	expr = NUCLEAR.expand(1, 1)
	assert expr.render() == "preFactor*F0"
	assert boys_orders(expr) == [0]


def test_nuclear_term_count_includes_zero_terms():
	# x: l = 0, 1, 2 gives 1, 1 and 3 (l, r, i) triples, each with l + 1 choices of u
	terms = nuclear_attraction_terms((1, 0, 0), (1, 0, 0))
	assert len(terms) == 1 * 1 + 1 * 2 + 3 * 3
	assert any(t.zero for t in terms)


def test_nuclear_sp_terms():
	expr = simplify(nuclear_attraction(triad_of(1), triad_of(2)), standard_rules(NUCLEAR_ALIASES))
	assert expr.render() == "preFactor*(PB(1)*F0 - PC(1)*F1)"


@pytest.mark.parametrize("pair", [(1, 1), (2, 2), (5, 11), (18, 20)])
def test_boys_orders_survive_simplification(pair):
	raw = nuclear_attraction(triad_of(pair[0]), triad_of(pair[1]))
	assert boys_orders(NUCLEAR.expand(*pair)) == boys_orders(raw)
	assert max(boys_orders(raw)) == sum(triad_of(pair[0])) + sum(triad_of(pair[1]))


def test_overlap_sum_terms():
	terms = overlap_sum_terms(1, 1, 0)
	# j = 0 has one s, j = 1 has s = 0, 1, 2
	assert len(terms) == 4
	assert [t.zero for t in terms] == [False, True, False, True]
	assert terms[2].coefficient == 0.5


def test_overlap_sum_value():
	# (PA + x)(PB + x) under the Gaussian average gives PA*PB + 1/(2Y)
	values = {"PA(1)": 0.3, "PB(1)": -0.7, "Y": 1.6}
	assert_allclose(overlap_sum(1, 1, 0).evaluate(values), 0.3 * -0.7 + 0.5 / 1.6)


def test_overlap_3d_is_product_of_axes():
	values = {"PA(1)": 0.1, "PA(2)": 0.2, "PA(3)": 0.3, "PB(1)": -0.4, "PB(2)": 0.5, "PB(3)": -0.6, "Y": 2.0}
	t1, t2 = (2, 1, 0), (0, 1, 3)
	expected = np.prod([overlap_sum(t1[axis], t2[axis], axis).evaluate(values) for axis in range(3)])
	assert_allclose(overlap_3d(t1, t2).evaluate(values), expected)


def test_ss_kinetic_energy():
	# coef*(3*a2*S - 2*a2**2*(S+x + S+y + S+z)) with S = 1 and S+a = 1/(2Y)
	values = {"a2": 0.8, "Y": 1.5, "coef": 2.0}
	for name in ("PA", "PB"):
		for dim in (1, 2, 3):
			values[f"{name}({dim})"] = 0.0
	expected = 2.0 * (3 * 0.8 - 3 * 2 * 0.8**2 * 0.5 / 1.5)
	assert_allclose(kinetic_energy(triad_of(1), triad_of(1)).evaluate(values), expected)
	assert_allclose(KINETIC.expand(1, 1).evaluate(values), expected)


def test_kinetic_energy_uses_aliases():
	text = KINETIC.expand(1, 1).render()
	assert text.startswith("coef*(3*a2 - 2*a2_2*")
	assert "Y1" in text


def test_kinetic_lowered_terms_vanish_below_degree_two():
	expr = kinetic_energy(triad_of(2), triad_of(2))
	lowered = expr.factors[1].terms[4:]
	assert all(term.factors[0].value == 0 for term in lowered)


def test_momentum_ss_z_has_zero_first_term():
	assert MOMENTUM.expand(1, 1, axis=2).render() == "preFactor*(0 - 2*a2*(PB(3)))"


def test_momentum_lowered_term():
	# orbital 2 = x: d/dx lowers to the s overlap
	expected = "preFactor*((1) - 2*a2*((PB(1)**2) + 0.5*(Y**(-1))))"
	assert MOMENTUM.expand(1, 2, axis=0).render() == expected


def test_momentum_components():
	components = momentum_components(triad_of(1), triad_of(4))
	assert len(components) == 3
	assert [c.render() for c in components] == [momentum(triad_of(1), triad_of(4), axis).render() for axis in range(3)]


def test_momentum_needs_axis():
	with pytest.raises(ValueError):
		MOMENTUM.expand(1, 1)
