import pytest

from intgen.cases import GENERATION_CASES, case_for_switch, switch_code
from intgen.families import FAMILIES
from intgen.generator import generate_case


def test_emission_order():
	codes = [case.switch_code for case in GENERATION_CASES]
	assert codes == [34, 17, 33, 65, 129, 18, 66, 130, 20, 36, 68, 132, 24, 40, 72, 136]


def test_every_shell_pair_once():
	pairs = {(case.shell1, case.shell2) for case in GENERATION_CASES}
	assert pairs == {(s1, s2) for s1 in range(4) for s2 in range(4)}


def test_switch_code():
	assert switch_code(0, 0) == 17
	assert switch_code(3, 3) == 136
	with pytest.raises(ValueError):
		switch_code(4, 0)


def test_case_dimensions():
	case = case_for_switch(136)
	assert case.label == "f-f"
	assert case.raw_dims == (20, 20)
	assert case.basis_dims == (16, 16)
	assert case_for_switch(65).raw_dims == (1, 10)
	assert case_for_switch(65).basis_dims == (1, 9)


def test_unknown_switch():
	with pytest.raises(ValueError):
		case_for_switch(35)


# f-f expansions are slow; the smaller cases cover every code path
SMALL_CASES = [case for case in GENERATION_CASES if case.shell1 + case.shell2 <= 3]


@pytest.mark.parametrize("family", list(FAMILIES.values()), ids=lambda f: f.name)
@pytest.mark.parametrize("case", SMALL_CASES, ids=lambda c: c.label)
def test_entry_counts(family, case):
	result = generate_case(family, case)
	n1, n2 = case.raw_dims
	b1, b2 = case.basis_dims
	assert len(result.raw_entries) == n1 * n2 * len(family.axes)
	assert len(result.rebased) == b1 * b2
