import numpy as np
import pytest
from numpy.testing import assert_allclose

from intgen.cases import GENERATION_CASES
from intgen.rebasing import KINETIC_MOMENTUM_TABLE, NUCLEAR_TABLE, table_differences

TABLES = [NUCLEAR_TABLE, KINETIC_MOMENTUM_TABLE]


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_table_is_complete(table):
	assert len(table.cells) == 256
	for b1 in range(1, 17):
		for b2 in range(1, 17):
			assert 1 <= len(table.formula(b1, b2)) <= 9


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_weights_are_small_integers(table):
	allowed = {1, 2, 3, 4, 6, 8, 9, 12, 16}
	for formula in table.cells.values():
		for weight, _, _ in formula:
			assert abs(weight) in allowed


def test_s_cell_is_raw_s_cell():
	assert KINETIC_MOMENTUM_TABLE.render_cell(1, 1) == "g(1,1) = +wo(1,1)"
	assert NUCLEAR_TABLE.render_cell(1, 1) == "g(1,1) = +wo(1,1)"


def test_render_cell():
	assert NUCLEAR_TABLE.render_cell(1, 9) == "g(1,9) = +2*wo(1,7) - wo(1,5) - wo(1,6)"
	assert KINETIC_MOMENTUM_TABLE.render_cell(1, 8, index="i") == "g(i,1,8) = +wo(i,1,5) - wo(i,1,6)"


def test_render_order():
	lines = NUCLEAR_TABLE.render(4, 2)
	assert len(lines) == 8
	assert lines[0].startswith("g(1,1) =")
	assert lines[1].startswith("g(2,1) =")
	assert lines[4].startswith("g(1,2) =")


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
@pytest.mark.parametrize("case", GENERATION_CASES, ids=lambda c: c.label)
def test_references_stay_inside_raw_block(table, case):
	rows, cols = table.raw_extent(*case.basis_dims)
	assert rows <= case.raw_dims[0]
	assert cols <= case.raw_dims[1]


def test_missing_cell():
	with pytest.raises(ValueError):
		NUCLEAR_TABLE.formula(17, 1)


def test_tables_differ_only_in_f_cells():
	differences = table_differences(NUCLEAR_TABLE, KINETIC_MOMENTUM_TABLE)
	assert differences
	assert (14, 14) in differences
	for b1, b2 in differences:
		assert b1 >= 10 or b2 >= 10
	assert table_differences(NUCLEAR_TABLE, NUCLEAR_TABLE) == {}


def test_apply_identity_block():
	raw = np.arange(1.0, 17.0).reshape(4, 4)
	assert_allclose(KINETIC_MOMENTUM_TABLE.apply(raw, 4, 4), raw)


def test_apply_d_block():
	raw = np.zeros((10, 10))
	raw[0, 6] = 1.0
	raw[0, 4] = 0.25
	raw[0, 5] = 0.5
	basis = NUCLEAR_TABLE.apply(raw, 1, 9)
	assert basis.shape == (1, 9)
	assert_allclose(basis[0, 8], 2 * 1.0 - 0.25 - 0.5)
	assert_allclose(basis[0, 7], 0.25 - 0.5)


def test_apply_batched():
	raw = np.ones((3, 4, 4))
	assert KINETIC_MOMENTUM_TABLE.apply(raw, 4, 4).shape == (3, 4, 4)
