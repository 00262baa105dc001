import pytest

from intgen.triads import BASIS_DIMENSIONS, N_ORBITALS, ORBITAL_LABELS, RAW_DIMENSIONS, shell_of, triad_of, triad_table


def test_table_size_and_uniqueness():
	table = triad_table()
	assert len(table) == N_ORBITALS == 20
	assert len(set(table)) == 20
	assert len(ORBITAL_LABELS) == 20


def test_labels_match_exponents():
	for index, label in enumerate(ORBITAL_LABELS, start=1):
		if label == "s":
			assert triad_of(index) == (0, 0, 0)
			continue
		triad = triad_of(index)
		assert triad == (label.count("x"), label.count("y"), label.count("z"))


def test_shells_are_contiguous():
	shells = [shell_of(i) for i in range(1, 21)]
	assert shells == sorted(shells)
	# Number of orbitals up to and including each shell
	for shell, raw in enumerate(RAW_DIMENSIONS):
		assert sum(1 for s in shells if s <= shell) == raw


def test_basis_dimensions():
	assert BASIS_DIMENSIONS == (1, 4, 9, 16)


def test_table_is_a_copy():
	table = triad_table()
	table[0] = (9, 9, 9)
	assert triad_of(1) == (0, 0, 0)


@pytest.mark.parametrize("index", [0, 21, -1])
def test_invalid_index(index):
	with pytest.raises(ValueError):
		triad_of(index)
