import pytest

from intgen.families import FAMILIES, KINETIC, MOMENTUM, NUCLEAR, get_family
from intgen.rebasing import KINETIC_MOMENTUM_TABLE, NUCLEAR_TABLE


def test_registry():
	assert list(FAMILIES) == ["nuclear", "kinetic", "momentum"]
	assert get_family("kinetic") is KINETIC
	with pytest.raises(ValueError):
		get_family("overlap")


def test_output_names():
	assert [family.output_name for family in FAMILIES.values()] == ["NucIntg", "KE_Intg", "momIntg"]


def test_tables():
	assert NUCLEAR.table is NUCLEAR_TABLE
	assert KINETIC.table is KINETIC_MOMENTUM_TABLE
	assert MOMENTUM.table is KINETIC_MOMENTUM_TABLE


def test_raw_labels():
	assert NUCLEAR.raw_label(3, 7) == "wo(3,7)"
	assert MOMENTUM.raw_label(3, 7, axis=1) == "wo(2,3,7)"
	assert MOMENTUM.is_vector
	assert not KINETIC.is_vector


def test_symbol_vocabulary():
	nuclear = NUCLEAR.expand(5, 13).symbols()
	assert "preFactor" in nuclear
	assert {"e1", "e2"} <= nuclear
	assert "eps" not in nuclear
	assert all(name[:2] in ("PA", "PB", "PC", "e1", "e2", "e3", "pr") or name.startswith("F") for name in nuclear)

	kinetic = KINETIC.expand(5, 13).symbols()
	assert "coef" in kinetic
	assert {"a2", "a2_2", "Y1", "Y2"} <= kinetic
	assert not any(name.startswith("PC") for name in kinetic)

	momentum = MOMENTUM.expand(5, 13, axis=0).symbols()
	assert {"preFactor", "a2", "Y"} <= momentum


def test_unsimplified_expansion():
	raw = NUCLEAR.expand(1, 1, simplified=False)
	assert raw.render() != "preFactor*F0"
	assert "F0" in raw.symbols()


def test_invalid_orbital():
	with pytest.raises(ValueError):
		NUCLEAR.expand(0, 1)
