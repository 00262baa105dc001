import numpy as np
import pytest
from numpy.testing import assert_allclose

from intgen.cases import GENERATION_CASES, case_for_switch
from intgen.config import GeneratorConfig
from intgen.families import KINETIC, MOMENTUM, NUCLEAR
from intgen.generator import (
	basis_values,
	expand_pair,
	generate_all,
	generate_case,
	generate_family,
	raw_values,
	render_boys,
	render_family,
	render_series,
)
from intgen.writer import OutputDialect, unwrap_line

SMALL_CASES = [case_for_switch(code) for code in (34, 17, 33, 18)]


def test_expand_pair():
	assert expand_pair(NUCLEAR, 1, 1) == "wo(1,1) = preFactor*F0"
	assert expand_pair(MOMENTUM, 1, 1, axis=2) == "wo(3,1,1) = preFactor*(0 - 2*a2*(PB(3)))"


def test_custom_assignment():
	dialect = OutputDialect(assignment="=")
	assert expand_pair(NUCLEAR, 1, 1, dialect=dialect) == "wo(1,1)=preFactor*F0"
	result = generate_case(KINETIC, case_for_switch(17), dialect)
	assert result.rebased == ["g(1,1)= +wo(1,1)"]


def test_raw_entry_order():
	result = generate_case(NUCLEAR, case_for_switch(34))
	labels = [entry.split(" = ")[0] for entry in result.raw_entries]
	assert labels[:5] == ["wo(1,1)", "wo(2,1)", "wo(3,1)", "wo(4,1)", "wo(1,2)"]


def test_momentum_layout():
	result = generate_case(MOMENTUM, case_for_switch(33))
	labels = [entry.split(" = ")[0] for entry in result.raw_entries]
	assert labels == [f"wo({axis},1,{o2})" for axis in (1, 2, 3) for o2 in range(1, 5)]
	assert result.rebased[0] == "g(i,1,1) = +wo(i,1,1)"


def test_render_family_structure():
	text = render_family(generate_family(KINETIC, SMALL_CASES))
	assert text.startswith("if (l1l2switch.eq.34) then\n\n")
	assert "\nelse if (l1l2switch.eq.17) then\n\n" in text
	assert "\nelse if (l1l2switch.eq.33) then\n\n" in text
	assert "\nelse\n\n" in text
	assert text.endswith("g(4,1) = +wo(4,1)\nend if")
	assert "g(1,1) = +wo(1,1)\n\nelse if (l1l2switch.eq.33)" in text


def test_rendered_lines_are_wrapped():
	text = render_family(generate_family(NUCLEAR, SMALL_CASES))
	for line in text.split("\n"):
		assert len(line) <= 81
	assert "wo(4,4) = " in unwrap_line(text)


def test_parallel_matches_serial():
	serial = generate_family(KINETIC, SMALL_CASES)
	parallel = generate_family(KINETIC, SMALL_CASES, workers=2)
	assert [r.raw_entries for r in parallel] == [r.raw_entries for r in serial]
	assert [r.rebased for r in parallel] == [r.rebased for r in serial]
	assert [r.case for r in parallel] == SMALL_CASES


def test_boys_text():
	gamma = render_boys()
	assert gamma.startswith("F0 = 0.5*(")
	assert gamma.endswith("\n\n")
	assert gamma.count("\n\nF") == 10
	assert render_series().startswith("S(N+1) = 0.5d0*exp_XX*(")


def test_generate_all(tmp_path):
	config = GeneratorConfig(output_dir=str(tmp_path / "out"), families=["kinetic", "momentum"])
	paths = generate_all(config)
	names = [p.split("/")[-1] for p in paths]
	assert names == ["KE_Intg", "momIntg", "gamma", "approx"]

	ke = (tmp_path / "out" / "KE_Intg").read_text()
	assert ke.count("then\n\n") == len(GENERATION_CASES) - 1
	assert ke.endswith("end if")
	assert "g(16,16) = +16*wo(17,17)" in unwrap_line(ke)

	mom = (tmp_path / "out" / "momIntg").read_text()
	assert "g(i,16,16) = " in unwrap_line(mom)
	assert "wo(3,20,20) = " in unwrap_line(mom)


def test_generate_all_without_boys(tmp_path):
	config = GeneratorConfig(output_dir=str(tmp_path), families=["kinetic"], boys=False)
	assert [p.split("/")[-1] for p in generate_all(config)] == ["KE_Intg"]
	assert not (tmp_path / "gamma").exists()


def test_generate_all_unwritable(tmp_path):
	blocker = tmp_path / "file"
	blocker.write_text("")
	config = GeneratorConfig(output_dir=str(blocker), families=["kinetic"])
	with pytest.raises(RuntimeError):
		generate_all(config)


def sample_values():
	values = {"preFactor": 1.3, "coef": 0.7, "eps": 0.9, "a2": 1.1, "Y": 2.3}
	for name, offset in (("PA", 0.1), ("PB", -0.2), ("PC", 0.05)):
		for dim in (1, 2, 3):
			values[f"{name}({dim})"] = offset * dim
	for order in range(11):
		values[f"F{order}"] = 1.0 / (2 * order + 1)
	return values


def test_raw_values_match_entries():
	case = case_for_switch(34)
	raw = raw_values(NUCLEAR, case, sample_values())
	assert raw.shape == (4, 4)
	assert_allclose(raw[0, 0], 1.3 * 1.0)


def test_basis_values_for_p_block_equal_raw():
	case = case_for_switch(34)
	values = sample_values()
	assert_allclose(basis_values(KINETIC, case, values), raw_values(KINETIC, case, values))


def test_basis_values_d_block():
	case = case_for_switch(65)
	values = sample_values()
	raw = raw_values(KINETIC, case, values)
	basis = basis_values(KINETIC, case, values)
	assert basis.shape == (1, 9)
	assert_allclose(basis[0, 8], 2 * raw[0, 6] - raw[0, 4] - raw[0, 5])
	assert np.all(np.isfinite(basis))
