import pytest

from intgen.writer import OutputDialect, open_output, render_switch, unwrap_line, wrap_line, wrapped_chunks


def test_short_line_is_unchanged():
	assert wrap_line("x" * 78) == "x" * 78


def test_exact_width_ends_with_empty_line():
	assert wrap_line("x" * 79) == "x" * 79 + "&\n&"


@pytest.mark.parametrize("length", [80, 158, 200, 1000])
def test_chunks_have_fixed_width(length):
	text = "".join(str(i % 10) for i in range(length))
	lines = wrapped_chunks(text)
	assert lines[0] == text[:79] + "&"
	for line in lines[1:-1]:
		assert len(line) == 81
		assert line.startswith("&") and line.endswith("&")
	assert lines[-1].startswith("&")
	assert len(lines[-1]) - 1 < 79


@pytest.mark.parametrize("length", [0, 1, 78, 79, 80, 237, 500])
def test_unwrap_restores_text(length):
	text = "".join("abcdefg*+()"[i % 11] for i in range(length))
	assert unwrap_line(wrap_line(text)) == text


def test_custom_dialect():
	dialect = OutputDialect(line_width=10, continuation="@")
	assert wrap_line("a" * 25, dialect) == "a" * 10 + "@\n@" + "a" * 10 + "@\n@" + "a" * 5
	assert dialect.assign("x", "1") == "x = 1"


def test_invalid_dialect():
	with pytest.raises(ValueError):
		OutputDialect(line_width=0)
	with pytest.raises(ValueError):
		OutputDialect(continuation="")


def test_render_switch():
	text = render_switch([(34, ["a = 1"], ["g = a"]), (17, ["b = 2", "c = 3"], ["g = b"]), (136, ["d = 4"], [])])
	assert text == (
		"if (l1l2switch.eq.34) then\n\na = 1\n\ng = a\n\n"
		"else if (l1l2switch.eq.17) then\n\nb = 2\n\nc = 3\n\ng = b\n\n"
		"else\n\nd = 4\n\n"
		"end if"
	)


def test_single_branch_is_not_else():
	assert render_switch([(17, ["a = 1"], [])]).startswith("if (l1l2switch.eq.17) then")


def test_open_output_failure(tmp_path):
	with pytest.raises(RuntimeError, match="Error opening file"):
		with open_output(str(tmp_path / "missing" / "NucIntg")):
			pass


def test_open_output_writes(tmp_path):
	path = tmp_path / "out"
	with open_output(str(path)) as f:
		f.write("end if")
	assert path.read_text() == "end if"
