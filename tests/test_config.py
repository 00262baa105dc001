import pytest

from intgen.config import GeneratorConfig, parse_config_file


def write_config(tmp_path, text):
	path = tmp_path / "intgen.cfg"
	path.write_text(text)
	return str(path)


def test_defaults():
	config = GeneratorConfig()
	assert config.output_dir == "."
	assert config.families == ["nuclear", "kinetic", "momentum"]
	assert config.boys is True
	assert config.line_width == 79
	assert config.continuation == "&"
	assert config.workers == 1
	assert config.log_level == "INFO"


def test_parse_config_file(tmp_path):
	path = write_config(
		tmp_path,
		"""
# generated sources
Output_Dir = build/fortran
families = nuclear, Momentum
boys = no

workers = 2
log_level = debug
""",
	)
	config = parse_config_file(path)
	assert config.output_dir == "build/fortran"
	assert config.families == ["nuclear", "momentum"]
	assert config.boys is False
	assert config.workers == 2
	assert config.log_level == "DEBUG"
	assert config.line_width == 79


@pytest.mark.parametrize(
	"text",
	[
		"colour = blue\n",
		"families = nuclear, overlap\n",
		"workers = 0\n",
		"boys = maybe\n",
		"line_width = wide\n",
		"log_level = chatty\n",
		"just some words\n",
	],
)
def test_invalid_config(tmp_path, text):
	with pytest.raises(ValueError):
		parse_config_file(write_config(tmp_path, text))


def test_updated_ignores_none():
	config = GeneratorConfig().updated(output_dir="out", workers=None, families=["kinetic"])
	assert config.output_dir == "out"
	assert config.workers == 1
	assert config.families == ["kinetic"]


def test_updated_validates():
	with pytest.raises(ValueError):
		GeneratorConfig().updated(families=["overlap"])
