import pytest

from intgen.cli import build_parser, main


def test_parser_defaults():
	args = build_parser().parse_args([])
	assert args.families == []
	assert args.output_dir is None
	assert args.workers is None
	assert not args.no_boys


def test_main_writes_requested_family(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	assert main(["kinetic", "--output-dir", "gen", "--no-boys"]) == 0
	assert (tmp_path / "gen" / "KE_Intg").exists()
	assert not (tmp_path / "gen" / "gamma").exists()
	assert (tmp_path / "logs").is_dir()
	assert "KE_Intg" in capsys.readouterr().out


def test_main_with_config(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	config = tmp_path / "intgen.cfg"
	config.write_text("families = momentum\noutput_dir = from_config\nlog_dir = run_logs\n")
	assert main(["--config", str(config)]) == 0
	assert (tmp_path / "from_config" / "momIntg").exists()
	assert (tmp_path / "from_config" / "approx").exists()


def test_main_unknown_family(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	with pytest.raises(SystemExit) as excinfo:
		main(["overlap"])
	assert excinfo.value.code == 1
	assert "Error:" in capsys.readouterr().err


def test_main_missing_config(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	with pytest.raises(SystemExit) as excinfo:
		main(["--config", "missing.cfg"])
	assert excinfo.value.code == 1
	assert "Error:" in capsys.readouterr().err
