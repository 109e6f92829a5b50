"""Tests for environment configuration and CLI overrides."""

import sys

from api.cli import create_parser, run
from api.cli.main import apply_overrides
from shared.config import DoccoConfig, load_config


def clear_env(monkeypatch):
    for name in (
        "DOCCO_OUTPUT_DIR",
        "DOCCO_DIRS",
        "DOCCO_HIGHLIGHTER",
        "DOCCO_ENCODING",
        "DOCCO_DIVIDER_CLASSES",
        "DOCCO_MARKDOWN_EXTENSIONS",
        "DOCCO_QUIET",
    ):
        # teardown restores the pre-test state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    clear_env(monkeypatch)
    config = load_config()
    assert config.output_dir == "docs"
    assert config.dirs is False
    assert config.highlighter == [sys.executable, "-m", "pygments"]
    assert config.divider_classes == ["c", "c1", "ch", "cm", "cs"]
    assert config.markdown_extensions == ["tables", "fenced_code"]


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    clear_env(monkeypatch)
    monkeypatch.setenv("DOCCO_OUTPUT_DIR", "site")
    monkeypatch.setenv("DOCCO_DIRS", "yes")
    monkeypatch.setenv("DOCCO_HIGHLIGHTER", "pygmentize")
    monkeypatch.setenv("DOCCO_DIVIDER_CLASSES", "c1, cp")
    config = load_config()
    assert config.output_dir == "site"
    assert config.dirs is True
    assert config.highlighter == ["pygmentize"]
    assert config.divider_classes == ["c1", "cp"]


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    clear_env(monkeypatch)
    (tmp_path / ".env").write_text("DOCCO_OUTPUT_DIR=from-dotenv\n", encoding="utf-8")
    assert load_config().output_dir == "from-dotenv"


def test_cli_flags_override_config():
    args = create_parser().parse_args(["--dirs", "-o", "out", "-q", "a.py"])
    config = apply_overrides(DoccoConfig(), args)
    assert config.output_dir == "out"
    assert config.dirs is True
    assert config.quiet is True
    untouched = apply_overrides(DoccoConfig(dirs=True), create_parser().parse_args([]))
    assert untouched.dirs is True


def test_cli_without_inputs_fails(capsys):
    assert run(create_parser().parse_args([])) == 2
    assert "No input files" in capsys.readouterr().out


def test_cli_lists_languages(capsys):
    assert run(create_parser().parse_args(["--languages"])) == 0
    out = capsys.readouterr().out
    assert ".py" in out
    assert "coffee-script" in out


def test_cli_reports_errors_with_status(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clear_env(monkeypatch)
    status = run(create_parser().parse_args(["-o", str(tmp_path / "out"), str(tmp_path / "gone.py")]))
    assert status == 2
    assert "[ERR] could not read" in capsys.readouterr().out


def test_cli_end_to_end_with_pygments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clear_env(monkeypatch)
    (tmp_path / "hello.py").write_text("# Say hi.\nprint('hi')\n", encoding="utf-8")
    status = run(create_parser().parse_args(["-q", "-o", "out", "hello.py"]))
    assert status == 0
    page = (tmp_path / "out" / "hello.html").read_text(encoding="utf-8")
    assert "<p>Say hi.</p>" in page
    assert '<div class="highlight"><pre>' in page
