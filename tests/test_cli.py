from typer.testing import CliRunner

from cli.main import app
from cli.ui_components import COMPLETION_NOTICE

runner = CliRunner()


def test_build_with_defaults(clean_env):
    (clean_env / "src").mkdir()
    (clean_env / "src" / "a.txt").write_text("hello", encoding="utf-8")

    result = runner.invoke(app, ["build"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == COMPLETION_NOTICE
    assert (clean_env / "dist" / "a.txt").read_text(encoding="utf-8") == "hello"


def test_build_with_explicit_paths_and_clean(clean_env):
    (clean_env / "site").mkdir()
    (clean_env / "site" / "index.html").write_text("<p>hi</p>", encoding="utf-8")
    (clean_env / "public").mkdir()
    (clean_env / "public" / "stale.html").write_text("old", encoding="utf-8")

    result = runner.invoke(app, ["build", "--source", "site", "--dest", "public", "--clean"])

    assert result.exit_code == 0, result.output
    assert (clean_env / "public" / "index.html").exists()
    assert not (clean_env / "public" / "stale.html").exists()


def test_build_uses_env_settings(clean_env, monkeypatch):
    (clean_env / "assets").mkdir()
    (clean_env / "assets" / "x.css").write_text("body{}", encoding="utf-8")
    monkeypatch.setenv("PUBKIT_SOURCE_DIR", "assets")
    monkeypatch.setenv("PUBKIT_DIST_DIR", "out/static")

    result = runner.invoke(app, ["build"])

    assert result.exit_code == 0, result.output
    assert (clean_env / "out" / "static" / "x.css").exists()


def test_build_missing_source_exits_nonzero(clean_env):
    result = runner.invoke(app, ["build"])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert COMPLETION_NOTICE not in result.output


def test_build_verbose_shows_summary(clean_env):
    (clean_env / "src").mkdir()
    (clean_env / "src" / "a.txt").write_text("hello", encoding="utf-8")

    result = runner.invoke(app, ["build", "--verbose"])

    assert result.exit_code == 0, result.output
    assert COMPLETION_NOTICE in result.output
    assert "Publish Summary" in result.output


def test_config_command_lists_settings(clean_env):
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.output
    assert "source_dir" in result.output
    assert "dist_dir" in result.output


def test_version_option(clean_env):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("pubkit ")


def test_build_clean_into_working_directory_keeps_files(clean_env):
    (clean_env / "src").mkdir()
    (clean_env / "src" / "a.txt").write_text("hello", encoding="utf-8")
    (clean_env / "README").write_text("docs", encoding="utf-8")

    result = runner.invoke(app, ["build", "--dest", ".", "--clean"])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert (clean_env / "src" / "a.txt").read_text(encoding="utf-8") == "hello"
    assert (clean_env / "README").read_text(encoding="utf-8") == "docs"
