"""Integration tests for the render and describe commands"""

import pytest
from typer.testing import CliRunner

from peekmd.cli.cli import app


runner = CliRunner()


@pytest.fixture(name="project")
def project_fixture(tmp_path, monkeypatch):
    """A working directory holding a small project README."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PEEKMD_OUTPUT_DIR", raising=False)
    (tmp_path / "README.md").write_text("# Hello\n\nWorld, in **bold**.\n\n~~gone~~\n")
    return tmp_path


def test_render_cmd_writes_page(project):
    """render writes <stem>.html into --out-dir and prints both paths."""
    result = runner.invoke(app, ["render", "README.md", "--out-dir", str(project / "dist")])

    assert result.exit_code == 0, result.output
    out = project / "dist" / "README.html"
    assert out.exists()
    assert "Preview:" in result.output
    page = out.read_text(encoding="utf-8")
    assert '<h1 id="hello">' in page
    assert "<s>gone</s>" in page


def test_render_cmd_default_out_dir(project):
    result = runner.invoke(app, ["render", "README.md"])
    assert result.exit_code == 0, result.output
    assert (project / ".peekmd" / "README.html").exists()


def test_render_cmd_fragment_no_html(project):
    (project / "raw.md").write_text("<b>raw</b>\n")
    result = runner.invoke(app, ["render", "raw.md", "--fragment", "--no-html", "--out-dir", "out"])

    assert result.exit_code == 0, result.output
    text = (project / "out" / "raw.html").read_text(encoding="utf-8")
    assert not text.startswith("<!DOCTYPE html>")
    assert "&lt;b&gt;raw&lt;/b&gt;" in text


def test_render_cmd_missing_file(project):
    result = runner.invoke(app, ["render", "nope.md"])
    assert result.exit_code == 1
    assert "Error: File not found" in result.output


def test_render_cmd_unknown_style(project):
    result = runner.invoke(app, ["render", "README.md", "--style", "no-such-style"])
    assert result.exit_code == 1
    assert "Unknown highlight style" in result.output


def test_render_cmd_open(project, monkeypatch):
    """--open hands the written page to the browser as a file:// URI."""
    opened = []
    monkeypatch.setattr("peekmd.cli.commands.webbrowser.open", opened.append)

    result = runner.invoke(app, ["render", "README.md", "--out-dir", "dist", "--open"])

    assert result.exit_code == 0, result.output
    assert opened == [(project / "dist" / "README.html").resolve().as_uri()]


def test_describe_cmd(project):
    result = runner.invoke(app, ["describe", "README.md"])
    assert result.exit_code == 0, result.output
    assert "World, in bold." in result.output
    assert "Topics: markdown, preview, documentation" in result.output


def test_invalid_config_exits(project):
    (project / "config.yaml").write_text("key: [unclosed\n")
    result = runner.invoke(app, ["describe", "README.md"])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip()
