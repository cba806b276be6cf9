"""
Integration tests for the texmark command line interface.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from texmark.cli import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ["TEXMARK_CONFIG_PATH", "TEXMARK_MATH_ENGINE", "TEXMARK_PNG_ENGINE"]:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.integration
def test_no_command_shows_help():
    """Test running without a command prints help."""
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "preview" in result.output


@pytest.mark.integration
def test_cite_command():
    """Test citation lists are printed as HTML."""
    result = runner.invoke(app, ["cite", "Weinberg:1967tq", "MR1234567", "Foo"])

    assert result.exit_code == 0
    assert "inspirehep.net/search?p=Weinberg%3A1967tq" in result.output
    assert "MR1234567</a>, Foo]</span>" in result.output


@pytest.mark.integration
def test_math_command_with_null_engine():
    """Test the null engine prints the TeX source in <code>."""
    result = runner.invoke(app, ["math", "x^2", "--math-engine", "none"])

    assert result.exit_code == 0
    assert '<span class="math-inline"><code class="math-null">x^2</code></span>' in result.output


@pytest.mark.integration
def test_math_command_numbered_equation():
    """Test labelled equations are numbered (1)."""
    result = runner.invoke(app, ["math", "E = mc^2", "--equation", "--label", "energy"])

    assert result.exit_code == 0
    assert 'id="eq:energy"' in result.output
    assert '<span class="eq-number">(1)</span>' in result.output


@pytest.mark.integration
def test_math_command_log_dir(tmp_path):
    """Test --log-dir writes a math session log."""
    result = runner.invoke(
        app, ["math", "x", "--math-engine", "none", "--log-dir", str(tmp_path / "logs")]
    )

    assert result.exit_code == 0
    log_text = (tmp_path / "logs" / "math.log").read_text(encoding="utf-8")
    assert "MathML engine: none" in log_text


@pytest.mark.integration
def test_math_command_label_requires_equation():
    """Test --label without --equation is a usage error."""
    result = runner.invoke(app, ["math", "x", "--label", "oops"])
    assert result.exit_code == 2


@pytest.mark.integration
def test_math_command_unknown_engine():
    """Test an unknown engine exits with a configuration error."""
    result = runner.invoke(app, ["math", "x", "--math-engine", "ghost"])

    assert result.exit_code == 1
    assert "ghost" in result.output


@pytest.mark.integration
def test_preview_command(tmp_path):
    """Test documents render to a page file and report broken references."""
    output = tmp_path / "sample.html"

    result = runner.invoke(
        app,
        [
            "preview",
            str(FIXTURES_PATH / "sample_document.yaml"),
            "--output",
            str(output),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0
    page = output.read_text(encoding="utf-8")
    assert "<title>Electroweak Notes</title>" in page
    assert (tmp_path / "logs" / "render.log").exists()
    assert "1 unresolved reference(s)" in result.output
    assert "thm-missing" in result.output


@pytest.mark.integration
def test_preview_command_malformed_document(tmp_path):
    """Test malformed documents exit with a usage error instead of a traceback."""
    document = tmp_path / "broken.yaml"
    document.write_text("title: Broken\nnodes:\n  - inline\n", encoding="utf-8")

    result = runner.invoke(app, ["preview", str(document)])

    assert result.exit_code == 2
    assert "Invalid document" in result.output
    assert "must be a mapping" in result.output
