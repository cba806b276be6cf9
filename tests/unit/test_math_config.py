"""Unit tests for math option resolution."""

from pathlib import Path

import pytest

from texmark.contexts.math.config import MathOptions, load_math_options
from texmark.contexts.math.defaults import get_default_options

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ["TEXMARK_CONFIG_PATH", "TEXMARK_MATH_ENGINE", "TEXMARK_PNG_ENGINE"]:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
def test_defaults():
    """Test options without any layers match the documented defaults."""
    options = load_math_options()

    assert options == MathOptions()
    assert options.math_engine == "latex2mathml"
    assert options.png_engine == "none"
    assert options.output_mathml is True
    assert options.output_png is False
    assert options.to_dict() == get_default_options()


@pytest.mark.unit
def test_yaml_file_layer():
    """Test a YAML file overrides defaults and keeps the rest."""
    options = load_math_options(FIXTURES_PATH / "math_options.yaml")

    assert options.math_engine == "none"
    assert options.png_engine == "mathtext"
    assert options.output_png is True
    assert options.png_dpi == 200
    assert options.output_mathml is True


@pytest.mark.unit
def test_config_path_from_environment(monkeypatch):
    """Test TEXMARK_CONFIG_PATH is used when no path is given."""
    monkeypatch.setenv("TEXMARK_CONFIG_PATH", str(FIXTURES_PATH / "math_options.yaml"))
    assert load_math_options().png_engine == "mathtext"


@pytest.mark.unit
def test_environment_overrides_file(monkeypatch):
    """Test engine environment variables beat the config file."""
    monkeypatch.setenv("TEXMARK_PNG_ENGINE", "none")
    monkeypatch.setenv("TEXMARK_MATH_ENGINE", "latex2mathml")

    options = load_math_options(FIXTURES_PATH / "math_options.yaml")

    assert options.png_engine == "none"
    assert options.math_engine == "latex2mathml"


@pytest.mark.unit
def test_explicit_overrides_win(monkeypatch):
    """Test explicit overrides are applied last and None values are skipped."""
    monkeypatch.setenv("TEXMARK_MATH_ENGINE", "none")

    options = load_math_options(
        overrides={"math_engine": "custom", "output_png": None, "png_url": "/img/"}
    )

    assert options.math_engine == "custom"
    assert options.output_png is False
    assert options.png_url == "/img/"


@pytest.mark.unit
def test_unknown_key_in_file(tmp_path):
    """Test typos in config files are reported with the available keys."""
    config = tmp_path / "bad.yaml"
    config.write_text("math_engnie: none\n")

    with pytest.raises(ValueError, match="math_engnie"):
        load_math_options(config)


@pytest.mark.unit
def test_unknown_override_key():
    """Test unknown override keys are rejected."""
    with pytest.raises(ValueError, match="Available options"):
        load_math_options(overrides={"engine": "none"})


@pytest.mark.unit
def test_missing_config_file(tmp_path):
    """Test a missing config file is an error rather than silently ignored."""
    with pytest.raises(FileNotFoundError):
        load_math_options(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_empty_config_file(tmp_path):
    """Test an empty config file leaves the defaults in place."""
    config = tmp_path / "empty.yaml"
    config.write_text("")

    assert load_math_options(config) == MathOptions()
