"""
Default values for math rendering options.

Used by config.load_math_options as the base layer that YAML files,
environment variables and explicit overrides are merged onto.
"""

from typing import Any, Dict

# Engine selection and output gates
DEFAULT_ENGINES = {
    "math_engine": "latex2mathml",
    "png_engine": "none",
    "output_mathml": True,
    "output_png": False,
}

# Raster output
DEFAULT_PNG = {
    "png_dir": None,
    "png_url": "",
    "png_dpi": 150,
    "png_font_size": 12,
}

# Environment variables that override the engine selection
ENV_OVERRIDES = {
    "TEXMARK_MATH_ENGINE": "math_engine",
    "TEXMARK_PNG_ENGINE": "png_engine",
}


def get_default_options() -> Dict[str, Any]:
    """Get a fresh copy of every option with its default value."""
    return {**DEFAULT_ENGINES, **DEFAULT_PNG}
