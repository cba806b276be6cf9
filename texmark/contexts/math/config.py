"""
Math Rendering Options

Resolves the option values consumed by the math renderer. Layers are merged in
order, later layers overriding earlier ones:

    defaults -> YAML config file -> environment -> explicit overrides

Examples:
    >>> options = load_math_options()
    >>> options = load_math_options(Path("texmark.yaml"), {"output_png": True})
"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from texmark.contexts.math.defaults import DEFAULT_ENGINES, DEFAULT_PNG, ENV_OVERRIDES, get_default_options

load_dotenv()


@dataclass(frozen=True)
class MathOptions:
    """
    Resolved math rendering options.

    Attributes:
        math_engine: Engine used for MathML output
        png_engine: Engine used for PNG output
        output_mathml: Whether MathML rendering is attempted
        output_png: Whether PNG rendering is attempted
        png_dir: Directory PNG files are written to (None embeds data URIs)
        png_url: URL prefix for PNG files written to png_dir
        png_dpi: Raster resolution
        png_font_size: Font size in points for raster output
    """

    math_engine: str = DEFAULT_ENGINES["math_engine"]
    png_engine: str = DEFAULT_ENGINES["png_engine"]
    output_mathml: bool = DEFAULT_ENGINES["output_mathml"]
    output_png: bool = DEFAULT_ENGINES["output_png"]
    png_dir: Optional[str] = DEFAULT_PNG["png_dir"]
    png_url: str = DEFAULT_PNG["png_url"]
    png_dpi: int = DEFAULT_PNG["png_dpi"]
    png_font_size: float = DEFAULT_PNG["png_font_size"]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _check_keys(layer: Dict[str, Any], source: str) -> None:
    available = list(get_default_options())
    for key in layer:
        if key not in available:
            raise ValueError(f"Unknown math option '{key}' in {source}. Available options: {available}")


def load_math_options(
    config_path: Path = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> MathOptions:
    """
    Load math rendering options.

    Args:
        config_path: Optional YAML file (defaults to TEXMARK_CONFIG_PATH env variable)
        overrides: Explicit values applied last; None values are ignored

    Returns:
        Resolved MathOptions

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If any layer contains an unknown option
    """
    if config_path is None and os.getenv("TEXMARK_CONFIG_PATH"):
        config_path = Path(os.getenv("TEXMARK_CONFIG_PATH"))

    options = OmegaConf.create(get_default_options())

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Math config not found at {config_path}")
        file_layer = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
        _check_keys(file_layer, str(config_path))
        options = OmegaConf.merge(options, file_layer)

    env_layer = {key: os.environ[var] for var, key in ENV_OVERRIDES.items() if os.getenv(var)}
    options = OmegaConf.merge(options, env_layer)

    if overrides:
        explicit = {key: value for key, value in overrides.items() if value is not None}
        _check_keys(explicit, "overrides")
        options = OmegaConf.merge(options, explicit)

    return MathOptions(**OmegaConf.to_container(options, resolve=True))
