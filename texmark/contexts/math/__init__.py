"""
Math Context

Responsibilities:
- Resolves math rendering options (engines and output gates)
- Registers named engines behind a MathML/PNG capability interface
- Dispatches TeX sources to the configured engines
- Sizes and aligns PNG math against the text baseline

Owns: Engine registry, built-in engines, math rendering, baseline metric
Never: Typesets math itself or builds the surrounding markup
"""

from texmark.contexts.math.alignment import (
    PIXELS_PER_EX,
    AlignedImage,
    BaselineMetric,
    ImageAligner,
    format_ex,
)
from texmark.contexts.math.backends import (
    BackendRegistry,
    Capability,
    MathBackend,
    RasterImage,
    register_engine,
)
from texmark.contexts.math.config import MathOptions, load_math_options
from texmark.contexts.math.engines import build_registry
from texmark.contexts.math.exceptions import (
    BaselineProbeError,
    ConfigurationError,
    MathEngineNotFoundError,
)
from texmark.contexts.math.renderer import MathRenderer

__all__ = [
    # Options
    "MathOptions",
    "load_math_options",
    # Engines
    "Capability",
    "MathBackend",
    "RasterImage",
    "BackendRegistry",
    "register_engine",
    "build_registry",
    # Rendering
    "MathRenderer",
    "ImageAligner",
    "AlignedImage",
    "BaselineMetric",
    "PIXELS_PER_EX",
    "format_ex",
    # Errors
    "ConfigurationError",
    "MathEngineNotFoundError",
    "BaselineProbeError",
]
