"""
Built-in math engines.

- none:         MathML is the raw TeX in <code class="math-null">; PNG always declines
- latex2mathml: MathML through the latex2mathml package
- mathtext:     PNG through matplotlib's mathtext layout engine
"""

import base64
import hashlib
import io
from pathlib import Path
from typing import Optional

from latex2mathml.converter import convert as latex_to_mathml
from lxml import etree
from matplotlib.font_manager import FontProperties
from matplotlib.mathtext import MathTextParser, math_to_image

from texmark.contexts.document.nodes import MathKind
from texmark.contexts.math.backends import (
    ENGINE_FACTORIES,
    BackendRegistry,
    Capability,
    MathBackend,
    RasterImage,
    register_engine,
)
from texmark.contexts.math.config import MathOptions
from texmark.contexts.math.logger import _log_debug


# CSS class marking the TeX source shown in place of rendered math
NULL_CLASS = "math-null"


@register_engine("none")
class NoneEngine(MathBackend):
    """Null renderer: shows the TeX source verbatim and never rasterizes."""

    capabilities = frozenset({Capability.MATHML, Capability.PNG})

    def __init__(self, options: MathOptions = None):
        pass

    def render_mathml(self, kind: MathKind, source: str) -> etree._Element:
        code = etree.Element("code")
        code.set("class", NULL_CLASS)
        code.text = source
        return code

    def render_png(self, kind: MathKind, source: str) -> Optional[RasterImage]:
        return None


@register_engine("latex2mathml")
class Latex2MathMLEngine(MathBackend):
    capabilities = frozenset({Capability.MATHML})

    def __init__(self, options: MathOptions = None):
        pass

    def render_mathml(self, kind: MathKind, source: str) -> etree._Element:
        display = "block" if kind is MathKind.EQUATION else "inline"
        return etree.fromstring(latex_to_mathml(source.strip(), display=display))


@register_engine("mathtext")
class MathtextEngine(MathBackend):
    """
    PNG rendering with matplotlib mathtext (no external LaTeX installation).

    Images are written to options.png_dir under a content-addressed name when
    it is set, otherwise embedded as data URIs. Height and depth come from the
    mathtext layout box so the image can be aligned on the text baseline.
    """

    capabilities = frozenset({Capability.PNG})

    def __init__(self, options: MathOptions = None):
        options = options or MathOptions()
        self.dpi = options.png_dpi
        self.font_size = options.png_font_size
        self.png_dir = Path(options.png_dir) if options.png_dir else None
        self.png_url = options.png_url
        self._parser = MathTextParser("path")

    def render_png(self, kind: MathKind, source: str) -> RasterImage:
        text = f"${source.strip()}$"
        prop = FontProperties(size=self.font_size)

        buffer = io.BytesIO()
        depth_pt = math_to_image(text, buffer, prop=prop, dpi=self.dpi, format="png")
        # Layout box at 72 dpi: total height (above + below baseline) in points
        _, total_pt, _, _, _ = self._parser.parse(text, dpi=72, prop=prop)

        scale = self.dpi / 72.0
        depth = int(round(depth_pt * scale))
        height = max(int(round(total_pt * scale)) - depth, 1)

        png_bytes = buffer.getvalue()
        return RasterImage(src=self._store(text, png_bytes), height=height, depth=depth)

    def _store(self, text: str, png_bytes: bytes) -> str:
        if self.png_dir is None:
            return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")

        # Rendering parameters are part of the key so a DPI change invalidates old files
        key = hashlib.sha1(f"dpi={self.dpi}|fs={self.font_size}\n{text}".encode("utf-8")).hexdigest()[:12]
        filename = f"eq_{key}.png"
        self.png_dir.mkdir(parents=True, exist_ok=True)
        path = self.png_dir / filename
        if not path.exists():
            path.write_bytes(png_bytes)
            _log_debug(f"Wrote {path}")
        return f"{self.png_url}{filename}"


def build_registry(options: MathOptions = None) -> BackendRegistry:
    """
    Build a registry holding one instance of every registered engine.

    Args:
        options: Options passed to each engine constructor

    Returns:
        BackendRegistry with all engines from @register_engine
    """
    options = options or MathOptions()
    registry = BackendRegistry()
    for name, factory in ENGINE_FACTORIES.items():
        registry.register(name, factory(options))
    return registry
