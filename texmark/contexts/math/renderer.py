"""
Math Renderer

Dispatches math nodes to the configured engines. A configured engine that
doesn't exist is a configuration error and fails loudly; an engine that
exists but declines an input is normal and handled by falling back to the
null renderer (MathML) or returning None (PNG).
"""

from typing import Optional

from lxml import etree

from texmark.contexts.document.nodes import MathKind
from texmark.contexts.math.backends import BackendRegistry, Capability, RasterImage, RenderCallable
from texmark.contexts.math.config import MathOptions
from texmark.contexts.math.engines import NoneEngine, build_registry
from texmark.contexts.math.exceptions import MathEngineNotFoundError
from texmark.contexts.math.logger import _log_debug, _log_error, _log_warning


class MathRenderer:
    """
    Render TeX sources through the engines named in the options.

    Args:
        options: Resolved math options (engine names and output gates)
        registry: Backend registry; defaults to one holding the built-in engines
    """

    def __init__(self, options: MathOptions = None, registry: BackendRegistry = None):
        self.options = options or MathOptions()
        self.registry = registry if registry is not None else build_registry(self.options)
        self._null = NoneEngine(self.options)

    def render_mathml(self, kind: MathKind, source: str) -> etree._Element:
        """
        Render TeX to MathML with the configured math engine.

        Args:
            kind: Inline math or equation
            source: TeX source

        Returns:
            MathML element, or the null <code> rendering if the engine declined

        Raises:
            MathEngineNotFoundError: If the configured engine has no MathML backend
        """
        render = self._resolve(self.options.math_engine, Capability.MATHML)
        mathml = self._invoke(render, self.options.math_engine, kind, source)
        if mathml is None:
            return self.render_null(kind, source)
        return mathml

    def render_png(self, kind: MathKind, source: str) -> Optional[RasterImage]:
        """
        Render TeX to a PNG with the configured png engine.

        Returns:
            RasterImage, or None if the engine declined

        Raises:
            MathEngineNotFoundError: If the configured engine has no PNG backend
        """
        render = self._resolve(self.options.png_engine, Capability.PNG)
        return self._invoke(render, self.options.png_engine, kind, source)

    def render_null(self, kind: MathKind, source: str) -> etree._Element:
        """Explicit no-math rendering: the TeX source in a <code> element."""
        return self._null.render_mathml(kind, source)

    def _resolve(self, engine: str, capability: Capability) -> RenderCallable:
        render = self.registry.lookup(engine, capability)
        if render is None:
            available = self.registry.names(capability)
            _log_error(f"No {capability.value} backend registered for engine '{engine}'")
            raise MathEngineNotFoundError(
                f"Configured engine '{engine}' cannot render {capability.value}",
                engine=engine,
                capability=capability.value,
                available=available,
            )
        return render

    def _invoke(self, render: RenderCallable, engine: str, kind: MathKind, source: str):
        try:
            result = render(kind, source)
        except Exception as e:
            # Engine failures on a single input count as declining that input
            _log_warning(f"Engine '{engine}' failed on {kind.value} math {source!r}: {e}")
            return None

        if result is None:
            _log_debug(f"Engine '{engine}' declined {kind.value} math {source!r}")
        return result
