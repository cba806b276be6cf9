"""
Fragment Assembly

Turns document nodes into HTML fragments by composing the math renderer,
image aligner, cross-reference resolver and citation formatter.

Output shapes:
- inline math:  <span class="math-inline"> with MathML (math-mathml) or <img> (math-png),
                or the TeX source in <code class="math-null">
- equation:     <div class="math-equation" id="eq:<label>"> with an optional
                <span class="eq-number">(N)</span>, MathML and/or <img>
- eqref / ref:  <a class="eq-ref"> / <a class="ref">, or placeholder text
- citation:     <span class="citation">[...]</span>
"""

import time
from typing import Iterable, List, Optional, Tuple

from lxml import etree

from texmark.contexts.document.document_model import Document
from texmark.contexts.document.nodes import (
    BlockReference,
    Citation,
    EquationReference,
    MathContent,
    MathKind,
)
from texmark.contexts.linking.citations import CitationFormatter
from texmark.contexts.linking.cross_references import CrossReferenceResolver
from texmark.contexts.linking.patterns import ANCHORS
from texmark.contexts.math.alignment import ImageAligner
from texmark.contexts.math.backends import RasterImage
from texmark.contexts.math.config import MathOptions
from texmark.contexts.math.engines import NULL_CLASS
from texmark.contexts.math.renderer import MathRenderer
from texmark.contexts.rendering.logger import _log_debug, _log_info, log_render_result
from texmark.contexts.rendering.page import render_page
from texmark.utils.markup import Fragment, add_class, element, has_class, to_html


class FragmentAssembler:
    """
    Render document nodes to markup fragments.

    Args:
        document: Document providing label tables and collecting diagnostics
        options: Math options (ignored when a renderer is given)
        renderer: Math renderer; built from options by default
        aligner: Image aligner; uses the process-wide baseline metric by default
    """

    def __init__(
        self,
        document: Document,
        options: MathOptions = None,
        renderer: MathRenderer = None,
        aligner: ImageAligner = None,
    ):
        self.document = document
        self.renderer = renderer or MathRenderer(options)
        self.options = self.renderer.options
        self.aligner = aligner or ImageAligner(self.renderer)
        self.resolver = CrossReferenceResolver(document)
        self.citations = CitationFormatter()

        self._handlers = {
            MathContent: self.render_math,
            Citation: self.render_citation,
            EquationReference: self.render_eqref,
            BlockReference: self.render_ref,
        }

    def render(self, node) -> Fragment:
        """
        Render a single node.

        Raises:
            TypeError: If the node type is not supported
            ConfigurationError: If a configured engine does not exist
        """
        handler = self._handlers.get(type(node))
        if handler is None:
            raise TypeError(f"Cannot render node of type {type(node).__name__}")
        return handler(node)

    def to_html(self, node) -> str:
        return to_html(self.render(node))

    def render_all(self, nodes: Iterable) -> List[str]:
        """Render nodes in order and serialize each fragment."""
        return [self.to_html(node) for node in nodes]

    def render_document(self, nodes: Iterable) -> str:
        """Render nodes into a standalone HTML preview page."""
        start = time.time()
        title = self.document.title or "Untitled"
        _log_info(f"Rendering {title}")

        fragments = self.render_all(nodes)
        page = render_page(title, fragments)

        log_render_result(title, len(fragments), self.document.diagnostics.issues, time.time() - start)
        return page

    # Math

    def render_math(self, node: MathContent) -> etree._Element:
        if node.kind is MathKind.EQUATION:
            return self.render_equation(node)
        return self.render_inline_math(node)

    def render_inline_math(self, node: MathContent) -> etree._Element:
        span = element("span", class_="math-inline")
        mathml, png = self._render_outputs(node)

        if mathml is not None:
            span.append(self._mathml(mathml))
        elif png is not None:
            span.append(self._image(png, node.source, use_depth=True))
        else:
            span.append(self.renderer.render_null(node.kind, node.source))
        return span

    def render_equation(self, node: MathContent) -> etree._Element:
        div = element("div", class_="math-equation")
        mathml, png = self._render_outputs(node)

        if node.is_numbered:
            div.set("id", ANCHORS.EQUATION_ID.format(label=node.label))
            div.append(element("span", ANCHORS.EQUATION_NUMBER.format(number=node.number), class_="eq-number"))

        if mathml is None and png is None:
            div.append(self.renderer.render_null(node.kind, node.source))
        if mathml is not None:
            div.append(self._mathml(mathml))
        if png is not None:
            div.append(self._image(png, node.source, use_depth=False))
        return div

    def _render_outputs(self, node: MathContent) -> Tuple[Optional[etree._Element], Optional[RasterImage]]:
        mathml = self.renderer.render_mathml(node.kind, node.source) if self.options.output_mathml else None
        png = self.renderer.render_png(node.kind, node.source) if self.options.output_png else None
        _log_debug(
            f"{node.kind.value} {node.source!r}: mathml={mathml is not None}, png={png is not None}"
        )
        return mathml, png

    def _mathml(self, mathml: etree._Element) -> etree._Element:
        if has_class(mathml, NULL_CLASS):
            return mathml
        return add_class(mathml, "math-mathml")

    def _image(self, png: RasterImage, source: str, use_depth: bool) -> etree._Element:
        aligned = self.aligner.align(png, source, use_depth)
        return element("img", class_="math-png", src=aligned.src, style=aligned.css, alt=aligned.alt)

    # Links

    def render_eqref(self, node: EquationReference) -> Fragment:
        return self.resolver.render_eqref(node.eqid)

    def render_ref(self, node: BlockReference) -> Fragment:
        return self.resolver.render_ref(node.refid)

    def render_citation(self, node: Citation) -> etree._Element:
        return self.citations.render(node.keys)
