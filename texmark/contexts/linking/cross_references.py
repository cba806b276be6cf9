"""
Cross-reference resolution.

Resolves \\eqref and \\ref targets against the document's label tables and
renders numbered links. Unknown targets never raise: a diagnostic is recorded
on the document and literal placeholder text is rendered in place of the link.
"""

from typing import Optional

from texmark.contexts.document.diagnostics import IssueTemplates
from texmark.contexts.document.document_model import Document
from texmark.contexts.document.label_tables import Equation, NumberedBlock
from texmark.contexts.linking.logger import _log_debug
from texmark.contexts.linking.patterns import ANCHORS
from texmark.utils.markup import Fragment, element


class CrossReferenceResolver:
    """
    Render equation and block references for one document.

    Args:
        document: Document whose label tables are read and diagnostics written
    """

    def __init__(self, document: Document):
        self.document = document

    def resolve_equation(self, eqid: str) -> Optional[Equation]:
        return self.document.labels.find_equation(eqid)

    def resolve_reference(self, refid: str) -> Optional[NumberedBlock]:
        return self.document.labels.find_reference(refid)

    def render_eqref(self, eqid: str) -> Fragment:
        """
        Render a link to a numbered equation.

        Returns:
            <a class="eq-ref" href="#eq:<id>">(N)</a>, or the text "(eq:<id>)" if unknown
        """
        equation = self.resolve_equation(eqid)
        if equation is None:
            self.document.diagnostics.add(IssueTemplates.EQUATION_NOT_FOUND.format(eqid=eqid))
            return ANCHORS.EQUATION_FALLBACK.format(eqid=eqid)

        _log_debug(f"eqref {eqid!r} -> ({equation.number})")
        return element(
            "a",
            ANCHORS.EQUATION_NUMBER.format(number=equation.number),
            class_="eq-ref",
            href="#" + ANCHORS.EQUATION_ID.format(label=eqid),
        )

    def render_ref(self, refid: str) -> Fragment:
        """
        Render a link to a labelled block.

        Returns:
            <a class="ref" href="#<id>">N</a>, or the text "\\ref{<id>}" if unknown
        """
        block = self.resolve_reference(refid)
        if block is None:
            self.document.diagnostics.add(IssueTemplates.REFERENCE_NOT_FOUND.format(refid=refid))
            return ANCHORS.REFERENCE_FALLBACK.format(refid=refid)

        _log_debug(f"ref {refid!r} -> {block.container} {block.number}")
        return element("a", str(block.number), class_="ref", href=f"#{refid}")
