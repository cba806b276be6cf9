"""Document handle passed to the renderers."""

from dataclasses import dataclass, field

from texmark.contexts.document.diagnostics import DocumentDiagnostics
from texmark.contexts.document.label_tables import LabelTable


@dataclass
class Document:
    """
    Per-document rendering state.

    Attributes:
        title: Document title (used by preview pages)
        labels: Equation and block label tables (read-only during rendering)
        diagnostics: Recoverable issues reported while rendering
    """

    title: str = ""
    labels: LabelTable = field(default_factory=LabelTable)
    diagnostics: DocumentDiagnostics = field(default_factory=DocumentDiagnostics)
