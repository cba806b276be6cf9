"""
Document Context

Responsibilities:
- Defines the typed nodes handed over by the document parser
- Holds document-wide label tables for equations and labelled blocks
- Collects recoverable rendering diagnostics
- Loads YAML document descriptions for previews and tests

Owns: Node types, label tables, diagnostics
Never: Produces markup
"""

from texmark.contexts.document.diagnostics import DocumentDiagnostics, IssueTemplates
from texmark.contexts.document.document_model import Document
from texmark.contexts.document.exceptions import InvalidDocumentStructureError
from texmark.contexts.document.label_tables import Equation, LabelTable, NumberedBlock
from texmark.contexts.document.loader import build_document, load_document
from texmark.contexts.document.nodes import (
    BlockReference,
    Citation,
    EquationReference,
    MathContent,
    MathKind,
)

__all__ = [
    # Nodes
    "MathKind",
    "MathContent",
    "Citation",
    "EquationReference",
    "BlockReference",
    # Label tables and document state
    "Equation",
    "NumberedBlock",
    "LabelTable",
    "Document",
    "DocumentDiagnostics",
    "IssueTemplates",
    # Loading
    "load_document",
    "build_document",
    "InvalidDocumentStructureError",
]
