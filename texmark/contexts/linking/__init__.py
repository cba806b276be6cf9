"""
Linking Context

Responsibilities:
- Resolves equation and block references against document label tables
- Reports unresolved references as document diagnostics
- Classifies and links bibliographic citation keys

Owns: Cross-reference links, citation lists, link patterns
Never: Assigns numbers or modifies label tables
"""

from texmark.contexts.linking.citations import (
    CitationFormatter,
    CitationStyle,
    CitationToken,
    classify,
)
from texmark.contexts.linking.cross_references import CrossReferenceResolver

__all__ = [
    "CrossReferenceResolver",
    "CitationFormatter",
    "CitationStyle",
    "CitationToken",
    "classify",
]
