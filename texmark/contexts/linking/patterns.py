"""
Link Pattern Constants

Citation key patterns, lookup URL templates and anchor formats.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class CitationPatterns:
    """
    Bibliographic key patterns.

    Keys must match in full; anything else is rendered as plain text.
    """
    # INSPIRE texkeys: Author:YYYYxx (e.g. Weinberg:1967tq)
    INSPIRE: re.Pattern = re.compile(r"(\w+):(\d{4}[A-Za-z]{2,3})")
    # MathSciNet review numbers: MR1234567
    MATH_REVIEWS: re.Pattern = re.compile(r"MR(\d+)")


@dataclass(frozen=True)
class LookupURLs:
    """External lookup URL templates for recognized citation keys."""
    INSPIRE: str = "https://inspirehep.net/search?p={author}%3A{code}"
    MATH_REVIEWS: str = "https://mathscinet.ams.org/mathscinet-getitem?mr={number}"


@dataclass(frozen=True)
class AnchorFormats:
    """
    Anchor ids, link texts and fallback texts for cross-references.

    Used by both the resolver (links) and the assembler (equation ids).
    """
    EQUATION_ID: str = "eq:{label}"
    EQUATION_NUMBER: str = "({number})"
    EQUATION_FALLBACK: str = "(eq:{eqid})"
    REFERENCE_FALLBACK: str = "\\ref{{{refid}}}"


CITATION_PATTERNS = CitationPatterns()
LOOKUP_URLS = LookupURLs()
ANCHORS = AnchorFormats()
