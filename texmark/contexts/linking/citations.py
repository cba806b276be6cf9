"""
Citation list formatting.

Each key is classified against known bibliographic identifier patterns:

- INSPIRE texkeys (Weinberg:1967tq) link to an INSPIRE search
- MathSciNet numbers (MR1234567) link to the MathSciNet review
- anything else is rendered as plain text

The list is rendered as [key, key, ...] with keys in their original order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from lxml import etree

from texmark.contexts.linking.patterns import CITATION_PATTERNS, LOOKUP_URLS
from texmark.utils.markup import Fragment, append_fragment, append_text, element

SEPARATOR = ", "


class CitationStyle(str, Enum):
    INSPIRE = "inspire"
    MATH_REVIEWS = "math_reviews"
    PLAIN = "plain"


@dataclass(frozen=True)
class CitationToken:
    """A classified citation key (href is None for plain keys)."""

    key: str
    style: CitationStyle
    href: Optional[str] = None

    def render(self) -> Fragment:
        if self.href is None:
            return self.key
        return element("a", self.key, href=self.href)


def classify(key: str) -> CitationToken:
    """Classify a citation key by pattern."""
    match = CITATION_PATTERNS.INSPIRE.fullmatch(key)
    if match:
        href = LOOKUP_URLS.INSPIRE.format(author=match.group(1), code=match.group(2))
        return CitationToken(key, CitationStyle.INSPIRE, href)

    match = CITATION_PATTERNS.MATH_REVIEWS.fullmatch(key)
    if match:
        href = LOOKUP_URLS.MATH_REVIEWS.format(number=match.group(1))
        return CitationToken(key, CitationStyle.MATH_REVIEWS, href)

    return CitationToken(key, CitationStyle.PLAIN)


class CitationFormatter:
    """Render citation key lists as bracketed, comma-separated links."""

    def tokens(self, keys: Iterable[str]) -> List[CitationToken]:
        return [classify(key) for key in keys]

    def render(self, keys: Iterable[str]) -> etree._Element:
        """
        Render a citation list.

        Args:
            keys: Citation keys in document order (duplicates kept)

        Returns:
            <span class="citation">[...]</span>
        """
        span = element("span", "[", class_="citation")
        for position, token in enumerate(self.tokens(keys)):
            if position:
                append_text(span, SEPARATOR)
            append_fragment(span, token.render())
        append_text(span, "]")
        return span
