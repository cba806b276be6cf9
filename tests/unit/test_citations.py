"""Unit tests for citation classification and formatting."""

import pytest

from texmark.contexts.linking.citations import CitationFormatter, CitationStyle, classify
from texmark.utils.markup import text_content, to_html


class TestClassify:
    """Tests for citation key classification."""

    @pytest.mark.unit
    def test_inspire_key(self):
        """Test INSPIRE texkeys link to an INSPIRE search."""
        token = classify("Weinberg:1967tq")

        assert token.style is CitationStyle.INSPIRE
        assert token.href == "https://inspirehep.net/search?p=Weinberg%3A1967tq"

    @pytest.mark.unit
    def test_inspire_key_with_three_letters(self):
        """Test three-letter INSPIRE suffixes are recognized."""
        assert classify("tHooft:1971akt").style is CitationStyle.INSPIRE

    @pytest.mark.unit
    def test_math_reviews_key(self):
        """Test MR numbers link to MathSciNet."""
        token = classify("MR1234567")

        assert token.style is CitationStyle.MATH_REVIEWS
        assert token.href == "https://mathscinet.ams.org/mathscinet-getitem?mr=1234567"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key",
        ["Foo", "Weinberg:67tq", "Weinberg:1967", "Weinberg:1967abcd", "MR", "NMR123", "MR12a"],
    )
    def test_plain_keys(self, key):
        """Test keys matching no pattern in full stay plain."""
        token = classify(key)

        assert token.style is CitationStyle.PLAIN
        assert token.href is None
        assert token.render() == key


class TestCitationFormatter:
    """Tests for CitationFormatter.render."""

    @pytest.mark.unit
    def test_mixed_citation_list(self):
        """Test INSPIRE, MathReviews and plain keys in one list."""
        span = CitationFormatter().render(["Weinberg:1967tq", "MR1234567", "Foo"])

        assert to_html(span) == (
            '<span class="citation">['
            '<a href="https://inspirehep.net/search?p=Weinberg%3A1967tq">Weinberg:1967tq</a>, '
            '<a href="https://mathscinet.ams.org/mathscinet-getitem?mr=1234567">MR1234567</a>, '
            "Foo]</span>"
        )
        assert text_content(span) == "[Weinberg:1967tq, MR1234567, Foo]"

    @pytest.mark.unit
    def test_empty_list(self):
        """Test an empty list renders as []."""
        span = CitationFormatter().render([])

        assert text_content(span) == "[]"
        assert to_html(span) == '<span class="citation">[]</span>'

    @pytest.mark.unit
    def test_single_plain_key(self):
        """Test a single key has no separator."""
        assert text_content(CitationFormatter().render(["Foo"])) == "[Foo]"

    @pytest.mark.unit
    def test_link_as_last_item(self):
        """Test the closing bracket follows a trailing link without a comma."""
        span = CitationFormatter().render(["Foo", "MR42"])

        assert text_content(span) == "[Foo, MR42]"
        assert span[-1].tail == "]"

    @pytest.mark.unit
    def test_duplicates_and_order_preserved(self):
        """Test keys render in input order, duplicates included."""
        span = CitationFormatter().render(["b", "a", "b"])
        assert text_content(span) == "[b, a, b]"

    @pytest.mark.unit
    def test_keys_are_escaped(self):
        """Test plain keys are escaped on serialization."""
        span = CitationFormatter().render(["A&B"])
        assert to_html(span) == '<span class="citation">[A&amp;B]</span>'
