"""
Integration tests for loading YAML documents and rendering preview pages.
"""

from pathlib import Path

import pytest

from texmark.contexts.document import (
    BlockReference,
    Citation,
    EquationReference,
    InvalidDocumentStructureError,
    MathContent,
    MathKind,
    build_document,
    load_document,
)
from texmark.contexts.math.config import MathOptions
from texmark.contexts.rendering.assembler import FragmentAssembler

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.mark.integration
def test_load_sample_document():
    """Test nodes and label tables are built from YAML."""
    document, nodes = load_document(FIXTURES_PATH / "sample_document.yaml")

    assert document.title == "Electroweak Notes"
    assert len(nodes) == 11
    assert nodes[0] == MathContent(MathKind.INLINE, r"e^{i\pi} + 1 = 0")
    assert nodes[1].label == "energy" and nodes[1].number == 1
    assert nodes[2].number is None
    assert nodes[3].number == 2
    assert nodes[4] == EquationReference("weinberg-angle")
    assert nodes[6] == BlockReference("thm-mass")
    assert nodes[9] == Citation(["Weinberg:1967tq", "MR1234567", "Glashow"])

    assert document.labels.find_equation("weinberg-angle").number == 2
    assert document.labels.find_reference("thm-mass").number == 2
    assert document.labels.find_reference("fig-feynman").number == 1


@pytest.mark.integration
def test_render_sample_document():
    """Test the sample document renders fully despite one broken reference."""
    document, nodes = load_document(FIXTURES_PATH / "sample_document.yaml")
    assembler = FragmentAssembler(document, MathOptions())

    fragments = assembler.render_all(nodes)

    assert fragments[1].startswith('<div class="math-equation" id="eq:energy">')
    assert '<span class="eq-number">(1)</span>' in fragments[1]
    assert 'id=' not in fragments[2]
    assert fragments[4] == '<a class="eq-ref" href="#eq:weinberg-angle">(2)</a>'
    assert fragments[5] == '<a class="eq-ref" href="#eq:energy">(1)</a>'
    assert fragments[6] == '<a class="ref" href="#thm-mass">2</a>'
    assert fragments[7] == '<a class="ref" href="#fig-feynman">1</a>'
    assert fragments[8] == r"\ref{thm-missing}"
    assert "inspirehep.net" in fragments[9]
    assert fragments[9].endswith(", Glashow]</span>")
    assert fragments[10] == '<span class="citation">[]</span>'

    assert document.diagnostics.issues == ["Cannot find div 'thm-missing'"]


@pytest.mark.integration
def test_render_sample_page():
    """Test the preview page contains every fragment."""
    document, nodes = load_document(FIXTURES_PATH / "sample_document.yaml")

    page = FragmentAssembler(document, MathOptions()).render_document(nodes)

    assert "<title>Electroweak Notes</title>" in page
    assert page.count('class="fragment"') == len(nodes)


@pytest.mark.integration
def test_missing_document():
    """Test missing files are reported clearly."""
    with pytest.raises(FileNotFoundError):
        load_document(FIXTURES_PATH / "missing.yaml")


@pytest.mark.integration
@pytest.mark.parametrize(
    "data,message",
    [
        ({"title": "No nodes"}, "nodes"),
        ({"nodes": None}, "nodes"),
        ({"nodes": "inline"}, "nodes"),
        ({"nodes": ["inline"]}, "must be a mapping"),
        ({"blocks": "thm-a", "nodes": []}, "blocks"),
        ({"blocks": {"theorem": "thm-a"}, "nodes": []}, "must be a list of ids"),
        ({"blocks": {"theorem": ["thm-a", "thm-a"]}, "nodes": []}, "theorem"),
        ({"nodes": [{"type": "cite", "keys": "Glashow"}]}, "keys"),
        ({"nodes": [{"type": "footnote"}]}, "unknown type"),
        ({"nodes": [{"type": "inline"}]}, "missing required field"),
        (
            {
                "nodes": [
                    {"type": "equation", "source": "a", "label": "x"},
                    {"type": "equation", "source": "b", "label": "x"},
                ]
            },
            "already registered",
        ),
    ],
)
def test_invalid_structure(data, message):
    """Test malformed documents raise InvalidDocumentStructureError."""
    with pytest.raises(InvalidDocumentStructureError, match=message):
        build_document(data)


@pytest.mark.integration
def test_numeric_labels_resolve():
    """Test numeric YAML labels and ids are matched as strings."""
    document, nodes = build_document(
        {
            "blocks": {"theorem": [7]},
            "nodes": [
                {"type": "equation", "source": "x", "label": 1},
                {"type": "eqref", "id": 1},
                {"type": "ref", "id": 7},
            ],
        }
    )
    assembler = FragmentAssembler(document, MathOptions(math_engine="none"))

    fragments = assembler.render_all(nodes)

    assert nodes[0].label == "1"
    assert fragments[0].startswith('<div class="math-equation" id="eq:1">')
    assert fragments[1] == '<a class="eq-ref" href="#eq:1">(1)</a>'
    assert fragments[2] == '<a class="ref" href="#7">1</a>'
    assert not document.diagnostics.has_issues
