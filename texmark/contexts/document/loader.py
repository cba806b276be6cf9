"""
YAML document loader.

Builds a Document and its node list from a YAML description. Labelled
equations and blocks are numbered in document order while loading, so the
label tables are complete before any node is rendered.

Expected structure:

    title: Sample
    blocks:
      theorem: [thm-main, thm-aux]
    nodes:
      - {type: inline, source: "x^2"}
      - {type: equation, source: "E = mc^2", label: energy}
      - {type: eqref, id: energy}
      - {type: ref, id: thm-main}
      - {type: cite, keys: [Weinberg:1967tq, MR1234567]}
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from omegaconf import OmegaConf

from texmark.contexts.document.document_model import Document
from texmark.contexts.document.exceptions import InvalidDocumentStructureError
from texmark.contexts.document.logger import _log_debug, _log_info
from texmark.contexts.document.nodes import (
    BlockReference,
    Citation,
    EquationReference,
    MathContent,
    MathKind,
)

Node = Union[MathContent, Citation, EquationReference, BlockReference]

NODE_TYPES = ["inline", "equation", "eqref", "ref", "cite"]


def load_document(path: Path) -> Tuple[Document, List[Node]]:
    """
    Load a YAML document description.

    Args:
        path: Path to the YAML file

    Returns:
        Tuple of (document, nodes in document order)

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidDocumentStructureError: If the structure is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    document, nodes = build_document(data)
    _log_info(f"Loaded {path.name}: {len(nodes)} nodes, {len(document.labels.equations)} equations")
    return document, nodes


def build_document(data: Dict[str, Any]) -> Tuple[Document, List[Node]]:
    """Build a Document and its nodes from an already-parsed mapping."""
    if not isinstance(data, dict):
        raise InvalidDocumentStructureError("Document must be a mapping at root level")
    if not isinstance(data.get("nodes"), list):
        raise InvalidDocumentStructureError("Document must contain a 'nodes' list")

    document = Document(title=data.get("title") or "")

    blocks = data.get("blocks") or {}
    if not isinstance(blocks, dict):
        raise InvalidDocumentStructureError("'blocks' must map container names to lists of ids")
    for container, refids in blocks.items():
        if not isinstance(refids, list):
            raise InvalidDocumentStructureError(
                f"Blocks for container '{container}' must be a list of ids, got {type(refids).__name__}"
            )
        try:
            for number, refid in enumerate(refids, 1):
                document.labels.add_reference(str(container), str(refid), number)
        except ValueError as e:
            raise InvalidDocumentStructureError(f"Blocks for container '{container}': {e}") from e
        _log_debug(f"Registered {len(refids)} '{container}' blocks")

    nodes = [_build_node(document, entry, position) for position, entry in enumerate(data["nodes"])]
    return document, nodes


def _build_node(document: Document, entry: Dict[str, Any], position: int) -> Node:
    if not isinstance(entry, dict):
        raise InvalidDocumentStructureError(
            f"Node {position} must be a mapping with a 'type' field, got {entry!r}"
        )
    node_type = entry.get("type")

    try:
        if node_type == "inline":
            return MathContent(MathKind.INLINE, str(entry["source"]))
        if node_type == "equation":
            if entry.get("label") is None:
                return MathContent(MathKind.EQUATION, str(entry["source"]))
            label = str(entry["label"])
            number = document.labels.next_equation_number()
            document.labels.add_equation(label, number)
            return MathContent(MathKind.EQUATION, str(entry["source"]), label=label, number=number)
        if node_type == "eqref":
            return EquationReference(str(entry["id"]))
        if node_type == "ref":
            return BlockReference(str(entry["id"]))
        if node_type == "cite":
            keys = entry.get("keys") or []
            if not isinstance(keys, list):
                raise ValueError("'keys' must be a list")
            return Citation([str(key) for key in keys])
    except KeyError as e:
        raise InvalidDocumentStructureError(
            f"Node {position} ({node_type}) is missing required field {e}"
        ) from e
    except ValueError as e:
        raise InvalidDocumentStructureError(f"Node {position} ({node_type}): {e}") from e

    raise InvalidDocumentStructureError(
        f"Node {position} has unknown type {node_type!r}. Available types: {NODE_TYPES}"
    )
