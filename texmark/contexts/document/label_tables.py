"""
Document-wide label tables.

Equations and labelled blocks are numbered in document order before rendering
starts; the renderers only read these tables.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from texmark.contexts.document.logger import _log_debug, _log_warning
from texmark.contexts.document.diagnostics import IssueTemplates


@dataclass(frozen=True)
class Equation:
    """A numbered, labelled equation."""

    label: str
    number: int


@dataclass(frozen=True)
class NumberedBlock:
    """
    A labelled block (theorem, figure, section, ...) owned by a container.

    Attributes:
        refid: Identifier used by \\ref
        number: Number displayed by references to this block
        container: Name of the owning reference container (e.g. 'theorem')
    """

    refid: str
    number: int
    container: str


class LabelTable:
    """
    Equation and block label tables for a single document.

    Equation ids are unique. Block ids are unique within their container; an
    id repeated across containers is an authoring error and resolves to the
    container registered first.
    """

    def __init__(self):
        self.equations: Dict[str, Equation] = {}
        self.containers: Dict[str, Dict[str, NumberedBlock]] = {}
        self._index: Optional[Dict[str, NumberedBlock]] = None

    def add_equation(self, label: str, number: int) -> Equation:
        """
        Register a numbered equation.

        Raises:
            ValueError: If the label is already registered
        """
        if label in self.equations:
            raise ValueError(f"Equation label {label!r} is already registered")
        if number <= 0:
            raise ValueError(f"Equation number must be positive, got {number}")

        equation = Equation(label=label, number=number)
        self.equations[label] = equation
        return equation

    def next_equation_number(self) -> int:
        """Number the next labelled equation would receive in document order."""
        return len(self.equations) + 1

    def add_reference(self, container: str, refid: str, number: int) -> NumberedBlock:
        """
        Register a labelled block under a reference container.

        Raises:
            ValueError: If the id is already registered in the same container
        """
        blocks = self.containers.setdefault(container, {})
        if refid in blocks:
            raise ValueError(f"Reference {refid!r} is already registered in '{container}'")

        block = NumberedBlock(refid=refid, number=number, container=container)
        blocks[refid] = block
        self._index = None
        return block

    def find_equation(self, eqid: str) -> Optional[Equation]:
        return self.equations.get(eqid)

    def find_reference(self, refid: str) -> Optional[NumberedBlock]:
        """Look up a block id across all containers (first registered wins)."""
        if self._index is None:
            self._index = self._build_index()
        return self._index.get(refid)

    def duplicate_references(self) -> List[Tuple[str, str, str]]:
        """List (refid, first_container, shadowed_container) for ids in several containers."""
        seen: Dict[str, str] = {}
        duplicates = []
        for container, blocks in self.containers.items():
            for refid in blocks:
                if refid in seen:
                    duplicates.append((refid, seen[refid], container))
                else:
                    seen[refid] = container
        return duplicates

    def _build_index(self) -> Dict[str, NumberedBlock]:
        index: Dict[str, NumberedBlock] = {}
        for blocks in self.containers.values():
            for refid, block in blocks.items():
                index.setdefault(refid, block)

        for refid, first, second in self.duplicate_references():
            _log_warning(IssueTemplates.DUPLICATE_REFERENCE.format(refid=refid, first=first, second=second))

        _log_debug(f"Indexed {len(index)} references across {len(self.containers)} containers")
        return index
