"""
Typed document nodes consumed by the renderers.

Nodes are created upstream by the document parser and treated as immutable
inputs here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class MathKind(str, Enum):
    """Placement of a math node in the flow of text."""

    INLINE = "inline"
    EQUATION = "equation"


@dataclass(frozen=True)
class MathContent:
    """
    TeX math embedded in the document.

    Attributes:
        kind: Inline math or display equation
        source: Raw TeX source (without $ delimiters)
        label: Equation label, if the equation is referenceable
        number: Equation number assigned in document order (set iff label is set)
    """

    kind: MathKind
    source: str
    label: Optional[str] = None
    number: Optional[int] = None

    def __post_init__(self):
        if (self.label is None) != (self.number is None):
            raise ValueError(
                f"Equation label and number must be set together "
                f"(label={self.label!r}, number={self.number!r})"
            )
        if self.label is not None and self.kind is not MathKind.EQUATION:
            raise ValueError(f"Only equations can carry a label, got {self.kind.value} math")

    @property
    def is_numbered(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class Citation:
    """Ordered citation keys; duplicates are kept."""

    keys: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of keys
        object.__setattr__(self, "keys", tuple(self.keys))


@dataclass(frozen=True)
class EquationReference:
    """Reference to a labelled equation (\\eqref)."""

    eqid: str


@dataclass(frozen=True)
class BlockReference:
    """Reference to a labelled block such as a theorem or figure (\\ref)."""

    refid: str
