"""
Document-level diagnostics.

Recoverable problems found while rendering (e.g. references to labels that do
not exist) are recorded here instead of raised, so one bad reference never
stops the rest of the document from rendering.
"""

from dataclasses import dataclass, field
from typing import List

from texmark.contexts.document.logger import _log_warning


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    EQUATION_NOT_FOUND = "Cannot find equation {eqid!r}"
    REFERENCE_NOT_FOUND = "Cannot find div {refid!r}"
    DUPLICATE_REFERENCE = (
        "Reference {refid!r} is registered in both '{first}' and '{second}'; "
        "links resolve to '{first}'"
    )


@dataclass
class DocumentDiagnostics:
    """
    Collected diagnostics for one document.

    Attributes:
        issues: Diagnostic messages in the order they were reported
    """

    issues: List[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        """Record a diagnostic and log it as a warning."""
        self.issues.append(message)
        _log_warning(message)

    def __len__(self) -> int:
        return len(self.issues)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
