"""Lint finding and suggestion value objects."""

from __future__ import annotations

from dataclasses import dataclass

from reprcheck.domain.model.enums import Applicability
from reprcheck.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Proposed source edit: replace span with replacement.

    Attributes:
        span: Text range to replace (empty span = insertion)
        replacement: New text for span
        applicability: Confidence that applying the edit is correct
        message: Help text shown next to the edit
    """

    span: Span
    replacement: str
    applicability: Applicability
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.span is None:
            raise TypeError("span must not be None")
        if not self.message:
            raise ValueError("message must not be empty")


@dataclass(frozen=True, slots=True)
class LintFinding:
    """One problem reported by a lint for one declaration.

    Attributes:
        lint_name: Name of the lint that produced the finding
        message: Fixed diagnostic message
        span: Flagged span
        suggestion: Proposed fix
    """

    lint_name: str
    message: str
    span: Span
    suggestion: Suggestion

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.lint_name:
            raise ValueError("lint_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def applicability(self) -> Applicability:
        """Applicability of the suggested fix."""
        return self.suggestion.applicability

    @property
    def help(self) -> str:
        """Help text of the suggested fix."""
        return self.suggestion.message
