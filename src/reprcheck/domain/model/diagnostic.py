"""Diagnostic entity: a finding placed in a file at a lint level."""

from __future__ import annotations

from dataclasses import dataclass

from reprcheck.domain.model.enums import LintLevel
from reprcheck.domain.model.finding import LintFinding
from reprcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Reportable lint finding.

    Attributes:
        finding: Finding produced by the lint
        level: Effective lint level (always an emitted level)
        location: Where the flagged span starts
        source_line: Text of the first flagged line, for rendering
    """

    finding: LintFinding
    level: LintLevel
    location: Location
    source_line: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.level.is_emitted:
            raise ValueError(f"diagnostic level must be emitted, got {self.level.value}")

    @property
    def lint_name(self) -> str:
        return self.finding.lint_name

    @property
    def message(self) -> str:
        return self.finding.message

    def __str__(self) -> str:
        """Format diagnostic for display."""
        suggestion = self.finding.suggestion
        lines = [
            f"{self.level.value}: {self.message}",
            f"  --> {self.location}",
            f"  = help: {suggestion.message}",
            f"  = note: `{self.level.value}` lint: {self.lint_name}",
        ]
        for replacement_line in suggestion.replacement.splitlines():
            lines.append(f"  + {replacement_line}")
        return "\n".join(lines)
