"""Check statistics for lint results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from a lint run.

    Attributes:
        files_checked: Number of source files linted
        declarations_checked: Number of aggregate declarations examined
        declarations_skipped: Declarations skipped because of syntax errors
        lint_passes_run: Number of lint passes executed per declaration
        analysis_time_ms: Total analysis time in milliseconds
    """

    files_checked: int
    declarations_checked: int
    declarations_skipped: int
    lint_passes_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.declarations_checked < 0:
            raise ValueError(f"declarations_checked must be >= 0, got {self.declarations_checked}")
        if self.declarations_skipped < 0:
            raise ValueError(f"declarations_skipped must be >= 0, got {self.declarations_skipped}")
        if self.lint_passes_run < 0:
            raise ValueError(f"lint_passes_run must be >= 0, got {self.lint_passes_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            files_checked=0,
            declarations_checked=0,
            declarations_skipped=0,
            lint_passes_run=0,
            analysis_time_ms=0.0,
        )
