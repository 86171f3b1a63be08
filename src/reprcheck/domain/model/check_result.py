"""Check result aggregate for lint runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reprcheck.domain.model.check_stats import CheckStats
from reprcheck.domain.model.diagnostic import Diagnostic
from reprcheck.domain.model.enums import LintLevel


@dataclass(frozen=True, slots=True)
class FileError:
    """File that could not be linted.

    Attributes:
        path: Offending file
        reason: Why it could not be linted
    """

    path: Path
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.reason:
            raise ValueError("reason must not be empty")


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a lint run.

    Immutable aggregate containing all results.
    Used by ReporterProtocol.report() method.

    Attributes:
        diagnostics: All emitted diagnostics, ordered by file and position
        errors: Files that could not be read
        fixed_files: Files rewritten by the fix applier
        stats: Run statistics
    """

    diagnostics: tuple[Diagnostic, ...]
    errors: tuple[FileError, ...]
    fixed_files: tuple[Path, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """Check if run passed (no error-level diagnostics, no unreadable files)."""
        return self.error_count == 0 and not self.errors

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Number of DENY/FORBID diagnostics."""
        return sum(1 for d in self.diagnostics if d.level.is_error)

    @property
    def warning_count(self) -> int:
        """Number of WARN diagnostics."""
        return sum(1 for d in self.diagnostics if d.level is LintLevel.WARN)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no diagnostics)."""
        return cls(diagnostics=(), errors=(), fixed_files=(), stats=CheckStats.empty())
