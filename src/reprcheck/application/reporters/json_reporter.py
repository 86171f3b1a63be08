"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from reprcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from reprcheck.domain.model.check_result import CheckResult
    from reprcheck.domain.model.diagnostic import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or editor tooling.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
                "files_checked": result.stats.files_checked,
                "declarations_checked": result.stats.declarations_checked,
                "declarations_skipped": result.stats.declarations_skipped,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            "errors": [{"file": str(e.path), "reason": e.reason} for e in result.errors],
            "fixed_files": [str(path) for path in result.fixed_files],
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        finding = diagnostic.finding
        suggestion = finding.suggestion
        location = diagnostic.location
        return {
            "lint": finding.lint_name,
            "level": diagnostic.level.value,
            "message": finding.message,
            "location": {
                "file": str(location.file),
                "line": location.line,
                "column": location.column,
                "end_line": location.end_line,
                "end_column": location.end_column,
            },
            "span": {"lo": finding.span.lo, "hi": finding.span.hi},
            "suggestion": {
                "message": suggestion.message,
                "span": {"lo": suggestion.span.lo, "hi": suggestion.span.hi},
                "replacement": suggestion.replacement,
                "applicability": suggestion.applicability.value,
            },
        }
