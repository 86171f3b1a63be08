"""Plain text reporter using print().

Stdlib-only reporter, compiler-style output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from reprcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from reprcheck.domain.model.check_result import CheckResult
    from reprcheck.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for diagnostic in result.diagnostics:
            self._report_diagnostic(diagnostic)

        for error in result.errors:
            self._write(f"error: could not lint {error.path}: {error.reason}")
            self._write()

        self._report_summary(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Print one diagnostic with its source line and suggestion."""
        location = diagnostic.location
        gutter = " " * len(str(location.line))
        suggestion = diagnostic.finding.suggestion

        self._write(f"{diagnostic.level.value}: {diagnostic.message}")
        self._write(f"{gutter}--> {location}")
        self._write(f"{gutter} |")
        self._write(f"{location.line} | {diagnostic.source_line}")
        self._write(f"{gutter} |")
        self._write(f"{gutter} = note: `#[{diagnostic.level.value}(clippy::{diagnostic.lint_name})]`")
        self._write(f"{gutter} = help: {suggestion.message} ({suggestion.applicability.value})")
        for line in suggestion.replacement.splitlines():
            self._write(f"{gutter} + {line}")
        self._write()

    def _report_summary(self, result: CheckResult) -> None:
        """Print summary line."""
        stats = result.stats
        self._write(
            f"{stats.files_checked} file(s), {stats.declarations_checked} declaration(s) checked: "
            f"{result.warning_count} warning(s), {result.error_count} error(s)"
        )
        if result.fixed_files:
            self._write(f"fixed {len(result.fixed_files)} file(s)")
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")
