"""Console reporter: CheckResult -> rich formatted output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reprcheck.application.reporters._base import BaseReporter
from reprcheck.domain.model.enums import LintLevel

if TYPE_CHECKING:
    from reprcheck.domain.model.check_result import CheckResult
    from reprcheck.domain.model.diagnostic import Diagnostic

_LEVEL_STYLES: dict[LintLevel, str] = {
    LintLevel.WARN: "bold yellow",
    LintLevel.DENY: "bold red",
    LintLevel.FORBID: "bold red",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Immutable (frozen dataclass).

    Attributes:
        show_suggestions: Render the suggested edit under each diagnostic.
        show_summary: Render the summary table.
        force_terminal: Emit colors even when output is not a TTY.
        width: Console width in columns.
    """

    show_suggestions: bool = True
    show_summary: bool = True
    force_terminal: bool = False
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    render() returns str, report() writes it to the output stream.
    """

    def __init__(self, config: ConsoleConfig | None = None, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            output: Output stream (default: sys.stdout)
        """
        self._config = config or ConsoleConfig()
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Write rich formatted result to the output stream."""
        self._output.write(self.render(result))

    def render(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
            highlight=False,
        )

        for diagnostic in result.diagnostics:
            self._render_diagnostic(console, diagnostic)

        if result.errors:
            self._render_errors(console, result)

        if self._config.show_summary:
            self._render_summary(console, result)

        return output.getvalue()

    def _render_diagnostic(self, console: Console, diagnostic: Diagnostic) -> None:
        """Render one diagnostic in compiler style."""
        style = _LEVEL_STYLES.get(diagnostic.level, "bold")
        location = diagnostic.location
        gutter = " " * len(str(location.line))

        console.print(f"[{style}]{diagnostic.level.value}[/{style}][bold]: {escape(diagnostic.message)}[/bold]")
        console.print(f"[blue]{gutter}-->[/blue] {escape(str(location))}")
        console.print(f"[blue]{gutter} |[/blue]")
        console.print(f"[blue]{location.line} |[/blue] {escape(diagnostic.source_line)}")
        console.print(f"[blue]{gutter} |[/blue]")
        console.print(f"[blue]{gutter} =[/blue] [bold]note[/bold]: lint [cyan]clippy::{diagnostic.lint_name}[/cyan]")

        if self._config.show_suggestions:
            suggestion = diagnostic.finding.suggestion
            console.print(
                f"[blue]{gutter} =[/blue] [bold]help[/bold]: {escape(suggestion.message)} "
                f"[dim]({suggestion.applicability.value})[/dim]"
            )
            for line in suggestion.replacement.splitlines():
                console.print(f"[green]{gutter} + {escape(line)}[/green]")

        console.print()

    def _render_errors(self, console: Console, result: CheckResult) -> None:
        """Render files that could not be linted."""
        console.print(f"[bold red]UNREADABLE FILES[/bold red] ({len(result.errors)})")
        for error in result.errors:
            console.print(f"  {escape(str(error.path))}: {escape(error.reason)}")
        console.print()

    def _render_summary(self, console: Console, result: CheckResult) -> None:
        """Render summary table."""
        table = Table(title="reprcheck", show_header=False)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Files", str(result.stats.files_checked))
        table.add_row("Declarations", str(result.stats.declarations_checked))
        if result.stats.declarations_skipped:
            table.add_row("Skipped (syntax errors)", str(result.stats.declarations_skipped))
        table.add_row("Warnings", str(result.warning_count))
        table.add_row("Errors", str(result.error_count))
        if result.fixed_files:
            table.add_row("Fixed files", str(len(result.fixed_files)))
        status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        table.add_row("Result", status)
        console.print(table)
