"""Main facade for linting files.

ReprChecker is the primary entry point for running the lints.
Composition-based: accepts a parser, a linter and a reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Self

from reprcheck.application.discovery.sources import discover_sources
from reprcheck.application.fixes.applier import SAFE_APPLICABILITY, apply_suggestions
from reprcheck.application.lints import lint_passes_from_config
from reprcheck.application.services.linter import Linter
from reprcheck.domain.exceptions.parsing import ParsingError
from reprcheck.domain.model.check_result import CheckResult, FileError
from reprcheck.domain.model.check_stats import CheckStats
from reprcheck.domain.model.configuration import LintConfig

if TYPE_CHECKING:
    from reprcheck.domain.model.diagnostic import Diagnostic
    from reprcheck.domain.model.enums import Applicability
    from reprcheck.domain.ports.reporter import ReporterProtocol
    from reprcheck.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


class ReprChecker:
    """Main facade for linting Rust sources.

    Discovers files, parses them into compilation units, runs the
    linter, optionally rewrites files with suggested fixes and
    reports the result.

    Example:
        checker = ReprChecker.from_config(TreeSitterRustParser(), LintConfig())
        result = checker.check_paths([Path("src")])
        if not result.passed:
            print(f"Errors: {result.error_count}")
    """

    def __init__(
        self,
        parser: SourceParserPort,
        linter: Linter,
        *,
        config: LintConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            parser: Front end turning files into compilation units
            linter: Linter with the lint passes to run
            config: User configuration (exclude patterns)
            reporter: Optional reporter for output
        """
        self._parser = parser
        self._linter = linter
        self._config = config or LintConfig()
        self._reporter = reporter

    @classmethod
    def from_config(
        cls,
        parser: SourceParserPort,
        config: LintConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker with lint passes based on config.

        Args:
            parser: Front end
            config: Lint configuration
            reporter: Optional reporter

        Returns:
            ReprChecker with config-based lint passes

        Raises:
            ConfigurationError: If a lint pass rejects the config
        """
        linter = Linter(lint_passes_from_config(config), config=config)
        return cls(parser, linter, config=config, reporter=reporter)

    def check_paths(
        self,
        paths: Iterable[Path],
        *,
        fix: bool = False,
        fix_applicability: frozenset[Applicability] = SAFE_APPLICABILITY,
    ) -> CheckResult:
        """Lint every source file under paths.

        Args:
            paths: Files and directories
            fix: Rewrite files with the suggested edits
            fix_applicability: Applicability levels applied when fixing

        Returns:
            CheckResult with diagnostics, errors and stats
        """
        start_time = time.perf_counter()

        files = discover_sources(paths, self._config.exclude)
        logger.info("checking %d file(s)", len(files))

        diagnostics: list[Diagnostic] = []
        errors: list[FileError] = []
        fixed: list[Path] = []
        declarations = 0
        skipped = 0

        for path in files:
            try:
                unit = self._parser.parse_file(path)
            except ParsingError as e:
                logger.warning("%s", e)
                errors.append(FileError(path=path, reason=e.reason))
                continue

            declarations += len(unit.declarations)
            skipped += unit.skipped
            file_diagnostics = self._linter.check_unit(unit)
            diagnostics.extend(file_diagnostics)

            if fix and file_diagnostics:
                result = apply_suggestions(
                    unit.source.text,
                    (d.finding.suggestion for d in file_diagnostics),
                    fix_applicability,
                )
                if result.changed:
                    path.write_text(result.text, encoding="utf-8")
                    fixed.append(path)
                    logger.info("fixed %s (%d edit(s))", path, len(result.applied))

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = CheckResult(
            diagnostics=tuple(diagnostics),
            errors=tuple(errors),
            fixed_files=tuple(fixed),
            stats=CheckStats(
                files_checked=len(files) - len(errors),
                declarations_checked=declarations,
                declarations_skipped=skipped,
                lint_passes_run=len(self._linter.lint_passes),
                analysis_time_ms=elapsed_ms,
            ),
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result
