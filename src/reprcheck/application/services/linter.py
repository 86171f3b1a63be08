"""Linter: runs lint passes over compilation units.

Plays the host traversal: every aggregate declaration of a unit is
handed to every lint pass, and findings are turned into diagnostics
at their effective lint level.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from reprcheck.application.attributes.lint_levels import resolve_level
from reprcheck.application.attributes.repr_hints import ReprAttributeClassifier
from reprcheck.application.evaluation.const_evaluator import ConstEvaluator
from reprcheck.application.lints import default_lint_passes
from reprcheck.domain.model.diagnostic import Diagnostic
from reprcheck.domain.ports.lint_pass import LintContext

if TYPE_CHECKING:
    from reprcheck.domain.model.compilation_unit import CompilationUnit
    from reprcheck.domain.model.configuration import LintConfig
    from reprcheck.domain.model.declaration import AggregateDeclaration
    from reprcheck.domain.model.enums import LintLevel
    from reprcheck.domain.model.finding import LintFinding
    from reprcheck.domain.ports.lint_pass import LintPassProtocol
    from reprcheck.domain.ports.repr_classifier import ReprClassifierProtocol

logger = logging.getLogger(__name__)


class Linter:
    """Runs lint passes over compilation units.

    Stateless between check_unit() calls: each unit gets its own
    LintContext built from the unit's constants and source.
    """

    def __init__(
        self,
        lint_passes: Sequence[LintPassProtocol] | None = None,
        *,
        config: LintConfig | None = None,
        classifier: ReprClassifierProtocol | None = None,
    ) -> None:
        """Initialize linter.

        Args:
            lint_passes: Lint passes to run (default: all registered passes)
            config: User configuration (level override)
            classifier: Repr directive classifier (default: ReprAttributeClassifier)
        """
        self._lint_passes = tuple(lint_passes) if lint_passes is not None else default_lint_passes()
        self._config = config
        self._classifier = classifier if classifier is not None else ReprAttributeClassifier()

    @property
    def lint_passes(self) -> tuple[LintPassProtocol, ...]:
        return self._lint_passes

    def context_for(self, unit: CompilationUnit) -> LintContext:
        """Build the collaborators for one unit."""
        return LintContext(
            evaluator=ConstEvaluator(unit.constants),
            classifier=self._classifier,
            source_map=unit.source,
        )

    def check_unit(self, unit: CompilationUnit) -> tuple[Diagnostic, ...]:
        """Run every lint pass on every declaration of unit.

        Args:
            unit: Compilation unit to lint

        Returns:
            Emitted diagnostics in source order
        """
        cx = self.context_for(unit)
        diagnostics: list[Diagnostic] = []

        for decl in unit.declarations:
            for lint_pass in self._lint_passes:
                finding = lint_pass.check_item(cx, decl)
                if finding is None:
                    continue

                level = self._level_for(lint_pass, unit, decl)
                if not level.is_emitted:
                    logger.debug("%s on %s suppressed at level %s", lint_pass.name, decl.qualified_name, level.value)
                    continue

                diagnostics.append(self._to_diagnostic(unit, finding, level))

        diagnostics.sort(key=lambda d: (d.finding.span.lo, d.lint_name))
        logger.debug("%s: %d declarations, %d diagnostics", unit.source.path, len(unit.declarations), len(diagnostics))
        return tuple(diagnostics)

    def _level_for(
        self,
        lint_pass: LintPassProtocol,
        unit: CompilationUnit,
        decl: AggregateDeclaration,
    ) -> LintLevel:
        default = lint_pass.default_level
        if self._config is not None and self._config.level is not None:
            default = self._config.level

        attributes = (*unit.inner_attributes, *decl.scope_attributes, *decl.attributes)
        return resolve_level(default, attributes, lint_pass.name, lint_pass.group)

    def _to_diagnostic(self, unit: CompilationUnit, finding: LintFinding, level: LintLevel) -> Diagnostic:
        location = unit.source.location(finding.span)
        return Diagnostic(
            finding=finding,
            level=level,
            location=location,
            source_line=unit.source.line_text(location.line),
        )
