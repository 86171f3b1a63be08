"""Lint pass protocol.

Users extend reprcheck by implementing this Protocol.
A lint pass is invoked once per aggregate declaration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from reprcheck.domain.model.configuration import LintConfig
    from reprcheck.domain.model.declaration import AggregateDeclaration
    from reprcheck.domain.model.enums import LintGroup, LintLevel
    from reprcheck.domain.model.finding import LintFinding
    from reprcheck.domain.ports.const_evaluator import ConstEvaluatorProtocol
    from reprcheck.domain.ports.repr_classifier import ReprClassifierProtocol
    from reprcheck.domain.ports.source_map import SourceMapProtocol


@dataclass(frozen=True, slots=True)
class LintContext:
    """Collaborators available to a lint pass for one compilation unit.

    Attributes:
        evaluator: Constant evaluator for array lengths
        classifier: Representation directive classifier
        source_map: Source text queries
    """

    evaluator: ConstEvaluatorProtocol
    classifier: ReprClassifierProtocol
    source_map: SourceMapProtocol


class LintPassProtocol(Protocol):
    """Contract for lint passes.

    Lint passes are stateless: check_item() is a pure function of
    the declaration and the context.

    Example:
        class EmptyStruct:
            name = "empty_struct"
            group = LintGroup.STYLE
            default_level = LintLevel.WARN
            description = "struct without fields"

            def check_item(self, cx, decl):
                if decl.fields:
                    return None
                return LintFinding(...)

            @classmethod
            def from_config(cls, config):
                return cls()
    """

    name: str
    """Lint name as used in level attributes (clippy::<name>)."""

    group: LintGroup
    """Lint group."""

    default_level: LintLevel
    """Level used when neither config nor attributes set one."""

    description: str
    """One-paragraph explanation shown by `reprcheck explain`."""

    def check_item(self, cx: LintContext, decl: AggregateDeclaration) -> LintFinding | None:
        """Examine one declaration.

        Args:
            cx: Collaborators for the current unit
            decl: Declaration to examine

        Returns:
            Finding, or None if the declaration is fine
        """
        ...

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create lint pass from config, None if disabled."""
        ...
