"""Base lint pass class.

Provides default implementation of LintPassProtocol.
Concrete lint passes inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from reprcheck.domain.model.configuration import LintConfig
    from reprcheck.domain.model.declaration import AggregateDeclaration
    from reprcheck.domain.model.enums import LintGroup, LintLevel
    from reprcheck.domain.model.finding import LintFinding
    from reprcheck.domain.ports.lint_pass import LintContext


class BaseLintPass(ABC):
    """Base class for lint passes implementing LintPassProtocol.

    Concrete lint passes must:
    1. Set `name`, `group`, `default_level` and `description` class attributes
    2. Implement `check_item()` method
    3. Optionally override `from_config()` for configuration
    """

    name: str
    """Lint name as used in level attributes (clippy::<name>)."""

    group: LintGroup
    """Lint group."""

    default_level: LintLevel
    """Level used when neither config nor attributes set one."""

    description: str
    """One-paragraph explanation shown by `reprcheck explain`."""

    @abstractmethod
    def check_item(self, cx: LintContext, decl: AggregateDeclaration) -> LintFinding | None:
        """Examine one declaration.

        Args:
            cx: Collaborators for the current unit
            decl: Declaration to examine

        Returns:
            Finding, or None if the declaration is fine
        """

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create lint pass from config.

        Default: always enabled (returns new instance).
        Override in subclass for configurable lint passes.

        Args:
            config: User configuration

        Returns:
            Lint pass instance if enabled, None if disabled
        """
        return cls()
