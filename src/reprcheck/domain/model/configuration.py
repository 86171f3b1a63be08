"""Lint configuration (user config).

None = use the lint's own default, value = override.
"""

from __future__ import annotations

from dataclasses import dataclass

from reprcheck.domain.model.enums import LintLevel

DEFAULT_DIRECTIVE = "#[repr(C)]"


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        level: Level override for the lint. None = lint default.
        directive: Attribute text inserted by the suggested fix.
        exclude: Glob patterns of files to skip during discovery.
    """

    level: LintLevel | None = None
    directive: str = DEFAULT_DIRECTIVE
    exclude: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.directive.strip():
            raise ValueError("directive must not be empty")
        if "\n" in self.directive:
            raise ValueError("directive must be a single line")
        if not (self.directive.startswith("#[") and self.directive.endswith("]")):
            raise ValueError(f"directive must be an outer attribute like #[repr(C)], got {self.directive!r}")
        if any(not pattern for pattern in self.exclude):
            raise ValueError("exclude patterns must not be empty")
