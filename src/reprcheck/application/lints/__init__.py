"""Lint passes over aggregate declarations.

- TrailingZeroSizedArrayWithoutRepr: struct ends in [T; 0] without repr
"""

from reprcheck.application.lints._base import BaseLintPass
from reprcheck.application.lints._registry import (
    all_lint_pass_types,
    default_lint_passes,
    find_lint_pass,
    lint_passes_from_config,
)
from reprcheck.application.lints.trailing_zero_sized_array import (
    TrailingZeroSizedArrayWithoutRepr,
    examine,
)

__all__ = [
    # Base
    "BaseLintPass",
    # Lint passes
    "TrailingZeroSizedArrayWithoutRepr",
    "examine",
    # Factory functions
    "all_lint_pass_types",
    "default_lint_passes",
    "find_lint_pass",
    "lint_passes_from_config",
]
