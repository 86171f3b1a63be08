"""Lint pass registry.

Central registry of all lint passes with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reprcheck.application.lints._base import BaseLintPass
from reprcheck.application.lints.trailing_zero_sized_array import (
    TrailingZeroSizedArrayWithoutRepr,
)
from reprcheck.domain.ports.lint_pass import LintPassProtocol

if TYPE_CHECKING:
    from reprcheck.domain.model.configuration import LintConfig


# Registry - tuple for immutability
# Order matters: lint passes are run in this order
_ALL_LINT_PASSES: tuple[type[BaseLintPass], ...] = (TrailingZeroSizedArrayWithoutRepr,)


def all_lint_pass_types() -> tuple[type[BaseLintPass], ...]:
    """Registered lint pass classes, in run order."""
    return _ALL_LINT_PASSES


def default_lint_passes() -> tuple[LintPassProtocol, ...]:
    """Instantiate every lint pass with its default settings.

    Returns:
        Tuple of lint passes
    """
    return tuple(lint_pass() for lint_pass in _ALL_LINT_PASSES)


def lint_passes_from_config(config: LintConfig) -> tuple[LintPassProtocol, ...]:
    """Instantiate lint passes based on config.

    Lint passes are created using their from_config() factory method.
    If from_config() returns None, the lint pass is disabled.

    Args:
        config: User configuration

    Returns:
        Tuple of enabled lint passes
    """
    lint_passes: list[LintPassProtocol] = []

    for lint_pass_cls in _ALL_LINT_PASSES:
        lint_pass = lint_pass_cls.from_config(config)
        if lint_pass is not None:
            lint_passes.append(lint_pass)

    return tuple(lint_passes)


def find_lint_pass(name: str) -> type[BaseLintPass] | None:
    """Look up a registered lint pass by name (with or without clippy:: prefix)."""
    bare = name.removeprefix("clippy::")
    for lint_pass_cls in _ALL_LINT_PASSES:
        if lint_pass_cls.name == bare:
            return lint_pass_cls
    return None
