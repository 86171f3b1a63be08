"""Lint level resolution from level attributes.

Levels come from `allow`, `expect`, `warn`, `deny` and `forbid`
attributes naming `clippy::<lint>` or the lint's group.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from reprcheck.application.attributes.meta import parse_meta_list
from reprcheck.domain.model.enums import LintLevel

if TYPE_CHECKING:
    from reprcheck.domain.model.attribute import Attribute
    from reprcheck.domain.model.enums import LintGroup

TOOL_NAME = "clippy"

_LEVEL_ATTRIBUTES: dict[str, LintLevel] = {level.value: level for level in LintLevel}


def attribute_level(
    attribute: Attribute,
    lint_name: str,
    group: LintGroup | None = None,
) -> LintLevel | None:
    """Level set by one attribute for a lint.

    Args:
        attribute: Attribute to inspect
        lint_name: Lint name without tool prefix
        group: Lint group, matched as clippy::<group>

    Returns:
        Level if the attribute is a level attribute naming the lint, else None
    """
    level = _LEVEL_ATTRIBUTES.get("".join(attribute.path.split()))
    if level is None:
        return None

    names = {f"{TOOL_NAME}::{lint_name}"}
    if group is not None:
        names.add(f"{TOOL_NAME}::{group.value}")

    for item in parse_meta_list(attribute.arguments):
        if item.name in names:
            return level
    return None


def resolve_level(
    default: LintLevel,
    attributes: Iterable[Attribute],
    lint_name: str,
    group: LintGroup | None = None,
) -> LintLevel:
    """Effective lint level after applying attributes in order.

    Later attributes override earlier ones, except that nothing
    lowers a FORBID.

    Args:
        default: Starting level (config or lint default)
        attributes: Attributes from outermost scope to the item itself
        lint_name: Lint name without tool prefix
        group: Lint group

    Returns:
        Effective level
    """
    level = default
    for attribute in attributes:
        new_level = attribute_level(attribute, lint_name, group)
        if new_level is None:
            continue
        if level is LintLevel.FORBID:
            continue
        level = new_level
    return level
