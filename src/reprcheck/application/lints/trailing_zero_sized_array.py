"""Trailing zero-sized array without repr.

Flags a struct whose last field is an array of length zero when the
struct carries no `repr` attribute. Such structs only make sense when
the layout is controlled (C interop, manual allocation that computes
the offset of the trailing array), so a missing `repr` is almost
always an oversight.

Bad:

    struct RarelyUseful {
        some_field: usize,
        last: [SomeType; 0],
    }

Good:

    #[repr(C)]
    struct MoreOftenUseful {
        some_field: usize,
        last: [SomeType; 0],
    }
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from reprcheck.application.attributes.repr_hints import find_repr_attrs
from reprcheck.application.lints._base import BaseLintPass
from reprcheck.domain.exceptions.configuration import ConfigurationError
from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.configuration import DEFAULT_DIRECTIVE
from reprcheck.domain.model.enums import Applicability, ItemKind, LintGroup, LintLevel
from reprcheck.domain.model.expressions import ArrayType
from reprcheck.domain.model.finding import LintFinding, Suggestion
from reprcheck.domain.model.span import Span

if TYPE_CHECKING:
    from reprcheck.domain.model.configuration import LintConfig
    from reprcheck.domain.model.declaration import AggregateDeclaration
    from reprcheck.domain.ports.lint_pass import LintContext

logger = logging.getLogger(__name__)

LINT_NAME = "trailing_zero_sized_array_without_repr"
MESSAGE = "trailing zero-sized array in a struct which is not marked with a `repr` attribute"
HELP = "consider adding `#[repr(C)]` or another `repr` attribute"
DESCRIPTION = (
    "Warns when a struct with a trailing zero-sized array is declared without a `repr` "
    "attribute. Zero-sized arrays are rarely useful on their own, so such a struct is "
    "likely passed to C code or used with manual allocation where the memory layout "
    "matters. Either way, `#[repr(C)]` (or another `repr` attribute) is needed."
)


def is_struct_with_trailing_zero_sized_array(cx: LintContext, decl: AggregateDeclaration) -> bool:
    """Check if decl is a struct whose last field is a [T; 0] array.

    The length goes through constant evaluation, so named constants
    and arithmetic count. A length that cannot be evaluated (unknown
    name, const generic parameter) is not zero.
    """
    if decl.kind is not ItemKind.STRUCT:
        return False

    last_field = decl.last_field
    if last_field is None:
        return False

    if not isinstance(last_field.ty, ArrayType):
        return False

    return cx.evaluator.evaluate(last_field.ty.length, decl) == 0


def has_repr_attr(cx: LintContext, attrs: Sequence[Attribute]) -> bool:
    """Check if any attribute is a layout representation directive."""
    return any(cx.classifier.is_representation_directive(attr) for attr in attrs)


def build_finding(
    cx: LintContext,
    decl: AggregateDeclaration,
    directive: str = DEFAULT_DIRECTIVE,
) -> LintFinding:
    """Build the finding for a matched declaration.

    The edit covers the text between the start of the declaration and
    its identifier (visibility, `struct` keyword) and reproduces it
    verbatim after the directive line, so applying it only inserts
    `directive` plus a newline and the declaration's indentation.

    Args:
        cx: Collaborators for the current unit
        decl: Declaration matched by the shape check
        directive: Attribute text to insert

    Returns:
        Finding flagged on the whole declaration
    """
    prefix_span: Span = decl.span.until(decl.ident_span)
    indent = cx.source_map.indent_text(decl.span)
    replacement = f"{directive}\n{indent}{cx.source_map.snippet(prefix_span)}"

    return LintFinding(
        lint_name=LINT_NAME,
        message=MESSAGE,
        span=decl.span,
        suggestion=Suggestion(
            span=prefix_span,
            replacement=replacement,
            applicability=Applicability.MAYBE_INCORRECT,
            message=HELP,
        ),
    )


def examine(
    decl: AggregateDeclaration,
    cx: LintContext,
    directive: str = DEFAULT_DIRECTIVE,
) -> LintFinding | None:
    """Run the lint on one declaration.

    Returns:
        One finding, or None when the shape does not match or a
        repr attribute is present
    """
    if not is_struct_with_trailing_zero_sized_array(cx, decl):
        return None

    if has_repr_attr(cx, decl.attributes):
        logger.debug("%s has a repr attribute", decl.qualified_name)
        return None

    return build_finding(cx, decl, directive)


class TrailingZeroSizedArrayWithoutRepr(BaseLintPass):
    """Lint pass for structs with a trailing [T; 0] and no repr.

    Violation level: WARN by default.
    """

    name = LINT_NAME
    group = LintGroup.NURSERY
    default_level = LintLevel.WARN
    description = DESCRIPTION

    def __init__(self, directive: str = DEFAULT_DIRECTIVE) -> None:
        """Initialize with the directive inserted by the fix.

        Args:
            directive: Outer attribute text, must itself be a repr directive

        Raises:
            ConfigurationError: If directive is not a repr attribute
        """
        if not _is_repr_directive_text(directive):
            raise ConfigurationError("directive", f"{directive!r} is not a repr attribute")
        self._directive = directive

    @property
    def directive(self) -> str:
        return self._directive

    def check_item(self, cx: LintContext, decl: AggregateDeclaration) -> LintFinding | None:
        return examine(decl, cx, self._directive)

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create from config; the directive comes from config.directive."""
        return cls(config.directive)


def _is_repr_directive_text(directive: str) -> bool:
    """Check that `#[repr(...)]` text carries a repr hint.

    Keeps the fix idempotent: the inserted attribute must itself
    silence the lint on the next run.
    """
    text = directive.strip()
    if not (text.startswith("#[") and text.endswith("]")):
        return False

    body = text[2:-1].strip()
    path, paren, rest = body.partition("(")
    if not paren or not rest.endswith(")"):
        return False

    attribute = Attribute(path=path.strip() or "?", arguments=rest[:-1], span=Span(0, len(text)))
    return bool(find_repr_attrs(attribute))
