"""Representation directive classification.

Every repr spelling maps to a ReprHint variant, including a repr
nested in cfg_attr. New variants are added here without touching
the lint itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reprcheck.application.attributes.meta import MetaItem, parse_meta_list
from reprcheck.domain.model.enums import ReprHint

if TYPE_CHECKING:
    from reprcheck.domain.model.attribute import Attribute

REPR_PATH = "repr"
CFG_ATTR_PATH = "cfg_attr"

_SIMPLE_HINTS: dict[str, ReprHint] = {
    "C": ReprHint.C,
    "transparent": ReprHint.TRANSPARENT,
    "simd": ReprHint.SIMD,
    "Rust": ReprHint.RUST,
}

INT_REPRS = frozenset(
    {"u8", "u16", "u32", "u64", "u128", "usize", "i8", "i16", "i32", "i64", "i128", "isize"}
)


def _parse_power_of_two(text: str) -> int | None:
    """Parse alignment-style integer argument (decimal, power of two)."""
    digits = text.strip().replace("_", "")
    if not digits.isdigit():
        return None
    value = int(digits)
    if value <= 0 or value & (value - 1):
        return None
    return value


def _hint_for(item: MetaItem) -> ReprHint | None:
    if item.value is not None:
        return None

    if item.name == "packed":
        if item.arguments is None:
            return ReprHint.PACKED
        return ReprHint.PACKED if _parse_power_of_two(item.arguments) is not None else None

    if item.name == "align":
        if item.arguments is None:
            return None
        return ReprHint.ALIGN if _parse_power_of_two(item.arguments) is not None else None

    if item.arguments is not None:
        return None

    if item.name in INT_REPRS:
        return ReprHint.INT

    return _SIMPLE_HINTS.get(item.name)


def _hints_in(path: str, arguments: str | None) -> tuple[ReprHint, ...]:
    if path == CFG_ATTR_PATH:
        # First item is the predicate, the rest are attributes.
        nested = parse_meta_list(arguments)[1:]
        return tuple(hint for item in nested for hint in _hints_in(item.name, item.arguments))

    if path != REPR_PATH:
        return ()

    hints: list[ReprHint] = []
    for item in parse_meta_list(arguments):
        hint = _hint_for(item)
        if hint is not None:
            hints.append(hint)
    return tuple(hints)


def find_repr_attrs(attribute: Attribute) -> tuple[ReprHint, ...]:
    """Extract representation hints from one attribute.

    Only repr attributes produce hints, either directly or inside
    `cfg_attr(predicate, ...)` (the predicate is not evaluated, so a
    conditional repr counts). Unknown hints, an empty repr() and
    malformed packed/align arguments produce nothing.

    Args:
        attribute: Attribute to inspect

    Returns:
        Hints in source order (empty if the attribute is not a layout directive)
    """
    return _hints_in("".join(attribute.path.split()), attribute.arguments)


class ReprAttributeClassifier:
    """Default ReprClassifierProtocol implementation.

    Stateless: an attribute is a directive iff it carries at least
    one recognized repr hint.
    """

    def is_representation_directive(self, attribute: Attribute) -> bool:
        """Check if attribute carries a repr hint."""
        return bool(find_repr_attrs(attribute))

