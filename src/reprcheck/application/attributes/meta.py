"""Meta item lists inside attribute arguments.

Splits `C, packed(2), align(8)` into (name, arguments) items.
"""

from __future__ import annotations

from dataclasses import dataclass

_OPENERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True, slots=True)
class MetaItem:
    """One item of a meta list.

    Attributes:
        name: Item path with whitespace removed (e.g., "packed", "clippy::nursery")
        arguments: Text inside the item's parentheses, None if absent
        value: Text after "=", None if absent
    """

    name: str
    arguments: str | None = None
    value: str | None = None


def _split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested in delimiters or string literals."""
    parts: list[str] = []
    stack: list[str] = []
    current: list[str] = []
    in_string = False
    escaped = False

    for char in text:
        if in_string:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char in _OPENERS:
            stack.append(_OPENERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
        elif char == "," and not stack:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def _parse_item(text: str) -> MetaItem | None:
    if "=" in text and ("(" not in text or text.index("=") < text.index("(")):
        name, _, value = text.partition("=")
        name = "".join(name.split())
        return MetaItem(name=name, value=value.strip()) if name else None

    if "(" in text:
        if not text.endswith(")"):
            return None
        name, _, rest = text.partition("(")
        name = "".join(name.split())
        return MetaItem(name=name, arguments=rest[:-1].strip()) if name else None

    name = "".join(text.split())
    return MetaItem(name=name) if name else None


def parse_meta_list(arguments: str | None) -> tuple[MetaItem, ...]:
    """Parse the argument text of an attribute into meta items.

    Malformed items are dropped.

    Args:
        arguments: Raw text inside the attribute delimiters, None if bare

    Returns:
        Items in source order

    Example:
        >>> parse_meta_list("C, align(8)")
        (MetaItem(name='C', arguments=None, value=None), MetaItem(name='align', arguments='8', value=None))
    """
    if arguments is None:
        return ()

    items: list[MetaItem] = []
    for part in _split_top_level(arguments):
        item = _parse_item(part)
        if item is not None:
            items.append(item)
    return tuple(items)
