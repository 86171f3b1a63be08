"""Apply suggested edits to source text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from reprcheck.domain.model.enums import Applicability
from reprcheck.domain.model.finding import Suggestion

logger = logging.getLogger(__name__)

SAFE_APPLICABILITY = frozenset({Applicability.MACHINE_APPLICABLE})


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of applying suggestions to one text.

    Attributes:
        text: Text after applying the edits
        applied: Suggestions applied, in source order
        skipped: Suggestions not applied (applicability or overlap), in source order
    """

    text: str
    applied: tuple[Suggestion, ...]
    skipped: tuple[Suggestion, ...]

    @property
    def changed(self) -> bool:
        """Check if any edit was applied."""
        return bool(self.applied)


def apply_suggestions(
    text: str,
    suggestions: Iterable[Suggestion],
    allowed: frozenset[Applicability] = SAFE_APPLICABILITY,
) -> FixResult:
    """Apply suggestions whose applicability is allowed.

    Edits are applied back to front so earlier spans stay valid.
    When two edits overlap, the one starting first wins. Insertions
    at the same point are all kept, in input order.

    Args:
        text: Original text
        suggestions: Edits computed against the original text
        allowed: Applicability levels to apply

    Returns:
        FixResult with the new text

    Raises:
        ValueError: If a suggestion span lies outside of text
    """
    ordered = sorted(
        enumerate(suggestions),
        key=lambda pair: (pair[1].span.lo, pair[1].span.hi, pair[0]),
    )

    applied: list[Suggestion] = []
    skipped: list[Suggestion] = []
    last_end = 0

    for _, suggestion in ordered:
        span = suggestion.span
        if span.hi > len(text):
            raise ValueError(f"suggestion span {span} is outside of the text (length {len(text)})")

        if suggestion.applicability not in allowed:
            skipped.append(suggestion)
            continue

        if span.lo < last_end:
            logger.debug("skipping overlapping edit at %s", span)
            skipped.append(suggestion)
            continue

        applied.append(suggestion)
        last_end = span.hi

    new_text = text
    for suggestion in reversed(applied):
        span = suggestion.span
        new_text = new_text[: span.lo] + suggestion.replacement + new_text[span.hi :]

    return FixResult(text=new_text, applied=tuple(applied), skipped=tuple(skipped))
