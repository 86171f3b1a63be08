"""Source span value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open range [lo, hi) of character offsets in a source text.

    Immutable: every operation returns a new span.
    Ordering compares start first, then end.

    Attributes:
        lo: Start offset (inclusive, must be >= 0)
        hi: End offset (exclusive, must be >= lo)
    """

    lo: int
    hi: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.lo < 0:
            raise ValueError(f"lo must be >= 0, got {self.lo}")
        if self.hi < self.lo:
            raise ValueError(f"hi ({self.hi}) must be >= lo ({self.lo})")

    @property
    def is_empty(self) -> bool:
        """Check if span covers no text."""
        return self.lo == self.hi

    def to(self, other: Span) -> Span:
        """Smallest span covering both self and other."""
        return Span(min(self.lo, other.lo), max(self.hi, other.hi))

    def until(self, end: Span) -> Span:
        """Span from the start of self up to the start of end.

        Raises:
            ValueError: If end starts before self
        """
        return Span(self.lo, end.lo)

    def shrink_to_lo(self) -> Span:
        """Empty span at the start of self."""
        return Span(self.lo, self.lo)

    def shrink_to_hi(self) -> Span:
        """Empty span at the end of self."""
        return Span(self.hi, self.hi)

    def contains(self, other: Span) -> bool:
        """Check if other lies entirely inside self."""
        return self.lo <= other.lo and other.hi <= self.hi

    def __str__(self) -> str:
        return f"{self.lo}..{self.hi}"
