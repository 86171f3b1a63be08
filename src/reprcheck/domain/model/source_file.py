"""Source file value object: text plus span queries."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path

from reprcheck.domain.model.location import Location
from reprcheck.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Text of one compilation unit.

    Answers the source-map queries the lint needs: snippet text
    for a span, indentation of the line holding a span, and
    line/column locations for reporting.

    Attributes:
        path: File path (used for reporting only)
        text: Full decoded source text
    """

    path: Path
    text: str
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants and index line starts. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.text is None:
            raise TypeError("text must not be None")

        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        object.__setattr__(self, "_line_starts", tuple(starts))

    @property
    def span(self) -> Span:
        """Span covering the whole file."""
        return Span(0, len(self.text))

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline opens an empty last line)."""
        return len(self._line_starts)

    def _check(self, span: Span) -> None:
        if span.hi > len(self.text):
            raise ValueError(f"span {span} is outside of {self.path} (length {len(self.text)})")

    def snippet(self, span: Span) -> str:
        """Exact source text covered by span.

        Raises:
            ValueError: If span is outside of the file
        """
        self._check(span)
        return self.text[span.lo : span.hi]

    def line_index(self, offset: int) -> int:
        """0-based index of the line containing offset."""
        return bisect_right(self._line_starts, offset) - 1

    def line_text(self, line: int) -> str:
        """Text of a 1-based line, without its newline.

        Raises:
            ValueError: If line is out of range
        """
        if not 1 <= line <= self.line_count:
            raise ValueError(f"line must be in 1..{self.line_count}, got {line}")
        start = self._line_starts[line - 1]
        end = self._line_starts[line] - 1 if line < self.line_count else len(self.text)
        return self.text[start:end]

    def indent_text(self, span: Span) -> str:
        """Leading whitespace of the line holding span.lo, tabs kept."""
        self._check(span)
        line = self.line_text(self.line_index(span.lo) + 1)
        return line[: len(line) - len(line.lstrip(" \t"))]

    def indent_of(self, span: Span) -> int:
        """Width of the leading whitespace of the line holding span.lo."""
        return len(self.indent_text(span))

    def location(self, span: Span) -> Location:
        """Line/column location of span."""
        self._check(span)
        start_line = self.line_index(span.lo)
        end_line = self.line_index(span.hi)
        return Location(
            file=self.path,
            line=start_line + 1,
            column=span.lo - self._line_starts[start_line],
            end_line=end_line + 1,
            end_column=span.hi - self._line_starts[end_line],
        )
