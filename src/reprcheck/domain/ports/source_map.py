"""Source map protocol: text queries over spans."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reprcheck.domain.model.span import Span


class SourceMapProtocol(Protocol):
    """Contract for source text queries.

    SourceFile implements this protocol.
    """

    def snippet(self, span: Span) -> str:
        """Exact source text covered by span."""
        ...

    def indent_of(self, span: Span) -> int:
        """Width of the leading whitespace of the line holding span.lo."""
        ...

    def indent_text(self, span: Span) -> str:
        """Leading whitespace of the line holding span.lo, as written."""
        ...
