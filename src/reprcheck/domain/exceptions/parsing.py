"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reprcheck.domain.exceptions.base import ReprCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(ReprCheckError):
    """Error while reading or parsing a source file.

    Syntax errors inside Rust code are NOT reported through this error:
    the front end is error-tolerant and skips malformed declarations.
    This is raised when the file itself cannot be turned into text.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")
