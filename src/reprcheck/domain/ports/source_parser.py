"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reprcheck.domain.model.compilation_unit import CompilationUnit


class SourceParserPort(ABC):
    """Port for turning source files into compilation units.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_source(self, text: str, path: Path) -> CompilationUnit:
        """Parse source text.

        Args:
            text: Source text
            path: Path used for reporting

        Returns:
            Compilation unit with declarations and constants
        """
        ...

    @abstractmethod
    def parse_file(self, path: Path) -> CompilationUnit:
        """Read and parse a single file.

        Args:
            path: Path to source file

        Returns:
            Compilation unit

        Raises:
            ParsingError: If file cannot be read or decoded
        """
        ...
