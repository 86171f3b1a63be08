"""Compilation unit aggregate produced by front ends."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.declaration import AggregateDeclaration
from reprcheck.domain.model.expressions import ConstExpr
from reprcheck.domain.model.source_file import SourceFile


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """Everything the lint needs to know about one source file.

    Attributes:
        source: Source text of the unit
        declarations: Aggregate declarations in source order
        constants: Qualified const name (scope segments + name) -> value expression
        inner_attributes: Crate/file level inner attributes (#![..])
        skipped: Number of declarations dropped because they contain syntax errors
    """

    source: SourceFile
    declarations: tuple[AggregateDeclaration, ...] = ()
    constants: Mapping[tuple[str, ...], ConstExpr] = field(default_factory=dict)
    inner_attributes: tuple[Attribute, ...] = ()
    skipped: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source is None:
            raise TypeError("source must not be None")
        if self.skipped < 0:
            raise ValueError(f"skipped must be >= 0, got {self.skipped}")
        for decl in self.declarations:
            if decl.span.hi > len(self.source.text):
                raise ValueError(f"declaration {decl.name} span {decl.span} is outside of the source")
        object.__setattr__(self, "constants", MappingProxyType(dict(self.constants)))
