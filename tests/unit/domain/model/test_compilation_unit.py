"""Tests for domain/model/compilation_unit.py."""

import pytest

from reprcheck.domain.model.compilation_unit import CompilationUnit
from reprcheck.domain.model.expressions import IntLiteral
from reprcheck.domain.model.span import Span
from tests.factories import make_decl, make_source


class TestCompilationUnit:
    """Tests for CompilationUnit."""

    def test_defaults(self) -> None:
        unit = CompilationUnit(source=make_source(""))
        assert unit.declarations == ()
        assert dict(unit.constants) == {}
        assert unit.skipped == 0

    def test_constants_are_read_only(self) -> None:
        constants = {("LEN",): IntLiteral(text="0")}
        unit = CompilationUnit(source=make_source(""), constants=constants)
        constants[("OTHER",)] = IntLiteral(text="1")
        assert ("OTHER",) not in unit.constants
        with pytest.raises(TypeError):
            unit.constants[("X",)] = IntLiteral(text="2")  # type: ignore[index]

    def test_declaration_outside_source_raises(self) -> None:
        decl = make_decl(span=Span(0, 50))
        with pytest.raises(ValueError, match="outside of the source"):
            CompilationUnit(source=make_source("struct Foo;"), declarations=(decl,))

    def test_negative_skipped_raises(self) -> None:
        with pytest.raises(ValueError, match="skipped must be >= 0"):
            CompilationUnit(source=make_source(""), skipped=-1)
