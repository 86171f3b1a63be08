"""Tests for domain/model/declaration.py."""

import pytest

from reprcheck.domain.model.declaration import AggregateDeclaration, Field, GenericParam
from reprcheck.domain.model.enums import ItemKind
from reprcheck.domain.model.expressions import OtherType
from reprcheck.domain.model.span import Span
from tests.factories import array_of, make_decl, make_field


class TestField:
    """Tests for Field."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="field name must not be empty"):
            Field(name="", ty=OtherType(text="u8"), span=Span(0, 0))

    def test_none_type_raises(self) -> None:
        with pytest.raises(TypeError, match="ty must not be None"):
            Field(name="x", ty=None, span=Span(0, 0))  # type: ignore[arg-type]


class TestGenericParam:
    """Tests for GenericParam."""

    def test_type_param_by_default(self) -> None:
        assert GenericParam(name="T").is_const is False

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError):
            GenericParam(name="")


class TestAggregateDeclaration:
    """Tests for AggregateDeclaration."""

    def test_last_field(self) -> None:
        decl = make_decl(fields=(make_field("a"), make_field("b", array_of(0))))
        assert decl.last_field is not None
        assert decl.last_field.name == "b"

    def test_last_field_none_without_fields(self) -> None:
        assert make_decl().last_field is None

    def test_const_params(self) -> None:
        decl = make_decl(generics=(GenericParam("T"), GenericParam("N", is_const=True)))
        assert decl.const_params == frozenset({"N"})

    def test_qualified_name(self) -> None:
        decl = make_decl("Header", module_path=("ffi", "fn build"))
        assert decl.qualified_name == "ffi::fn build::Header"

    def test_qualified_name_top_level(self) -> None:
        assert make_decl("Header").qualified_name == "Header"

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            AggregateDeclaration(name="", kind=ItemKind.STRUCT, fields=(), span=Span(0, 5), ident_span=Span(0, 0))

    def test_ident_outside_span_raises(self) -> None:
        with pytest.raises(ValueError, match="must lie inside span"):
            make_decl(span=Span(0, 5), ident_span=Span(7, 10))
