"""Tests for domain/model/attribute.py."""

import pytest

from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.enums import AttrStyle
from reprcheck.domain.model.span import Span


class TestAttribute:
    """Tests for Attribute."""

    def test_defaults_to_outer(self) -> None:
        attr = Attribute(path="repr", arguments="C", span=Span(0, 10))
        assert attr.style is AttrStyle.OUTER

    def test_name_is_last_segment(self) -> None:
        attr = Attribute(path="clippy::msrv", arguments=None, span=Span(0, 15))
        assert attr.name == "msrv"

    def test_str_outer_with_arguments(self) -> None:
        attr = Attribute(path="repr", arguments="C, align(8)", span=Span(0, 22))
        assert str(attr) == "#[repr(C, align(8))]"

    def test_str_inner_bare(self) -> None:
        attr = Attribute(path="no_std", arguments=None, span=Span(0, 10), style=AttrStyle.INNER)
        assert str(attr) == "#![no_std]"

    def test_empty_path_raises(self) -> None:
        with pytest.raises(ValueError, match="path must not be empty"):
            Attribute(path="", arguments=None, span=Span(0, 3))
