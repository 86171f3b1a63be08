"""Attribute analysis: meta lists, repr hints, lint levels."""

from reprcheck.application.attributes.lint_levels import attribute_level, resolve_level
from reprcheck.application.attributes.meta import MetaItem, parse_meta_list
from reprcheck.application.attributes.repr_hints import (
    ReprAttributeClassifier,
    find_repr_attrs,
)

__all__ = [
    "MetaItem",
    "parse_meta_list",
    "ReprAttributeClassifier",
    "find_repr_attrs",
    "attribute_level",
    "resolve_level",
]
