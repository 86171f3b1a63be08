"""Adapters implementing domain ports."""

from reprcheck.infrastructure.adapters.tree_sitter_parser import TreeSitterRustParser

__all__ = ["TreeSitterRustParser"]
