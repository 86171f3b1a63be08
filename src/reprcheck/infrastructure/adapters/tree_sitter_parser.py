"""tree-sitter based Rust front end.

Implements SourceParserPort using the Rust grammar from
tree_sitter_language_pack. Lowers struct/union/enum items, their
attributes and fields, and const items into the domain model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

from tree_sitter import Node, Parser
from tree_sitter_language_pack import SupportedLanguage, get_parser

from reprcheck.domain.exceptions.parsing import ParsingError
from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.compilation_unit import CompilationUnit
from reprcheck.domain.model.declaration import FN_SCOPE_PREFIX, AggregateDeclaration, Field, GenericParam
from reprcheck.domain.model.enums import AttrStyle, ItemKind
from reprcheck.domain.model.expressions import (
    BINARY_OPERATORS,
    ArrayType,
    BinaryExpr,
    CastExpr,
    ConstExpr,
    IntLiteral,
    OpaqueExpr,
    OtherType,
    PathExpr,
    TypeExpr,
    UnaryExpr,
)
from reprcheck.domain.model.source_file import SourceFile
from reprcheck.domain.model.span import Span
from reprcheck.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)

LANGUAGE = "rust"

_AGGREGATE_KINDS: dict[str, ItemKind] = {
    "struct_item": ItemKind.STRUCT,
    "union_item": ItemKind.UNION,
    "enum_item": ItemKind.ENUM,
}

_TRIVIA = frozenset({"line_comment", "block_comment"})

# Nodes whose value is the single expression they wrap.
_WRAPPERS = frozenset({"parenthesized_expression", "block", "const_block"})


class _Offsets:
    """Maps tree-sitter byte offsets to str character offsets."""

    def __init__(self, text: str, data: bytes) -> None:
        self._identity = len(text) == len(data)
        self._table: list[int] = []
        if not self._identity:
            table = [0] * (len(data) + 1)
            position = 0
            for index, char in enumerate(text):
                width = len(char.encode("utf-8"))
                for offset in range(width):
                    table[position + offset] = index
                position += width
            table[position] = len(text)
            self._table = table

    def char(self, byte_offset: int) -> int:
        if self._identity:
            return byte_offset
        return self._table[byte_offset]

    def span(self, node: Node) -> Span:
        return Span(self.char(node.start_byte), self.char(node.end_byte))


@dataclass
class _Scope:
    """Scope being walked: module path plus level attributes inherited."""

    path: tuple[str, ...] = ()
    attributes: tuple[Attribute, ...] = ()


@dataclass
class _Collected:
    declarations: list[AggregateDeclaration] = field(default_factory=list)
    constants: dict[tuple[str, ...], ConstExpr] = field(default_factory=dict)
    skipped: int = 0


class TreeSitterRustParser(SourceParserPort):
    """Rust front end built on tree-sitter.

    Error tolerant: a declaration whose syntax tree contains error
    nodes is skipped (counted in CompilationUnit.skipped) instead of
    failing the file. Only unreadable files raise ParsingError.

    The parser object is reused across files; instances are not
    thread-safe.
    """

    def __init__(self, parser: Parser | None = None) -> None:
        """Initialize front end.

        Args:
            parser: tree-sitter parser for Rust (default: from tree_sitter_language_pack)
        """
        self._parser = parser if parser is not None else get_parser(cast(SupportedLanguage, LANGUAGE))

    def parse_file(self, path: Path) -> CompilationUnit:
        """Read and parse a single .rs file.

        Raises:
            ParsingError: If file cannot be read or is not UTF-8
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e
        except IsADirectoryError as e:
            raise ParsingError(path, "is a directory") from e

        return self.parse_source(text, path)

    def parse_source(self, text: str, path: Path) -> CompilationUnit:
        """Parse Rust source text into a compilation unit."""
        data = text.encode("utf-8")
        tree = self._parser.parse(data)
        root = tree.root_node
        if root.has_error:
            logger.warning("%s: syntax errors, affected declarations are skipped", path)

        lowering = _Lowering(_Offsets(text, data))
        inner = lowering.inner_attributes(root)
        collected = _Collected()
        lowering.walk_items(root, _Scope(), collected)

        logger.debug(
            "%s: %d declarations, %d constants, %d skipped",
            path,
            len(collected.declarations),
            len(collected.constants),
            collected.skipped,
        )
        return CompilationUnit(
            source=SourceFile(path=path, text=text),
            declarations=tuple(collected.declarations),
            constants=collected.constants,
            inner_attributes=inner,
            skipped=collected.skipped,
        )


class _Lowering:
    """Lowers tree-sitter nodes of one file into domain objects."""

    def __init__(self, offsets: _Offsets) -> None:
        self._offsets = offsets

    # -- items ---------------------------------------------------------

    def walk_items(self, container: Node, scope: _Scope, out: _Collected) -> None:
        """Walk the items of a source_file, declaration_list or block."""
        pending: list[Attribute] = []

        for child in container.named_children:
            if child.type in _TRIVIA or child.type == "inner_attribute_item":
                continue

            if child.type == "attribute_item":
                attribute = self.attribute(child, AttrStyle.OUTER)
                if attribute is not None:
                    pending.append(attribute)
                continue

            attributes = tuple(pending)
            pending.clear()

            if child.type in _AGGREGATE_KINDS:
                if child.has_error:
                    out.skipped += 1
                    continue
                decl = self.declaration(child, _AGGREGATE_KINDS[child.type], attributes, scope)
                if decl is not None:
                    out.declarations.append(decl)
            elif child.type == "const_item":
                self._collect_const(child, scope, out)
                self._walk_nested(child, scope, out)
            elif child.type == "mod_item":
                self._walk_module(child, attributes, scope, out)
            elif child.type == "function_item":
                self._walk_function(child, attributes, scope, out)
            else:
                self._walk_nested(child, scope, out)

    def _walk_module(
        self,
        node: Node,
        attributes: tuple[Attribute, ...],
        scope: _Scope,
        out: _Collected,
    ) -> None:
        name = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if name is None or body is None:
            return  # mod foo; lives in another file
        inner = self.inner_attributes(body)
        nested = _Scope(
            path=(*scope.path, _text(name)),
            attributes=(*scope.attributes, *attributes, *inner),
        )
        self.walk_items(body, nested, out)

    def _walk_function(
        self,
        node: Node,
        attributes: tuple[Attribute, ...],
        scope: _Scope,
        out: _Collected,
    ) -> None:
        name = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if name is None or body is None:
            return
        nested = _Scope(
            path=(*scope.path, f"{FN_SCOPE_PREFIX}{_text(name)}"),
            attributes=(*scope.attributes, *attributes),
        )
        self.walk_items(body, nested, out)

    def _walk_nested(self, node: Node, scope: _Scope, out: _Collected) -> None:
        """Walk items in blocks nested in expressions and in impl/trait bodies.

        Covers `if`/`loop` bodies, `let` initializers, closures and
        `const _: () = { ... };`. Items in a nested block share the
        scope of the enclosing module or function.
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == "block":
                self.walk_items(current, scope, out)
            elif current.type == "declaration_list":
                self._walk_associated(current, scope, out)
            elif current.type == "function_item":
                self._walk_function(current, (), scope, out)
            else:
                stack.extend(reversed(current.named_children))

    def _walk_associated(self, body: Node, scope: _Scope, out: _Collected) -> None:
        """Walk the method bodies of an impl or trait (associated consts are not collected)."""
        pending: list[Attribute] = []
        for child in body.named_children:
            if child.type == "attribute_item":
                attribute = self.attribute(child, AttrStyle.OUTER)
                if attribute is not None:
                    pending.append(attribute)
                continue
            if child.type in _TRIVIA:
                continue
            if child.type == "function_item":
                self._walk_function(child, tuple(pending), scope, out)
            else:
                self._walk_nested(child, scope, out)
            pending.clear()

    def _collect_const(self, node: Node, scope: _Scope, out: _Collected) -> None:
        name = node.child_by_field_name("name")
        value = node.child_by_field_name("value")
        if name is None or value is None or node.has_error or _text(name) == "_":
            return
        out.constants[(*scope.path, _text(name))] = self.expression(value)

    def inner_attributes(self, container: Node) -> tuple[Attribute, ...]:
        """Inner attributes (#![..]) directly inside container."""
        attributes: list[Attribute] = []
        for child in container.named_children:
            if child.type == "inner_attribute_item":
                attribute = self.attribute(child, AttrStyle.INNER)
                if attribute is not None:
                    attributes.append(attribute)
        return tuple(attributes)

    # -- declarations ----------------------------------------------------

    def declaration(
        self,
        node: Node,
        kind: ItemKind,
        attributes: tuple[Attribute, ...],
        scope: _Scope,
    ) -> AggregateDeclaration | None:
        name = node.child_by_field_name("name")
        if name is None:
            return None

        body = node.child_by_field_name("body")
        fields = self.fields(body) if body is not None and kind is not ItemKind.ENUM else ()

        return AggregateDeclaration(
            name=_text(name),
            kind=kind,
            fields=fields,
            span=self._offsets.span(node),
            ident_span=self._offsets.span(name),
            attributes=attributes,
            generics=self.generics(node.child_by_field_name("type_parameters")),
            module_path=scope.path,
            scope_attributes=scope.attributes,
        )

    def fields(self, body: Node) -> tuple[Field, ...]:
        if body.type == "field_declaration_list":
            fields: list[Field] = []
            for child in body.named_children:
                if child.type != "field_declaration":
                    continue
                name = child.child_by_field_name("name")
                ty = child.child_by_field_name("type")
                if name is None or ty is None:
                    continue
                fields.append(Field(name=_text(name), ty=self.type_expr(ty), span=self._offsets.span(child)))
            return tuple(fields)

        if body.type == "ordered_field_declaration_list":
            return tuple(
                Field(name=str(index), ty=self.type_expr(ty), span=self._offsets.span(ty))
                for index, ty in enumerate(body.children_by_field_name("type"))
            )

        return ()

    def generics(self, node: Node | None) -> tuple[GenericParam, ...]:
        if node is None:
            return ()

        params: list[GenericParam] = []
        for child in node.named_children:
            if child.type == "const_parameter":
                name = child.child_by_field_name("name")
                if name is not None:
                    params.append(GenericParam(name=_text(name), is_const=True))
            elif child.type == "type_identifier":
                params.append(GenericParam(name=_text(child)))
            elif child.type in ("lifetime", "lifetime_parameter"):
                continue
            else:
                # type_parameter / optional_type_parameter use "name", constrained_type_parameter "left".
                name = child.child_by_field_name("name")
                if name is None:
                    name = child.child_by_field_name("left")
                if name is not None and name.type != "lifetime":
                    params.append(GenericParam(name=_text(name)))
        return tuple(params)

    # -- attributes --------------------------------------------------------

    def attribute(self, node: Node, style: AttrStyle) -> Attribute | None:
        """Lower attribute_item / inner_attribute_item."""
        inner = next((child for child in node.named_children if child.type == "attribute"), None)
        if inner is None or not inner.named_children:
            return None

        path = inner.named_children[0]
        arguments_node = inner.child_by_field_name("arguments")
        arguments = None
        if arguments_node is not None:
            raw = _text(arguments_node)
            arguments = raw[1:-1] if len(raw) >= 2 else ""

        return Attribute(
            path=_text(path),
            arguments=arguments,
            span=self._offsets.span(node),
            style=style,
        )

    # -- types and expressions ---------------------------------------------

    def type_expr(self, node: Node) -> TypeExpr:
        if node.type == "array_type":
            element = node.child_by_field_name("element")
            length = node.child_by_field_name("length")
            if element is not None and length is not None:
                return ArrayType(element=self.type_expr(element), length=self.expression(length))
        return OtherType(text=_text(node))

    def expression(self, node: Node) -> ConstExpr:
        kind = node.type

        if kind == "integer_literal":
            return IntLiteral(text=_text(node))

        if kind == "identifier":
            return PathExpr(segments=(_text(node),))

        if kind == "scoped_identifier":
            text = "".join(_text(node).split())
            if "<" in text:
                return OpaqueExpr(text=text)
            segments = tuple(text.split("::"))
            if any(not segment for segment in segments):
                return OpaqueExpr(text=text)
            return PathExpr(segments=segments)

        if kind in _WRAPPERS:
            inner = [child for child in node.named_children if child.type not in _TRIVIA]
            if len(inner) == 1 and not inner[0].type.endswith(("_statement", "_declaration")):
                return self.expression(inner[0])
            return OpaqueExpr(text=_text(node))

        if kind == "binary_expression":
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            operator = node.child_by_field_name("operator")
            if left is not None and right is not None and operator is not None:
                if operator.type in BINARY_OPERATORS:
                    return BinaryExpr(op=operator.type, lhs=self.expression(left), rhs=self.expression(right))
            return OpaqueExpr(text=_text(node))

        if kind == "unary_expression":
            operand = node.named_children[0] if node.named_children else None
            operator = node.children[0] if node.children else None
            if operand is not None and operator is not None and operator.type in ("-", "!"):
                return UnaryExpr(op=operator.type, operand=self.expression(operand))
            return OpaqueExpr(text=_text(node))

        if kind == "type_cast_expression":
            value = node.child_by_field_name("value")
            target = node.child_by_field_name("type")
            if value is not None and target is not None:
                return CastExpr(operand=self.expression(value), target=_text(target))
            return OpaqueExpr(text=_text(node))

        return OpaqueExpr(text=_text(node))


def _text(node: Node) -> str:
    raw = node.text
    return raw.decode("utf-8") if raw is not None else ""
