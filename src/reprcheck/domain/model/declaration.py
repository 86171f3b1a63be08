"""Aggregate declaration entity and its parts."""

from __future__ import annotations

from dataclasses import dataclass

from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.enums import ItemKind
from reprcheck.domain.model.expressions import TypeExpr
from reprcheck.domain.model.span import Span

# Scope segment prefix for function bodies in AggregateDeclaration.module_path.
FN_SCOPE_PREFIX = "fn "


@dataclass(frozen=True, slots=True)
class Field:
    """One member of an aggregate.

    Attributes:
        name: Field name; tuple-struct fields use their index ("0", "1", ...)
        ty: Field type descriptor
        span: Span of the field declaration
    """

    name: str
    ty: TypeExpr
    span: Span

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if self.ty is None:
            raise TypeError("ty must not be None")


@dataclass(frozen=True, slots=True)
class GenericParam:
    """Generic parameter of a declaration.

    Attributes:
        name: Parameter name (without leading ' for lifetimes)
        is_const: True for const generics (const N: usize)
    """

    name: str
    is_const: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("generic parameter name must not be empty")


@dataclass(frozen=True, slots=True)
class AggregateDeclaration:
    """Named aggregate type definition (struct, union or enum).

    Materialized by the front end for each declaration in a unit.
    Never mutated by the lint.

    Attributes:
        name: Identifier of the type
        kind: STRUCT/UNION/ENUM
        fields: Fields in declaration order (empty for unit structs and enums)
        span: Declaration span from visibility to closing brace or semicolon,
            excluding outer attributes
        ident_span: Span of the identifier token (inside span)
        attributes: Outer attributes in source order
        generics: Generic parameters in declaration order
        module_path: Enclosing scopes (module names, "fn name" for function bodies)
        scope_attributes: Level-relevant attributes of enclosing scopes, outermost first
    """

    name: str
    kind: ItemKind
    fields: tuple[Field, ...]
    span: Span
    ident_span: Span
    attributes: tuple[Attribute, ...] = ()
    generics: tuple[GenericParam, ...] = ()
    module_path: tuple[str, ...] = ()
    scope_attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("declaration name must not be empty")
        if not self.span.contains(self.ident_span):
            raise ValueError(f"ident_span {self.ident_span} must lie inside span {self.span}")

    @property
    def const_params(self) -> frozenset[str]:
        """Names of const generic parameters."""
        return frozenset(param.name for param in self.generics if param.is_const)

    @property
    def last_field(self) -> Field | None:
        """Last field in declaration order, None if there are no fields."""
        return self.fields[-1] if self.fields else None

    @property
    def qualified_name(self) -> str:
        """Scope-qualified name for display (e.g., "ffi::Header")."""
        return "::".join((*self.module_path, self.name))
