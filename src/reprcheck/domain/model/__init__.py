"""Domain model: immutable value objects and entities."""

from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.check_result import CheckResult, FileError
from reprcheck.domain.model.check_stats import CheckStats
from reprcheck.domain.model.compilation_unit import CompilationUnit
from reprcheck.domain.model.configuration import DEFAULT_DIRECTIVE, LintConfig
from reprcheck.domain.model.declaration import AggregateDeclaration, Field, GenericParam
from reprcheck.domain.model.diagnostic import Diagnostic
from reprcheck.domain.model.enums import (
    Applicability,
    AttrStyle,
    ItemKind,
    LintGroup,
    LintLevel,
    ReprHint,
)
from reprcheck.domain.model.expressions import (
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
from reprcheck.domain.model.finding import LintFinding, Suggestion
from reprcheck.domain.model.location import Location
from reprcheck.domain.model.source_file import SourceFile
from reprcheck.domain.model.span import Span

__all__ = [
    # Enums
    "Applicability",
    "AttrStyle",
    "ItemKind",
    "LintGroup",
    "LintLevel",
    "ReprHint",
    # Value objects
    "Span",
    "Location",
    "SourceFile",
    "Attribute",
    "IntLiteral",
    "PathExpr",
    "BinaryExpr",
    "UnaryExpr",
    "CastExpr",
    "OpaqueExpr",
    "ConstExpr",
    "ArrayType",
    "OtherType",
    "TypeExpr",
    "Suggestion",
    "LintFinding",
    # Entities
    "Field",
    "GenericParam",
    "AggregateDeclaration",
    "CompilationUnit",
    "Diagnostic",
    # Results and config
    "CheckResult",
    "CheckStats",
    "FileError",
    "LintConfig",
    "DEFAULT_DIRECTIVE",
]
