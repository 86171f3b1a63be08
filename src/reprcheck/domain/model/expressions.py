"""Constant expression and type descriptor trees.

Front ends lower their syntax into these nodes; the const evaluator
and the lint only ever see this representation.
"""

from __future__ import annotations

from dataclasses import dataclass

BINARY_OPERATORS = frozenset({"+", "-", "*", "/", "%", "<<", ">>", "&", "|", "^"})
UNARY_OPERATORS = frozenset({"-", "!"})


@dataclass(frozen=True, slots=True)
class IntLiteral:
    """Integer literal as written (e.g., "0", "0x10", "1_000usize")."""

    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("literal text must not be empty")


@dataclass(frozen=True, slots=True)
class PathExpr:
    """Reference to a named constant or generic parameter.

    Attributes:
        segments: Path segments (e.g., ("self", "LEN") for self::LEN)
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.segments:
            raise ValueError("segments must not be empty")
        if any(not segment for segment in self.segments):
            raise ValueError(f"segments must not contain empty names: {self.segments}")

    def __str__(self) -> str:
        return "::".join(self.segments)


@dataclass(frozen=True, slots=True)
class BinaryExpr:
    """Binary arithmetic or bitwise operation."""

    op: str
    lhs: ConstExpr
    rhs: ConstExpr

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.op not in BINARY_OPERATORS:
            raise ValueError(f"unsupported binary operator: {self.op!r}")


@dataclass(frozen=True, slots=True)
class UnaryExpr:
    """Unary negation or bitwise not."""

    op: str
    operand: ConstExpr

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.op not in UNARY_OPERATORS:
            raise ValueError(f"unsupported unary operator: {self.op!r}")


@dataclass(frozen=True, slots=True)
class CastExpr:
    """`operand as target` cast."""

    operand: ConstExpr
    target: str


@dataclass(frozen=True, slots=True)
class OpaqueExpr:
    """Expression the front end does not model (calls, blocks with statements...).

    Never evaluates to a value.
    """

    text: str


ConstExpr = IntLiteral | PathExpr | BinaryExpr | UnaryExpr | CastExpr | OpaqueExpr


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Fixed-length array type [element; length]."""

    element: TypeExpr
    length: ConstExpr


@dataclass(frozen=True, slots=True)
class OtherType:
    """Any non-array type, kept as source text."""

    text: str


TypeExpr = ArrayType | OtherType
