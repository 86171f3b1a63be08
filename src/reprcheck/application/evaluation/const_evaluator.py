"""Constant evaluator over the domain expression tree.

Default ConstEvaluatorProtocol implementation. Values are unsigned
(usize) integers; anything rustc would reject or that depends on
generic parameters evaluates to None.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from reprcheck.domain.model.declaration import FN_SCOPE_PREFIX, AggregateDeclaration
from reprcheck.domain.model.expressions import (
    BinaryExpr,
    CastExpr,
    ConstExpr,
    IntLiteral,
    PathExpr,
    UnaryExpr,
)

logger = logging.getLogger(__name__)

USIZE_BITS = 64
USIZE_MAX = (1 << USIZE_BITS) - 1

_INT_BITS: dict[str, int] = {
    "u8": 8,
    "u16": 16,
    "u32": 32,
    "u64": 64,
    "u128": 128,
    "usize": USIZE_BITS,
    "i8": 7,
    "i16": 15,
    "i32": 31,
    "i64": 63,
    "i128": 127,
    "isize": USIZE_BITS - 1,
}

_LITERAL = re.compile(
    r"^(?:0x(?P<hex>[0-9a-fA-F_]+)|0o(?P<oct>[0-7_]+)|0b(?P<bin>[01_]+)|(?P<dec>[0-9][0-9_]*))"
    r"(?P<suffix>u8|u16|u32|u64|u128|usize|i8|i16|i32|i64|i128|isize)?$"
)


def parse_int_literal(text: str) -> int | None:
    """Parse a Rust integer literal.

    Supports 0x/0o/0b prefixes, `_` separators and integer suffixes.

    Returns:
        Value, or None for floats, malformed literals and values
        that overflow their suffix type
    """
    match = _LITERAL.match(text.strip())
    if match is None:
        return None

    for group, base in (("hex", 16), ("oct", 8), ("bin", 2), ("dec", 10)):
        digits = match.group(group)
        if digits is not None:
            digits = digits.replace("_", "")
            if not digits:
                return None
            value = int(digits, base)
            break
    else:  # pragma: no cover - the regex always matches one group
        return None

    suffix = match.group("suffix")
    if suffix is not None and value >= 1 << _INT_BITS[suffix]:
        return None
    return value


def _apply_binary(op: str, lhs: int, rhs: int) -> int | None:
    match op:
        case "+":
            result = lhs + rhs
        case "-":
            result = lhs - rhs
        case "*":
            result = lhs * rhs
        case "/":
            if rhs == 0:
                return None
            result = lhs // rhs
        case "%":
            if rhs == 0:
                return None
            result = lhs % rhs
        case "<<":
            if rhs >= USIZE_BITS:
                return None
            result = lhs << rhs
        case ">>":
            if rhs >= USIZE_BITS:
                return None
            result = lhs >> rhs
        case "&":
            result = lhs & rhs
        case "|":
            result = lhs | rhs
        case "^":
            result = lhs ^ rhs
        case _:
            return None

    if result < 0 or result > USIZE_MAX:
        return None
    return result


class ConstEvaluator:
    """Evaluates constant expressions against a unit's named constants.

    Stateless between evaluate() calls. Never raises for
    unresolvable input.

    Name resolution stays inside the unit: identifiers resolve in
    the declaration's own scope, function-body scopes fall back to
    their enclosing scopes up to the nearest module, and self::,
    super:: and crate:: prefixes are honoured. `use` imports are
    not followed.
    """

    def __init__(self, constants: Mapping[tuple[str, ...], ConstExpr] | None = None) -> None:
        """Initialize evaluator.

        Args:
            constants: Qualified name (scope segments + name) -> value expression
        """
        self._constants = constants if constants is not None else {}

    def evaluate(self, expr: ConstExpr, context: AggregateDeclaration) -> int | None:
        """Evaluate expr as a non-negative integer.

        Args:
            expr: Constant expression
            context: Declaration the expression appears in

        Returns:
            Value, or None if the expression is not a known constant
        """
        value = self._eval(expr, context.module_path, context.const_params, frozenset())
        logger.debug("evaluated %r in %s -> %s", expr, context.qualified_name, value)
        return value

    def _eval(
        self,
        expr: ConstExpr,
        scope: tuple[str, ...],
        const_params: frozenset[str],
        visiting: frozenset[tuple[str, ...]],
    ) -> int | None:
        match expr:
            case IntLiteral(text=text):
                return parse_int_literal(text)
            case PathExpr():
                return self._eval_path(expr, scope, const_params, visiting)
            case BinaryExpr(op=op, lhs=lhs, rhs=rhs):
                left = self._eval(lhs, scope, const_params, visiting)
                if left is None:
                    return None
                right = self._eval(rhs, scope, const_params, visiting)
                if right is None:
                    return None
                return _apply_binary(op, left, right)
            case UnaryExpr(op="-", operand=operand):
                value = self._eval(operand, scope, const_params, visiting)
                return 0 if value == 0 else None
            case CastExpr(operand=operand, target=target):
                bits = _INT_BITS.get(target.strip())
                if bits is None:
                    return None
                value = self._eval(operand, scope, const_params, visiting)
                if value is None or value >= 1 << bits:
                    return None
                return value
            case _:
                return None

    def _eval_path(
        self,
        expr: PathExpr,
        scope: tuple[str, ...],
        const_params: frozenset[str],
        visiting: frozenset[tuple[str, ...]],
    ) -> int | None:
        if len(expr.segments) == 1 and expr.segments[0] in const_params:
            # Depends on a const generic parameter: not provable.
            return None

        for candidate in self._candidates(expr.segments, scope):
            value_expr = self._constants.get(candidate)
            if value_expr is None:
                continue
            if candidate in visiting:
                logger.debug("cyclic constant %s", "::".join(candidate))
                return None
            # A const is evaluated in the scope it was declared in, without generics.
            return self._eval(value_expr, candidate[:-1], frozenset(), visiting | {candidate})
        return None

    def _candidates(self, segments: tuple[str, ...], scope: tuple[str, ...]) -> list[tuple[str, ...]]:
        """Qualified names a path may refer to, most specific first."""
        head, rest = segments[0], segments[1:]

        if head == "crate":
            return [rest] if rest else []

        if head in ("self", "super"):
            module = _module_of(scope)
            while segments and segments[0] in ("self", "super"):
                if segments[0] == "super":
                    if not module:
                        return []
                    module = module[:-1]
                segments = segments[1:]
            return [module + segments] if segments else []

        candidates = [scope + segments]
        current = scope
        while current and current[-1].startswith(FN_SCOPE_PREFIX):
            current = current[:-1]
            candidates.append(current + segments)
        return candidates


def _module_of(scope: tuple[str, ...]) -> tuple[str, ...]:
    """Nearest enclosing module of a scope (drops function-body scopes)."""
    while scope and scope[-1].startswith(FN_SCOPE_PREFIX):
        scope = scope[:-1]
    return scope
