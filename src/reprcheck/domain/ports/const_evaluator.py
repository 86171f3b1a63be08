"""Const evaluator protocol.

Reduces array-length expressions to concrete integers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reprcheck.domain.model.declaration import AggregateDeclaration
    from reprcheck.domain.model.expressions import ConstExpr


class ConstEvaluatorProtocol(Protocol):
    """Contract for constant evaluation.

    Implementations must never raise for unresolvable input:
    anything that is not provably a non-negative integer is None.

    Example:
        class AlwaysZero:
            def evaluate(self, expr, context):
                return 0
    """

    def evaluate(self, expr: ConstExpr, context: AggregateDeclaration) -> int | None:
        """Evaluate expr as a non-negative integer.

        Args:
            expr: Constant expression (usually an array length)
            context: Declaration the expression appears in (scope, generics)

        Returns:
            Value, or None if the expression is not a known constant
        """
        ...
