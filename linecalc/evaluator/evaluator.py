"""
Tree-walking evaluator for linecalc.

Author: xwest
"""

import logging

from ..parser.ast_nodes import Expression, ExpressionVisitor, NumberExpr, BinaryExpr, Operator
from .errors import DivisionByZeroError

logger = logging.getLogger(__name__)


class Evaluator(ExpressionVisitor):
    """
    Computes the value of an expression tree.

    Post-order walk: both operands are evaluated (left first) before the
    node's operator is applied.
    """

    def evaluate(self, expression: Expression) -> float:
        """
        Evaluate an expression tree.

        Raises:
            DivisionByZeroError: If a divisor evaluates to exactly 0.0
            TypeError: If ``expression`` is not an expression node
        """
        if not isinstance(expression, Expression):
            raise TypeError(f"Cannot evaluate {type(expression).__name__}")
        return expression.accept(self)

    def visit_number(self, node: NumberExpr) -> float:
        return node.value

    def visit_binary(self, node: BinaryExpr) -> float:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)

        if node.operator is Operator.ADD:
            return left + right
        if node.operator is Operator.SUBTRACT:
            return left - right
        if node.operator is Operator.MULTIPLY:
            return left * right
        if node.operator is Operator.DIVIDE:
            if right == 0.0:
                raise DivisionByZeroError(node)
            return left / right

        raise TypeError(f"Unknown operator {node.operator!r}")


def evaluate(expression: Expression) -> float:
    """Convenience function to evaluate an expression tree."""
    result = Evaluator().evaluate(expression)
    logger.debug("Evaluated %s = %r", expression, result)
    return result
