"""
Evaluation error handling for linecalc.

Division by zero is the only runtime failure; overflow and underflow
follow IEEE-754 and are not trapped.

Author: xwest
"""

from typing import Optional

from ..lexer.errors import CalculatorError
from ..parser.ast_nodes import BinaryExpr


class EvaluationError(CalculatorError):
    """Exception raised when a well-formed tree cannot be evaluated."""

    def __init__(self, message: str, node: Optional[BinaryExpr] = None, help_text: Optional[str] = None):
        location = node.span.start if node is not None and node.span is not None else None
        super().__init__(message, location, help_text=help_text)
        self.node = node


class DivisionByZeroError(EvaluationError):
    """The right operand of '/' evaluated to exactly zero."""

    code = "E001"

    def __init__(self, node: Optional[BinaryExpr] = None):
        super().__init__(
            "Division by zero",
            node,
            help_text=f"The divisor in {node} evaluates to 0." if node is not None else None
        )

