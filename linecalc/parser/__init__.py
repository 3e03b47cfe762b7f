"""
linecalc Parser Package

Implements a precedence-climbing recursive descent parser that turns the
lexer's tokens into a binary expression tree.

Key Features:
- '*' and '/' bind tighter than '+' and '-'
- Left associativity within a precedence level
- Immutable, structurally comparable tree nodes
- Typed errors for misplaced, missing and leftover tokens

Author: xwest
"""

from .ast_nodes import (
    Operator, Expression, NumberExpr, BinaryExpr, ExpressionVisitor, SourceSpan,
    SUM_OPERATORS, PRODUCT_OPERATORS, format_number,
)
from .parser import Parser, parse, parse_string
from .errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError, UnexpectedTrailingInputError,
)

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string",

    # Tree nodes
    "Operator", "Expression", "NumberExpr", "BinaryExpr",
    "ExpressionVisitor", "SourceSpan",
    "SUM_OPERATORS", "PRODUCT_OPERATORS", "format_number",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnexpectedEndOfInputError",
    "UnexpectedTrailingInputError",
]
