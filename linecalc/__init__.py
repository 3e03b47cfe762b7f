"""
linecalc Package

A small arithmetic expression evaluator for one line of input, built as a
classic compiler front end.

Architecture:
    linecalc/
    ├── lexer/           # Text -> tokens
    ├── parser/          # Tokens -> expression tree
    ├── evaluator/       # Expression tree -> float
    └── cli.py           # Read a line, run the pipeline, print the result

Author: xwest
License: MIT
"""

from .__version__ import __version__

__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, lex, Token, TokenType, CalculatorError, LexerError
from .parser import Parser, parse, parse_string, Expression, NumberExpr, BinaryExpr, Operator, ParseError
from .evaluator import Evaluator, evaluate, EvaluationError, DivisionByZeroError


def evaluate_string(source: str, filename: str = "<string>") -> float:
    """
    Run the whole pipeline over one input line.

    Args:
        source: Input text, normally ending in a newline
        filename: Filename for error reporting

    Returns:
        The computed value

    Raises:
        CalculatorError: The first lexer, parser or evaluation error
    """
    return evaluate(parse(lex(source, filename)))


__all__ = [
    # Pipeline stages
    "Lexer", "lex",
    "Parser", "parse", "parse_string",
    "Evaluator", "evaluate",
    "evaluate_string",

    # Data types
    "Token", "TokenType",
    "Expression", "NumberExpr", "BinaryExpr", "Operator",

    # Errors
    "CalculatorError", "LexerError", "ParseError", "EvaluationError",
    "DivisionByZeroError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
