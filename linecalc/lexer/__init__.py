"""
linecalc Lexer Package

Implements the lexical analyzer for one line of arithmetic input.

Key Features:
- Plain decimal literals (42, 3.14, .5, 5.)
- The four operators + - * /
- Spaces between tokens, never inside a number
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, OPERATOR_SYMBOLS
from .lexer import Lexer, lex
from .errors import (
    Diagnostic, CalculatorError, LexerError,
    UnexpectedSpaceError, InvalidNumberError, UnsupportedCharacterError,
)

__all__ = [
    "Lexer",
    "lex",
    "Token",
    "TokenType",
    "SourceLocation",
    "OPERATOR_SYMBOLS",
    "Diagnostic",
    "CalculatorError",
    "LexerError",
    "UnexpectedSpaceError",
    "InvalidNumberError",
    "UnsupportedCharacterError",
]
