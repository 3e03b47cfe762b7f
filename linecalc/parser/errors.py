"""
Error handling for the linecalc parser.

Every parse failure is one of three kinds: a token in the wrong place,
a token list that ran out before END, or tokens left over after a
complete expression.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import CalculatorError


class ParseError(CalculatorError):
    """
    Exception raised when the parser encounters a syntax error.

    Carries the offending token when there is one.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message, location, help_text=help_text)
        self.token = token


class UnexpectedTokenError(ParseError):
    """A number was expected but something else was found."""

    code = "P001"

    def __init__(self, expected: str, found: Token):
        super().__init__(
            f"Expected {expected}, found {describe_token(found)}",
            found.location,
            token=found,
            help_text=f"The parser expected {expected} at this position."
        )
        self.expected = expected


class UnexpectedEndOfInputError(ParseError):
    """The token list ended before an END token was reached."""

    code = "P002"

    def __init__(self, expected: str, location: Optional[SourceLocation] = None):
        super().__init__(
            f"Unexpected end of input, expected {expected}",
            location,
            help_text="The input ended early. Lines must end with a newline."
        )
        self.expected = expected


class UnexpectedTrailingInputError(ParseError):
    """A complete expression was followed by something other than END."""

    code = "P003"

    def __init__(self, found: Token):
        super().__init__(
            f"Unexpected {describe_token(found)} after end of expression",
            found.location,
            token=found,
            help_text="Separate numbers with an operator."
        )


def describe_token(token: Token) -> str:
    """Human-readable description of a token for error messages."""
    if token.is_number:
        return f"number '{token.lexeme}'"
    if token.is_operator:
        return f"operator '{token.value}'"
    return "end of input"

