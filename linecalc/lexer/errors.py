"""
Error handling for the linecalc lexer.

Provides error reporting with source location information and
short help text. Also hosts the Diagnostic record and the
CalculatorError base shared by the parser and evaluator errors.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATOR_SYMBOLS


@dataclass
class Diagnostic:
    """Structured error report (message, location, severity, help)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class CalculatorError(Exception):
    """
    Base class for every error raised by the pipeline.

    str() gives the one-line message; the full report lives in
    ``self.diagnostic``.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return self.message


class LexerError(CalculatorError):
    """Raised when the lexer cannot turn the input into tokens."""


class UnexpectedSpaceError(LexerError):
    """A space appeared inside a numeric literal."""

    code = "L001"

    def __init__(self, lexeme: str, location: SourceLocation):
        super().__init__(
            f"Unexpected space inside number '{lexeme}'",
            location,
            help_text="Numbers cannot contain spaces.",
            suggestions=["Remove the space", "Add an operator between the two numbers"]
        )
        self.lexeme = lexeme


class InvalidNumberError(LexerError):
    """The accumulated digits do not form a decimal literal."""

    code = "L002"

    def __init__(self, lexeme: str, location: SourceLocation):
        if lexeme:
            message = f"Invalid number '{lexeme}'"
            help_text = "A number is digits with at most one decimal point."
        else:
            message = "Expected a number"
            help_text = "Every operator needs a number on both sides."
        super().__init__(message, location, help_text=help_text)
        self.lexeme = lexeme


class UnsupportedCharacterError(LexerError):
    """A character outside the recognized alphabet."""

    code = "L003"

    def __init__(self, char: str, location: SourceLocation):
        suggestions = suggest_operator_alternatives(char)
        if char.isprintable():
            help_text = f"The character '{char}' is not part of an arithmetic expression."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        super().__init__(
            f"Unsupported character {char!r}",
            location,
            help_text=help_text,
            suggestions=suggestions
        )
        self.char = char


# Look-alike characters people type for the four supported operators
OPERATOR_LOOKALIKES = {
    '×': '*',
    'x': '*',
    'X': '*',
    '⋅': '*',
    '÷': '/',
    ':': '/',
    '−': '-',
    '–': '-',
}


def suggest_operator_alternatives(char: str) -> List[str]:
    """Suggest a supported operator for a look-alike character."""
    replacement = OPERATOR_LOOKALIKES.get(char)
    if replacement in OPERATOR_SYMBOLS:
        return [f"Use '{replacement}' instead of '{char}'"]
    if char in "()":
        return ["Parentheses are not supported; rely on operator precedence"]
    return []

