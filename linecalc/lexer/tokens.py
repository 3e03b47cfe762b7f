"""
Token definitions for the linecalc lexer.

The vocabulary is deliberately small:
- Numbers (plain decimal literals, always floats)
- Operators (+, -, *, /)
- The end-of-input marker emitted when the line's newline is reached

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Enumeration of all token types produced by the lexer."""

    NUMBER = auto()                 # 42, 3.14, .5, 5.
    OPERATOR = auto()               # + - * /
    END = auto()                    # end of input (the line's newline)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input line.

    Used for error reporting and debugging output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value and
    source location. NUMBER tokens carry a float value, OPERATOR tokens
    carry their symbol, END carries None.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # float for NUMBER, symbol for OPERATOR
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is None:
            return self.type.name
        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_end(self) -> bool:
        return self.type == TokenType.END


# Lookup tables used by the lexer for character classification

OPERATOR_SYMBOLS = frozenset({"+", "-", "*", "/"})

NUMBER_CHARS = frozenset("0123456789.")

SPACE = " "
NEWLINE = "\n"
