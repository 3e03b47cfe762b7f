"""
linecalc lexer - turns one line of input into tokens.

Scans character by character with an accumulator for the number being
read. Numbers are only flushed when an operator or the newline shows up,
so a line without a trailing newline never yields its last number or the
END token. Callers reading from a stream should go through
``linecalc.cli.read_line`` which guarantees the newline.

xwest
"""

import logging
import re
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, OPERATOR_SYMBOLS, NUMBER_CHARS, SPACE, NEWLINE
)
from .errors import (
    UnexpectedSpaceError, InvalidNumberError, UnsupportedCharacterError
)

logger = logging.getLogger(__name__)

# Digits with at most one decimal point: 1, 1.5, .5, 5.
DECIMAL_PATTERN = re.compile(r'(?:\d+\.?\d*|\.\d+)\Z')


class Lexer:
    """
    linecalc lexical analyzer.

    Converts a single input line into a list of NUMBER, OPERATOR and END
    tokens. The first error aborts tokenization.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with an input line.

        Args:
            source: Input text, normally one line ending in a newline
            filename: Name of the input for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.tokens: List[Token] = []

        # Number currently being read
        self._number = ""
        self._number_start: Optional[int] = None
        self._last_was_space = False

    def tokenize(self) -> List[Token]:
        """
        Tokenize the input line.

        Returns:
            List of tokens, ending in END when the input holds a newline

        Raises:
            LexerError: On the first character that cannot be tokenized
        """
        self.pos = 0
        self.tokens = []
        self._number = ""
        self._number_start = None
        self._last_was_space = False

        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char in NUMBER_CHARS:
                if self._number and self._last_was_space:
                    raise UnexpectedSpaceError(self._number, self._location(self.pos))
                if not self._number:
                    self._number_start = self.pos
                self._number += char
            elif char == SPACE:
                pass
            elif char in OPERATOR_SYMBOLS:
                self._flush_number()
                self.tokens.append(
                    Token(TokenType.OPERATOR, char, char, self._location(self.pos))
                )
            elif char == NEWLINE:
                self._flush_number()
                self.tokens.append(
                    Token(TokenType.END, char, None, self._location(self.pos))
                )
                # One line per run
                break
            else:
                raise UnsupportedCharacterError(char, self._location(self.pos))

            self._last_was_space = char == SPACE
            self.pos += 1

        logger.debug("Lexed %d tokens from %s", len(self.tokens), self.filename)
        return self.tokens

    def _flush_number(self):
        """Emit the accumulated literal as a NUMBER token and reset it."""
        start = self._number_start if self._number_start is not None else self.pos
        location = self._location(start)

        if not DECIMAL_PATTERN.match(self._number):
            raise InvalidNumberError(self._number, location)

        self.tokens.append(
            Token(TokenType.NUMBER, self._number, float(self._number), location)
        )
        self._number = ""
        self._number_start = None

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(self.filename, 1, offset + 1, offset)


def lex(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize an input line.

    Args:
        source: Input text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()

