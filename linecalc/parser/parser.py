"""
linecalc precedence-climbing parser.

One method per precedence level, lowest first:

    Start    := Sum END
    Sum      := Product ( ('+' | '-') Product )*
    Product  := Number  ( ('*' | '/') Number )*
    Number   := NUMBER

Each level folds left-associatively, so ``10 - 2 - 3`` parses as
``((10 - 2) - 3)``. One token of lookahead, no backtracking.

Author: xwest
"""

import logging
from typing import FrozenSet, List, Optional

from ..lexer.tokens import Token, SourceLocation
from .ast_nodes import (
    Expression, NumberExpr, BinaryExpr, Operator, SourceSpan,
    SUM_OPERATORS, PRODUCT_OPERATORS,
)
from .errors import (
    UnexpectedTokenError, UnexpectedEndOfInputError, UnexpectedTrailingInputError
)

logger = logging.getLogger(__name__)

OPERATORS_BY_SYMBOL = {operator.symbol: operator for operator in Operator}


class Parser:
    """
    linecalc recursive-descent parser.

    Consumes a token list positionally and builds an expression tree.
    The token list is expected to end with END; running out of tokens
    before that is reported as UnexpectedEndOfInputError.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Expression:
        """
        Parse the token list into an expression tree.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: On the first syntax error
        """
        self.current = 0
        expression = self._parse_sum()

        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError("end of input", self._last_location())
        if not token.is_end:
            raise UnexpectedTrailingInputError(token)

        logger.debug("Parsed expression %s", expression)
        return expression

    # Precedence levels

    def _parse_sum(self) -> Expression:
        """Parse '+' and '-' chains of products."""
        left = self._parse_product()
        while True:
            operator = self._match_operator(SUM_OPERATORS)
            if operator is None:
                break
            right = self._parse_product()
            left = BinaryExpr(operator, left, right, _join_spans(left, right))
        return left

    def _parse_product(self) -> Expression:
        """Parse '*' and '/' chains of numbers."""
        left = self._parse_number()
        while True:
            operator = self._match_operator(PRODUCT_OPERATORS)
            if operator is None:
                break
            right = self._parse_number()
            left = BinaryExpr(operator, left, right, _join_spans(left, right))
        return left

    def _parse_number(self) -> NumberExpr:
        """Parse a single numeric literal."""
        token = self._advance()
        if token is None:
            raise UnexpectedEndOfInputError("a number", self._last_location())
        if not token.is_number:
            raise UnexpectedTokenError("a number", token)
        return NumberExpr(token.value, SourceSpan(token.location, token.location))

    # Utility methods

    def _match_operator(self, operators: FrozenSet[Operator]) -> Optional[Operator]:
        """Consume the next token if it is one of ``operators``."""
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError("an operator or end of input", self._last_location())
        if not token.is_operator:
            return None

        operator = OPERATORS_BY_SYMBOL.get(token.value)
        if operator not in operators:
            return None

        self._advance()
        return operator

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming, None when exhausted."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _advance(self) -> Optional[Token]:
        """Consume and return current token, None when exhausted."""
        token = self._peek()
        if token is not None:
            self.current += 1
        return token

    def _last_location(self) -> Optional[SourceLocation]:
        if self.tokens:
            return self.tokens[-1].location
        return None


def _join_spans(left: Expression, right: Expression) -> Optional[SourceSpan]:
    if left.span is None or right.span is None:
        return None
    return SourceSpan(left.span.start, right.span.end)


def parse(tokens: List[Token]) -> Expression:
    """
    Convenience function to parse a token list.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()


def parse_string(source: str, filename: str = "<string>") -> Expression:
    """
    Convenience function to lex and parse an input line.

    Args:
        source: Input text, normally ending in a newline
        filename: Filename for error reporting

    Returns:
        Expression tree

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import lex

    return Parser(lex(source, filename)).parse()
