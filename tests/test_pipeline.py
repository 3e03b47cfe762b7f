"""
End-to-end tests for linecalc.

Runs input lines through lexer, parser and evaluator together.

Author: xwest
"""

import operator
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from linecalc import (
    evaluate_string, lex, parse, evaluate, CalculatorError, LexerError, ParseError,
    EvaluationError, DivisionByZeroError,
)
from linecalc.lexer import UnexpectedSpaceError, UnsupportedCharacterError, InvalidNumberError
from linecalc.parser import UnexpectedEndOfInputError


class TestPipeline(unittest.TestCase):
    """Test the full lex/parse/evaluate pipeline."""

    def test_binary_operations(self):
        operations = {"+": operator.add, "-": operator.sub, "*": operator.mul, "/": operator.truediv}
        for symbol, function in operations.items():
            for left, right in ((6, 3), (2.5, 4), (0, 7), (1.25, 0.5)):
                with self.subTest(expression=f"{left} {symbol} {right}"):
                    result = evaluate_string(f"{left} {symbol} {right}\n")
                    self.assertEqual(result, function(float(left), float(right)))

    def test_precedence(self):
        self.assertEqual(evaluate_string("2 + 3 * 4\n"), 14.0)

    def test_left_associativity(self):
        self.assertEqual(evaluate_string("10 - 2 - 3\n"), 5.0)
        self.assertEqual(evaluate_string("100 / 10 / 5\n"), 2.0)

    def test_longer_expression(self):
        self.assertEqual(evaluate_string("1 + 2 * 3 - 4 / 2\n"), 5.0)

    def test_decimals_without_spaces(self):
        self.assertEqual(evaluate_string(".5+.25*2\n"), 1.0)

    def test_idempotence(self):
        line = "7 - 3 * 2 / 4 + 1\n"
        first = evaluate(parse(lex(line)))
        second = evaluate(parse(lex(line)))

        self.assertEqual(first, second)
        self.assertEqual(lex(line), lex(line))
        self.assertEqual(parse(lex(line)), parse(lex(line)))

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            evaluate_string("5 / 0\n")

    def test_space_inside_number(self):
        with self.assertRaises(UnexpectedSpaceError):
            evaluate_string("1 2 + 3\n")

    def test_unsupported_character(self):
        with self.assertRaises(UnsupportedCharacterError) as ctx:
            evaluate_string("2 ^ 3\n")

        self.assertEqual(ctx.exception.char, "^")

    def test_number_after_complete_sum(self):
        # The lexer sees "3 4" as a number interrupted by a space before
        # the parser could report the leftover token.
        with self.assertRaises(UnexpectedSpaceError):
            evaluate_string("2 + 3 4\n")

    def test_missing_newline(self):
        with self.assertRaises(UnexpectedEndOfInputError):
            evaluate_string("2 + 3")

    def test_empty_line(self):
        with self.assertRaises(InvalidNumberError):
            evaluate_string("\n")

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(LexerError, CalculatorError))
        self.assertTrue(issubclass(ParseError, CalculatorError))
        self.assertTrue(issubclass(EvaluationError, CalculatorError))


if __name__ == '__main__':
    unittest.main()
