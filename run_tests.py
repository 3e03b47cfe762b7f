#!/usr/bin/env python3
"""
Main test runner for linecalc.

Runs a quick pipeline smoke check and then the unittest suite under tests/.
pytest collects the same tests; this runner only needs the standard library
and click.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_check():
    """Run a few lines through the pipeline, printing each stage."""

    print("🚀 linecalc Test Suite")
    print("=" * 60)

    try:
        from linecalc.lexer import lex, CalculatorError
        from linecalc.parser import parse, format_number
        from linecalc.evaluator import evaluate

        print("✅ All pipeline modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import linecalc modules: {e}")
        return False

    samples = [
        ("2 + 3 * 4\n", 14.0),
        ("10 - 2 - 3\n", 5.0),
        ("7 / 2\n", 3.5),
    ]

    for line, expected in samples:
        print(f"  📝 {line.strip()!r}")
        try:
            tokens = lex(line)
            print(f"     Lexed {len(tokens)} tokens")
            tree = parse(tokens)
            print(f"     Parsed {tree}")
            result = evaluate(tree)
        except CalculatorError as e:
            print(f"     ❌ {e}")
            return False

        if result != expected:
            print(f"     ❌ Expected {format_number(expected)}, got {format_number(result)}")
            return False
        print(f"     ✅ Result {format_number(result)}")

    print()
    return True


def run_unit_tests():
    """Discover and run the tests/ suite."""
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    return runner.run(suite).wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_check() and run_unit_tests()
    print("=" * 60)
    print("✅ All tests passed" if success else "❌ Some tests failed")
    sys.exit(0 if success else 1)
