"""
linecalc Evaluator Package

Walks the parser's expression tree and computes a float result.

Author: xwest
"""

from .evaluator import Evaluator, evaluate
from .errors import EvaluationError, DivisionByZeroError

__all__ = [
    "Evaluator",
    "evaluate",
    "EvaluationError",
    "DivisionByZeroError",
]
