"""
Expression tree node definitions for linecalc.

The tree is a closed set of two node types: NumberExpr leaves and
BinaryExpr internal nodes. Nodes are frozen dataclasses, so a node is
never mutated once the parser has built it, and each BinaryExpr owns
its two children.

Author: xwest
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from ..lexer.tokens import SourceLocation


class Operator(Enum):
    """Binary arithmetic operators, valued by their source symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value


# Precedence groups, lowest first
SUM_OPERATORS = frozenset({Operator.ADD, Operator.SUBTRACT})
PRODUCT_OPERATORS = frozenset({Operator.MULTIPLY, Operator.DIVIDE})


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ExpressionVisitor(ABC):
    """Visitor interface over the two expression node types."""

    @abstractmethod
    def visit_number(self, node: 'NumberExpr') -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: 'BinaryExpr') -> Any:
        pass


class Expression(ABC):
    """Base class for expression tree nodes."""

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class NumberExpr(Expression):
    """Numeric literal leaf."""
    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_number(self)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class BinaryExpr(Expression):
    """Binary operation node."""
    operator: Operator
    left: Expression
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.operator, Operator):
            raise TypeError(f"BinaryExpr operator must be an Operator, got {self.operator!r}")
        for name in ("left", "right"):
            child = getattr(self, name)
            if not isinstance(child, Expression):
                raise TypeError(f"BinaryExpr {name} operand must be an Expression, got {child!r}")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_binary(self)

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator.symbol} {self.right})"


def format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it is integral."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
