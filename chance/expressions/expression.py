"""Right-leaning expression trees over a fixed operand order."""

from dataclasses import dataclass
from typing import Any, Union

from chance.expressions.operators import Operator


@dataclass(frozen=True)
class Leaf:
    """A single operand with no operator."""

    value: Any

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Node:
    """An operator applied to a raw operand and a sub-expression.

    The left side is always a single operand and the right side is a full
    sub-expression, so every tree is a chain ``a op1 (b op2 (c op3 d))``.
    """

    left: Any
    operator: Operator
    right: "Expression"

    def __str__(self) -> str:
        return f"{self.left} {self.operator} {self.right}"


Expression = Union[Leaf, Node]


def evaluate(expr: Expression) -> int:
    """Evaluate an expression tree.

    The right sub-expression is evaluated first, then the node's operator is
    applied to the left operand and that result.

    Args:
        expr: Expression tree over integer operands

    Returns:
        Integer value of the expression
    """
    if isinstance(expr, Leaf):
        return expr.value
    return expr.operator.apply(expr.left, evaluate(expr.right))


def render(expr: Expression) -> str:
    """Flat text form, e.g. ``1 + 2 * 3``. Never parenthesized."""
    return str(expr)


def operands(expr: Expression) -> list[Any]:
    """Operands in left-to-right order."""
    result = []
    while isinstance(expr, Node):
        result.append(expr.left)
        expr = expr.right
    result.append(expr.value)
    return result


def operators(expr: Expression) -> list[Operator]:
    """Operators in left-to-right order."""
    result = []
    while isinstance(expr, Node):
        result.append(expr.operator)
        expr = expr.right
    return result


def depth(expr: Expression) -> int:
    """Number of operator applications in the chain."""
    return len(operators(expr))
