"""Exhaustive construction of operator chains over an ordered operand list."""

from collections.abc import Iterator, Sequence
from typing import Any

from chance.errors import EmptyInputError
from chance.expressions.expression import Expression, Leaf, Node
from chance.expressions.operators import Operator


def generate_expressions(operands: Sequence[Any]) -> Iterator[Expression]:
    """Build every right-leaning expression over ``operands`` in their given order.

    Each of the ``n - 1`` operator slots independently takes every operator,
    giving ``4 ** (n - 1)`` trees. Sub-expressions over the remaining operands
    form the outer loop and operators the inner loop, so for ``[a, b, c]``
    the first trees are ``a + (b + c)``, ``a - (b + c)``, ``a / (b + c)``.

    Args:
        operands: Non-empty operand sequence

    Returns:
        Lazy iterator over expression trees

    Raises:
        EmptyInputError: If ``operands`` is empty.
    """
    operands = list(operands)
    if not operands:
        raise EmptyInputError("Cannot build expressions from zero operands")
    return _generate(operands)


def _generate(operands: list[Any]) -> Iterator[Expression]:
    first, rest = operands[0], operands[1:]
    if not rest:
        yield Leaf(first)
        return

    for sub_expression in _generate(rest):
        for operator in Operator.values():
            yield Node(first, operator, sub_expression)
