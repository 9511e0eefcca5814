"""Collapse expressions that use the same operands and operators in another order."""

from collections import Counter
from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from chance.expressions.expression import Expression, Leaf, operands, operators


@dataclass(frozen=True)
class SimilarOperationKey:
    """Equivalence key: the set of operators and the set of operand values.

    Sets ignore how often a value or operator repeats, so ``1 + 1 + 2`` and
    ``1 + 2`` share a key.
    """

    operators: frozenset
    operands: frozenset

    @classmethod
    def from_expression(cls, expr: Expression) -> "SimilarOperationKey":
        if isinstance(expr, Leaf):
            return cls(operators=frozenset(), operands=frozenset([expr.value]))
        key = cls.from_expression(expr.right)
        return cls(
            operators=key.operators | {expr.operator},
            operands=key.operands | {expr.left},
        )


@dataclass(frozen=True)
class MultisetOperationKey:
    """Like SimilarOperationKey, but counts repeated operands and operators."""

    operators: frozenset
    operands: frozenset

    @classmethod
    def from_expression(cls, expr: Expression) -> "MultisetOperationKey":
        return cls(
            operators=frozenset(Counter(operators(expr)).items()),
            operands=frozenset(Counter(operands(expr)).items()),
        )


def dedupe(expressions: Iterable[Expression], multiset: bool = False) -> list[Expression]:
    """Keep one expression per similarity key.

    The whole input is consumed before anything is returned. When several
    expressions share a key the last one seen is kept; the result is ordered
    by first appearance of each key.

    Args:
        expressions: Expressions whose operands are hashable
        multiset: Compare operand and operator counts instead of plain sets

    Returns:
        List with one expression per distinct key
    """
    key_type = MultisetOperationKey if multiset else SimilarOperationKey
    kept: dict[Hashable, Expression] = {}
    for expr in expressions:
        kept[key_type.from_expression(expr)] = expr
    return list(kept.values())
