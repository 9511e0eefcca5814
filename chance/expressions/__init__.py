"""Operators, expression trees and their graph view."""

from chance.expressions.expression import (
    Expression,
    Leaf,
    Node,
    depth,
    evaluate,
    operands,
    operators,
    render,
)
from chance.expressions.graph import ExpressionGraphBuilder, NodeKind, to_text_tree
from chance.expressions.operators import Operator, truncating_divide

__all__ = [
    "Operator",
    "truncating_divide",
    "Expression",
    "Leaf",
    "Node",
    "evaluate",
    "render",
    "operands",
    "operators",
    "depth",
    "ExpressionGraphBuilder",
    "NodeKind",
    "to_text_tree",
]
