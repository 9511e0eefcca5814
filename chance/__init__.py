"""Find arithmetic expressions over a set of integers that evaluate to a target."""

from chance.errors import (
    ChanceError,
    EmptyInputError,
    InvalidInputError,
    ParseError,
    SetTooLargeError,
)
from chance.expressions import Leaf, Node, Operator, evaluate, render
from chance.search import dedupe, find_expressions_for_value

__version__ = "1.0.0"

__all__ = [
    "Operator",
    "Leaf",
    "Node",
    "evaluate",
    "render",
    "find_expressions_for_value",
    "dedupe",
    "ChanceError",
    "InvalidInputError",
    "EmptyInputError",
    "SetTooLargeError",
    "ParseError",
]
