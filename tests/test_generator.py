"""Tests for expression generation."""

import pytest

from chance.errors import EmptyInputError
from chance.expressions.expression import Leaf, Node, operands
from chance.expressions.operators import Operator
from chance.search.generator import generate_expressions


class TestGenerateExpressions:
    """Test exhaustive operator chain construction."""

    @pytest.mark.parametrize("n", range(1, 6))
    def test_count(self, n):
        """Test 4^(n-1) trees for n operands."""
        assert len(list(generate_expressions(range(n)))) == 4 ** (n - 1)

    def test_single_operand(self):
        """Test one operand gives a bare leaf."""
        assert list(generate_expressions([9])) == [Leaf(9)]

    def test_operand_order_preserved(self):
        """Test every tree visits operands in the given order."""
        for expr in generate_expressions([5, 3, 8, 1]):
            assert operands(expr) == [5, 3, 8, 1]

    def test_all_distinct(self):
        """Test no operator assignment is produced twice."""
        exprs = list(generate_expressions([1, 2, 3]))
        assert len(set(exprs)) == 16

    def test_right_leaning_shape(self):
        """Test every left side is a raw operand."""
        for expr in generate_expressions([1, 2, 3]):
            assert isinstance(expr, Node)
            assert isinstance(expr.right, Node)
            assert isinstance(expr.right.right, Leaf)

    def test_order_operators_inner(self):
        """Test operators vary fastest, in generation order."""
        first_four = list(generate_expressions(["a", "b", "c"]))[:4]
        sub = Node("b", Operator.ADD, Leaf("c"))
        assert first_four == [
            Node("a", Operator.ADD, sub),
            Node("a", Operator.SUBTRACT, sub),
            Node("a", Operator.DIVIDE, sub),
            Node("a", Operator.MULTIPLY, sub),
        ]

    def test_empty_fails_on_call(self):
        """Test empty input raises before iteration."""
        with pytest.raises(EmptyInputError):
            generate_expressions([])
