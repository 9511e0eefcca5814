"""Binary arithmetic operators with integer semantics."""

from enum import Enum


class Operator(Enum):
    """Arithmetic operators, declared in generation order.

    DIVIDE precedes MULTIPLY. Generation visits operators in this order, so
    it decides which of several equivalent solutions is produced first.
    """

    ADD = "+"
    SUBTRACT = "-"
    DIVIDE = "/"
    MULTIPLY = "*"

    @classmethod
    def values(cls) -> list["Operator"]:
        """Return all operators in generation order."""
        return list(cls)

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, left: int, right: int) -> int:
        """Apply operator to two integers.

        Division truncates toward zero, and dividing by zero yields 0
        instead of raising.
        """
        if self is Operator.ADD:
            return left + right
        elif self is Operator.SUBTRACT:
            return left - right
        elif self is Operator.MULTIPLY:
            return left * right
        else:
            return truncating_divide(left, right)

    def __str__(self) -> str:
        return self.value


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero, 0 for a zero divisor."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient
