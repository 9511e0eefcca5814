"""Exception hierarchy for expression search."""


class ChanceError(Exception):
    """Base class for all search errors."""

    pass


class InvalidInputError(ChanceError):
    """Operand sequence violates a generation precondition."""

    pass


class EmptyInputError(InvalidInputError):
    """No operands were supplied."""

    pass


class SetTooLargeError(InvalidInputError):
    """Too many operands to enumerate subsets with a 32-bit mask."""

    pass


class ParseError(ChanceError):
    """Input text or config value is not a valid integer."""

    pass
