"""Integer parsing for operand and target input."""

from typing import Any

from chance.errors import ParseError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_integer(text: Any, name: str = "value") -> int:
    """Parse a signed 32-bit integer from text or an int.

    Raises:
        ParseError: If ``text`` is not an integer or is out of range.
    """
    if isinstance(text, bool):
        raise ParseError(f"{name} must be an integer, got {text!r}")
    if isinstance(text, int):
        value = text
    else:
        try:
            value = int(str(text).strip())
        except ValueError:
            raise ParseError(f"{name} must be an integer, got {text!r}") from None

    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(f"{name} {value} is outside the signed 32-bit range")
    return value


def parse_values(text: Any) -> list[int]:
    """Parse operands from ``"1,2,3"`` or a list of integers."""
    if isinstance(text, str):
        parts = text.split(",")
    elif isinstance(text, (list, tuple)):
        parts = list(text)
    else:
        raise ParseError(f"Values must be a comma-separated string or a list, got {text!r}")
    return [parse_integer(part, name="Value") for part in parts]
