"""Subset and ordering enumeration over operand sequences."""

from collections.abc import Iterator, Sequence
from typing import Any

from chance.errors import EmptyInputError, SetTooLargeError

# Subsets are enumerated with a signed 32-bit mask.
MAX_SET_SIZE = 31


def power_set(items: Sequence[Any]) -> Iterator[list[Any]]:
    """Enumerate every subset of ``items``.

    Subsets are emitted in increasing bit-vector order: subset ``k`` holds
    item ``i`` whenever bit ``i`` of ``k`` is set. Chosen items keep their
    original relative order. Both the empty and the full subset are included.

    Args:
        items: Sequence of fewer than 32 items

    Returns:
        Lazy iterator over ``2 ** len(items)`` lists

    Raises:
        SetTooLargeError: If ``items`` has 32 or more elements. Raised on call,
            before any subset is produced.
    """
    items = list(items)
    if len(items) > MAX_SET_SIZE:
        raise SetTooLargeError(
            f"Set of {len(items)} items is too large to generate power sets for "
            f"(limit {MAX_SET_SIZE})"
        )
    return _power_set(items)


def _power_set(items: list[Any]) -> Iterator[list[Any]]:
    for bit_vector in range(2 ** len(items)):
        yield [item for index, item in enumerate(items) if (1 << index) & bit_vector]


def permutations(items: Sequence[Any]) -> Iterator[list[Any]]:
    """Enumerate every ordering of ``items``.

    Items are distinguished by position, so equal values produce repeated
    orderings. For each index, that item is removed, the rest are permuted
    recursively, and the removed item is appended to each result.

    Raises:
        EmptyInputError: If ``items`` is empty.
    """
    items = list(items)
    if not items:
        raise EmptyInputError("Cannot permute an empty sequence")
    return _permutations(items)


def _permutations(items: list[Any]) -> Iterator[list[Any]]:
    if len(items) == 1:
        yield items
        return

    for i in range(len(items)):
        rest = items[:i] + items[i + 1 :]
        removed = items[i]
        for permutation in _permutations(rest):
            yield permutation + [removed]
