"""Generate-and-test search for expressions that hit a target value.

The search is exhaustive with no pruning: every subset of the operands, every
ordering of each subset and every operator assignment is built and evaluated.
For ``n`` operands that is ``sum_k C(n, k) * k! * 4 ** (k - 1)`` candidates
(see ``count_candidates``), which grows roughly like ``n * n! * 4 ** (n - 1)``.
Eight operands already means close to a billion candidates; inputs beyond
about 8 to 10 operands are impractical.
"""

import math
from collections.abc import Iterable, Iterator, Sequence

from tqdm import tqdm

from chance.errors import EmptyInputError
from chance.expressions.expression import Expression, evaluate
from chance.search.combinatorics import permutations, power_set
from chance.search.generator import generate_expressions


def count_candidates(n: int) -> int:
    """Number of expressions the search evaluates for ``n`` operands."""
    return sum(
        math.comb(n, k) * math.factorial(k) * 4 ** (k - 1) for k in range(1, n + 1)
    )


def candidate_expressions(operands: Sequence[int]) -> Iterator[Expression]:
    """Stream every candidate expression over subsets of ``operands``.

    Raises:
        EmptyInputError: If ``operands`` is empty.
        SetTooLargeError: If there are 32 or more operands.
    """
    operands = list(operands)
    if not operands:
        raise EmptyInputError("At least one operand is required")
    return _candidates(power_set(operands))


def _candidates(subsets: Iterable[list[int]]) -> Iterator[Expression]:
    for subset in subsets:
        # The empty subset has no orderings to search.
        if not subset:
            continue
        for ordering in permutations(subset):
            yield from generate_expressions(ordering)


def find_expressions_for_value(
    operands: Sequence[int], target: int, progress: bool = False
) -> Iterator[Expression]:
    """Lazily find every expression over ``operands`` that evaluates to ``target``.

    Input is validated when this function is called, so errors surface before
    any result is requested. The returned iterator is single-use; stopping
    early leaves nothing behind.

    Args:
        operands: Integer operands; order is preserved within each subset
        target: Value to search for
        progress: Show a tqdm progress bar over candidates on stderr

    Returns:
        Iterator over matching expression trees

    Raises:
        EmptyInputError: If ``operands`` is empty.
        SetTooLargeError: If there are 32 or more operands.
    """
    candidates: Iterable[Expression] = candidate_expressions(operands)
    if progress:
        candidates = tqdm(
            candidates, total=count_candidates(len(operands)), desc="Searching", unit="expr"
        )
    return (expr for expr in candidates if evaluate(expr) == target)
