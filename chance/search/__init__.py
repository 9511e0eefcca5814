"""Search pipeline: subsets, orderings, operator chains, target filter, dedupe."""

from chance.search.combinatorics import MAX_SET_SIZE, permutations, power_set
from chance.search.dedupe import MultisetOperationKey, SimilarOperationKey, dedupe
from chance.search.driver import (
    candidate_expressions,
    count_candidates,
    find_expressions_for_value,
)
from chance.search.generator import generate_expressions

__all__ = [
    "MAX_SET_SIZE",
    "power_set",
    "permutations",
    "generate_expressions",
    "candidate_expressions",
    "count_candidates",
    "find_expressions_for_value",
    "SimilarOperationKey",
    "MultisetOperationKey",
    "dedupe",
]
