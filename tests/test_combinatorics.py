"""Tests for subset and permutation enumeration."""

import math

import pytest

from chance.errors import EmptyInputError, InvalidInputError, SetTooLargeError
from chance.search.combinatorics import MAX_SET_SIZE, permutations, power_set


class TestPowerSet:
    """Test power set generation."""

    @pytest.mark.parametrize("n", range(0, 7))
    def test_size(self, n):
        """Test 2^n subsets for n items."""
        assert len(list(power_set(range(n)))) == 2**n

    def test_bit_vector_order(self):
        """Test subsets follow increasing bit-vector order."""
        assert list(power_set(["a", "b", "c"])) == [
            [],
            ["a"],
            ["b"],
            ["a", "b"],
            ["c"],
            ["a", "c"],
            ["b", "c"],
            ["a", "b", "c"],
        ]

    def test_empty_and_full_once(self):
        """Test empty and full subsets each appear exactly once."""
        subsets = list(power_set([4, 5, 6, 7]))
        assert subsets.count([]) == 1
        assert subsets.count([4, 5, 6, 7]) == 1

    def test_duplicate_values_kept_apart(self):
        """Test equal values are separate items."""
        assert list(power_set([1, 1])) == [[], [1], [1], [1, 1]]

    def test_too_large_fails_on_call(self):
        """Test 32 items fail before any enumeration."""
        with pytest.raises(SetTooLargeError):
            power_set(range(32))

    def test_too_large_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            power_set(range(100))

    def test_limit_accepted(self):
        """Test the largest allowed set is accepted lazily."""
        subsets = power_set(range(MAX_SET_SIZE))
        assert next(subsets) == []
        assert next(subsets) == [0]


class TestPermutations:
    """Test permutation generation."""

    @pytest.mark.parametrize("n", range(1, 7))
    def test_size(self, n):
        """Test n! orderings."""
        assert len(list(permutations(range(n)))) == math.factorial(n)

    def test_bijective(self):
        """Test every ordering uses the same items."""
        items = [3, 1, 4, 1, 5]
        for ordering in permutations(items):
            assert sorted(ordering) == sorted(items)

    def test_distinct_orderings(self):
        """Test distinct items give distinct orderings."""
        orderings = [tuple(p) for p in permutations([1, 2, 3, 4])]
        assert len(set(orderings)) == 24

    def test_order(self):
        """Test removed items are appended last."""
        assert list(permutations([1, 2, 3])) == [
            [3, 2, 1],
            [2, 3, 1],
            [3, 1, 2],
            [1, 3, 2],
            [2, 1, 3],
            [1, 2, 3],
        ]

    def test_single_item(self):
        assert list(permutations([7])) == [[7]]

    def test_equal_values_not_collapsed(self):
        """Test equal values still produce n! orderings."""
        assert list(permutations([1, 1])) == [[1, 1], [1, 1]]

    def test_input_not_modified(self):
        items = [1, 2, 3]
        list(permutations(items))
        assert items == [1, 2, 3]

    def test_empty_fails_on_call(self):
        """Test empty input raises before iteration."""
        with pytest.raises(EmptyInputError):
            permutations([])
