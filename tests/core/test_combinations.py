"""Tests for VertexSubsets enumeration."""

from itertools import combinations
from math import comb

import pytest

from ramsey_game.core.combinations import VertexSubsets


class TestOrder:
    def test_k4_triangles(self) -> None:
        assert list(VertexSubsets(4, 3)) == [
            (1, 2, 3), (0, 2, 3), (0, 1, 3), (0, 1, 2),
        ]

    def test_pairs(self) -> None:
        assert list(VertexSubsets(3, 2)) == [(1, 2), (0, 2), (0, 1)]

    @pytest.mark.parametrize(("n", "k"), [(5, 2), (6, 3), (7, 4), (8, 5)])
    def test_reverse_lexicographic(self, n: int, k: int) -> None:
        expected = list(combinations(range(n), k))[::-1]
        assert list(VertexSubsets(n, k)) == expected


class TestCounts:
    @pytest.mark.parametrize(("n", "k"), [(4, 2), (6, 3), (9, 4), (10, 10)])
    def test_total_and_unique(self, n: int, k: int) -> None:
        subsets = list(VertexSubsets(n, k))
        assert len(subsets) == comb(n, k)
        assert len(set(subsets)) == len(subsets)
        assert all(len(s) == k and list(s) == sorted(s) for s in subsets)

    def test_len(self) -> None:
        assert len(VertexSubsets(10, 3)) == 120

    def test_k_larger_than_n_is_empty(self) -> None:
        assert list(VertexSubsets(3, 4)) == []
        assert len(VertexSubsets(3, 4)) == 0

    def test_empty_subset(self) -> None:
        assert list(VertexSubsets(3, 0)) == [()]

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            VertexSubsets(3, -1)


class TestLaziness:
    def test_restartable(self) -> None:
        subsets = VertexSubsets(5, 3)
        assert list(subsets) == list(subsets)

    def test_independent_iterators(self) -> None:
        subsets = VertexSubsets(5, 2)
        first = iter(subsets)
        next(first)
        second = iter(subsets)
        assert next(second) == (3, 4)
        assert next(first) == (2, 4)
