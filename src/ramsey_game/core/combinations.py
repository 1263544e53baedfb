"""Size-k vertex subsets in a fixed enumeration order.

Subsets come from take/skip recursion on the smallest remaining vertex with
the *skip* branch explored first, which is reverse lexicographic order::

    >>> list(VertexSubsets(4, 3))
    [(1, 2, 3), (0, 2, 3), (0, 1, 3), (0, 1, 2)]

Clique search reports the first match in this order, so the order is part of
the engine's observable behaviour.
"""

from __future__ import annotations

from collections.abc import Iterator
from math import comb

from ramsey_game.core.types import Vertex


def _take_skip(start: int, n: int, size: int) -> Iterator[tuple[Vertex, ...]]:
    if size == 0:
        yield ()
        return
    if n - start < size:
        return
    yield from _take_skip(start + 1, n, size)
    for rest in _take_skip(start + 1, n, size - 1):
        yield (start, *rest)


class VertexSubsets:
    """Restartable iterable over the size-*k* subsets of ``{0 .. n-1}``.

    Each ``iter()`` starts a fresh lazy walk; subsets are sorted tuples.
    """

    __slots__ = ("n", "k")

    def __init__(self, n: int, k: int) -> None:
        if n < 0 or k < 0:
            raise ValueError(f"Subset sizes must be non-negative, got n={n}, k={k}")
        self.n = n
        self.k = k

    def __iter__(self) -> Iterator[tuple[Vertex, ...]]:
        return _take_skip(0, self.n, self.k)

    def __len__(self) -> int:
        return comb(self.n, self.k)

    def __repr__(self) -> str:
        return f"VertexSubsets(n={self.n}, k={self.k})"
