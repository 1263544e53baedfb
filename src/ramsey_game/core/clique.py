"""Monochromatic clique detection."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations
from typing import TYPE_CHECKING

from ramsey_game.core.combinations import VertexSubsets

if TYPE_CHECKING:
    from ramsey_game.core.enums import Color
    from ramsey_game.core.graph import CompleteGraph
    from ramsey_game.core.types import Edge, Vertex


class CliqueDetector:
    """Static clique checks over a :class:`CompleteGraph`.

    The search is exhaustive: ``C(n, k)`` subsets with ``C(k, 2)`` edge
    lookups each.  Fine for the tens of vertices the game is played on.
    """

    @staticmethod
    def clique_edges(clique: Iterable[Vertex]) -> list[Edge]:
        """Canonical edges between the vertices of *clique*."""
        return list(combinations(sorted(clique), 2))

    @staticmethod
    def is_monochromatic(
        graph: CompleteGraph, color: Color, subset: Iterable[Vertex]
    ) -> bool:
        """Is every edge inside *subset* colored *color*?"""
        return all(
            graph[edge] == color for edge in CliqueDetector.clique_edges(subset)
        )

    @staticmethod
    def find_monochromatic_clique(
        graph: CompleteGraph, color: Color, k: int
    ) -> tuple[Vertex, ...] | None:
        """First size-*k* clique of *color* in :class:`VertexSubsets` order."""
        for subset in VertexSubsets(graph.n, k):
            if CliqueDetector.is_monochromatic(graph, color, subset):
                return subset
        return None

    @staticmethod
    def has_monochromatic_clique(graph: CompleteGraph, color: Color, k: int) -> bool:
        return CliqueDetector.find_monochromatic_clique(graph, color, k) is not None
