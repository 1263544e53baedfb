"""Tests for CompleteGraph."""

import pytest

from ramsey_game.core.enums import Color
from ramsey_game.core.errors import InvalidConfigError, InvalidEdgeError
from ramsey_game.core.graph import CompleteGraph


class TestGraphInitial:
    @pytest.mark.parametrize("n", [2, 3, 6, 10])
    def test_every_edge_present(self, n: int) -> None:
        graph = CompleteGraph(n)
        assert len(graph) == n * (n - 1) // 2
        assert graph.edge_count == len(graph)

    def test_all_uncolored(self) -> None:
        graph = CompleteGraph(5)
        assert graph.colored_count == 0
        assert all(graph[e] is None for e in graph)
        assert not graph.is_full

    def test_edges_canonical_order(self) -> None:
        assert CompleteGraph(4).edges() == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
        ]

    @pytest.mark.parametrize("n", [0, 1, -3])
    def test_too_few_vertices(self, n: int) -> None:
        with pytest.raises(InvalidConfigError):
            CompleteGraph(n)


class TestGraphColoring:
    def test_set_and_get(self) -> None:
        graph = CompleteGraph(4)
        graph[2, 1] = Color.BLUE
        assert graph[1, 2] == Color.BLUE
        assert graph.color_of("1-2") == Color.BLUE
        assert graph.colored_count == 1

    def test_set_touches_one_edge(self) -> None:
        graph = CompleteGraph(5)
        before = graph.coloring()
        graph.set_color((0, 4), Color.RED)
        after = graph.coloring()
        changed = [e for e in before if before[e] != after[e]]
        assert changed == [(0, 4)]

    def test_uncolor(self) -> None:
        graph = CompleteGraph(3)
        graph[0, 1] = Color.RED
        graph[0, 1] = None
        assert graph[0, 1] is None
        assert graph.colored_count == 0

    def test_is_uncolored(self) -> None:
        graph = CompleteGraph(3)
        graph[1, 2] = Color.PURPLE
        assert not graph.is_uncolored((2, 1))
        assert graph.is_uncolored("0-1")
        with pytest.raises(InvalidEdgeError):
            graph.is_uncolored((0, 3))

    def test_recolor_keeps_count(self) -> None:
        graph = CompleteGraph(3)
        graph[0, 1] = Color.RED
        graph[0, 1] = Color.GREEN
        assert graph.colored_count == 1

    def test_full(self) -> None:
        graph = CompleteGraph(3)
        for edge in graph.edges():
            graph[edge] = Color.RED
        assert graph.is_full
        assert graph.uncolored_edges() == []

    def test_unknown_edge(self) -> None:
        graph = CompleteGraph(3)
        with pytest.raises(InvalidEdgeError):
            graph[0, 3]
        with pytest.raises(InvalidEdgeError):
            graph[1, 1] = Color.RED
        assert (0, 3) not in graph
        assert (2, 0) in graph

    def test_edges_by_color(self) -> None:
        graph = CompleteGraph.from_colors(
            4, {(0, 1): Color.RED, (2, 3): Color.BLUE, "1-3": Color.RED}
        )
        assert graph.edges_of(Color.RED) == [(0, 1), (1, 3)]
        assert graph.edges_of(Color.BLUE) == [(2, 3)]
        assert graph.colored_edges() == [(0, 1), (1, 3), (2, 3)]
        assert len(graph.uncolored_edges()) == 3


class TestGraphCopies:
    def test_copy_is_independent(self) -> None:
        graph = CompleteGraph(4)
        graph[0, 1] = Color.RED
        clone = graph.copy()
        assert clone == graph
        clone[0, 2] = Color.BLUE
        assert graph[0, 2] is None
        assert clone.colored_count == 2
        assert graph.colored_count == 1

    def test_as_dict(self) -> None:
        graph = CompleteGraph(3)
        graph[0, 2] = Color.GOLD
        assert graph.as_dict() == {"0-1": None, "0-2": "gold", "1-2": None}
