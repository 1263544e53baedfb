"""CompleteGraph - edge colors of the complete graph K_n."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from ramsey_game.core.enums import Color
from ramsey_game.core.errors import InvalidConfigError, InvalidEdgeError
from ramsey_game.core.types import Edge, coerce_edge, edge_count, edge_key


class CompleteGraph:
    """Mutable edge coloring of ``K_n``.

    Every edge exists from construction; only its color changes.  ``None``
    means uncolored.  No move legality is checked here.
    """

    __slots__ = ("_n", "_colors", "_colored_count")

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 2:
            raise InvalidConfigError(f"A complete graph needs at least 2 vertices, got {n!r}")
        self._n = n
        # Insertion order is the canonical lexicographic edge order.
        self._colors: dict[Edge, Color | None] = {
            (i, j): None for i in range(n) for j in range(i + 1, n)
        }
        self._colored_count = 0

    @classmethod
    def from_colors(cls, n: int, colors: Mapping[object, Color | None]) -> CompleteGraph:
        """Build a graph with the given edges pre-colored."""
        graph = cls(n)
        for edge, color in colors.items():
            graph[edge] = color
        return graph

    # -- Element access -----------------------------------------------------

    def _edge(self, edge: object) -> Edge:
        return coerce_edge(edge, self._n)

    def __getitem__(self, edge: object) -> Color | None:
        return self._colors[self._edge(edge)]

    def __setitem__(self, edge: object, color: Color | None) -> None:
        key = self._edge(edge)
        old = self._colors[key]
        if old is None and color is not None:
            self._colored_count += 1
        elif old is not None and color is None:
            self._colored_count -= 1
        self._colors[key] = color

    def color_of(self, edge: object) -> Color | None:
        return self[edge]

    def set_color(self, edge: object, color: Color | None) -> None:
        self[edge] = color

    def __contains__(self, edge: object) -> bool:
        try:
            self._edge(edge)
        except InvalidEdgeError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompleteGraph):
            return NotImplemented
        return self._n == other._n and self._colors == other._colors

    def __repr__(self) -> str:
        return f"CompleteGraph(n={self._n}, colored={self._colored_count}/{len(self)})"

    # -- Query helpers ------------------------------------------------------

    @property
    def n(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return edge_count(self._n)

    @property
    def colored_count(self) -> int:
        return self._colored_count

    @property
    def is_full(self) -> bool:
        """True once every edge carries a color."""
        return self._colored_count == len(self._colors)

    def edges(self) -> list[Edge]:
        return list(self._colors)

    def colored_edges(self) -> list[Edge]:
        return [e for e, c in self._colors.items() if c is not None]

    def uncolored_edges(self) -> list[Edge]:
        return [e for e, c in self._colors.items() if c is None]

    def edges_of(self, color: Color) -> list[Edge]:
        return [e for e, c in self._colors.items() if c == color]

    def is_uncolored(self, edge: object) -> bool:
        return self[edge] is None

    # -- Copies -------------------------------------------------------------

    def coloring(self) -> dict[Edge, Color | None]:
        """Shallow copy of the edge -> color mapping."""
        return dict(self._colors)

    def as_dict(self) -> dict[str, str | None]:
        """Edge key -> color name, e.g. ``{'0-1': 'red', '0-2': None}``."""
        return {
            edge_key(e): (str(c) if c is not None else None)
            for e, c in self._colors.items()
        }

    def copy(self) -> CompleteGraph:
        clone = CompleteGraph.__new__(CompleteGraph)
        clone._n = self._n
        clone._colors = dict(self._colors)
        clone._colored_count = self._colored_count
        return clone
