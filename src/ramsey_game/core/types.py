"""Vertex/edge type aliases and edge helpers.

Vertices of ``K_n`` are the integers ``0 .. n-1``.  An edge is an unordered
pair of distinct vertices, stored canonically as ``(i, j)`` with ``i < j``.
The text form ``"i-j"`` is the edge key used by front ends.
"""

from __future__ import annotations

from typing import TypeAlias

from ramsey_game.core.errors import InvalidEdgeError

Vertex: TypeAlias = int
Edge: TypeAlias = tuple[int, int]


def edge_count(n: int) -> int:
    """Number of edges in the complete graph on *n* vertices."""
    return n * (n - 1) // 2


def _is_vertex_like(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def make_edge(u: Vertex, v: Vertex, n: int | None = None) -> Edge:
    """Canonical edge for the pair *u*, *v* (either order).

    When *n* is given the vertices must also lie in ``[0, n)``.
    """
    if not (_is_vertex_like(u) and _is_vertex_like(v)):
        raise InvalidEdgeError(f"Vertices must be integers, got {u!r}, {v!r}")
    if u == v:
        raise InvalidEdgeError(f"Self-loop {u}-{v} is not an edge")
    lo, hi = (u, v) if u < v else (v, u)
    if lo < 0 or (n is not None and hi >= n):
        raise InvalidEdgeError(f"Edge {lo}-{hi} is out of range for {n} vertices")
    return (lo, hi)


def coerce_edge(edge: object, n: int | None = None) -> Edge:
    """Accept an ``(i, j)`` pair or an ``"i-j"`` key and canonicalise it."""
    if isinstance(edge, str):
        return parse_edge_key(edge, n)
    if not isinstance(edge, (tuple, list)) or len(edge) != 2:
        raise InvalidEdgeError(f"Expected a vertex pair, got {edge!r}")
    return make_edge(edge[0], edge[1], n)


def is_valid_edge(edge: object, n: int) -> bool:
    """Does *edge* name an edge of ``K_n``?"""
    try:
        coerce_edge(edge, n)
    except InvalidEdgeError:
        return False
    return True


# ── Edge-key notation ───────────────────────────────────────────────────────


def edge_key(edge: Edge) -> str:
    """Text key, e.g. ``(0, 3)`` -> ``'0-3'``."""
    return f"{edge[0]}-{edge[1]}"


def parse_edge_key(key: str, n: int | None = None) -> Edge:
    """Parse an edge key, e.g. ``'3-0'`` -> ``(0, 3)``."""
    parts = key.strip().split("-")
    if len(parts) != 2 or not all(p.strip().isdecimal() for p in parts):
        raise InvalidEdgeError(f"Invalid edge key: {key!r}")
    return make_edge(int(parts[0]), int(parts[1]), n)
