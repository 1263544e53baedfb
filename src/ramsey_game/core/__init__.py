"""Core domain layer — edge coloring of K_n with zero external dependencies.

Quick start::

    from ramsey_game.core import Color, CompleteGraph, CliqueDetector

    graph = CompleteGraph(6)
    graph[0, 1] = Color.RED
    CliqueDetector.find_monochromatic_clique(graph, Color.RED, 3)
"""

from ramsey_game.core.clique import CliqueDetector
from ramsey_game.core.combinations import VertexSubsets
from ramsey_game.core.enums import MAX_PLAYERS, Color, GameStatus
from ramsey_game.core.errors import (
    CannotUndoAfterWinError,
    EdgeAlreadyColoredError,
    GameOverError,
    InvalidConfigError,
    InvalidEdgeError,
    NothingToUndoError,
    RamseyGameError,
)
from ramsey_game.core.graph import CompleteGraph
from ramsey_game.core.turns import TurnManager
from ramsey_game.core.types import (
    Edge,
    Vertex,
    coerce_edge,
    edge_count,
    edge_key,
    is_valid_edge,
    make_edge,
    parse_edge_key,
)

__all__ = [
    # Enums
    "MAX_PLAYERS",
    "Color",
    "GameStatus",
    # Errors
    "CannotUndoAfterWinError",
    "EdgeAlreadyColoredError",
    "GameOverError",
    "InvalidConfigError",
    "InvalidEdgeError",
    "NothingToUndoError",
    "RamseyGameError",
    # Types / helpers
    "Edge",
    "Vertex",
    "coerce_edge",
    "edge_count",
    "edge_key",
    "is_valid_edge",
    "make_edge",
    "parse_edge_key",
    # Domain objects
    "CliqueDetector",
    "CompleteGraph",
    "TurnManager",
    "VertexSubsets",
]
