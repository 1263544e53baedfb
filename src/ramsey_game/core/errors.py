"""Exceptions raised by the engine.

Every error is a local validation failure: the operation that raised it has
left the game untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ramsey_game.core.enums import Color
    from ramsey_game.core.types import Edge


class RamseyGameError(ValueError):
    """Base class for all engine errors."""


class InvalidConfigError(RamseyGameError):
    """Vertex count, clique size or player count outside the supported ranges."""


class InvalidEdgeError(RamseyGameError):
    """Malformed or out-of-range vertex pair."""


class EdgeAlreadyColoredError(RamseyGameError):
    """The edge already carries a color."""

    def __init__(self, edge: Edge, color: Color) -> None:
        super().__init__(f"Edge {edge[0]}-{edge[1]} is already colored {color}")
        self.edge = edge
        self.color = color


class NothingToUndoError(RamseyGameError):
    """Undo requested with an empty move history."""

    def __init__(self) -> None:
        super().__init__("No moves to undo")


class CannotUndoAfterWinError(RamseyGameError):
    """Undo requested after the game was won."""

    def __init__(self) -> None:
        super().__init__("Cannot undo once the game has been won")


class GameOverError(RamseyGameError):
    """Move submitted after the game was won."""

    def __init__(self) -> None:
        super().__init__("The game is over")
