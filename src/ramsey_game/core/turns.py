"""Turn rotation over the color palette."""

from __future__ import annotations

from ramsey_game.core.enums import Color


class TurnManager:
    """Pure functions over a turn index.

    Holds no state: the game state owns the index.
    """

    @staticmethod
    def current(idx: int, num_players: int) -> Color:
        return Color.palette(num_players)[idx]

    @staticmethod
    def advance(idx: int, num_players: int) -> int:
        return (idx + 1) % num_players

    @staticmethod
    def retreat(idx: int, num_players: int) -> int:
        return (idx - 1 + num_players) % num_players
