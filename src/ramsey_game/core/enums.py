"""Core enumerations for the edge-coloring game."""

from __future__ import annotations

from enum import IntEnum

MAX_PLAYERS = 6


class Color(IntEnum):
    """Player color. The value is the seat index in turn order."""

    RED = 0
    BLUE = 1
    GREEN = 2
    GOLD = 3
    PURPLE = 4
    ORANGE = 5

    @classmethod
    def palette(cls, num_players: int) -> tuple[Color, ...]:
        """The first *num_players* colors in turn order."""
        if not 1 <= num_players <= MAX_PLAYERS:
            raise ValueError(f"Palette holds 1..{MAX_PLAYERS} colors, got {num_players}")
        return tuple(cls(i) for i in range(num_players))

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Outcome of a game. There is no draw."""

    IN_PROGRESS = 0
    WON = 1
