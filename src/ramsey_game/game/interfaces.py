"""Game configuration and the abstract controller interface.

The presentation layer depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ramsey_game.core.enums import MAX_PLAYERS
from ramsey_game.core.errors import InvalidConfigError

if TYPE_CHECKING:
    from ramsey_game.game.state import GameSnapshot

MIN_PLAYERS = 2


def _check_int(name: str, value: object, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


# ── Configuration ────────────────────────────────────────────────────────────


class GameConfig:
    """Immutable game definition.

    Args:
        n: Number of vertices of the complete graph.
        k: Clique size a player must complete to win.
        num_players: Number of players, each with its own color.

    Raises:
        InvalidConfigError: ``n < 2``, ``k < 2``, ``k > n`` or
            ``num_players`` outside ``[2, 6]``.
    """

    __slots__ = ("n", "k", "num_players")

    def __init__(self, n: int = 6, k: int = 3, num_players: int = 2) -> None:
        n = _check_int("n", n, 2)
        k = _check_int("k", k, 2)
        num_players = _check_int("num_players", num_players, MIN_PLAYERS)
        if num_players > MAX_PLAYERS:
            raise InvalidConfigError(
                f"num_players must be at most {MAX_PLAYERS}, got {num_players}"
            )
        if k > n:
            raise InvalidConfigError(
                f"A {k}-clique cannot exist on {n} vertices; the game would be unwinnable"
            )
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "k", k)
        object.__setattr__(self, "num_players", num_players)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Common presets
    @classmethod
    def classic(cls) -> GameConfig:
        """Two players hunting triangles on K6 (R(3,3) = 6)."""
        return cls(6, 3, 2)

    @classmethod
    def small(cls) -> GameConfig:
        return cls(4, 3, 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameConfig):
            return NotImplemented
        return (self.n, self.k, self.num_players) == (
            other.n,
            other.k,
            other.num_players,
        )

    def __hash__(self) -> int:
        return hash((self.n, self.k, self.num_players))

    def __repr__(self) -> str:
        return f"GameConfig(n={self.n}, k={self.k}, players={self.num_players})"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, n: int = 6, k: int = 3, num_players: int = 2) -> GameSnapshot:
        """Set up a new game, discarding the current one."""

    @abstractmethod
    def apply_move(self, edge: object) -> GameSnapshot:
        """Color *edge* for the player to move."""

    @abstractmethod
    def undo(self) -> GameSnapshot:
        """Uncolor the most recent edge."""

    @abstractmethod
    def query_state(self) -> GameSnapshot:
        """Read-only view of the current game."""
