"""GameController — the only component allowed to mutate a game.

Coordinates: GameState, CliqueDetector (through the state), TurnManager.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ramsey_game.core.errors import (
    CannotUndoAfterWinError,
    EdgeAlreadyColoredError,
    GameOverError,
    NothingToUndoError,
    RamseyGameError,
)
from ramsey_game.core.types import coerce_edge, edge_key
from ramsey_game.game.interfaces import GameConfig, IGameController
from ramsey_game.game.state import GameResult, GameSnapshot, GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameSnapshot], None]
GameOverCallback = Callable[[GameResult], None]
ResetCallback = Callable[[GameSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates moves, applies them, switches turns, notifies listeners.

    Every operation runs to completion before returning.  A rejected
    operation raises a :class:`RamseyGameError` subclass and leaves the game
    exactly as it was.  Separate games need separate controllers.
    """

    __slots__ = ("_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._state = GameState(config or GameConfig())
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._state.config

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, n: int = 6, k: int = 3, num_players: int = 2) -> GameSnapshot:
        return self.configure(GameConfig(n, k, num_players))

    def configure(self, config: GameConfig) -> GameSnapshot:
        """Start over with *config*. Valid from any state."""
        self._state.setup(config)
        _LOGGER.info("New game: %r", config)
        snapshot = self._state.snapshot()
        for cb in self.events.on_reset:
            cb(snapshot)
        return snapshot

    def reset(self) -> GameSnapshot:
        """Start over with the current configuration."""
        return self.configure(self._state.config)

    def apply_move(self, edge: object) -> GameSnapshot:
        """Color *edge*: ``(i, j)`` in either order or an ``"i-j"`` key.

        Raises:
            GameOverError: The game has already been won.
            InvalidEdgeError: Malformed, out-of-range or self-loop pair.
            EdgeAlreadyColoredError: The edge carries a color.
        """
        state = self._state
        try:
            if state.is_game_over:
                raise GameOverError()
            key = coerce_edge(edge, state.config.n)
            if not state.graph.is_uncolored(key):
                raise EdgeAlreadyColoredError(key, state.graph[key])
        except RamseyGameError as exc:
            _LOGGER.debug("Rejected move %r: %s", edge, exc)
            raise

        record = state.apply_move(key)
        _LOGGER.debug("Ply %d: %s colored %s", record.ply, record.key, record.color)

        snapshot = state.snapshot()
        for cb in self.events.on_move:
            cb(record, snapshot)

        if state.is_game_over:
            _LOGGER.info(
                "%s wins with clique %s after %d moves",
                state.result.winner,
                state.result.clique,
                record.ply,
            )
            for cb in self.events.on_game_over:
                cb(state.result)
        return snapshot

    def undo(self) -> GameSnapshot:
        """Uncolor the most recent edge and hand the turn back.

        Raises:
            CannotUndoAfterWinError: The game has been won.
            NothingToUndoError: No moves have been made.
        """
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Rejected undo: game already won")
            raise CannotUndoAfterWinError()
        record = state.undo_last_move()
        if record is None:
            _LOGGER.debug("Rejected undo: empty history")
            raise NothingToUndoError()
        _LOGGER.debug("Undid ply %d (%s)", record.ply, edge_key(record.edge))

        snapshot = state.snapshot()
        for cb in self.events.on_undo:
            cb(record, snapshot)
        return snapshot

    def query_state(self) -> GameSnapshot:
        return self._state.snapshot()
