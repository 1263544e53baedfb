"""Ramsey game — players race to complete a monochromatic k-clique on K_n."""

from ramsey_game.core import (
    CannotUndoAfterWinError,
    CliqueDetector,
    Color,
    CompleteGraph,
    EdgeAlreadyColoredError,
    GameOverError,
    GameStatus,
    InvalidConfigError,
    InvalidEdgeError,
    NothingToUndoError,
    RamseyGameError,
    TurnManager,
    VertexSubsets,
)
from ramsey_game.game import (
    GameConfig,
    GameController,
    GameEvents,
    GameResult,
    GameSnapshot,
)

__version__ = "0.1.0"

__all__ = [
    "CannotUndoAfterWinError",
    "CliqueDetector",
    "Color",
    "CompleteGraph",
    "EdgeAlreadyColoredError",
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameOverError",
    "GameResult",
    "GameSnapshot",
    "GameStatus",
    "InvalidConfigError",
    "InvalidEdgeError",
    "NothingToUndoError",
    "RamseyGameError",
    "TurnManager",
    "VertexSubsets",
]
