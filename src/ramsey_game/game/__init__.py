"""Game management layer — configuration, state, controller.

Quick start::

    from ramsey_game.game import GameController

    ctrl = GameController()
    ctrl.new_game(n=6, k=3, num_players=2)
    snapshot = ctrl.apply_move((0, 1))
    print(snapshot.status_text)
"""

from ramsey_game.game.controller import GameController, GameEvents
from ramsey_game.game.interfaces import MIN_PLAYERS, GameConfig, IGameController
from ramsey_game.game.state import GameResult, GameSnapshot, GameState, MoveRecord

__all__ = [
    # Interfaces
    "MIN_PLAYERS",
    "GameConfig",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameResult",
    "GameSnapshot",
    "GameState",
    "MoveRecord",
]
