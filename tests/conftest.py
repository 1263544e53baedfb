"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from ramsey_game.game.controller import GameController


@pytest.fixture
def small_game() -> GameController:
    """Two players hunting triangles on K4."""
    ctrl = GameController()
    ctrl.new_game(n=4, k=3, num_players=2)
    return ctrl


@pytest.fixture
def classic_game() -> GameController:
    """Two players hunting triangles on K6."""
    ctrl = GameController()
    ctrl.new_game(n=6, k=3, num_players=2)
    return ctrl
