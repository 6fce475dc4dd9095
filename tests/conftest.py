import random

import pytest

from connect4.core.board import Board
from connect4.game.state import GameState
from connect4.types import Move


def _grid_state(cells, current):
    """Board with the given {(row, col): side} cells set directly."""
    board = Board()
    for (r, c), side in cells.items():
        board.grid[r][c] = side
    return GameState(board=board, current=current)


def _random_state(seed, plies):
    """Play random legal moves; returns None if the game ended on the way."""
    rng = random.Random(seed)
    state = GameState()
    for _ in range(plies):
        state.apply_move(Move(rng.choice(state.board.valid_moves())))
        if state.is_game_over():
            return None
    return state


def _draw_pattern():
    # Full board with no four-in-a-row anywhere.
    return {(r, c): (r // 2 + c) % 2 for r in range(6) for c in range(7)}


@pytest.fixture
def grid_state():
    return _grid_state


@pytest.fixture
def random_state():
    return _random_state


@pytest.fixture
def draw_pattern():
    return _draw_pattern()
