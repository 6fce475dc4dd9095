import random

import pytest

from connect4.config import COLS, ROWS
from connect4.core.board import Board
from connect4.core.errors import ContractViolation, InvalidMoveError
from connect4.game.state import GameState
from connect4.types import Move


def _snapshot(state):
    return [row[:] for row in state.board.grid], state.current


def _assert_gravity(board):
    for c in range(board.cols):
        column = [board.grid[r][c] for r in range(board.rows)]
        filled = [p is not None for p in column]
        # once a cell is empty, everything above it is empty too
        assert filled == sorted(filled, reverse=True)


class TestBoard:
    def test_new_board_is_empty(self):
        b = Board()
        assert b.rows == ROWS and b.cols == COLS
        assert all(cell is None for row in b.grid for cell in row)
        assert b.valid_moves() == list(range(COLS))
        assert not b.is_full()

    def test_drop_lands_on_lowest_empty_row(self):
        b = Board()
        assert b.drop(Move(3), 0) == 0
        assert b.drop(Move(3), 1) == 1
        assert b.grid[0][3] == 0
        assert b.grid[1][3] == 1

    def test_full_column_rejected(self):
        b = Board()
        for i in range(ROWS):
            b.drop(Move(2), i % 2)
        assert not b.is_valid_move(Move(2))
        with pytest.raises(InvalidMoveError, match="full"):
            b.drop(Move(2), 0)

    @pytest.mark.parametrize("col", [-1, COLS, 100])
    def test_out_of_range_column(self, col):
        b = Board()
        assert not b.is_valid_move(Move(col))
        with pytest.raises(InvalidMoveError, match="out of range"):
            b.drop(Move(col), 0)

    def test_invalid_move_is_a_value_error(self):
        assert issubclass(InvalidMoveError, ValueError)

    def test_undo_removes_top_checker(self):
        b = Board()
        b.drop(Move(5), 0)
        b.drop(Move(5), 1)
        assert b.undo(Move(5)) == 1
        assert b.grid[1][5] is None
        assert b.grid[0][5] == 0

    def test_undo_empty_column_fails_loudly(self):
        b = Board()
        with pytest.raises(ContractViolation):
            b.undo(Move(0))
        assert issubclass(ContractViolation, AssertionError)

    def test_is_full(self):
        b = Board()
        for c in range(COLS):
            for r in range(ROWS):
                assert not b.is_full()
                b.drop(Move(c), (r + c) % 2)
        assert b.is_full()
        assert b.valid_moves() == []

    def test_copy_shares_no_storage(self):
        b = Board()
        b.drop(Move(0), 0)
        clone = b.copy()
        clone.drop(Move(0), 1)
        assert b.grid[1][0] is None
        assert clone.grid[1][0] == 1


class TestGameState:
    def test_apply_flips_side(self):
        s = GameState(current=1)
        s.apply_move(Move(0))
        assert s.board.grid[0][0] == 1
        assert s.current == 0

    def test_undo_flips_side_back(self):
        s = GameState()
        s.apply_move(Move(4))
        s.undo_move(Move(4))
        assert s.current == 0
        assert s.board.grid[0][4] is None

    def test_failed_apply_keeps_side(self):
        s = GameState()
        for _ in range(ROWS):
            s.apply_move(Move(6))
        before = _snapshot(s)
        with pytest.raises(InvalidMoveError):
            s.apply_move(Move(6))
        assert _snapshot(s) == before

    def test_copy_is_independent(self):
        s = GameState()
        s.apply_move(Move(3))
        work = s.copy()
        work.apply_move(Move(3))
        assert s.board.grid[1][3] is None
        assert s.current == 1 and work.current == 0

    @pytest.mark.parametrize("seed", range(8))
    def test_apply_undo_round_trip(self, seed):
        rng = random.Random(seed)
        s = GameState()
        while not s.is_game_over():
            for c in s.board.valid_moves():
                before = _snapshot(s)
                s.apply_move(c)
                s.undo_move(c)
                assert _snapshot(s) == before
            s.apply_move(Move(rng.choice(s.board.valid_moves())))

    @pytest.mark.parametrize("seed", range(8))
    def test_gravity_holds_under_apply_and_undo(self, seed):
        rng = random.Random(seed)
        s = GameState()
        history = []
        for _ in range(200):
            if history and (s.is_full() or rng.random() < 0.4):
                s.undo_move(history.pop())
            else:
                c = Move(rng.choice(s.board.valid_moves()))
                s.apply_move(c)
                history.append(c)
            _assert_gravity(s.board)
