import pytest

from connect4.core.board import Board
from connect4.core.rules import (
    find_winner,
    find_winner_with_line,
    is_draw,
    is_game_over,
    is_winner,
    windows,
)


def _board(cells):
    b = Board()
    for (r, c), side in cells.items():
        b.grid[r][c] = side
    return b


class TestWindows:
    def test_window_counts(self):
        w = windows(6, 7)
        assert len(w["vertical"]) == 21
        assert len(w["horizontal"]) == 24
        assert len(w["diag_up"]) == 12
        assert len(w["diag_down"]) == 12

    def test_scan_order(self):
        w = windows(6, 7)
        assert list(w) == ["vertical", "horizontal", "diag_up", "diag_down"]
        assert w["vertical"][0] == ((0, 0), (1, 0), (2, 0), (3, 0))
        assert w["horizontal"][0] == ((0, 0), (0, 1), (0, 2), (0, 3))
        assert w["diag_up"][0] == ((0, 0), (1, 1), (2, 2), (3, 3))
        # down-right diagonals start from the top row
        assert w["diag_down"][0] == ((5, 0), (4, 1), (3, 2), (2, 3))
        assert w["diag_down"][-1] == ((3, 3), (2, 4), (1, 5), (0, 6))


class TestFindWinner:
    def test_empty_board(self):
        b = Board()
        assert find_winner(b) is None
        assert not is_winner(b)
        assert not is_game_over(b)

    @pytest.mark.parametrize("side", [0, 1])
    @pytest.mark.parametrize(
        "line",
        [
            [(0, 2), (1, 2), (2, 2), (3, 2)],  # vertical
            [(2, 3), (3, 3), (4, 3), (5, 3)],  # vertical, top of column
            [(0, 3), (0, 4), (0, 5), (0, 6)],  # horizontal
            [(0, 0), (1, 1), (2, 2), (3, 3)],  # diagonal up
            [(2, 3), (3, 4), (4, 5), (5, 6)],  # diagonal up
            [(5, 0), (4, 1), (3, 2), (2, 3)],  # diagonal down
            [(3, 3), (2, 4), (1, 5), (0, 6)],  # diagonal down
        ],
    )
    def test_four_in_a_line(self, side, line):
        b = _board({cell: side for cell in line})
        assert find_winner(b) == side
        won_side, won_line = find_winner_with_line(b)
        assert won_side == side
        assert sorted(won_line) == sorted(line)

    def test_three_is_not_a_win(self):
        b = _board({(0, 0): 0, (0, 1): 0, (0, 2): 0, (0, 3): 1})
        assert find_winner(b) is None

    def test_full_board_without_line(self, draw_pattern):
        b = _board(draw_pattern)
        assert b.is_full()
        assert find_winner(b) is None
        assert is_draw(b)
        assert is_game_over(b)

    def test_win_on_full_board_is_not_a_draw(self, draw_pattern):
        cells = dict(draw_pattern)
        for c in range(4):
            cells[(0, c)] = 1
        b = _board(cells)
        assert find_winner(b) == 1
        assert not is_draw(b)


class TestGameStateQueries:
    def test_state_mirrors_rules(self, grid_state):
        s = grid_state({(0, 0): 1, (1, 0): 1, (2, 0): 1, (3, 0): 1}, current=0)
        assert s.find_winner() == 1
        assert s.is_winner()
        assert s.is_game_over()
        assert not s.is_full()
