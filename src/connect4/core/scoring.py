from __future__ import annotations
from typing import Tuple

from connect4.config import WEIGHTS
from connect4.core.board import Board
from connect4.core.rules import Window, count_sides, windows
from connect4.types import Side


def score_window(board: Board, window: Window, me: Side) -> Tuple[int, int]:
    """
    (my_points, oppo_points) for one window. A window holding checkers of
    both sides is dead and scores nothing for either.
    """
    zeros, ones = count_sides(board, window)
    my_count, oppo_count = (zeros, ones) if me == 0 else (ones, zeros)

    if oppo_count == 0:
        return WEIGHTS[my_count], 0
    if my_count == 0:
        return 0, WEIGHTS[oppo_count]
    return 0, 0


def _category(board: Board, group, me: Side) -> int:
    my_score = 0
    oppo_score = 0
    for window in group:
        mine, theirs = score_window(board, window, me)
        my_score += mine
        oppo_score += theirs
    return oppo_score - my_score


def evaluate(board: Board, side_to_move: Side) -> int:
    """
    Open-line heuristic seen from ``side_to_move``.

    The result measures danger to the side to move: it is low when the
    position favours that side and high when it favours the opponent. The
    negamax search relies on this when it uses the value of a leaf reached
    by its own move without negating it.
    """
    groups = windows(board.rows, board.cols)

    vertical = _category(board, groups["vertical"], side_to_move)
    horizontal = _category(board, groups["horizontal"], side_to_move)
    diagonal = _category(board, groups["diag_up"] + groups["diag_down"], side_to_move)

    return vertical + horizontal + diagonal
