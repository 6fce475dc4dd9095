from __future__ import annotations
from functools import lru_cache
from typing import Dict, Literal, Optional, List, Tuple

from connect4.config import CONNECT_N
from connect4.types import Side
from connect4.core.board import Board

Coord = Tuple[int, int]  # (row, col)
Window = Tuple[Coord, ...]
Orientation = Literal["vertical", "horizontal", "diag_up", "diag_down"]

ORIENTATIONS: Tuple[Orientation, ...] = ("vertical", "horizontal", "diag_up", "diag_down")


@lru_cache(maxsize=None)
def windows(rows: int, cols: int) -> Dict[Orientation, Tuple[Window, ...]]:
    """
    Every run of CONNECT_N cells on a rows x cols board, grouped by
    orientation. Dict order and window order inside each group are the scan
    order used by both the winner check and the evaluator.
    """
    n = CONNECT_N
    out: Dict[Orientation, List[Window]] = {o: [] for o in ORIENTATIONS}

    # Vertical
    for c in range(cols):
        for r in range(rows - n + 1):
            out["vertical"].append(tuple((r + i, c) for i in range(n)))

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            out["horizontal"].append(tuple((r, c + i) for i in range(n)))

    # Diagonal up-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            out["diag_up"].append(tuple((r + i, c + i) for i in range(n)))

    # Diagonal down-right, starting from the top row
    for r in range(rows - 1, n - 2, -1):
        for c in range(cols - n + 1):
            out["diag_down"].append(tuple((r - i, c + i) for i in range(n)))

    return {o: tuple(ws) for o, ws in out.items()}


def count_sides(board: Board, window: Window) -> Tuple[int, int]:
    g = board.grid
    zeros = 0
    ones = 0
    for r, c in window:
        p = g[r][c]
        if p == 0:
            zeros += 1
        elif p == 1:
            ones += 1
    return zeros, ones


def find_winner_with_line(board: Board) -> Optional[Tuple[Side, List[Coord]]]:
    for group in windows(board.rows, board.cols).values():
        for window in group:
            zeros, ones = count_sides(board, window)
            if zeros == CONNECT_N:
                return 0, list(window)
            if ones == CONNECT_N:
                return 1, list(window)
    return None


def find_winner(board: Board) -> Optional[Side]:
    res = find_winner_with_line(board)
    return res[0] if res else None


def is_winner(board: Board) -> bool:
    return find_winner(board) is not None


def is_game_over(board: Board) -> bool:
    return is_winner(board) or board.is_full()


def is_draw(board: Board) -> bool:
    return board.is_full() and find_winner(board) is None
