from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from connect4.config import CLEAR_SCREEN, USE_COLOR
from connect4.core.board import Board
from connect4.ui.colors import c, checker, BOLD, DIM, FG_CYAN, REVERSE, RESET

Coord = Tuple[int, int]


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    """Text rows of the board, top row first (row 0 is the bottom)."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows - 1, -1, -1):
        parts = []
        for cidx in range(board.cols):
            p = checker(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}" if USE_COLOR else p.lower()
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))


def report(message: str) -> None:
    print(c(message, BOLD))
