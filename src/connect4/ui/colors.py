from __future__ import annotations
from connect4.config import CHECKERS, USE_COLOR
from connect4.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

SIDE_COLORS = (FG_RED, FG_YELLOW)


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def checker(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    return c(CHECKERS[cell], SIDE_COLORS[cell])
