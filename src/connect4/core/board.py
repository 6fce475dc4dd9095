# src/connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connect4.config import ROWS, COLS
from connect4.core.errors import ContractViolation, InvalidMoveError
from connect4.types import Cell, Side, Move


@dataclass(slots=True)
class Board:
    """
    Grid of cells, grid[row][col]. Row 0 is the bottom row, so checkers in a
    column always occupy rows 0..k with no gaps.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def is_valid_move(self, col: Move) -> bool:
        c = int(col)
        if c < 0 or c >= self.cols:
            return False
        return self.grid[self.rows - 1][c] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[self.rows - 1][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[self.rows - 1][c] is not None for c in range(self.cols))

    def drop(self, col: Move, side: Side) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise InvalidMoveError("Column out of range.")
        if self.grid[self.rows - 1][c] is not None:
            raise InvalidMoveError("Column is full.")

        for r in range(self.rows):
            if self.grid[r][c] is None:
                self.grid[r][c] = side
                return r

        raise InvalidMoveError("Column is full.")

    def undo(self, col: Move) -> Side:
        """
        Remove the top-most checker from a column and return its side.
        Callers must undo in the reverse order of their drops.
        """
        c = int(col)
        for r in range(self.rows - 1, -1, -1):
            p = self.grid[r][c]
            if p is not None:
                self.grid[r][c] = None
                return p
        raise ContractViolation(f"Cannot undo: column {c} is empty.")
