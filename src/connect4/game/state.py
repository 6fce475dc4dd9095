from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from connect4.core.board import Board
from connect4.core import rules
from connect4.types import Move, Side, other

if TYPE_CHECKING:
    from connect4.ai.base import Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Side = 0
    players: Tuple["Player", ...] = ()
    last_status: str = ""

    def copy(self) -> "GameState":
        """Private working copy; shares players but no board storage."""
        return GameState(board=self.board.copy(), current=self.current, players=self.players)

    def player_to_move(self) -> "Player":
        return self.players[self.current]

    def is_valid_move(self, col: Move) -> bool:
        return self.board.is_valid_move(col)

    def apply_move(self, col: Move) -> int:
        row = self.board.drop(col, self.current)
        self.current = other(self.current)
        return row

    def undo_move(self, col: Move) -> None:
        self.board.undo(col)
        self.current = other(self.current)

    def is_full(self) -> bool:
        return self.board.is_full()

    def find_winner(self) -> Optional[Side]:
        return rules.find_winner(self.board)

    def is_winner(self) -> bool:
        return rules.is_winner(self.board)

    def is_game_over(self) -> bool:
        return rules.is_game_over(self.board)
