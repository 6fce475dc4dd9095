from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from connect4.config import CHECKERS
from connect4.types import Move
from connect4.game.state import GameState
from connect4.ui.prompts import parse_move


@dataclass(slots=True)
class HumanPlayer:
    name: str = "Human"
    ask: Callable[[str], str] = input
    tell: Callable[[str], None] = print

    def get_move(self, state: GameState) -> Optional[Move]:
        """
        Prompt until the answer names a column with room in it.
        Returns None if the player types q.
        """
        while True:
            raw = self.ask(f"{self.name} ({CHECKERS[state.current]}) move: ")
            try:
                move = parse_move(raw, state.board.cols)
            except ValueError as e:
                self.tell(str(e))
                continue
            if move is None:
                return None
            if not state.is_valid_move(move):
                self.tell(f"Column {int(move) + 1} is full.")
                continue
            return move
