from __future__ import annotations
from typing import Optional, Protocol

from connect4.game.state import GameState
from connect4.types import Move


class Player(Protocol):
    name: str

    def get_move(self, state: GameState) -> Optional[Move]:
        """Column to play, or None when the player abandons the game."""
        ...
