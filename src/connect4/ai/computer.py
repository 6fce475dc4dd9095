from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from connect4.ai.negamax import SearchStats, choose_move
from connect4.config import DEFAULT_SEARCH_DEPTH, MAX_SCORE
from connect4.game.state import GameState
from connect4.types import Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ComputerPlayer:
    name: str = "Computer"
    depth: int = DEFAULT_SEARCH_DEPTH

    # Stats from the most recent search
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("Search depth must be >= 0.")

    def get_move(self, state: GameState) -> Move:
        # Search a private copy; the caller applies the move.
        work = state.copy()
        stats = SearchStats()

        start = time.perf_counter()
        result = choose_move(work, self.depth, -MAX_SCORE, MAX_SCORE, stats)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": result.value,
            "move_col": result.column + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("%s searched: %s", self.name, self.last_info)

        return Move(result.column)
