from __future__ import annotations

import logging
from typing import Sequence

from connect4.ai.base import Player
from connect4.config import AI_THINK_DELAY_SEC, CHECKERS
from connect4.core.board import Board
from connect4.core.errors import InvalidMoveError
from connect4.core.rules import find_winner_with_line
from connect4.game.state import GameState
from connect4.ui.effects import ai_thinking
from connect4.ui.render import render, report
from connect4.types import Side

logger = logging.getLogger(__name__)


def _header(state: GameState) -> str:
    names = " | ".join(f"{CHECKERS[i]}: {p.name}" for i, p in enumerate(state.players))
    return f"{names} | Turn: {state.player_to_move().name} ({CHECKERS[state.current]})"


def _status(state: GameState) -> str:
    """
    Prepend a persistent header showing who plays which checker.
    """
    if state.last_status:
        return f"{_header(state)}\n{state.last_status}"
    return _header(state)


def _search_line(player: Player, col: int) -> str:
    info = getattr(player, "last_info", None)
    if not info:
        return f"{player.name} drops in column {col + 1}"
    return (
        f"{player.name} drops in column {col + 1} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    players: Sequence[Player],
    first: Side = 0,
    show_thinking: bool = True,
    think_delay_sec: float = AI_THINK_DELAY_SEC,
) -> GameState:
    """
    Alternate moves between the two players until someone connects four, the
    board fills up, or a human quits. Returns the final state.
    """
    state = GameState(board=Board(), current=first, players=tuple(players))
    state.last_status = f"{state.player_to_move().name} starts."

    while not state.is_game_over():
        render(state.board, _status(state))

        player = state.player_to_move()
        if show_thinking and hasattr(player, "depth"):
            ai_thinking(f"{player.name} is thinking", think_delay_sec)

        move = player.get_move(state)
        if move is None:
            logger.info("%s quit the game", player.name)
            render(state.board, f"{_header(state)}\nGame quit.")
            return state

        try:
            state.apply_move(move)
        except InvalidMoveError as e:
            logger.warning("%s tried column %s: %s", player.name, int(move) + 1, e)
            state.last_status = str(e)
            continue

        logger.info("%s played column %d", player.name, int(move) + 1)
        state.last_status = _search_line(player, int(move))

    w = find_winner_with_line(state.board)
    if w is None:
        render(state.board, _status(state))
        logger.info("game drawn")
        report("GAME OVER! draw!")
    else:
        side, line = w
        render(state.board, _status(state), highlight=line)
        logger.info("%s won", state.players[side].name)
        report(f"GAME OVER! {state.players[side].name} wins!")
    return state
