from __future__ import annotations

from dataclasses import dataclass

from connect4.config import MAX_SCORE
from connect4.core.errors import ContractViolation
from connect4.core.scoring import evaluate
from connect4.game.state import GameState
from connect4.types import Move


@dataclass(slots=True)
class SearchResult:
    value: int
    column: int


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def choose_move(
    state: GameState,
    depth: int,
    alpha: int = -MAX_SCORE,
    beta: int = MAX_SCORE,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Negamax with alpha-beta over ``state``, which is mutated in place and
    restored before returning.

    Values are from the point of view of the side to move. A move that wins
    scores MAX_SCORE; a move that fills the board scores -MAX_SCORE, so a draw
    is only accepted when nothing else is left. Columns are tried left to
    right and only a strictly better value replaces the current best, so the
    lowest column wins ties.
    """
    if state.is_game_over():
        raise ContractViolation("Cannot search a finished game.")
    return _negamax(state, depth, alpha, beta, stats if stats is not None else SearchStats())


def _negamax(state: GameState, depth: int, alpha: int, beta: int, stats: SearchStats) -> SearchResult:
    stats.nodes += 1

    board = state.board
    best = SearchResult(-MAX_SCORE, -1)
    first_valid = -1

    col = 0
    while best.value < beta and col < board.cols:
        if not board.is_valid_move(Move(col)):
            col += 1
            continue
        if first_valid < 0:
            first_valid = col

        state.apply_move(Move(col))
        try:
            if state.is_winner():
                candidate = SearchResult(MAX_SCORE, col)
            elif state.is_full():
                candidate = SearchResult(-MAX_SCORE, col)
            elif depth > 0:
                candidate = _negamax(state, depth - 1, -beta, -alpha, stats)
                candidate.value = -candidate.value
                candidate.column = col
            else:
                # Danger to the opponent now on move, i.e. good for us: no negation.
                candidate = SearchResult(evaluate(board, state.current), col)
        finally:
            state.undo_move(Move(col))

        if candidate.value > best.value:
            best = candidate
            alpha = max(alpha, best.value)

        col += 1

    if best.value >= beta:
        stats.cutoffs += 1

    # Every move loses or draws: still hand back a playable column.
    if best.column < 0:
        best.column = first_valid

    return best
