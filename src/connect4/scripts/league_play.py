from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from connect4.core.board import Board
from connect4.game.state import GameState
from connect4.types import Move, Side

from .league_types import Agg

SideStats = Dict[str, int]


def play_headless(
    player_0, player_1, seed_base: int = 0, opening_plies: int = 2
) -> Tuple[Optional[Side], Dict[Side, SideStats]]:
    """
    Play one game without rendering. The first ``opening_plies`` moves are
    random (seeded) so that two deterministic players do not replay the same
    game every time. Returns (winner or None for a draw, per-side stats).
    """
    state = GameState(board=Board(), current=0, players=(player_0, player_1))
    stats: Dict[Side, SideStats] = {
        0: {"moves": 0, "time_ms": 0, "nodes": 0, "cutoffs": 0},
        1: {"moves": 0, "time_ms": 0, "nodes": 0, "cutoffs": 0},
    }

    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        if state.is_game_over():
            break
        state.apply_move(Move(rng.choice(state.board.valid_moves())))

    while not state.is_game_over():
        player = state.player_to_move()
        move = player.get_move(state)

        info = getattr(player, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["cutoffs"] += int(info.get("cutoffs", 0))

        state.apply_move(move)

    return state.find_winner(), stats


def add_result(agg_a: Agg, agg_b: Agg, outcome: Optional[Side], a_side: Side) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome is None:
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    if outcome == a_side:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_stats(agg: Agg, side_stats: SideStats) -> None:
    agg.moves += side_stats["moves"]
    agg.time_ms += side_stats["time_ms"]
    agg.nodes += side_stats["nodes"]
    agg.cutoffs += side_stats["cutoffs"]


def run_pairings_batch(args) -> List[tuple]:
    (batch_items, games_per_pair) = args
    out = []
    for (A_name, B_name, A_make, B_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            # Alternate who moves first
            if g % 2 == 0:
                outcome, stats = play_headless(A_make(), B_make(), seed_base=(base_seed + g))
                out.append((A_name, B_name, 0, outcome, stats))
            else:
                outcome, stats = play_headless(B_make(), A_make(), seed_base=(base_seed + g))
                out.append((A_name, B_name, 1, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
