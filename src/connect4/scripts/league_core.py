from __future__ import annotations

import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List

from .league_format import A, Col, hr, print_table, term_width
from .league_play import add_result, add_stats, chunked, run_pairings_batch
from .league_scoring import avg_ms_per_move, avg_nodes_per_move, ppg, strength_score
from .league_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move", "avg_nodes_per_move",
    "moves", "time_ms", "nodes", "cutoffs",
]


def standings(teams: List[Team], agg: Dict[str, Agg], z: float) -> List[dict]:
    """One row per team, strongest first (ties: shallower depth first)."""
    rows = []
    for t in teams:
        a = agg[t.name]
        rows.append({
            "name": t.name,
            "depth": t.depth,
            "games": a.games, "wins": a.wins, "draws": a.draws, "losses": a.losses,
            "points": a.points,
            "ppg": round(ppg(a), 6),
            "strength_wilson_lcb": round(strength_score(a, z), 6),
            "avg_ms_per_move": round(avg_ms_per_move(a), 3),
            "avg_nodes_per_move": round(avg_nodes_per_move(a), 1),
            "moves": a.moves, "time_ms": a.time_ms, "nodes": a.nodes, "cutoffs": a.cutoffs,
        })
    rows.sort(key=lambda r: (-r["strength_wilson_lcb"], r["depth"]))
    return rows


def print_standings(title: str, rows: List[dict]) -> None:
    w = term_width(100)
    cols = [
        Col("rk", 3, "right"),
        Col("player", 24, "left"),
        Col("d", 3, "right"),
        Col("strength", 10, "right"),
        Col("ppg", 5, "right"),
        Col("g", 4, "right"),
        Col("ms/mv", 8, "right"),
        Col("nodes/mv", 9, "right"),
        Col("W-D-L", 9, "right"),
    ]
    out = []
    for i, r in enumerate(rows, start=1):
        out.append([
            str(i),
            r["name"],
            str(r["depth"]),
            f"{r['strength_wilson_lcb']:0.6f}",
            f"{r['ppg']:0.3f}",
            str(r["games"]),
            f"{r['avg_ms_per_move']:0.1f}",
            f"{r['avg_nodes_per_move']:0.0f}",
            f"{r['wins']}-{r['draws']}-{r['losses']}",
        ])
    print("\n" + A.bold(f"=== {title} ==="))
    print(A.dim(hr("═", w)))
    print_table("Standings by strength (Wilson lower bound of points per game)", cols, out, width=w)


def export_standings(rows: List[dict], out_dir: Path) -> Path:
    """Write aggregate standings (no move lists) to league_results_<timestamp>.csv."""
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"league_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        for r in rows:
            w.writerow(r)
    return out_path


def league_round_robin(
    teams: List[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: int | None = None,
    batch_pairings: int = 4,
    prune_z: float = 1.28,
    export_dir: Path | None = None,
) -> List[dict]:
    """
    Every team plays every other team ``games_per_pair`` times, alternating
    who moves first. Games run in worker processes. Returns the standings.
    """
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    pair_items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            a_team = teams[i]
            b_team = teams[j]
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((a_team.name, b_team.name, a_team.make, b_team.make, base_seed))

    w = term_width(100)
    print(A.bold(f"Roster: {n} players, {len(pair_items)} pairings, {games_per_pair} games each"))
    print(f"Workers={max_workers}, batch_pairings={batch_pairings}, seed={seed}, z={prune_z}")
    print(A.dim(hr("═", w)))

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [
            ex.submit(run_pairings_batch, (chunk, games_per_pair))
            for chunk in chunked(pair_items, batch_pairings)
        ]
        for fut in as_completed(futures):
            for (a_name, b_name, a_side, outcome, stats) in fut.result():
                add_result(agg[a_name], agg[b_name], outcome, a_side=a_side)
                add_stats(agg[a_name], stats[a_side])
                add_stats(agg[b_name], stats[1 - a_side])
                logger.debug("%s vs %s: outcome=%s (a_side=%d)", a_name, b_name, outcome, a_side)

    rows = standings(teams, agg, prune_z)
    print_standings("Final standings", rows)

    if export_dir is not None:
        out_path = export_standings(rows, export_dir)
        print("\n" + A.bold("Export"))
        print(A.dim(hr("═", w)))
        print(f"Wrote CSV: {out_path}")

    return rows
