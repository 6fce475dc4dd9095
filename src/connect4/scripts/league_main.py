from __future__ import annotations

import time
from pathlib import Path

from .league_core import league_round_robin
from .league_format import A
from .league_roster import build_roster


def main() -> None:
    ds = input("Depths, comma separated (default 1,2,3,4,5): ").strip()
    depths = [int(d) for d in ds.split(",") if d.strip()] if ds else [1, 2, 3, 4, 5]

    roster = build_roster(depths)
    print(A.bold(f"Roster size: {len(roster)} players"))

    gpp = input("Games per pairing (default 4): ").strip()
    games_per_pair = int(gpp) if gpp else 4

    sd = input("Seed (default 1234): ").strip()
    seed = int(sd) if sd else 1234

    mw = input("Max workers (default = cpu cores, capped at 6): ").strip()
    max_workers = int(mw) if mw else None

    z = input("Z for Wilson LCB (default 1.28): ").strip()
    prune_z = float(z) if z else 1.28

    od = input("Export standings CSV to directory (default data/results, '-' to skip): ").strip()
    export_dir = None if od == "-" else Path(od or "data/results")

    start = time.perf_counter()

    league_round_robin(
        roster,
        games_per_pair=games_per_pair,
        seed=seed,
        max_workers=max_workers,
        prune_z=prune_z,
        export_dir=export_dir,
    )

    elapsed = time.perf_counter() - start

    h = int(elapsed // 3600)
    m = int((elapsed % 3600) // 60)
    s = elapsed % 60

    print(A.bold(f"Total runtime: {h}:{m:02d}:{s:06.3f}"))


if __name__ == "__main__":
    main()
