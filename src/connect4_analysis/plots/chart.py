from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_strength_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "depth" not in df.columns or "strength_wilson_lcb" not in df.columns:
        return None

    ranked = df.sort_values("depth")
    fig = plt.figure()
    plt.plot(ranked["depth"], ranked["strength_wilson_lcb"], marker="o", label="strength (Wilson LCB)")
    if "ppg" in ranked.columns:
        plt.plot(ranked["depth"], ranked["ppg"], marker="s", linestyle="--", label="points per game")
    plt.title("Strength by search depth")
    plt.xlabel("depth")
    plt.ylabel("score")
    plt.ylim(0, 1)
    plt.legend()

    return _finish(fig, outdir, "strength_by_depth.png", show=show)


def plot_cost_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Nodes and ms per move against depth, log scale (cost grows with COLS**depth)."""
    if "depth" not in df.columns or "avg_nodes_per_move" not in df.columns:
        return None

    ranked = df.sort_values("depth")
    fig, ax = plt.subplots()
    ax.plot(ranked["depth"], ranked["avg_nodes_per_move"], marker="o", label="nodes / move")
    if "avg_ms_per_move" in ranked.columns:
        ax.plot(ranked["depth"], ranked["avg_ms_per_move"], marker="s", label="ms / move")
    ax.set_yscale("log")
    ax.set_title("Search cost by depth")
    ax.set_xlabel("depth")
    ax.legend()

    return _finish(fig, outdir, "cost_by_depth.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("player")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)
