from .chart import (
    plot_cost_by_depth,
    plot_strength_by_depth,
    plot_top_bar,
)

__all__ = [
    "plot_cost_by_depth",
    "plot_strength_by_depth",
    "plot_top_bar",
]
