from .chart import (
    plot_nodes_by_depth,
    plot_win_rates,
)

__all__ = [
    "plot_nodes_by_depth",
    "plot_win_rates",
]
