"""
Visualization utilities.

- Trophic level plots (nodes by height, directed edges)
- Height histograms
"""

from trophic.viz.levels import (
    plot_trophic_levels,
    plot_height_distribution,
    save_figure,
)

__all__ = [
    "plot_trophic_levels",
    "plot_height_distribution",
    "save_figure",
]
