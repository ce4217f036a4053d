"""
Plots of computed trophic heights.

- plot_trophic_levels: nodes at (height, index) with an arrow per edge
- plot_height_distribution: histogram of heights

The vertical axis in plot_trophic_levels is just the node index, so edges
can be told apart. No 2-D layout is attempted.
"""

from __future__ import annotations
from pathlib import Path
from typing import Hashable, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

CMAP_HEIGHT = "viridis"


def plot_trophic_levels(
    adjacency: np.ndarray,
    heights: np.ndarray,
    labels: Sequence[Hashable] | None = None,
    title: str = "Trophic Levels",
    cmap=None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Plot nodes at their trophic height with directed edges.

    Args:
        adjacency: Square adjacency matrix, a[i, j] = 1 for an edge i → j
        heights: Height per node index
        labels: Node labels in index order (indices if None)
        title: Plot title
        cmap: Colormap for node colour by height
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_HEIGHT

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    h = np.asarray(heights, dtype=np.float64)
    y = np.arange(len(h))

    rows, cols = np.nonzero(np.asarray(adjacency))
    for i, j in zip(rows, cols):
        if i == j:
            continue
        ax.annotate(
            "",
            xy=(h[j], y[j]),
            xytext=(h[i], y[i]),
            arrowprops=dict(arrowstyle="->", color="gray", alpha=0.6, lw=1),
        )

    sc = ax.scatter(h, y, c=h, cmap=cmap, s=80, zorder=3, edgecolors="black")

    if labels is None:
        labels = list(range(len(h)))
    for hx, yy, label in zip(h, y, labels):
        ax.annotate(str(label), (hx, yy), xytext=(6, 4), textcoords="offset points", fontsize=8)

    if colorbar:
        plt.colorbar(sc, ax=ax, fraction=0.046, pad=0.04, label="height")

    ax.set_title(title)
    ax.set_xlabel("Trophic height")
    ax.set_ylabel("Node index")

    return fig, ax


def plot_height_distribution(
    heights: np.ndarray,
    bins: int = 20,
    title: str = "Height Distribution",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
) -> tuple[Figure, Axes]:
    """Histogram of trophic heights."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.hist(np.asarray(heights, dtype=np.float64), bins=bins, color="steelblue", edgecolor="black")
    ax.set_title(title)
    ax.set_xlabel("Trophic height")
    ax.set_ylabel("Nodes")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
