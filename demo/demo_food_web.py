#!/usr/bin/env python3
"""
Demo: Trophic Levels of a Small Food Web

1. Lay out a hand-written food web (edges point from prey to predator)
2. Show the two ways a computation can fail:
   - a species with no links (disconnected)
   - two separate food chains (singular system)

Output: output/demo_food_web/food_web.png
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from trophic.core import TrophicConfig, TrophicError, compute_trophic_levels
from trophic.layout import LayoutConfig, edge_list_to_adjacency, trophic_layout
from trophic.viz import plot_trophic_levels, save_figure


FOOD_WEB = [
    ("algae", "zooplankton"),
    ("algae", "snail"),
    ("zooplankton", "minnow"),
    ("snail", "minnow"),
    ("minnow", "perch"),
    ("zooplankton", "perch"),
    ("perch", "pike"),
    ("minnow", "pike"),
    ("pike", "heron"),
    ("perch", "heron"),
]


def main():
    print("=" * 60)
    print("  TROPHIC LEVELS OF A FOOD WEB")
    print("=" * 60)

    species = sorted({name for edge in FOOD_WEB for name in edge})
    nodes = [{"id": name, "x": float(i)} for i, name in enumerate(species)]

    print(f"\n1. Food web: {len(species)} species, {len(FOOD_WEB)} links")
    result = trophic_layout(FOOD_WEB, nodes, LayoutConfig())
    for node, height in zip(result.nodes, result.heights):
        print(f"   {node['id']:<12} height={height:6.3f}  x={node['x']:6.2f}")

    adjacency, _ = edge_list_to_adjacency(FOOD_WEB)
    fig, ax = plot_trophic_levels(adjacency, result.heights, labels=result.node_ids)
    output_path = Path("output/demo_food_web") / "food_web.png"
    save_figure(fig, output_path)
    plt.close(fig)
    print(f"   Saved: {output_path}")

    print("\n2. Failure cases:")
    # An edge list cannot name a node without an edge, so add one directly
    n = adjacency.shape[0]
    isolated = np.zeros((n + 1, n + 1))
    isolated[:n, :n] = adjacency
    levels = compute_trophic_levels(isolated)
    print(f"   Species with no links: {levels.failure.value}: {levels.message}")

    split = [("grass", "rabbit"), ("kelp", "urchin")]
    split_nodes = [{"id": name, "x": 0.0} for name in ("grass", "rabbit", "kelp", "urchin")]
    result = trophic_layout(split, split_nodes)
    print(f"   Two separate chains:   {result.failure.value}: {result.message}")

    strict = LayoutConfig(trophic=TrophicConfig(strict_connectivity=True))
    result = trophic_layout(split, split_nodes, strict)
    print(f"   ...with strict check:  {result.failure.value}: {result.message}")

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print("  • Prey sit low, top predators high")
    print("  • Failures come back as values; no heights are returned")
    print("=" * 60)


if __name__ == "__main__":
    try:
        main()
    except TrophicError as e:
        print(e.log_message())
        raise
