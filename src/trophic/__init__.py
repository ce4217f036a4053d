"""
trophic: trophic levels for directed graphs

Assigns every node of a directed graph a height so that edges tend to point
upwards, by solving a degree-weighted Laplacian system.

Layers:
- core: adjacency matrices, Gauss-Jordan solver, the trophic levels algorithm
- layout: node identifiers, edge lists, rescaling heights into coordinates
- analysis: diagnostics derived from a solution (never used by the core)
- viz: matplotlib figures of computed heights
"""

__version__ = "0.1.0"
