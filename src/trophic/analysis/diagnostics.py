"""
Diagnostics for a computed set of trophic heights.

IMPORTANT: These are derived quantities only. The core never uses them.

- trophic_incoherence: how far the graph is from perfectly layered
- verify_solution: residual of a linear solve
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SolutionCheck:
    """Residual of A·x against b."""

    residual: np.ndarray
    residual_norm: float
    max_error: float

    def within(self, tol: float = 1e-6) -> bool:
        return self.max_error <= tol


def verify_solution(a: np.ndarray, b: np.ndarray, x: np.ndarray) -> SolutionCheck:
    """
    Compare A·x with b.

    Args:
        a: Coefficient matrix, shape [n, n]
        b: Right-hand side, length n
        x: Candidate solution, length n

    Returns:
        SolutionCheck with the residual vector and its norms
    """
    residual = np.asarray(a, dtype=np.float64) @ np.asarray(x, dtype=np.float64)
    residual = residual - np.asarray(b, dtype=np.float64)
    return SolutionCheck(
        residual=residual,
        residual_norm=float(np.linalg.norm(residual)),
        max_error=float(np.max(np.abs(residual))) if residual.size else 0.0,
    )


def trophic_incoherence(adjacency: np.ndarray, heights: np.ndarray) -> float:
    """
    Mean of (h[j] - h[i] - 1)² over all edges i → j.

    0 when every edge climbs exactly one level; grows as edges run
    sideways or downwards. Returns 0 for a graph with no edges.
    """
    a = np.asarray(adjacency)
    h = np.asarray(heights, dtype=np.float64)

    rows, cols = np.nonzero(a)
    if len(rows) == 0:
        return 0.0

    # Height differences along each edge
    diffs = h[cols] - h[rows]
    return float(np.mean((diffs - 1.0) ** 2))
