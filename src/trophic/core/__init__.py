"""
Core numeric layer.

Knows only about square adjacency matrices and height vectors:
- matrix: dense matrix/vector primitives and connectivity checks
- solver: Gauss-Jordan elimination with partial pivoting
- levels: the trophic levels algorithm (Laplacian, anchoring, rebasing)

Node identifiers and coordinates belong to the layout layer.
"""

from trophic.core.errors import TrophicError, DisconnectedGraphError, SingularSystemError
from trophic.core.matrix import (
    undirected,
    connected,
    transpose,
    in_degree,
    out_degree,
    merge_transpose,
    zero,
    diag,
    subtract,
    add_vec,
    sub_vec,
    sum_vec,
    rebase,
    round_vec,
    weakly_connected_components,
)
from trophic.core.solver import gauss_jordan_solve, solve_or_raise
from trophic.core.levels import (
    ANCHOR_NODE,
    FailureKind,
    TrophicConfig,
    TrophicResult,
    build_laplacian,
    compute_trophic_levels,
)

__all__ = [
    "TrophicError",
    "DisconnectedGraphError",
    "SingularSystemError",
    "undirected",
    "connected",
    "transpose",
    "in_degree",
    "out_degree",
    "merge_transpose",
    "zero",
    "diag",
    "subtract",
    "add_vec",
    "sub_vec",
    "sum_vec",
    "rebase",
    "round_vec",
    "weakly_connected_components",
    "gauss_jordan_solve",
    "solve_or_raise",
    "ANCHOR_NODE",
    "FailureKind",
    "TrophicConfig",
    "TrophicResult",
    "build_laplacian",
    "compute_trophic_levels",
]
