"""
Trophic Levels algorithm.

Given a directed adjacency matrix A, find heights h such that edges tend to
point from lower to higher nodes, by solving

    L·h = v,   L = diag(in + out) - (A ∨ Aᵀ),   v = in - out

L has rows summing to zero, so it is singular. Node 0 is pinned as the
reference by zeroing L[0, 0]; the answer is then shifted so the lowest
node sits at 0 and rounded for output.

Failures are returned as values (TrophicResult.failure), never as partial
height vectors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np

from trophic.core.errors import DisconnectedGraphError, SingularSystemError
from trophic.core.matrix import (
    add_vec,
    connected,
    diag,
    in_degree,
    merge_transpose,
    out_degree,
    rebase,
    round_vec,
    sub_vec,
    subtract,
    undirected,
    weakly_connected_components,
)
from trophic.core.solver import gauss_jordan_solve

logger = logging.getLogger(__name__)

ANCHOR_NODE = 0

DISCONNECTED_MESSAGE = "Network must be weakly connected"
SINGULAR_MESSAGE = "Singular matrix"


class FailureKind(str, Enum):
    """Why a trophic level computation produced no heights."""

    DISCONNECTED = "disconnected"
    SINGULAR = "singular"


@dataclass
class TrophicConfig:
    """Configuration for a trophic level computation."""

    decimals: int = 3  # Output rounding
    # Also reject graphs made of several components, each with no
    # isolated node. Off by default: only zero-degree nodes are rejected.
    strict_connectivity: bool = False

    def __post_init__(self):
        if self.decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {self.decimals}")


@dataclass
class TrophicResult:
    """Outcome of compute_trophic_levels()."""

    heights: np.ndarray | None
    failure: FailureKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> np.ndarray:
        """Return the heights, or raise the matching TrophicError."""
        if self.failure is FailureKind.DISCONNECTED:
            raise DisconnectedGraphError(self.message)
        if self.failure is FailureKind.SINGULAR:
            raise SingularSystemError(self.message)
        return self.heights


def _check_square(a: np.ndarray) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {a.shape}")
    if a.shape[0] == 0:
        raise ValueError("Adjacency matrix is empty: no node to anchor")


def build_laplacian(a: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Build the anchored system for adjacency matrix a.

    Returns:
        (L, v) with L[0, 0] already zeroed
    """
    # Degrees of unsigned or boolean matrices must not wrap or saturate
    a = np.asarray(a, dtype=np.float64)
    in_deg = in_degree(a)
    out_deg = out_degree(a)
    v = sub_vec(in_deg, out_deg)
    L = subtract(diag(add_vec(in_deg, out_deg)), merge_transpose(a))
    L[ANCHOR_NODE, ANCHOR_NODE] = 0
    return L, v


def compute_trophic_levels(
    adjacency: np.ndarray,
    config: TrophicConfig | None = None,
) -> TrophicResult:
    """
    Compute trophic heights for every node of a directed graph.

    Args:
        adjacency: Square 0/1 adjacency matrix, a[i, j] = 1 for an edge i → j
        config: Rounding and connectivity options (defaults if None)

    Returns:
        TrophicResult with heights (min 0, rounded), or a failure kind
    """
    if config is None:
        config = TrophicConfig()

    a = np.asarray(adjacency, dtype=np.float64)
    _check_square(a)

    au = undirected(a)
    if not connected(au):
        logger.warning(DISCONNECTED_MESSAGE)
        return TrophicResult(
            heights=None,
            failure=FailureKind.DISCONNECTED,
            message=DISCONNECTED_MESSAGE,
        )

    if config.strict_connectivity:
        n_components = weakly_connected_components(a)
        if n_components > 1:
            message = f"{DISCONNECTED_MESSAGE} (found {n_components} components)"
            logger.warning(message)
            return TrophicResult(
                heights=None,
                failure=FailureKind.DISCONNECTED,
                message=message,
            )

    L, v = build_laplacian(a)

    h = gauss_jordan_solve(L, v)
    if h is None:
        logger.warning(SINGULAR_MESSAGE)
        return TrophicResult(
            heights=None,
            failure=FailureKind.SINGULAR,
            message=SINGULAR_MESSAGE,
        )

    h = round_vec(rebase(h), config.decimals)
    logger.debug("Computed trophic heights for %d nodes", len(h))
    return TrophicResult(heights=h)
