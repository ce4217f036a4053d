"""
Dense adjacency-matrix primitives.

Matrices are square numpy arrays of shape [n, n]; vectors are 1-D arrays of
length n. Nothing here checks that matrices are square or that vector
lengths match: callers guarantee that.

All edges carry unit weight. A cell holds 1 if at least one edge runs from
the row node to the column node, 0 otherwise.
"""

from __future__ import annotations

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import connected_components


def undirected(a: np.ndarray) -> np.ndarray:
    """
    Convert a directed adjacency matrix to an undirected one.

    b[i, j] = b[j, i] = 1 if either a[i, j] or a[j, i] is non-zero.
    The leading diagonal (self-loops) is copied unchanged.

    Args:
        a: Square adjacency matrix

    Returns:
        A new symmetric matrix; a is not modified
    """
    nonzero = a != 0
    b = (nonzero | nonzero.T).astype(a.dtype)
    np.fill_diagonal(b, np.diagonal(a))
    return b


def connected(a: np.ndarray) -> bool:
    """
    Check that every node is connected to at least one other node.

    Only rejects rows that are entirely zero. Two components that share no
    path still pass; see weakly_connected_components() for the full test.
    """
    return bool(np.all(np.any(a != 0, axis=1)))


def transpose(a: np.ndarray) -> np.ndarray:
    """Swap cell values across the leading diagonal (new matrix)."""
    return a.T.copy()


def out_degree(a: np.ndarray) -> np.ndarray:
    """Number of edges out of each node (row sums)."""
    return a.sum(axis=1)


def in_degree(a: np.ndarray) -> np.ndarray:
    """Number of edges into each node (row sums of the transpose)."""
    return out_degree(transpose(a))


def merge_transpose(a: np.ndarray) -> np.ndarray:
    """
    Add a to its transpose, normalising cell values to 0/1.

    Starts from transpose(a) and sets every cell where a[i, j] > 0 to 1.
    Cells carried over from the transpose are clipped to 1 as well.
    """
    b = transpose(a)
    b[(a > 0) | (b > 0)] = 1
    return b


def zero(n: int) -> np.ndarray:
    """Square n x n matrix with all cells zero."""
    return np.zeros((n, n), dtype=np.float64)


def diag(v: np.ndarray) -> np.ndarray:
    """Zero matrix with v as the leading diagonal."""
    b = zero(len(v))
    np.fill_diagonal(b, v)
    return b


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix a - b, row by row."""
    return np.array([sub_vec(row_a, row_b) for row_a, row_b in zip(a, b)])


def sum_vec(v: np.ndarray) -> float:
    return v.sum()


def add_vec(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    return np.asarray(v1) + np.asarray(v2)


def sub_vec(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    return np.asarray(v1) - np.asarray(v2)


def rebase(v: np.ndarray) -> np.ndarray:
    """Subtract the minimum value from each cell, so the new minimum is 0."""
    v = np.asarray(v, dtype=np.float64)
    return v - v.min()


def round_vec(v: np.ndarray, places: int) -> np.ndarray:
    """Round each cell of v to the given number of decimal places."""
    rounded = np.round(np.asarray(v, dtype=np.float64), places)
    # Normalise -0.0 so output compares and prints cleanly
    return rounded + 0.0


def weakly_connected_components(a: np.ndarray) -> int:
    """
    Number of weakly connected components of the graph.

    A path-based test, stronger than connected(). Used only when strict
    connectivity checking is requested.
    """
    if a.shape[0] == 0:
        return 0
    n_components, _ = connected_components(
        sparse.csr_matrix(a != 0), directed=True, connection="weak"
    )
    return int(n_components)
