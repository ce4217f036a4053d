"""
Dense linear solver: Gauss-Jordan elimination with partial pivoting.

Solves A·x = b for a square A. The augmented system [A | b] lives in its own
buffer, so the caller's A and b are never modified.

Partial pivoting (largest magnitude in the remaining column) helps with
stability but does not rescue near-singular systems. A column with no
non-zero candidate pivot makes the system singular and the solve returns
None rather than a partial answer.
"""

from __future__ import annotations

import logging

import numpy as np

from trophic.core.errors import SingularSystemError

logger = logging.getLogger(__name__)


def augment(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Build a fresh n x (n+1) float buffer holding [A | b]."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64).reshape(-1, 1)
    return np.hstack([a, b])


def find_pivot_row(system: np.ndarray, index: int) -> int | None:
    """
    Row in [index, n) with the largest |system[row, index]|.

    The first row wins ties. Returns None if the best magnitude is exactly
    zero.
    """
    column = np.abs(system[index:, index])
    row = index + int(np.argmax(column))
    if system[row, index] == 0:
        return None
    return row


def swap_rows(system: np.ndarray, row1: int, row2: int) -> np.ndarray:
    """Swap two rows of the system in place and return it."""
    system[[row1, row2]] = system[[row2, row1]]
    return system


def gauss_jordan_solve(a: np.ndarray, b: np.ndarray) -> np.ndarray | None:
    """
    Solve A·x = b by Gauss-Jordan elimination.

    Args:
        a: Square coefficient matrix, shape [n, n]
        b: Right-hand side, length n

    Returns:
        Solution vector x of length n, or None if the system is singular
    """
    system = augment(a, b)
    n = system.shape[0]
    logger.debug("Solving %dx%d system", n, n)

    for i in range(n):
        pivot_row = find_pivot_row(system, i)
        if pivot_row is None:
            logger.debug("No pivot in column %d", i)
            return None
        if pivot_row != i:
            swap_rows(system, i, pivot_row)

        # Divide pivot row by pivot (diagonal becomes exactly 1)
        system[i, i:] = system[i, i:] / system[i, i]

        # Cancel below pivot
        for j in range(i + 1, n):
            operable = system[j, i]
            if operable != 0:
                system[j, i:] -= operable * system[i, i:]

    # Back substitution
    for i in range(n - 1, 0, -1):
        for j in range(i - 1, -1, -1):
            operable = system[j, i]
            if operable != 0:
                system[j, j:] -= operable * system[i, j:]

    return system[:, -1].copy()


def solve_or_raise(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Like gauss_jordan_solve(), but raise SingularSystemError on failure."""
    x = gauss_jordan_solve(a, b)
    if x is None:
        raise SingularSystemError(
            "Singular matrix", context={"size": np.shape(a)[0]}
        )
    return x
