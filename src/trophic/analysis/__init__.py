"""
Analysis layer: diagnostics derived from a solution.

IMPORTANT: This is NOT seen by the core. One-way derivation only.

- verify_solution: residual of A·x = b
- trophic_incoherence: spread of edge height differences around 1
"""

from trophic.analysis.diagnostics import (
    SolutionCheck,
    verify_solution,
    trophic_incoherence,
)

__all__ = [
    "SolutionCheck",
    "verify_solution",
    "trophic_incoherence",
]
