"""Normal-equations solve with a determinant-based degeneracy test."""

import enum
import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional
from scipy.linalg import LinAlgError, solve

from ..models.settings import DEFAULT_DETERMINANT_THRESHOLD

logger = logging.getLogger(__name__)


class SolveStatus(str, enum.Enum):
    """Outcome of a normal-equations solve."""

    SOLVED = "solved"
    DEGENERATE = "degenerate"
    MALFORMED_SHAPE = "malformed_shape"


@dataclass(frozen=True)
class LinearSolution:
    """Result of :func:`solve_linear_system`.

    ``x`` is only set when ``status`` is ``SOLVED``.
    """

    status: SolveStatus
    x: Optional[np.ndarray] = None
    determinant: float = np.nan

    @property
    def solvable(self) -> bool:
        return self.status is SolveStatus.SOLVED


def is_degenerate(determinant: float, threshold: float = DEFAULT_DETERMINANT_THRESHOLD) -> bool:
    """Check whether a determinant marks the system as unsolvable."""
    return bool(
        np.isnan(determinant)
        or np.isinf(determinant)
        or abs(determinant) < threshold
    )


def solve_linear_system(
    A: np.ndarray,
    b: np.ndarray,
    threshold: float = DEFAULT_DETERMINANT_THRESHOLD
) -> LinearSolution:
    """Solve A x = b for a symmetric A and return the negated solution.

    The returned step is ``-A^{-1} b``, so with ``A = J^T J`` and
    ``b = J^T r`` it is the Gauss-Newton update to add to the estimate.

    Args:
        A: Symmetric n x n matrix, possibly indefinite
        b: n-element right-hand side
        threshold: Minimum |det(A)| for the system to be considered solvable

    Returns:
        LinearSolution; ``x`` is None unless the system is solvable
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float).reshape(-1)

    if A.size == 0:
        return LinearSolution(status=SolveStatus.SOLVED, x=np.zeros(0), determinant=1.0)

    # Determinant dominates the cost for large n
    det = float(np.linalg.det(A))
    if is_degenerate(det, threshold):
        logger.debug(f"Degenerate system: det={det:.3e}, threshold={threshold:.1e}")
        return LinearSolution(status=SolveStatus.DEGENERATE, determinant=det)

    try:
        # Bunch-Kaufman pivoted LDL^T (LAPACK ?sysv)
        x = solve(A, b, assume_a="sym", check_finite=False)
    except LinAlgError as e:
        logger.debug(f"LDL^T factorization failed: {str(e)}")
        return LinearSolution(status=SolveStatus.DEGENERATE, determinant=det)

    return LinearSolution(status=SolveStatus.SOLVED, x=-x, determinant=det)
