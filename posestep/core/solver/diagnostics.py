"""Conditioning diagnostics for normal-equations matrices.

These numbers are informational. Solvability is decided by the determinant
test in :mod:`posestep.core.solver.linear_system`; a small determinant can
come from a well-conditioned but poorly scaled system and vice versa, so
the eigenvalue picture here is what to look at when a step is rejected.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from scipy.linalg import eigvalsh


@dataclass(frozen=True)
class SystemDiagnostics:
    """Snapshot of the conditioning of a normal-equations matrix."""

    dimension: int
    determinant: float
    log_abs_determinant: float
    condition_number: float
    smallest_eigenvalue: float
    largest_eigenvalue: float
    rank: int
    nullspace_dimension: int
    symmetry_error: float
    eigenvalues: List[float] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_full_rank(self) -> bool:
        return self.error is None and self.rank == self.dimension

    @classmethod
    def from_matrix(cls, A: np.ndarray, tolerance: float = 1e-6) -> "SystemDiagnostics":
        """Build diagnostics for A, see :func:`analyze_normal_matrix`."""
        report = analyze_normal_matrix(A, tolerance)
        return cls(
            dimension=report["dimension"],
            determinant=report["determinant"],
            log_abs_determinant=report["log_abs_determinant"],
            condition_number=report["condition_number"],
            smallest_eigenvalue=report["smallest_eigenvalue"],
            largest_eigenvalue=report["largest_eigenvalue"],
            rank=report["rank"],
            nullspace_dimension=report["nullspace_dimension"],
            symmetry_error=report["symmetry_error"],
            eigenvalues=report["eigenvalues"],
            error=report.get("error"),
        )


def analyze_normal_matrix(A: np.ndarray, tolerance: float = 1e-6) -> Dict[str, Any]:
    """Analyze rank and conditioning of a symmetric matrix.

    Args:
        A: Square matrix, expected symmetric (J^T J)
        tolerance: Relative eigenvalue tolerance for rank determination

    Returns:
        Dictionary with rank analysis
    """
    A = np.asarray(A, dtype=float)

    if A.size == 0:
        return {
            "dimension": 0,
            "determinant": 1.0,
            "log_abs_determinant": 0.0,
            "condition_number": 1.0,
            "smallest_eigenvalue": 0.0,
            "largest_eigenvalue": 0.0,
            "rank": 0,
            "nullspace_dimension": 0,
            "symmetry_error": 0.0,
            "eigenvalues": [],
        }

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {A.shape}")

    n = A.shape[0]

    try:
        # Symmetric part only; the asymmetry is reported separately
        A_sym = 0.5 * (A + A.T)
        symmetry_error = float(np.max(np.abs(A - A.T)))

        eigenvalues = eigvalsh(A_sym)
        abs_eigenvalues = np.abs(eigenvalues)
        largest_abs = float(np.max(abs_eigenvalues))

        rank = int(np.sum(abs_eigenvalues > tolerance * largest_abs)) if largest_abs > 0 else 0
        smallest_abs = float(np.min(abs_eigenvalues))
        condition_number = largest_abs / smallest_abs if smallest_abs > 0 else np.inf

        sign, logdet = np.linalg.slogdet(A)

        return {
            "dimension": n,
            "determinant": float(np.linalg.det(A)),
            "log_abs_determinant": float(logdet) if sign != 0 else -np.inf,
            "condition_number": float(condition_number),
            "smallest_eigenvalue": float(eigenvalues[0]),
            "largest_eigenvalue": float(eigenvalues[-1]),
            "rank": rank,
            "nullspace_dimension": n - rank,
            "symmetry_error": symmetry_error,
            "eigenvalues": eigenvalues.tolist(),
        }

    except (np.linalg.LinAlgError, ValueError) as e:
        return {
            "dimension": n,
            "determinant": np.nan,
            "log_abs_determinant": np.nan,
            "condition_number": np.inf,
            "smallest_eigenvalue": np.nan,
            "largest_eigenvalue": np.nan,
            "rank": -1,
            "nullspace_dimension": -1,
            "symmetry_error": np.nan,
            "eigenvalues": [],
            "error": f"Matrix analysis failed: {str(e)}",
        }
