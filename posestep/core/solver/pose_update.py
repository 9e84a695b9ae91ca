"""Solve stacked pose normal equations and unpack the per-pose transforms."""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional

from ..math.se3 import vector6_to_matrix4
from ..models.settings import SolverSettings
from .diagnostics import SystemDiagnostics
from .linear_system import LinearSolution, SolveStatus, solve_linear_system

logger = logging.getLogger(__name__)

POSE_DIMENSION = 6


@dataclass
class PoseUpdateResult:
    """Outcome of :func:`solve_and_unpack`.

    On success ``transforms[i]`` is built from ``solution[6*i:6*i+6]``.
    Any failure leaves ``transforms`` empty and ``solution`` None.
    """

    status: SolveStatus
    transforms: List[np.ndarray] = field(default_factory=list)
    solution: Optional[np.ndarray] = None
    diagnostics: Optional[SystemDiagnostics] = None

    @property
    def success(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def num_poses(self) -> int:
        return len(self.transforms)


def check_system_shape(JTJ: np.ndarray, JTr: np.ndarray) -> Optional[str]:
    """Return a description of what is wrong with the system shape, or None."""
    if JTJ.ndim != 2:
        return f"JTJ must be 2-D, got {JTJ.ndim}-D"
    # Column vectors (n, 1) are accepted
    if JTr.ndim not in (1, 2) or (JTr.ndim == 2 and JTr.shape[1] != 1):
        return f"JTr must be a vector, got shape {JTr.shape}"
    if JTJ.shape[0] != JTr.shape[0]:
        return f"row mismatch: JTJ has {JTJ.shape[0]} rows, JTr has {JTr.shape[0]}"
    if JTJ.shape[1] % POSE_DIMENSION != 0:
        return f"JTJ has {JTJ.shape[1]} columns, not a multiple of {POSE_DIMENSION}"
    if JTJ.shape[0] != JTJ.shape[1]:
        return f"JTJ must be square, got shape {JTJ.shape}"
    return None


def unpack_pose_updates(x: np.ndarray) -> List[np.ndarray]:
    """Split a stacked solution into 6-element chunks and convert each to 4x4.

    Args:
        x: Solution vector whose length is a multiple of 6

    Returns:
        One transform per chunk, in index order
    """
    x = np.asarray(x, dtype=float).reshape(-1)
    if len(x) % POSE_DIMENSION != 0:
        raise ValueError(f"x length must be a multiple of {POSE_DIMENSION}, got {len(x)}")

    n_poses = len(x) // POSE_DIMENSION
    return [
        vector6_to_matrix4(x[i * POSE_DIMENSION:(i + 1) * POSE_DIMENSION])
        for i in range(n_poses)
    ]


def solve_and_unpack(
    JTJ: np.ndarray,
    JTr: np.ndarray,
    settings: Optional[SolverSettings] = None
) -> PoseUpdateResult:
    """Solve the stacked normal equations and return one transform per pose.

    Args:
        JTJ: n x n symmetric matrix, n a multiple of 6
        JTr: n-element right-hand side
        settings: Solver settings (threshold, logging, diagnostics)

    Returns:
        PoseUpdateResult with n/6 transforms on success, none otherwise
    """
    settings = settings or SolverSettings()
    JTJ = np.asarray(JTJ, dtype=float)
    JTr = np.asarray(JTr, dtype=float)

    problem = check_system_shape(JTJ, JTr)
    if problem is not None:
        level = logging.WARNING if settings.warn_on_malformed else logging.DEBUG
        logger.log(level, f"[solve_and_unpack] Unsupported matrix format: {problem}")
        return PoseUpdateResult(status=SolveStatus.MALFORMED_SHAPE)

    diagnostics = None
    if settings.collect_diagnostics:
        diagnostics = SystemDiagnostics.from_matrix(JTJ)

    solution: LinearSolution = solve_linear_system(
        JTJ, JTr, threshold=settings.determinant_threshold
    )

    if not solution.solvable:
        if diagnostics is None and logger.isEnabledFor(logging.DEBUG):
            diagnostics = SystemDiagnostics.from_matrix(JTJ)
        if diagnostics is not None:
            logger.debug(
                f"No pose update: det={solution.determinant:.3e}, "
                f"condition number={diagnostics.condition_number:.3e}, "
                f"rank={diagnostics.rank}/{diagnostics.dimension}"
            )
        return PoseUpdateResult(status=solution.status, diagnostics=diagnostics)

    transforms = unpack_pose_updates(solution.x)
    logger.debug(f"Solved pose update for {len(transforms)} pose(s)")

    return PoseUpdateResult(
        status=SolveStatus.SOLVED,
        transforms=transforms,
        solution=solution.x,
        diagnostics=diagnostics,
    )


class PoseUpdateSolver:
    """Holds solver settings; every call is independent and stateless."""

    def __init__(self, settings: Optional[SolverSettings] = None):
        """Initialize solver.

        Args:
            settings: Solver settings
        """
        self.settings = settings or SolverSettings()

    def solve(self, JTJ: np.ndarray, JTr: np.ndarray) -> PoseUpdateResult:
        """Solve one linearization step, see :func:`solve_and_unpack`."""
        return solve_and_unpack(JTJ, JTr, self.settings)

    def solve_linear_system(self, A: np.ndarray, b: np.ndarray) -> LinearSolution:
        """Solve A x = b with the configured threshold."""
        return solve_linear_system(A, b, threshold=self.settings.determinant_threshold)
