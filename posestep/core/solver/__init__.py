"""Normal-equations solvers for posestep."""

from .linear_system import LinearSolution, SolveStatus, is_degenerate, solve_linear_system
from .pose_update import (
    PoseUpdateResult,
    PoseUpdateSolver,
    check_system_shape,
    solve_and_unpack,
    unpack_pose_updates,
)
from .diagnostics import SystemDiagnostics, analyze_normal_matrix

__all__ = [
    "LinearSolution",
    "SolveStatus",
    "is_degenerate",
    "solve_linear_system",
    "PoseUpdateResult",
    "PoseUpdateSolver",
    "check_system_shape",
    "solve_and_unpack",
    "unpack_pose_updates",
    "SystemDiagnostics",
    "analyze_normal_matrix",
]
