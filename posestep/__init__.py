"""posestep - Gauss-Newton pose update step

Solves the normal equations of a rigid registration step and turns the
stacked 6-parameter updates into 4x4 transforms.
"""

__version__ = "0.1.0"

# Settings
from .core.models.settings import SolverSettings

# Solver
from .core.solver.linear_system import LinearSolution, SolveStatus, solve_linear_system
from .core.solver.pose_update import PoseUpdateResult, PoseUpdateSolver, solve_and_unpack
from .core.solver.diagnostics import SystemDiagnostics, analyze_normal_matrix

# Math
from .core.math.se3 import vector6_to_matrix4, matrix4_to_vector6, apply_pose_updates

__all__ = [
    # Version
    "__version__",
    # Settings
    "SolverSettings",
    # Solver
    "LinearSolution",
    "SolveStatus",
    "solve_linear_system",
    "PoseUpdateResult",
    "PoseUpdateSolver",
    "solve_and_unpack",
    "SystemDiagnostics",
    "analyze_normal_matrix",
    # Math
    "vector6_to_matrix4",
    "matrix4_to_vector6",
    "apply_pose_updates",
]
