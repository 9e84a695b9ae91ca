"""Configuration models for posestep."""

from .settings import DEFAULT_DETERMINANT_THRESHOLD, SolverSettings

__all__ = [
    "DEFAULT_DETERMINANT_THRESHOLD",
    "SolverSettings",
]
