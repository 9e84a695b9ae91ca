"""Solver settings."""

from pydantic import BaseModel, Field


DEFAULT_DETERMINANT_THRESHOLD = 1e-6


class SolverSettings(BaseModel):
    """Settings for the normal-equations solve."""

    determinant_threshold: float = Field(
        default=DEFAULT_DETERMINANT_THRESHOLD,
        gt=0,
        description="Systems with |det(A)| below this are treated as degenerate"
    )
    warn_on_malformed: bool = Field(
        default=True,
        description="Log malformed system shapes at WARNING instead of DEBUG"
    )
    collect_diagnostics: bool = Field(
        default=False,
        description="Attach conditioning diagnostics to every result"
    )
