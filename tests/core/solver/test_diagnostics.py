"""Tests for normal-matrix diagnostics."""

import numpy as np
import pytest

from posestep.core.solver.diagnostics import SystemDiagnostics, analyze_normal_matrix


class TestAnalyzeNormalMatrix:
    """Test rank and conditioning analysis."""

    def test_identity(self):
        """Test identity is full rank with unit condition number."""
        report = analyze_normal_matrix(np.eye(6))

        assert report["rank"] == 6
        assert report["nullspace_dimension"] == 0
        assert report["condition_number"] == pytest.approx(1.0)
        assert report["determinant"] == pytest.approx(1.0)
        assert report["symmetry_error"] == 0.0

    def test_rank_deficient(self):
        """Test a zero eigenvalue shows up as a nullspace dimension."""
        report = analyze_normal_matrix(np.diag([1.0, 2.0, 3.0, 4.0, 5.0, 0.0]))

        assert report["rank"] == 5
        assert report["nullspace_dimension"] == 1
        assert report["condition_number"] == np.inf
        assert report["log_abs_determinant"] == -np.inf

    def test_small_but_well_conditioned(self):
        """Test a scaled identity has a tiny determinant but condition number 1."""
        report = analyze_normal_matrix(1e-2 * np.eye(6))

        assert report["determinant"] == pytest.approx(1e-12)
        assert report["condition_number"] == pytest.approx(1.0)
        assert report["rank"] == 6

    def test_eigenvalue_extremes(self):
        """Test indefinite matrices report signed eigenvalue extremes."""
        report = analyze_normal_matrix(np.diag([-3.0, 1.0, 2.0, 4.0, 5.0, 6.0]))

        assert report["smallest_eigenvalue"] == pytest.approx(-3.0)
        assert report["largest_eigenvalue"] == pytest.approx(6.0)
        assert report["condition_number"] == pytest.approx(6.0)

    def test_asymmetry_reported(self):
        """Test asymmetry is measured, not hidden."""
        A = np.eye(6)
        A[0, 1] = 0.5

        assert analyze_normal_matrix(A)["symmetry_error"] == pytest.approx(0.5)

    def test_empty(self):
        """Test an empty matrix gives a trivial report."""
        report = analyze_normal_matrix(np.zeros((0, 0)))

        assert report["dimension"] == 0
        assert report["rank"] == 0

    def test_non_finite(self):
        """Test non-finite input is reported through the error key."""
        A = np.eye(6)
        A[1, 1] = np.nan

        report = analyze_normal_matrix(A)

        assert "error" in report
        assert report["rank"] == -1

    def test_non_square(self):
        """Test error handling for non-square input."""
        with pytest.raises(ValueError):
            analyze_normal_matrix(np.ones((6, 5)))


class TestSystemDiagnostics:
    """Test the diagnostics dataclass."""

    def test_from_matrix(self):
        """Test construction from a matrix."""
        diagnostics = SystemDiagnostics.from_matrix(2.0 * np.eye(6))

        assert diagnostics.dimension == 6
        assert diagnostics.is_full_rank
        assert diagnostics.determinant == pytest.approx(64.0)
        assert len(diagnostics.eigenvalues) == 6
        assert diagnostics.error is None

    def test_not_full_rank(self):
        """Test rank deficiency is flagged."""
        diagnostics = SystemDiagnostics.from_matrix(np.zeros((6, 6)))

        assert not diagnostics.is_full_rank
        assert diagnostics.nullspace_dimension == 6
