"""Unit tests for identity residual analysis."""

import math
import pytest

from complex_plane.value import Complex, ONE
from complex_plane.functions import csc
from complex_plane.analysis import (
    sample_grid, compute_identity_residual, check_identities,
    IdentityResidual, IDENTITIES
)


class TestSampleGrid:
    """Test suite for grid construction."""

    def test_shape_and_corners(self):
        grid = sample_grid((-1.0, 1.0), (-2.0, 2.0), 5)
        assert len(grid) == 5
        assert all(len(row) == 5 for row in grid)
        assert grid[0][0] == Complex(-1.0, -2.0)
        assert grid[-1][-1] == Complex(1.0, 2.0)
        assert grid[2][2] == Complex(0.0, 0.0)

    def test_rows_follow_imaginary_axis(self):
        grid = sample_grid((0.0, 1.0), (0.0, 1.0), 3)
        assert [z.im for z in grid[1]] == [0.5, 0.5, 0.5]
        assert [z.re for z in grid[1]] == [0.0, 0.5, 1.0]

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            sample_grid(resolution=0)


class TestIdentityResidual:
    """Test suite for residual computation."""

    @pytest.fixture
    def points(self):
        return [z for row in sample_grid((-2.0, 2.0), (-2.0, 2.0), 10) for z in row]

    def test_exact_identity(self, points):
        result = compute_identity_residual(
            'conjugate', lambda z: z.conjugate().conjugate(), lambda z: z, points
        )
        assert result.max_residual == 0.0
        assert result.non_finite == 0
        assert result.n_points == 100
        assert result.passed()

    def test_detects_wrong_identity(self, points):
        result = compute_identity_residual('wrong', lambda z: z.conjugate(), lambda z: z, points)
        assert result.max_residual > 1.0
        assert not result.passed()

    def test_non_finite_residuals_warn(self):
        with pytest.warns(RuntimeWarning, match="non-finite"):
            result = compute_identity_residual(
                'csc_at_zero', lambda z: csc(z), lambda z: ONE, [Complex(0), Complex(1)]
            )
        assert result.non_finite == 1
        assert result.n_points == 2
        assert math.isfinite(result.max_residual)

    def test_all_non_finite(self):
        with pytest.warns(RuntimeWarning):
            result = compute_identity_residual('pole', lambda z: csc(z), lambda z: ONE, [Complex(0)])
        assert math.isnan(result.max_residual)
        assert not result.passed()

    def test_non_finite_residual_fails(self):
        # Finite points agree exactly, the pole at zero does not
        with pytest.warns(RuntimeWarning, match="non-finite"):
            result = compute_identity_residual(
                'reciprocal', lambda z: z.times(z.reciprocal()), lambda z: ONE,
                [Complex(0), Complex(1, 1)]
            )
        assert result.non_finite == 1
        assert result.max_residual <= 1e-9
        assert not result.passed(1e-9)

    def test_to_dict(self):
        residual = IdentityResidual('x', 1e-12, 1e-13, 0, 4)
        data = residual.to_dict()
        assert data == {
            'name': 'x',
            'max_residual': 1e-12,
            'mean_residual': 1e-13,
            'non_finite': 0,
            'n_points': 4
        }

    def test_check_identities(self, points):
        results = check_identities(points)
        assert set(results.keys()) == set(IDENTITIES.keys())
        for name, residual in results.items():
            assert residual.passed(1e-9), f"{name}: {residual.to_dict()}"

    def test_zero_excluded_where_undefined(self):
        points = [Complex(0), Complex(1, 1)]
        results = check_identities(points, names=['exp_ln', 'reciprocal', 'double_conjugate'])
        assert results['exp_ln'].n_points == 1
        assert results['reciprocal'].n_points == 1
        assert results['double_conjugate'].n_points == 2

    def test_unknown_identity(self, points):
        with pytest.raises(ValueError):
            check_identities(points, names=['not_an_identity'])


if __name__ == "__main__":
    pytest.main([__file__])
