"""
Tests for validation utilities.
"""

import numpy as np
import pytest

from powercurve.utils.validators import (
    _validate_alpha,
    _validate_grid,
    _validate_grid_bounds,
    _validate_group_size,
    _validate_plot_size,
    _validate_power,
    _validate_probability,
    _validate_repetitions,
    _validate_seed,
    _ValidationResult,
)


class TestValidationResult:
    def test_valid_does_not_raise(self):
        _ValidationResult(True, [], []).raise_if_invalid()

    def test_invalid_lists_every_error(self):
        result = _ValidationResult(False, ["first problem", "second problem"], [])
        with pytest.raises(ValueError) as exc:
            result.raise_if_invalid()
        assert "first problem" in str(exc.value)
        assert "second problem" in str(exc.value)


class TestScalarValidators:
    @pytest.mark.parametrize("alpha", [0.01, 0.05, 0.25])
    def test_alpha_valid(self, alpha):
        assert _validate_alpha(alpha).is_valid

    @pytest.mark.parametrize("alpha", [0, -0.1, 0.3, "0.05", None, float("nan")])
    def test_alpha_invalid(self, alpha):
        assert not _validate_alpha(alpha).is_valid

    @pytest.mark.parametrize("power", [0, 80, 100, 95.5])
    def test_power_valid(self, power):
        assert _validate_power(power).is_valid

    @pytest.mark.parametrize("power", [-1, 101, "80"])
    def test_power_invalid(self, power):
        assert not _validate_power(power).is_valid

    def test_probability(self):
        assert _validate_probability(0.3, "p1").is_valid
        assert _validate_probability(np.float64(1.0), "p1").is_valid
        assert not _validate_probability(1.01, "p1").is_valid

    def test_group_size(self):
        assert _validate_group_size(25, "n1").is_valid
        assert _validate_group_size(np.int64(3), "n1").is_valid
        assert not _validate_group_size(0, "n1").is_valid
        assert not _validate_group_size(10.0, "n1").is_valid
        assert not _validate_group_size(True, "n1").is_valid

    def test_seed(self):
        assert _validate_seed(None).is_valid
        assert _validate_seed(0).is_valid
        assert not _validate_seed(-1).is_valid
        assert not _validate_seed(1.5).is_valid


class TestRepetitions:
    def test_valid(self):
        n, result = _validate_repetitions(500)
        assert n == 500
        assert result.is_valid
        assert result.warnings == []

    def test_low_count_warns(self):
        n, result = _validate_repetitions(50)
        assert n == 50
        assert result.is_valid
        assert "Low repetition count" in result.warnings[0]

    @pytest.mark.parametrize("reps", [0, -10, 12.5, "500"])
    def test_invalid(self, reps):
        n, result = _validate_repetitions(reps)
        assert n == 0
        assert not result.is_valid


class TestGrid:
    def test_normalises_to_floats(self):
        grid, result = _validate_grid(np.array([0, 1, 2]), "d")
        assert result.is_valid
        assert grid == [0.0, 1.0, 2.0]

    def test_duplicates_reported(self):
        _, result = _validate_grid([0.1, 0.2, 0.1], "p2")
        assert not result.is_valid
        assert "duplicate" in result.errors[0]
        assert "0.1" in result.errors[0]

    def test_large_grid_warns(self):
        _, result = _validate_grid(np.linspace(0, 1, 201), "p2")
        assert result.is_valid
        assert result.warnings

    def test_bounds(self):
        assert _validate_grid_bounds([0.0, 0.5, 1.0], "p2", 0, 1).is_valid
        result = _validate_grid_bounds([-0.1, 0.5, 1.2], "p2", 0, 1)
        assert len(result.errors) == 2


class TestPlotSize:
    def test_valid(self):
        assert _validate_plot_size(7, 5.5, 300).is_valid

    @pytest.mark.parametrize(("width", "height", "dpi"), [(0, 5, 100), (7, -1, 100), (7, 5, 0), ("7", 5, 100)])
    def test_invalid(self, width, height, dpi):
        assert not _validate_plot_size(width, height, dpi).is_valid
