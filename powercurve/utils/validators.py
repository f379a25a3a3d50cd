"""
Validation utilities for PowerCurve.

This module provides validation functions for analysis settings, design
sizes, and scenario grids.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

__all__ = []


@dataclass
class _ValidationResult:
    """Outcome of a validation check, carrying errors and warnings.

    Attributes:
        is_valid: ``True`` if no errors were found.
        errors: List of error messages (empty when valid).
        warnings: List of non-fatal warning messages.
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]

    def raise_if_invalid(self):
        """Raise ``ValueError`` if the validation failed."""
        if not self.is_valid:
            error_msg = "Validation failed:\n" + "\n".join(f"• {err}" for err in self.errors)
            raise ValueError(error_msg)


class _Validator:
    """Static helpers for type and range checks used by all validators."""

    @staticmethod
    def _check_type(value: Any, expected_types: tuple, name: str) -> Optional[str]:
        """Check if value has expected type."""
        # bool is an int subclass but never a meaningful number here
        if isinstance(value, bool) or not isinstance(value, expected_types):
            actual_type = type(value).__name__
            expected = expected_types[0].__name__ if len(expected_types) == 1 else f"one of {[t.__name__ for t in expected_types]}"
            return f"{name} must be {expected}, got {actual_type}"
        return None

    @staticmethod
    def _check_range(
        value: Union[int, float],
        min_val: Optional[float],
        max_val: Optional[float],
        name: str,
    ) -> Optional[str]:
        """Check if value is within range."""
        if min_val is not None and value < min_val:
            return f"{name} must be >= {min_val}, got {value}"
        if max_val is not None and value > max_val:
            return f"{name} must be <= {max_val}, got {value}"
        return None


_validator = _Validator()


def _validate_numeric_parameter(
    value: Any,
    name: str,
    expected_types: tuple = (int, float),
    min_val: Optional[float] = None,
    max_val: Optional[float] = None,
) -> _ValidationResult:
    """Generic validation for numeric parameters."""
    errors: List[str] = []

    type_error = _validator._check_type(value, expected_types, name)
    if type_error:
        errors.append(type_error)
        return _ValidationResult(False, errors, [])

    if isinstance(value, float) and not math.isfinite(value):
        errors.append(f"{name} must be finite, got {value}")
        return _ValidationResult(False, errors, [])

    range_error = _validator._check_range(value, min_val, max_val, name)
    if range_error:
        errors.append(range_error)

    return _ValidationResult(len(errors) == 0, errors, [])


def _validate_power(power: Any) -> _ValidationResult:
    """Validate target power parameter (0-100%)."""
    return _validate_numeric_parameter(power, "Power", min_val=0, max_val=100)


def _validate_alpha(alpha: Any) -> _ValidationResult:
    """Validate alpha level parameter (0-0.25)."""
    result = _validate_numeric_parameter(alpha, "Alpha", min_val=0, max_val=0.25)
    if result.is_valid and alpha == 0:
        result.errors.append("Alpha must be greater than 0")
        result.is_valid = False
    return result


def _validate_probability(p: Any, name: str) -> _ValidationResult:
    """Validate a Bernoulli probability in [0, 1]."""
    return _validate_numeric_parameter(p, name, expected_types=(int, float, np.floating, np.integer), min_val=0, max_val=1)


def _validate_group_size(n: Any, name: str) -> _ValidationResult:
    """Validate a per-group sample size (positive integer)."""
    return _validate_numeric_parameter(n, name, expected_types=(int, np.integer), min_val=1)


def _validate_repetitions(n_repetitions: Any) -> Tuple[int, _ValidationResult]:
    """Validate the number of repetitions per scenario value."""
    result = _validate_numeric_parameter(n_repetitions, "Number of repetitions", expected_types=(int, np.integer), min_val=1)

    if result.is_valid:
        n = int(n_repetitions)
        if n < 100:
            result.warnings.append(f"Low repetition count ({n}). Consider using at least 500 for reliable power estimates.")
        return n, result

    return 0, result


def _validate_seed(seed: Any) -> _ValidationResult:
    """Validate a random seed (non-negative integer or ``None``)."""
    errors: List[str] = []
    if seed is None:
        return _ValidationResult(True, errors, [])

    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        errors.append(f"seed must be an integer or None, got {type(seed).__name__}")
    elif seed < 0:
        errors.append("seed must be non-negative")

    return _ValidationResult(len(errors) == 0, errors, [])


def _validate_grid(values: Any, name: str) -> Tuple[List[float], _ValidationResult]:
    """Validate a scenario grid and normalise it to a list of floats.

    The grid must be a non-empty one-dimensional sequence of finite numbers
    without duplicates (duplicates would be merged when results are grouped).
    """
    errors: List[str] = []
    warnings: List[str] = []

    if isinstance(values, (str, bytes)) or values is None:
        errors.append(f"{name} values must be a sequence of numbers, got {type(values).__name__}")
        return [], _ValidationResult(False, errors, warnings)

    arr = np.atleast_1d(np.asarray(values))
    if arr.ndim != 1:
        errors.append(f"{name} values must be one-dimensional, got shape {arr.shape}")
        return [], _ValidationResult(False, errors, warnings)
    if arr.size == 0:
        errors.append(f"{name} grid must contain at least one value")
        return [], _ValidationResult(False, errors, warnings)
    if arr.dtype.kind not in "iuf":
        errors.append(f"{name} values must be numeric, got dtype {arr.dtype}")
        return [], _ValidationResult(False, errors, warnings)

    grid = [float(v) for v in arr]
    if not all(math.isfinite(v) for v in grid):
        errors.append(f"{name} values must be finite")

    seen = set()
    duplicates = set()
    for v in grid:
        if v in seen:
            duplicates.add(v)
        seen.add(v)
    if duplicates:
        errors.append(f"{name} grid contains duplicate values: {sorted(duplicates)}")

    if len(grid) > 200:
        warnings.append(f"Large number of {name} values to test ({len(grid)}). This may take significant time.")

    return grid, _ValidationResult(len(errors) == 0, errors, warnings)


def _validate_grid_bounds(grid: Sequence[float], name: str, min_val: Optional[float], max_val: Optional[float]) -> _ValidationResult:
    """Check every grid value lies within ``[min_val, max_val]``."""
    errors = []
    for v in grid:
        range_error = _validator._check_range(v, min_val, max_val, name)
        if range_error:
            errors.append(range_error)
    return _ValidationResult(len(errors) == 0, errors, [])


def _validate_plot_size(width: Any, height: Any, dpi: Any) -> _ValidationResult:
    """Validate figure dimensions (inches) and resolution (dots per inch)."""
    errors = []
    for value, name in [(width, "width"), (height, "height"), (dpi, "dpi")]:
        type_error = _validator._check_type(value, (int, float), name)
        if type_error:
            errors.append(type_error)
        elif not value > 0:
            errors.append(f"{name} must be positive, got {value}")
    return _ValidationResult(len(errors) == 0, errors, [])
