"""
Experimental designs for PowerCurve.

A design pairs a data generator with the hypothesis test applied to its
output and names the scenario parameter that varies across the grid.

- ``ContinuousDesign``: two groups of ``n_per_group`` normal observations,
  group B shifted by effect size ``d``; Welch t-test.
- ``BinaryDesign``: two groups with event probabilities ``p1`` (fixed) and
  ``p2`` (varied); Fisher exact test on the 2x2 table.
"""

from typing import Any, List, Protocol, Sequence, runtime_checkable

import numpy as np

from .stats.data_generation import generate_binary, generate_continuous
from .stats.hypothesis import TestResult, fisher_exact_test, welch_t_test
from .utils.validators import (
    _validate_grid,
    _validate_grid_bounds,
    _validate_group_size,
    _validate_probability,
)


@runtime_checkable
class Design(Protocol):
    """Protocol defining the design interface used by the simulation driver.

    Two optional members are read when present: ``label`` (x-axis label of
    the power plot, falls back to ``parameter_name``) and ``describe()``
    (settings merged into the result's ``"model"`` entry, see
    ``core.results.describe_design``).
    """

    parameter_name: str

    def generate(self, rng: np.random.Generator, value: float) -> Any:
        """Draw one dataset for scenario *value* from *rng*."""
        ...

    def test(self, dataset: Any) -> TestResult:
        """Apply the design's hypothesis test to *dataset*."""
        ...

    def validate_values(self, values: Sequence[float]) -> List[float]:
        """Check a scenario grid and return it as a list of floats.

        Raises:
            ValueError: If any value is unusable for this design.
        """
        ...


class ContinuousDesign:
    """Two-sample continuous outcome design tested with a Welch t-test.

    Args:
        n_per_group: Observations per group (default 10).
    """

    parameter_name = "d"
    label = "Effect size (d)"

    def __init__(self, n_per_group: int = 10):
        _validate_group_size(n_per_group, "n_per_group").raise_if_invalid()
        self.n_per_group = int(n_per_group)

    def generate(self, rng, value):
        return generate_continuous(rng, value, self.n_per_group)

    def test(self, dataset):
        return welch_t_test(dataset)

    def validate_values(self, values):
        grid, result = _validate_grid(values, self.parameter_name)
        for warning in result.warnings:
            print(f"Warning: {warning}")
        result.raise_if_invalid()
        return grid

    def describe(self) -> dict:
        return {"design": "continuous", "test": "welch_t", "n_per_group": self.n_per_group}

    def __repr__(self):
        return f"ContinuousDesign(n_per_group={self.n_per_group})"


class BinaryDesign:
    """Two-group binary outcome design tested with Fisher's exact test.

    Args:
        n1: Size of group 1 (default 25).
        n2: Size of group 2 (default 25).
        p1: Fixed event probability in group 1 (default 0.3).
    """

    parameter_name = "p2"
    label = "Event probability in group 2 (p2)"

    def __init__(self, n1: int = 25, n2: int = 25, p1: float = 0.3):
        for result in (
            _validate_group_size(n1, "n1"),
            _validate_group_size(n2, "n2"),
            _validate_probability(p1, "p1"),
        ):
            result.raise_if_invalid()
        self.n1 = int(n1)
        self.n2 = int(n2)
        self.p1 = float(p1)

    def generate(self, rng, value):
        return generate_binary(rng, value, self.n1, self.n2, self.p1)

    def test(self, dataset):
        return fisher_exact_test(dataset)

    def validate_values(self, values):
        grid, result = _validate_grid(values, self.parameter_name)
        for warning in result.warnings:
            print(f"Warning: {warning}")
        result.raise_if_invalid()
        _validate_grid_bounds(grid, self.parameter_name, 0, 1).raise_if_invalid()
        return grid

    def describe(self) -> dict:
        return {"design": "binary", "test": "fisher_exact", "n1": self.n1, "n2": self.n2, "p1": self.p1}

    def __repr__(self):
        return f"BinaryDesign(n1={self.n1}, n2={self.n2}, p1={self.p1})"
