"""
Data Generator for PowerCurve.

Draws one synthetic dataset per trial from a parametric distribution:

- Continuous two-sample data: group A ~ N(0, 1), group B ~ N(d, 1).
- Binary two-group data packaged as a 2x2 contingency table.

Every draw comes from the ``numpy.random.Generator`` passed in, so the
caller controls the stream. Nothing here seeds or copies a generator.
"""

from dataclasses import dataclass

import numpy as np

GROUP_LABELS = ("A", "B")


@dataclass(frozen=True)
class ContinuousSample:
    """Continuous observations with their group labels.

    Attributes:
        values: 1-D float array, group A observations first.
        groups: 1-D array of labels (``"A"`` or ``"B"``), aligned with *values*.
    """

    values: np.ndarray
    groups: np.ndarray

    def group(self, label: str) -> np.ndarray:
        """Return the observations belonging to group *label*."""
        return self.values[self.groups == label]

    def __len__(self):
        return len(self.values)


@dataclass(frozen=True)
class ContingencyTable:
    """2x2 count matrix for a binary outcome in two groups.

    Rows are (positives, negatives); columns are (group 1, group 2).
    """

    counts: np.ndarray

    @property
    def group_sizes(self):
        return tuple(int(n) for n in self.counts.sum(axis=0))

    @property
    def total(self) -> int:
        return int(self.counts.sum())


def generate_continuous(rng: np.random.Generator, d: float, n_per_group: int = 10) -> ContinuousSample:
    """Generate a two-group continuous sample with mean shift *d*.

    Each observation is its group mean (0 for A, *d* for B) plus independent
    standard-normal noise. All ``2 * n_per_group`` noise terms come from a
    single draw, group A first.

    Args:
        rng: Random generator to draw from (advanced in place).
        d: Effect size, in noise standard deviations.
        n_per_group: Observations per group.

    Returns:
        ``ContinuousSample`` with ``2 * n_per_group`` observations.

    Raises:
        ValueError: If *n_per_group* is not positive.
    """
    if n_per_group <= 0:
        raise ValueError(f"n_per_group must be positive, got {n_per_group}")

    means = np.repeat([0.0, d], n_per_group)
    values = means + rng.standard_normal(2 * n_per_group)
    groups = np.repeat(np.array(GROUP_LABELS), n_per_group)
    return ContinuousSample(values=values, groups=groups)


def generate_binary(
    rng: np.random.Generator,
    p2: float,
    n1: int = 25,
    n2: int = 25,
    p1: float = 0.3,
) -> ContingencyTable:
    """Generate a 2x2 table of positive/negative counts for two groups.

    Group 1 positives ~ Binomial(n1, p1) are drawn first, then group 2
    positives ~ Binomial(n2, p2).

    Args:
        rng: Random generator to draw from (advanced in place).
        p2: Event probability in group 2.
        n1: Size of group 1.
        n2: Size of group 2.
        p1: Event probability in group 1.

    Returns:
        ``ContingencyTable`` whose columns sum to *n1* and *n2*.

    Raises:
        ValueError: If a size is not positive or a probability is outside
            [0, 1].
    """
    if n1 <= 0 or n2 <= 0:
        raise ValueError(f"Group sizes must be positive, got n1={n1}, n2={n2}")
    for name, p in (("p1", p1), ("p2", p2)):
        if not 0 <= p <= 1:
            raise ValueError(f"{name} must be between 0 and 1, got {p}")

    x1 = rng.binomial(n1, p1)
    x2 = rng.binomial(n2, p2)
    counts = np.array([[x1, x2], [n1 - x1, n2 - x2]], dtype=np.int64)
    return ContingencyTable(counts=counts)
