"""
Hypothesis tests applied to simulated datasets.

Thin wrappers around ``scipy.stats`` that turn a generated dataset into a
``TestResult``. Degenerate inputs are passed through untouched; whatever
scipy reports is what the trial records.
"""

from dataclasses import dataclass

from scipy import stats

from .data_generation import GROUP_LABELS, ContingencyTable, ContinuousSample


@dataclass(frozen=True)
class TestResult:
    """Outcome of one hypothesis test.

    Attributes:
        statistic: Test statistic (t for Welch, sample odds ratio for Fisher).
        p_value: Two-sided p-value.
    """

    # keep pytest from collecting this as a test class
    __test__ = False

    statistic: float
    p_value: float


def welch_t_test(sample: ContinuousSample) -> TestResult:
    """Two-sided two-sample t-test without assuming equal variances.

    The statistic is signed as mean(A) - mean(B), matching
    ``scipy.stats.ttest_ind(a, b)``.
    """
    a = sample.group(GROUP_LABELS[0])
    b = sample.group(GROUP_LABELS[1])
    res = stats.ttest_ind(a, b, equal_var=False)
    return TestResult(statistic=float(res.statistic), p_value=float(res.pvalue))


def fisher_exact_test(table: ContingencyTable) -> TestResult:
    """Two-sided Fisher exact test of independence for a 2x2 table."""
    res = stats.fisher_exact(table.counts, alternative="two-sided")
    return TestResult(statistic=float(res.statistic), p_value=float(res.pvalue))
