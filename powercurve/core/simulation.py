"""
Simulation execution for PowerCurve.

This module contains the Monte Carlo sweep: for every trial of the design
grid it generates a dataset, tests it, and records the result.
"""

import math
import warnings
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

TRIAL_COLUMNS = ("repetition", "statistic", "p_value")


def build_trial_grid(values: Sequence[float], n_repetitions: int) -> List[Tuple[float, int]]:
    """Enumerate the trials of a design grid.

    Scenario values vary slowest, in the order given; repetitions run from
    1 to *n_repetitions* within each value. Reproducibility of a sweep
    depends on this order staying fixed.

    Args:
        values: Scenario parameter values.
        n_repetitions: Repetitions per value.

    Returns:
        List of ``(value, repetition)`` pairs.
    """
    return [(value, rep) for value in values for rep in range(1, n_repetitions + 1)]


class SimulationRunner:
    """Executes a Monte Carlo sweep over a design grid.

    One ``numpy.random.Generator`` is created from *seed* when ``run`` starts
    and is advanced by every trial in enumeration order. It is never reseeded
    between trials, so a whole sweep is reproducible from its seed while a
    single trial can only be reproduced by replaying all trials before it.
    """

    def __init__(self, n_repetitions: int, seed: Optional[int] = None):
        """Initialise the simulation runner.

        Args:
            n_repetitions: Repetitions per scenario value.
            seed: Seed for the sweep's random generator. ``None`` draws
                fresh entropy from the OS.
        """
        self.n_repetitions = n_repetitions
        self.seed = seed

    def run(
        self,
        design,
        values: Sequence[float],
        progress=None,
        cancel_check: Optional[Callable[[], bool]] = None,
    ) -> pd.DataFrame:
        """Run the full sweep and return the trial table.

        Args:
            design: Object implementing the ``Design`` protocol.
            values: Scenario parameter values (already validated).
            progress: Optional ``ProgressReporter`` (advanced by 1 per trial).
            cancel_check: Optional callable returning ``True`` to abort.

        Returns:
            DataFrame with one row per trial and columns
            ``[design.parameter_name, "repetition", "statistic", "p_value"]``.

        Raises:
            SimulationCancelled: If *cancel_check* requests cancellation.
        """
        rng = np.random.default_rng(self.seed)
        trials = build_trial_grid(values, self.n_repetitions)

        rows = []
        n_nan = 0
        for value, rep in trials:
            if cancel_check is not None and cancel_check():
                from ..progress import SimulationCancelled

                raise SimulationCancelled("Simulation cancelled by user")

            result = self._single_trial(design, rng, value)
            if math.isnan(result.p_value):
                n_nan += 1
            rows.append((value, rep, result.statistic, result.p_value))

            if progress is not None:
                progress.advance(1)

        if n_nan:
            warnings.warn(
                f"{n_nan}/{len(trials)} trials produced an undefined p-value; they count as not significant.",
                UserWarning,
                stacklevel=2,
            )

        table = pd.DataFrame(rows, columns=[design.parameter_name, *TRIAL_COLUMNS])
        table["repetition"] = table["repetition"].astype(np.int64)
        return table

    @staticmethod
    def _single_trial(design, rng: np.random.Generator, value: float):
        """Generate one dataset for *value* and test it."""
        dataset = design.generate(rng, value)
        return design.test(dataset)
