"""
Results processing for PowerCurve.

This module turns a trial table into per-scenario power estimates and
assembles the result dictionary returned by ``PowerAnalysis.find_power``.
"""

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

POWER_COLUMNS = ("n_trials", "n_significant", "power", "mc_se")


class ResultsProcessor:
    """Converts trial tables into power estimates.

    Power for a scenario value is the fraction of its trials whose p-value
    is strictly below ``alpha``. Undefined (NaN) p-values count as not
    significant.
    """

    def __init__(self, alpha: float = 0.05, target_power: float = 80.0):
        """Initialise the results processor.

        Args:
            alpha: Significance threshold.
            target_power: Target power as a percentage (0–100).
        """
        self.alpha = alpha
        self.target_power = target_power

    @staticmethod
    def group_p_values(table: pd.DataFrame, parameter: str) -> Dict[float, List[float]]:
        """Map each scenario value to the p-values of its trials.

        Keys keep the order in which values first appear in *table*.
        """
        grouped: Dict[float, List[float]] = {}
        for value, p_value in zip(table[parameter], table["p_value"]):
            grouped.setdefault(float(value), []).append(float(p_value))
        return grouped

    def calculate_powers(self, table: pd.DataFrame, parameter: str) -> pd.DataFrame:
        """
        Calculate power estimates from a trial table.

        Args:
            table: Trial table produced by ``SimulationRunner.run``.
            parameter: Name of the scenario column.

        Returns:
            DataFrame with one row per scenario value (enumeration order) and
            columns ``[parameter, "n_trials", "n_significant", "power", "mc_se"]``.
        """
        rows = []
        for value, p_values in self.group_p_values(table, parameter).items():
            rows.append((value, *self._fold(p_values)))
        return pd.DataFrame(rows, columns=[parameter, *POWER_COLUMNS])

    def _fold(self, p_values: List[float]):
        """Reduce one scenario's p-values to (n, n_significant, power, mc_se)."""
        n_trials = len(p_values)
        if n_trials == 0:
            raise ValueError("Cannot estimate power for a scenario with no trials")

        n_significant = int(np.sum(np.asarray(p_values) < self.alpha))
        power = n_significant / n_trials
        mc_se = float(np.sqrt(power * (1 - power) / n_trials))
        return n_trials, n_significant, power, mc_se

    def first_achieved(self, powers: pd.DataFrame, parameter: str) -> Optional[float]:
        """Return the first scenario value whose power reaches the target.

        Values are scanned in table order; ``None`` if no value qualifies.
        """
        target = self.target_power / 100
        reached = powers.loc[powers["power"] >= target, parameter]
        if reached.empty:
            return None
        return float(reached.iloc[0])


def describe_design(design) -> Dict[str, Any]:
    """Return the design's own description, filled in with generic defaults.

    ``describe()`` is optional on a design: a design that only implements
    the ``Design`` protocol is reported under its class name with test
    ``"custom"``.
    """
    describe = getattr(design, "describe", None)
    info = dict(describe()) if callable(describe) else {}
    info.setdefault("design", type(design).__name__)
    info.setdefault("test", "custom")
    return info


def build_power_result(
    design,
    values: List[float],
    alpha: float,
    seed: Optional[int],
    n_repetitions: int,
    target_power: float,
    powers: pd.DataFrame,
    trials: pd.DataFrame,
    first_achieved: Optional[float],
) -> Dict[str, Any]:
    """
    Build complete power analysis result dictionary.

    Args:
        design: Design that was simulated
        values: Scenario values tested, in enumeration order
        alpha: Significance level
        seed: Seed the sweep was started from
        n_repetitions: Repetitions per scenario value
        target_power: Target power level (percent)
        powers: Per-scenario power table
        trials: Raw trial table
        first_achieved: First value reaching the target power, or None

    Returns:
        Complete result dictionary
    """
    return {
        "model": {
            **describe_design(design),
            "parameter": design.parameter_name,
            "values": list(values),
            "alpha": alpha,
            "seed": seed,
            "n_repetitions": n_repetitions,
            "n_trials": len(trials),
            "target_power": target_power,
        },
        "results": {
            "powers": powers,
            "trials": trials,
            "first_achieved": first_achieved,
        },
    }
