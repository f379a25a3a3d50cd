"""Unit tests for powercurve.core.results: ResultsProcessor and build_power_result."""

import math

import numpy as np
import pandas as pd
import pytest

from powercurve.core.results import ResultsProcessor, build_power_result, describe_design
from powercurve.designs import BinaryDesign, ContinuousDesign


class TestGroupPValues:
    def test_explicit_mapping(self, trial_table):
        grouped = ResultsProcessor.group_p_values(trial_table, "d")
        assert list(grouped) == [0.0, 1.0]
        assert grouped[0.0] == [0.90, 0.70, 0.03, 0.80]
        assert grouped[1.0] == [0.04, 0.01, 0.85, 0.05]

    def test_keeps_enumeration_order(self):
        table = pd.DataFrame({"p2": [0.9, 0.9, 0.1, 0.1], "p_value": [0.5, 0.5, 0.5, 0.5]})
        assert list(ResultsProcessor.group_p_values(table, "p2")) == [0.9, 0.1]


class TestCalculatePowers:
    def test_fraction_below_alpha(self, trial_table):
        powers = ResultsProcessor(alpha=0.05).calculate_powers(trial_table, "d")

        assert list(powers.columns) == ["d", "n_trials", "n_significant", "power", "mc_se"]
        assert powers["n_trials"].tolist() == [4, 4]
        assert powers["n_significant"].tolist() == [1, 2]
        assert powers["power"].tolist() == pytest.approx([0.25, 0.5])

    def test_threshold_is_strict(self):
        table = pd.DataFrame({"d": [0.0, 0.0], "p_value": [0.05, 0.0499]})
        powers = ResultsProcessor(alpha=0.05).calculate_powers(table, "d")
        assert powers["n_significant"].iloc[0] == 1

    def test_alpha_changes_power(self, trial_table):
        powers = ResultsProcessor(alpha=0.1).calculate_powers(trial_table, "d")
        assert powers["power"].tolist() == pytest.approx([0.25, 0.75])

    def test_mc_standard_error(self, trial_table):
        powers = ResultsProcessor().calculate_powers(trial_table, "d")
        assert powers["mc_se"].iloc[1] == pytest.approx(math.sqrt(0.5 * 0.5 / 4))

    def test_all_and_none_significant(self):
        table = pd.DataFrame({"d": [0.0] * 3 + [2.0] * 3, "p_value": [0.5] * 3 + [0.001] * 3})
        powers = ResultsProcessor().calculate_powers(table, "d")
        assert powers["power"].tolist() == [0.0, 1.0]
        assert powers["mc_se"].tolist() == [0.0, 0.0]

    def test_nan_counts_as_not_significant(self):
        table = pd.DataFrame({"d": [0.0, 0.0], "p_value": [np.nan, 0.01]})
        powers = ResultsProcessor().calculate_powers(table, "d")
        assert powers["power"].iloc[0] == pytest.approx(0.5)

    def test_empty_scenario_rejected(self):
        with pytest.raises(ValueError, match="no trials"):
            ResultsProcessor()._fold([])


class TestFirstAchieved:
    def _powers(self, values):
        return pd.DataFrame({"d": [0.0, 0.5, 1.0, 1.5], "power": values})

    def test_first_value_reaching_target(self):
        proc = ResultsProcessor(target_power=80.0)
        assert proc.first_achieved(self._powers([0.05, 0.4, 0.8, 0.95]), "d") == 1.0

    def test_not_reached(self):
        proc = ResultsProcessor(target_power=80.0)
        assert proc.first_achieved(self._powers([0.05, 0.2, 0.5, 0.79]), "d") is None


class TestBuildPowerResult:
    def test_structure(self, trial_table):
        proc = ResultsProcessor()
        powers = proc.calculate_powers(trial_table, "d")
        result = build_power_result(
            design=ContinuousDesign(),
            values=[0.0, 1.0],
            alpha=0.05,
            seed=2137,
            n_repetitions=4,
            target_power=80.0,
            powers=powers,
            trials=trial_table,
            first_achieved=None,
        )

        model = result["model"]
        assert model["parameter"] == "d"
        assert model["design"] == "continuous"
        assert model["n_trials"] == 8
        assert model["seed"] == 2137
        assert result["results"]["powers"] is powers
        assert result["results"]["trials"] is trial_table
        assert result["results"]["first_achieved"] is None


class TestDescribeDesign:
    def test_uses_design_description(self):
        info = describe_design(BinaryDesign(n1=30, n2=20, p1=0.4))
        assert info == {"design": "binary", "test": "fisher_exact", "n1": 30, "n2": 20, "p1": 0.4}

    def test_defaults_without_describe(self):
        class Bare:
            parameter_name = "x"

        assert describe_design(Bare()) == {"design": "Bare", "test": "custom"}

    def test_fills_missing_keys(self):
        class Partial:
            def describe(self):
                return {"test": "sign_test"}

        assert describe_design(Partial()) == {"design": "Partial", "test": "sign_test"}
