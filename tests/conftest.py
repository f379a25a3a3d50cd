"""
Shared pytest fixtures for PowerCurve tests.
"""

import contextlib
import io

import numpy as np
import pandas as pd
import pytest

from tests.config import N_BINARY, N_PER_GROUP, P1, SEED


@pytest.fixture
def rng():
    """Fresh generator seeded with the suite seed."""
    return np.random.default_rng(SEED)


@pytest.fixture
def continuous_design():
    from powercurve import ContinuousDesign

    return ContinuousDesign(n_per_group=N_PER_GROUP)


@pytest.fixture
def binary_design():
    from powercurve import BinaryDesign

    return BinaryDesign(n1=N_BINARY, n2=N_BINARY, p1=P1)


@pytest.fixture
def quiet():
    """Suppress stdout (results tables and warnings printed by setters)."""
    with contextlib.redirect_stdout(io.StringIO()):
        yield


@pytest.fixture
def trial_table():
    """Hand-built trial table: two scenario values, four trials each."""
    return pd.DataFrame(
        {
            "d": [0.0] * 4 + [1.0] * 4,
            "repetition": [1, 2, 3, 4] * 2,
            "statistic": [0.1, -0.4, 2.5, 0.3, 2.2, 3.1, -0.2, 2.9],
            "p_value": [0.90, 0.70, 0.03, 0.80, 0.04, 0.01, 0.85, 0.05],
        }
    )
