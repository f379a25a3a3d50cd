"""Core components for the PowerCurve framework.

Re-exports the foundational building blocks:

- ``SimulationRunner``, ``build_trial_grid``: Monte Carlo sweep execution.
- ``ResultsProcessor``, ``build_power_result``: power estimation and result
  formatting.
"""

from .results import ResultsProcessor, build_power_result, describe_design
from .simulation import SimulationRunner, build_trial_grid

__all__ = [
    # Simulation
    "SimulationRunner",
    "build_trial_grid",
    # Results
    "ResultsProcessor",
    "build_power_result",
    "describe_design",
]
