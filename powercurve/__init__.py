"""PowerCurve - Monte Carlo power curves for two-group designs.

Simulates a continuous two-sample design (Welch t-test) or a binary 2x2
design (Fisher exact test) across a grid of scenario values and estimates
the power of the test at each value.

Example:
    >>> from powercurve import PowerAnalysis
    >>>
    >>> analysis = PowerAnalysis.continuous(n_per_group=10)
    >>> result = analysis.find_power([0, 0.5, 1.0, 2.0], return_results=True)
    >>> analysis.plot(result, output_path="power_d.png")
    >>>
    >>> PowerAnalysis.binary(p1=0.3).find_power([0.3, 0.6, 0.95])
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .designs import BinaryDesign, ContinuousDesign, Design
from .model import PowerAnalysis
from .progress import PrintReporter, ProgressReporter, SimulationCancelled, TqdmReporter

try:
    __version__ = _get_version("PowerCurve")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "PowerAnalysis",
    "Design",
    "ContinuousDesign",
    "BinaryDesign",
    "SimulationCancelled",
    "ProgressReporter",
    "PrintReporter",
    "TqdmReporter",
]
