"""
PowerCurve - Monte Carlo power curves.

This module provides the ``PowerAnalysis`` class, which runs a simulation
sweep for a design over a grid of scenario values and estimates power at
each value.
"""

from typing import Any, Dict, Optional, Sequence

from .core import ResultsProcessor, SimulationRunner, build_power_result
from .designs import BinaryDesign, ContinuousDesign, Design
from .utils.formatters import _format_results
from .utils.validators import (
    _validate_alpha,
    _validate_plot_size,
    _validate_power,
    _validate_repetitions,
    _validate_seed,
)
from .utils.visualization import _create_power_plot


class PowerAnalysis:
    """Monte Carlo power analysis over a grid of scenario values.

    For each scenario value of the design parameter (effect size ``d`` or
    event probability ``p2``), ``n_repetitions`` datasets are simulated and
    tested; power is the fraction of tests with ``p < alpha``.

    Every ``find_power`` call is an independent sweep: it starts a fresh
    random generator from ``seed``, so repeating a call with the same
    settings reproduces the same table exactly.

    Most ``set_*`` methods return ``self`` for method chaining.

    Attributes:
        design: The simulated design.
        seed: Random seed for reproducibility (default: 2137).
        alpha: Significance threshold (default: 0.05).
        n_repetitions: Repetitions per scenario value (default: 500).
        power: Target power level in percent (default: 80.0).

    Example:
        >>> analysis = PowerAnalysis.continuous(n_per_group=10)
        >>> analysis.set_seed(42).set_repetitions(500)
        >>> result = analysis.find_power([0, 0.5, 1, 1.5, 2], return_results=True)
        >>> analysis.plot(result, output_path="power_d.png")
    """

    def __init__(self, design: Design):
        """Initialize the analysis for *design*.

        Args:
            design: A ``ContinuousDesign``, ``BinaryDesign``, or any object
                implementing the ``Design`` protocol.

        Raises:
            TypeError: If *design* does not implement the ``Design`` protocol.
        """
        if not isinstance(design, Design):
            raise TypeError(f"design must implement the Design protocol, got {type(design).__name__}")

        self.design = design
        self.seed: Optional[int] = 2137
        self.alpha = 0.05
        self.n_repetitions = 500
        self.power = 80.0

    @classmethod
    def continuous(cls, n_per_group: int = 10):
        """Analysis of the two-sample continuous design (Welch t-test)."""
        return cls(ContinuousDesign(n_per_group=n_per_group))

    @classmethod
    def binary(cls, n1: int = 25, n2: int = 25, p1: float = 0.3):
        """Analysis of the two-group binary design (Fisher exact test)."""
        return cls(BinaryDesign(n1=n1, n2=n2, p1=p1))

    @property
    def parameter(self) -> str:
        """Name of the scenario parameter varied across the grid."""
        return self.design.parameter_name

    def set_seed(self, seed: Optional[int] = None):
        """Set random seed for reproducibility.

        Args:
            seed: Non-negative integer. Pass ``None`` to seed each sweep
                from fresh OS entropy.

        Returns:
            self: For method chaining.

        Raises:
            ValueError: If *seed* is not an integer or ``None``, or is negative.
        """
        _validate_seed(seed).raise_if_invalid()
        self.seed = None if seed is None else int(seed)
        return self

    def set_alpha(self, alpha: float):
        """Set the significance threshold.

        Args:
            alpha: Type-I error rate (0–0.25]. Default is 0.05.

        Returns:
            self: For method chaining.

        Raises:
            ValueError: If *alpha* is outside the valid range.
        """
        _validate_alpha(alpha).raise_if_invalid()
        self.alpha = float(alpha)
        return self

    def set_repetitions(self, n_repetitions: int):
        """Set the number of simulated trials per scenario value.

        More repetitions shrink the Monte Carlo error of each power estimate
        (roughly ``sqrt(power * (1 - power) / n_repetitions)``).

        Args:
            n_repetitions: Positive integer. Default is 500.

        Returns:
            self: For method chaining.

        Raises:
            ValueError: If *n_repetitions* is not a positive integer.
        """
        n_reps, result = _validate_repetitions(n_repetitions)
        for warning in result.warnings:
            print(f"Warning: {warning}")
        result.raise_if_invalid()
        self.n_repetitions = n_reps
        return self

    def set_power(self, power: float):
        """Set the target power level drawn on plots and reported in results.

        Args:
            power: Target power as a percentage (0–100). Default is 80.

        Returns:
            self: For method chaining.

        Raises:
            ValueError: If *power* is outside the valid range.
        """
        _validate_power(power).raise_if_invalid()
        self.power = float(power)
        return self

    def find_power(
        self,
        values: Sequence[float],
        print_results: bool = True,
        return_results: bool = False,
        progress_callback=None,
        cancel_check=None,
    ):
        """
        Estimate power at every scenario value.

        Args:
            values: Scenario parameter values (``d`` or ``p2``), in the order
                they are simulated.
            print_results: Whether to print the power table
            return_results: Return results dict
            progress_callback: Progress reporting control:
                - ``None`` (default): auto-use ``PrintReporter`` when
                  *print_results* is ``True``.
                - ``False``: explicitly disable progress.
                - callable ``(current, total)``: custom callback.
            cancel_check: Optional callable returning ``True`` to abort.

        Returns:
            dict or None: If *return_results* is ``True``, returns a
            results dictionary with keys ``"model"`` (settings) and
            ``"results"`` (``"powers"`` and ``"trials"`` DataFrames and
            ``"first_achieved"``). Returns ``None`` otherwise.

        Raises:
            ValueError: If the grid is invalid for the design.
            SimulationCancelled: If *cancel_check* requests cancellation.
        """
        grid = self.design.validate_values(values)

        from .progress import PrintReporter, ProgressReporter

        if progress_callback is None:
            effective_cb = PrintReporter() if print_results else None
        elif progress_callback is False:
            effective_cb = None
        else:
            effective_cb = progress_callback

        reporter = None
        if effective_cb is not None:
            reporter = ProgressReporter(self.n_repetitions, len(grid), effective_cb)
            reporter.start()

        result = self._run_find_power(grid, progress=reporter, cancel_check=cancel_check)

        if reporter is not None:
            reporter.finish()

        if print_results:
            print(f"\n{'=' * 60}")
            print("MONTE CARLO POWER ANALYSIS RESULTS")
            print(f"{'=' * 60}")
            print(_format_results(result))

        return result if return_results else None

    def _run_find_power(self, grid, progress=None, cancel_check=None) -> Dict[str, Any]:
        """Run one seeded sweep over *grid* and return a power result dict."""
        runner = SimulationRunner(n_repetitions=self.n_repetitions, seed=self.seed)
        trials = runner.run(self.design, grid, progress=progress, cancel_check=cancel_check)

        processor = ResultsProcessor(alpha=self.alpha, target_power=self.power)
        powers = processor.calculate_powers(trials, self.parameter)

        return build_power_result(
            design=self.design,
            values=grid,
            alpha=self.alpha,
            seed=self.seed,
            n_repetitions=self.n_repetitions,
            target_power=self.power,
            powers=powers,
            trials=trials,
            first_achieved=processor.first_achieved(powers, self.parameter),
        )

    def plot(
        self,
        result: Dict[str, Any],
        output_path: Optional[str] = None,
        width: float = 7.0,
        height: float = 5.0,
        dpi: int = 150,
        title: Optional[str] = None,
    ):
        """Plot the power curve of a ``find_power`` result.

        Args:
            result: Dictionary returned by ``find_power(..., return_results=True)``.
            output_path: Image file to write (format inferred from the
                extension). When ``None`` the figure is shown.
            width: Figure width in inches.
            height: Figure height in inches.
            dpi: Image resolution in dots per inch.
            title: Plot title (defaults to a description of the design).

        Raises:
            ValueError: If the figure size or resolution is not positive.
        """
        _validate_plot_size(width, height, dpi).raise_if_invalid()
        powers = result["results"]["powers"]
        model = result["model"]
        if title is None:
            title = f"Power curve: {model['test'].replace('_', ' ')} (alpha = {model['alpha']})"

        _create_power_plot(
            values=powers[self.parameter].tolist(),
            powers=powers["power"].tolist(),
            parameter_label=getattr(self.design, "label", self.parameter),
            target_power=model["target_power"] / 100,
            title=title,
            output_path=output_path,
            width=width,
            height=height,
            dpi=dpi,
        )

    def __repr__(self):
        return f"PowerAnalysis(design={self.design!r})"
