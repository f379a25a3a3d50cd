"""
Trial progress for PowerCurve sweeps.

A sweep runs ``n_repetitions`` trials for each of ``n_values`` scenario
values, in one pass. ``find_power`` counts finished trials with a
``ProgressReporter`` and hands ``(trials_done, trials_total)`` to a
callback: ``PrintReporter`` when results are printed, otherwise a
``TqdmReporter`` or any callable the caller supplies.
"""

import sys
from typing import Callable, Optional, TextIO


class SimulationCancelled(Exception):
    """The sweep stopped between two trials because ``cancel_check()`` was true.

    Trials simulated before the stop are discarded; no power table is built.
    """


class ProgressReporter:
    """Trial counter for one sweep over a scenario grid.

    The callback fires at the start of the sweep, every *update_every*
    trials, whenever a scenario value has finished all its repetitions,
    and once more at the end.

    Args:
        n_repetitions: Trials simulated per scenario value.
        n_values: Number of scenario values in the grid.
        callback: Called as ``callback(trials_done, trials_total)``.
        update_every: Trials between intermediate updates. Defaults to a
            tenth of ``n_repetitions``.
    """

    def __init__(
        self,
        n_repetitions: int,
        n_values: int,
        callback: Callable[[int, int], None],
        update_every: Optional[int] = None,
    ):
        self.n_repetitions = n_repetitions
        self.total = n_repetitions * n_values
        self.update_every = update_every if update_every is not None else max(1, n_repetitions // 10)
        self._callback = callback
        self._done = 0
        self._reported = None

    @property
    def current(self) -> int:
        return self._done

    @property
    def values_done(self) -> int:
        """Scenario values whose repetitions have all been simulated."""
        return self._done // self.n_repetitions if self.n_repetitions else 0

    def _report(self):
        self._reported = self._done
        self._callback(self._done, self.total)

    def start(self):
        self._done = 0
        self._report()

    def advance(self, n: int = 1):
        self._done += n
        if (
            self._done >= self.total
            or self._done % self.update_every == 0
            or self._done % self.n_repetitions == 0
        ):
            self._report()

    def finish(self):
        """Report the full trial count unless it was the last thing reported."""
        self._done = self.total
        if self._reported != self.total:
            self._report()


class PrintReporter:
    """Writes ``Trials: 4970/10500 (47.3%)`` on one line of *stream*.

    Args:
        stream: Text stream to write to (default ``sys.stderr``, so the
            printed power table on stdout stays clean).
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def __call__(self, current: int, total: int):
        if total <= 0:
            return
        out = self.stream if self.stream is not None else sys.stderr
        out.write(f"\rTrials: {current}/{total} ({100.0 * current / total:.1f}%)")
        if current >= total:
            out.write("\n")
        out.flush()


class TqdmReporter:
    """Shows sweep progress as a tqdm bar counted in trials.

    tqdm is imported on first update, so it is only needed when this
    reporter is used (``pip install tqdm``). Keyword arguments go to
    ``tqdm.tqdm``; the bar is labelled ``"Power sweep"`` unless *desc*
    is given.

    Usage::

        analysis.find_power(values, progress_callback=TqdmReporter(leave=False))
    """

    def __init__(self, **tqdm_kwargs):
        tqdm_kwargs.setdefault("desc", "Power sweep")
        self._tqdm_kwargs = tqdm_kwargs
        self._bar = None

    def __call__(self, current: int, total: int):
        if self._bar is None:
            from tqdm import tqdm

            self._bar = tqdm(total=total, unit="trial", **self._tqdm_kwargs)

        self._bar.update(max(0, current - self._bar.n))
        if current >= total:
            self._bar.close()
            self._bar = None
