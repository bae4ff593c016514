"""
Wall-clock timing for describe().

describe() groups its statistics into the sections 'central', 'range',
'population' and 'sample' and reports how long each group took next to
the overall 'total_seconds'.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer plus per-section accumulators.

    Usage:
        timer = Timer()
        timer.start()
        for name in names:
            with timer.section(STATISTICS[name]):
                values[name] = getattr(analyzer, name)()
        timer.stop()
        timer.result()
        # {'total_seconds': ..., 'central': ..., 'range': ..., ...}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the block to section `name`.

        Every statistic in a section enters the block separately, so the
        section total is the sum over its statistics. The block is
        counted even when the statistic raises.
        """
        entered = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - entered
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Section timings keyed by name, plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}
