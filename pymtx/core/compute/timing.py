"""
Wall-clock timing for report computations.

invert() times its determinant, adjugate and scaling phases separately
and stores the breakdown on the returned solution.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('determinant'):
            d = determinant(a)
        with timer.section('adjugate'):
            adjugate(a, adj)
        timer.stop()
        timer.result()
        # {'total_seconds': 2.1e-4, 'determinant': 4.0e-5, 'adjugate': 1.6e-4}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the with-block to section `name`.

        Re-entering a section adds to its total. Time is recorded even
        when the block raises.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Section timings plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
