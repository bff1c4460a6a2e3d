"""
Execution timing for the elimination and expansion kernels.

Backends wrap their work in a Timer so that results can report where
time was spent, e.g. pivot search vs. elimination.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer for one backend run, with accumulated named sections.

    Usage:
        with Timer() as timer:
            for r in range(n):
                with timer.section('pivot_search'):
                    pivot = find_pivot(A, r)
                with timer.section('eliminate'):
                    eliminate(A, r)

        timer.result()
        # {'total_seconds': 0.05, 'pivot_search': 0.01, 'eliminate': 0.04}

    A section entered several times accumulates its elapsed time under a
    single key. Sections are nested inside the total.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._entered_at: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        if self._entered_at is not None:
            raise RuntimeError("Timer is not reentrant")
        self._entered_at = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        self._total = time.perf_counter() - self._entered_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        if self._entered_at is None:
            raise RuntimeError(f"Timer.section({name!r}) used outside 'with Timer()'")
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Timing breakdown of the finished run.

        Returns:
            Dictionary with 'total_seconds' followed by the section totals

        Raises:
            RuntimeError: If the with-block has not exited yet
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before the timed block finished")
        return {'total_seconds': self._total, **self._sections}
