"""Pytest configuration file with shared curves, filters and a thread check."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

from sigsmooth.curve import Curve
from sigsmooth.savitzky_golay import SavitzkyGolayFilter


@pytest.fixture
def box5():
    """Five-point moving average written as a filter with widths 2-2."""
    return SavitzkyGolayFilter(0, 2, 2, [0.2, 0.2, 0.2, 0.2, 0.2])


@pytest.fixture
def ramp5():
    """Five-point ramp ``y = x + 1`` on ``x = 0..4``."""
    return Curve.from_xy([0.0, 1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn
