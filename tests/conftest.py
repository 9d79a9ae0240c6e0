"""Shared fixtures for the demand paging tests."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from demandpaging.config import Algorithm  # noqa: E402
from demandpaging.pager import Pager  # noqa: E402
from demandpaging.randsource import RandomSource  # noqa: E402


@pytest.fixture
def make_pager():
    """Build a pager over an in-memory random sequence."""

    def _make(machine_size: int, page_size: int, algorithm: Algorithm = Algorithm.LRU,
              values=(), debug: bool = False) -> Pager:
        return Pager(machine_size, page_size, algorithm, RandomSource(values), debug=debug)

    return _make


@pytest.fixture
def lcg_values():
    """A long reproducible sequence of values in [0, 2**31 - 1]."""
    values = []
    state = 12345
    for _ in range(5000):
        state = (1103515245 * state + 12345) % 2**31
        values.append(state)
    return values
