import matplotlib

matplotlib.use("Agg")

import pytest

from hoeffding_sim.coin_simulation import simulate_flips
from hoeffding_sim.config import get_rng


@pytest.fixture(scope="session")
def large_run():
    """100,000 trials of 1000 coins flipped 10 times, fixed seed."""
    return simulate_flips(100_000, 10, rng=get_rng(10111))


@pytest.fixture
def rng():
    return get_rng(1234)
