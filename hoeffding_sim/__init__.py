"""
Hoeffding Simulation Package
============================

Monte Carlo demonstration of Hoeffding's inequality with simulated fair coins.

Modules:
- config: Shared parameters, seeds and error types
- coin_simulation: Distributions of v for c_1, c_rand and c_min
- hoeffding_bound: Both sides of the inequality over an epsilon series
- plotting: Side-by-side probability plots (matplotlib)
- demonstration: End-to-end run, report table and CLI
"""

from .config import (
    RANDOM_SEED,
    DEFAULT_TRIALS,
    DEFAULT_FLIPS,
    DEFAULT_EPSILONS,
    POPULATION_SIZE,
    ConfigurationError,
    EmptyDistributionError,
    get_rng,
)
from .coin_simulation import CoinDistributions, CoinFlipSimulator, simulate_flips
from .hoeffding_bound import (
    BoundCurvePair,
    bound_curve,
    empirical_tail_probability,
    theoretical_bound,
)
from .demonstration import DemonstrationResult, hoeffding_plot, run_demonstration

__version__ = "1.0.0"
