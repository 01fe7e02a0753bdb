"""
Hoeffding Simulation Configuration
==================================

Central configuration for the coin-flip demonstration of Hoeffding's inequality.

    P[|v - m| > eps] <= 2e^(-2(eps^2)N)

A larger sample size, N, tightens the bound whereas a stricter restriction,
eps, loosens it. Here N is the number of flips per coin and m = 0.5.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Sequence, Tuple
import numpy as np


# =============================================================================
# REPRODUCIBILITY
# =============================================================================

RANDOM_SEED = 10111  # Seed used for the published plots
DEFAULT_TRIALS = 100_000  # Monte Carlo repetitions of the experiment


# =============================================================================
# EXPERIMENT PARAMETERS
# =============================================================================

DEFAULT_FLIPS = 10          # Flips per coin (N in the bound)
POPULATION_SIZE = 1000      # Coins flipped per trial
TRUE_MEAN = 0.5             # Fair coin, mu

# eps = 0.0, 0.1, ..., 1.0
DEFAULT_EPSILONS: Tuple[float, ...] = tuple(round(0.1 * i, 1) for i in range(11))

# Coins followed across trials
COIN_FIRST = "c_1"
COIN_RANDOM = "c_rand"
COIN_MIN = "c_min"
COIN_LABELS: Tuple[str, ...] = (COIN_FIRST, COIN_RANDOM, COIN_MIN)


# =============================================================================
# ERRORS
# =============================================================================

class ConfigurationError(ValueError):
    """Invalid simulation parameters; raised before any sampling happens."""


class EmptyDistributionError(ArithmeticError):
    """Tail probability requested for a distribution with no samples."""


def require_positive_int(name: str, value) -> int:
    """Return value as int, or raise ConfigurationError if it is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")
    return int(value)


def require_epsilon(epsilon: float) -> float:
    """Return epsilon as float, or raise ConfigurationError if it is negative or NaN."""
    value = float(epsilon)
    if value < 0 or np.isnan(value):
        raise ConfigurationError(f"epsilon must be >= 0, got {epsilon}")
    return value


def require_epsilons(epsilons: Sequence[float]) -> Tuple[float, ...]:
    """Validate an epsilon series: non-empty and non-negative."""
    values = tuple(float(e) for e in epsilons)
    if not values:
        raise ConfigurationError("epsilon series must be non-empty")
    negative = [e for e in values if e < 0 or np.isnan(e)]
    if negative:
        raise ConfigurationError(f"epsilon values must be >= 0, got {negative}")
    return values


# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class SimulationParams:
    """Parameters for one run of the coin-flip experiment."""

    num_trials: int = DEFAULT_TRIALS
    num_flips: int = DEFAULT_FLIPS
    population_size: int = POPULATION_SIZE

    def validate(self) -> "SimulationParams":
        """Raise ConfigurationError unless every count is a positive integer."""
        require_positive_int("num_trials", self.num_trials)
        require_positive_int("num_flips", self.num_flips)
        require_positive_int("population_size", self.population_size)
        return self


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_rng(seed: int = RANDOM_SEED) -> np.random.Generator:
    """Get a reproducible random number generator."""
    return np.random.default_rng(seed)


if __name__ == "__main__":
    params = SimulationParams().validate()
    print("✓ Default parameters validated successfully")
    print(f"  - Trials: {params.num_trials:,}")
    print(f"  - Flips per coin: {params.num_flips}")
    print(f"  - Coins per trial: {params.population_size:,}")
    print(f"  - Epsilons: {', '.join(f'{e:.1f}' for e in DEFAULT_EPSILONS)}")
