"""
Hoeffding Bound Evaluation
==========================

Both sides of Hoeffding's inequality for Bernoulli(0.5) samples:

    P[|v - mu| > eps] <= 2e^(-2(eps^2)N)

The left-hand side is estimated by counting over a simulated distribution of
v. The right-hand side depends only on eps and N, the number of flips per coin
(not the number of trials).
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np

from .config import (
    TRUE_MEAN,
    EmptyDistributionError,
    require_epsilon,
    require_epsilons,
    require_positive_int,
)

# Deviations and thresholds are compared at this precision so that k/N values
# tie with eps on both sides of the mean (0.8 - 0.5 != 0.5 - 0.2 in floats).
COMPARE_DECIMALS = 12


def empirical_tail_probability(distribution: Sequence[float], epsilon: float) -> float:
    """
    Left-hand side of the inequality: fraction of samples with |v - 0.5| > eps.

    The comparison is strict, after rounding both sides to COMPARE_DECIMALS so
    that v = 0.2 and v = 0.8 tie with eps = 0.3 alike. An empty distribution raises
    EmptyDistributionError rather than reporting a probability of 0.
    """
    values = np.asarray(distribution, dtype=float)
    if values.size == 0:
        raise EmptyDistributionError("cannot evaluate tail probability of an empty distribution")
    threshold = np.round(require_epsilon(epsilon), COMPARE_DECIMALS)
    deviation = np.round(np.abs(values - TRUE_MEAN), COMPARE_DECIMALS)
    return float(np.count_nonzero(deviation > threshold) / values.size)


def theoretical_bound(sample_size: int, epsilon: float) -> float:
    """
    Right-hand side of the inequality: 2 * exp(-2 * eps^2 * N).

    Not clamped to 1, so eps = 0 gives 2.
    """
    n = require_positive_int("sample_size", sample_size)
    eps = require_epsilon(epsilon)
    return float(2.0 * np.exp(-2.0 * eps ** 2 * n))


@dataclass(frozen=True)
class BoundCurvePair:
    """Empirical and theoretical sides of the inequality over an epsilon series."""

    epsilons: Tuple[float, ...]
    empirical: Tuple[float, ...]
    theoretical: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not (len(self.epsilons) == len(self.empirical) == len(self.theoretical)):
            raise ValueError("epsilon, empirical and theoretical series must be equal length")

    def violations(self) -> List[float]:
        """Epsilons at which the empirical probability exceeds the bound."""
        return [
            eps
            for eps, lhs, rhs in zip(self.epsilons, self.empirical, self.theoretical)
            if lhs > rhs
        ]

    @property
    def holds(self) -> bool:
        return not self.violations()


def bound_curve(
    distribution: Sequence[float],
    epsilons: Sequence[float],
    num_flips: int,
) -> BoundCurvePair:
    """Evaluate both sides of the inequality for each epsilon."""
    eps_series = require_epsilons(epsilons)
    require_positive_int("num_flips", num_flips)

    return BoundCurvePair(
        epsilons=eps_series,
        empirical=tuple(empirical_tail_probability(distribution, e) for e in eps_series),
        theoretical=tuple(theoretical_bound(num_flips, e) for e in eps_series),
    )
