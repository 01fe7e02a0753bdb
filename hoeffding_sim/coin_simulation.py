"""
Coin Flip Simulation
====================

Monte Carlo simulation of flipping a population of virtual fair coins.

Each trial flips ``population_size`` coins ``num_flips`` times and follows
three of them:
1. The first coin flipped (c_1)
2. A coin chosen uniformly at random (c_rand)
3. The coin with the minimum frequency of heads (c_min)

Repeating the trial builds the sampling distribution of the fraction of heads,
v, for each of the three coins. c_1 and c_rand are fixed before the flips, so
Hoeffding's bound applies to them. c_min is chosen after looking at the data,
which is why its distribution escapes the bound.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
import numpy as np

from .config import (
    POPULATION_SIZE,
    COIN_FIRST,
    COIN_RANDOM,
    COIN_MIN,
    SimulationParams,
    get_rng,
)


@dataclass(frozen=True)
class CoinDistributions:
    """Distributions of the fraction of heads for the three followed coins."""

    v1: np.ndarray
    vrand: np.ndarray
    vmin: np.ndarray
    num_flips: int
    population_size: int = POPULATION_SIZE

    def __post_init__(self) -> None:
        if not (len(self.v1) == len(self.vrand) == len(self.vmin)):
            raise ValueError(
                f"distribution length mismatch: "
                f"{len(self.v1)}, {len(self.vrand)}, {len(self.vmin)}"
            )

    @property
    def num_trials(self) -> int:
        return len(self.v1)

    def items(self) -> Iterator[Tuple[str, np.ndarray]]:
        """Yield (coin label, distribution) in c_1, c_rand, c_min order."""
        yield COIN_FIRST, self.v1
        yield COIN_RANDOM, self.vrand
        yield COIN_MIN, self.vmin

    def __getitem__(self, label: str) -> np.ndarray:
        for name, dist in self.items():
            if name == label:
                return dist
        raise KeyError(label)


class CoinFlipSimulator:
    """
    Simulator for repeated coin-population trials.

    Draw order per trial is fixed: the population's heads counts first, then
    the index of the random coin. Changing it changes the consumed random
    stream and therefore every downstream result for a given seed.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        population_size: int = POPULATION_SIZE,
    ):
        self.rng = rng or get_rng()
        self.population_size = population_size

    def _flip_population(self, num_flips: int) -> np.ndarray:
        """
        Flip every coin in the population num_flips times.

        Distribution: Binomial(num_flips, 0.5) per coin, exact integer counts
        """
        return self.rng.binomial(num_flips, 0.5, size=self.population_size)

    def simulate(self, num_trials: int, num_flips: int) -> CoinDistributions:
        """
        Run the coin-flip experiment num_trials times.

        Args:
            num_trials: Number of repetitions of the experiment
            num_flips: Number of flips per coin per trial

        Returns:
            CoinDistributions with one fraction of heads per trial for each coin
        """
        SimulationParams(
            num_trials=num_trials,
            num_flips=num_flips,
            population_size=self.population_size,
        ).validate()

        v1 = np.empty(num_trials)
        vrand = np.empty(num_trials)
        vmin = np.empty(num_trials)

        for i in range(num_trials):
            heads = self._flip_population(num_flips)
            pick = self.rng.integers(self.population_size)

            v1[i] = heads[0] / num_flips
            vrand[i] = heads[pick] / num_flips
            vmin[i] = heads.min() / num_flips

        return CoinDistributions(
            v1=v1,
            vrand=vrand,
            vmin=vmin,
            num_flips=num_flips,
            population_size=self.population_size,
        )


def simulate_flips(
    num_trials: int,
    num_flips: int,
    population_size: int = POPULATION_SIZE,
    rng: Optional[np.random.Generator] = None,
) -> CoinDistributions:
    """Convenience wrapper: build a simulator and run it once."""
    return CoinFlipSimulator(rng=rng, population_size=population_size).simulate(
        num_trials, num_flips
    )
