"""
Hoeffding's Inequality Demonstration
====================================

Runs the coin-flip simulation, evaluates both sides of Hoeffding's inequality
across a series of epsilon values for c_1, c_rand and c_min, hands the curves
to a renderer and reports the in-sample mean of each coin.

As expected, the bound holds for v_1 and v_rand since their coins are picked
without looking at the flips. It does not hold for v_min, whose coin is chosen
deliberately in each trial.
"""

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import numpy as np
from tabulate import tabulate

from .config import (
    RANDOM_SEED,
    DEFAULT_TRIALS,
    DEFAULT_FLIPS,
    DEFAULT_EPSILONS,
    POPULATION_SIZE,
    COIN_FIRST,
    COIN_RANDOM,
    COIN_MIN,
    ConfigurationError,
    SimulationParams,
    get_rng,
    require_epsilons,
)
from .coin_simulation import CoinFlipSimulator
from .hoeffding_bound import BoundCurvePair, bound_curve
from .plotting import MatplotlibRenderer, Renderer


@dataclass
class DemonstrationResult:
    """Results from one demonstration run."""

    params: SimulationParams
    epsilons: Sequence[float]
    curves: Dict[str, BoundCurvePair]
    means: Dict[str, float]


def run_demonstration(
    num_trials: int = DEFAULT_TRIALS,
    num_flips: int = DEFAULT_FLIPS,
    epsilons: Sequence[float] = DEFAULT_EPSILONS,
    population_size: int = POPULATION_SIZE,
    rng: Optional[np.random.Generator] = None,
    renderer: Optional[Renderer] = None,
) -> DemonstrationResult:
    """
    Simulate once, then compare both sides of the inequality for every coin.

    Args:
        num_trials: Number of repetitions of the experiment
        num_flips: Flips per coin; also N in the bound
        epsilons: Thresholds at which to evaluate the inequality
        population_size: Coins flipped per trial
        rng: Generator to draw from (seeded with RANDOM_SEED if omitted)
        renderer: Optional collaborator that receives each coin's curves

    Returns:
        DemonstrationResult with per-coin curves and distribution means
    """
    params = SimulationParams(num_trials, num_flips, population_size).validate()
    eps_series = require_epsilons(epsilons)

    simulator = CoinFlipSimulator(rng=rng or get_rng(), population_size=population_size)
    distributions = simulator.simulate(num_trials, num_flips)

    curves: Dict[str, BoundCurvePair] = {}
    means: Dict[str, float] = {}
    for label, dist in distributions.items():
        curves[label] = bound_curve(dist, eps_series, num_flips)
        means[label] = float(np.mean(dist))

    result = DemonstrationResult(
        params=params,
        epsilons=eps_series,
        curves=curves,
        means=means,
    )
    if renderer is not None:
        render_result(result, renderer)
    return result


def render_result(result: DemonstrationResult, renderer: Renderer) -> None:
    """Hand each coin's curves to the renderer in c_1, c_rand, c_min order."""
    for label, curve in result.curves.items():
        renderer.render(label, curve.epsilons, curve.empirical, curve.theoretical)
    finish = getattr(renderer, "finish", None)
    if callable(finish):
        finish()


def hoeffding_plot(
    num_trials: int = DEFAULT_TRIALS,
    num_flips: int = DEFAULT_FLIPS,
    epsilons: Sequence[float] = DEFAULT_EPSILONS,
    seed: int = RANDOM_SEED,
    renderer: Optional[Renderer] = None,
) -> Dict[str, float]:
    """Seed a fresh generator, run the demonstration and return the mean of v for each coin."""
    result = run_demonstration(
        num_trials=num_trials,
        num_flips=num_flips,
        epsilons=epsilons,
        rng=get_rng(seed),
        renderer=renderer,
    )
    return result.means


def generate_bound_table(result: DemonstrationResult) -> str:
    """
    Tabulate P[|v - mu| > eps] for each coin next to the Hoeffding bound.
    """
    labels = list(result.curves)
    headers = ["eps"] + [f"P {label}" for label in labels] + ["Bound"]

    bound = result.curves[labels[0]].theoretical
    rows = []
    for i, eps in enumerate(result.epsilons):
        rows.append(
            [f"{eps:.2f}"]
            + [f"{result.curves[label].empirical[i]:.5f}" for label in labels]
            + [f"{bound[i]:.5f}"]
        )

    return tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True)


def parse_epsilons(text: str) -> List[float]:
    """Parse a comma-separated epsilon list, e.g. '0,0.1,0.2'."""
    try:
        return [float(e) for e in text.split(",") if e.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid epsilon list {text!r}: {exc}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration, print the comparison table and plot it."""
    parser = argparse.ArgumentParser(
        description="Monte Carlo demonstration of Hoeffding's inequality with fair coins"
    )
    parser.add_argument(
        "--trials", "-n",
        type=int,
        default=DEFAULT_TRIALS,
        help=f"Number of Monte Carlo trials (default: {DEFAULT_TRIALS:,})"
    )
    parser.add_argument(
        "--flips", "-f",
        type=int,
        default=DEFAULT_FLIPS,
        help=f"Flips per coin, N in the bound (default: {DEFAULT_FLIPS})"
    )
    parser.add_argument(
        "--population", "-p",
        type=int,
        default=POPULATION_SIZE,
        help=f"Coins flipped per trial (default: {POPULATION_SIZE:,})"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=RANDOM_SEED,
        help=f"Random seed for reproducibility (default: {RANDOM_SEED})"
    )
    parser.add_argument(
        "--epsilons",
        type=parse_epsilons,
        default=list(DEFAULT_EPSILONS),
        help="Comma-separated epsilon values (default: 0,0.1,...,1)"
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Save the figure to this path instead of showing it"
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Skip plotting; print the table only"
    )

    args = parser.parse_args(argv)

    print(f"Hoeffding's Inequality Simulation")
    print(f"=================================")
    print(f"Trials: {args.trials:,}")
    print(f"Flips per coin: {args.flips}")
    print(f"Coins per trial: {args.population:,}")
    print(f"Seed: {args.seed}")
    print()

    print("Flipping coins...")
    try:
        result = run_demonstration(
            num_trials=args.trials,
            num_flips=args.flips,
            epsilons=args.epsilons,
            population_size=args.population,
            rng=get_rng(args.seed),
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    print()
    print(f"P[|v - mu| > eps] vs 2e^(-2(eps^2)N), N = {args.flips}")
    print("=" * 70)
    print(generate_bound_table(result))
    print()

    print("In-sample means:")
    for label, mean in result.means.items():
        print(f"  v for {label}: {mean:.5f}")
    print()

    # c_1 and c_rand are chosen blind, c_min is not
    print("Verification of Hoeffding's bound:")
    expect_hold = {COIN_FIRST: True, COIN_RANDOM: True, COIN_MIN: False}
    for label, curve in result.curves.items():
        violated = curve.violations()
        status = "✓" if curve.holds == expect_hold[label] else "⚠"
        if violated:
            detail = f"violated at eps = {', '.join(f'{e:.2f}' for e in violated)}"
        else:
            detail = "holds for every eps"
        print(f"  {status} {label}: {detail}")

    if not args.no_plot:
        render_result(result, MatplotlibRenderer(output=args.output))
        if args.output:
            print()
            print(f"Figure saved to {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
