"""
Hoeffding Probability Plots
===========================

Renders the left-hand side of Hoeffding's inequality against the right-hand
side for each followed coin, one panel per coin laid out side by side.
"""

from typing import Optional, Protocol, Sequence
import matplotlib.pyplot as plt

from .config import COIN_LABELS


FIGURE_TITLE = "Probability plots for c_1, c_rand, and c_min, respectively"
EMPIRICAL_LABEL = r"$P[|\nu - \mu| > \epsilon]$"
BOUND_LABEL = r"$2e^{-2\epsilon^2 N}$"


class Renderer(Protocol):
    """Receives one pair of curves per coin."""

    def render(
        self,
        label: str,
        epsilons: Sequence[float],
        empirical: Sequence[float],
        theoretical: Sequence[float],
    ) -> None:
        ...


class MatplotlibRenderer:
    """
    Draws each coin's curves into its own subplot of a single figure.

    Panels are filled in the order render() is called. finish() saves the
    figure when an output path is set and shows it otherwise.
    """

    def __init__(
        self,
        output: Optional[str] = None,
        labels: Sequence[str] = COIN_LABELS,
        show: bool = True,
    ):
        self.output = output
        self.show = show
        self.fig, axes = plt.subplots(1, len(labels), figsize=(15, 5))
        self.axes = list(axes) if len(labels) > 1 else [axes]
        self._next_panel = 0

    def render(
        self,
        label: str,
        epsilons: Sequence[float],
        empirical: Sequence[float],
        theoretical: Sequence[float],
    ) -> None:
        if self._next_panel >= len(self.axes):
            raise RuntimeError(f"no panel left for {label!r}")

        ax = self.axes[self._next_panel]
        self._next_panel += 1

        ax.plot(epsilons, empirical, color="black", label=EMPIRICAL_LABEL)
        ax.plot(epsilons, theoretical, color="red", label=BOUND_LABEL)
        ax.set_xlabel(r"$\epsilon$")
        ax.set_ylabel("P")
        ax.set_title(label)
        ax.legend(loc="upper right")

    def finish(self) -> None:
        self.fig.suptitle(FIGURE_TITLE)
        self.fig.tight_layout(rect=[0, 0.02, 1, 0.92])

        if self.output:
            self.fig.savefig(self.output)
            plt.close(self.fig)
        elif self.show:
            plt.show()
        else:
            plt.close(self.fig)
