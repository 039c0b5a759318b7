# simulations/charts.py

from __future__ import annotations

import math
from typing import List

import matplotlib.pyplot as plt

from dice_outcomes.population import EXPECTED_VALUE, POPULATION, ROLL_VARIANCE, TRUE_PROBABILITY

from .common import SpreadResult, TrialResult


def plot_counts(ax, r: TrialResult) -> None:
    """
    One bar per face, including faces that were never rolled.
    """
    counts = [r.table.counts[v] for v in POPULATION]
    ax.bar(POPULATION, counts, color="C0")
    ax.set_xticks(POPULATION)
    ax.set_title(f"Counts (N={r.sample_count})")
    ax.set_xlabel("Face")
    ax.set_ylabel("Count")


def plot_probabilities(ax, r: TrialResult) -> None:
    probs = [r.table.probabilities[v] for v in POPULATION]
    ax.bar(POPULATION, probs, color="C1")
    ax.axhline(TRUE_PROBABILITY, color="black", linestyle="--", linewidth=1, label="1/6")
    ax.set_xticks(POPULATION)
    ax.set_ylim(0, max(max(probs), TRUE_PROBABILITY) * 1.15)
    ax.set_title(f"Probabilities (N={r.sample_count})")
    ax.set_xlabel("Face")
    ax.set_ylabel("Probability")


def plot_convergence(ax, results: List[TrialResult]) -> None:
    """
    Sample mean against sample size, with the expected value for reference.
    """
    xs = [r.sample_count for r in results]
    ys = [r.sample_mean for r in results]
    ax.scatter(xs, ys, color="C2", zorder=3)
    ax.axhline(EXPECTED_VALUE, color="black", linestyle="--", linewidth=1,
               label=f"Expected value ({EXPECTED_VALUE})")
    ax.set_xscale("log")
    ax.set_ylim(1, 6)
    ax.set_title("Sample mean vs sample size")
    ax.set_xlabel("Sample size (N)")
    ax.set_ylabel("Sample mean")
    ax.legend(loc="upper right", fontsize=8)


def plot_spread(ax, spreads: List[SpreadResult]) -> None:
    """
    Observed std of sample means across seeds against sqrt(35/12) / sqrt(N).
    """
    xs = [s.sample_count for s in spreads]
    ax.plot(xs, [s.stats.std for s in spreads], marker="o", color="C3", label="observed")

    lo, hi = min(xs), max(xs)
    grid = [lo * (hi / lo) ** (i / 49) for i in range(50)] if hi > lo else [lo]
    ax.plot(grid, [math.sqrt(ROLL_VARIANCE / n) for n in grid],
            color="black", linestyle="--", linewidth=1, label="1/sqrt(N) theory")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_title(f"Spread of sample means ({len(spreads[0].seeds)} runs per N)")
    ax.set_xlabel("Sample size (N)")
    ax.set_ylabel("Std of sample mean")
    ax.legend(loc="upper right", fontsize=8)


def build_report_figure(results: List[TrialResult]):
    """
    Counts on the first row, probabilities on the second, and the
    convergence scatter on the third row spanning all columns.
    """
    if not results:
        raise ValueError("results must be non-empty")

    cols = len(results)
    fig = plt.figure(figsize=(3.2 * cols, 9))
    grid = fig.add_gridspec(3, cols)

    for i, r in enumerate(results):
        plot_counts(fig.add_subplot(grid[0, i]), r)
        plot_probabilities(fig.add_subplot(grid[1, i]), r)

    plot_convergence(fig.add_subplot(grid[2, :]), results)

    fig.suptitle(f"Rolling a fair die (seed={results[0].table.seed})")
    fig.tight_layout(rect=[0, 0.02, 1, 0.95])
    return fig


def build_spread_figure(spreads: List[SpreadResult]):
    if not spreads:
        raise ValueError("spreads must be non-empty")

    fig, ax = plt.subplots(figsize=(7, 4))
    plot_spread(ax, spreads)
    fig.tight_layout()
    return fig
