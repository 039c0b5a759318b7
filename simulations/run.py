# simulations/run.py

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from dice_outcomes.trial import run_trial

from .common import SpreadResult, Timer, TrialResult


logger = logging.getLogger(__name__)


# Sample sizes of the report, smallest to largest.
SAMPLE_SIZES = (10, 100, 1000, 10000, 100000)

DEFAULT_SEED = 345


def run_sample_size(sample_count: int, seed: int = DEFAULT_SEED) -> TrialResult:
    """
    Run a single trial and wrap it with its runtime.
    """
    with Timer() as t:
        table = run_trial(sample_count, seed)
    return TrialResult(table=table, runtime_s=t.elapsed_s)


def run_report(
    sample_sizes: Sequence[int] = SAMPLE_SIZES,
    seed: int = DEFAULT_SEED,
) -> List[TrialResult]:
    """
    Run one trial per sample size.

    Parameters
    ----------
    sample_sizes:
        Number of rolls for each trial (e.g., 10, 100, ..., 100000).
    seed:
        Seed used for every trial. Each trial gets its own generator, so
        the result for a given size does not depend on the other sizes.

    Returns
    -------
    List[TrialResult], in the order of `sample_sizes`.
    """
    if not sample_sizes:
        raise ValueError("sample_sizes must be non-empty")

    results = []
    for n in sample_sizes:
        r = run_sample_size(n, seed)
        logger.info(
            "N=%d seed=%d mean=%.4f (%.3fs)",
            n, seed, r.sample_mean, r.runtime_s or 0.0,
        )
        results.append(r)
    return results


def run_spread(sample_count: int, seeds: Iterable[int]) -> SpreadResult:
    """
    Run the same sample size under many seeds and collect the sample means.
    """
    seed_list = list(seeds)
    if not seed_list:
        raise ValueError("seeds must be non-empty")

    means = [run_trial(sample_count, s).sample_mean for s in seed_list]
    result = SpreadResult(sample_count=sample_count, seeds=seed_list, sample_means=means)
    logger.info(
        "spread N=%d runs=%d std=%.4f",
        sample_count, len(seed_list), result.stats.std,
    )
    return result


def run_convergence(
    sample_sizes: Sequence[int],
    seeds: Iterable[int],
) -> List[SpreadResult]:
    """
    Convenience helper: run_spread() for every sample size with the same seeds.
    """
    if not sample_sizes:
        raise ValueError("sample_sizes must be non-empty")

    seed_list = list(seeds)
    return [run_spread(n, seed_list) for n in sample_sizes]
