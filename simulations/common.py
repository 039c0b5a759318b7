# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import math
import time

from dice_outcomes.population import EXPECTED_VALUE, ROLL_VARIANCE
from dice_outcomes.trial import FrequencyTable


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats over a set of sample means.
    """
    min: float
    max: float
    mean: float
    std: float  # population stddev


def summarize_values(values: Sequence[float]) -> SummaryStats:
    """
    Compute min/max/mean/std over floats (population stddev).
    Stddev computed via a two-pass method for clarity.
    """
    if not values:
        raise ValueError("values must be non-empty")

    n = len(values)
    total = 0.0
    for x in values:
        total += x
    mean = total / n

    var_acc = 0.0
    for x in values:
        d = x - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=min(values), max=max(values), mean=mean, std=std)


@dataclass
class TrialResult:
    """
    One row of the report: a frequency table plus how long it took.
    """
    table: FrequencyTable
    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        # Sanity: counts should sum to the number of rolls
        expected = self.table.sample_count
        actual = 0
        for c in self.table.counts.values():
            actual += c
        if actual != expected:
            raise ValueError(
                f"counts sum mismatch: expected {expected}, got {actual}"
            )

    @property
    def sample_count(self) -> int:
        return self.table.sample_count

    @property
    def sample_mean(self) -> float:
        return self.table.sample_mean


@dataclass
class SpreadResult:
    """
    Sample means of many independently seeded trials at one sample size.
    """
    sample_count: int
    seeds: List[int]
    sample_means: List[float]

    stats: SummaryStats = field(init=False)

    def __post_init__(self) -> None:
        if len(self.seeds) != len(self.sample_means):
            raise ValueError("seeds and sample_means must have the same length")
        self.stats = summarize_values(self.sample_means)

    def expected_std(self) -> float:
        """
        Theoretical std of the sample mean: sqrt(35/12) / sqrt(N).
        """
        return math.sqrt(ROLL_VARIANCE / self.sample_count)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_table(r: TrialResult) -> str:
    """
    Fixed-width outcome table for one trial.
    """
    lines = [
        f"N = {r.sample_count}",
        f"{'value':>5}  {'count':>8}  {'probability':>11}",
    ]
    for v, c, p in r.table.rows():
        lines.append(f"{v:>5}  {c:>8}  {p:>11.4f}")
    return "\n".join(lines)


def format_summary_line(r: TrialResult) -> str:
    """
    Human-friendly one-liner for printing in the report.
    """
    t = r.table
    return (
        f"N={t.sample_count}: mean={t.sample_mean:.4f}, "
        f"|mean-{EXPECTED_VALUE}|={t.mean_error():.4f}, "
        f"max|p-1/6|={t.max_probability_deviation():.4f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )


def format_spread_line(s: SpreadResult) -> str:
    st = s.stats
    return (
        f"N={s.sample_count}: runs={len(s.seeds)}, mean of means={st.mean:.4f}, "
        f"std={st.std:.4f} (theory {s.expected_std():.4f}), "
        f"range=[{st.min:.4f}, {st.max:.4f}]"
    )


def format_narrative(results: List[TrialResult]) -> str:
    """
    Short plain-text summary comparing the smallest and largest runs.
    """
    if not results:
        raise ValueError("results must be non-empty")

    ordered = sorted(results, key=lambda r: r.sample_count)
    small = ordered[0].table
    large = ordered[-1].table

    text = (
        f"With {small.sample_count} rolls the sample mean was "
        f"{small.sample_mean:.4f}, {small.mean_error():.4f} away from the "
        f"expected value {EXPECTED_VALUE}, and the face probabilities were up to "
        f"{small.max_probability_deviation():.4f} away from 1/6. "
        f"With {large.sample_count} rolls the sample mean was "
        f"{large.sample_mean:.4f} (error {large.mean_error():.4f}) and no face "
        f"probability was more than {large.max_probability_deviation():.4f} from 1/6."
    )
    if len(ordered) > 1:
        text += (
            " Any single run can wander; the law of large numbers shows up as the "
            "spread of many runs shrinking as the number of rolls grows."
        )
    return text
