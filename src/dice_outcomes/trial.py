import logging
import numbers
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .population import EXPECTED_VALUE, POPULATION, TRUE_PROBABILITY, empty_counts


logger = logging.getLogger(__name__)


def _is_int(x) -> bool:
    # bool is an Integral, but True/False are not meaningful counts or seeds
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


@dataclass(frozen=True)
class TrialRun:
    """
    One trial request: roll the die `sample_count` times from `seed`.
    """
    sample_count: int
    seed: int

    def __post_init__(self) -> None:
        if not _is_int(self.sample_count):
            raise ValueError(
                f"sample_count must be an integer, got {self.sample_count!r}"
            )
        if self.sample_count < 1:
            raise ValueError("sample_count must be >= 1")
        if not _is_int(self.seed):
            raise ValueError(f"seed must be a finite integer, got {self.seed!r}")


@dataclass(frozen=True)
class FrequencyTable:
    """
    FrequencyTable

    Outcome counts, empirical probabilities and the sample mean for one
    trial run. Every face of the die is present, including faces that were
    never rolled.

    The mappings are read-only views; a table is never modified once
    run_trial() hands it out.
    """
    run: TrialRun
    counts: Mapping[int, int]
    probabilities: Mapping[int, float]
    sample_mean: float

    @property
    def sample_count(self) -> int:
        return self.run.sample_count

    @property
    def seed(self) -> int:
        return self.run.seed

    def rows(self) -> List[Tuple[int, int, float]]:
        """
        (value, count, probability) in population order.
        """
        return [(v, self.counts[v], self.probabilities[v]) for v in POPULATION]

    def mean_error(self) -> float:
        return abs(self.sample_mean - EXPECTED_VALUE)

    def max_probability_deviation(self) -> float:
        """
        Largest distance between an empirical probability and 1/6.
        """
        worst = 0.0
        for v in POPULATION:
            d = abs(self.probabilities[v] - TRUE_PROBABILITY)
            if d > worst:
                worst = d
        return worst


# ------------------------------------------------------------
# Core API
# ------------------------------------------------------------

def run_trial(sample_count: int, seed: int) -> FrequencyTable:
    """
    Roll a fair die `sample_count` times and tabulate the outcomes.

    Each call seeds its own random.Random(seed), so identical arguments give
    identical tables and no global random state is consumed. Raises
    ValueError for a sample_count below 1 or a non-integer seed.
    """
    run = TrialRun(sample_count=sample_count, seed=seed)

    rng = random.Random(int(run.seed))
    k = len(POPULATION)
    counts = empty_counts()

    for _ in range(run.sample_count):
        v = POPULATION[rng.randrange(k)]
        counts[v] += 1

    n = run.sample_count
    probabilities = {}
    sample_mean = 0.0
    for v in POPULATION:
        p = counts[v] / n
        probabilities[v] = p
        sample_mean += v * p

    logger.debug("trial n=%d seed=%d mean=%.6f", n, run.seed, sample_mean)

    return FrequencyTable(
        run=run,
        counts=MappingProxyType(counts),
        probabilities=MappingProxyType(probabilities),
        sample_mean=sample_mean,
    )
