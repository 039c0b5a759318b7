from typing import Dict, Tuple


# The fair six-sided die. Fixed for the process lifetime.
POPULATION: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)

TRUE_PROBABILITY: float = 1.0 / len(POPULATION)

# sum(v * 1/6) for v in 1..6
EXPECTED_VALUE: float = sum(POPULATION) / len(POPULATION)

# Population variance of a single roll: (6**2 - 1) / 12
ROLL_VARIANCE: float = (len(POPULATION) ** 2 - 1) / 12.0


def empty_counts() -> Dict[int, int]:
    """
    Return a fresh tally with every face present at count 0.
    """
    return {v: 0 for v in POPULATION}
