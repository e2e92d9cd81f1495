# tailor/ats/utils.py
import math
from typing import Sequence, Hashable


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Python's round() rounds halves to even (round(62.5) == 62); scores are
    defined with halves rounding up (62.5 -> 63).
    """
    return int(math.floor(value + 0.5))


def sequence_edit_distance(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Levenshtein distance between two sequences of symbols (unit costs)"""
    m, n = len(a), len(b)
    previous = list(range(n + 1))

    for i in range(1, m + 1):
        current = [i] + [0] * n
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            current[j] = min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current

    return previous[n]


def average(values: Sequence[float], default: float) -> float:
    """Arithmetic mean, or default when there are no values"""
    if not values:
        return default
    return sum(values) / len(values)
