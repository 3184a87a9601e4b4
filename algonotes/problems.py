"""Solutions to two small contest problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from itertools import accumulate

_MAX_THRESHOLD = 500_000


def count_present(values: Iterable[int], queries: Iterable[int]) -> int:
    """How many of the queries occur among values."""
    present = set(values)
    return sum(1 for q in queries if q in present)


def best_zero_split(bits: str) -> int:
    """Best score for a string of '1's and zeros.

    Runs of characters other than '1' are zero-runs. For a threshold t the
    runs are cut greedily, left to right, into the fewest consecutive groups
    each holding at least t zeros; with cnt >= 2 groups that scores
    t*cnt + cnt - 1. The answer is the best such score, or the number of
    '1's if that is larger.
    """
    ones = bits.count("1")
    runs = [len(run) for run in bits.split("1") if run]
    if not runs:
        return ones

    prefix = list(accumulate(runs))
    total = prefix[-1]
    cache: dict[int, int] = {}

    def score(t: int) -> int:
        if t in cache:
            return cache[t]
        groups = 0
        smallest = total
        i = 0
        while i < len(runs):
            base = prefix[i - 1] if i else 0
            if total - base < t:
                break
            j = bisect_left(prefix, base + t)
            smallest = min(smallest, prefix[j] - base)
            groups += 1
            i = j + 1
        if groups <= 1:
            return 0
        for x in range(t, smallest + 1):
            cache[x] = x * groups + groups - 1
        return cache[t]

    best = ones
    for t in range(1, _MAX_THRESHOLD + 1):
        value = score(t)
        if value == 0:
            break
        best = max(best, value)
    return best