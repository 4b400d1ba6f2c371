"""Jaro and Jaro-Winkler distance.

Distances, not similarities: 0 is an exact match, 1 means no characters in
common. ``1 - jaro_winkler(a, b)`` gives the usual similarity score.
"""

import math
from typing import List, Sequence, Tuple

MAX_PREFIX = 4


def _matches(a: Sequence[int], b: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Greedily pair equal characters that lie within the matching window.

    Returns the matched characters of ``a`` and of ``b``, each in the order
    in which they occur in their own sequence.
    """
    window = max(0, max(len(a), len(b)) // 2 - 1)
    used = [False] * len(b)
    matched_a: List[int] = []
    for i, x in enumerate(a):
        lo = max(0, i - window)
        hi = min(len(b), i + window + 1)
        for j in range(lo, hi):
            if not used[j] and b[j] == x:
                used[j] = True
                matched_a.append(x)
                break
    matched_b = [y for y, hit in zip(b, used) if hit]
    return matched_a, matched_b


def jaro(a: Sequence[int], b: Sequence[int]) -> float:
    """Jaro distance ``1 - (m/|a| + m/|b| + (m - t)/m) / 3``.

    ``t`` is half the number of positions where the two ordered lists of
    matched characters disagree, rounded up.

    >>> from fuzzydist.sequence import encode
    >>> round(jaro(encode("MARTHA"), encode("MATHRA")), 4)
    0.1111
    """
    if not a and not b:
        return 0.0
    if not a or not b:
        return 1.0
    matched_a, matched_b = _matches(a, b)
    m = len(matched_a)
    if m == 0:
        return 1.0
    mismatches = sum(1 for x, y in zip(matched_a, matched_b) if x != y)
    t = math.ceil(mismatches / 2)
    similarity = (m / len(a) + m / len(b) + (m - t) / m) / 3.0
    return max(0.0, 1.0 - similarity)


def common_prefix(a: Sequence[int], b: Sequence[int], limit: int = MAX_PREFIX) -> int:
    """Length of the shared prefix of ``a`` and ``b``, capped at ``limit``."""
    n = 0
    for x, y in zip(a, b):
        if x != y or n == limit:
            break
        n += 1
    return n


def jaro_winkler(a: Sequence[int], b: Sequence[int], p: float = 0.0) -> float:
    """Jaro-Winkler distance ``d - l * p * d``.

    ``d`` is the Jaro distance and ``l`` the common prefix length (at most
    4). With ``p == 0`` this is the plain Jaro distance.
    """
    d = jaro(a, b)
    if p == 0 or d == 0:
        return d
    return d - common_prefix(a, b) * p * d


__all__ = ["jaro", "jaro_winkler", "common_prefix", "MAX_PREFIX"]
