"""Edit distance engine: Hamming, Levenshtein, OSA, Damerau-Levenshtein and LCS.

All functions take two code point sequences. ``a`` is the target and ``b``
the source: the distance is the cost of turning ``b`` into ``a``. With
unequal deletion and insertion weights the result is therefore not
symmetric.

Bounded functions accept ``max_dist``. ``None`` means unbounded; any
result larger than the bound is reported as ``math.inf``, never as a
partial value. A bound of 0 still lets identical sequences through with
distance 0.

Example:
    >>> from fuzzydist.sequence import encode
    >>> osa(encode("ca"), encode("abc"))
    3.0
    >>> damerau_levenshtein(encode("ca"), encode("abc"))
    2.0
"""

import math
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

INF = math.inf


class Weights(NamedTuple):
    """Penalties for the four edit operations, each in (0, 1]."""

    deletion: float = 1.0
    insertion: float = 1.0
    substitution: float = 1.0
    transposition: float = 1.0


UNIT_WEIGHTS = Weights()


def _exceeds(value: float, max_dist: Optional[float]) -> bool:
    return max_dist is not None and value > max_dist


def _length_gap_exceeds(
    n: int, m: int, weights: Weights, max_dist: Optional[float]
) -> bool:
    # At least |n - m| insertions or deletions are needed
    if max_dist is None:
        return False
    gap = n - m
    cost = gap * weights.insertion if gap > 0 else -gap * weights.deletion
    return cost > max_dist


def _shorter_as_row(
    a: Sequence[int], b: Sequence[int], weights: Weights
) -> Tuple[Sequence[int], Sequence[int], float, float]:
    """Orient the table so rows span the shorter operand.

    Swapping the operands swaps the roles of deletion and insertion, so the
    returned weights are swapped with them.
    """
    if len(b) <= len(a):
        return a, b, weights.deletion, weights.insertion
    return b, a, weights.insertion, weights.deletion


def hamming(
    a: Sequence[int], b: Sequence[int], max_dist: Optional[float] = None
) -> float:
    """Number of positions at which two equal-length sequences differ.

    Returns ``inf`` when the lengths differ or the count exceeds ``max_dist``.
    """
    if len(a) != len(b):
        return INF
    count = 0
    for x, y in zip(a, b):
        if x != y:
            count += 1
            if _exceeds(count, max_dist):
                return INF
    return float(count)


def levenshtein(
    a: Sequence[int],
    b: Sequence[int],
    weights: Weights = UNIT_WEIGHTS,
    max_dist: Optional[float] = None,
) -> float:
    """Weighted Levenshtein distance using two rolling rows.

    Every alignment path crosses every row of the cost table, so once a
    whole row exceeds ``max_dist`` the final value must too and the
    computation stops.
    """
    if _length_gap_exceeds(len(a), len(b), weights, max_dist):
        return INF
    outer, inner, w_del, w_ins = _shorter_as_row(a, b, weights)
    w_sub = weights.substitution
    m = len(inner)

    prev = [j * w_del for j in range(m + 1)]
    for i, x in enumerate(outer, 1):
        cur = [i * w_ins] + [0.0] * m
        for j, y in enumerate(inner, 1):
            cur[j] = min(
                prev[j] + w_ins,
                cur[j - 1] + w_del,
                prev[j - 1] + (0.0 if x == y else w_sub),
            )
        if max_dist is not None and min(cur) > max_dist:
            return INF
        prev = cur

    result = float(prev[m])
    return INF if _exceeds(result, max_dist) else result


def osa(
    a: Sequence[int],
    b: Sequence[int],
    weights: Weights = UNIT_WEIGHTS,
    max_dist: Optional[float] = None,
) -> float:
    """Optimal string alignment distance.

    Like Levenshtein, but swapping two adjacent characters is a single
    operation. No substring is edited more than once, so a transposed pair
    cannot take part in another edit.

    Three rows are live at any time. A transposition jumps from row
    ``i - 2`` straight to row ``i``, so early termination requires both of
    the two most recent rows to exceed the bound.
    """
    if _length_gap_exceeds(len(a), len(b), weights, max_dist):
        return INF
    outer, inner, w_del, w_ins = _shorter_as_row(a, b, weights)
    w_sub = weights.substitution
    w_tra = weights.transposition
    m = len(inner)

    before: List[float] = []
    prev = [j * w_del for j in range(m + 1)]
    for i, x in enumerate(outer, 1):
        cur = [i * w_ins] + [0.0] * m
        for j, y in enumerate(inner, 1):
            d = min(
                prev[j] + w_ins,
                cur[j - 1] + w_del,
                prev[j - 1] + (0.0 if x == y else w_sub),
            )
            if i > 1 and j > 1 and x == inner[j - 2] and outer[i - 2] == y:
                d = min(d, before[j - 2] + w_tra)
            cur[j] = d
        if max_dist is not None and min(cur) > max_dist and min(prev) > max_dist:
            return INF
        before, prev = prev, cur

    result = float(prev[m])
    return INF if _exceeds(result, max_dist) else result


def damerau_levenshtein(
    a: Sequence[int],
    b: Sequence[int],
    weights: Weights = UNIT_WEIGHTS,
    max_dist: Optional[float] = None,
) -> float:
    """Full (unrestricted) Damerau-Levenshtein distance.

    Transpositions may involve non-adjacent characters and a character may
    be moved more than once. For every cell, ``last_row`` gives the last row
    in which the current column's character of ``b`` occurred in ``a``,
    and ``last_col`` the last column in the current row whose character
    matched. The cheapest transposition then jumps from that checkpoint,
    paying for the characters inserted and deleted in between.

    The full ``(n + 2) x (m + 2)`` table is kept. Row 0 and column 0 are
    sentinels holding ``inf``. The bound is only checked on the final value
    because transpositions can jump over rows.
    """
    n, m = len(a), len(b)
    if _length_gap_exceeds(n, m, weights, max_dist):
        return INF
    w_del, w_ins, w_sub, w_tra = weights

    table = [[0.0] * (m + 2) for _ in range(n + 2)]
    table[0][0] = INF
    for i in range(n + 1):
        table[i + 1][0] = INF
        table[i + 1][1] = i * w_ins
    for j in range(m + 1):
        table[0][j + 1] = INF
        table[1][j + 1] = j * w_del

    last_row: Dict[int, int] = {}
    for i in range(1, n + 1):
        x = a[i - 1]
        last_col = 0
        row, above = table[i + 1], table[i]
        for j in range(1, m + 1):
            y = b[j - 1]
            i1 = last_row.get(y, 0)
            j1 = last_col
            if x == y:
                cost = 0.0
                last_col = j
            else:
                cost = w_sub
            row[j + 1] = min(
                above[j] + cost,
                row[j] + w_del,
                above[j + 1] + w_ins,
                table[i1][j1] + (i - i1 - 1) * w_ins + w_tra + (j - j1 - 1) * w_del,
            )
        last_row[x] = i

    result = float(table[n + 1][m + 1])
    return INF if _exceeds(result, max_dist) else result


def lcs_length(a: Sequence[int], b: Sequence[int]) -> int:
    """Length of the longest common subsequence of two sequences."""
    outer, inner = (a, b) if len(b) <= len(a) else (b, a)
    prev = [0] * (len(inner) + 1)
    for x in outer:
        cur = [0] * (len(inner) + 1)
        for j, y in enumerate(inner, 1):
            if x == y:
                cur[j] = prev[j - 1] + 1
            else:
                cur[j] = max(prev[j], cur[j - 1])
        prev = cur
    return prev[-1]


def lcs(
    a: Sequence[int], b: Sequence[int], max_dist: Optional[float] = None
) -> float:
    """Longest common subsequence distance: ``len(a) + len(b) - 2 * L``.

    This is the edit distance when only unit-cost insertions and deletions
    are allowed, which is what the table below computes directly so the
    bound can be applied row by row.
    """
    n, m = len(a), len(b)
    if _exceeds(abs(n - m), max_dist):
        return INF
    outer, inner = (a, b) if m <= n else (b, a)
    width = len(inner)

    prev = list(range(width + 1))
    for i, x in enumerate(outer, 1):
        cur = [i] + [0] * width
        for j, y in enumerate(inner, 1):
            if x == y:
                cur[j] = prev[j - 1]
            else:
                cur[j] = min(prev[j], cur[j - 1]) + 1
        if max_dist is not None and min(cur) > max_dist:
            return INF
        prev = cur

    result = float(prev[width])
    return INF if _exceeds(result, max_dist) else result


__all__ = [
    "Weights",
    "UNIT_WEIGHTS",
    "hamming",
    "levenshtein",
    "osa",
    "damerau_levenshtein",
    "lcs_length",
    "lcs",
]
