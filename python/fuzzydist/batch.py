"""Batch operations API for fuzzydist.

This module applies a distance method to whole vectors of strings, either
elementwise with recycling of the shorter vector (:func:`stringdist`) or
over the full cross product (:func:`stringdistmatrix`).

Results keep three cases apart: a non-negative float is a computed
distance, ``inf`` means the distance is undefined or exceeds ``max_dist``,
and ``None`` means one of the two strings was missing.

Example usage:
    >>> import fuzzydist.batch as batch

    # Elementwise distances; the shorter vector is recycled
    >>> batch.stringdist(["a", "b", "c", "d"], ["a", "c"])
    [0.0, 1.0, 1.0, 1.0]

    # Full distance matrix, rows follow `a`, columns follow `b`
    >>> batch.stringdistmatrix(["ca", "abc"], ["abc", "ba"], method="dl")
    [[2.0, 1.0], [0.0, 2.0]]
"""

from __future__ import annotations

import warnings
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any, Iterable, Optional

from fuzzydist.dispatch import (
    DEFAULT_METHOD,
    DEFAULT_P,
    DEFAULT_Q,
    DEFAULT_WEIGHTS,
    DistanceParams,
    WeightLike,
    compute,
)
from fuzzydist.exceptions import RecyclingWarning
from fuzzydist.parallel import map_columns, validate_workers
from fuzzydist.sequence import encode_all

if TYPE_CHECKING:
    from fuzzydist.enums import Method

__all__ = [
    "stringdist",
    "stringdistmatrix",
]


def stringdist(
    a: Iterable[Any],
    b: Iterable[Any],
    method: str | Method = DEFAULT_METHOD,
    weight: WeightLike = DEFAULT_WEIGHTS,
    max_dist: Optional[float] = None,
    q: int = DEFAULT_Q,
    p: float = DEFAULT_P,
) -> list[Optional[float]]:
    """Compute elementwise distances between two vectors of strings.

    The shorter vector is recycled so that the result has
    ``max(len(a), len(b))`` elements; element ``k`` is the distance between
    ``a[k % len(a)]`` and ``b[k % len(b)]``. A ``RecyclingWarning`` is issued
    when the longer length is not a multiple of the shorter one.

    Args:
        a: Target strings. A single ``str`` counts as a vector of one.
        b: Source strings. A single ``str`` counts as a vector of one.
        method: Distance method (string or Method enum). Options:
            - "osa": Optimal string alignment (default)
            - "lv": Levenshtein distance
            - "dl": Full Damerau-Levenshtein distance
            - "hamming": Hamming distance, ``inf`` for unequal lengths
            - "lcs": Longest common subsequence distance
            - "qgram": Q-gram distance
            - "cosine": Cosine distance between q-gram profiles
            - "jaccard": Jaccard distance between q-gram sets
            - "jw": Jaro or Jaro-Winkler distance
        weight: Penalties for deletion, insertion, substitution and
            transposition, each in (0, 1]. Also accepts a mapping with keys
            ``d``, ``i``, ``s`` and ``t``.
        max_dist: Bound for edit-like methods (``None`` means unbounded).
        q: Q-gram size, non-negative.
        p: Winkler penalty in [0, 0.25].

    Returns:
        List of distances. Empty if either input is empty.

    Raises:
        AlgorithmError: If the method is unknown.
        ValidationError: If any parameter is out of range.

    Example:
        >>> stringdist(["ca", "abc"], ["abc", "ca"], weight=(0.5, 1, 1, 1))
        [2.0, 2.5]
    """
    params = DistanceParams.create(method, weight, max_dist, q, p)
    left = encode_all(a)
    right = encode_all(b)
    if not left or not right:
        return []

    n_left, n_right = len(left), len(right)
    size = max(n_left, n_right)
    if size % min(n_left, n_right) != 0:
        warnings.warn(
            "longer object length is not a multiple of shorter object length",
            RecyclingWarning,
            stacklevel=2,
        )
    return [compute(left[k % n_left], right[k % n_right], params) for k in range(size)]


def stringdistmatrix(
    a: Iterable[Any],
    b: Iterable[Any],
    method: str | Method = DEFAULT_METHOD,
    weight: WeightLike = DEFAULT_WEIGHTS,
    max_dist: Optional[float] = None,
    q: int = DEFAULT_Q,
    p: float = DEFAULT_P,
    workers: int = 1,
    executor: Optional[Executor] = None,
) -> list[list[Optional[float]]]:
    """Compute the distance matrix between two vectors of strings.

    Columns are independent, so with ``workers > 1`` they are spread over a
    process pool; the result is identical to the sequential computation.
    Parallelisation is over ``b``, so the gain is highest when ``b`` is the
    longer vector.

    Args:
        a: Target strings (rows of the output matrix).
        b: Source strings (columns of the output matrix).
        method: Distance method, see :func:`stringdist`.
        weight: Edit operation penalties, see :func:`stringdist`.
        max_dist: Bound for edit-like methods (``None`` means unbounded).
        q: Q-gram size, non-negative.
        p: Winkler penalty in [0, 0.25].
        workers: Number of worker processes (default 1: no pool).
        executor: Optional caller-owned ``concurrent.futures.Executor``;
            when given, ``workers`` is ignored and the executor is left
            running.

    Returns:
        2D list where ``result[i][j]`` is the distance between ``a[i]`` and
        ``b[j]``. Empty if either input is empty.

    Raises:
        AlgorithmError: If the method is unknown.
        ValidationError: If any parameter is out of range.
        WorkerError: If a worker fails; no partial matrix is returned.

    Example:
        >>> matrix = stringdistmatrix(["hello", "world"], ["hallo", "word", "help"], method="lv")
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    params = DistanceParams.create(method, weight, max_dist, q, p)
    validate_workers(workers)
    rows = encode_all(a)
    cols = encode_all(b)
    if not rows or not cols:
        return []

    columns = map_columns(rows, cols, params, workers=workers, executor=executor)
    return [[column[i] for column in columns] for i in range(len(rows))]
