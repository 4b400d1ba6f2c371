"""Polars Series and DataFrame operations for fuzzydist.

These functions mirror :mod:`fuzzydist.batch` but accept and return Polars
objects. Distances are Float64. A missing input string gives a null and an
undefined distance gives ``inf``, so the two stay distinguishable.

Functions in This Module
------------------------
- ``stringdist_series()``: Elementwise distances between two Series
- ``stringdist_frame()``: Distance matrix as a DataFrame

Example Usage
-------------
>>> import polars as pl
>>> import fuzzydist as fd
>>>
>>> left = pl.Series(["MARTHA", "DWAYNE", None])
>>> right = pl.Series(["MARHTA", "DUANE", "DIXON"])
>>> fd.stringdist_series(left, right, method="jw", p=0.1)
>>>
>>> # One column per element of `b`, one row per element of `a`
>>> fd.stringdist_frame(pl.Series(["abc", "ab"]), pl.Series(["abd", "ba"]), method="dl")

See Also
--------
- ``fuzzydist.batch``: The same operations on plain Python lists
- ``fuzzydist.expr``: Polars expression namespace for column operations
"""

from typing import Any, Iterable, Optional, Union

import polars as pl

from fuzzydist.batch import stringdist, stringdistmatrix
from fuzzydist.dispatch import DEFAULT_METHOD, DEFAULT_P, DEFAULT_Q, DEFAULT_WEIGHTS, WeightLike
from fuzzydist.enums import Method


def _values(series: Union["pl.Series", Iterable[Any]]) -> Iterable[Any]:
    if isinstance(series, pl.Series):
        return series.to_list()
    if series is None or isinstance(series, str):
        return [series]
    return series


def stringdist_series(
    left: "pl.Series",
    right: "pl.Series",
    method: Union[str, Method] = DEFAULT_METHOD,
    weight: WeightLike = DEFAULT_WEIGHTS,
    max_dist: Optional[float] = None,
    q: int = DEFAULT_Q,
    p: float = DEFAULT_P,
    name: str = "distance",
) -> "pl.Series":
    """
    Compute elementwise distances between two Series.

    The shorter Series is recycled as in :func:`fuzzydist.stringdist`.

    Args:
        left: Series of target strings
        right: Series of source strings
        method: Distance method (string or Method enum)
        weight: Penalties for deletion, insertion, substitution, transposition
        max_dist: Bound for edit-like methods (None means unbounded)
        q: Q-gram size
        p: Winkler penalty for "jw"
        name: Name of the returned Series

    Returns:
        Float64 Series of length max(len(left), len(right))

    Example:
        >>> s = stringdist_series(pl.Series(["ab", None]), pl.Series(["ba", "x"]), method="dl")
        >>> s.to_list()
        [1.0, None]
    """
    values = stringdist(
        _values(left),
        _values(right),
        method=method,
        weight=weight,
        max_dist=max_dist,
        q=q,
        p=p,
    )
    return pl.Series(name, values, dtype=pl.Float64)


def stringdist_frame(
    a: "pl.Series",
    b: "pl.Series",
    method: Union[str, Method] = DEFAULT_METHOD,
    weight: WeightLike = DEFAULT_WEIGHTS,
    max_dist: Optional[float] = None,
    q: int = DEFAULT_Q,
    p: float = DEFAULT_P,
    workers: int = 1,
) -> "pl.DataFrame":
    """
    Compute the distance matrix between two Series as a DataFrame.

    Args:
        a: Series of target strings (rows)
        b: Series of source strings (columns)
        method: Distance method (string or Method enum)
        weight: Penalties for deletion, insertion, substitution, transposition
        max_dist: Bound for edit-like methods (None means unbounded)
        q: Q-gram size
        p: Winkler penalty for "jw"
        workers: Number of worker processes for the column fan-out

    Returns:
        DataFrame with one Float64 column per element of ``b``, named "0",
        "1", ..., and one row per element of ``a``. Empty if either input is
        empty.

    Example:
        >>> df = stringdist_frame(pl.Series(["abc", "ab"]), pl.Series(["abd", "ba"]))
        >>> df.shape
        (2, 2)
    """
    b_values = list(_values(b))
    matrix = stringdistmatrix(
        _values(a),
        b_values,
        method=method,
        weight=weight,
        max_dist=max_dist,
        q=q,
        p=p,
        workers=workers,
    )
    if not matrix:
        return pl.DataFrame()
    return pl.DataFrame(
        {str(j): [row[j] for row in matrix] for j in range(len(b_values))},
        schema={str(j): pl.Float64 for j in range(len(b_values))},
    )


__all__ = ["stringdist_series", "stringdist_frame"]
