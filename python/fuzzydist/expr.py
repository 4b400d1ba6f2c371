"""Polars expression namespace for string distances.

This module registers a `.dist` namespace on Polars expressions, enabling
distance computations directly in Polars expression contexts.

Null operands produce null, undefined distances produce ``inf``.

Warning:
    Every row goes through ``map_elements``. For large column pairs
    ``fuzzydist.stringdist_series`` avoids the per-row overhead.

Example:
    >>> import polars as pl
    >>> import fuzzydist  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"a": ["ca", "abc"], "b": ["abc", "cba"]})
    >>> df.with_columns(
    ...     osa=pl.col("a").dist.stringdist(pl.col("b")),
    ...     dl=pl.col("a").dist.stringdist(pl.col("b"), method="dl"),
    ... )
"""

from typing import Optional, Union

import polars as pl

from fuzzydist.dispatch import (
    DEFAULT_METHOD,
    DEFAULT_P,
    DEFAULT_Q,
    DEFAULT_WEIGHTS,
    DistanceParams,
    WeightLike,
    compute,
)
from fuzzydist.enums import Method
from fuzzydist.sequence import encode


@pl.api.register_expr_namespace("dist")
class DistExprNamespace:
    """
    String distance namespace for Polars expressions.

    Access via `.dist` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def stringdist(
        self,
        other: Union[str, pl.Expr],
        method: Union[str, Method] = DEFAULT_METHOD,
        weight: WeightLike = DEFAULT_WEIGHTS,
        max_dist: Optional[float] = None,
        q: int = DEFAULT_Q,
        p: float = DEFAULT_P,
    ) -> pl.Expr:
        """
        Calculate the distance between this column and another value/column.

        This column is the target and `other` the source, as in
        ``fuzzydist.stringdist(a, b)``.

        Args:
            other: String literal or column expression to compare against
            method: Distance method (string or Method enum)
            weight: Penalties for deletion, insertion, substitution, transposition
            max_dist: Bound for edit-like methods (None means unbounded)
            q: Q-gram size
            p: Winkler penalty for "jw"

        Returns:
            Float64 expression of distances

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").dist.stringdist("John", method="jw", p=0.1)
            ... )
        """
        # Validate eagerly so bad parameters fail when the expression is built
        params = DistanceParams.create(method, weight, max_dist, q, p)

        if isinstance(other, str):
            source = encode(other)
            return self._expr.map_elements(
                lambda s: compute(encode(s), source, params),
                return_dtype=pl.Float64,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: compute(encode(row["_left"]), encode(row["_right"]), params),
            return_dtype=pl.Float64,
        )

    def within(
        self,
        other: Union[str, pl.Expr],
        max_dist: float,
        method: Union[str, Method] = DEFAULT_METHOD,
        weight: WeightLike = DEFAULT_WEIGHTS,
        q: int = DEFAULT_Q,
        p: float = DEFAULT_P,
    ) -> pl.Expr:
        """
        Check whether values lie within `max_dist` of another value/column.

        Args:
            other: String literal or column expression to compare against
            max_dist: Largest distance still considered a match
            method: Distance method (string or Method enum)
            weight: Penalties for deletion, insertion, substitution, transposition
            q: Q-gram size
            p: Winkler penalty for "jw"

        Returns:
            Boolean expression (null where either operand is null)

        Example:
            >>> df.filter(pl.col("name").dist.within("John", max_dist=1, method="lv"))
        """
        bounded = self.stringdist(other, method=method, weight=weight, max_dist=max_dist, q=q, p=p)
        return bounded <= max_dist
