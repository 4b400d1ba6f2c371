"""Parameter validation and routing of single distance computations.

Parameters are validated once, when a ``DistanceParams`` is created. The
engine functions it routes to never validate anything themselves, which
keeps the inner loops free of checks and lets the same params object be
shipped to worker processes.

Example:
    >>> params = DistanceParams.create("dl")
    >>> compute((99, 97), (97, 98, 99), params)
    2.0
    >>> distance("hello", "HeLl0", method="hamming")
    3.0
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Mapping, Optional, Sequence, Union

from fuzzydist import edit, jaro, qgram
from fuzzydist._utils import normalize_method
from fuzzydist.edit import Weights
from fuzzydist.enums import QGRAM_METHODS, Method
from fuzzydist.exceptions import AlgorithmError, ValidationError
from fuzzydist.sequence import encode

DEFAULT_METHOD = Method.OSA
DEFAULT_WEIGHTS = Weights(1.0, 1.0, 1.0, 1.0)
DEFAULT_Q = 1
DEFAULT_P = 0.0
MAX_P = 0.25

WeightLike = Union[Weights, Sequence[float], Mapping[str, float]]

_WEIGHT_KEYS = ("d", "i", "s", "t")


def _as_weights(weight: WeightLike) -> Weights:
    if isinstance(weight, Weights):
        return weight
    if isinstance(weight, Mapping):
        unknown = set(weight) - set(_WEIGHT_KEYS)
        if unknown:
            raise ValidationError(
                f"weight keys must be among {list(_WEIGHT_KEYS)}, got {sorted(unknown)}"
            )
        return Weights(*(weight.get(k, 1.0) for k in _WEIGHT_KEYS))
    try:
        values = list(weight)
    except TypeError:
        raise ValidationError(
            f"weight must be a sequence of 4 numbers, got {weight!r}"
        ) from None
    if len(values) != 4:
        raise ValidationError(
            f"weight must have 4 components (d, i, s, t), got {len(values)}"
        )
    return Weights(*values)


def validate_weights(weight: WeightLike) -> Weights:
    """Check that every weight is a finite number in (0, 1]."""
    weights = _as_weights(weight)
    for name, value in zip(Weights._fields, weights):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"{name} weight must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValidationError(f"{name} weight must be finite, got {value}")
        if not 0 < value <= 1:
            raise ValidationError(f"{name} weight must be in range (0, 1], got {value}")
    return Weights(*(float(w) for w in weights))


def validate_max_dist(max_dist: Optional[float]) -> Optional[float]:
    """Normalize the bound: ``None`` or ``inf`` mean unbounded."""
    if max_dist is None:
        return None
    if isinstance(max_dist, bool) or not isinstance(max_dist, Real):
        raise ValidationError(f"max_dist must be a number, got {max_dist!r}")
    if math.isnan(max_dist):
        raise ValidationError("max_dist must not be NaN")
    if max_dist < 0:
        raise ValidationError(f"max_dist must be non-negative, got {max_dist}")
    if math.isinf(max_dist):
        return None
    return float(max_dist)


def validate_q(q: int) -> int:
    """Check that q is a non-negative integer."""
    if isinstance(q, bool):
        raise ValidationError(f"q must be an integer, got {q!r}")
    if isinstance(q, float) and q.is_integer():
        q = int(q)
    if not isinstance(q, Integral):
        raise ValidationError(f"q must be an integer, got {q!r}")
    if q < 0:
        raise ValidationError(f"q must be non-negative, got {q}")
    return int(q)


def validate_p(p: float) -> float:
    """Check that the Jaro-Winkler penalty lies in [0, 0.25]."""
    if isinstance(p, bool) or not isinstance(p, Real) or math.isnan(p):
        raise ValidationError(f"p must be a number, got {p!r}")
    if not 0 <= p <= MAX_P:
        raise ValidationError(f"p must be in range [0, {MAX_P}], got {p}")
    return float(p)


@dataclass(frozen=True)
class DistanceParams:
    """Validated parameters for one distance call.

    Create instances with :meth:`create`. The plain constructor only
    resolves the method name; the other fields are taken as given.
    """

    method: Method = DEFAULT_METHOD
    weights: Weights = DEFAULT_WEIGHTS
    max_dist: Optional[float] = None
    q: int = DEFAULT_Q
    p: float = DEFAULT_P

    def __post_init__(self) -> None:
        # Frozen, so bypass __setattr__
        object.__setattr__(self, "method", normalize_method(self.method))

    @classmethod
    def create(
        cls,
        method: Union[str, Method] = DEFAULT_METHOD,
        weight: WeightLike = DEFAULT_WEIGHTS,
        max_dist: Optional[float] = None,
        q: int = DEFAULT_Q,
        p: float = DEFAULT_P,
    ) -> "DistanceParams":
        """Validate all parameters and bundle them.

        Raises:
            AlgorithmError: If the method is unknown or ambiguous.
            ValidationError: If any other parameter is out of range.
        """
        return cls(
            method=normalize_method(method),
            weights=validate_weights(weight),
            max_dist=validate_max_dist(max_dist),
            q=validate_q(q),
            p=validate_p(p),
        )


def compute(
    a: Optional[Sequence[int]], b: Optional[Sequence[int]], params: DistanceParams
) -> Optional[float]:
    """Distance between two encoded sequences.

    Returns ``None`` if either operand is unknown, ``inf`` if the distance
    is undefined or exceeds the bound, otherwise a non-negative float.
    """
    if a is None or b is None:
        return None
    method = params.method
    if method is Method.OSA:
        return edit.osa(a, b, params.weights, params.max_dist)
    if method is Method.LV:
        return edit.levenshtein(a, b, params.weights, params.max_dist)
    if method is Method.DL:
        return edit.damerau_levenshtein(a, b, params.weights, params.max_dist)
    if method is Method.HAMMING:
        return edit.hamming(a, b, params.max_dist)
    if method is Method.LCS:
        return edit.lcs(a, b, params.max_dist)
    if method is Method.JW:
        return jaro.jaro_winkler(a, b, params.p)
    if method not in QGRAM_METHODS:
        raise AlgorithmError(f"Unsupported method: {method!r}")

    x, y = qgram.profiles(a, b, params.q)
    if method is Method.QGRAM:
        return qgram.qgram_distance(x, y)
    if method is Method.COSINE:
        return qgram.cosine_distance(x, y)
    return qgram.jaccard_distance(x, y)


def distance(
    a: Any,
    b: Any,
    method: Union[str, Method] = DEFAULT_METHOD,
    weight: WeightLike = DEFAULT_WEIGHTS,
    max_dist: Optional[float] = None,
    q: int = DEFAULT_Q,
    p: float = DEFAULT_P,
) -> Optional[float]:
    """Distance between two strings.

    Args:
        a: Target string (``None`` for a missing value).
        b: Source string (``None`` for a missing value).
        method: One of "osa" (default), "lv", "dl", "hamming", "lcs",
            "qgram", "cosine", "jaccard", "jw", or a unique prefix.
        weight: Penalties for deletion, insertion, substitution and
            transposition, in that order, each in (0, 1]. Only used by
            "osa", "lv" and "dl"; "lv" ignores the transposition weight.
        max_dist: Bound for edit-like methods. ``None`` means unbounded.
        q: Q-gram size for "qgram", "cosine" and "jaccard".
        p: Winkler penalty in [0, 0.25] for "jw"; 0 gives the Jaro distance.

    Returns:
        The distance, ``inf`` when it is undefined or exceeds ``max_dist``,
        or ``None`` when either string is missing.

    Example:
        >>> distance("ca", "abc")
        3.0
        >>> distance("abc", "cba", method="qgram", q=2)
        4.0
        >>> distance("ab", "abc", method="hamming")
        inf
    """
    params = DistanceParams.create(method, weight, max_dist, q, p)
    return compute(encode(a), encode(b), params)


__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_WEIGHTS",
    "DEFAULT_Q",
    "DEFAULT_P",
    "DistanceParams",
    "validate_weights",
    "validate_max_dist",
    "validate_q",
    "validate_p",
    "compute",
    "distance",
]
