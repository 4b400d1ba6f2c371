"""Conversion of text into code point sequences.

Every distance algorithm in fuzzydist works on tuples of Unicode code
points rather than on ``str`` objects. This keeps the algorithms independent
of how the text was encoded: a multi-byte character is always exactly one
element. A missing value (``None`` or a float NaN) becomes ``None``, the
unknown sequence, which is distinct from the empty tuple.

Example:
    >>> encode("héllo")
    (104, 233, 108, 108, 111)
    >>> encode(None) is None
    True
    >>> encode("")
    ()
"""

import math
from typing import Any, Iterable, List, Optional, Tuple

Sequence = Tuple[int, ...]
"""Canonical representation of one string: its code points in order."""

UNKNOWN = None
"""Sentinel for a missing string."""


def is_missing(value: Any) -> bool:
    """Return True for values treated as missing (None and float NaN)."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def encode(value: Any) -> Optional[Sequence]:
    """Encode a single value as a code point sequence.

    Args:
        value: A string, bytes (decoded as UTF-8), an already encoded
            sequence of integers, or any other object, which is converted
            with ``str()`` first.

    Returns:
        Tuple of code points, or ``None`` if the value is missing.

    Raises:
        UnicodeDecodeError: If ``bytes`` input is not valid UTF-8.
    """
    if is_missing(value):
        return UNKNOWN
    if isinstance(value, str):
        return tuple(map(ord, value))
    if isinstance(value, (bytes, bytearray)):
        return tuple(map(ord, value.decode("utf-8")))
    if isinstance(value, (tuple, list)) and all(
        isinstance(x, int) and not isinstance(x, bool) and x >= 0 for x in value
    ):
        return tuple(value)
    return tuple(map(ord, str(value)))


def encode_all(values: Iterable[Any]) -> List[Optional[Sequence]]:
    """Encode every element of a vector of strings.

    A bare ``str`` (or ``None``) is treated as a vector of length one, so
    ``encode_all("abc")`` encodes one string rather than three characters.
    Polars Series, lists, tuples and generators are all accepted.
    """
    if values is None or isinstance(values, (str, bytes, bytearray)):
        return [encode(values)]
    return [encode(v) for v in values]


__all__ = ["Sequence", "UNKNOWN", "is_missing", "encode", "encode_all"]
