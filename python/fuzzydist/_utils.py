"""Internal utilities for fuzzydist."""

from typing import Union

from fuzzydist.enums import Method
from fuzzydist.exceptions import AlgorithmError

# Valid method names (lowercase)
VALID_METHODS = frozenset(m.value for m in Method)


def normalize_method(method: Union[str, Method]) -> Method:
    """Convert a method name or enum member to a Method.

    Names are matched case-insensitively. An exact name wins; otherwise a
    unique prefix is accepted, so ``"h"`` selects Hamming.

    Args:
        method: Either a Method enum value or a string method name.

    Returns:
        The matching Method member.

    Raises:
        AlgorithmError: If the name is unknown or an ambiguous prefix.
        TypeError: If method is not a string or Method enum.

    Example:
        >>> normalize_method("LV")
        <Method.LV: 'lv'>
        >>> normalize_method("ham")
        <Method.HAMMING: 'hamming'>
    """
    if isinstance(method, Method):
        return method

    if isinstance(method, str):
        name = method.lower()
        if name in VALID_METHODS:
            return Method(name)
        candidates = sorted(v for v in VALID_METHODS if name and v.startswith(name))
        if len(candidates) == 1:
            return Method(candidates[0])
        if len(candidates) > 1:
            raise AlgorithmError(
                f"Ambiguous method: '{method}' matches {candidates}"
            )
        raise AlgorithmError(
            f"Unknown method: '{method}'. Valid options: {sorted(VALID_METHODS)}"
        )

    raise TypeError(
        f"method must be str or Method enum, got {type(method).__name__}"
    )


__all__ = ["normalize_method", "VALID_METHODS"]
