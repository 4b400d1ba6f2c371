"""Exception hierarchy for fuzzydist."""


class FuzzyDistError(Exception):
    """Base exception for all fuzzydist errors."""


class ValidationError(FuzzyDistError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(FuzzyDistError, ValueError):
    """Raised when an unknown or ambiguous method is specified."""


class WorkerError(FuzzyDistError, RuntimeError):
    """Raised when a worker fails while computing a distance matrix.

    The underlying exception is available as ``__cause__``.
    """


class RecyclingWarning(UserWarning):
    """Issued when the longer input is not a multiple of the shorter one."""


__all__ = [
    "FuzzyDistError",
    "ValidationError",
    "AlgorithmError",
    "WorkerError",
    "RecyclingWarning",
]
