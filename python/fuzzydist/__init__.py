"""
fuzzydist - Approximate string matching distances

A Python library computing string distances with precisely defined edit
distance, q-gram and Jaro-Winkler metrics, for single pairs, recycled
vector pairs and full distance matrices.

Example usage:
    >>> import fuzzydist as fd

    # Optimal string alignment (the default method)
    >>> fd.distance("ca", "abc")
    3.0

    # Full Damerau-Levenshtein allows substrings to be edited more than once
    >>> fd.distance("ca", "abc", method="dl")
    2.0

    # Vectors are recycled; missing values stay missing
    >>> fd.stringdist(["abc", None, "ab"], "abd", method="lv")
    [1.0, None, 1.0]

    # Distance matrix, optionally computed on several worker processes
    >>> fd.stringdistmatrix(["MARTHA", "DWAYNE"], ["MARHTA", "DUANE"], method="jw", workers=2)
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Register the .dist expression namespace
import fuzzydist.expr  # noqa: F401
from fuzzydist.batch import stringdist, stringdistmatrix
from fuzzydist.dispatch import DistanceParams, compute, distance
from fuzzydist.edit import Weights
from fuzzydist.enums import Method
from fuzzydist.exceptions import (
    AlgorithmError,
    FuzzyDistError,
    RecyclingWarning,
    ValidationError,
    WorkerError,
)
from fuzzydist.polars_ext import stringdist_frame, stringdist_series
from fuzzydist.qgram import QGramProfile
from fuzzydist.sequence import encode, encode_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _get_version("fuzzydist")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Custom exceptions and warnings
    "FuzzyDistError",
    "ValidationError",
    "AlgorithmError",
    "WorkerError",
    "RecyclingWarning",
    # Enums and parameter types
    "Method",
    "Weights",
    "DistanceParams",
    "QGramProfile",
    # Sequence model
    "encode",
    "encode_all",
    # Single pair
    "distance",
    "compute",
    # Vectors
    "stringdist",
    "stringdistmatrix",
    # Polars integration
    "stringdist_series",
    "stringdist_frame",
]
