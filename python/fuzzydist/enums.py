"""Enums for fuzzydist API."""

from enum import Enum


class Method(str, Enum):
    """Available distance methods.

    This enum provides type-safe method selection for every entry point.
    Plain strings (and unique prefixes of them) are accepted as well.

    Example:
        >>> from fuzzydist import Method, stringdist
        >>> stringdist(["ca"], ["abc"], method=Method.DL)
        [2.0]
    """

    OSA = "osa"
    """Optimal string alignment (restricted Damerau-Levenshtein)"""

    LV = "lv"
    """Levenshtein distance (deletions, insertions, substitutions)"""

    DL = "dl"
    """Full Damerau-Levenshtein distance (unrestricted transpositions)"""

    HAMMING = "hamming"
    """Hamming distance, infinite for strings of unequal length"""

    LCS = "lcs"
    """Longest common subsequence distance (unpaired characters)"""

    QGRAM = "qgram"
    """Sum of absolute q-gram count differences"""

    COSINE = "cosine"
    """Cosine distance between q-gram count vectors"""

    JACCARD = "jaccard"
    """Jaccard distance between q-gram sets"""

    JW = "jw"
    """Jaro distance, or Jaro-Winkler distance when p > 0"""


# Methods built on q-gram profiles
QGRAM_METHODS = frozenset({Method.QGRAM, Method.COSINE, Method.JACCARD})


__all__ = ["Method", "QGRAM_METHODS"]
