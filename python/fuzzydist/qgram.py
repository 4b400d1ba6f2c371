"""Q-gram profiles and the distances derived from them.

A q-gram is a run of ``q`` consecutive code points. The profile of a
sequence counts every q-gram obtained by sliding a window of width ``q``
one position at a time. Profiles are plain values: build one per sequence
and reuse it against as many other profiles as needed.

When ``q`` is larger than the sequence the profile is *undefined*. This is
not an error; every distance involving an undefined profile is ``inf``.

Example:
    >>> from fuzzydist.sequence import encode
    >>> x = QGramProfile.from_sequence(encode("abc"), 2)
    >>> y = QGramProfile.from_sequence(encode("cba"), 2)
    >>> qgram_distance(x, y)
    4.0
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, KeysView, Mapping, Sequence, Tuple

QGram = Tuple[int, ...]


@dataclass(frozen=True)
class QGramProfile:
    """Multiset of the q-grams of one sequence.

    Attributes:
        q: Width of the q-grams.
        counts: Mapping from q-gram (a tuple of code points) to the number of
            times it occurs.
        defined: False when ``q`` exceeded the length of the sequence.
    """

    q: int
    counts: Mapping[QGram, int] = field(default_factory=dict)
    defined: bool = True

    @classmethod
    def from_sequence(cls, seq: Sequence[int], q: int) -> "QGramProfile":
        """Count the q-grams of ``seq``.

        ``q == 0`` gives an empty profile; ``q > len(seq)`` an undefined one.
        """
        n = len(seq)
        if q > n:
            return cls(q=q, counts={}, defined=False)
        if q == 0:
            return cls(q=q, counts={})
        seq = tuple(seq)
        grams = Counter(seq[i : i + q] for i in range(n - q + 1))
        return cls(q=q, counts=dict(grams))

    def __len__(self) -> int:
        """Number of distinct q-grams."""
        return len(self.counts)

    def total(self) -> int:
        """Number of q-grams counted with multiplicity."""
        return sum(self.counts.values())

    def keys(self) -> KeysView[QGram]:
        """Set-like view of the distinct q-grams."""
        return self.counts.keys()


def _comparable(x: QGramProfile, y: QGramProfile) -> bool:
    if x.q != y.q:
        raise ValueError(f"Cannot compare profiles with q={x.q} and q={y.q}")
    return x.defined and y.defined


def qgram_distance(x: QGramProfile, y: QGramProfile) -> float:
    """Sum of absolute count differences over the union of q-grams."""
    if not _comparable(x, y):
        return math.inf
    xc, yc = x.counts, y.counts
    total = sum(abs(count - yc.get(gram, 0)) for gram, count in xc.items())
    total += sum(count for gram, count in yc.items() if gram not in xc)
    return float(total)


def cosine_distance(x: QGramProfile, y: QGramProfile) -> float:
    """``1 - x.y / (|x| |y|)`` over the q-gram count vectors.

    Two empty profiles (only possible with ``q == 0``) are at distance 0.
    """
    if not _comparable(x, y):
        return math.inf
    xc, yc = x.counts, y.counts
    if not xc and not yc:
        return 0.0
    if not xc or not yc:
        return 1.0
    small, large = (xc, yc) if len(xc) <= len(yc) else (yc, xc)
    dot = sum(count * large.get(gram, 0) for gram, count in small.items())
    norm_x = sum(c * c for c in xc.values())
    norm_y = sum(c * c for c in yc.values())
    return max(0.0, 1.0 - dot / math.sqrt(norm_x * norm_y))


def jaccard_distance(x: QGramProfile, y: QGramProfile) -> float:
    """``1 - |X & Y| / |X | Y|`` over the sets of distinct q-grams.

    Two empty profiles are at distance 0.
    """
    if not _comparable(x, y):
        return math.inf
    xs, ys = x.keys(), y.keys()
    union = len(xs | ys)
    if union == 0:
        return 0.0
    return 1.0 - len(xs & ys) / union


def profiles(a: Sequence[int], b: Sequence[int], q: int) -> Tuple[QGramProfile, QGramProfile]:
    """Build the profiles of two sequences with the same ``q``."""
    return QGramProfile.from_sequence(a, q), QGramProfile.from_sequence(b, q)


def extract_qgrams(seq: Sequence[int], q: int) -> Dict[QGram, int]:
    """Return the q-gram counts of ``seq`` as a plain dict (empty if undefined)."""
    return dict(QGramProfile.from_sequence(seq, q).counts)


__all__ = [
    "QGram",
    "QGramProfile",
    "qgram_distance",
    "cosine_distance",
    "jaccard_distance",
    "profiles",
    "extract_qgrams",
]
