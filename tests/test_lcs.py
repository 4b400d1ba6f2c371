"""Tests for the longest common subsequence distance.

The lcs distance counts the characters of both strings that cannot be
paired while keeping their order: ``len(a) + len(b) - 2 * L``.
"""

import math

import pytest

import fuzzydist as fd
from fuzzydist import edit
from fuzzydist.sequence import encode


class TestLCS:
    """Tests for LCS length and distance."""

    def test_lcs_length(self):
        assert edit.lcs_length(encode("ABCDGH"), encode("AEDFHR")) == 3  # ADH
        assert edit.lcs_length(encode("AGGTAB"), encode("GXTXAYB")) == 4  # GTAB

    def test_survey_surgery(self):
        # The lcs is "surey"; 'v', 'g' and one 'r' of "surgery" stay unpaired
        assert fd.distance("survey", "surgery", method="lcs") == 3

    def test_single_pairing(self):
        # The lcs is either "a" or "b"; one character of each string is unpaired
        assert fd.distance("ab", "ba", method="lcs") == 2

    def test_equals_distance_formula(self):
        a, b = "ABCDGH", "AEDFHR"
        lcs_len = edit.lcs_length(encode(a), encode(b))
        assert fd.distance(a, b, method="lcs") == len(a) + len(b) - 2 * lcs_len

    def test_weights_ignored(self):
        assert fd.distance("abc", "xbc", method="lcs", weight=(0.5, 0.5, 0.5, 0.5)) == 2


class TestLCSEdgeCases:
    """Tests for LCS edge cases."""

    def test_empty_strings(self):
        assert fd.distance("", "", method="lcs") == 0
        assert fd.distance("abc", "", method="lcs") == 3
        assert fd.distance("", "abc", method="lcs") == 3
        assert edit.lcs_length((), encode("abc")) == 0

    def test_no_common(self):
        assert fd.distance("abc", "xyz", method="lcs") == 6
        assert edit.lcs_length(encode("abc"), encode("xyz")) == 0

    def test_bound(self):
        assert fd.distance("survey", "surgery", method="lcs", max_dist=3) == 3
        assert fd.distance("survey", "surgery", method="lcs", max_dist=2) == math.inf

    def test_length_gap_exceeds_bound(self):
        assert fd.distance("a", "abcdef", method="lcs", max_dist=4) == math.inf


class TestLCSLongStrings:
    """Tests for LCS with long strings."""

    def test_lcs_length_long_strings(self):
        long_a = "a" * 1000
        long_b = "a" * 500 + "b" * 500
        assert edit.lcs_length(encode(long_a), encode(long_b)) == 500

    def test_lcs_distance_long_strings(self):
        assert fd.distance("a" * 500, "a" * 250 + "b" * 250, method="lcs") == 500


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
