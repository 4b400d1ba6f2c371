"""Tests for edit distance algorithms: Levenshtein, OSA, Damerau-Levenshtein and Hamming.

This module tests the edit distance engine directly on encoded sequences and
through the string-level `distance` entry point, including weights and bounds.
"""

import math

import pytest

import fuzzydist as fd
from fuzzydist import edit
from fuzzydist.edit import Weights
from fuzzydist.sequence import encode


class TestLevenshtein:
    """Tests for Levenshtein distance."""

    def test_identical_strings(self):
        assert fd.distance("hello", "hello", method="lv") == 0
        assert fd.distance("", "", method="lv") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert fd.distance("hello", "", method="lv") == 5, "Distance to empty string equals string length"
        assert fd.distance("", "hello", method="lv") == 5, "Distance from empty string equals target length"

    def test_classic_examples(self):
        # kitten -> sitten (s for k) -> sittin (i for e) -> sitting (g added) = 3 edits
        assert fd.distance("kitten", "sitting", method="lv") == 3
        assert fd.distance("saturday", "sunday", method="lv") == 3

    def test_unicode(self):
        # Multi-byte characters count as a single element
        assert fd.distance("café", "cafe", method="lv") == 1
        assert fd.distance("日本語", "日本", method="lv") == 1

    def test_transposition_costs_two(self):
        assert fd.distance("ab", "ba", method="lv") == 2

    def test_returns_float(self):
        result = edit.levenshtein(encode("abc"), encode("abd"))
        assert isinstance(result, float)
        assert result == 1.0

    def test_weighted_substitution(self):
        result = fd.distance("abc", "abd", method="lv", weight=(1, 1, 0.5, 1))
        assert result == 0.5

    def test_substitution_never_costlier_than_delete_insert(self):
        # With cheap deletions and insertions, a substitution is replaced by both
        result = fd.distance("a", "b", method="lv", weight=(0.1, 0.1, 1, 1))
        assert result == pytest.approx(0.2)


class TestWeightAsymmetry:
    """Unequal deletion and insertion weights make edit distances asymmetric."""

    def test_levenshtein_asymmetric(self):
        w = (0.5, 1, 1, 1)
        # "abc" -> "ca": delete a and b (0.5 each), insert a (1)
        assert fd.distance("ca", "abc", method="lv", weight=w) == 2.0
        # "ca" -> "abc": delete c (0.5), insert b and c (1 each)
        assert fd.distance("abc", "ca", method="lv", weight=w) == 2.5

    def test_osa_asymmetric(self):
        w = (0.5, 1, 1, 1)
        assert fd.distance("ca", "abc", weight=w) == 2.0
        assert fd.distance("abc", "ca", weight=w) == 2.5

    def test_dl_asymmetric(self):
        w = (0.5, 1, 1, 1)
        # "abc" -> "ac" (delete b, 0.5) -> "ca" (transpose, 1)
        assert fd.distance("ca", "abc", method="dl", weight=w) == 1.5
        assert fd.distance("abc", "ca", method="dl", weight=w) != 1.5

    def test_unit_weights_symmetric(self):
        for method in ("lv", "osa", "dl"):
            assert fd.distance("kitten", "sitting", method=method) == fd.distance(
                "sitting", "kitten", method=method
            )

    def test_orientation_does_not_change_result(self):
        # Rows are laid over the shorter operand; swapping must swap the weights too
        w = Weights(0.3, 0.7, 0.9, 0.4)
        a, b = encode("abcdefg"), encode("xbd")
        assert edit.levenshtein(a, b, w) == pytest.approx(4 * 0.7 + 0.9 * 1 + 0 * 0.3)
        assert edit.levenshtein(b, a, w) == pytest.approx(4 * 0.3 + 0.9 * 1)


class TestOSA:
    """Tests for optimal string alignment distance."""

    def test_adjacent_transposition(self):
        assert fd.distance("ab", "ba") == 1
        assert fd.distance("abcd", "abdc") == 1

    def test_substring_edited_once(self):
        # The transposed "ac" cannot receive the inserted "b" in between
        assert fd.distance("ca", "abc") == 3

    def test_weighted_transposition(self):
        assert fd.distance("ab", "ba", weight=(1, 1, 1, 0.5)) == 0.5

    def test_transposition_weight_ignored_by_levenshtein(self):
        assert fd.distance("ab", "ba", method="lv", weight=(1, 1, 1, 0.5)) == 2


class TestDamerauLevenshtein:
    """Tests for the full Damerau-Levenshtein distance."""

    def test_ca_abc(self):
        # Transposition-aware result differs from OSA
        assert fd.distance("ca", "abc", method="dl") == 2
        assert fd.distance("abc", "ca", method="dl") == 2

    def test_transposition(self):
        assert fd.distance("ab", "ba", method="dl") == 1
        assert fd.distance("ca", "ac", method="dl") == 1

    def test_repeated_characters(self):
        assert fd.distance("abab", "baba", method="dl") == 2
        assert fd.distance("aaaa", "aaaa", method="dl") == 0

    def test_known_values(self):
        assert fd.distance("a cat", "an act", method="dl") == 2
        assert fd.distance("abcdef", "badcfe", method="dl") == 3
        assert fd.distance("", "abc", method="dl") == 3
        assert fd.distance("abc", "", method="dl") == 3

    def test_not_larger_than_osa(self):
        pairs = [("ca", "abc"), ("abcdef", "bcdafe"), ("tears", "stare"), ("xabcy", "ybcax")]
        for a, b in pairs:
            assert fd.distance(a, b, method="dl") <= fd.distance(a, b, method="osa")

    def test_long_strings(self):
        long_a = "a" * 300
        long_b = "b" * 300
        assert fd.distance(long_a, long_b, method="dl") == 300


class TestBounds:
    """Tests for max_dist handling of the edit distances."""

    @pytest.mark.parametrize("method", ["lv", "osa", "dl"])
    def test_exceeded_returns_inf(self, method):
        assert fd.distance("abcdef", "ghijkl", method=method, max_dist=3) == math.inf
        assert fd.distance("abcdef", "ghijkl", method=method, max_dist=5) == math.inf

    @pytest.mark.parametrize("method", ["lv", "osa", "dl"])
    def test_within_bound_returns_distance(self, method):
        assert fd.distance("abcdef", "ghijkl", method=method, max_dist=6) == 6
        assert fd.distance("abc", "abd", method=method, max_dist=2) == 1

    @pytest.mark.parametrize("method", ["lv", "osa", "dl", "hamming", "lcs"])
    def test_zero_bound_allows_exact_match(self, method):
        assert fd.distance("same", "same", method=method, max_dist=0) == 0
        assert fd.distance("same", "sane", method=method, max_dist=0) == math.inf

    def test_infinite_bound_is_unbounded(self):
        assert fd.distance("abcdef", "ghijkl", method="lv", max_dist=math.inf) == 6

    def test_length_gap_exceeds_bound(self):
        assert fd.distance("a", "abcdefgh", method="lv", max_dist=3) == math.inf

    def test_osa_transposition_across_pruned_row(self):
        # Both transpositions sit right at the bound
        assert fd.distance("abcd", "badc", max_dist=2) == 2
        assert fd.distance("abcd", "badc", max_dist=1.5) == math.inf

    def test_bound_with_weights(self):
        assert fd.distance("ab", "ba", weight=(1, 1, 1, 0.5), max_dist=0.5) == 0.5
        assert fd.distance("ab", "ba", weight=(1, 1, 1, 0.5), max_dist=0.4) == math.inf


class TestHamming:
    """Tests for Hamming distance."""

    def test_equal_length(self):
        assert fd.distance("karolin", "kathrin", method="hamming") == 3
        assert fd.distance("abc", "abc", method="hamming") == 0

    def test_case_sensitive(self):
        assert fd.distance("hello", "HeLl0", method="hamming") == 3

    def test_unequal_length_is_inf(self):
        assert fd.distance("ab", "abc", method="hamming") == math.inf
        assert fd.distance("abc", "ab", method="hamming") == math.inf

    def test_empty(self):
        assert fd.distance("", "", method="hamming") == 0

    def test_bounded(self):
        assert fd.distance("karolin", "kathrin", method="hamming", max_dist=2) == math.inf
        assert fd.distance("karolin", "kathrin", method="hamming", max_dist=3) == 3

    def test_weights_ignored(self):
        assert fd.distance("abc", "abd", method="hamming", weight=(0.5, 0.5, 0.5, 0.5)) == 1


class TestVeryLongStrings:
    """Long inputs complete with the rolling-row algorithms."""

    def test_levenshtein_long_strings(self):
        assert fd.distance("a" * 1000, "b" * 1000, method="lv") == 1000

    def test_osa_long_strings_bounded(self):
        # The bound stops the computation after the first rows
        assert fd.distance("a" * 2000, "b" * 2000, method="osa", max_dist=2) == math.inf


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
