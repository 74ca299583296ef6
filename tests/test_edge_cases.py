"""
Edge case tests for FuzzySim.

Tests cover:
- Empty strings
- Long and very unequal strings
- Unicode edge cases (combining chars, ZWJ sequences, astral plane)
- Adversarial inputs (repeated patterns)
- Special characters
"""

import pytest

import fuzzysim as fs
from fuzzysim import AlignmentResult


class TestEmptyStrings:
    """Tests for empty string handling."""

    def test_levenshtein_empty_empty(self):
        assert fs.levenshtein("", "") == 0
        assert fs.levenshtein_detailed("", "") == AlignmentResult(0, 0, 0, 0)

    def test_levenshtein_empty_nonempty(self):
        assert fs.levenshtein("", "abc") == 3
        assert fs.levenshtein("abc", "") == 3

    def test_jaro_winkler_empty(self):
        assert fs.jaro_winkler_similarity("", "") == 0.0
        assert fs.jaro_winkler_similarity("", "abc") == 0.0
        assert fs.jaro_winkler_similarity("abc", "") == 0.0

    def test_fuzzy_score_empty(self):
        assert fs.fuzzy_score("", "abc") == 0
        assert fs.fuzzy_score("abc", "") == 0


class TestVeryLongStrings:
    """Tests for long and lopsided inputs."""

    def test_levenshtein_asymmetric_lengths(self):
        short = "abc"
        long_str = "x" * 5000 + "abc"
        assert fs.levenshtein(short, long_str) == 5000
        assert fs.levenshtein_detailed(short, long_str) == AlignmentResult(5000, 5000, 0, 0)
        assert fs.levenshtein_detailed(long_str, short) == AlignmentResult(5000, 0, 5000, 0)

    def test_bounded_asymmetric_lengths_exit_early(self):
        assert fs.levenshtein("abc", "x" * 5000, threshold=10) == -1
        assert fs.levenshtein_detailed("x" * 5000, "abc", threshold=10) == fs.NO_ALIGNMENT

    def test_repeated_pattern(self):
        """Highly repetitive input has many equal-cost paths; the total stays exact."""
        a = "ab" * 200
        b = "ba" * 200
        result = fs.levenshtein_detailed(a, b)
        assert result.distance == 2
        assert result.insert_count + result.delete_count + result.substitute_count == 2


class TestUnicodeEdgeCases:
    """Tests for Unicode edge cases. Comparison is per code point."""

    def test_combining_characters(self):
        composed = "é"  # Single codepoint U+00E9
        decomposed = "é"  # e + combining acute (2 codepoints)
        # Distance is 2: é -> e substitution plus inserting the combining accent
        assert fs.levenshtein(composed, decomposed) == 2

    def test_emoji(self):
        s1 = "Hello 👋"
        s2 = "Hello 👋"
        assert fs.levenshtein(s1, s2) == 0
        assert fs.jaro_winkler_similarity(s1, s2) == 1.0

    def test_emoji_zwj_sequences(self):
        # 👨 + ZWJ + 👩 + ZWJ + 👧 + ZWJ + 👦 = 7 codepoints
        family = "👨‍👩‍👧‍👦"
        single = "👨"
        assert fs.levenshtein(family, single) == 6
        assert fs.levenshtein_detailed(family, single) == AlignmentResult(6, 0, 6, 0)
        assert fs.jaro_winkler_similarity(family, family) == 1.0

    def test_rtl_characters(self):
        arabic = "مرحبا"  # 5 characters
        hebrew = "שלום"  # 4 characters
        # Replace 4 + delete 1
        assert fs.levenshtein_detailed(arabic, hebrew) == AlignmentResult(5, 0, 1, 4)

    def test_astral_plane(self):
        s1 = "𝕳𝖊𝖑𝖑𝖔"
        s2 = "Hello"
        assert fs.levenshtein(s1, s2) == 5
        assert fs.hamming_distance(s1, s2) == 5

    def test_case_sensitive(self):
        assert fs.levenshtein("Hello", "hello") == 1
        assert fs.jaccard_similarity("A", "a") == 0.0

    @pytest.mark.parametrize("s", ["hello\x00world", "hello\nworld\ttab"])
    def test_control_characters(self, s):
        assert fs.levenshtein(s, s) == 0
        assert fs.jaro_winkler_similarity(s, s) == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
