"""Tests for the single-pass metrics: Jaccard, cosine, Hamming and fuzzy score."""

from collections import Counter

import pytest

import fuzzysim as fs


class TestJaccardSimilarity:
    """Tests for Jaccard similarity over character sets."""

    def test_identical(self):
        assert fs.jaccard_similarity("abc", "abc") == 1.0

    def test_empty(self):
        assert fs.jaccard_similarity("", "") == 0.0
        assert fs.jaccard_similarity("abc", "") == 0.0
        assert fs.jaccard_similarity("", "abc") == 0.0

    def test_disjoint(self):
        assert fs.jaccard_similarity("abc", "xyz") == 0.0

    def test_partial_overlap(self):
        assert fs.jaccard_similarity("abcd", "ab") == 0.5
        assert fs.jaccard_similarity("ab", "abc") == 0.67

    def test_sets_ignore_repeats(self):
        assert fs.jaccard_similarity("aaab", "ab") == 1.0

    def test_rounds_half_up(self):
        # {l,e,f,t} vs {r,i,g,h,t}: 1 shared out of 8 = 0.125, which banker's rounding would make 0.12
        assert fs.jaccard_similarity("left", "right") == 0.13


class TestJaccardDistance:
    """Tests for Jaccard distance."""

    def test_identical(self):
        assert fs.jaccard_distance("abc", "abc") == 0.0

    def test_empty(self):
        assert fs.jaccard_distance("", "") == 1.0

    def test_partial_overlap(self):
        assert fs.jaccard_distance("ab", "abc") == 0.33
        assert fs.jaccard_distance("abcd", "ab") == 0.5

    def test_ranks_commands(self, commands, command_query):
        ranked = sorted(commands, key=lambda c: fs.jaccard_distance(command_query, c))
        assert ranked[0] == "getUser"


class TestCosineSimilarity:
    """Tests for cosine similarity of sparse vectors."""

    def test_identical(self):
        vector = Counter("hello world hello".split())
        assert fs.cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_disjoint(self):
        assert fs.cosine_similarity({"a": 1}, {"b": 1}) == 0.0

    def test_empty(self):
        assert fs.cosine_similarity({}, {}) == 0.0
        assert fs.cosine_similarity({"a": 1}, {}) == 0.0

    def test_zero_weights(self):
        assert fs.cosine_similarity({"a": 0}, {"a": 1}) == 0.0

    def test_partial_overlap(self):
        assert fs.cosine_similarity({"a": 1, "b": 1}, {"a": 1}) == pytest.approx(2**-0.5)
        sim = fs.cosine_similarity(Counter("hello world".split()), Counter("hello there".split()))
        assert sim == pytest.approx(0.5)

    def test_weights(self):
        # (3*4) / (5 * 4)
        assert fs.cosine_similarity({"x": 3, "y": 4}, {"x": 4}) == pytest.approx(0.6)

    def test_none_raises(self):
        with pytest.raises(fs.NullInputError, match="vectors must not be None"):
            fs.cosine_similarity(None, {"a": 1})


class TestHammingDistance:
    """Tests for Hamming distance."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("", "", 0),
            ("pappa", "pappa", 0),
            ("1011101", "1011111", 1),
            ("ATCG", "ACCC", 2),
            ("karolin", "kerstin", 3),
        ],
    )
    def test_reference_scenarios(self, left, right, expected):
        assert fs.hamming_distance(left, right) == expected

    def test_unequal_length_raises(self):
        with pytest.raises(fs.LengthMismatchError, match="same length"):
            fs.hamming_distance("abc", "ab")
        with pytest.raises(fs.ValidationError):
            fs.hamming_distance("ab", "abc")


class TestFuzzyScore:
    """Tests for the editor-style fuzzy score."""

    @pytest.mark.parametrize(
        "term,query,expected",
        [
            ("", "", 0),
            ("Workshop", "b", 0),
            ("Room", "o", 1),
            ("Workshop", "w", 1),
            ("Workshop", "ws", 2),
            ("Workshop", "wo", 4),
            ("Apache Software Foundation", "asf", 3),
        ],
    )
    def test_reference_scenarios(self, term, query, expected):
        assert fs.fuzzy_score(term, query) == expected

    def test_case_insensitive(self):
        assert fs.fuzzy_score("WORKSHOP", "wo") == fs.fuzzy_score("workshop", "WO") == 4

    def test_no_bonus_for_first_match(self):
        # "o" is matched at index 1; there is no previous match to be adjacent to
        assert fs.fuzzy_score("Room", "oo") == 4

    def test_miss_ends_scan(self):
        # "x" is not in the term, so the trailing "w" cannot match either
        assert fs.fuzzy_score("Workshop", "wxw") == 1

    def test_ranks_commands(self, commands, command_query):
        ranked = sorted(commands, key=lambda c: -fs.fuzzy_score(command_query, c))
        assert ranked[0] == "getUser"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
