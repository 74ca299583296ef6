"""Enums for fuzzysim API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity and distance metrics.

    This enum provides type-safe metric selection for :func:`fuzzysim.get_scorer`
    and :func:`fuzzysim.score`. String values are accepted anywhere an
    ``Algorithm`` is.

    Example:
        >>> from fuzzysim import Algorithm, score
        >>> score("frog", "fog", algorithm=Algorithm.LEVENSHTEIN)
        1
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    LEVENSHTEIN_DETAILED = "levenshtein_detailed"
    """Edit distance with insert/delete/substitute counts (AlignmentResult)"""

    JARO = "jaro"
    """Jaro similarity, without the prefix bonus"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, good for names"""

    JACCARD = "jaccard"
    """Jaccard similarity of the two character sets"""

    JACCARD_DISTANCE = "jaccard_distance"
    """Complement of the Jaccard similarity"""

    HAMMING = "hamming"
    """Hamming distance (for equal-length strings)"""

    FUZZY = "fuzzy"
    """Editor-style fuzzy subsequence score (higher is closer)"""


__all__ = ["Algorithm"]
