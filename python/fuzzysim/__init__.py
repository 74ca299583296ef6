"""
FuzzySim - String similarity and edit distance metrics

A pure-Python library of character-sequence similarity metrics for ranking
or comparing strings, e.g. fuzzy command matching or record linkage. Every
metric is a stateless function of two sequences and is safe to call from
any number of threads.

Example usage:
    >>> import fuzzysim as fs

    # Edit distance, with the operations behind it
    >>> fs.levenshtein("kitten", "sitting")
    3
    >>> str(fs.levenshtein_detailed("frog", "fog"))
    'Distance: 1, Insert: 0, Delete: 1, Substitute: 0'

    # Only care whether two strings are within 2 edits
    >>> fs.levenshtein("kitten", "sitting", threshold=2)
    -1

    # Similarity scores
    >>> round(fs.jaro_winkler_similarity("hello", "hallo"), 2)
    0.88
    >>> fs.fuzzy_score("Workshop", "wo")
    4
"""

from importlib.metadata import version as _get_version

from fuzzysim._utils import create_array
from fuzzysim.cosine import cosine_similarity
from fuzzysim.enums import Algorithm
from fuzzysim.exceptions import (
    FuzzySimError,
    InvalidThresholdError,
    LengthMismatchError,
    NullInputError,
    ValidationError,
)
from fuzzysim.fuzzy import fuzzy_score
from fuzzysim.hamming import hamming_distance
from fuzzysim.jaccard import jaccard_distance, jaccard_similarity
from fuzzysim.jaro import jaro_similarity, jaro_winkler_distance, jaro_winkler_similarity
from fuzzysim.levenshtein import UNREACHABLE, levenshtein, levenshtein_detailed
from fuzzysim.results import NO_ALIGNMENT, AlignmentResult
from fuzzysim.scoring import EditDistance, SimilarityScore, get_scorer, score

__version__ = _get_version("fuzzysim")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FuzzySimError",
    "ValidationError",
    "NullInputError",
    "InvalidThresholdError",
    "LengthMismatchError",
    # Result types
    "AlignmentResult",
    "NO_ALIGNMENT",
    # Enums
    "Algorithm",
    # Contracts and dispatch
    "SimilarityScore",
    "EditDistance",
    "get_scorer",
    "score",
    # Edit distance
    "levenshtein",
    "levenshtein_detailed",
    "UNREACHABLE",
    "hamming_distance",
    # Similarity
    "jaro_similarity",
    "jaro_winkler_similarity",
    "jaro_winkler_distance",
    "jaccard_similarity",
    "jaccard_distance",
    "cosine_similarity",
    "fuzzy_score",
    # Utilities
    "create_array",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity
