"""Scorer contracts and name-based dispatch.

Every metric in fuzzysim is a plain function of two sequences, so the
contracts below are structural: any callable with the right shape satisfies
them, no subclassing required.

Example:
    >>> from fuzzysim import Algorithm, get_scorer, score
    >>> scorer = get_scorer(Algorithm.JARO_WINKLER)
    >>> round(scorer("hello", "hallo"), 2)
    0.88
    >>> sorted(["getUser", "box", "getAll"], key=lambda c: -score("geU", c, "jaro_winkler"))[0]
    'getUser'
"""

from typing import Any, Callable, Dict, Protocol, Sequence, TypeVar, Union, runtime_checkable

from fuzzysim._utils import normalize_algorithm
from fuzzysim.enums import Algorithm
from fuzzysim.fuzzy import fuzzy_score
from fuzzysim.hamming import hamming_distance
from fuzzysim.jaccard import jaccard_distance, jaccard_similarity
from fuzzysim.jaro import jaro_similarity, jaro_winkler_similarity
from fuzzysim.levenshtein import levenshtein, levenshtein_detailed

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class SimilarityScore(Protocol[R_co]):
    """A score comparing two sequences.

    Scores are meant to have *some* of the properties of a metric: they are
    non-negative and usually symmetric. Jaro-Winkler is the documented
    exception, its prefix bonus reads the arguments in order.
    """

    def __call__(self, left: Sequence, right: Sequence) -> R_co: ...


@runtime_checkable
class EditDistance(SimilarityScore[R_co], Protocol[R_co]):
    """A similarity score that counts edits.

    Implementations return non-negative integer-like scores and satisfy
    ``d(a, b) == d(b, a)``. Bounded variants may return -1 for "further apart
    than the bound".
    """

    def __call__(self, left: Sequence, right: Sequence) -> R_co: ...


_SCORERS: Dict[str, Callable[[Any, Any], Any]] = {
    Algorithm.LEVENSHTEIN.value: levenshtein,
    Algorithm.LEVENSHTEIN_DETAILED.value: levenshtein_detailed,
    Algorithm.JARO.value: jaro_similarity,
    Algorithm.JARO_WINKLER.value: jaro_winkler_similarity,
    Algorithm.JACCARD.value: jaccard_similarity,
    Algorithm.JACCARD_DISTANCE.value: jaccard_distance,
    Algorithm.HAMMING.value: hamming_distance,
    Algorithm.FUZZY.value: fuzzy_score,
}


def get_scorer(algorithm: Union[str, Algorithm]) -> SimilarityScore[Any]:
    """Look up the scoring function for an algorithm.

    Args:
        algorithm: Algorithm enum or its (case-insensitive) string value.

    Returns:
        The two-argument scoring function.

    Raises:
        ValueError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.
    """
    return _SCORERS[normalize_algorithm(algorithm)]


def score(
    left: Sequence,
    right: Sequence,
    algorithm: Union[str, Algorithm] = "jaro_winkler",
) -> Any:
    """Compare two sequences with the given algorithm.

    Example:
        >>> score("frog", "fog", algorithm="levenshtein")
        1
    """
    return get_scorer(algorithm)(left, right)


__all__ = ["SimilarityScore", "EditDistance", "get_scorer", "score"]
