"""Jaro and Jaro-Winkler similarity.

The Jaro measure combines the share of matched characters from each side with
the number of matched characters that appear out of order. Winkler's variant
rewards a common prefix of up to four characters.

The prefix is read from the arguments in the order given, so
``jaro_winkler_similarity(a, b)`` scans ``a`` and ``b`` position by position.
The Jaro part itself is symmetric.
"""

import warnings
from typing import NamedTuple, Sequence

from fuzzysim._utils import check_not_none, create_array

# Winkler's scaling factor for the common-prefix bonus
PREFIX_SCALE = 0.1

# Longest prefix that earns a bonus
MAX_PREFIX = 4

# Jaro score below which the prefix bonus is not applied
BOOST_THRESHOLD = 0.7

_NO_MATCH = -1


class _MatchStats(NamedTuple):
    matches: int
    half_transpositions: int
    prefix: int


def jaro_similarity(left: Sequence, right: Sequence) -> float:
    """Compute the Jaro similarity of two sequences.

    Args:
        left: First sequence, must not be None.
        right: Second sequence, must not be None.

    Returns:
        Similarity in [0.0, 1.0]. 0.0 when nothing matches, including when
        either side is empty.

    Raises:
        NullInputError: If either sequence is None.

    Example:
        >>> round(jaro_similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """
    check_not_none(left, right)
    return _jaro(left, right, _matches(left, right))


def jaro_winkler_similarity(left: Sequence, right: Sequence) -> float:
    """Compute the Jaro-Winkler similarity of two sequences.

    Args:
        left: First sequence, must not be None.
        right: Second sequence, must not be None.

    Returns:
        Similarity in [0.0, 1.0]. 0.0 when nothing matches, including when
        either side is empty.

    Raises:
        NullInputError: If either sequence is None.

    Example:
        >>> round(jaro_winkler_similarity("frog", "fog"), 2)
        0.93
        >>> round(jaro_winkler_similarity("elephant", "hippo"), 2)
        0.44
        >>> jaro_winkler_similarity("", "a")
        0.0
    """
    check_not_none(left, right)
    stats = _matches(left, right)
    j = _jaro(left, right, stats)
    if j < BOOST_THRESHOLD:
        return j
    return j + PREFIX_SCALE * stats.prefix * (1.0 - j)


def jaro_winkler_distance(left: Sequence, right: Sequence) -> float:
    """Deprecated: Use jaro_winkler_similarity() instead.

    Despite its name this has always returned a similarity (1.0 for equal
    sequences), not a distance.

    .. deprecated:: 0.2.0
        Use :func:`jaro_winkler_similarity` instead.
    """
    warnings.warn(
        "jaro_winkler_distance() is deprecated and will be removed in a future version. "
        "Use jaro_winkler_similarity() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return jaro_winkler_similarity(left, right)


def _jaro(left: Sequence, right: Sequence, stats: _MatchStats) -> float:
    m = stats.matches
    if m == 0:
        return 0.0
    return (m / len(left) + m / len(right) + (m - stats.half_transpositions / 2) / m) / 3


def _matches(first: Sequence, second: Sequence) -> _MatchStats:
    """Count matches, half transpositions and common prefix length."""
    if len(first) > len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first

    window = max(len(longer) // 2 - 1, 0)
    match_indexes = create_array(len(shorter), _NO_MATCH)
    match_flags = create_array(len(longer), False)
    matches = 0

    for si, c in enumerate(shorter):
        for li in range(max(si - window, 0), min(si + window + 1, len(longer))):
            if not match_flags[li] and c == longer[li]:
                match_indexes[si] = li
                match_flags[li] = True
                matches += 1
                break

    shorter_matched = [c for c, li in zip(shorter, match_indexes) if li != _NO_MATCH]
    longer_matched = [c for c, flag in zip(longer, match_flags) if flag]
    half_transpositions = sum(1 for a, b in zip(shorter_matched, longer_matched) if a != b)

    prefix = 0
    for i in range(min(MAX_PREFIX, len(shorter))):
        if first[i] != second[i]:
            break
        prefix += 1

    return _MatchStats(matches, half_transpositions, prefix)


__all__ = ["jaro_similarity", "jaro_winkler_similarity", "jaro_winkler_distance"]
