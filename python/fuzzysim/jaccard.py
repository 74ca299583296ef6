"""Jaccard similarity and distance over the character sets of two sequences."""

from typing import Sequence

from fuzzysim._utils import check_not_none, round_half_up


def jaccard_similarity(left: Sequence, right: Sequence) -> float:
    """Size of the intersection over size of the union of the two character sets.

    The result is rounded half-up to two decimals.

    Raises:
        NullInputError: If either sequence is None.

    Example:
        >>> jaccard_similarity("ab", "abc")
        0.67
        >>> jaccard_similarity("", "abc")
        0.0
    """
    check_not_none(left, right)
    return round_half_up(_jaccard(left, right))


def jaccard_distance(left: Sequence, right: Sequence) -> float:
    """Complement of :func:`jaccard_similarity`, rounded half-up to two decimals.

    Example:
        >>> jaccard_distance("ab", "abc")
        0.33
    """
    check_not_none(left, right)
    return round_half_up(1.0 - jaccard_similarity(left, right))


def _jaccard(left: Sequence, right: Sequence) -> float:
    if len(left) == 0 or len(right) == 0:
        return 0.0
    left_set = set(left)
    right_set = set(right)
    return len(left_set & right_set) / len(left_set | right_set)


__all__ = ["jaccard_similarity", "jaccard_distance"]
