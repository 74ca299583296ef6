"""Hamming distance between sequences of equal length."""

from typing import Sequence

from fuzzysim._utils import check_not_none
from fuzzysim.exceptions import LengthMismatchError


def hamming_distance(left: Sequence, right: Sequence) -> int:
    """Count the positions at which two equal-length sequences differ.

    Raises:
        NullInputError: If either sequence is None.
        LengthMismatchError: If the sequences differ in length.

    Example:
        >>> hamming_distance("karolin", "kerstin")
        3
        >>> hamming_distance("1011101", "1011111")
        1
    """
    check_not_none(left, right)
    if len(left) != len(right):
        raise LengthMismatchError(
            f"sequences must have the same length, got {len(left)} and {len(right)}"
        )
    return sum(1 for a, b in zip(left, right) if a != b)


__all__ = ["hamming_distance"]
