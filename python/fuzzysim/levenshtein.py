"""Levenshtein edit distance.

Two entry points share one dynamic program:

- :func:`levenshtein` returns the scalar distance using two rolling rows.
- :func:`levenshtein_detailed` additionally keeps the whole cost matrix and
  walks it backwards to split the distance into inserts, deletes and
  substitutions.

Both accept an optional ``threshold``. With a threshold ``k`` only a diagonal
band of width ``2k + 1`` is evaluated, so the work drops from ``O(n*m)`` to
``O(k*m)``. Any alignment of cost ``<= k`` never strays more than ``k`` cells
from the main diagonal, so the band is exact for every answer that matters;
anything outside it holds :data:`UNREACHABLE` and never wins a ``min``.

The shorter operand is always placed on the inner (column) axis to keep the
rows small. This only changes memory layout: the backtrace is told about the
swap and reports counts for turning the caller's ``left`` into ``right``.

Example:
    >>> levenshtein("kitten", "sitting")
    3
    >>> levenshtein("kitten", "sitting", threshold=2)
    -1
    >>> levenshtein_detailed("frog", "fog")
    AlignmentResult(distance=1, insert_count=0, delete_count=1, substitute_count=0)
"""

import sys
from typing import List, Optional, Sequence, Tuple

from fuzzysim._utils import check_not_none, create_array
from fuzzysim.exceptions import InvalidThresholdError
from fuzzysim.results import NO_ALIGNMENT, AlignmentResult

UNREACHABLE = sys.maxsize
"""Marker for cost cells outside the evaluated band."""

# Neighbour value for cells off the edge of the matrix during backtrace
_OFF_MATRIX = -1

Matrix = List[List[int]]


def levenshtein(
    left: Sequence,
    right: Sequence,
    threshold: Optional[int] = None,
) -> int:
    """Compute the Levenshtein distance between two sequences.

    Args:
        left: First sequence, must not be None.
        right: Second sequence, must not be None.
        threshold: If given, only distances up to this value are computed and
            -1 is returned for anything larger. Must be a non-negative int.

    Returns:
        The edit distance, or -1 when it exceeds ``threshold``.

    Raises:
        NullInputError: If either sequence is None.
        InvalidThresholdError: If threshold is negative or not an int.

    Example:
        >>> levenshtein("elephant", "hippo")
        7
        >>> levenshtein("elephant", "hippo", threshold=6)
        -1
    """
    _check_arguments(left, right, threshold)

    if len(left) == 0 or len(right) == 0:
        return _against_empty(len(left), len(right), threshold).distance

    shorter, longer, _ = _orient(left, right)
    if threshold is None:
        return _fill_full(shorter, longer)
    return _fill_banded(shorter, longer, threshold)


def levenshtein_detailed(
    left: Sequence,
    right: Sequence,
    threshold: Optional[int] = None,
) -> AlignmentResult:
    """Compute the Levenshtein distance and the edit operations behind it.

    The counts describe one minimal edit script turning ``left`` into
    ``right``. Where several minimal scripts exist the backtrace prefers, in
    order: consuming a character of the shorter operand alone, consuming a
    character of the longer operand alone, then a substitution. The total is
    the same either way; only the split between the counts can differ.

    Args:
        left: Sequence to transform, must not be None.
        right: Target sequence, must not be None.
        threshold: If given, give up on distances larger than this value.
            Must be a non-negative int.

    Returns:
        An AlignmentResult. When the distance exceeds ``threshold`` this is
        :data:`~fuzzysim.results.NO_ALIGNMENT` (distance -1, all counts 0).

    Raises:
        NullInputError: If either sequence is None.
        InvalidThresholdError: If threshold is negative or not an int.

    Example:
        >>> levenshtein_detailed("fog", "frog")
        AlignmentResult(distance=1, insert_count=1, delete_count=0, substitute_count=0)
        >>> levenshtein_detailed("aaapppp", "", threshold=6)
        AlignmentResult(distance=-1, insert_count=0, delete_count=0, substitute_count=0)
    """
    _check_arguments(left, right, threshold)

    if len(left) == 0 or len(right) == 0:
        return _against_empty(len(left), len(right), threshold)

    shorter, longer, swapped = _orient(left, right)
    if threshold is None:
        matrix = _new_matrix(len(shorter), len(longer), 0)
        _fill_full(shorter, longer, matrix)
    else:
        matrix = _new_matrix(len(shorter), len(longer), UNREACHABLE)
        if _fill_banded(shorter, longer, threshold, matrix) < 0:
            return NO_ALIGNMENT
    return _backtrace(shorter, longer, matrix, swapped)


def _check_arguments(left: Sequence, right: Sequence, threshold: Optional[int]) -> None:
    check_not_none(left, right)
    if threshold is None:
        return
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidThresholdError(
            f"threshold must be an integer, got {type(threshold).__name__}"
        )
    if threshold < 0:
        raise InvalidThresholdError(f"threshold must not be negative, got {threshold}")


def _against_empty(n: int, m: int, threshold: Optional[int]) -> AlignmentResult:
    """Distance when at least one side is empty: all inserts or all deletes."""
    if n == 0:
        result = AlignmentResult(m, insert_count=m)
    else:
        result = AlignmentResult(n, delete_count=n)
    if threshold is not None and result.distance > threshold:
        return NO_ALIGNMENT
    return result


def _orient(left: Sequence, right: Sequence) -> Tuple[Sequence, Sequence, bool]:
    """Return (shorter, longer, swapped) without touching the inputs."""
    if len(left) > len(right):
        return right, left, True
    return left, right, False


def _new_matrix(n: int, m: int, fill: int) -> Matrix:
    """Allocate an (m + 1) x (n + 1) cost matrix with its first row and column set."""
    matrix = create_array(m + 1, lambda row: create_array(n + 1, fill))
    matrix[0] = create_array(n + 1, lambda col: col)
    for row in range(m + 1):
        matrix[row][0] = row
    return matrix


def _fill_full(left: Sequence, right: Sequence, matrix: Optional[Matrix] = None) -> int:
    """Run the unbounded DP, ``left`` being the shorter side.

    Rows are indexed by ``right``, columns by ``left``. When ``matrix`` is
    given every computed row is copied into it.
    """
    n = len(left)
    previous = create_array(n + 1, lambda i: i)
    current = create_array(n + 1, 0)

    for j in range(1, len(right) + 1):
        right_j = right[j - 1]
        current[0] = j
        for i in range(1, n + 1):
            cost = 0 if left[i - 1] == right_j else 1
            current[i] = min(current[i - 1] + 1, previous[i] + 1, previous[i - 1] + cost)
        if matrix is not None:
            matrix[j][1:] = current[1:]
        previous, current = current, previous

    return previous[n]


def _fill_banded(
    left: Sequence,
    right: Sequence,
    threshold: int,
    matrix: Optional[Matrix] = None,
) -> int:
    """Run the DP restricted to the diagonal band ``|i - j| <= threshold``.

    Returns the distance, or -1 as soon as it is known to exceed ``threshold``.
    """
    n = len(left)
    boundary = min(n, threshold)
    # Past the boundary the first row is out of band, which also keeps the
    # cell above the band's right edge unreachable on later rows.
    previous = create_array(n + 1, lambda i: i if i <= boundary else UNREACHABLE)
    current = create_array(n + 1, UNREACHABLE)

    for j in range(1, len(right) + 1):
        right_j = right[j - 1]
        current[0] = j

        lo = max(1, j - threshold)
        hi = min(n, j + threshold)
        # The band has run off the matrix: the length difference alone
        # already exceeds the threshold.
        if lo > hi:
            return -1

        # Stale value from two rows back
        if lo > 1:
            current[lo - 1] = UNREACHABLE

        for i in range(lo, hi + 1):
            if left[i - 1] == right_j:
                current[i] = previous[i - 1]
            else:
                current[i] = 1 + min(current[i - 1], previous[i], previous[i - 1])
        if matrix is not None:
            matrix[j][lo : hi + 1] = current[lo : hi + 1]
        previous, current = current, previous

    if previous[n] <= threshold:
        return previous[n]
    return -1


def _backtrace(left: Sequence, right: Sequence, matrix: Matrix, swapped: bool) -> AlignmentResult:
    """Walk the cost matrix from its last cell back to the origin, counting edits.

    ``left``/``right`` are the oriented operands the matrix was built from.
    A step to the left consumes a character of ``left`` only, a step up
    consumes a character of ``right`` only. Which of those is an insert and
    which a delete depends on whether the caller's operands were swapped.
    """
    inserted = deleted = substituted = 0
    row, col = len(right), len(left)

    while row >= 0 and col >= 0:
        at_left = matrix[row][col - 1] if col > 0 else _OFF_MATRIX
        at_top = matrix[row - 1][col] if row > 0 else _OFF_MATRIX
        at_diagonal = matrix[row - 1][col - 1] if row > 0 and col > 0 else _OFF_MATRIX
        if at_left == _OFF_MATRIX and at_top == _OFF_MATRIX and at_diagonal == _OFF_MATRIX:
            break

        if row > 0 and col > 0 and left[col - 1] == right[row - 1]:
            row -= 1
            col -= 1
            continue

        data = matrix[row][col]
        if (at_left == data - 1 and at_left <= at_top and at_left <= at_diagonal) or (
            at_top == _OFF_MATRIX and at_diagonal == _OFF_MATRIX
        ):
            col -= 1
            if swapped:
                inserted += 1
            else:
                deleted += 1
        elif (at_top == data - 1 and at_top <= at_left and at_top <= at_diagonal) or (
            at_left == _OFF_MATRIX and at_diagonal == _OFF_MATRIX
        ):
            row -= 1
            if swapped:
                deleted += 1
            else:
                inserted += 1
        else:
            row -= 1
            col -= 1
            substituted += 1

    return AlignmentResult(
        inserted + deleted + substituted,
        insert_count=inserted,
        delete_count=deleted,
        substitute_count=substituted,
    )


__all__ = ["levenshtein", "levenshtein_detailed", "UNREACHABLE"]
