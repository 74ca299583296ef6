"""Result types returned by the Levenshtein engine."""

from dataclasses import dataclass

from fuzzysim.exceptions import ValidationError


@dataclass(frozen=True)
class AlignmentResult:
    """Edit distance between two sequences, split by operation.

    The counts describe how to turn the *left* argument into the *right*
    argument. When ``distance`` is non-negative it always equals
    ``insert_count + delete_count + substitute_count``.

    A bounded search that found nothing within its threshold is reported as
    ``distance == -1`` with every count at zero (see :data:`NO_ALIGNMENT`).
    Callers should read that as "too far apart", not as a failure.

    Attributes:
        distance: Total number of edits, or -1.
        insert_count: Characters inserted into left.
        delete_count: Characters deleted from left.
        substitute_count: Characters of left replaced by another.

    Example:
        >>> from fuzzysim import levenshtein_detailed
        >>> levenshtein_detailed("frog", "fog")
        AlignmentResult(distance=1, insert_count=0, delete_count=1, substitute_count=0)
    """

    distance: int
    insert_count: int = 0
    delete_count: int = 0
    substitute_count: int = 0

    def __post_init__(self) -> None:
        if self.distance < -1:
            raise ValidationError(f"distance must be >= -1, got {self.distance}")
        if min(self.insert_count, self.delete_count, self.substitute_count) < 0:
            raise ValidationError("operation counts must not be negative")
        total = self.insert_count + self.delete_count + self.substitute_count
        if self.distance == -1 and total != 0:
            raise ValidationError("a result without alignment must have zero counts")
        if self.distance >= 0 and total != self.distance:
            raise ValidationError(
                f"operation counts add up to {total}, expected distance {self.distance}"
            )

    @property
    def is_within_bound(self) -> bool:
        """False when a bounded search found no alignment within its threshold."""
        return self.distance >= 0

    def __str__(self) -> str:
        return (
            f"Distance: {self.distance}, Insert: {self.insert_count}, "
            f"Delete: {self.delete_count}, Substitute: {self.substitute_count}"
        )


NO_ALIGNMENT = AlignmentResult(-1, 0, 0, 0)
"""Result of a bounded search whose true distance exceeds the threshold."""


__all__ = ["AlignmentResult", "NO_ALIGNMENT"]
