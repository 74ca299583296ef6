"""Internal utilities for fuzzysim."""

import math
from typing import Any, Callable, List, TypeVar, Union

from fuzzysim.enums import Algorithm
from fuzzysim.exceptions import NullInputError, ValidationError

T = TypeVar("T")

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)


def create_array(length: int, fill: Union[T, Callable[[int], T]]) -> List[T]:
    """Build a list of ``length`` elements.

    Args:
        length: Number of elements, must not be negative.
        fill: Either a constant placed in every slot, or a callable invoked
            once per slot with the slot index. Use a callable for mutable
            elements (e.g. matrix rows) so that slots do not alias.

    Returns:
        A new list.

    Raises:
        ValidationError: If length is negative.

    Example:
        >>> create_array(3, 0)
        [0, 0, 0]
        >>> create_array(3, lambda i: i * 2)
        [0, 2, 4]
    """
    if length < 0:
        raise ValidationError(f"length must not be negative, got {length}")
    if callable(fill):
        return [fill(index) for index in range(length)]
    return [fill] * length


def check_not_none(left: Any, right: Any, what: str = "sequences") -> None:
    """Raise NullInputError if either argument is None."""
    if left is None or right is None:
        raise NullInputError(f"{what} must not be None")


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals, halves away from zero for positive values.

    Python's built-in ``round`` uses banker's rounding, so 0.125 would become
    0.12 instead of 0.13.
    """
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        ValueError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise ValueError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


__all__ = [
    "create_array",
    "check_not_none",
    "round_half_up",
    "normalize_algorithm",
    "VALID_ALGORITHMS",
]
