"""Exception hierarchy for fuzzysim.

All errors raised for bad arguments derive from :class:`ValidationError`,
which is also a :class:`ValueError`. Missing (``None``) sequences raise
:class:`NullInputError`, which additionally subclasses :class:`TypeError`.

A bounded Levenshtein search that finds no alignment within its threshold is
not an error: it returns ``NO_ALIGNMENT`` (or ``-1`` for the scalar form).
"""


class FuzzySimError(Exception):
    """Base class for all fuzzysim errors."""


class ValidationError(FuzzySimError, ValueError):
    """Raised when an argument fails validation."""


class NullInputError(ValidationError, TypeError):
    """Raised when a sequence argument is None."""


class InvalidThresholdError(ValidationError):
    """Raised when a negative threshold is given to bounded Levenshtein."""


class LengthMismatchError(ValidationError):
    """Raised when Hamming distance is asked for sequences of different length."""


__all__ = [
    "FuzzySimError",
    "ValidationError",
    "NullInputError",
    "InvalidThresholdError",
    "LengthMismatchError",
]
