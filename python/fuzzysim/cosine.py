"""Cosine similarity of sparse weight vectors.

Vectors are mappings from a token to its weight, e.g. a
:class:`collections.Counter` of words. Tokens missing from a mapping have
weight zero.
"""

import math
from typing import Hashable, Mapping

from fuzzysim._utils import check_not_none


def cosine_similarity(
    left: Mapping[Hashable, float],
    right: Mapping[Hashable, float],
) -> float:
    """Cosine of the angle between two sparse vectors.

    Args:
        left: First vector, token -> weight. Must not be None.
        right: Second vector, token -> weight. Must not be None.

    Returns:
        The cosine similarity, or 0.0 when either vector has zero length.

    Raises:
        NullInputError: If either vector is None.

    Example:
        >>> from collections import Counter
        >>> cosine_similarity(Counter("hello world".split()), Counter("hello there".split()))
        0.5
    """
    check_not_none(left, right, what="vectors")

    dot = sum(left[token] * right[token] for token in left.keys() & right.keys())
    left_norm = sum(weight**2 for weight in left.values())
    right_norm = sum(weight**2 for weight in right.values())
    if left_norm <= 0.0 or right_norm <= 0.0:
        return 0.0
    return dot / math.sqrt(left_norm * right_norm)


__all__ = ["cosine_similarity"]
