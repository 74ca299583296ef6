"""Editor-style fuzzy matching score.

Scores how well a query matches a term the way "go to anything" pickers in
text editors do: query characters must appear in the term in order, each one
found scores a point, and a match directly after the previous match scores two
more. Higher is better. Comparison is case-insensitive.
"""

from typing import Optional

from fuzzysim._utils import check_not_none

# Extra points for a match adjacent to the previous one
ADJACENT_BONUS = 2


def fuzzy_score(term: str, query: str) -> int:
    """Score how well ``query`` matches ``term``.

    Each query character is looked up in the term starting after the previous
    match. A character that is not found consumes the rest of the term, so
    later query characters cannot match either.

    Args:
        term: Full text to match against, must not be None.
        query: Text typed by the user, must not be None.

    Returns:
        Non-negative score.

    Raises:
        NullInputError: If either argument is None.

    Example:
        >>> fuzzy_score("Workshop", "wo")
        4
        >>> fuzzy_score("Apache Software Foundation", "asf")
        3
        >>> fuzzy_score("Workshop", "b")
        0
    """
    check_not_none(term, query, what="term and query")

    term = term.lower()
    query = query.lower()

    score = 0
    term_index = 0
    previous_match: Optional[int] = None

    for query_char in query:
        index = term.find(query_char, term_index)
        if index < 0:
            break
        score += 1
        if previous_match is not None and previous_match + 1 == index:
            score += ADJACENT_BONUS
        previous_match = index
        term_index = index + 1

    return score


__all__ = ["fuzzy_score"]
