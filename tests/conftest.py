"""Shared fixtures for the fuzzysim test suite."""

import pytest

from fixtures.real_data import COMMAND_QUERY, COMMANDS, TYPO_PAIRS


@pytest.fixture
def commands():
    """Command names to rank, in declaration order."""
    return list(COMMANDS)


@pytest.fixture
def command_query():
    return COMMAND_QUERY


@pytest.fixture(params=TYPO_PAIRS, ids=[typed for typed, _ in TYPO_PAIRS])
def typo_pair(request):
    """One (typed, intended) pair per test run."""
    return request.param
