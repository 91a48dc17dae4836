"""
Shared fixtures for cssmatch tests.
"""

import pytest

from cssmatch.grammar import get_grammar


@pytest.fixture(scope="session")
def grammar():
    """The built-in grammar."""
    return get_grammar()
