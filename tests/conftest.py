"""Shared fixtures for fnvhex tests."""

import pytest

from fnvhex._loader import load_vectors


@pytest.fixture(scope="session")
def vectors():
    """Load the bundled known-answer vectors once for all tests."""
    return load_vectors()
