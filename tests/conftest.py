"""Pytest configuration and fixtures."""

import pytest
from shared.domain.models import DictionaryEntry


def make_dictionary(*words: str) -> tuple:
    """Build a dictionary tuple from plain words."""
    return tuple(DictionaryEntry(word=word, length=len(word)) for word in words)


@pytest.fixture
def sample_dictionary():
    """Small dictionary covering lengths 3 to 8."""
    return make_dictionary(
        "cat", "dog", "owl",
        "lion", "bear", "wolf", "frog",
        "horse", "tiger", "otter",
        "badger", "ferret",
        "penguin", "buffalo",
        "elephant", "aardvark",
    )


@pytest.fixture
def dictionary_factory():
    """Expose make_dictionary to tests as a fixture."""
    return make_dictionary
