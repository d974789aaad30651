"""Pytest fixtures for deck utility tests."""

import pytest
from random import Random

from cards import Card, Suit, Value, create_deck, shuffle


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """A full deck in canonical order."""
    return create_deck()


@pytest.fixture
def shuffled_deck(deck, rng):
    """A full deck shuffled with the seeded rng."""
    return shuffle(deck, rng)


@pytest.fixture
def ace_of_spades():
    """The first card of an unshuffled deck."""
    return Card(Value.ACE, Suit.SPADES)


@pytest.fixture
def deck_file(tmp_path):
    """Path for a deck file inside a temporary directory."""
    return tmp_path / "deck.json"
