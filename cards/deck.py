"""Deck operations - pure functions over immutable sequences of cards."""

from random import Random
from typing import Sequence

from cards.card import Card, create_card, suits, values
from cards.logging_utils import get_logger

logger = get_logger(__name__)

Deck = tuple[Card, ...]
Hand = tuple[Card, ...]


def create_deck() -> Deck:
    """Return the full deck, suit-major and value-minor."""
    return tuple(create_card(value, suit) for suit in suits() for value in values())


def shuffle(deck: Sequence[Card], rng: Random | None = None) -> Deck:
    """Return a shuffled copy of the deck. The input is left untouched."""
    rng = rng or Random()
    return tuple(rng.sample(list(deck), len(deck)))


def contains(deck: Sequence[Card], card: object) -> bool:
    """Check if the deck holds a card equal to `card`.

    Anything that is not a Card is never present.
    """
    return any(card == candidate for candidate in deck)


def deal(deck: Sequence[Card], hand_size: int) -> tuple[Hand, Deck]:
    """
    Split a deck into a hand and the remainder.

    Out of range sizes are clamped: a size of zero or less deals nothing,
    a size past the end deals the whole deck.

    Args:
        deck: Cards to deal from, top of the deck first
        hand_size: Number of cards to deal

    Returns:
        Tuple of (hand, remaining deck)
    """
    index = max(0, min(hand_size, len(deck)))
    hand, rest = tuple(deck[:index]), tuple(deck[index:])
    logger.debug("Dealt %d card(s), %d remaining", len(hand), len(rest))
    return hand, rest


def create_hand(hand_size: int, rng: Random | None = None) -> tuple[Hand, Deck]:
    """Create a fresh deck, shuffle it, and deal `hand_size` cards."""
    return deal(shuffle(create_deck(), rng), hand_size)
