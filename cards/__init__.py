"""Playing-card deck utilities - build, shuffle, deal and persist decks."""

from cards.card import (
    Card,
    InvalidCard,
    Suit,
    Value,
    card_description,
    create_card,
    suits,
    values,
)
from cards.deck import Deck, Hand, contains, create_deck, create_hand, deal, shuffle
from cards.storage import DeckFileError, LoadResult, load, save

__all__ = [
    "Card",
    "InvalidCard",
    "Suit",
    "Value",
    "card_description",
    "create_card",
    "suits",
    "values",
    "Deck",
    "Hand",
    "contains",
    "create_deck",
    "create_hand",
    "deal",
    "shuffle",
    "DeckFileError",
    "LoadResult",
    "load",
    "save",
]
