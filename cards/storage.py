"""Save and load decks as versioned JSON documents.

The file format is private to this version of the library and is not a
stable interchange format.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Sequence

from pydantic import BaseModel, ValidationError

from cards.card import Card, Suit, Value
from cards.deck import Deck
from cards.logging_utils import get_logger
from cards.config import config

logger = get_logger(__name__)

FORMAT_VERSION = 1
NOT_FOUND_MESSAGE = "That file does not exist"


class DeckFileError(ValueError):
    """Raised when a deck file exists but does not hold a valid deck."""


class CardRecord(BaseModel):
    """A single card as stored on disk."""

    value: Value
    suit: Suit


class DeckFile(BaseModel):
    """On-disk deck document."""

    version: Literal[1] = FORMAT_VERSION
    cards: list[CardRecord]


@dataclass(frozen=True)
class LoadResult:
    """Outcome of `load`: either a deck or the reason it could not be read."""

    deck: Deck | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.deck is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of deck or error")

    @classmethod
    def success(cls, deck: Deck) -> "LoadResult":
        return cls(deck=tuple(deck))

    @classmethod
    def failure(cls, reason: str) -> "LoadResult":
        return cls(error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Deck:
        """Return the deck, raising FileNotFoundError on failure."""
        if self.error is not None:
            raise FileNotFoundError(self.error)
        return self.deck


def _resolve(path: str | Path | None) -> Path:
    return Path(path if path is not None else config.storage.default_path)


def save(deck: Sequence[Card], path: str | Path | None = None) -> Path:
    """
    Write a deck to a file.

    Args:
        deck: Cards to save, in order
        path: Target file. Defaults to CARDS_DECK_FILE

    Returns:
        The path written

    Raises:
        OSError: if the file cannot be written
    """
    target = _resolve(path)
    document = DeckFile(cards=[CardRecord(value=card.value, suit=card.suit) for card in deck])
    target.write_text(
        document.model_dump_json(indent=config.storage.indent), encoding="utf-8"
    )
    logger.info("Saved %d card(s) to %s", len(deck), target)
    return target


def load(path: str | Path | None = None) -> LoadResult:
    """
    Read a deck back from a file.

    A file that cannot be read gives a failed LoadResult rather than an
    exception.

    Raises:
        DeckFileError: if the file is readable but is not a deck document,
            including bytes that are not UTF-8
    """
    source = _resolve(path)
    try:
        raw = source.read_bytes()
    except OSError:
        logger.warning("Cannot read deck file %s", source)
        return LoadResult.failure(NOT_FOUND_MESSAGE)

    try:
        document = DeckFile.model_validate_json(raw)
    except (ValidationError, UnicodeDecodeError) as e:
        raise DeckFileError(f"Invalid deck file {source}: {e}") from e

    deck = tuple(Card(record.value, record.suit) for record in document.cards)
    logger.info("Loaded %d card(s) from %s", len(deck), source)
    return LoadResult.success(deck)
