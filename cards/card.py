"""Card, Suit and Value types - validated, immutable card representations."""

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits, in canonical deck order."""

    SPADES = "Spades"
    CLUBS = "Clubs"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"

    def __str__(self) -> str:
        return self.value


class Value(Enum):
    """Card values of the simplified five-value deck, in canonical order."""

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"

    def __str__(self) -> str:
        return self.value


class InvalidCard(ValueError):
    """Raised when a card is built from a suit or value outside the deck."""

    def __init__(self, field: str, given: object, legal: tuple[Enum, ...]) -> None:
        self.field = field
        self.given = given
        names = " ".join(str(member) for member in legal)
        super().__init__(f"invalid {field}. Valid {field}s are {names}")


def suits() -> tuple[Suit, ...]:
    """Return all suits in canonical order."""
    return tuple(Suit)


def values() -> tuple[Value, ...]:
    """Return all values in canonical order."""
    return tuple(Value)


def _coerce(enum_cls: type[Enum], given: object, field: str) -> Enum:
    if isinstance(given, enum_cls):
        return given
    if isinstance(given, str):
        for member in enum_cls:
            if member.value == given:
                return member
    raise InvalidCard(field, given, tuple(enum_cls))


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card.

    Both fields are validated on construction, so every Card in existence
    holds a real Suit and Value. Display names ("Ace", "Spades") are accepted
    in place of enum members.
    """

    value: Value
    suit: Suit

    def __post_init__(self) -> None:
        # Suit is checked before value.
        suit = _coerce(Suit, self.suit, "suit")
        value = _coerce(Value, self.value, "value")
        object.__setattr__(self, "suit", suit)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Card({self.value.name}, {self.suit.name})"

    @property
    def description(self) -> str:
        """Return a human readable name like 'Ace of Spades'."""
        return f"{self.value} of {self.suit}"

    @classmethod
    def from_description(cls, s: str) -> "Card":
        """Create a card from a description like 'Ace of Spades'."""
        parts = s.strip().split(" of ")
        if len(parts) != 2:
            raise ValueError(f"Invalid card description: {s}")
        value, suit = (part.strip() for part in parts)
        return cls(value, suit)


def create_card(value: Value | str, suit: Suit | str) -> Card:
    """
    Build a validated card.

    Args:
        value: A Value member or its name, e.g. "Ace"
        suit: A Suit member or its name, e.g. "Spades"

    Raises:
        InvalidCard: if either part is outside the deck's enumerations
    """
    return Card(value, suit)


def card_description(card: Card) -> str:
    """Return the description of a card, e.g. 'Ace of Spades'."""
    return card.description
