"""Cards, hands and the shuffled deck they are dealt from."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

COLORS_COUNT = 4
CARDS_PER_COLOR = 13
DECK_SIZE = 52
HAND_SIZE = 2
LOWEST_NUMBER = 2
ACE = 14


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


class Combination(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


SUIT_SYMBOLS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

NUMBER_NAMES = {
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
    14: "A",
}


class EmptyDeckError(IndexError):
    """Raised when a card is drawn from a deck that has none left."""


@dataclass(frozen=True)
class Card:
    """A playing card; numbers run from 2 up to 14 for the ace."""

    number: int
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit(self.suit))

    def has_same_number(self, other: Card) -> bool:
        return self.number == other.number

    def has_same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def label(self) -> str:
        """Short text form such as ``Qh``."""
        return f"{NUMBER_NAMES.get(self.number, '')}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label()


@dataclass
class Hand:
    """The hole cards of one player."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def export(self) -> str:
        """Canonical text of the first two cards, higher card first.

        Cards of equal number are ordered by the higher suit first, so the
        same two cards always give the same text whatever order they came in.
        """
        if len(self.cards) < 2:
            raise ValueError("a hand needs two cards to be exported")
        first, second = sorted(
            self.cards[:2], key=lambda card: (card.number, card.suit), reverse=True
        )
        return f"{first.label()} {second.label()}"


class Deck:
    """A full 52-card deck, shuffled three times on creation."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [
            Card(number, suit)
            for suit in Suit
            for number in range(LOWEST_NUMBER, CARDS_PER_COLOR + LOWEST_NUMBER)
        ]
        for _ in range(3):
            self.shuffle()

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def draw_card(self) -> Card:
        """Take the top card off the deck."""
        if not self._cards:
            raise EmptyDeckError("Trying to draw card from an empty deck!")
        return self._cards.pop(0)

    def shuffle(self) -> None:
        """Swap every position with a randomly chosen one."""
        size = len(self._cards)
        for position in range(size):
            other = self._rng.randrange(size)
            self._cards[position], self._cards[other] = (
                self._cards[other],
                self._cards[position],
            )

    def __len__(self) -> int:
        return len(self._cards)