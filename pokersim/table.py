"""A table of players and the river, and the game that deals it out."""

from __future__ import annotations

import random

from .cards import HAND_SIZE, Card, Deck, Hand

MAX_GAME_STAGE = 3
RIVER_SIZE = 5
FLOP_SIZE = 3


class TableError(RuntimeError):
    """Raised when cards are dealt to the river out of order."""


class Table:
    """Players' hands, the shared river and the deck they come from."""

    def __init__(self, players_count: int, rng: random.Random | None = None) -> None:
        self.deck = Deck(rng)
        self.players: list[Hand] = []
        self.river: list[Card] = []
        self.river_is_drawn = False
        for _ in range(players_count):
            hand = Hand()
            for _ in range(HAND_SIZE):
                hand.add_card(self.deck.draw_card())
            self.players.append(hand)

    def draw_river(self) -> None:
        """Deal the first three river cards."""
        if self.river_is_drawn:
            raise TableError("River is already drawn!")
        self.river.extend(self.deck.draw_card() for _ in range(FLOP_SIZE))
        self.river_is_drawn = True

    def draw_card_to_river(self) -> None:
        """Deal one more river card after the first three."""
        if len(self.river) == RIVER_SIZE:
            raise TableError("Trying to draw over 5 cards on the river")
        if not self.river_is_drawn:
            raise TableError(
                "Trying to draw a single card to the river before drawing the river"
            )
        self.river.append(self.deck.draw_card())

    def export_river(self, length: int) -> str:
        """Labels of the first ``length`` river cards, each followed by a space."""
        if length > len(self.river):
            raise IndexError(
                f"river holds {len(self.river)} cards, {length} requested"
            )
        return "".join(f"{card.label()} " for card in self.river[: max(length, 0)])


class Game:
    """One deal: the flop, then the turn, then the last river card."""

    def __init__(self, players_count: int, rng: random.Random | None = None) -> None:
        self.table = Table(players_count, rng)
        self._stage = 0

    @property
    def stage(self) -> int:
        return self._stage

    @property
    def hands(self) -> list[Hand]:
        return self.table.players

    @property
    def river(self) -> list[Card]:
        return self.table.river

    def advance(self) -> None:
        """Deal the cards of the next stage."""
        if self._stage == 0:
            self.table.draw_river()
        else:
            self.table.draw_card_to_river()
        self._stage += 1

    def is_over(self) -> bool:
        return self._stage == MAX_GAME_STAGE

    def play(self) -> None:
        """Advance until the whole river is dealt."""
        while not self.is_over():
            self.advance()

    def river_string(self, length: int) -> str:
        return self.table.export_river(length)