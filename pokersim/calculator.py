"""Scoring of seven-card poker hands and picking the winner among them."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .cards import ACE, Card, Combination, Hand, Suit

SCORING_SIZE = 5
LOW_STRAIGHT_TOP = 5

_AFTER_PAIR = {
    Combination.HIGH_CARD: Combination.PAIR,
    Combination.PAIR: Combination.TWO_PAIR,
    Combination.THREE_OF_A_KIND: Combination.FULL_HOUSE,
}


@dataclass(frozen=True)
class HandResult:
    """The best combination of a hand and the card numbers that score it."""

    combination: Combination
    active_cards: tuple[int, ...] = ()


@dataclass(frozen=True)
class GameResult:
    """Index of the winning hand, or ``None`` when the game is a draw."""

    winner: int | None = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def _sort_descending(cards: Iterable[Card]) -> list[Card]:
    """Order cards by number, highest first.

    Cards of equal number keep the order this exchange sort leaves them in,
    which decides which suit a straight flush is traced through.
    """
    ordered = list(cards)
    for i in range(len(ordered)):
        for j in range(i + 1, len(ordered)):
            if ordered[i].number < ordered[j].number:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _count_combination(cards: Sequence[Card]) -> HandResult:
    """Score pairs, trips, quads and kickers from the number counts."""
    counts = Counter(card.number for card in cards)
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)

    combination = Combination.HIGH_CARD
    scoring: list[int] = []

    for number, count in groups:
        if count == 4:
            combination = Combination.FOUR_OF_A_KIND
            scoring.extend([number] * 4)
            for card in cards:
                if card.number != number:
                    scoring.append(card.number)
                    if len(scoring) == SCORING_SIZE:
                        break

        if count == 3:
            combination = Combination.THREE_OF_A_KIND
            for _ in range(3):
                scoring.append(number)
                if len(scoring) == SCORING_SIZE:
                    combination = Combination.FULL_HOUSE
                    break

        if count == 2 and len(scoring) < 4:
            combination = _AFTER_PAIR.get(combination, combination)
            scoring.extend([number] * 2)

        if count == 1:
            scoring.append(number)

        if len(scoring) == SCORING_SIZE:
            break

    return HandResult(combination, tuple(scoring))


def _longest_run(cards: Sequence[Card], same_suit: bool) -> tuple[int, ...] | None:
    """Numbers of the longest run of consecutive cards, if it reaches five.

    With ``same_suit`` each card must share the suit of the card before it.
    An ace completes a run from five down to two.
    """
    last_number = 0
    last_suit: Suit | None = None
    current: list[Card] = []
    best: list[Card] = []

    for card in cards:
        if card.number == last_number:
            continue
        follows = last_number - card.number == 1
        if follows and (not same_suit or card.suit == last_suit):
            current.append(card)
            if len(current) > len(best):
                best = list(current)
        else:
            current = [card]
        last_number = card.number
        last_suit = card.suit

    if cards and cards[0].number == ACE:
        ace = cards[0]
        if (
            len(best) == 4
            and best[0].number == LOW_STRAIGHT_TOP
            and (not same_suit or best[0].suit == ace.suit)
        ):
            best.append(ace)

    if len(best) >= SCORING_SIZE:
        return tuple(card.number for card in best)
    return None


def _flush(cards: Sequence[Card]) -> tuple[int, ...] | None:
    """The five highest numbers of the first suit holding five cards."""
    for suit in Suit:
        numbers = [card.number for card in cards if card.suit == suit]
        if len(numbers) >= SCORING_SIZE:
            return tuple(numbers[:SCORING_SIZE])
    return None


def calculate_hand(hand: Hand, river: Iterable[Card]) -> HandResult:
    """Find the best combination of a hand together with the river."""
    cards = _sort_descending([*hand.cards, *river])
    result = _count_combination(cards)

    straight = _longest_run(cards, same_suit=False)
    if straight is not None and result.combination < Combination.STRAIGHT:
        result = HandResult(Combination.STRAIGHT, straight)

    flush = _flush(cards)
    if flush is not None and result.combination < Combination.FLUSH:
        result = HandResult(Combination.FLUSH, flush)
        straight_flush = _longest_run(cards, same_suit=True)
        if straight_flush is not None:
            result = HandResult(Combination.STRAIGHT_FLUSH, straight_flush)

    return result


def compare_hands(hands: Sequence[Hand], river: Sequence[Card]) -> GameResult:
    """Pick the winning hand against the river.

    Hands are compared in turn against the current leader. A tie with the
    leader leaves the winner as it was, so a draw between earlier hands is
    settled by any later hand the leader beats.
    """
    results = [calculate_hand(hand, river) for hand in hands]
    leader = 0
    winner: int | None = None

    for index, result in enumerate(results[1:], start=1):
        best = results[leader]
        if best.combination > result.combination:
            winner = leader
        elif best.combination < result.combination:
            leader = winner = index
        else:
            leading_cards = best.active_cards[:SCORING_SIZE]
            challenging_cards = result.active_cards[:SCORING_SIZE]
            if leading_cards > challenging_cards:
                winner = leader
            elif leading_cards < challenging_cards:
                leader = winner = index

    return GameResult(winner)