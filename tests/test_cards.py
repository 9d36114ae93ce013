import random

import pytest

from pokersim.cards import (
    DECK_SIZE,
    Card,
    Combination,
    Deck,
    EmptyDeckError,
    Hand,
    Suit,
)


def test_suit_values_follow_source_constants():
    suits = [Card(2, value).suit for value in range(4)]
    assert suits == [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]
    assert [Card(14, value).label() for value in range(4)] == ["Ac", "Ad", "Ah", "As"]


def test_combination_ordering():
    ordered = sorted([Combination(8), Combination(0), Combination(6), Combination(1)])
    assert ordered == [
        Combination.HIGH_CARD,
        Combination.PAIR,
        Combination.FULL_HOUSE,
        Combination.STRAIGHT_FLUSH,
    ]


def test_card_converts_int_suit():
    card = Card(number=10, suit=2)
    assert card.suit is Suit.HEARTS


def test_card_rejects_unknown_suit():
    with pytest.raises(ValueError):
        Card(5, 7)


def test_card_label():
    assert Card(14, Suit.SPADES).label() == "As"
    assert str(Card(10, Suit.CLUBS)) == "10c"


def test_same_number_and_suit():
    a = Card(7, Suit.HEARTS)
    b = Card(7, Suit.CLUBS)
    c = Card(9, Suit.HEARTS)
    assert a.has_same_number(b)
    assert not a.has_same_number(c)
    assert a.has_same_suit(c)
    assert not a.has_same_suit(b)


def test_hand_add_card():
    hand = Hand()
    hand.add_card(Card(3, Suit.CLUBS))
    hand.add_card(Card(4, Suit.DIAMONDS))
    assert hand.cards == [Card(3, Suit.CLUBS), Card(4, Suit.DIAMONDS)]


def test_export_puts_higher_card_first():
    hand = Hand([Card(10, Suit.CLUBS), Card(14, Suit.DIAMONDS)])
    assert hand.export() == "Ad 10c"


def test_export_pair_orders_by_suit():
    hand = Hand([Card(5, Suit.CLUBS), Card(5, Suit.SPADES)])
    assert hand.export() == "5s 5c"


@pytest.mark.parametrize(
    "first,second",
    [
        (Card(2, Suit.HEARTS), Card(13, Suit.CLUBS)),
        (Card(8, Suit.DIAMONDS), Card(8, Suit.HEARTS)),
        (Card(11, Suit.SPADES), Card(12, Suit.SPADES)),
    ],
)
def test_export_independent_of_order(first, second):
    assert Hand([first, second]).export() == Hand([second, first]).export()


def test_export_does_not_reorder_hand():
    cards = [Card(3, Suit.CLUBS), Card(9, Suit.HEARTS)]
    hand = Hand(list(cards))
    hand.export()
    assert hand.cards == cards


def test_export_needs_two_cards():
    with pytest.raises(ValueError):
        Hand([Card(3, Suit.CLUBS)]).export()


def test_deck_holds_every_card_once():
    deck = Deck(random.Random(1))
    assert len(deck) == DECK_SIZE
    expected = {Card(n, s) for s in Suit for n in range(2, 15)}
    assert set(deck.cards) == expected


def test_deck_same_seed_same_order():
    reference = list(Deck(random.Random(42)).cards)
    deck = Deck(random.Random(42))
    drawn = [deck.draw_card() for _ in range(DECK_SIZE)]
    assert drawn == reference
    assert len(set(drawn)) == DECK_SIZE
    assert len(deck) == 0


def test_shuffle_keeps_cards():
    deck = Deck(random.Random(3))
    before = sorted(deck.cards, key=lambda c: (c.suit, c.number))
    deck.shuffle()
    after = sorted(deck.cards, key=lambda c: (c.suit, c.number))
    assert before == after


def test_draw_takes_top_card():
    deck = Deck(random.Random(7))
    top = deck.cards[0]
    assert deck.draw_card() == top
    assert len(deck) == DECK_SIZE - 1
    assert top not in deck.cards


def test_draw_from_empty_deck_raises():
    deck = Deck(random.Random(0))
    drawn = {deck.draw_card() for _ in range(DECK_SIZE)}
    assert len(drawn) == DECK_SIZE
    with pytest.raises(EmptyDeckError):
        deck.draw_card()