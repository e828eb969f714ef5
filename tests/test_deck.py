from random import Random

import pytest

from euchre.cards import Card, Rank, Suit
from euchre.deck import Deck, build_deck, deal_hand, stack_deck
from euchre.errors import DeckExhausted, InvariantViolation


def test_every_shuffle_is_a_permutation_of_the_universe():
    universe = set(build_deck())
    assert len(universe) == 24
    rng = Random(3)
    deck = Deck()
    for _ in range(50):
        deck.shuffle(rng)
        assert len(deck.cards) == 24
        assert set(deck.cards) == universe


def test_deal_partitions_the_deck():
    hands, kitty, remainder = deal_hand(rng=Random(11))

    assert [len(hand) for hand in hands] == [5, 5, 5, 5]
    assert len(remainder) == 3
    everything = [card for hand in hands for card in hand] + [kitty] + remainder.cards
    assert len(everything) == 24
    assert set(everything) == set(build_deck())


def test_dealing_from_empty_deck_is_an_invariant_violation():
    deck = Deck([Card(Rank.NINE, Suit.CLUBS)])
    deck.deal()

    with pytest.raises(DeckExhausted):
        deck.deal()
    assert issubclass(DeckExhausted, InvariantViolation)


def test_stacked_deck_deals_requested_hands():
    hands = [
        [Card(Rank.JACK, Suit.SPADES), Card(Rank.ACE, Suit.SPADES), Card(Rank.NINE, Suit.HEARTS), Card(Rank.TEN, Suit.HEARTS), Card(Rank.QUEEN, Suit.CLUBS)],
        [Card(Rank.KING, Suit.SPADES), Card(Rank.NINE, Suit.DIAMONDS), Card(Rank.TEN, Suit.DIAMONDS), Card(Rank.JACK, Suit.DIAMONDS), Card(Rank.ACE, Suit.CLUBS)],
        [Card(Rank.QUEEN, Suit.SPADES), Card(Rank.JACK, Suit.HEARTS), Card(Rank.QUEEN, Suit.HEARTS), Card(Rank.KING, Suit.HEARTS), Card(Rank.ACE, Suit.HEARTS)],
        [Card(Rank.NINE, Suit.SPADES), Card(Rank.TEN, Suit.SPADES), Card(Rank.QUEEN, Suit.DIAMONDS), Card(Rank.KING, Suit.DIAMONDS), Card(Rank.ACE, Suit.DIAMONDS)],
    ]
    kitty = Card(Rank.NINE, Suit.CLUBS)

    dealt, dealt_kitty, remainder = deal_hand(deck=stack_deck(hands, kitty))

    assert [hand.cards for hand in dealt] == hands
    assert dealt_kitty == kitty
    assert set(remainder.cards) == {Card(Rank.TEN, Suit.CLUBS), Card(Rank.JACK, Suit.CLUBS), Card(Rank.KING, Suit.CLUBS)}


def test_deal_rejects_deck_with_duplicates():
    cards = build_deck()
    cards[0] = cards[1]

    with pytest.raises(InvariantViolation):
        deal_hand(deck=cards)
