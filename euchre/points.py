"""Effective card strength under a trump suit and lead suit.

Precedence, highest rule first:

1. trump suit: 9=14, 10=15, Q=16, K=17, A=18, J=20 (right bower)
2. jack of the same-colour suit: 19 (left bower)
3. lead suit: 9=8 .. A=13
4. anything else: 9=2 .. A=7

With no trump declared only rules 3 and 4 apply.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .cards import Card, Rank, Suit, is_left_bower
from .errors import UnknownSuit

TRUMP_POINTS: dict[Rank, int] = {
    Rank.NINE: 14,
    Rank.TEN: 15,
    Rank.JACK: 20,
    Rank.QUEEN: 16,
    Rank.KING: 17,
    Rank.ACE: 18,
}

LEFT_BOWER_POINTS = 19

LEAD_POINTS: dict[Rank, int] = {
    Rank.NINE: 8,
    Rank.TEN: 9,
    Rank.JACK: 10,
    Rank.QUEEN: 11,
    Rank.KING: 12,
    Rank.ACE: 13,
}

OFF_SUIT_POINTS: dict[Rank, int] = {
    Rank.NINE: 2,
    Rank.TEN: 3,
    Rank.JACK: 4,
    Rank.QUEEN: 5,
    Rank.KING: 6,
    Rank.ACE: 7,
}


def card_value(card: Card, trump: Optional[Suit], lead_suit: Optional[Suit]) -> int:
    """Return the strength of ``card`` without touching its cached value."""
    if trump is not None and card.suit is trump:
        return TRUMP_POINTS[card.rank]
    if is_left_bower(card, trump):
        return LEFT_BOWER_POINTS
    if lead_suit is not None and card.suit is lead_suit:
        return LEAD_POINTS[card.rank]
    return OFF_SUIT_POINTS[card.rank]


def assign_points(cards: Iterable[Card], trump: Optional[Suit], lead_suit: Optional[Suit]) -> None:
    """Recompute ``point_value`` for every card in place."""
    for card in cards:
        card.point_value = card_value(card, trump, lead_suit)


def assign_points_to_hands(
    hands: Iterable[Iterable[Card]],
    trump: Optional[Suit],
    lead_suit: Optional[Suit],
) -> None:
    for hand in hands:
        assign_points(hand, trump, lead_suit)


def suit_totals(cards: Iterable[Card], trump: Suit) -> dict[Suit, int]:
    """Sum, per suit, the values the cards of that suit would have with ``trump`` as trump."""
    totals = {suit: 0 for suit in Suit}
    for card in cards:
        if card.suit not in totals:
            raise UnknownSuit(f"Card {card!r} has an unrecognised suit.")
        totals[card.suit] += card_value(card, trump, None)
    return totals
