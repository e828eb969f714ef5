"""Card-related data structures and helpers for Euchre."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.title()


class Rank(Enum):
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return RANK_LABELS[self]


RANK_LABELS: dict[Rank, str] = {
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}

# Deal order only. Strength comes from the point tables, never from this order.
RANK_ORDER: list[Rank] = [Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]

# Suit sharing colour with each suit; the jack of this suit is the left bower.
SAME_COLOR: dict[Suit, Suit] = {
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.CLUBS: Suit.SPADES,
    Suit.SPADES: Suit.CLUBS,
}


@dataclass(eq=True, unsafe_hash=True)
class Card:
    """A playing card identified by (suit, rank).

    ``point_value`` is a cache written by :func:`euchre.points.assign_points`
    for the current trump and lead suit. It takes no part in equality or
    hashing and is stale as soon as either context changes.
    """

    rank: Rank
    suit: Suit
    point_value: int = field(default=0, compare=False, hash=False)

    def __str__(self) -> str:
        return card_label(self)


def same_color_suit(suit: Suit) -> Suit:
    return SAME_COLOR[suit]


def is_left_bower(card: Card, trump: Suit | None) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is SAME_COLOR[trump]


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.name.lower(), "suit": card.suit.name.lower()}


def card_label(card: Card) -> str:
    return f"{card.rank} of {card.suit}"
