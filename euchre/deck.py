"""Deck creation and dealing for Euchre."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import RANK_ORDER, Card, Suit
from .errors import DeckExhausted, InvariantViolation
from .hand import Hand

DECK_SIZE = 24
HAND_SIZE = 5
SEATS = 4


def build_deck() -> List[Card]:
    """Return the ordered 24-card deck."""
    return [Card(rank, suit) for suit in Suit for rank in RANK_ORDER]


class Deck:
    """Cards not yet dealt, dealt from the end of the sequence."""

    def __init__(self, cards: Optional[Sequence[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards is not None else build_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: Optional[Random] = None) -> None:
        """Rebuild the full deck and shuffle it."""
        self.cards = build_deck()
        (rng or Random()).shuffle(self.cards)

    def deal(self) -> Card:
        if not self.cards:
            raise DeckExhausted("Cannot deal a card from an empty deck.")
        return self.cards.pop()


def deal_hand(
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> Tuple[List[Hand], Card, Deck]:
    """Deal four 5-card hands and turn up the kitty card.

    A supplied ``deck`` is dealt as-is (from its end) instead of a fresh
    shuffle. Returns the hands, the kitty and the undealt remainder.
    """
    if deck is not None:
        if len(deck) != DECK_SIZE or len(set(deck)) != DECK_SIZE:
            raise InvariantViolation("Deck must contain the 24 distinct cards.")
        source = Deck(deck)
    else:
        source = Deck()
        source.shuffle(rng)

    hands = [Hand() for _ in range(SEATS)]
    for hand in hands:
        for _ in range(HAND_SIZE):
            hand.add(source.deal())
    kitty = source.deal()
    return hands, kitty, source


def stack_deck(hands: Sequence[Sequence[Card]], kitty: Card) -> List[Card]:
    """Arrange a deck so :func:`deal_hand` gives seat ``i`` exactly ``hands[i]``.

    Unlisted cards fill the undealt remainder in deck order.
    """
    if len(hands) != SEATS or any(len(hand) != HAND_SIZE for hand in hands):
        raise InvariantViolation(f"Need {SEATS} hands of {HAND_SIZE} cards.")
    chosen = [card for hand in hands for card in hand] + [kitty]
    if len(set(chosen)) != len(chosen):
        raise InvariantViolation("A card appears twice in the stacked deal.")
    rest = [card for card in build_deck() if card not in chosen]
    return list(reversed(chosen + rest))
