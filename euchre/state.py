"""Mutable state for one Euchre game, owned by the game engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .cards import Card, Suit
from .deck import SEATS
from .hand import Hand
from .trick import Trick

NO_SEAT = -1


def next_seat(seat: int) -> int:
    return (seat + 1) % SEATS


@dataclass
class GameState:
    """Everything the bidding machine, seats and play loop read or mutate.

    Seats 0 and 2 are team 0, seats 1 and 3 are team 1. ``trump`` is None
    while undecided. ``discard`` holds the card the dealer buried after an
    order-up or pick-up.
    """

    dealer: int = 0
    current_seat: int = 1
    hands: List[Hand] = field(default_factory=lambda: [Hand() for _ in range(SEATS)])
    trump: Optional[Suit] = None
    kitty: Optional[Card] = None
    ordered_up: bool = False
    picked_up: bool = False
    gone_once: bool = False
    deciding_seat: int = NO_SEAT
    kitty_taken: bool = False
    discard: Optional[Card] = None
    undealt: List[Card] = field(default_factory=list)
    trick: Trick = field(default_factory=Trick)
    played: List[Card] = field(default_factory=list)
    tricks_won: List[int] = field(default_factory=lambda: [0, 0])
    scores: List[int] = field(default_factory=lambda: [0, 0])

    def left_of_dealer(self) -> int:
        return next_seat(self.dealer)

    def deciding_team(self) -> int:
        return self.deciding_seat % 2 if self.deciding_seat != NO_SEAT else NO_SEAT

    def reset_bidding(self) -> None:
        self.trump = None
        self.ordered_up = False
        self.picked_up = False
        self.deciding_seat = NO_SEAT
        self.kitty_taken = False
        self.discard = None

    def reset_hand(self) -> None:
        self.reset_bidding()
        self.trick.clear()
        self.played = []
        self.tricks_won = [0, 0]

    def all_cards(self) -> List[Card]:
        """Every card of the current deal, wherever it sits."""
        cards = list(self.undealt)
        for hand in self.hands:
            cards.extend(hand)
        cards.extend(self.trick.cards())
        cards.extend(self.played)
        if self.kitty is not None and not self.kitty_taken:
            cards.append(self.kitty)
        if self.discard is not None:
            cards.append(self.discard)
        return cards
