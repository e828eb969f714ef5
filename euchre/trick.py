"""Trick representation: one card slot per seat plus the lead card."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .cards import Card, Suit
from .errors import InvalidPlay

SEATS = 4


class Trick:
    def __init__(self) -> None:
        self.slots: List[Optional[Card]] = [None] * SEATS
        self.lead_card: Optional[Card] = None
        self.leader: Optional[int] = None

    def is_empty(self) -> bool:
        return all(card is None for card in self.slots)

    def is_complete(self) -> bool:
        return all(card is not None for card in self.slots)

    def add_play(self, seat: int, card: Card) -> None:
        if not 0 <= seat < SEATS:
            raise InvalidPlay(f"Seat {seat} is not at the table.")
        if self.slots[seat] is not None:
            raise InvalidPlay(f"Seat {seat} already played to this trick.")
        if self.is_empty():
            self.lead_card = card
            self.leader = seat
        self.slots[seat] = card

    def lead_suit(self) -> Optional[Suit]:
        return self.lead_card.suit if self.lead_card is not None else None

    def cards(self) -> List[Card]:
        return [card for card in self.slots if card is not None]

    def plays(self) -> List[Tuple[int, Card]]:
        """Return (seat, card) pairs in play order, starting with the leader."""
        if self.leader is None:
            return []
        order = [(self.leader + offset) % SEATS for offset in range(SEATS)]
        return [(seat, self.slots[seat]) for seat in order if self.slots[seat] is not None]

    def clear(self) -> None:
        self.slots = [None] * SEATS
        self.lead_card = None
        self.leader = None
