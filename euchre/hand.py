"""A seat's held cards."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .cards import Card
from .errors import InvalidPlay


class Hand:
    """Mutable collection of cards owned by one seat, kept in deal order."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __repr__(self) -> str:
        return f"Hand({[str(card) for card in self.cards]})"

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def remove(self, card: Card) -> Card:
        """Remove and return the held instance equal to ``card``."""
        for index, held in enumerate(self.cards):
            if held == card:
                return self.cards.pop(index)
        raise InvalidPlay(f"{card} is not in hand.")

    def suit_count(self, suit) -> int:
        return sum(1 for card in self.cards if card.suit is suit)
