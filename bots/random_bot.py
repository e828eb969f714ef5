"""Random baseline bot for arena comparisons."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from euchre.bidding import Bid, BidPhase
from euchre.cards import Card
from euchre.state import GameState

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, take_rate: float = 0.25) -> None:
        self._rng = random.Random(seed)
        self.take_rate = take_rate

    def offer_bid(self, state: GameState, seat: int, phase: BidPhase, legal: Sequence[Bid]) -> Bid:
        takes = [bid for bid in legal if bid != Bid.passing()]
        if not takes or self._rng.random() >= self.take_rate:
            return Bid.passing()
        return self._rng.choice(takes)

    def choose_discard(self, state: GameState, seat: int) -> Card:
        return self._rng.choice(state.hands[seat].cards)

    def choose_card(self, state: GameState, seat: int) -> Card:
        hand = state.hands[seat].cards
        if not hand:
            raise RuntimeError("No cards left to play for bot.")
        return self._rng.choice(hand)
