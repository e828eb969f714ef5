"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Sequence

from euchre.bidding import Bid, BidPhase
from euchre.cards import Card
from euchre.state import GameState


class BotStrategy:
    """Base class for computer seat policies.

    Every hook is synchronous. The ``state`` handle is only valid for the
    duration of the call and must not be stored.
    """

    name: str = "BaseBot"

    def on_hand_start(self, state: GameState, seat: int) -> None:
        """Optional hook invoked once bidding opens for a new deal."""
        return None

    def offer_bid(self, state: GameState, seat: int, phase: BidPhase, legal: Sequence[Bid]) -> Bid:
        """Return one of ``legal``; passing is always legal."""
        return Bid.passing()

    def choose_discard(self, state: GameState, seat: int) -> Card:
        """Return the card the dealer buries from their six-card hand."""
        return state.hands[seat][-1]

    def choose_card(self, state: GameState, seat: int) -> Card:
        """Return the card to play into ``state.trick``; the engine removes it."""
        hand = state.hands[seat]
        if not len(hand):
            raise RuntimeError("No cards left to play for bot.")
        return hand[0]
