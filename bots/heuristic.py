"""Deterministic bidding and card-play heuristics."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from euchre.bidding import Bid, BidAction, BidPhase
from euchre.cards import Card, Suit
from euchre.points import assign_points, suit_totals
from euchre.rules_schema import DEFAULT_RULES, RuleSet
from euchre.state import GameState

from .base import BotStrategy

logger = logging.getLogger(__name__)


def _lowest(cards: Sequence[Card]) -> Optional[Card]:
    # min() keeps the first of equal values, i.e. encounter order.
    return min(cards, key=lambda card: card.point_value) if cards else None


def _last_lowest(cards: Sequence[Card]) -> Optional[Card]:
    # Later cards replace earlier ones on equal values.
    chosen: Optional[Card] = None
    for card in cards:
        if chosen is None or card.point_value <= chosen.point_value:
            chosen = card
    return chosen


class HeuristicBot(BotStrategy):
    name = "Heuristic"

    def __init__(self, rules: RuleSet = DEFAULT_RULES) -> None:
        self.order_up_threshold = rules.order_up_threshold
        self.pick_up_threshold = rules.pick_up_threshold
        self.call_threshold = rules.call_threshold

    def offer_bid(self, state: GameState, seat: int, phase: BidPhase, legal: Sequence[Bid]) -> Bid:
        assert state.kitty is not None
        hand = state.hands[seat]
        kitty_suit = state.kitty.suit

        if phase is BidPhase.ROUND1_ORDER:
            count = hand.suit_count(kitty_suit)
            if seat == state.dealer:
                if count >= self.pick_up_threshold:
                    return Bid(BidAction.PICK_UP)
            elif count >= self.order_up_threshold:
                return Bid(BidAction.ORDER_UP)
            return Bid.passing()

        best_suit: Optional[Suit] = None
        best_total = 0
        for suit in Suit:
            if suit is kitty_suit:
                continue
            total = suit_totals(hand, suit)[suit]
            if total > self.call_threshold and total > best_total:
                best_suit, best_total = suit, total
        if best_suit is None:
            return Bid.passing()
        logger.debug("Seat %d rates %s at %d", seat, best_suit, best_total)
        return Bid.call(best_suit)

    def choose_discard(self, state: GameState, seat: int) -> Card:
        hand = state.hands[seat]
        assign_points(hand, state.trump, None)
        card = _last_lowest(hand.cards)
        assert card is not None
        return card

    def choose_card(self, state: GameState, seat: int) -> Card:
        hand = state.hands[seat].cards
        if not hand:
            raise RuntimeError("No cards left to play for bot.")
        trick = state.trick
        highest = max((card.point_value for card in trick.cards()), default=0)
        if highest == 0:
            return _lowest(hand)

        lead = trick.lead_suit()
        trump = state.trump
        overtrumps = [c for c in hand if c.suit is trump and c.suit is not lead and c.point_value > highest]
        if overtrumps:
            return _lowest(overtrumps)
        winners = [c for c in hand if c.suit is lead and c.point_value > highest]
        if winners:
            return _lowest(winners)
        followers = [c for c in hand if c.suit is lead and c.point_value < highest]
        if followers:
            return _lowest(followers)
        return _lowest(hand)
