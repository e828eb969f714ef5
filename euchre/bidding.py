"""Two-round trump bidding for Euchre."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cards import Card, Suit
from .errors import BiddingError, InvariantViolation
from .points import assign_points_to_hands
from .state import GameState, next_seat

logger = logging.getLogger(__name__)


class BidPhase(Enum):
    ROUND1_ORDER = auto()
    ROUND1_DISCARD = auto()
    ROUND2_CALL = auto()
    REDEAL = auto()
    DECIDED = auto()


class BidAction(Enum):
    PASS = auto()
    ORDER_UP = auto()
    PICK_UP = auto()
    CALL = auto()


@dataclass(frozen=True)
class Bid:
    action: BidAction
    suit: Optional[Suit] = None

    @classmethod
    def passing(cls) -> "Bid":
        return cls(BidAction.PASS)

    @classmethod
    def call(cls, suit: Suit) -> "Bid":
        return cls(BidAction.CALL, suit)


@dataclass
class BiddingStateMachine:
    """Drive trump selection over a :class:`GameState` handed in per call.

    Round one offers the kitty suit to each seat from the dealer's left; a
    non-dealer may order it up and the dealer may pick it up, after which the
    dealer holds six cards and must discard one. If the dealer passes too,
    round two lets each seat call any other suit. A second full lap of passes
    ends in ``REDEAL``.
    """

    phase: BidPhase = BidPhase.ROUND1_ORDER
    history: List[Tuple[int, str, Optional[Suit]]] = field(default_factory=list)

    def start(self, state: GameState, *, carry_gone_once: bool = False) -> BidPhase:
        if state.kitty is None:
            raise InvariantViolation("Bidding needs a kitty card.")
        gone_once = state.gone_once and carry_gone_once
        state.reset_bidding()
        state.gone_once = gone_once
        state.current_seat = state.left_of_dealer()
        assign_points_to_hands(state.hands, None, None)
        self.history = []
        self.phase = BidPhase.ROUND2_CALL if gone_once else BidPhase.ROUND1_ORDER
        logger.debug("Bidding opens in %s, dealer %d, kitty %s", self.phase.name, state.dealer, state.kitty)
        return self.phase

    def is_decided(self) -> bool:
        return self.phase is BidPhase.DECIDED

    def legal_bids(self, state: GameState) -> List[Bid]:
        if self.phase is BidPhase.ROUND1_ORDER:
            take = BidAction.PICK_UP if state.current_seat == state.dealer else BidAction.ORDER_UP
            return [Bid(take), Bid.passing()]
        if self.phase is BidPhase.ROUND2_CALL:
            assert state.kitty is not None
            return [Bid.call(suit) for suit in Suit if suit is not state.kitty.suit] + [Bid.passing()]
        return []

    def apply(self, state: GameState, seat: int, bid: Bid) -> BidPhase:
        self._ensure_turn(state, seat)
        if self.phase is BidPhase.ROUND1_ORDER:
            self._apply_round_one(state, seat, bid)
        else:
            self._apply_round_two(state, seat, bid)
        return self.phase

    def discard(self, state: GameState, seat: int, card: Card) -> BidPhase:
        if self.phase is not BidPhase.ROUND1_DISCARD:
            raise BiddingError(f"No discard expected in phase {self.phase.name}.")
        if seat != state.dealer:
            raise BiddingError("Only the dealer discards.")
        hand = state.hands[seat]
        if len(hand) != 6:
            raise InvariantViolation(f"Dealer must hold six cards to discard, holds {len(hand)}.")
        state.discard = hand.remove(card)
        self.history.append((seat, "discard", None))
        self._decide(state)
        return self.phase

    def _apply_round_one(self, state: GameState, seat: int, bid: Bid) -> None:
        is_dealer = seat == state.dealer
        if bid.action is BidAction.PASS:
            self.history.append((seat, "pass", None))
            if is_dealer:
                state.gone_once = True
                state.current_seat = state.left_of_dealer()
                self.phase = BidPhase.ROUND2_CALL
                logger.debug("Round one exhausted; round two opens at seat %d", state.current_seat)
            else:
                state.current_seat = next_seat(seat)
            return

        if bid.action is BidAction.ORDER_UP and not is_dealer:
            state.ordered_up = True
        elif bid.action is BidAction.PICK_UP and is_dealer:
            state.picked_up = True
        else:
            raise BiddingError(f"Seat {seat} cannot {bid.action.name.lower()} in round one.")

        assert state.kitty is not None
        self.history.append((seat, bid.action.name.lower(), state.kitty.suit))
        state.trump = state.kitty.suit
        state.deciding_seat = seat
        state.hands[state.dealer].add(state.kitty)
        state.kitty_taken = True
        state.current_seat = state.dealer
        assign_points_to_hands(state.hands, state.trump, None)
        self.phase = BidPhase.ROUND1_DISCARD
        logger.info("Seat %d took %s as trump; dealer %d to discard", seat, state.trump, state.dealer)

    def _apply_round_two(self, state: GameState, seat: int, bid: Bid) -> None:
        if bid.action is BidAction.PASS:
            self.history.append((seat, "pass", None))
            if seat == state.dealer:
                self.phase = BidPhase.REDEAL
                logger.info("All seats passed twice; redeal")
            else:
                state.current_seat = next_seat(seat)
            return

        if bid.action is not BidAction.CALL or bid.suit is None:
            raise BiddingError(f"Seat {seat} must call a suit or pass in round two.")
        assert state.kitty is not None
        if bid.suit is state.kitty.suit:
            raise BiddingError(f"{bid.suit} was turned down in round one and cannot be called.")

        self.history.append((seat, "call", bid.suit))
        state.trump = bid.suit
        state.deciding_seat = seat
        state.ordered_up = True
        logger.info("Seat %d called %s as trump", seat, state.trump)
        self._decide(state)

    def _decide(self, state: GameState) -> None:
        self.phase = BidPhase.DECIDED
        state.current_seat = state.left_of_dealer()
        assign_points_to_hands(state.hands, state.trump, None)

    def _ensure_turn(self, state: GameState, seat: int) -> None:
        if self.phase not in (BidPhase.ROUND1_ORDER, BidPhase.ROUND2_CALL):
            raise BiddingError(f"Bidding is not accepting bids in phase {self.phase.name}.")
        if seat != state.current_seat:
            raise BiddingError(f"Not seat {seat}'s turn to bid (seat {state.current_seat} is).")
