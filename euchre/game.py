"""High-level game orchestration for Euchre."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from .bidding import BidPhase, BiddingStateMachine
from .cards import Card
from .deck import SEATS, deal_hand
from .decisions import DecisionKind
from .errors import AwaitCancelled, InvariantViolation, ProtocolViolation
from .points import assign_points_to_hands
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import TRICKS_PER_HAND, HandScoreResult, award_trick, game_winner, score_hand
from .seats import Decision, DecisionContext, Seat
from .state import GameState, next_seat

logger = logging.getLogger(__name__)


class HandPhase(Enum):
    DEAL = auto()
    BIDDING = auto()
    PLAY = auto()
    COMPLETE = auto()


@dataclass(frozen=True)
class GameEvent:
    kind: str
    message: str
    seat: Optional[int] = None


Listener = Callable[[GameEvent], None]


class GameEngine:
    """Run deals, bidding, tricks and scoring until a team reaches the target.

    The engine is the only owner of :class:`GameState`. Seats act strictly
    one at a time; the only suspension point is a human seat's ``decide``.
    ``decks`` optionally supplies prearranged 24-card decks, consumed one per
    deal (redeals included) before falling back to shuffling.
    """

    def __init__(
        self,
        seats: Sequence[Seat],
        *,
        rules: Optional[RuleSet] = None,
        seed: Optional[int] = None,
        rng: Optional[Random] = None,
        dealer: Optional[int] = None,
        decks: Optional[Iterable[Sequence[Card]]] = None,
    ) -> None:
        if len(seats) != SEATS:
            raise ValueError(f"Euchre needs exactly {SEATS} seats, got {len(seats)}.")
        self.seats = list(seats)
        self.rules = rules or DEFAULT_RULES
        self.rng = rng or Random(seed)
        if dealer is None:
            dealer = self.rng.randrange(SEATS)
        self.state = GameState(dealer=dealer, current_seat=next_seat(dealer))
        self.bidding = BiddingStateMachine()
        self.phase = HandPhase.DEAL
        self.hand_history: List[HandScoreResult] = []
        self.winner: Optional[int] = None
        self.redeals = 0
        self._decks: Optional[Iterator[Sequence[Card]]] = iter(decks) if decks is not None else None
        self._listeners: List[Listener] = []

    # Notifications -----------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, kind: str, message: str, seat: Optional[int] = None) -> None:
        event = GameEvent(kind=kind, message=message, seat=seat)
        for listener in self._listeners:
            listener(event)

    async def _announce(self, kind: str, message: str, seat: Optional[int] = None) -> None:
        logger.info(message)
        self._emit(kind, message, seat)
        if not self.rules.acknowledge_events:
            return
        for index, controller in enumerate(self.seats):
            if controller.human:
                await controller.notify(index, message)

    # Hand lifecycle ----------------------------------------------------

    def deal(self) -> None:
        deck = next(self._decks, None) if self._decks is not None else None
        hands, kitty, remainder = deal_hand(rng=self.rng, deck=deck)
        state = self.state
        state.reset_hand()
        state.hands = hands
        state.kitty = kitty
        state.undealt = list(remainder.cards)
        state.current_seat = state.left_of_dealer()
        self.phase = HandPhase.BIDDING

    async def run_bidding(self) -> None:
        """Bid until trump is decided, redealing after two full laps of passes."""
        if self.phase is not HandPhase.BIDDING:
            raise InvariantViolation(f"Cannot bid in phase {self.phase.name}.")
        state = self.state
        carry = False
        while True:
            self.bidding.start(state, carry_gone_once=carry)
            for index, controller in enumerate(self.seats):
                controller.on_hand_start(state, index)
            await self._announce("deal", f"Deal goes to seat {state.dealer}. The kitty shows the {state.kitty}.", state.dealer)

            while self.bidding.phase in (BidPhase.ROUND1_ORDER, BidPhase.ROUND2_CALL):
                await self._bid_turn()
            if self.bidding.phase is BidPhase.ROUND1_DISCARD:
                await self._dealer_discard()
            if self.bidding.is_decided():
                break

            self.redeals += 1
            if self.rules.max_redeals is not None and self.redeals > self.rules.max_redeals:
                raise InvariantViolation(f"Bidding stalled for {self.redeals} consecutive deals.")
            state.dealer = next_seat(state.dealer)
            await self._announce("redeal", f"No one decided on trump. Deal goes to seat {state.dealer}.", state.dealer)
            self.deal()
            carry = self.rules.gone_once_on_redeal == "carry"

        self.redeals = 0
        state.current_seat = state.left_of_dealer()
        self.phase = HandPhase.PLAY

    async def _bid_turn(self) -> None:
        state = self.state
        seat = state.current_seat
        phase = self.bidding.phase
        assert state.kitty is not None
        if phase is BidPhase.ROUND1_ORDER:
            kind = DecisionKind.ORDER_OR_PICKUP
            if seat == state.dealer:
                prompt = f"Would you like to pick up the {state.kitty}?"
            else:
                prompt = f"Would you like to order up the {state.kitty} to seat {state.dealer}?"
        else:
            kind = DecisionKind.SUIT_OR_PASS
            prompt = "Choose the trump suit"

        legal = tuple(self.bidding.legal_bids(state))
        decision = await self._decide(DecisionContext(kind, seat, state, prompt, phase, legal))
        if decision.bid is None:
            raise ProtocolViolation(f"Seat {seat} returned no bid.")
        self.bidding.apply(state, seat, decision.bid)

        if state.picked_up:
            message = f"Seat {seat} picked up the {state.kitty}. {state.trump} is now trump."
        elif state.deciding_seat == seat and self.bidding.phase is BidPhase.DECIDED:
            message = f"Seat {seat} called {state.trump}. {state.trump} is now trump."
        elif state.ordered_up:
            message = f"Seat {seat} ordered up the {state.kitty} to the dealer. {state.trump} is now trump."
        else:
            message = f"Seat {seat} passed."
        await self._announce("bid", message, seat)

    async def _dealer_discard(self) -> None:
        state = self.state
        dealer = state.dealer
        context = DecisionContext(DecisionKind.DISCARD, dealer, state, "Select a card to discard")
        decision = await self._decide(context)
        if decision.card is None:
            raise ProtocolViolation(f"Dealer {dealer} returned no discard.")
        self.bidding.discard(state, dealer, decision.card)
        logger.debug("Dealer %d buried %s", dealer, state.discard)

    async def play_trick(self) -> int:
        """Collect one card from each seat, starting with ``current_seat``; return the winner."""
        if self.phase is not HandPhase.PLAY:
            raise InvariantViolation(f"Cannot play a trick in phase {self.phase.name}.")
        state = self.state
        trick = state.trick
        trick.clear()
        self._reassign_points()
        leader = state.current_seat

        for offset in range(SEATS):
            seat = (leader + offset) % SEATS
            state.current_seat = seat
            context = DecisionContext(DecisionKind.PLAY_CARD, seat, state, "Select a card to play")
            decision = await self._decide(context)
            if decision.card is None:
                raise ProtocolViolation(f"Seat {seat} returned no card.")
            card = state.hands[seat].remove(decision.card)
            trick.add_play(seat, card)
            self._reassign_points()
            self._emit("play", f"Seat {seat} played the {card}.", seat)

        winner = award_trick(trick, state.tricks_won)
        state.played.extend(trick.cards())
        trick.clear()
        state.current_seat = winner
        await self._announce("trick", f"Seat {winner} won the trick!", winner)
        return winner

    async def play_hand(self) -> HandScoreResult:
        if self.phase in (HandPhase.DEAL, HandPhase.COMPLETE):
            self.deal()
        try:
            await self.run_bidding()
            for _ in range(TRICKS_PER_HAND):
                await self.play_trick()
        except AwaitCancelled:
            logger.warning("Hand aborted: decision channel closed")
            raise

        state = self.state
        result = score_hand(
            state.tricks_won,
            state.deciding_team(),
            march_points=self.rules.march_points,
            euchre_points=self.rules.euchre_points,
            made_points=self.rules.made_points,
        )
        state.scores[result.team] += result.points
        self.hand_history.append(result)
        self.phase = HandPhase.COMPLETE
        await self._announce(
            "hand",
            f"Team {result.team} won the hand ({result.outcome.value}, {result.points} points).",
        )
        return result

    async def play_game(self) -> int:
        """Play hands, rotating the deal, until a team reaches the winning score."""
        while self.winner is None:
            await self.play_hand()
            self.winner = game_winner(self.state.scores, self.rules.winning_score)
            if self.winner is None:
                self.state.dealer = next_seat(self.state.dealer)
        await self._announce("game", f"Team {self.winner} won the game!")
        return self.winner

    # Helpers -----------------------------------------------------------

    async def _decide(self, context: DecisionContext) -> Decision:
        decision = await self.seats[context.seat].decide(context)
        if decision.kind is not context.kind:
            raise ProtocolViolation(f"Expected a {context.kind.value} decision, got {decision.kind.value}.")
        return decision

    def _reassign_points(self) -> None:
        state = self.state
        assign_points_to_hands([*state.hands, state.trick.cards()], state.trump, state.trick.lead_suit())
