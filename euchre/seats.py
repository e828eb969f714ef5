"""Seat controllers: one ``decide`` coroutine for bot and human seats alike."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from .bidding import Bid, BidAction, BidPhase
from .cards import Card, card_label
from .decisions import DecisionChannel, DecisionKind, DecisionRequest
from .errors import ProtocolViolation
from .state import GameState

YES = "Yes"
NO = "No"
PASS = "Pass"
ACKNOWLEDGED = "Acknowledged"


class Strategy(Protocol):
    name: str

    def on_hand_start(self, state: GameState, seat: int) -> None: ...

    def offer_bid(self, state: GameState, seat: int, phase: BidPhase, legal: Sequence[Bid]) -> Bid: ...

    def choose_discard(self, state: GameState, seat: int) -> Card: ...

    def choose_card(self, state: GameState, seat: int) -> Card: ...


@dataclass(frozen=True)
class DecisionContext:
    kind: DecisionKind
    seat: int
    state: GameState
    prompt: str = ""
    phase: Optional[BidPhase] = None
    legal_bids: tuple[Bid, ...] = ()


@dataclass(frozen=True)
class Decision:
    kind: DecisionKind
    bid: Optional[Bid] = None
    card: Optional[Card] = None


class Seat:
    """Base seat. Subclasses answer every :class:`DecisionContext`."""

    human = False

    @property
    def name(self) -> str:
        return type(self).__name__

    def on_hand_start(self, state: GameState, seat: int) -> None:
        return None

    async def decide(self, context: DecisionContext) -> Decision:
        raise NotImplementedError

    async def notify(self, seat: int, message: str) -> None:
        return None


class BotSeat(Seat):
    """Computer seat; answers synchronously and never suspends."""

    def __init__(self, strategy: Strategy) -> None:
        self.strategy = strategy

    @property
    def name(self) -> str:
        return self.strategy.name

    def on_hand_start(self, state: GameState, seat: int) -> None:
        self.strategy.on_hand_start(state, seat)

    async def decide(self, context: DecisionContext) -> Decision:
        kind = context.kind
        if kind in (DecisionKind.ORDER_OR_PICKUP, DecisionKind.SUIT_OR_PASS):
            assert context.phase is not None
            bid = self.strategy.offer_bid(context.state, context.seat, context.phase, context.legal_bids)
            return Decision(kind, bid=bid)
        if kind is DecisionKind.DISCARD:
            return Decision(kind, card=self.strategy.choose_discard(context.state, context.seat))
        if kind is DecisionKind.PLAY_CARD:
            return Decision(kind, card=self.strategy.choose_card(context.state, context.seat))
        return Decision(kind)


class HumanSeat(Seat):
    """Seat answered by a host through a :class:`DecisionChannel`."""

    human = True

    def __init__(self, channel: DecisionChannel) -> None:
        self.channel = channel

    async def decide(self, context: DecisionContext) -> Decision:
        options = request_options(context)
        response = await self.channel.request(
            DecisionRequest(prompt=context.prompt, kind=context.kind, seat=context.seat, options=options)
        )
        return parse_response(context, response.value)

    async def notify(self, seat: int, message: str) -> None:
        await self.channel.request(
            DecisionRequest(prompt=message, kind=DecisionKind.ACKNOWLEDGEMENT, seat=seat, options=(ACKNOWLEDGED,))
        )


def request_options(context: DecisionContext) -> tuple[str, ...]:
    """Labels offered to the host. Card choices are answered by option index."""
    kind = context.kind
    if kind is DecisionKind.ORDER_OR_PICKUP:
        return (YES, NO)
    if kind is DecisionKind.SUIT_OR_PASS:
        return tuple(str(bid.suit) for bid in context.legal_bids if bid.suit is not None) + (PASS,)
    if kind in (DecisionKind.DISCARD, DecisionKind.PLAY_CARD):
        return tuple(card_label(card) for card in context.state.hands[context.seat])
    return (ACKNOWLEDGED,)


def parse_response(context: DecisionContext, value: str) -> Decision:
    """Translate a host response into a :class:`Decision` or raise ProtocolViolation."""
    kind = context.kind
    state = context.state
    if kind is DecisionKind.ORDER_OR_PICKUP:
        if value == YES:
            action = BidAction.PICK_UP if context.seat == state.dealer else BidAction.ORDER_UP
            return Decision(kind, bid=Bid(action))
        if value == NO:
            return Decision(kind, bid=Bid.passing())
        raise ProtocolViolation(f"Expected {YES!r} or {NO!r}, got {value!r}.")

    if kind is DecisionKind.SUIT_OR_PASS:
        if value == PASS:
            return Decision(kind, bid=Bid.passing())
        for bid in context.legal_bids:
            if bid.suit is not None and str(bid.suit) == value:
                return Decision(kind, bid=bid)
        legal = ", ".join(request_options(context))
        raise ProtocolViolation(f"Expected one of {legal}, got {value!r}.")

    if kind in (DecisionKind.DISCARD, DecisionKind.PLAY_CARD):
        hand = state.hands[context.seat]
        try:
            index = int(value)
        except (TypeError, ValueError) as exc:
            raise ProtocolViolation(f"Expected a hand index, got {value!r}.") from exc
        if not 0 <= index < len(hand):
            raise ProtocolViolation(f"Hand index {index} out of range 0..{len(hand) - 1}.")
        return Decision(kind, card=hand[index])

    return Decision(kind)
