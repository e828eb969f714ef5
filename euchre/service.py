"""Read-only snapshots of a running game for hosts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from .cards import card_label, serialize_card
from .decisions import DecisionChannel
from .game import GameEngine, HandPhase


@dataclass
class TrickPlayView:
    seat: int
    card: dict
    label: str


@dataclass
class PendingView:
    kind: str
    prompt: str
    seat: int
    options: list[str]


@dataclass
class GameView:
    phase: str
    bid_phase: str
    dealer: int
    current_seat: int
    deciding_seat: int
    trump: Optional[str]
    kitty: Optional[dict]
    kitty_label: Optional[str]
    ordered_up: bool
    picked_up: bool
    gone_once: bool
    hand: list[dict]
    hand_labels: list[str]
    hand_sizes: list[int]
    trick: list[TrickPlayView]
    tricks_won: list[int]
    scores: list[int]
    winner: Optional[int]
    pending: Optional[PendingView]

    def to_dict(self) -> dict:
        return asdict(self)


def build_view(engine: GameEngine, perspective: int = 0, channel: Optional[DecisionChannel] = None) -> GameView:
    """Snapshot ``engine`` as seen from seat ``perspective``.

    The kitty is only shown while bidding is still undecided.
    """
    state = engine.state
    visible_hand = list(state.hands[perspective])
    kitty_visible = engine.phase is HandPhase.BIDDING and state.trump is None and state.kitty is not None

    pending: Optional[PendingView] = None
    if channel is not None and channel.pending is not None:
        request = channel.pending
        pending = PendingView(
            kind=request.kind.value,
            prompt=request.prompt,
            seat=request.seat,
            options=list(request.options),
        )

    return GameView(
        phase=engine.phase.name.lower(),
        bid_phase=engine.bidding.phase.name.lower(),
        dealer=state.dealer,
        current_seat=state.current_seat,
        deciding_seat=state.deciding_seat,
        trump=str(state.trump) if state.trump is not None else None,
        kitty=serialize_card(state.kitty) if kitty_visible and state.kitty else None,
        kitty_label=card_label(state.kitty) if kitty_visible and state.kitty else None,
        ordered_up=state.ordered_up,
        picked_up=state.picked_up,
        gone_once=state.gone_once,
        hand=[serialize_card(card) for card in visible_hand],
        hand_labels=[card_label(card) for card in visible_hand],
        hand_sizes=[len(hand) for hand in state.hands],
        trick=[
            TrickPlayView(seat=seat, card=serialize_card(card), label=card_label(card))
            for seat, card in state.trick.plays()
        ],
        tricks_won=list(state.tricks_won),
        scores=list(state.scores),
        winner=engine.winner,
        pending=pending,
    )
