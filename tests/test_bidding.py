import pytest

from euchre.bidding import Bid, BidAction, BidPhase, BiddingStateMachine
from euchre.cards import Card, Rank, Suit
from euchre.deck import deal_hand, stack_deck
from euchre.errors import BiddingError
from euchre.state import NO_SEAT, GameState


def dealt_state(dealer=2):
    hands = [
        [Card(Rank.NINE, Suit.HEARTS), Card(Rank.TEN, Suit.HEARTS), Card(Rank.QUEEN, Suit.HEARTS), Card(Rank.NINE, Suit.CLUBS), Card(Rank.TEN, Suit.CLUBS)],
        [Card(Rank.KING, Suit.HEARTS), Card(Rank.ACE, Suit.HEARTS), Card(Rank.NINE, Suit.DIAMONDS), Card(Rank.TEN, Suit.DIAMONDS), Card(Rank.QUEEN, Suit.CLUBS)],
        [Card(Rank.JACK, Suit.DIAMONDS), Card(Rank.QUEEN, Suit.DIAMONDS), Card(Rank.KING, Suit.DIAMONDS), Card(Rank.ACE, Suit.DIAMONDS), Card(Rank.KING, Suit.CLUBS)],
        [Card(Rank.NINE, Suit.SPADES), Card(Rank.TEN, Suit.SPADES), Card(Rank.QUEEN, Suit.SPADES), Card(Rank.ACE, Suit.CLUBS), Card(Rank.JACK, Suit.HEARTS)],
    ]
    kitty = Card(Rank.JACK, Suit.SPADES)
    dealt, dealt_kitty, remainder = deal_hand(deck=stack_deck(hands, kitty))
    state = GameState(dealer=dealer, hands=dealt, kitty=dealt_kitty, undealt=list(remainder.cards))
    return state


def test_start_opens_round_one_left_of_dealer():
    state = dealt_state()
    machine = BiddingStateMachine()

    assert machine.start(state) is BidPhase.ROUND1_ORDER
    assert state.current_seat == 3
    assert state.trump is None
    assert state.deciding_seat == NO_SEAT


def test_order_up_forces_dealer_discard():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)

    phase = machine.apply(state, 3, Bid(BidAction.ORDER_UP))

    assert phase is BidPhase.ROUND1_DISCARD
    assert state.trump is Suit.SPADES
    assert state.ordered_up and not state.picked_up
    assert state.deciding_seat == 3
    assert state.current_seat == 2
    assert len(state.hands[2]) == 6
    assert Card(Rank.JACK, Suit.SPADES) in state.hands[2]

    machine.discard(state, 2, Card(Rank.KING, Suit.CLUBS))

    assert machine.is_decided()
    assert len(state.hands[2]) == 5
    assert state.discard == Card(Rank.KING, Suit.CLUBS)
    assert state.current_seat == 3
    assert sorted(map(str, state.all_cards())) == sorted(map(str, set(state.all_cards())))
    assert len(state.all_cards()) == 24


def test_points_follow_declared_trump_after_decision():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)
    machine.apply(state, 3, Bid(BidAction.ORDER_UP))
    machine.discard(state, 2, Card(Rank.KING, Suit.CLUBS))

    right = next(card for card in state.hands[2] if card == Card(Rank.JACK, Suit.SPADES))
    off_jack = next(card for card in state.hands[3] if card == Card(Rank.JACK, Suit.HEARTS))
    assert right.point_value == 20
    assert off_jack.point_value == 4
    assert next(card for card in state.hands[3] if card == Card(Rank.NINE, Suit.SPADES)).point_value == 14


def test_dealer_pick_up():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)
    machine.apply(state, 3, Bid.passing())
    machine.apply(state, 0, Bid.passing())
    machine.apply(state, 1, Bid.passing())

    assert machine.legal_bids(state) == [Bid(BidAction.PICK_UP), Bid.passing()]
    machine.apply(state, 2, Bid(BidAction.PICK_UP))

    assert state.picked_up and not state.ordered_up
    assert state.deciding_seat == 2
    assert machine.phase is BidPhase.ROUND1_DISCARD


def test_dealer_cannot_order_up_and_others_cannot_pick_up():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)

    with pytest.raises(BiddingError):
        machine.apply(state, 3, Bid(BidAction.PICK_UP))
    for seat in (3, 0, 1):
        machine.apply(state, seat, Bid.passing())
    with pytest.raises(BiddingError):
        machine.apply(state, 2, Bid(BidAction.ORDER_UP))


def test_out_of_turn_bid_is_rejected():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)

    with pytest.raises(BiddingError):
        machine.apply(state, 0, Bid.passing())


def test_round_two_call_decides_without_discard():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)
    for seat in (3, 0, 1, 2):
        machine.apply(state, seat, Bid.passing())

    assert machine.phase is BidPhase.ROUND2_CALL
    assert state.gone_once
    assert state.current_seat == 3
    with pytest.raises(BiddingError):
        machine.apply(state, 3, Bid.call(Suit.SPADES))

    machine.apply(state, 3, Bid.passing())
    machine.apply(state, 0, Bid.call(Suit.DIAMONDS))

    assert machine.is_decided()
    assert state.trump is Suit.DIAMONDS
    assert state.deciding_seat == 0
    assert state.ordered_up and not state.picked_up
    assert [len(hand) for hand in state.hands] == [5, 5, 5, 5]
    assert state.discard is None


def test_eight_passes_end_in_redeal():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)

    for seat in (3, 0, 1, 2, 3, 0, 1, 2):
        machine.apply(state, seat, Bid.passing())

    assert machine.phase is BidPhase.REDEAL
    assert state.deciding_seat == NO_SEAT
    with pytest.raises(BiddingError):
        machine.apply(state, 3, Bid.passing())


def test_restart_resets_or_carries_gone_once():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)
    for seat in (3, 0, 1, 2, 3, 0, 1, 2):
        machine.apply(state, seat, Bid.passing())

    assert machine.start(state, carry_gone_once=True) is BidPhase.ROUND2_CALL
    assert state.gone_once

    assert machine.start(state) is BidPhase.ROUND1_ORDER
    assert not state.gone_once


def test_discard_outside_discard_phase_is_rejected():
    state = dealt_state(dealer=2)
    machine = BiddingStateMachine()
    machine.start(state)

    with pytest.raises(BiddingError):
        machine.discard(state, 2, Card(Rank.KING, Suit.CLUBS))
