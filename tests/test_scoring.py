import pytest

from euchre.cards import Card, Rank, Suit
from euchre.errors import IncompleteTrick, InvariantViolation, InvalidPlay
from euchre.points import assign_points
from euchre.scoring import HandOutcome, award_trick, game_winner, score_hand
from euchre.trick import Trick


def full_trick(trump=Suit.HEARTS):
    trick = Trick()
    trick.add_play(1, Card(Rank.KING, Suit.CLUBS))
    trick.add_play(2, Card(Rank.ACE, Suit.CLUBS))
    trick.add_play(3, Card(Rank.NINE, Suit.HEARTS))
    trick.add_play(0, Card(Rank.ACE, Suit.SPADES))
    assign_points(trick.cards(), trump, trick.lead_suit())
    return trick


def test_lead_card_is_first_card_played():
    trick = Trick()
    trick.add_play(2, Card(Rank.TEN, Suit.DIAMONDS))
    trick.add_play(3, Card(Rank.ACE, Suit.CLUBS))

    assert trick.lead_card == Card(Rank.TEN, Suit.DIAMONDS)
    assert trick.lead_suit() is Suit.DIAMONDS
    assert [seat for seat, _ in trick.plays()] == [2, 3]
    assert not trick.is_complete()


def test_seat_cannot_play_twice():
    trick = Trick()
    trick.add_play(0, Card(Rank.TEN, Suit.DIAMONDS))

    with pytest.raises(InvalidPlay):
        trick.add_play(0, Card(Rank.NINE, Suit.DIAMONDS))


def test_incomplete_trick_cannot_be_awarded():
    trick = Trick()
    trick.add_play(0, Card(Rank.ACE, Suit.SPADES))
    tricks_won = [0, 0]

    with pytest.raises(IncompleteTrick):
        award_trick(trick, tricks_won)
    assert issubclass(IncompleteTrick, InvariantViolation)
    assert tricks_won == [0, 0]


def test_trump_wins_the_trick():
    tricks_won = [0, 0]
    winner = award_trick(full_trick(), tricks_won)

    assert winner == 3
    assert tricks_won == [0, 1]


def test_highest_lead_suit_wins_without_trump_played():
    tricks_won = [2, 1]
    winner = award_trick(full_trick(trump=Suit.DIAMONDS), tricks_won)

    assert winner == 2
    assert tricks_won == [3, 1]


def test_sixth_trick_is_rejected_without_touching_counts():
    tricks_won = [3, 2]

    with pytest.raises(InvariantViolation):
        award_trick(full_trick(), tricks_won)
    assert tricks_won == [3, 2]


def test_clear_resets_slots_and_lead():
    trick = full_trick()
    trick.clear()

    assert trick.is_empty()
    assert trick.lead_card is None


@pytest.mark.parametrize(
    "tricks_won, deciding_team, team, points, outcome",
    [
        ([5, 0], 0, 0, 2, HandOutcome.MARCH),
        ([5, 0], 1, 0, 2, HandOutcome.MARCH),
        ([0, 5], 1, 1, 2, HandOutcome.MARCH),
        ([3, 2], 0, 0, 1, HandOutcome.MADE),
        ([4, 1], 0, 0, 1, HandOutcome.MADE),
        ([3, 2], 1, 0, 2, HandOutcome.EUCHRE),
        ([1, 4], 0, 1, 2, HandOutcome.EUCHRE),
        ([2, 3], 1, 1, 1, HandOutcome.MADE),
    ],
)
def test_score_hand(tricks_won, deciding_team, team, points, outcome):
    result = score_hand(tricks_won, deciding_team)

    assert result.team == team
    assert result.points == points
    assert result.outcome is outcome


def test_score_hand_requires_five_tricks():
    with pytest.raises(InvariantViolation):
        score_hand([2, 2], 0)


def test_game_winner_uses_threshold_not_equality():
    assert game_winner([9, 8]) is None
    assert game_winner([11, 8]) == 0
    assert game_winner([9, 10]) == 1
