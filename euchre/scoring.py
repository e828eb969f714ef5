"""Trick and hand scoring helpers for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .errors import IncompleteTrick, InvariantViolation
from .trick import Trick

TRICKS_PER_HAND = 5


class HandOutcome(Enum):
    MADE = "made"
    MARCH = "march"
    EUCHRE = "euchre"


@dataclass(frozen=True)
class HandScoreResult:
    team: int
    points: int
    outcome: HandOutcome
    tricks_won: tuple[int, int]
    deciding_team: int


def team_of(seat: int) -> int:
    return seat % 2


def award_trick(trick: Trick, tricks_won: List[int]) -> int:
    """Return the winning seat and credit its team with the trick.

    Every slot must be filled. The highest cached ``point_value`` wins; on
    equal values the lower seat keeps the trick.
    """
    highest = 0
    winner = -1
    for seat, card in enumerate(trick.slots):
        if card is None:
            raise IncompleteTrick(f"Seat {seat} has not played to the trick.")
        if card.point_value > highest:
            highest = card.point_value
            winner = seat
    if winner < 0:
        raise InvariantViolation("Trick cards carry no point values; assign points first.")
    if sum(tricks_won) >= TRICKS_PER_HAND:
        raise InvariantViolation(f"All {TRICKS_PER_HAND} tricks of the hand are already credited.")
    tricks_won[team_of(winner)] += 1
    return winner


def score_hand(
    tricks_won: Sequence[int],
    deciding_team: int,
    *,
    march_points: int = 2,
    euchre_points: int = 2,
    made_points: int = 1,
) -> HandScoreResult:
    """Decide which single team scores for the hand and how much."""
    if len(tricks_won) != 2 or sum(tricks_won) != TRICKS_PER_HAND:
        raise InvariantViolation(f"Hand must account for exactly {TRICKS_PER_HAND} tricks, got {list(tricks_won)}.")
    if deciding_team not in (0, 1):
        raise InvariantViolation(f"Deciding team must be 0 or 1, got {deciding_team}.")

    team = 0 if tricks_won[0] >= 3 else 1
    if tricks_won[team] == TRICKS_PER_HAND:
        outcome, points = HandOutcome.MARCH, march_points
    elif team != deciding_team:
        outcome, points = HandOutcome.EUCHRE, euchre_points
    else:
        outcome, points = HandOutcome.MADE, made_points

    return HandScoreResult(
        team=team,
        points=points,
        outcome=outcome,
        tricks_won=(tricks_won[0], tricks_won[1]),
        deciding_team=deciding_team,
    )


def game_winner(scores: Sequence[int], winning_score: int = 10) -> Optional[int]:
    """Return the team that has reached ``winning_score``, if any."""
    for team, score in enumerate(scores):
        if score >= winning_score:
            return team
    return None
