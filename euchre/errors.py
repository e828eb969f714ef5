"""Error taxonomy shared by the Euchre engine."""

from __future__ import annotations


class EuchreError(Exception):
    """Base class for every error raised by the engine."""


class InvariantViolation(EuchreError, RuntimeError):
    """Raised when a caller breaks a precondition of the engine."""


class DeckExhausted(InvariantViolation):
    """Raised when dealing from an empty deck."""


class IncompleteTrick(InvariantViolation):
    """Raised when scoring a trick that still has an empty slot."""


class UnknownSuit(InvariantViolation):
    """Raised when a card carries a suit outside the four known suits."""


class ProtocolViolation(EuchreError, ValueError):
    """Raised when a decision or action does not fit the pending request."""


class BiddingError(ProtocolViolation):
    """Raised when a bidding action is not legal in the current phase."""


class InvalidPlay(ProtocolViolation):
    """Raised when a card cannot be played into the trick."""


class AwaitCancelled(EuchreError):
    """Raised from a pending human decision when its channel is closed."""
