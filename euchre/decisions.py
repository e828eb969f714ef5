"""Request/response channel between the engine and a human seat's host."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .errors import AwaitCancelled, ProtocolViolation

logger = logging.getLogger(__name__)


class DecisionKind(Enum):
    ORDER_OR_PICKUP = "order_or_pickup"
    SUIT_OR_PASS = "suit_or_pass"
    DISCARD = "discard"
    PLAY_CARD = "play_card"
    ACKNOWLEDGEMENT = "acknowledgement"


@dataclass(frozen=True)
class DecisionRequest:
    prompt: str
    kind: DecisionKind
    seat: int = 0
    options: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DecisionResponse:
    value: str


class _Closed:
    pass


_CLOSED = _Closed()


class DecisionChannel:
    """One outstanding request at a time; the engine side suspends until answered.

    ``close()`` wakes both sides: a suspended :meth:`request` or
    :meth:`next_request` raises :class:`AwaitCancelled`.
    """

    def __init__(self) -> None:
        self._requests: asyncio.Queue[Union[DecisionRequest, _Closed]] = asyncio.Queue()
        self._responses: asyncio.Queue[Union[DecisionResponse, _Closed]] = asyncio.Queue()
        self._closed = False
        self.pending: Optional[DecisionRequest] = None
        self._answered = False
        self.transcript: List[tuple[DecisionRequest, DecisionResponse]] = []

    @property
    def closed(self) -> bool:
        return self._closed

    async def request(self, request: DecisionRequest) -> DecisionResponse:
        """Publish ``request`` and wait, without timeout, for the host's response."""
        if self._closed:
            raise AwaitCancelled("Decision channel is closed.")
        if self.pending is not None:
            raise ProtocolViolation("A decision request is already pending.")
        self.pending = request
        self._answered = False
        self._requests.put_nowait(request)
        logger.debug("Awaiting %s from seat %d: %s", request.kind.value, request.seat, request.prompt)
        response = await self._responses.get()
        if isinstance(response, _Closed):
            raise AwaitCancelled(f"Channel closed while awaiting {request.kind.value}.")
        self.pending = None
        self.transcript.append((request, response))
        return response

    async def next_request(self) -> DecisionRequest:
        """Host side: wait for the engine's next request."""
        if self._closed:
            raise AwaitCancelled("Decision channel is closed.")
        request = await self._requests.get()
        if isinstance(request, _Closed):
            raise AwaitCancelled("Decision channel is closed.")
        return request

    def respond(self, value: str) -> None:
        if self._closed:
            raise AwaitCancelled("Decision channel is closed.")
        if self.pending is None or self._answered:
            raise ProtocolViolation("No decision request is pending.")
        self._answered = True
        self._responses.put_nowait(DecisionResponse(value=str(value)))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._responses.put_nowait(_CLOSED)
        self._requests.put_nowait(_CLOSED)
        logger.debug("Decision channel closed")
