"""REST service to play Euchre from seat 0 against three heuristic bots."""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from bots.heuristic import HeuristicBot
from euchre.decisions import DecisionChannel
from euchre.errors import AwaitCancelled, EuchreError, ProtocolViolation
from euchre.game import GameEngine
from euchre.rules_schema import RuleSet
from euchre.seats import BotSeat, HumanSeat
from euchre.service import build_view

logger = logging.getLogger(__name__)

HUMAN_SEAT = 0


class StartRequest(BaseModel):
    seed: Optional[int] = None
    dealer: Optional[int] = Field(None, ge=0, le=3)
    rules: Dict[str, Any] = Field(default_factory=dict)


class RespondRequest(BaseModel):
    value: str


class GameSession:
    def __init__(self, engine: GameEngine, channel: DecisionChannel) -> None:
        self.engine = engine
        self.channel = channel
        self.task: asyncio.Task = asyncio.create_task(engine.play_game())

    async def advance(self) -> None:
        """Wait until the engine asks the human something or the game task ends."""
        if self.task.done():
            return
        getter = asyncio.ensure_future(self.channel.next_request())
        done, _ = await asyncio.wait({getter, self.task}, return_when=asyncio.FIRST_COMPLETED)
        if getter in done:
            getter.result()
        else:
            getter.cancel()

    def failure(self) -> Optional[BaseException]:
        if not self.task.done() or self.task.cancelled():
            return None
        return self.task.exception()


sessions: Dict[str, GameSession] = {}


app = FastAPI(title="Euchre Play Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def serialize_state(session: GameSession) -> Dict[str, object]:
    view = build_view(session.engine, HUMAN_SEAT, session.channel)
    return {
        **view.to_dict(),
        "finished": session.task.done(),
    }


def ensure_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


def raise_for_failure(game_id: str, session: GameSession) -> None:
    error = session.failure()
    if error is None:
        return
    sessions.pop(game_id, None)
    if isinstance(error, ProtocolViolation):
        raise HTTPException(status_code=400, detail=f"{type(error).__name__}: {error}")
    if isinstance(error, EuchreError):
        raise HTTPException(status_code=409, detail=f"{type(error).__name__}: {error}")
    raise error


@app.post("/games")
async def start_game(request: StartRequest) -> Dict[str, object]:
    try:
        rules = RuleSet.from_mapping(request.rules)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    channel = DecisionChannel()
    seats = [HumanSeat(channel)] + [BotSeat(HeuristicBot(rules)) for _ in range(3)]
    engine = GameEngine(seats, rules=rules, seed=request.seed, dealer=request.dealer)
    session = GameSession(engine, channel)
    game_id = uuid.uuid4().hex
    sessions[game_id] = session
    logger.info("Started game %s", game_id)

    await session.advance()
    raise_for_failure(game_id, session)
    return {"game_id": game_id, "state": serialize_state(session)}


@app.get("/games/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = ensure_session(game_id)
    return {"game_id": game_id, "state": serialize_state(session)}


@app.post("/games/{game_id}/respond")
async def respond(game_id: str, request: RespondRequest) -> Dict[str, object]:
    session = ensure_session(game_id)
    if session.task.done():
        raise HTTPException(status_code=409, detail="Game already finished")
    try:
        session.channel.respond(request.value)
    except ProtocolViolation as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    await session.advance()
    raise_for_failure(game_id, session)
    return {"game_id": game_id, "state": serialize_state(session)}


@app.delete("/games/{game_id}")
async def cancel_game(game_id: str) -> Dict[str, object]:
    session = ensure_session(game_id)
    session.channel.close()
    results = await asyncio.gather(session.task, return_exceptions=True)
    sessions.pop(game_id, None)
    cancelled = isinstance(results[0], AwaitCancelled)
    logger.info("Closed game %s (cancelled=%s)", game_id, cancelled)
    return {"game_id": game_id, "cancelled": cancelled}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host="127.0.0.1", port=8000)
