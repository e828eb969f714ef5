"""Simple bot arena for Euchre."""

from __future__ import annotations

import argparse
import asyncio
import logging
from random import Random
from typing import Dict, Iterable, Optional

from euchre.game import GameEngine
from euchre.rules_schema import RuleSet
from euchre.seats import BotSeat

from .base import BotStrategy
from .heuristic import HeuristicBot
from .random_bot import RandomBot

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "heuristic": HeuristicBot,
    "random": RandomBot,
}


def play_game(
    bot_a: BotStrategy,
    bot_b: BotStrategy,
    *,
    rng: Optional[Random] = None,
    rules: Optional[RuleSet] = None,
) -> GameEngine:
    """Play one game with ``bot_a`` on seats 0/2 and ``bot_b`` on seats 1/3."""
    seats = [BotSeat(bot_a), BotSeat(bot_b), BotSeat(bot_a), BotSeat(bot_b)]
    engine = GameEngine(seats, rules=rules, rng=rng)
    asyncio.run(engine.play_game())
    return engine


def run_match(
    bot_a: BotStrategy,
    bot_b: BotStrategy,
    *,
    n_games: int = 10,
    seed: int | None = None,
    rules: Optional[RuleSet] = None,
) -> dict:
    rng = Random(seed)
    wins = [0, 0]
    history = []
    for _ in range(n_games):
        engine = play_game(bot_a, bot_b, rng=rng, rules=rules)
        assert engine.winner is not None
        wins[engine.winner] += 1
        history.append(
            {
                "winner": engine.winner,
                "scores": tuple(engine.state.scores),
                "hands": [
                    {"team": result.team, "points": result.points, "outcome": result.outcome.value}
                    for result in engine.hand_history
                ],
            }
        )
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot match.")
    parser.add_argument("--bot-a", default="heuristic", choices=BOT_REGISTRY.keys())
    parser.add_argument("--bot-b", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    bot_a = BOT_REGISTRY[args.bot_a]()
    bot_b = BOT_REGISTRY[args.bot_b]()
    results = run_match(bot_a, bot_b, n_games=args.n, seed=args.seed)

    print(f"Wins after {args.n} games: {args.bot_a}={results['wins'][0]} {args.bot_b}={results['wins'][1]}")


if __name__ == "__main__":
    main()
