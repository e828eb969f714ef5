#!/usr/bin/env python3
"""Simulate AI-only Euchre games and summarise hand outcomes."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from bots.bot_arena import BOT_REGISTRY, run_match
from euchre.rules_schema import RuleSet


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate full games to the winning score.")
    parser.add_argument("--games", type=int, default=100, help="Number of games to simulate.")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--bot-a", default="heuristic", choices=BOT_REGISTRY.keys(), help="Policy for seats 0 and 2.")
    parser.add_argument("--bot-b", default="heuristic", choices=BOT_REGISTRY.keys(), help="Policy for seats 1 and 3.")
    parser.add_argument("--winning-score", type=int, default=10)
    parser.add_argument(
        "--gone-once-on-redeal",
        choices=["reset", "carry"],
        default="reset",
        help="Whether a redeal reopens round one or goes straight to round two.",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rules = RuleSet(winning_score=args.winning_score, gone_once_on_redeal=args.gone_once_on_redeal)
    results = run_match(
        BOT_REGISTRY[args.bot_a](),
        BOT_REGISTRY[args.bot_b](),
        n_games=args.games,
        seed=args.seed,
        rules=rules,
    )

    outcomes: Counter[str] = Counter()
    hands = 0
    for game in results["history"]:
        for hand in game["hands"]:
            outcomes[hand["outcome"]] += 1
            hands += 1

    wins = results["wins"]
    print(f"Games: {args.games}  team A ({args.bot_a}) {wins[0]}  team B ({args.bot_b}) {wins[1]}")
    print(f"Hands played: {hands}  avg per game: {hands / max(1, args.games):.1f}")
    for outcome in ("made", "march", "euchre"):
        share = outcomes[outcome] / max(1, hands)
        print(f"  {outcome:<7} {outcomes[outcome]:>6}  ({share:.1%})")


if __name__ == "__main__":
    main()
