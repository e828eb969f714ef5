"""Core rules engine for Euchre."""

__all__ = [
    "cards",
    "deck",
    "hand",
    "trick",
    "points",
    "scoring",
    "state",
    "bidding",
    "decisions",
    "seats",
    "game",
    "service",
    "rules_schema",
    "errors",
]
