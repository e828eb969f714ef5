"""Validation schema for Euchre rules configuration."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class RuleSet(BaseModel):
    winning_score: int = Field(10, ge=1, description="Score a team must reach to win the game.")
    march_points: int = Field(2, ge=1, description="Points for taking all five tricks.")
    made_points: int = Field(1, ge=1, description="Points for the calling team taking three or four tricks.")
    euchre_points: int = Field(2, ge=1, description="Points for defenders taking three or more tricks.")
    order_up_threshold: int = Field(3, ge=0, le=5, description="Kitty-suit cards a bot needs to order up.")
    pick_up_threshold: int = Field(2, ge=0, le=5, description="Kitty-suit cards a dealing bot needs to pick up.")
    call_threshold: int = Field(20, ge=0, description="Round-two suit total a bot must exceed to call it.")
    gone_once_on_redeal: Literal["reset", "carry"] = Field(
        "reset",
        description="Whether the round-one-exhausted flag resets or survives a redeal.",
    )
    acknowledge_events: bool = Field(True, description="Ask human seats to acknowledge announcements.")
    max_redeals: Optional[int] = Field(None, ge=1, description="Optional cap on consecutive redeals.")

    @field_validator("euchre_points")
    @classmethod
    def euchre_not_cheaper_than_made(cls, value: int, info) -> int:
        made = info.data.get("made_points")
        if made is not None and value < made:
            raise ValueError("Euchre must score at least as much as a made hand.")
        return value

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]] = None) -> "RuleSet":
        return cls.model_validate(dict(payload or {}))


DEFAULT_RULES = RuleSet()
