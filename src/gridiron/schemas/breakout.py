from __future__ import annotations

from typing import Any, Dict, List

from pydantic import AliasChoices, Field

from gridiron.analytics import BreakoutPrediction

from .base import CamelModel


class BreakoutRequest(CamelModel):
    players: List[Dict[str, Any]]
    current_week: int = Field(
        default=1,
        ge=1,
        le=18,
        validation_alias=AliasChoices("current_week", "currentWeek", "week"),
    )
    limit: int | None = Field(default=None, ge=1, le=500)


class KeyFactorResponse(CamelModel):
    factor: str
    impact: str
    weight: float


class BreakoutPredictionResponse(CamelModel):
    player_id: str
    player_name: str
    position: str
    team: str | None
    breakout_score: float
    breakout_probability: float
    confidence: float
    key_factors: List[KeyFactorResponse]
    timeframe: str
    reasoning: str
    recommended_action: str

    @classmethod
    def from_prediction(cls, prediction: BreakoutPrediction) -> "BreakoutPredictionResponse":
        player = prediction.player
        return cls(
            player_id=player.id,
            player_name=player.name,
            position=player.position.value,
            team=player.team,
            breakout_score=prediction.breakout_score,
            breakout_probability=prediction.breakout_probability,
            confidence=prediction.confidence,
            key_factors=[
                KeyFactorResponse(factor=item.factor, impact=item.impact.value, weight=item.weight)
                for item in prediction.key_factors
            ],
            timeframe=prediction.timeframe.value,
            reasoning=prediction.reasoning,
            recommended_action=prediction.recommended_action.value,
        )


class BreakoutResponse(CamelModel):
    week: int
    candidates: List[BreakoutPredictionResponse]
