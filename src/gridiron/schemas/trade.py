from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field

from gridiron.trade import TradeAnalysis

from .base import CamelModel


class TradeAnalysisRequest(CamelModel):
    team_id: str | None = None
    week: int | None = Field(default=None, ge=1, le=18)
    # Items stay raw here; the trade engine validates them and reports details.
    giving: List[Dict[str, Any]]
    receiving: List[Dict[str, Any]]


class TradeValueSummary(CamelModel):
    giving_value: float
    receiving_value: float
    positional_impact: Dict[str, float]


class TradeAnalysisResponse(CamelModel):
    fairness: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    value_gap: float
    analysis: TradeValueSummary
    recommendations: List[str]

    @classmethod
    def from_analysis(cls, result: TradeAnalysis) -> "TradeAnalysisResponse":
        return cls(
            fairness=result.fairness.value,
            confidence=result.confidence,
            value_gap=result.value_gap,
            analysis=TradeValueSummary(
                giving_value=result.giving_value,
                receiving_value=result.receiving_value,
                positional_impact=dict(result.positional_impact),
            ),
            recommendations=list(result.recommendations),
        )
