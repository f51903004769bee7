"""Thresholds and weights for trend, AI score, opportunity and trade rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TrendThresholds:
    hot_ratio: float = 1.5
    up_ratio: float = 1.15
    down_ratio: float = 0.8


@dataclass(frozen=True)
class AIScoreWeights:
    production: float = 0.55
    consistency: float = 0.30
    projection: float = 0.15
    # Points at which the production and projection components max out.
    production_saturation: float = 25.0
    projection_saturation: float = 25.0
    # Consistency sub-score when there is no projection to compare against.
    neutral_consistency: float = 50.0


@dataclass(frozen=True)
class OpportunityCheck:
    reason: str
    weight: float


@dataclass(frozen=True)
class OpportunityRules:
    base_score: float = 30.0
    high_projection: float = 15.0
    exceeding_ratio: float = 1.1
    strong_performance: float = 18.0
    # Evaluated in this order; the reasons list keeps it.
    checklist: Tuple[OpportunityCheck, ...] = (
        OpportunityCheck("High projected points", 25.0),
        OpportunityCheck("Exceeding projections", 20.0),
        OpportunityCheck("Position scarcity", 15.0),
        OpportunityCheck("Strong recent performance", 25.0),
    )


@dataclass(frozen=True)
class TradeRules:
    fairness_threshold: float = 5.0
    # Gap (in points) at which the gap term of the confidence saturates.
    confidence_gap_saturation: float = 20.0
    confidence_base: float = 0.5
    confidence_gap_weight: float = 0.3
    confidence_symmetry_weight: float = 0.2
    confidence_per_extra_player: float = 0.05
    confidence_floor: float = 0.1
    confidence_ceiling: float = 0.95


TREND_THRESHOLDS = TrendThresholds()
AI_SCORE_WEIGHTS = AIScoreWeights()
OPPORTUNITY_RULES = OpportunityRules()
TRADE_RULES = TradeRules()
