"""Player analytics: usage signals, trend, AI score and breakout model."""

from .breakout import (
    BreakoutPrediction,
    FactorScore,
    Impact,
    KeyFactor,
    RecommendedAction,
    Timeframe,
    find_breakout_candidates,
    predict_breakout,
)
from .scoring import ai_score, assess_opportunity
from .signals import (
    SignalSet,
    advanced_stats,
    red_zone_targets,
    routes_run,
    snap_count,
    target_share,
    yards_per_route,
)
from .trend import classify_trend, estimate_ownership

__all__ = [
    "BreakoutPrediction",
    "FactorScore",
    "Impact",
    "KeyFactor",
    "RecommendedAction",
    "SignalSet",
    "Timeframe",
    "advanced_stats",
    "ai_score",
    "assess_opportunity",
    "classify_trend",
    "estimate_ownership",
    "find_breakout_candidates",
    "predict_breakout",
    "red_zone_targets",
    "routes_run",
    "snap_count",
    "target_share",
    "yards_per_route",
]
