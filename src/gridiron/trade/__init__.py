"""Trade proposal valuation."""

from .valuation import (
    Fairness,
    TradeAnalysis,
    TradePlayer,
    TradeProposal,
    TradeValidationError,
    analyze_trade,
    classify_fairness,
    positional_impact,
    trade_confidence,
)

__all__ = [
    "Fairness",
    "TradeAnalysis",
    "TradePlayer",
    "TradeProposal",
    "TradeValidationError",
    "analyze_trade",
    "classify_fairness",
    "positional_impact",
    "trade_confidence",
]
