"""Pydantic request/response contracts for the engine's JSON surface."""

from .base import CamelModel
from .breakout import (
    BreakoutPredictionResponse,
    BreakoutRequest,
    BreakoutResponse,
    KeyFactorResponse,
)
from .schedule import PlayerScheduleResponse, ScheduleEntryResponse, TeamSOSResponse
from .trade import TradeAnalysisRequest, TradeAnalysisResponse, TradeValueSummary

__all__ = [
    "BreakoutPredictionResponse",
    "BreakoutRequest",
    "BreakoutResponse",
    "CamelModel",
    "KeyFactorResponse",
    "PlayerScheduleResponse",
    "ScheduleEntryResponse",
    "TeamSOSResponse",
    "TradeAnalysisRequest",
    "TradeAnalysisResponse",
    "TradeValueSummary",
]
