"""Player analytics and trade valuation engine for fantasy football."""

from gridiron.engine import AnalyticsEngine
from gridiron.models import EnrichedPlayer, PlayerSnapshot, Position, Trend
from gridiron.schedule import ScheduleCache, ScheduleService
from gridiron.trade import TradeValidationError, analyze_trade

__all__ = [
    "AnalyticsEngine",
    "EnrichedPlayer",
    "PlayerSnapshot",
    "Position",
    "ScheduleCache",
    "ScheduleService",
    "TradeValidationError",
    "Trend",
    "analyze_trade",
]

__version__ = "0.1.0"
