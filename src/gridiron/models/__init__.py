"""Data models consumed and produced by the analytics engine."""

from .player import (
    PASS_CATCHERS,
    EnrichedPlayer,
    Opportunity,
    PlayerLike,
    PlayerSnapshot,
    Position,
    ScheduleOutlook,
    Trend,
)

__all__ = [
    "PASS_CATCHERS",
    "EnrichedPlayer",
    "Opportunity",
    "PlayerLike",
    "PlayerSnapshot",
    "Position",
    "ScheduleOutlook",
    "Trend",
]
