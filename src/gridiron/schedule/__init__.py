"""Schedule difficulty and strength-of-schedule calculations."""

from .cache import ScheduleCache
from .service import (
    DifficultyRating,
    PlayerSchedule,
    ScheduleEntry,
    ScheduleService,
    TeamSOS,
    rate_difficulty,
    schedule_outlook,
)

__all__ = [
    "DifficultyRating",
    "PlayerSchedule",
    "ScheduleCache",
    "ScheduleEntry",
    "ScheduleService",
    "TeamSOS",
    "rate_difficulty",
    "schedule_outlook",
]
