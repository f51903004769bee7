"""Declarative tables that drive the analytics formulas."""

from .positions import (
    BREAKOUT_MULTIPLIERS,
    PositionProfile,
    ShareBand,
    get_profile,
    iter_profiles,
)
from .teams import (
    CORE_POSITIONS,
    DEFAULT_DEFENSE_TIERS,
    HIGH_POWERED_OFFENSES,
    NFL_TEAMS,
    SEASON_WEEKS,
    TEAM_CODES,
    team_code_for_name,
)

__all__ = [
    "BREAKOUT_MULTIPLIERS",
    "CORE_POSITIONS",
    "DEFAULT_DEFENSE_TIERS",
    "HIGH_POWERED_OFFENSES",
    "NFL_TEAMS",
    "PositionProfile",
    "SEASON_WEEKS",
    "ShareBand",
    "TEAM_CODES",
    "get_profile",
    "iter_profiles",
    "team_code_for_name",
]
