"""Weight tables for the four-factor breakout model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FactorWeights:
    opportunity: float = 0.35
    efficiency: float = 0.30
    situation: float = 0.20
    schedule: float = 0.15


@dataclass(frozen=True)
class Tier:
    """One rung of a factor ladder.

    ``above`` tiers fire when the metric is strictly greater than
    ``threshold``; ``below`` tiers fire when it is strictly lower. Only the
    first matching tier of a ladder is applied.
    """

    label: str
    threshold: float
    adjustment: float
    direction: str = "above"

    def matches(self, value: float) -> bool:
        if self.direction == "below":
            return value < self.threshold
        return value > self.threshold


FACTOR_BASE_SCORE = 50.0

TARGET_SHARE_TIERS: Tuple[Tier, ...] = (
    Tier("Elite target share", 20.0, 15.0),
    Tier("Strong target share", 15.0, 8.0),
    Tier("Limited target share", 10.0, -10.0, direction="below"),
)

SNAP_COUNT_TIERS: Tuple[Tier, ...] = (
    Tier("Every-down snap share", 80.0, 12.0),
    Tier("Growing snap share", 65.0, 6.0),
    Tier("Part-time snap share", 40.0, -10.0, direction="below"),
)

RED_ZONE_TIERS: Tuple[Tier, ...] = (
    Tier("Heavy red zone usage", 5.0, 10.0),
    Tier("Red zone involvement", 2.0, 5.0),
)

# Ratio of points-to-date over projection.
PERFORMANCE_RATIO_TIERS: Tuple[Tier, ...] = (
    Tier("Significantly outperforming projections", 1.3, 20.0),
    Tier("Outperforming projections", 1.1, 10.0),
    Tier("Underperforming projections", 0.8, -10.0, direction="below"),
)

PRODUCTION_TIERS: Tuple[Tier, ...] = (
    Tier("Strong weekly production", 18.0, 15.0),
    Tier("Solid weekly production", 12.0, 5.0),
)

YOUNG_AGE_LIMIT = 25.0
YOUNG_AGE_BONUS = 10.0
EARLY_CAREER_YEARS = 2.0
EARLY_CAREER_BONUS = 10.0
HIGH_POWERED_OFFENSE_BONUS = 15.0

PLAYOFF_PUSH_WEEKS = (11, 13)
PLAYOFF_PUSH_BONUS = 15.0
BYE_WEEK_WINDOW = (6, 11)
BYE_WEEK_BONUS = 5.0


@dataclass(frozen=True)
class DecisionThresholds:
    immediate_score: float = 75.0
    immediate_efficiency: float = 70.0
    short_term_score: float = 60.0
    add_now: float = 75.0
    monitor: float = 60.0
    wait: float = 45.0
    candidate_probability: float = 45.0
    base_confidence: float = 60.0
    confidence_per_factor: float = 5.0
    max_confidence: float = 95.0
    reasoning_factors: int = 3


FACTOR_WEIGHTS = FactorWeights()
DECISION_THRESHOLDS = DecisionThresholds()
