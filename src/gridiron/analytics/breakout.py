"""Four-factor breakout model.

Opportunity, efficiency, situation and schedule each start from a neutral
base and move by fixed tier adjustments. The weighted blend is the breakout
score; a position multiplier turns it into a probability.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from gridiron.analytics.signals import advanced_stats
from gridiron.analytics.trend import performance_ratio
from gridiron.config import breakout as tables
from gridiron.config.positions import get_profile
from gridiron.config.teams import HIGH_POWERED_OFFENSES, normalize_week
from gridiron.models import PASS_CATCHERS, PlayerLike, PlayerSnapshot
from gridiron.numeric import clamp


logger = logging.getLogger(__name__)


class Impact(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class Timeframe(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    SHORT_TERM = "SHORT_TERM"
    LONG_TERM = "LONG_TERM"


class RecommendedAction(str, Enum):
    ADD_NOW = "ADD_NOW"
    MONITOR = "MONITOR"
    WAIT = "WAIT"
    PASS = "PASS"


@dataclass(frozen=True)
class KeyFactor:
    factor: str
    impact: Impact
    weight: float


@dataclass(frozen=True)
class FactorScore:
    score: float
    factors: Tuple[KeyFactor, ...]


@dataclass(frozen=True)
class BreakoutPrediction:
    player: PlayerSnapshot
    breakout_score: float
    breakout_probability: float
    confidence: float
    key_factors: Tuple[KeyFactor, ...]
    timeframe: Timeframe
    reasoning: str
    recommended_action: RecommendedAction


def _apply_tiers(value: float, tiers: Sequence[tables.Tier]) -> Optional[KeyFactor]:
    for tier in tiers:
        if tier.matches(value):
            impact = Impact.POSITIVE if tier.adjustment >= 0 else Impact.NEGATIVE
            return KeyFactor(factor=tier.label, impact=impact, weight=abs(tier.adjustment))
    return None


def _score(factors: Iterable[KeyFactor]) -> FactorScore:
    collected = tuple(factors)
    total = tables.FACTOR_BASE_SCORE
    for item in collected:
        total += item.weight if item.impact is Impact.POSITIVE else -item.weight
    return FactorScore(score=clamp(total, 0.0, 100.0), factors=collected)


def opportunity_factor(player: PlayerLike) -> FactorScore:
    snapshot = PlayerSnapshot.coerce(player)
    signals = advanced_stats(snapshot)
    found = []
    if snapshot.position in PASS_CATCHERS and signals.target_share is not None:
        found.append(_apply_tiers(signals.target_share, tables.TARGET_SHARE_TIERS))
    # Kickers and defenses are on the field for every snap; it says nothing.
    if get_profile(snapshot.position).snap_band is not None:
        found.append(_apply_tiers(signals.snap_count, tables.SNAP_COUNT_TIERS))
    found.append(_apply_tiers(signals.red_zone_targets, tables.RED_ZONE_TIERS))
    return _score(item for item in found if item is not None)


def efficiency_factor(player: PlayerLike) -> FactorScore:
    snapshot = PlayerSnapshot.coerce(player)
    found = []
    ratio = performance_ratio(snapshot)
    if ratio is not None:
        found.append(_apply_tiers(ratio, tables.PERFORMANCE_RATIO_TIERS))
    found.append(_apply_tiers(snapshot.fantasy_points_to_date, tables.PRODUCTION_TIERS))
    return _score(item for item in found if item is not None)


def situation_factor(player: PlayerLike) -> FactorScore:
    snapshot = PlayerSnapshot.coerce(player)
    found = []
    if snapshot.age is not None and snapshot.age < tables.YOUNG_AGE_LIMIT:
        found.append(KeyFactor("Young ascending player", Impact.POSITIVE, tables.YOUNG_AGE_BONUS))
    if (
        snapshot.experience_years is not None
        and snapshot.experience_years <= tables.EARLY_CAREER_YEARS
    ):
        found.append(KeyFactor("Early-career upside", Impact.POSITIVE, tables.EARLY_CAREER_BONUS))
    if snapshot.team and snapshot.team.strip().upper() in HIGH_POWERED_OFFENSES:
        found.append(
            KeyFactor("High-powered offense", Impact.POSITIVE, tables.HIGH_POWERED_OFFENSE_BONUS)
        )
    return _score(found)


def schedule_factor(week: int) -> FactorScore:
    """Calendar heuristic; the week is not tied to a specific opponent."""

    found = []
    push_start, push_end = tables.PLAYOFF_PUSH_WEEKS
    if push_start <= week <= push_end:
        found.append(KeyFactor("Playoff push schedule", Impact.POSITIVE, tables.PLAYOFF_PUSH_BONUS))
    bye_start, bye_end = tables.BYE_WEEK_WINDOW
    if bye_start <= week <= bye_end:
        found.append(KeyFactor("Bye-week opportunity", Impact.POSITIVE, tables.BYE_WEEK_BONUS))
    return _score(found)


def _timeframe(breakout_score: float, efficiency: float) -> Timeframe:
    limits = tables.DECISION_THRESHOLDS
    if breakout_score > limits.immediate_score and efficiency > limits.immediate_efficiency:
        return Timeframe.IMMEDIATE
    if breakout_score > limits.short_term_score:
        return Timeframe.SHORT_TERM
    return Timeframe.LONG_TERM


def _recommended_action(probability: float) -> RecommendedAction:
    limits = tables.DECISION_THRESHOLDS
    if probability > limits.add_now:
        return RecommendedAction.ADD_NOW
    if probability > limits.monitor:
        return RecommendedAction.MONITOR
    if probability > limits.wait:
        return RecommendedAction.WAIT
    return RecommendedAction.PASS


def _reasoning(key_factors: Sequence[KeyFactor]) -> str:
    positives = [item for item in key_factors if item.impact is Impact.POSITIVE]
    top = sorted(positives, key=lambda item: item.weight, reverse=True)
    top = top[: tables.DECISION_THRESHOLDS.reasoning_factors]
    if not top:
        return "No significant breakout indicators"
    return ", ".join(item.factor for item in top)


def predict_breakout(player: PlayerLike, week: int = 1) -> BreakoutPrediction:
    snapshot = PlayerSnapshot.coerce(player)
    current_week = normalize_week(week)
    weights = tables.FACTOR_WEIGHTS

    opportunity = opportunity_factor(snapshot)
    efficiency = efficiency_factor(snapshot)
    situation = situation_factor(snapshot)
    schedule = schedule_factor(current_week)

    breakout_score = round(
        clamp(
            weights.opportunity * opportunity.score
            + weights.efficiency * efficiency.score
            + weights.situation * situation.score
            + weights.schedule * schedule.score,
            0.0,
            100.0,
        ),
        1,
    )
    multiplier = get_profile(snapshot.position).breakout_multiplier
    probability = round(clamp(breakout_score * multiplier, 0.0, 100.0), 1)

    combined = opportunity.factors + efficiency.factors + situation.factors + schedule.factors
    key_factors = tuple(sorted(combined, key=lambda item: item.weight, reverse=True))
    positive_count = sum(1 for item in key_factors if item.impact is Impact.POSITIVE)
    limits = tables.DECISION_THRESHOLDS
    confidence = min(
        limits.max_confidence,
        limits.base_confidence + limits.confidence_per_factor * positive_count,
    )

    return BreakoutPrediction(
        player=snapshot,
        breakout_score=breakout_score,
        breakout_probability=probability,
        confidence=confidence,
        key_factors=key_factors,
        timeframe=_timeframe(breakout_score, efficiency.score),
        reasoning=_reasoning(key_factors),
        recommended_action=_recommended_action(probability),
    )


def find_breakout_candidates(
    players: Iterable[PlayerLike],
    week: int = 1,
    limit: int | None = 10,
) -> list[BreakoutPrediction]:
    """Predict every player and keep the likely breakouts, best first.

    Equal scores keep their input order. A missing or non-positive ``limit``
    returns every candidate.
    """

    threshold = tables.DECISION_THRESHOLDS.candidate_probability
    predictions = [predict_breakout(player, week) for player in players]
    candidates = [item for item in predictions if item.breakout_probability > threshold]
    candidates.sort(key=lambda item: item.breakout_score, reverse=True)

    if limit is not None and limit > 0:
        candidates = candidates[:limit]

    logger.debug(
        "Breakout scan week %s: %s/%s players above %.0f%%",
        week,
        len(candidates),
        len(predictions),
        threshold,
    )
    return candidates


__all__ = [
    "BreakoutPrediction",
    "FactorScore",
    "Impact",
    "KeyFactor",
    "RecommendedAction",
    "Timeframe",
    "efficiency_factor",
    "find_breakout_candidates",
    "opportunity_factor",
    "predict_breakout",
    "schedule_factor",
    "situation_factor",
]
