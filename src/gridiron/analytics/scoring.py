"""Composite AI score and the qualitative opportunity assessment."""

from __future__ import annotations

from typing import Optional

from gridiron.config.positions import get_profile
from gridiron.config.scoring import AI_SCORE_WEIGHTS, OPPORTUNITY_RULES
from gridiron.models import Opportunity, PlayerLike, PlayerSnapshot
from gridiron.numeric import clamp


def _saturating(value: float, saturation: float) -> float:
    if saturation <= 0:
        return 100.0
    return min(max(value, 0.0), saturation) / saturation * 100.0


def consistency_score(snapshot: PlayerSnapshot) -> float:
    """How closely production tracks projection, 0-100.

    Meeting the projection earns full marks; overshooting it earns no more,
    so steady players are never ranked below boom weeks on this component.
    """

    if snapshot.projected_points <= 0:
        return AI_SCORE_WEIGHTS.neutral_consistency
    ratio = snapshot.fantasy_points_to_date / snapshot.projected_points
    return min(ratio, 1.0) * 100.0


def ai_score(player: PlayerLike) -> float:
    snapshot = PlayerSnapshot.coerce(player)
    weights = AI_SCORE_WEIGHTS
    production = _saturating(snapshot.fantasy_points_to_date, weights.production_saturation)
    projection = _saturating(snapshot.projected_points, weights.projection_saturation)
    blended = (
        weights.production * production
        + weights.consistency * consistency_score(snapshot)
        + weights.projection * projection
    )
    return round(clamp(blended, 0.0, 100.0), 1)


def assess_opportunity(player: PlayerLike) -> Optional[Opportunity]:
    """Score the upside checklist, or ``None`` when nothing on it applies."""

    snapshot = PlayerSnapshot.coerce(player)
    rules = OPPORTUNITY_RULES
    points = snapshot.fantasy_points_to_date
    projected = snapshot.projected_points

    triggered = (
        projected >= rules.high_projection,
        projected > 0 and points > projected * rules.exceeding_ratio,
        get_profile(snapshot.position).scarce,
        points >= rules.strong_performance,
    )

    reasons: list[str] = []
    score = rules.base_score
    for check, hit in zip(rules.checklist, triggered):
        if hit:
            reasons.append(check.reason)
            score += check.weight

    if not reasons:
        return None
    return Opportunity(score=min(score, 100.0), reasons=reasons)


__all__ = ["ai_score", "assess_opportunity", "consistency_score"]
