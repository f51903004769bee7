"""Trend labels and estimated ownership from production vs. projection."""

from __future__ import annotations

from typing import Optional

from gridiron.config.positions import OWNERSHIP_CAP, get_profile
from gridiron.config.scoring import TREND_THRESHOLDS
from gridiron.models import PlayerLike, PlayerSnapshot, Trend
from gridiron.numeric import clamp, round_to_step


def performance_ratio(snapshot: PlayerSnapshot) -> Optional[float]:
    """Points-to-date over projection, or ``None`` without a baseline."""

    if snapshot.projected_points <= 0:
        return None
    return snapshot.fantasy_points_to_date / snapshot.projected_points


def classify_trend(player: PlayerLike) -> Optional[Trend]:
    """Return hot/up/down, or ``None`` when there is no signal to report."""

    ratio = performance_ratio(PlayerSnapshot.coerce(player))
    if ratio is None:
        return None
    if ratio > TREND_THRESHOLDS.hot_ratio:
        return Trend.HOT
    if ratio > TREND_THRESHOLDS.up_ratio:
        return Trend.UP
    if ratio < TREND_THRESHOLDS.down_ratio:
        return Trend.DOWN
    return None


def estimate_ownership(player: PlayerLike) -> int:
    """Estimated roster percentage, a multiple of 5 in [0, 95]."""

    snapshot = PlayerSnapshot.coerce(player)
    points = snapshot.fantasy_points_to_date
    if points <= 0:
        return 0
    profile = get_profile(snapshot.position)
    raw = min(points * profile.ownership_per_point, profile.ownership_ceiling)
    return int(clamp(round_to_step(raw, 5), 0, OWNERSHIP_CAP))


__all__ = ["classify_trend", "estimate_ownership", "performance_ratio"]
