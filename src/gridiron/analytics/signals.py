"""Position-gated usage signals derived from a player's recent production.

Each calculator is a ramp over ``fantasy_points_to_date`` taken from the
position profile table, so higher production never lowers a signal.
Positions without a ramp return ``None`` (not applicable) rather than zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from gridiron.config.positions import (
    FIXED_SNAP_SHARE,
    TEAM_PASS_PLAYS,
    get_profile,
)
from gridiron.models import PlayerLike, PlayerSnapshot
from gridiron.numeric import clamp


@dataclass(frozen=True)
class SignalSet:
    target_share: Optional[float]
    snap_count: int
    red_zone_targets: int
    routes_run: Optional[int]
    yards_per_route: Optional[float]


def target_share(player: PlayerLike) -> Optional[float]:
    """Expected share of team targets (8-35%) for WR/TE, ``None`` otherwise."""

    snapshot = PlayerSnapshot.coerce(player)
    band = get_profile(snapshot.position).target_band
    if band is None:
        return None
    return round(band.scale(snapshot.fantasy_points_to_date), 1)


def snap_count(player: PlayerLike) -> int:
    """Percentage of snaps played; kickers and defenses are always on the field."""

    snapshot = PlayerSnapshot.coerce(player)
    band = get_profile(snapshot.position).snap_band
    if band is None:
        return FIXED_SNAP_SHARE
    return int(round(band.scale(snapshot.fantasy_points_to_date)))


def red_zone_targets(player: PlayerLike) -> int:
    snapshot = PlayerSnapshot.coerce(player)
    profile = get_profile(snapshot.position)
    looks = int(math.floor(snapshot.fantasy_points_to_date * profile.red_zone_rate))
    return max(profile.red_zone_floor, looks)


def routes_run(player: PlayerLike) -> Optional[int]:
    """Routes per game for pass catchers, scaled from snap share."""

    snapshot = PlayerSnapshot.coerce(player)
    route_rate = get_profile(snapshot.position).route_rate
    if route_rate is None:
        return None
    snaps = snap_count(snapshot)
    return int(round(snaps / 100.0 * TEAM_PASS_PLAYS * route_rate))


def yards_per_route(player: PlayerLike) -> Optional[float]:
    snapshot = PlayerSnapshot.coerce(player)
    profile = get_profile(snapshot.position)
    band = profile.yards_per_route_band
    if band is None or profile.snap_band is None:
        return None
    snaps = snap_count(snapshot)
    return round(band.scale(snaps - profile.snap_band.floor), 2)


def advanced_stats(player: PlayerLike) -> SignalSet:
    """All usage signals at once, preferring values already on the record.

    Recorded values still obey the position rules: they are clamped into the
    profile bands, and positions without a band keep their fixed value.
    """

    snapshot = PlayerSnapshot.coerce(player)
    profile = get_profile(snapshot.position)

    share = target_share(snapshot)
    target_band = profile.target_band
    if target_band is not None and snapshot.target_share is not None:
        share = round(clamp(snapshot.target_share, target_band.floor, target_band.ceiling), 1)

    snaps = snap_count(snapshot)
    snap_band = profile.snap_band
    if snap_band is not None and snapshot.snap_count is not None:
        snaps = int(round(clamp(snapshot.snap_count, snap_band.floor, snap_band.ceiling)))

    red_zone = red_zone_targets(snapshot)
    if profile.red_zone_rate > 0 and snapshot.red_zone_targets is not None:
        red_zone = max(profile.red_zone_floor, int(round(snapshot.red_zone_targets)))

    return SignalSet(
        target_share=share,
        snap_count=snaps,
        red_zone_targets=red_zone,
        routes_run=routes_run(snapshot),
        yards_per_route=yards_per_route(snapshot),
    )


__all__ = [
    "SignalSet",
    "advanced_stats",
    "red_zone_targets",
    "routes_run",
    "snap_count",
    "target_share",
    "yards_per_route",
]
