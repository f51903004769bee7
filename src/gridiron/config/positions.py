"""Per-position formula parameters for the player signal calculators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from gridiron.models import Position


@dataclass(frozen=True)
class ShareBand:
    """Linear ramp from ``floor`` to ``ceiling`` as points approach ``saturation``."""

    floor: float
    ceiling: float
    saturation: float

    def scale(self, points: float) -> float:
        if self.saturation <= 0:
            return self.ceiling
        progress = min(max(points, 0.0), self.saturation) / self.saturation
        return self.floor + (self.ceiling - self.floor) * progress


@dataclass(frozen=True)
class PositionProfile:
    position: Position
    snap_band: Optional[ShareBand]
    target_band: Optional[ShareBand]
    red_zone_rate: float
    red_zone_floor: int
    route_rate: Optional[float]
    yards_per_route_band: Optional[ShareBand]
    ownership_per_point: float
    ownership_ceiling: int
    breakout_multiplier: float
    scarce: bool = False


FIXED_SNAP_SHARE = 100
# Dropbacks per game used to turn snap share into routes run.
TEAM_PASS_PLAYS = 38.0
YARDS_PER_ROUTE_FLOOR = 0.8
OWNERSHIP_CAP = 95

_PROFILES: Dict[Position, PositionProfile] = {
    Position.QB: PositionProfile(
        position=Position.QB,
        snap_band=ShareBand(floor=25.0, ceiling=100.0, saturation=20.0),
        target_band=None,
        red_zone_rate=0.3,
        red_zone_floor=3,
        route_rate=None,
        yards_per_route_band=None,
        ownership_per_point=3.5,
        ownership_ceiling=OWNERSHIP_CAP,
        breakout_multiplier=0.8,
    ),
    Position.RB: PositionProfile(
        position=Position.RB,
        snap_band=ShareBand(floor=15.0, ceiling=95.0, saturation=25.0),
        target_band=None,
        red_zone_rate=0.3,
        red_zone_floor=0,
        route_rate=None,
        yards_per_route_band=None,
        ownership_per_point=4.5,
        ownership_ceiling=OWNERSHIP_CAP,
        breakout_multiplier=1.0,
        scarce=True,
    ),
    Position.WR: PositionProfile(
        position=Position.WR,
        snap_band=ShareBand(floor=15.0, ceiling=95.0, saturation=25.0),
        target_band=ShareBand(floor=8.0, ceiling=35.0, saturation=25.0),
        red_zone_rate=0.25,
        red_zone_floor=0,
        route_rate=0.95,
        yards_per_route_band=ShareBand(floor=YARDS_PER_ROUTE_FLOOR, ceiling=3.2, saturation=80.0),
        ownership_per_point=4.0,
        ownership_ceiling=OWNERSHIP_CAP,
        breakout_multiplier=1.1,
    ),
    Position.TE: PositionProfile(
        position=Position.TE,
        snap_band=ShareBand(floor=15.0, ceiling=95.0, saturation=25.0),
        target_band=ShareBand(floor=8.0, ceiling=28.0, saturation=22.0),
        red_zone_rate=0.3,
        red_zone_floor=0,
        route_rate=0.75,
        yards_per_route_band=ShareBand(floor=YARDS_PER_ROUTE_FLOOR, ceiling=2.6, saturation=80.0),
        ownership_per_point=4.0,
        ownership_ceiling=OWNERSHIP_CAP,
        breakout_multiplier=0.9,
        scarce=True,
    ),
    Position.K: PositionProfile(
        position=Position.K,
        snap_band=None,
        target_band=None,
        red_zone_rate=0.0,
        red_zone_floor=0,
        route_rate=None,
        yards_per_route_band=None,
        ownership_per_point=2.5,
        ownership_ceiling=30,
        breakout_multiplier=0.3,
    ),
    Position.DST: PositionProfile(
        position=Position.DST,
        snap_band=None,
        target_band=None,
        red_zone_rate=0.0,
        red_zone_floor=0,
        route_rate=None,
        yards_per_route_band=None,
        ownership_per_point=3.0,
        ownership_ceiling=OWNERSHIP_CAP,
        breakout_multiplier=0.4,
    ),
}


def iter_profiles() -> Iterable[PositionProfile]:
    """Return an iterator over every configured position profile."""

    return _PROFILES.values()


def get_profile(position: Position | str) -> PositionProfile:
    """Fetch the profile for a position, raising KeyError if it is unknown."""

    try:
        resolved = Position.parse(position)
    except ValueError as exc:
        raise KeyError(f"No position profile configured for {position!r}") from exc
    return _PROFILES[resolved]


BREAKOUT_MULTIPLIERS: Mapping[Position, float] = {
    position: profile.breakout_multiplier for position, profile in _PROFILES.items()
}
