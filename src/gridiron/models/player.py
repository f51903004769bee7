"""Canonical player models shared by the analytics components."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from gridiron.numeric import non_negative, to_safe_number


class Position(str, Enum):
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DST = "DST"

    @classmethod
    def parse(cls, value: "Position | str") -> "Position":
        """Resolve a position label, accepting the usual defense aliases."""

        if isinstance(value, Position):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Position must be a string, got {type(value).__name__}")
        label = value.strip().upper()
        label = _POSITION_ALIASES.get(label, label)
        try:
            return cls(label)
        except ValueError as exc:
            raise ValueError(f"Unsupported position {value!r}") from exc


_POSITION_ALIASES = {
    "DEF": "DST",
    "D": "DST",
    "D/ST": "DST",
    "PK": "K",
}

PASS_CATCHERS = frozenset({Position.WR, Position.TE})


class Trend(str, Enum):
    HOT = "hot"
    UP = "up"
    DOWN = "down"


class PlayerSnapshot(BaseModel):
    """Read-only player record handed to the engine by the persistence layer.

    Numeric fields are coerced leniently: junk becomes ``0`` for the point
    totals and ``None`` for the optional signals, so a partially populated
    record still produces usable analytics.
    """

    id: str = Field(..., min_length=1)
    name: str
    position: Position
    team: Optional[str] = None
    fantasy_points_to_date: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "fantasy_points_to_date", "fantasyPointsToDate", "fantasyPoints"
        ),
    )
    projected_points: float = 0.0
    age: Optional[float] = None
    experience_years: Optional[float] = None
    target_share: Optional[float] = None
    snap_count: Optional[float] = None
    red_zone_targets: Optional[float] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    @classmethod
    def coerce(cls, player: "PlayerSnapshot | Mapping[str, Any]") -> "PlayerSnapshot":
        """Accept either a snapshot or a raw record and return a snapshot."""

        if isinstance(player, PlayerSnapshot):
            return player
        return cls.model_validate(player)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("position", mode="before")
    @classmethod
    def _parse_position(cls, value: Any) -> Position:
        return Position.parse(value)

    @field_validator("fantasy_points_to_date", "projected_points", mode="before")
    @classmethod
    def _coerce_points(cls, value: Any) -> float:
        return non_negative(value)

    @field_validator(
        "age", "experience_years", "target_share", "snap_count", "red_zone_targets",
        mode="before",
    )
    @classmethod
    def _coerce_optional(cls, value: Any) -> Optional[float]:
        number = to_safe_number(value, None)
        if number is None or number < 0:
            return None
        return number


class Opportunity(BaseModel):
    score: float = Field(..., ge=0.0, le=100.0)
    reasons: List[str]

    model_config = ConfigDict(frozen=True)


class ScheduleOutlook(BaseModel):
    """Condensed near-term schedule attached to an enriched player."""

    difficulty: str
    average_difficulty: float = Field(..., ge=0.0, le=1.0)
    opponents: List[str]

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class EnrichedPlayer(PlayerSnapshot):
    trending: Optional[Trend] = None
    ownership: int = Field(default=0, ge=0, le=95)
    ai_score: float = Field(default=0.0, ge=0.0, le=100.0)
    breakout_probability: float = Field(default=0.0, ge=0.0, le=100.0)
    # Counts are whole numbers once derived.
    snap_count: Optional[int] = None
    red_zone_targets: Optional[int] = None
    routes_run: Optional[int] = None
    yards_per_route: Optional[float] = None
    opportunity: Optional[Opportunity] = None
    upcoming_schedule: Optional[ScheduleOutlook] = None

    @field_validator("snap_count", "red_zone_targets", "routes_run", mode="before")
    @classmethod
    def _whole_count(cls, value: Any) -> Optional[int]:
        number = to_safe_number(value, None)
        if number is None or number < 0:
            return None
        return int(round(number))

    @field_validator("ownership")
    @classmethod
    def _multiple_of_five(cls, value: int) -> int:
        if value % 5:
            raise ValueError("ownership must be a multiple of 5")
        return value


PlayerLike = Union[PlayerSnapshot, Mapping[str, Any]]
