"""Schedule difficulty and strength-of-schedule across the 32-team universe.

Opponents come from a round-robin rotation over the team universe and each
defense's rank against a position comes from the tier table, so every
result is a pure function of (team, week, position, tiers). Results are
memoised in the service's :class:`ScheduleCache` until ``clear_cache``.
"""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from statistics import fmean
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from gridiron.config.teams import (
    CORE_POSITIONS,
    DEFAULT_DEFENSE_TIERS,
    FANTASY_PLAYOFF_WEEKS,
    POSITION_TIER_OFFSETS,
    SEASON_WEEKS,
    TEAM_CODES,
    normalize_week,
    team_code_for_name,
)
from gridiron.models import Position, ScheduleOutlook
from gridiron.numeric import clamp
from gridiron.schedule.cache import ScheduleCache


logger = logging.getLogger(__name__)

NEAR_TERM_WEEKS = 3


class DifficultyRating(str, Enum):
    EASY = "EASY"
    MODERATE = "MODERATE"
    HARD = "HARD"
    VERY_HARD = "VERY_HARD"


# Upper bounds (exclusive); anything above the last is VERY_HARD.
_RATING_BOUNDS: Tuple[Tuple[float, DifficultyRating], ...] = (
    (0.35, DifficultyRating.EASY),
    (0.55, DifficultyRating.MODERATE),
    (0.75, DifficultyRating.HARD),
)
_TOUGH_RATINGS = frozenset({DifficultyRating.HARD, DifficultyRating.VERY_HARD})


@dataclass(frozen=True)
class ScheduleEntry:
    week: int
    opponent: str
    difficulty: float
    rating: DifficultyRating
    position_rankings: Mapping[str, int]


@dataclass(frozen=True)
class PlayerSchedule:
    player_id: str
    player_name: str
    team: str
    position: str
    next_three_weeks: Tuple[ScheduleEntry, ...]
    rest_of_season: Tuple[ScheduleEntry, ...]
    average_difficulty: float
    favorable_matchups: int
    tough_matchups: int

    @property
    def weeks(self) -> Tuple[ScheduleEntry, ...]:
        return self.next_three_weeks + self.rest_of_season


@dataclass(frozen=True)
class TeamSOS:
    team_id: str
    team_name: str
    overall_sos: float
    remaining_sos: float
    playoff_sos: float
    by_position: Mapping[str, float]
    ranking: int


def rate_difficulty(difficulty: float) -> DifficultyRating:
    for bound, rating in _RATING_BOUNDS:
        if difficulty < bound:
            return rating
    return DifficultyRating.VERY_HARD


@lru_cache(maxsize=None)
def _round_pairings(round_index: int) -> Dict[str, str]:
    """Circle-method round robin: every team gets exactly one opponent."""

    count = len(TEAM_CODES)
    others = list(range(1, count))
    shift = round_index % len(others)
    rotated = others[shift:] + others[:shift]
    order = [0] + rotated
    pairings: Dict[str, str] = {}
    for slot in range(count // 2):
        home = TEAM_CODES[order[slot]]
        away = TEAM_CODES[order[count - 1 - slot]]
        pairings[home] = away
        pairings[away] = home
    return pairings


def opponent_for(team_code: str, week: int) -> str:
    return _round_pairings(week - 1)[team_code]


def _validate_tiers(tiers: Sequence[str]) -> Tuple[str, ...]:
    ordered = tuple(code.strip().upper() for code in tiers)
    if sorted(ordered) != sorted(TEAM_CODES):
        missing = sorted(set(TEAM_CODES) - set(ordered))
        raise ValueError(
            "Defense tiers must list each of the 32 teams exactly once"
            + (f"; missing {', '.join(missing)}" if missing else "")
        )
    return ordered


class ScheduleService:
    """Computes player schedules and team SOS with an injected memo cache."""

    def __init__(
        self,
        cache: Optional[ScheduleCache] = None,
        tiers: Optional[Sequence[str]] = None,
    ) -> None:
        self.cache = cache if cache is not None else ScheduleCache()
        self._tiers = _validate_tiers(tiers or DEFAULT_DEFENSE_TIERS)
        self._tier_index = {code: index for index, code in enumerate(self._tiers)}

    @property
    def tiers(self) -> Tuple[str, ...]:
        return self._tiers

    def set_tiers(self, tiers: Sequence[str]) -> None:
        """Swap the tier table; cached results stay until ``clear_cache``."""

        self._tiers = _validate_tiers(tiers)
        self._tier_index = {code: index for index, code in enumerate(self._tiers)}

    def clear_cache(self) -> None:
        logger.debug("Clearing %s cached schedule results", len(self.cache))
        self.cache.clear()

    # -- building blocks -------------------------------------------------

    def resolve_team(self, team_id: object, team_name: Optional[str] = None) -> str:
        """Map an abbreviation, a franchise name or any other id onto the universe."""

        label = str(team_id).strip().upper() if team_id is not None else ""
        if label in self._tier_index:
            return label
        by_name = team_code_for_name(team_name) or team_code_for_name(str(team_id or ""))
        if by_name:
            return by_name
        fallback = TEAM_CODES[zlib.crc32(label.encode("utf-8")) % len(TEAM_CODES)]
        logger.debug("Team %r not in universe; using %s as proxy", team_id, fallback)
        return fallback

    def defense_rank(self, team_code: str, position: Position) -> int:
        """Rank (1 = toughest) of ``team_code``'s defense against ``position``."""

        offset = POSITION_TIER_OFFSETS[position]
        return (self._tier_index[team_code] + offset) % len(self._tiers) + 1

    def matchup_difficulty(self, opponent: str, position: Position) -> float:
        rank = self.defense_rank(opponent, position)
        return round((len(self._tiers) - rank) / (len(self._tiers) - 1), 3)

    def _opponent_difficulty(self, opponent: str) -> float:
        return fmean(self.matchup_difficulty(opponent, pos) for pos in CORE_POSITIONS)

    def _entry(self, team_code: str, week: int, position: Position) -> ScheduleEntry:
        opponent = opponent_for(team_code, week)
        difficulty = self.matchup_difficulty(opponent, position)
        return ScheduleEntry(
            week=week,
            opponent=opponent,
            difficulty=difficulty,
            rating=rate_difficulty(difficulty),
            position_rankings=MappingProxyType(
                {pos.value: self.defense_rank(opponent, pos) for pos in CORE_POSITIONS}
            ),
        )

    @staticmethod
    def _mean(values: Iterable[float]) -> float:
        collected = list(values)
        if not collected:
            return 0.0
        return round(clamp(fmean(collected), 0.0, 1.0), 3)

    def _remaining_sos(self, team_code: str, week: int, position: Optional[Position]) -> float:
        if position is None:
            return self._mean(
                self._opponent_difficulty(opponent_for(team_code, w))
                for w in range(week, SEASON_WEEKS + 1)
            )
        return self._mean(
            self.matchup_difficulty(opponent_for(team_code, w), position)
            for w in range(week, SEASON_WEEKS + 1)
        )

    # -- public queries --------------------------------------------------

    def upcoming_schedule(
        self,
        player_id: str,
        player_name: str,
        team: str,
        position: Position | str,
        current_week: int,
    ) -> PlayerSchedule:
        week = normalize_week(current_week)
        key = ("schedule", str(player_id), week)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Schedule cache hit for %s week %s", player_id, week)
            return cached

        resolved_position = Position.parse(position)
        team_code = self.resolve_team(team)
        entries = [
            self._entry(team_code, w, resolved_position) for w in range(week, SEASON_WEEKS + 1)
        ]
        label = position.value if isinstance(position, Position) else str(position)
        schedule = PlayerSchedule(
            player_id=str(player_id),
            player_name=player_name,
            team=team,
            position=label,
            next_three_weeks=tuple(entries[:NEAR_TERM_WEEKS]),
            rest_of_season=tuple(entries[NEAR_TERM_WEEKS:]),
            average_difficulty=self._mean(entry.difficulty for entry in entries),
            favorable_matchups=sum(1 for e in entries if e.rating is DifficultyRating.EASY),
            tough_matchups=sum(1 for e in entries if e.rating in _TOUGH_RATINGS),
        )
        return self.cache.set(key, schedule)

    def sos_rankings(
        self, current_week: int, position: Position | str | None = None
    ) -> Mapping[str, int]:
        """Rank all 32 teams by remaining SOS, hardest first.

        Ties keep universe order, so the ranks are always a permutation of
        1..32. Cached tables are read-only views.
        """

        week = normalize_week(current_week)
        resolved = Position.parse(position) if position is not None else None
        key = ("rankings", resolved.value if resolved else None, week)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        values = [(code, self._remaining_sos(code, week, resolved)) for code in TEAM_CODES]
        ordered = sorted(values, key=lambda item: item[1], reverse=True)
        rankings = MappingProxyType(
            {code: rank for rank, (code, _) in enumerate(ordered, start=1)}
        )
        return self.cache.set(key, rankings)

    def calculate_sos(self, team_id: str, team_name: str, current_week: int) -> TeamSOS:
        week = normalize_week(current_week)
        key = ("sos", str(team_id), week)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("SOS cache hit for %s week %s", team_id, week)
            return cached

        team_code = self.resolve_team(team_id, team_name)
        season = range(1, SEASON_WEEKS + 1)
        sos = TeamSOS(
            team_id=str(team_id),
            team_name=team_name,
            overall_sos=self._mean(
                self._opponent_difficulty(opponent_for(team_code, w)) for w in season
            ),
            remaining_sos=self._remaining_sos(team_code, week, None),
            playoff_sos=self._mean(
                self._opponent_difficulty(opponent_for(team_code, w))
                for w in FANTASY_PLAYOFF_WEEKS
            ),
            by_position=MappingProxyType(
                {pos.value: self._remaining_sos(team_code, week, pos) for pos in CORE_POSITIONS}
            ),
            ranking=self.sos_rankings(week)[team_code],
        )
        return self.cache.set(key, sos)

    def get_position_sos(self, position: Position | str, current_week: int) -> Mapping[str, float]:
        """Remaining SOS against ``position`` for every team, as a read-only view."""

        week = normalize_week(current_week)
        resolved = Position.parse(position)
        key = ("position", resolved.value, week)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        table = MappingProxyType(
            {code: self._remaining_sos(code, week, resolved) for code in TEAM_CODES}
        )
        return self.cache.set(key, table)


def schedule_outlook(schedule: PlayerSchedule) -> ScheduleOutlook:
    """Condense a schedule into the label and opponents shown with a player."""

    return ScheduleOutlook(
        difficulty=rate_difficulty(schedule.average_difficulty).value,
        average_difficulty=schedule.average_difficulty,
        opponents=[entry.opponent for entry in schedule.next_three_weeks],
    )


__all__ = [
    "DifficultyRating",
    "PlayerSchedule",
    "ScheduleEntry",
    "ScheduleService",
    "TeamSOS",
    "normalize_week",
    "opponent_for",
    "rate_difficulty",
    "schedule_outlook",
]
