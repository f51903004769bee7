from __future__ import annotations

from typing import Dict, List

from gridiron.schedule import PlayerSchedule, ScheduleEntry, TeamSOS

from .base import CamelModel


class ScheduleEntryResponse(CamelModel):
    week: int
    opponent: str
    difficulty: float
    rating: str
    position_rankings: Dict[str, int]

    @classmethod
    def from_entry(cls, entry: ScheduleEntry) -> "ScheduleEntryResponse":
        return cls(
            week=entry.week,
            opponent=entry.opponent,
            difficulty=entry.difficulty,
            rating=entry.rating.value,
            position_rankings=dict(entry.position_rankings),
        )


class PlayerScheduleResponse(CamelModel):
    player_id: str
    player_name: str
    team: str
    position: str
    next_three_weeks: List[ScheduleEntryResponse]
    rest_of_season: List[ScheduleEntryResponse]
    average_difficulty: float
    favorable_matchups: int
    tough_matchups: int

    @classmethod
    def from_schedule(cls, schedule: PlayerSchedule) -> "PlayerScheduleResponse":
        return cls(
            player_id=schedule.player_id,
            player_name=schedule.player_name,
            team=schedule.team,
            position=schedule.position,
            next_three_weeks=[ScheduleEntryResponse.from_entry(e) for e in schedule.next_three_weeks],
            rest_of_season=[ScheduleEntryResponse.from_entry(e) for e in schedule.rest_of_season],
            average_difficulty=schedule.average_difficulty,
            favorable_matchups=schedule.favorable_matchups,
            tough_matchups=schedule.tough_matchups,
        )


class TeamSOSResponse(CamelModel):
    team_id: str
    team_name: str
    overall_sos: float
    remaining_sos: float
    playoff_sos: float
    by_position: Dict[str, float]
    ranking: int

    @classmethod
    def from_sos(cls, sos: TeamSOS) -> "TeamSOSResponse":
        return cls(
            team_id=sos.team_id,
            team_name=sos.team_name,
            overall_sos=sos.overall_sos,
            remaining_sos=sos.remaining_sos,
            playoff_sos=sos.playoff_sos,
            by_position=dict(sos.by_position),
            ranking=sos.ranking,
        )
