"""Facade that wires the analytics components behind one instance.

The engine owns its :class:`ScheduleService` (and with it the memo cache),
so separate engines never share cached schedules.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from gridiron.analytics import (
    BreakoutPrediction,
    advanced_stats,
    ai_score,
    assess_opportunity,
    classify_trend,
    estimate_ownership,
    find_breakout_candidates,
    predict_breakout,
)
from gridiron.config.teams import normalize_week
from gridiron.models import EnrichedPlayer, PlayerLike, PlayerSnapshot, Position
from gridiron.schedule import (
    PlayerSchedule,
    ScheduleService,
    TeamSOS,
    schedule_outlook,
)
from gridiron.schemas import (
    BreakoutPredictionResponse,
    BreakoutRequest,
    BreakoutResponse,
    TradeAnalysisRequest,
    TradeAnalysisResponse,
)
from gridiron.settings import EngineSettings
from gridiron.trade import TradeAnalysis, TradeValidationError, analyze_trade


logger = logging.getLogger(__name__)


class AnalyticsEngine:
    def __init__(
        self,
        schedule_service: Optional[ScheduleService] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.schedule = schedule_service if schedule_service is not None else ScheduleService()
        self.settings = settings if settings is not None else EngineSettings()

    def _week(self, week: Any) -> int:
        if week is None:
            return self.settings.default_week
        return normalize_week(week)

    # -- players ---------------------------------------------------------

    def enrich_player(self, player: PlayerLike, week: Optional[int] = None) -> EnrichedPlayer:
        """Return a new record with every derived field filled in."""

        snapshot = PlayerSnapshot.coerce(player)
        current_week = self._week(week)
        signals = advanced_stats(snapshot)
        prediction = predict_breakout(snapshot, current_week)

        outlook = None
        if snapshot.team:
            schedule = self.schedule.upcoming_schedule(
                snapshot.id, snapshot.name, snapshot.team, snapshot.position, current_week
            )
            outlook = schedule_outlook(schedule)

        payload = snapshot.model_dump()
        payload.update(
            trending=classify_trend(snapshot),
            ownership=estimate_ownership(snapshot),
            ai_score=ai_score(snapshot),
            breakout_probability=prediction.breakout_probability,
            target_share=signals.target_share,
            snap_count=signals.snap_count,
            red_zone_targets=signals.red_zone_targets,
            routes_run=signals.routes_run,
            yards_per_route=signals.yards_per_route,
            opportunity=assess_opportunity(snapshot),
            upcoming_schedule=outlook,
        )
        return EnrichedPlayer.model_validate(payload)

    def enrich_players(
        self, players: Iterable[PlayerLike], week: Optional[int] = None
    ) -> list[EnrichedPlayer]:
        return [self.enrich_player(player, week) for player in players]

    def breakout_candidates(
        self,
        players: Iterable[PlayerLike],
        week: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[BreakoutPrediction]:
        resolved_limit = self.settings.breakout_limit if limit is None else limit
        return find_breakout_candidates(players, self._week(week), resolved_limit)

    # -- schedule --------------------------------------------------------

    def upcoming_schedule(
        self,
        player_id: str,
        player_name: str,
        team: str,
        position: Position | str,
        current_week: Optional[int] = None,
    ) -> PlayerSchedule:
        return self.schedule.upcoming_schedule(
            player_id, player_name, team, position, self._week(current_week)
        )

    def calculate_sos(
        self, team_id: str, team_name: str, current_week: Optional[int] = None
    ) -> TeamSOS:
        return self.schedule.calculate_sos(team_id, team_name, self._week(current_week))

    def get_position_sos(
        self, position: Position | str, current_week: Optional[int] = None
    ) -> Mapping[str, float]:
        return self.schedule.get_position_sos(position, self._week(current_week))

    def clear_cache(self) -> None:
        self.schedule.clear_cache()

    # -- trades ----------------------------------------------------------

    def analyze_trade(
        self,
        giving: Optional[Iterable[Any]],
        receiving: Optional[Iterable[Any]],
    ) -> TradeAnalysis:
        return analyze_trade(giving, receiving)

    # -- JSON contracts --------------------------------------------------

    def handle_trade_request(self, payload: Mapping[str, Any]) -> TradeAnalysisResponse:
        """Validate a trade body and return the response contract.

        Raises :class:`TradeValidationError` for structural problems as well
        as bad player items, so callers have a single error to map to 400.
        """

        try:
            request = TradeAnalysisRequest.model_validate(payload)
        except ValidationError as exc:
            raise TradeValidationError.from_validation_error(exc) from exc
        result = self.analyze_trade(request.giving, request.receiving)
        logger.info(
            "Trade analysis for team %s week %s: %s (gap %.2f)",
            request.team_id,
            request.week,
            result.fairness.value,
            result.value_gap,
        )
        return TradeAnalysisResponse.from_analysis(result)

    def handle_breakout_request(self, payload: Mapping[str, Any]) -> BreakoutResponse:
        request = BreakoutRequest.model_validate(payload)
        candidates = self.breakout_candidates(request.players, request.current_week, request.limit)
        return BreakoutResponse(
            week=request.current_week,
            candidates=[BreakoutPredictionResponse.from_prediction(item) for item in candidates],
        )


__all__ = ["AnalyticsEngine"]
