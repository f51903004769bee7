import pytest

from gridiron import AnalyticsEngine, EnrichedPlayer, PlayerSnapshot, Trend
from gridiron.analytics import predict_breakout
from gridiron.settings import EngineSettings
from gridiron.trade import TradeValidationError


def _star(player_id="star", **extra):
    payload = {
        "id": player_id,
        "name": "Star Receiver",
        "position": "WR",
        "team": "KC",
        "fantasyPointsToDate": 22.0,
        "projectedPoints": 15.0,
        "age": 23,
        "experienceYears": 1,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def engine():
    return AnalyticsEngine()


def test_enrich_player_fills_derived_fields(engine):
    enriched = engine.enrich_player(_star(), week=12)

    assert isinstance(enriched, EnrichedPlayer)
    assert enriched.trending is Trend.UP
    assert enriched.ownership == 90
    assert enriched.ai_score == pytest.approx(87.4)
    assert enriched.breakout_probability == predict_breakout(_star(), 12).breakout_probability
    assert enriched.target_share == pytest.approx(31.8)
    assert enriched.snap_count == 85
    assert enriched.red_zone_targets == 5
    assert enriched.routes_run == 31
    assert enriched.yards_per_route == pytest.approx(2.9)
    assert enriched.opportunity is not None
    assert enriched.opportunity.score == pytest.approx(100.0)
    assert enriched.upcoming_schedule is not None
    assert len(enriched.upcoming_schedule.opponents) == 3


def test_enrich_player_returns_new_record(engine):
    snapshot = PlayerSnapshot.model_validate(_star())
    enriched = engine.enrich_player(snapshot)

    assert enriched is not snapshot
    assert snapshot.target_share is None
    assert enriched.id == snapshot.id
    assert enriched.fantasy_points_to_date == snapshot.fantasy_points_to_date


def test_enrich_player_without_team_has_no_schedule(engine):
    enriched = engine.enrich_player(_star(team=None))
    assert enriched.upcoming_schedule is None


def test_enrich_player_survives_junk_numbers(engine):
    enriched = engine.enrich_player(
        {"id": "k1", "name": "Kicker", "position": "PK", "fantasyPoints": "junk", "projectedPoints": None}
    )

    assert enriched.snap_count == 100
    assert enriched.ownership == 0
    assert enriched.trending is None
    assert 0.0 <= enriched.ai_score <= 100.0


def test_enriched_payload_uses_camel_case(engine):
    payload = engine.enrich_player(_star()).model_dump(mode="json", by_alias=True)

    assert payload["breakoutProbability"] >= 0
    assert payload["upcomingSchedule"]["averageDifficulty"] >= 0
    assert payload["trending"] == "up"


def test_default_week_comes_from_settings():
    engine = AnalyticsEngine(settings=EngineSettings(default_week=12))
    enriched = engine.enrich_player(_star())
    assert enriched.breakout_probability == predict_breakout(_star(), 12).breakout_probability


def test_engines_do_not_share_caches():
    first = AnalyticsEngine()
    second = AnalyticsEngine()

    schedule = first.upcoming_schedule("p1", "Player", "KC", "WR", 1)
    assert first.upcoming_schedule("p1", "Player", "KC", "WR", 1) is schedule
    assert second.upcoming_schedule("p1", "Player", "KC", "WR", 1) is not schedule

    first.clear_cache()
    assert first.upcoming_schedule("p1", "Player", "KC", "WR", 1) is not schedule


def test_handle_trade_request(engine):
    response = engine.handle_trade_request(
        {
            "teamId": "team-1",
            "week": 5,
            "giving": [{"name": "A", "position": "QB", "projectedPoints": 20.5}],
            "receiving": [{"name": "B", "position": "QB", "projectedPoints": 21.2}],
        }
    )
    payload = response.to_payload()

    assert payload["fairness"] == "fair"
    assert payload["valueGap"] == pytest.approx(0.7)
    assert payload["analysis"]["positionalImpact"] == {"QB": pytest.approx(0.7)}
    assert 0.0 <= payload["confidence"] <= 1.0
    assert payload["recommendations"]


def test_handle_trade_request_missing_side(engine):
    with pytest.raises(TradeValidationError) as excinfo:
        engine.handle_trade_request({"giving": [{"position": "QB", "projectedPoints": 1}]})

    assert excinfo.value.details[0]["loc"] == ["receiving"]


def test_handle_trade_request_bad_week(engine):
    with pytest.raises(TradeValidationError) as excinfo:
        engine.handle_trade_request(
            {
                "week": 30,
                "giving": [{"position": "QB", "projectedPoints": 1}],
                "receiving": [{"position": "QB", "projectedPoints": 1}],
            }
        )

    assert excinfo.value.details[0]["loc"] == ["week"]


def test_handle_breakout_request(engine):
    quiet = {"id": "quiet", "name": "Quiet", "position": "WR", "projectedPoints": 10}
    response = engine.handle_breakout_request(
        {"players": [quiet, _star("b"), _star("a")], "currentWeek": 1}
    )
    payload = response.to_payload()

    assert payload["week"] == 1
    assert [item["playerId"] for item in payload["candidates"]] == ["b", "a"]
    first = payload["candidates"][0]
    assert first["recommendedAction"] == "ADD_NOW"
    assert first["keyFactors"][0]["impact"] == "POSITIVE"


def test_breakout_limit_defaults_to_settings():
    engine = AnalyticsEngine(settings=EngineSettings(breakout_limit=1))
    players = [_star("a"), _star("b"), _star("c")]

    assert len(engine.breakout_candidates(players)) == 1
    assert len(engine.breakout_candidates(players, limit=2)) == 2


def test_enrich_player_survives_huge_numbers(engine):
    enriched = engine.enrich_player(
        {"id": "p", "name": "Overflow", "position": "WR", "fantasyPoints": 10**400, "age": 10**400}
    )

    assert enriched.fantasy_points_to_date == 0.0
    assert enriched.age is None
    assert enriched.target_share == pytest.approx(8.0)


def test_enrich_kicker_ignores_recorded_usage(engine):
    enriched = engine.enrich_player(
        {"id": "k2", "name": "Kicker", "position": "K", "snapCount": 60, "redZoneTargets": 4}
    )

    assert enriched.snap_count == 100
    assert enriched.red_zone_targets == 0


def test_enriched_counts_serialize_as_integers(engine):
    payload = engine.enrich_player(_star(), week=3).model_dump(mode="json", by_alias=True)

    for key in ("snapCount", "redZoneTargets", "routesRun"):
        assert isinstance(payload[key], int)
        assert not isinstance(payload[key], bool)
    assert payload["snapCount"] == 85
