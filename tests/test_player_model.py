import pytest
from pydantic import ValidationError

from gridiron.models import EnrichedPlayer, PlayerSnapshot, Position


def test_player_snapshot_is_frozen():
    record = PlayerSnapshot(
        id="p1",
        name="Test Player",
        position="WR",
        team="KC",
        fantasy_points_to_date=14.2,
        projected_points=12.0,
    )

    assert record.id == "p1"
    assert record.position is Position.WR

    with pytest.raises((TypeError, ValidationError)):
        record.name = "Other"  # type: ignore[misc]


def test_snapshot_accepts_camel_case_and_legacy_points_key():
    record = PlayerSnapshot.model_validate(
        {
            "id": 7,
            "name": "Camel Case",
            "position": "rb",
            "fantasyPoints": "11.5",
            "projectedPoints": 9,
            "experienceYears": 1,
        }
    )

    assert record.id == "7"
    assert record.position is Position.RB
    assert record.fantasy_points_to_date == pytest.approx(11.5)
    assert record.projected_points == pytest.approx(9.0)
    assert record.experience_years == 1


def test_snapshot_coerces_junk_numbers():
    record = PlayerSnapshot.model_validate(
        {
            "id": "p2",
            "name": "Junk",
            "position": "TE",
            "fantasyPointsToDate": "abc",
            "projectedPoints": float("nan"),
            "age": "old",
            "targetShare": -4,
        }
    )

    assert record.fantasy_points_to_date == 0.0
    assert record.projected_points == 0.0
    assert record.age is None
    assert record.target_share is None


@pytest.mark.parametrize(
    "label,expected",
    [("DEF", Position.DST), ("dst", Position.DST), ("D/ST", Position.DST), ("PK", Position.K)],
)
def test_position_aliases(label, expected):
    assert Position.parse(label) is expected


def test_unknown_position_is_rejected():
    with pytest.raises(ValueError):
        Position.parse("LB")
    with pytest.raises(ValidationError):
        PlayerSnapshot(id="p3", name="Linebacker", position="LB")


def test_empty_id_is_rejected():
    with pytest.raises(ValidationError):
        PlayerSnapshot(id="", name="Nobody", position="QB")


def test_coerce_returns_existing_snapshot():
    record = PlayerSnapshot(id="p4", name="Same", position="QB")
    assert PlayerSnapshot.coerce(record) is record


def test_enriched_player_ownership_must_be_multiple_of_five():
    with pytest.raises(ValidationError):
        EnrichedPlayer(id="p5", name="Odd", position="WR", ownership=42)

    player = EnrichedPlayer(id="p5", name="Even", position="WR", ownership=40)
    dumped = player.model_dump(by_alias=True)
    assert dumped["ownership"] == 40
    assert "fantasyPointsToDate" in dumped
    assert "breakoutProbability" in dumped
