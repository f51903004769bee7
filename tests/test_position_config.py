import pytest

from gridiron.config import (
    BREAKOUT_MULTIPLIERS,
    DEFAULT_DEFENSE_TIERS,
    HIGH_POWERED_OFFENSES,
    NFL_TEAMS,
    TEAM_CODES,
    get_profile,
    iter_profiles,
    team_code_for_name,
)
from gridiron.config.teams import normalize_week
from gridiron.models import Position


def test_get_profile_is_case_insensitive_and_accepts_aliases():
    assert get_profile("wr").position is Position.WR
    assert get_profile("DEF") is get_profile(Position.DST)


def test_get_profile_unknown_position():
    with pytest.raises(KeyError):
        get_profile("LB")


def test_every_position_has_a_profile():
    positions = {profile.position for profile in iter_profiles()}
    assert positions == set(Position)


def test_breakout_multipliers():
    assert BREAKOUT_MULTIPLIERS == {
        Position.QB: 0.8,
        Position.RB: 1.0,
        Position.WR: 1.1,
        Position.TE: 0.9,
        Position.K: 0.3,
        Position.DST: 0.4,
    }


def test_only_pass_catchers_have_target_bands():
    with_targets = {p.position for p in iter_profiles() if p.target_band is not None}
    assert with_targets == {Position.WR, Position.TE}


def test_team_universe():
    assert len(TEAM_CODES) == 32
    assert sorted(DEFAULT_DEFENSE_TIERS) == sorted(TEAM_CODES)
    assert HIGH_POWERED_OFFENSES <= set(NFL_TEAMS)


def test_team_code_for_name():
    assert team_code_for_name("Kansas City Chiefs") == "KC"
    assert team_code_for_name("  san francisco 49ers ") == "SF"
    assert team_code_for_name("Springfield Atoms") is None
    assert team_code_for_name(None) is None


@pytest.mark.parametrize(
    "week,expected",
    [(1, 1), (18, 18), (0, 1), (-3, 1), (40, 18), ("7", 7), ("junk", 1), (None, 1), (10**400, 1)],
)
def test_normalize_week(week, expected):
    assert normalize_week(week) == expected
