import logging

import pytest

from gridiron.config import DEFAULT_DEFENSE_TIERS
from gridiron.config_loader import DefenseTierProfile
from gridiron.settings import EngineSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GRIDIRON_BREAKOUT_LIMIT", "GRIDIRON_DEFAULT_WEEK", "GRIDIRON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    assert EngineSettings.from_env() == EngineSettings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GRIDIRON_BREAKOUT_LIMIT", "25")
    monkeypatch.setenv("GRIDIRON_DEFAULT_WEEK", "40")
    monkeypatch.setenv("GRIDIRON_LOG_LEVEL", "debug")

    settings = EngineSettings.from_env()

    assert settings.breakout_limit == 25
    assert settings.default_week == 18
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("GRIDIRON_BREAKOUT_LIMIT", "many")
    monkeypatch.setenv("GRIDIRON_LOG_LEVEL", "loud")

    with caplog.at_level(logging.WARNING, logger="gridiron.settings"):
        settings = EngineSettings.from_env()

    assert settings.breakout_limit == 10
    assert settings.log_level == "WARNING"
    assert "GRIDIRON_BREAKOUT_LIMIT" in caplog.text
    assert "GRIDIRON_LOG_LEVEL" in caplog.text


def test_tier_profile_round_trip(tmp_path):
    path = tmp_path / "tiers.json"
    profile = DefenseTierProfile(tiers=tuple(code.lower() for code in DEFAULT_DEFENSE_TIERS))
    profile.save(path)

    loaded = DefenseTierProfile.load(path)
    assert loaded.tiers == DEFAULT_DEFENSE_TIERS


def test_tier_profile_defaults_when_key_missing(tmp_path):
    path = tmp_path / "tiers.json"
    path.write_text("{}", encoding="utf-8")
    assert DefenseTierProfile.load(path).tiers == DEFAULT_DEFENSE_TIERS


@pytest.mark.parametrize(
    "tiers",
    [
        ("XXX",) + DEFAULT_DEFENSE_TIERS[1:],
        DEFAULT_DEFENSE_TIERS[:-1] + DEFAULT_DEFENSE_TIERS[:1],
        DEFAULT_DEFENSE_TIERS[:10],
    ],
)
def test_tier_profile_rejects_bad_tables(tiers):
    with pytest.raises(ValueError):
        DefenseTierProfile(tiers=tiers)
