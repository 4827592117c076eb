"""Tests for SimulationConfig."""

import pytest

from tipoff.config import SimulationConfig
from tipoff.core.errors import ConfigurationError


class TestFromEnv:
    """Environment variable overrides."""

    def test_defaults(self, monkeypatch):
        for name in (
            "TIPOFF_MIN_POSSESSIONS",
            "TIPOFF_MAX_POSSESSIONS",
            "TIPOFF_MODEL_ASSISTS",
            "TIPOFF_MODEL_DEFENSE_EVENTS",
            "TIPOFF_RECORD_GAME_LOG",
            "TIPOFF_MIN_ROSTER_SIZE",
            "TIPOFF_MAX_ROSTER_SIZE",
            "TIPOFF_SEED",
        ):
            monkeypatch.delenv(name, raising=False)

        config = SimulationConfig.from_env()
        assert config.possession_range == (180, 220)
        assert config.model_assists is True
        assert config.model_defense_events is False
        assert config.record_game_log is False
        assert (config.min_roster_size, config.max_roster_size) == (13, 17)
        assert config.seed is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TIPOFF_MIN_POSSESSIONS", "100")
        monkeypatch.setenv("TIPOFF_MAX_POSSESSIONS", "120")
        monkeypatch.setenv("TIPOFF_MODEL_DEFENSE_EVENTS", "TRUE")
        monkeypatch.setenv("TIPOFF_MODEL_ASSISTS", "false")
        monkeypatch.setenv("TIPOFF_SEED", "2024")

        config = SimulationConfig.from_env()
        assert config.possession_range == (100, 120)
        assert config.model_defense_events is True
        assert config.model_assists is False
        assert config.seed == 2024


class TestValidation:
    """validate() and validate_or_raise()."""

    def test_valid_config(self, config):
        assert config.validate() == []
        assert config.validate_or_raise() is config

    def test_inverted_possessions(self, config):
        config.min_possessions, config.max_possessions = 200, 100
        errors = config.validate()
        assert len(errors) == 1
        assert "TIPOFF_MAX_POSSESSIONS" in errors[0]

    def test_roster_sizes(self, config):
        config.min_roster_size = 3
        config.max_roster_size = 2
        assert len(config.validate()) == 2

    def test_validate_or_raise(self, config):
        config.min_possessions = 0
        with pytest.raises(ConfigurationError) as exc:
            config.validate_or_raise()
        assert exc.value.errors == ["TIPOFF_MIN_POSSESSIONS must be at least 1"]

    def test_configuration_error_is_value_error(self, config):
        config.min_possessions = 0
        with pytest.raises(ValueError):
            config.validate_or_raise()


class TestRandomSource:
    def test_seeded_rng_reproducible(self, config):
        config.seed = 99
        a, b = config.make_rng(), config.make_rng()
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
