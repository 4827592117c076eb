"""
Simulation configuration.

Controls possession counts, which optional game events are modeled, and
roster sizing. All settings can be overridden via environment variables.
"""

import os
import random
from dataclasses import dataclass, field
from typing import Optional

from tipoff.core.errors import ConfigurationError


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


def _env_seed() -> Optional[int]:
    value = os.getenv("TIPOFF_SEED")
    return int(value) if value else None


@dataclass
class SimulationConfig:
    """Configuration for game simulation and season processing."""

    # Possessions per game, inclusive range
    min_possessions: int = field(default_factory=lambda: _env_int("TIPOFF_MIN_POSSESSIONS", 180))
    max_possessions: int = field(default_factory=lambda: _env_int("TIPOFF_MAX_POSSESSIONS", 220))

    # Optional game events
    model_assists: bool = field(default_factory=lambda: _env_bool("TIPOFF_MODEL_ASSISTS", True))
    model_defense_events: bool = field(
        default_factory=lambda: _env_bool("TIPOFF_MODEL_DEFENSE_EVENTS", False)
    )
    record_game_log: bool = field(default_factory=lambda: _env_bool("TIPOFF_RECORD_GAME_LOG", False))

    # Roster sizing
    min_roster_size: int = field(default_factory=lambda: _env_int("TIPOFF_MIN_ROSTER_SIZE", 13))
    max_roster_size: int = field(default_factory=lambda: _env_int("TIPOFF_MAX_ROSTER_SIZE", 17))

    # Seed for a reproducible run; None draws from system entropy
    seed: Optional[int] = field(default_factory=_env_seed)

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def possession_range(self) -> tuple[int, int]:
        return (self.min_possessions, self.max_possessions)

    def make_rng(self) -> random.Random:
        """A fresh random source seeded from this config."""
        return random.Random(self.seed)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.min_possessions < 1:
            errors.append("TIPOFF_MIN_POSSESSIONS must be at least 1")
        if self.max_possessions < self.min_possessions:
            errors.append("TIPOFF_MAX_POSSESSIONS must not be below TIPOFF_MIN_POSSESSIONS")
        if self.min_roster_size < 5:
            errors.append("TIPOFF_MIN_ROSTER_SIZE must be at least 5")
        if self.max_roster_size < self.min_roster_size:
            errors.append("TIPOFF_MAX_ROSTER_SIZE must not be below TIPOFF_MIN_ROSTER_SIZE")
        return errors

    def validate_or_raise(self) -> "SimulationConfig":
        """Raise ConfigurationError if validate() reports anything."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)
        return self
