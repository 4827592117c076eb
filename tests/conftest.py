"""Shared pytest fixtures for tipoff tests."""

import random

import pytest

from tipoff.config import SimulationConfig
from tipoff.core.enums import PlayerRole, PotentialTier, Skill
from tipoff.core.models.development_tracker import DevelopmentTracker
from tipoff.core.models.player import PlayerRecord
from tipoff.core.models.potential import PlayerPotential
from tipoff.core.models.team import Roster
from tipoff.core.skills import SkillRatings


# =============================================================================
# Random Sources
# =============================================================================


class StubRandom(random.Random):
    """
    Fully predictable random source.

    random() always returns the same value, randrange/randint return the top
    of their range and choice picks the last element.
    """

    def __init__(self, value: float = 0.0):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            return start - 1
        return stop - 1

    def randint(self, a, b):
        return b

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def stub_rng() -> StubRandom:
    return StubRandom(0.0)


@pytest.fixture
def config() -> SimulationConfig:
    """Config with explicit values so environment variables cannot leak in."""
    return SimulationConfig(
        min_possessions=180,
        max_possessions=220,
        model_assists=True,
        model_defense_events=False,
        record_game_log=False,
        min_roster_size=13,
        max_roster_size=17,
        seed=None,
    )


# =============================================================================
# Player Fixtures
# =============================================================================


def make_player(
    role: PlayerRole = PlayerRole.SF,
    value: int = 50,
    age: int = 25,
    cap: int = 90,
    first_name: str = "Test",
    last_name: str = "Player",
) -> PlayerRecord:
    """Player with every skill at the same value and every ceiling at cap."""
    return PlayerRecord(
        first_name=first_name,
        last_name=last_name,
        role=role,
        skills=SkillRatings.uniform(value),
        potential=PlayerPotential(
            tier=PotentialTier.SILVER,
            max_skills={skill: cap for skill in Skill},
            overall_potential=cap,
        ),
        development=DevelopmentTracker(),
        age=age,
    )


@pytest.fixture
def player_factory():
    """Factory for uniform-skill players."""
    return make_player


@pytest.fixture
def average_player() -> PlayerRecord:
    """Mid-career small forward, all skills 50."""
    return make_player()


@pytest.fixture
def home_roster() -> Roster:
    """Five players, one per role, all skills 60."""
    return Roster(
        name="Harbor City Gulls",
        abbreviation="HCG",
        players=[make_player(role, 60, last_name=f"Home{role.value}") for role in PlayerRole],
    )


@pytest.fixture
def away_roster() -> Roster:
    """Five players, one per role, all skills 55."""
    return Roster(
        name="Red Rock Coyotes",
        abbreviation="RRC",
        players=[make_player(role, 55, last_name=f"Away{role.value}") for role in PlayerRole],
    )
