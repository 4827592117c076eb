"""Talent Distribution Calibration Tests.

Samples the talent tables at volume and checks the observed shares against
the configured population.

Targets (veterans):
- Superstar: 2%
- All-Star: 8%
- Starter: 25%
- Rotation: 35%
- Bench: 30%

Targets (rookies): 5% / 15% / 30% / 35% / 15%
"""

import random
from collections import Counter

import numpy as np

from tipoff.core.enums import Archetype, PlayerRole, PotentialTier, TalentTier
from tipoff.generators.calibration import sample_talent_tiers
from tipoff.generators.talent import (
    ROOKIE_DISTRIBUTION,
    STANDARD_DISTRIBUTION,
    TalentDistribution,
)


SAMPLES = 100_000
TOLERANCE = 0.01


# =============================================================================
# Talent Tiers
# =============================================================================

class TestTalentTierRates:
    """Observed tier shares match the tables."""

    def test_standard_distribution(self):
        report = sample_talent_tiers(SAMPLES, rng=random.Random(0), expected=STANDARD_DISTRIBUTION)
        assert report.max_deviation < TOLERANCE

    def test_superstar_rate(self):
        report = sample_talent_tiers(SAMPLES, rng=random.Random(1), expected=STANDARD_DISTRIBUTION)
        assert abs(report.observed[TalentTier.SUPERSTAR.value] - 0.02) < 0.003

    def test_rookie_distribution(self):
        report = sample_talent_tiers(
            SAMPLES, is_rookie=True, rng=random.Random(2), expected=ROOKIE_DISTRIBUTION
        )
        assert report.max_deviation < TOLERANCE

    def test_rookies_skew_upward(self):
        veterans = sample_talent_tiers(SAMPLES, rng=random.Random(3))
        rookies = sample_talent_tiers(SAMPLES, is_rookie=True, rng=random.Random(3))
        assert rookies.observed["superstar"] > veterans.observed["superstar"]
        assert rookies.observed["bench"] < veterans.observed["bench"]


# =============================================================================
# Potential and Archetypes
# =============================================================================

class TestPotentialRates:
    """Conditional potential tiers."""

    def test_superstars_mostly_elite(self):
        distribution = TalentDistribution(random.Random(4))
        tiers = Counter(
            distribution.generate_potential_tier(TalentTier.SUPERSTAR, 28)
            for _ in range(20_000)
        )
        assert abs(tiers[PotentialTier.ELITE] / 20_000 - 0.6) < 0.02

    def test_bench_mostly_bronze(self):
        distribution = TalentDistribution(random.Random(5))
        tiers = Counter(
            distribution.generate_potential_tier(TalentTier.BENCH, 28)
            for _ in range(20_000)
        )
        assert abs(tiers[PotentialTier.BRONZE] / 20_000 - 0.9) < 0.02


class TestArchetypeRates:
    def test_fifteen_percent_get_archetype(self):
        distribution = TalentDistribution(random.Random(6))
        draws = np.array([
            distribution.generate_rare_archetype(PlayerRole.SF) is not None
            for _ in range(SAMPLES)
        ])
        assert abs(float(np.mean(draws)) - 0.15) < TOLERANCE

    def test_energizer_never_drawn(self):
        distribution = TalentDistribution(random.Random(7))
        seen = {
            distribution.generate_rare_archetype(role)
            for role in PlayerRole
            for _ in range(5_000)
        }
        assert Archetype.ENERGIZER not in seen
