"""
Distribution summaries for calibrating generation and simulation.

Draws large samples from the generators and the possession simulator and
reports summary statistics, so tuning changes can be compared against
target rates.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from tipoff.core.enums import TalentTier
from tipoff.generators.talent import TalentDistribution


@dataclass
class DistributionReport:
    """Empirical vs expected category shares."""

    samples: int
    observed: dict[str, float] = field(default_factory=dict)
    expected: dict[str, float] = field(default_factory=dict)

    def deviation(self, key: str) -> float:
        return abs(self.observed.get(key, 0.0) - self.expected.get(key, 0.0))

    @property
    def max_deviation(self) -> float:
        keys = set(self.observed) | set(self.expected)
        return max((self.deviation(k) for k in keys), default=0.0)


@dataclass
class ScoringReport:
    """Summary of final scores over many simulated games."""

    games: int
    mean_points: float = 0.0
    median_points: float = 0.0
    std_points: float = 0.0
    mean_margin: float = 0.0
    tie_rate: float = 0.0
    mean_rebounds: float = 0.0


def sample_talent_tiers(
    samples: int,
    is_rookie: bool = False,
    rng: Optional[random.Random] = None,
    expected: Optional[dict[TalentTier, float]] = None,
) -> DistributionReport:
    """Sample talent tiers and compare observed shares to expected ones."""
    distribution = TalentDistribution(rng or random.Random())
    draws = np.array([distribution.generate_talent_tier(is_rookie).value for _ in range(samples)])

    labels, counts = np.unique(draws, return_counts=True)
    observed = {str(label): float(count) / samples for label, count in zip(labels, counts)}
    for tier in TalentTier:
        observed.setdefault(tier.value, 0.0)

    return DistributionReport(
        samples=samples,
        observed=observed,
        expected={tier.value: share for tier, share in (expected or {}).items()},
    )


def summarize_scores(results: list) -> ScoringReport:
    """
    Summarize a list of GameResult objects.

    Args:
        results: Results from PossessionSimulator.simulate_game

    Returns:
        ScoringReport over both teams' scores
    """
    if not results:
        return ScoringReport(games=0)

    home = np.array([r.home_score for r in results], dtype=float)
    away = np.array([r.away_score for r in results], dtype=float)
    points = np.concatenate([home, away])
    rebounds = np.array(
        [sum(e.rebounds for e in r.box_score.entries.values()) for r in results],
        dtype=float,
    )

    return ScoringReport(
        games=len(results),
        mean_points=float(np.mean(points)),
        median_points=float(np.median(points)),
        std_points=float(np.std(points)),
        mean_margin=float(np.mean(np.abs(home - away))),
        tie_rate=float(np.mean(home == away)),
        mean_rebounds=float(np.mean(rebounds)),
    )
