"""
Talent distribution.

Probability tables for talent tiers, potential tiers and rare archetypes,
plus the per-role attribute ranges player generation draws from. All draws
go through an injected random source so distributions can be sampled
deterministically in tests.
"""

import random
from dataclasses import dataclass
from typing import Optional

from tipoff.core.enums import Archetype, PlayerRole, PotentialTier, Skill, TalentTier


# =============================================================================
# Tier Tables
# =============================================================================

@dataclass(frozen=True)
class TalentCurve:
    """Population share and attribute band for one talent tier."""

    percentage: float
    min_rating: int
    max_rating: int
    avg_rating: int


TALENT_CURVES: dict[TalentTier, TalentCurve] = {
    TalentTier.SUPERSTAR: TalentCurve(0.02, 85, 99, 92),
    TalentTier.ALL_STAR: TalentCurve(0.08, 75, 95, 85),
    TalentTier.STARTER: TalentCurve(0.25, 65, 85, 75),
    TalentTier.ROTATION: TalentCurve(0.35, 55, 75, 65),
    TalentTier.BENCH: TalentCurve(0.30, 45, 65, 55),
}

STANDARD_DISTRIBUTION: dict[TalentTier, float] = {
    tier: curve.percentage for tier, curve in TALENT_CURVES.items()
}

# Draft classes skew upward
ROOKIE_DISTRIBUTION: dict[TalentTier, float] = {
    TalentTier.SUPERSTAR: 0.05,
    TalentTier.ALL_STAR: 0.15,
    TalentTier.STARTER: 0.30,
    TalentTier.ROTATION: 0.35,
    TalentTier.BENCH: 0.15,
}

ARCHETYPE_WEIGHTS: dict[Archetype, float] = {
    Archetype.ELITE_SHOOTER: 0.05,
    Archetype.DEFENSIVE_SPECIALIST: 0.08,
    Archetype.PLAYMAKER: 0.04,
    Archetype.ATHLETIC_FINISHER: 0.06,
    Archetype.STRETCH_BIG: 0.03,
    Archetype.LOCKDOWN_DEFENDER: 0.05,
    Archetype.FLOOR_GENERAL: 0.02,
    Archetype.ENERGIZER: 0.10,
}

# Chance that a generated player carries any rare archetype
ARCHETYPE_CHANCE = 0.15

# Upward nudges to potential
YOUNG_BUMP_CHANCE = 0.3
ROOKIE_BUMP_CHANCE = 0.2

# Rookie projection tables
_CEILING_BASE = {
    PotentialTier.BRONZE: 75,
    PotentialTier.SILVER: 85,
    PotentialTier.GOLD: 92,
    PotentialTier.ELITE: 97,
}
_FLOOR_BASE = {
    PotentialTier.BRONZE: 55,
    PotentialTier.SILVER: 65,
    PotentialTier.GOLD: 75,
    PotentialTier.ELITE: 80,
}
BUST_PROBABILITY = {
    TalentTier.SUPERSTAR: 0.05,
    TalentTier.ALL_STAR: 0.15,
    TalentTier.STARTER: 0.25,
    TalentTier.ROTATION: 0.35,
    TalentTier.BENCH: 0.50,
}
BOOM_PROBABILITY = {
    TalentTier.SUPERSTAR: 0.20,
    TalentTier.ALL_STAR: 0.15,
    TalentTier.STARTER: 0.10,
    TalentTier.ROTATION: 0.08,
    TalentTier.BENCH: 0.05,
}


# =============================================================================
# Position Specs
# =============================================================================

@dataclass(frozen=True)
class PositionSpec:
    """Which skills a role leans on, how tall it runs, and its archetypes."""

    primary: tuple[Skill, ...]
    secondary: tuple[Skill, ...]
    weak: tuple[Skill, ...]
    height_range: tuple[int, int]
    avg_height: int
    archetypes: tuple[Archetype, ...]


POSITION_SPECS: dict[PlayerRole, PositionSpec] = {
    PlayerRole.PG: PositionSpec(
        primary=(Skill.PASSING, Skill.BALL_HANDLING),
        secondary=(Skill.PERIMETER_DEFENSE, Skill.SHOOTING),
        weak=(Skill.REBOUNDING, Skill.POST_DEFENSE),
        height_range=(175, 195),
        avg_height=185,
        archetypes=(Archetype.PLAYMAKER, Archetype.FLOOR_GENERAL, Archetype.LOCKDOWN_DEFENDER),
    ),
    PlayerRole.SG: PositionSpec(
        primary=(Skill.SHOOTING, Skill.PERIMETER_DEFENSE),
        secondary=(Skill.BALL_HANDLING, Skill.PASSING),
        weak=(Skill.REBOUNDING, Skill.POST_DEFENSE),
        height_range=(185, 205),
        avg_height=195,
        archetypes=(
            Archetype.ELITE_SHOOTER,
            Archetype.LOCKDOWN_DEFENDER,
            Archetype.ATHLETIC_FINISHER,
        ),
    ),
    PlayerRole.SF: PositionSpec(
        primary=(Skill.SHOOTING, Skill.REBOUNDING),
        secondary=(Skill.PERIMETER_DEFENSE, Skill.PASSING),
        weak=(Skill.POST_DEFENSE,),
        height_range=(195, 210),
        avg_height=203,
        archetypes=(
            Archetype.ELITE_SHOOTER,
            Archetype.DEFENSIVE_SPECIALIST,
            Archetype.PLAYMAKER,
            Archetype.ATHLETIC_FINISHER,
        ),
    ),
    PlayerRole.PF: PositionSpec(
        primary=(Skill.REBOUNDING, Skill.INSIDE_SHOOTING),
        secondary=(Skill.POST_DEFENSE, Skill.SHOOTING),
        weak=(Skill.BALL_HANDLING, Skill.PASSING),
        height_range=(200, 215),
        avg_height=208,
        archetypes=(
            Archetype.STRETCH_BIG,
            Archetype.ATHLETIC_FINISHER,
            Archetype.DEFENSIVE_SPECIALIST,
        ),
    ),
    PlayerRole.C: PositionSpec(
        primary=(Skill.REBOUNDING, Skill.POST_DEFENSE, Skill.INSIDE_SHOOTING),
        secondary=(Skill.PERIMETER_DEFENSE,),
        weak=(Skill.BALL_HANDLING, Skill.PASSING, Skill.SHOOTING),
        height_range=(205, 225),
        avg_height=213,
        archetypes=(
            Archetype.STRETCH_BIG,
            Archetype.DEFENSIVE_SPECIALIST,
            Archetype.ATHLETIC_FINISHER,
        ),
    ),
}


@dataclass(frozen=True)
class AttributeRange:
    """Inclusive rating band with a target average."""

    min: int
    max: int
    avg: int

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass
class RookieProfile:
    """Hidden projection attached to a drafted player."""

    potential_tier: PotentialTier
    hidden_variance: float
    development_rate: float
    ceiling_projection: int
    floor_projection: int
    bust_probability: float
    boom_probability: float
    is_hidden: bool = True


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _cumulative_pick(table: dict, roll: float, fallback):
    cumulative = 0.0
    for key, chance in table.items():
        cumulative += chance
        if roll <= cumulative:
            return key
    return fallback


# =============================================================================
# Distribution Service
# =============================================================================

@dataclass
class TalentDistribution:
    """
    Stateless generator over the talent tables.

    The only state is the random source, which callers own.
    """

    rng: Optional[random.Random] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()

    def generate_talent_tier(self, is_rookie: bool = False) -> TalentTier:
        """Draw a talent tier from the standard or rookie distribution."""
        table = ROOKIE_DISTRIBUTION if is_rookie else STANDARD_DISTRIBUTION
        return _cumulative_pick(table, self.rng.random(), TalentTier.BENCH)

    def generate_potential_tier(
        self,
        talent: TalentTier,
        age: int,
        is_rookie: bool = False,
    ) -> PotentialTier:
        """
        Draw a potential tier conditioned on talent tier.

        Young players (age factor above 1.1) get one 30% chance of moving
        up a tier; rookies get a separate 20% chance.
        """
        if is_rookie:
            age_factor = 1.2
        else:
            age_factor = _clamp((30 - age) / 12, 0.5, 1.5)

        tier = self._base_potential(talent, self.rng.random())

        if age_factor > 1.1 and self.rng.random() < YOUNG_BUMP_CHANCE:
            tier = tier.bumped()
        if is_rookie and self.rng.random() < ROOKIE_BUMP_CHANCE:
            tier = tier.bumped()
        return tier

    @staticmethod
    def _base_potential(talent: TalentTier, roll: float) -> PotentialTier:
        if talent == TalentTier.SUPERSTAR:
            if roll < 0.6:
                return PotentialTier.ELITE
            return PotentialTier.GOLD if roll < 0.9 else PotentialTier.SILVER
        if talent == TalentTier.ALL_STAR:
            if roll < 0.4:
                return PotentialTier.GOLD
            return PotentialTier.SILVER if roll < 0.8 else PotentialTier.BRONZE
        if talent == TalentTier.STARTER:
            if roll < 0.3:
                return PotentialTier.SILVER
            return PotentialTier.BRONZE if roll < 0.7 else PotentialTier.SILVER
        if talent == TalentTier.ROTATION:
            return PotentialTier.SILVER if roll < 0.2 else PotentialTier.BRONZE
        return PotentialTier.SILVER if roll < 0.1 else PotentialTier.BRONZE

    def generate_rare_archetype(self, role: PlayerRole) -> Optional[Archetype]:
        """85% of players get no archetype; the rest draw a role-valid one by weight."""
        if self.rng.random() > ARCHETYPE_CHANCE:
            return None
        available = POSITION_SPECS[role].archetypes
        if not available:
            return None

        total = sum(ARCHETYPE_WEIGHTS.get(a, 0.01) for a in available)
        roll = self.rng.random() * total
        cumulative = 0.0
        for archetype in available:
            cumulative += ARCHETYPE_WEIGHTS.get(archetype, 0.01)
            if roll <= cumulative:
                return archetype
        return available[0]

    def generate_rookie_profile(self, talent: TalentTier) -> RookieProfile:
        """Hidden projection for a drafted rookie."""
        tier = self.generate_potential_tier(talent, 20, is_rookie=True)
        variance = self.rng.random() * 0.3 - 0.15
        development_rate = 0.8 + self.rng.random() * 0.6
        ceiling = int(_clamp(round(_CEILING_BASE[tier] + variance * 10), 70, 99))
        floor = int(_clamp(round(_FLOOR_BASE[tier] + variance * 8), 45, 85))
        return RookieProfile(
            potential_tier=tier,
            hidden_variance=variance,
            development_rate=development_rate,
            ceiling_projection=ceiling,
            floor_projection=floor,
            bust_probability=BUST_PROBABILITY[talent],
            boom_probability=BOOM_PROBABILITY[talent],
        )

    def generate_draft_class_distribution(self, size: int) -> list[TalentTier]:
        """Talent tiers for a draft class, with early picks skewed upward."""
        tiers: list[TalentTier] = []
        for pick in range(size):
            weights = draft_pick_weights(pick, size)
            tiers.append(_cumulative_pick(weights, self.rng.random(), TalentTier.BENCH))
        return tiers


def draft_pick_weights(pick: int, size: int) -> dict[TalentTier, float]:
    """Normalized rookie distribution adjusted for a pick position."""
    bonus = (size - pick) / size * 0.2 if size > 0 else 0.0
    adjusted = {}
    for tier, chance in ROOKIE_DISTRIBUTION.items():
        if tier in (TalentTier.SUPERSTAR, TalentTier.ALL_STAR):
            chance += bonus
        elif tier == TalentTier.BENCH:
            chance -= bonus * 0.5
        adjusted[tier] = _clamp(chance, 0.0, 1.0)
    total = sum(adjusted.values())
    return {tier: chance / total for tier, chance in adjusted.items()}


def position_spec(role: PlayerRole) -> PositionSpec:
    return POSITION_SPECS[role]


def attribute_ranges(role: PlayerRole, talent: TalentTier) -> dict[Skill, AttributeRange]:
    """
    Rating bands for each skill of a (role, talent tier) pair.

    Primary skills are boosted, secondary moderately boosted and weak
    skills penalized, then every band is re-clamped so that
    30 <= min <= avg <= max <= 99.
    """
    spec = POSITION_SPECS[role]
    curve = TALENT_CURVES[talent]
    ranges: dict[Skill, AttributeRange] = {}

    for skill in Skill:
        low, high, avg = float(curve.min_rating), float(curve.max_rating), float(curve.avg_rating)
        if skill in spec.primary:
            low, high, avg = low * 1.1, high * 1.05, avg * 1.25
        elif skill in spec.secondary:
            low, avg = low * 1.05, avg * 1.12
        elif skill in spec.weak:
            low, high, avg = low * 0.7, high * 0.85, avg * 0.65

        low = _clamp(round(low), 30, 90)
        high = _clamp(round(high), 50, 99)
        avg = _clamp(round(avg), 40, 95)

        low = _clamp(low, 30, 99)
        high = _clamp(max(high, low), 30, 99)
        avg = _clamp(avg, low, high)
        ranges[skill] = AttributeRange(int(low), int(high), int(avg))

    return ranges


__all__ = [
    "TALENT_CURVES",
    "STANDARD_DISTRIBUTION",
    "ROOKIE_DISTRIBUTION",
    "ARCHETYPE_WEIGHTS",
    "POSITION_SPECS",
    "AttributeRange",
    "PositionSpec",
    "RookieProfile",
    "TalentCurve",
    "TalentDistribution",
    "attribute_ranges",
    "draft_pick_weights",
    "position_spec",
]
