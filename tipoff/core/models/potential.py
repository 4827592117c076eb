"""Hidden potential ceilings."""

import random
from dataclasses import dataclass, field
from typing import Optional

from tipoff.core.enums import PotentialTier, Skill


POTENTIAL_CAP_MIN = 50
POTENTIAL_CAP_MAX = 99

# (low, high) inclusive overall potential per tier
TIER_OVERALL_RANGE: dict[PotentialTier, tuple[int, int]] = {
    PotentialTier.BRONZE: (70, 79),
    PotentialTier.SILVER: (80, 89),
    PotentialTier.GOLD: (90, 97),
    PotentialTier.ELITE: (95, 99),
}

# Per-skill spread around the overall potential
TIER_CAP_VARIANCE: dict[PotentialTier, int] = {
    PotentialTier.BRONZE: 5,
    PotentialTier.SILVER: 8,
    PotentialTier.GOLD: 10,
    PotentialTier.ELITE: 12,
}


def clamp_cap(value: int) -> int:
    return max(POTENTIAL_CAP_MIN, min(POTENTIAL_CAP_MAX, int(value)))


@dataclass
class PlayerPotential:
    """
    A player's ceiling for each skill.

    Development can only push a skill up to its ceiling. The ceilings are
    hidden until the player is scouted.
    """

    tier: PotentialTier = PotentialTier.BRONZE
    max_skills: dict[Skill, int] = field(default_factory=dict)
    overall_potential: int = 75
    is_hidden: bool = True

    def __post_init__(self) -> None:
        for skill in Skill:
            self.max_skills.setdefault(skill, self.overall_potential)

    @classmethod
    def from_tier(
        cls,
        tier: PotentialTier,
        rng: Optional[random.Random] = None,
        is_hidden: bool = True,
    ) -> "PlayerPotential":
        """
        Draw overall potential and per-skill ceilings for a tier.

        Args:
            tier: Potential tier
            rng: Random source
            is_hidden: Whether the ceilings start hidden

        Returns:
            New PlayerPotential
        """
        rng = rng or random.Random()
        low, high = TIER_OVERALL_RANGE[tier]
        overall = rng.randint(low, high)
        variance = TIER_CAP_VARIANCE[tier]
        caps = {
            skill: clamp_cap(overall + rng.randint(-variance, variance))
            for skill in Skill
        }
        return cls(tier=tier, max_skills=caps, overall_potential=overall, is_hidden=is_hidden)

    def cap(self, skill: Skill) -> int:
        return self.max_skills[skill]

    def set_cap(self, skill: Skill, value: int) -> None:
        self.max_skills[skill] = clamp_cap(value)

    def can_improve(self, skill: Skill, current: int) -> bool:
        """True while the skill is strictly below its ceiling."""
        return current < self.max_skills[skill]

    def remaining(self, skill: Skill, current: int) -> int:
        return max(0, self.max_skills[skill] - current)

    def reveal(self) -> None:
        """Mark the potential as scouted."""
        self.is_hidden = False

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "max_skills": {skill.value: cap for skill, cap in self.max_skills.items()},
            "overall_potential": self.overall_potential,
            "is_hidden": self.is_hidden,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerPotential":
        caps = {
            Skill(name): int(value)
            for name, value in data.get("max_skills", {}).items()
        }
        return cls(
            tier=PotentialTier(data.get("tier", PotentialTier.BRONZE.value)),
            max_skills=caps,
            overall_potential=int(data.get("overall_potential", 75)),
            is_hidden=bool(data.get("is_hidden", True)),
        )
