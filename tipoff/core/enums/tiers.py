"""Generation-time tiers and archetypes."""

from enum import Enum


class TalentTier(Enum):
    """Coarse classification of current ability, used only at generation."""

    SUPERSTAR = "superstar"
    ALL_STAR = "all_star"
    STARTER = "starter"
    ROTATION = "rotation"
    BENCH = "bench"


class PotentialTier(Enum):
    """Ceiling classification, ordered from lowest to highest."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    ELITE = "elite"

    @property
    def rank(self) -> int:
        return _POTENTIAL_ORDER.index(self)

    def bumped(self) -> "PotentialTier":
        """Return the next tier up, saturating at ELITE."""
        index = min(self.rank + 1, len(_POTENTIAL_ORDER) - 1)
        return _POTENTIAL_ORDER[index]


_POTENTIAL_ORDER = [
    PotentialTier.BRONZE,
    PotentialTier.SILVER,
    PotentialTier.GOLD,
    PotentialTier.ELITE,
]


class Archetype(Enum):
    """Rare specialization profiles."""

    ELITE_SHOOTER = "elite_shooter"
    DEFENSIVE_SPECIALIST = "defensive_specialist"
    PLAYMAKER = "playmaker"
    ATHLETIC_FINISHER = "athletic_finisher"
    STRETCH_BIG = "stretch_big"
    LOCKDOWN_DEFENDER = "lockdown_defender"
    FLOOR_GENERAL = "floor_general"
    ENERGIZER = "energizer"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()
