"""Simulation enumerations."""

from tipoff.core.enums.game import RetirementReason, ShotType
from tipoff.core.enums.positions import PlayerRole, PositionGroup
from tipoff.core.enums.skills import Skill
from tipoff.core.enums.tiers import Archetype, PotentialTier, TalentTier

__all__ = [
    "Archetype",
    "PlayerRole",
    "PositionGroup",
    "PotentialTier",
    "RetirementReason",
    "ShotType",
    "Skill",
    "TalentTier",
]
