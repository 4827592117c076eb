"""Player model."""

import copy
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from tipoff.core.enums import Archetype, PlayerRole, RetirementReason, Skill
from tipoff.core.models.development_tracker import DevelopmentTracker
from tipoff.core.models.potential import PlayerPotential
from tipoff.core.skills import SkillRatings


@dataclass
class PlayerRecord:
    """
    Represents an individual basketball player.

    A player is composed of independent sub-records: current skill ratings,
    hidden potential ceilings, and a development tracker that owns the
    experience ledger and the aging curve.
    """

    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    role: PlayerRole = PlayerRole.PG
    skills: SkillRatings = field(default_factory=SkillRatings)
    potential: PlayerPotential = field(default_factory=PlayerPotential)
    development: DevelopmentTracker = field(default_factory=DevelopmentTracker)

    # Physical info
    age: int = 22
    height_cm: int = 198
    nationality: str = "USA"

    # Career info
    experience_years: int = 0
    archetype: Optional[Archetype] = None
    retired: bool = False
    retirement_reason: Optional[RetirementReason] = None

    @property
    def name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Short display name (e.g., 'S. Curry')."""
        if self.first_name:
            return f"{self.first_name[0]}. {self.last_name}"
        return self.last_name

    @property
    def overall(self) -> int:
        return self.skills.overall

    @property
    def average_skill(self) -> float:
        return self.skills.average

    @property
    def aging_curve(self):
        return self.development.aging_curve

    @property
    def is_rookie(self) -> bool:
        return self.experience_years == 0

    @property
    def is_active(self) -> bool:
        return not self.retired

    def get_skill(self, skill: Skill) -> int:
        return self.skills.get(skill)

    def set_skill(self, skill: Skill, value: int) -> None:
        self.skills.set(skill, value)

    def retire(self, reason: RetirementReason) -> None:
        self.retired = True
        self.retirement_reason = reason

    def copy(self) -> "PlayerRecord":
        """Deep copy, keeping the same id."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value}, {self.age}) - {self.overall} OVR"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "skills": self.skills.to_dict(),
            "potential": self.potential.to_dict(),
            "development": self.development.to_dict(),
            "age": self.age,
            "height_cm": self.height_cm,
            "nationality": self.nationality,
            "experience_years": self.experience_years,
            "archetype": self.archetype.value if self.archetype else None,
            "retired": self.retired,
            "retirement_reason": self.retirement_reason.value if self.retirement_reason else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerRecord":
        """Create from dictionary."""
        archetype = data.get("archetype")
        reason = data.get("retirement_reason")
        return cls(
            id=UUID(data["id"]) if "id" in data else uuid4(),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            role=PlayerRole(data.get("role", PlayerRole.PG.value)),
            skills=SkillRatings.from_dict(data.get("skills", {})),
            potential=PlayerPotential.from_dict(data.get("potential", {})),
            development=DevelopmentTracker.from_dict(data.get("development", {})),
            age=int(data.get("age", 22)),
            height_cm=int(data.get("height_cm", 198)),
            nationality=data.get("nationality", "USA"),
            experience_years=int(data.get("experience_years", 0)),
            archetype=Archetype(archetype) if archetype else None,
            retired=bool(data.get("retired", False)),
            retirement_reason=RetirementReason(reason) if reason else None,
        )
