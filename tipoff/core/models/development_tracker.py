"""Experience ledger and development milestones."""

from dataclasses import dataclass, field
from typing import Optional

from tipoff.core.enums import Skill
from tipoff.core.models.aging_curve import AgingCurve


MIN_DEVELOPMENT_RATE = 0.1
MAX_DEVELOPMENT_RATE = 3.0


def clamp_rate(value: float) -> float:
    return max(MIN_DEVELOPMENT_RATE, min(MAX_DEVELOPMENT_RATE, value))


@dataclass
class DevelopmentMilestone:
    """A named total-experience threshold."""

    name: str
    description: str
    experience_required: int
    achieved: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "experience_required": self.experience_required,
            "achieved": self.achieved,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DevelopmentMilestone":
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            experience_required=int(data["experience_required"]),
            achieved=bool(data.get("achieved", False)),
        )


def default_milestones() -> list[DevelopmentMilestone]:
    return [
        DevelopmentMilestone("First Steps", "Gain your first 100 experience points", 100),
        DevelopmentMilestone("Rising Talent", "Accumulate 500 experience points", 500),
        DevelopmentMilestone("Experienced Player", "Reach 1000 experience points", 1000),
        DevelopmentMilestone("Veteran", "Achieve 2500 experience points", 2500),
        DevelopmentMilestone("Elite Performer", "Earn 5000 experience points", 5000),
    ]


@dataclass
class DevelopmentTracker:
    """
    Per-skill experience balances plus lifetime totals.

    `skill_experience` holds the unspent balance for each skill and is
    consumed by upgrades. `total_experience` only ever grows and drives the
    milestones.
    """

    skill_experience: dict[Skill, int] = field(default_factory=dict)
    total_experience: int = 0
    development_rate: float = 1.0
    milestones: list[DevelopmentMilestone] = field(default_factory=default_milestones)
    aging_curve: AgingCurve = field(default_factory=AgingCurve.standard)

    def __post_init__(self) -> None:
        for skill in Skill:
            self.skill_experience[skill] = max(0, int(self.skill_experience.get(skill, 0)))
        self.development_rate = clamp_rate(self.development_rate)

    @classmethod
    def initial(cls, age: Optional[int] = None) -> "DevelopmentTracker":
        """Fresh tracker with a curve chosen from age alone."""
        curve = AgingCurve.for_age(age) if age is not None else AgingCurve.standard()
        return cls(aging_curve=curve)

    def experience(self, skill: Skill) -> int:
        return self.skill_experience[skill]

    def add_experience(self, skill: Skill, amount: int) -> list[DevelopmentMilestone]:
        """
        Credit experience to a skill.

        Non-positive amounts are ignored.

        Returns:
            Milestones newly achieved by this award
        """
        if amount <= 0:
            return []
        self.skill_experience[skill] += amount
        self.total_experience += amount
        return self._check_milestones()

    def spend_experience(self, skill: Skill, amount: int) -> bool:
        """Consume experience from a skill balance if it covers the amount."""
        if amount < 0 or self.skill_experience[skill] < amount:
            return False
        self.skill_experience[skill] -= amount
        return True

    def _check_milestones(self) -> list[DevelopmentMilestone]:
        reached = []
        for milestone in self.milestones:
            if not milestone.achieved and self.total_experience >= milestone.experience_required:
                milestone.achieved = True
                reached.append(milestone)
        return reached

    @property
    def achieved_milestones(self) -> list[DevelopmentMilestone]:
        return [m for m in self.milestones if m.achieved]

    def current_rate(self, age: int, coach_bonus: float = 0.0) -> float:
        """Effective development rate at an age, including coaching."""
        return clamp_rate(self.development_rate * self.aging_curve.age_modifier(age) + coach_bonus)

    def set_development_rate(self, rate: float) -> None:
        self.development_rate = clamp_rate(rate)

    def to_dict(self) -> dict:
        return {
            "skill_experience": {s.value: xp for s, xp in self.skill_experience.items()},
            "total_experience": self.total_experience,
            "development_rate": self.development_rate,
            "milestones": [m.to_dict() for m in self.milestones],
            "aging_curve": self.aging_curve.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DevelopmentTracker":
        experience = {
            Skill(name): int(value)
            for name, value in data.get("skill_experience", {}).items()
        }
        milestones = data.get("milestones")
        return cls(
            skill_experience=experience,
            total_experience=int(data.get("total_experience", 0)),
            development_rate=float(data.get("development_rate", 1.0)),
            milestones=(
                [DevelopmentMilestone.from_dict(m) for m in milestones]
                if milestones is not None
                else default_milestones()
            ),
            aging_curve=AgingCurve.from_dict(data.get("aging_curve", {})),
        )
