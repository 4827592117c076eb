"""Player skill ratings container."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from tipoff.core.enums import Skill


MIN_RATING = 0
MAX_RATING = 99
DEFAULT_RATING = 50


def clamp_rating(value: int, low: int = MIN_RATING, high: int = MAX_RATING) -> int:
    """Clamp a rating into [low, high]."""
    return max(low, min(high, int(value)))


@dataclass
class SkillRatings:
    """
    Container for a player's seven skill ratings.

    Every skill is always present. Values are keyed by the Skill enum and
    clamped to 0-99 on every write, so no caller can store an out-of-range
    rating.
    """

    _values: dict[Skill, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for skill in Skill:
            self._values[skill] = clamp_rating(self._values.get(skill, DEFAULT_RATING))

    @classmethod
    def uniform(cls, value: int) -> "SkillRatings":
        """Create ratings with every skill set to the same value."""
        return cls({skill: value for skill in Skill})

    def get(self, skill: Skill) -> int:
        return self._values[skill]

    def set(self, skill: Skill, value: int) -> None:
        """Set a skill value, clamping to valid range."""
        self._values[skill] = clamp_rating(value)

    def adjust(self, skill: Skill, delta: int, floor: int = MIN_RATING) -> int:
        """
        Shift a skill by delta and return the stored value.

        Args:
            skill: Skill to change
            delta: Signed change
            floor: Lowest value the skill may drop to

        Returns:
            The new, clamped value
        """
        self._values[skill] = clamp_rating(self._values[skill] + delta, low=floor)
        return self._values[skill]

    def __getitem__(self, skill: Skill) -> int:
        return self.get(skill)

    def __setitem__(self, skill: Skill, value: int) -> None:
        self.set(skill, value)

    def __iter__(self) -> Iterator[Skill]:
        return iter(Skill)

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[Skill, int]]:
        """Iterate over (skill, value) pairs in enum order."""
        return ((skill, self._values[skill]) for skill in Skill)

    @property
    def average(self) -> float:
        """Unweighted mean of all seven skills."""
        return sum(self._values.values()) / len(Skill)

    @property
    def overall(self) -> int:
        return int(round(self.average))

    def best(self, skills: Optional[list[Skill]] = None) -> Skill:
        """Highest rated skill among the given ones (all skills by default)."""
        pool = skills or list(Skill)
        return max(pool, key=lambda s: self._values[s])

    def to_dict(self) -> dict[str, int]:
        """Convert to plain dictionary for serialization."""
        return {skill.value: value for skill, value in self.items()}

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "SkillRatings":
        """Create from dictionary, ignoring unknown keys."""
        values = {}
        for skill in Skill:
            if skill.value in data:
                values[skill] = data[skill.value]
        return cls(values)

    def copy(self) -> "SkillRatings":
        """Create a copy of these ratings."""
        return SkillRatings(dict(self._values))
