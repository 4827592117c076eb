"""Skill identifiers."""

from enum import Enum


class Skill(Enum):
    """The seven rated skills every player carries."""

    SHOOTING = "shooting"
    REBOUNDING = "rebounding"
    PASSING = "passing"
    BALL_HANDLING = "ball_handling"
    PERIMETER_DEFENSE = "perimeter_defense"
    POST_DEFENSE = "post_defense"
    INSIDE_SHOOTING = "inside_shooting"

    @property
    def is_defensive(self) -> bool:
        return self in (Skill.PERIMETER_DEFENSE, Skill.POST_DEFENSE)

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Ball Handling'."""
        return self.value.replace("_", " ").title()
