"""Position definitions for basketball players."""

from enum import Enum, auto


class PositionGroup(Enum):
    """High-level position groupings."""

    GUARD = auto()
    FORWARD = auto()
    BIG = auto()


class PlayerRole(Enum):
    """The five on-court roles."""

    PG = "PG"  # Point Guard
    SG = "SG"  # Shooting Guard
    SF = "SF"  # Small Forward
    PF = "PF"  # Power Forward
    C = "C"  # Center

    @property
    def group(self) -> PositionGroup:
        """Get the position group for this role."""
        if self in (PlayerRole.PG, PlayerRole.SG):
            return PositionGroup.GUARD
        if self in (PlayerRole.SF, PlayerRole.PF):
            return PositionGroup.FORWARD
        return PositionGroup.BIG

    @property
    def is_guard(self) -> bool:
        return self.group == PositionGroup.GUARD

    @property
    def display_name(self) -> str:
        """Long form of the role."""
        return {
            PlayerRole.PG: "Point Guard",
            PlayerRole.SG: "Shooting Guard",
            PlayerRole.SF: "Small Forward",
            PlayerRole.PF: "Power Forward",
            PlayerRole.C: "Center",
        }[self]
