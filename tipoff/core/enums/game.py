"""Game and career outcome enumerations."""

from enum import Enum


class ShotType(Enum):
    """Shot categories drawn on every possession."""

    INSIDE = "inside"
    MIDRANGE = "midrange"
    THREE = "three"

    @property
    def points(self) -> int:
        return 3 if self == ShotType.THREE else 2


class RetirementReason(Enum):
    """Why a player's career ended."""

    AGE = "age"
    PERFORMANCE = "performance"
    INJURY = "injury"
    VOLUNTARY = "voluntary"

    @property
    def description(self) -> str:
        return {
            RetirementReason.AGE: "Reached retirement age",
            RetirementReason.PERFORMANCE: "Performance decline",
            RetirementReason.INJURY: "Injury concerns",
            RetirementReason.VOLUNTARY: "Voluntary retirement",
        }[self]
