"""Core simulation models."""

from tipoff.core.models.aging_curve import AgingCurve
from tipoff.core.models.development_tracker import (
    DevelopmentMilestone,
    DevelopmentTracker,
)
from tipoff.core.models.player import PlayerRecord
from tipoff.core.models.potential import PlayerPotential
from tipoff.core.models.stats import BoxScore, BoxScoreEntry
from tipoff.core.models.team import Roster

__all__ = [
    "AgingCurve",
    "BoxScore",
    "BoxScoreEntry",
    "DevelopmentMilestone",
    "DevelopmentTracker",
    "PlayerPotential",
    "PlayerRecord",
    "Roster",
]
