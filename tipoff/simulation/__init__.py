"""Game and season simulation."""

from tipoff.simulation.engine import GameResult, PossessionSimulator
from tipoff.simulation.season import SeasonOrchestrator, SeasonSummary

__all__ = [
    "GameResult",
    "PossessionSimulator",
    "SeasonOrchestrator",
    "SeasonSummary",
]
