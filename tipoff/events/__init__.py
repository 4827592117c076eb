"""Event system for simulation."""

from tipoff.events.bus import EventBus
from tipoff.events.types import (
    GameCompleted,
    PlayerRetired,
    PossessionCompleted,
    SeasonCompleted,
    SimulationEvent,
    SkillUpgraded,
)

__all__ = [
    "EventBus",
    "GameCompleted",
    "PlayerRetired",
    "PossessionCompleted",
    "SeasonCompleted",
    "SimulationEvent",
    "SkillUpgraded",
]
