"""Event types for simulation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from tipoff.core.enums import RetirementReason, ShotType, Skill


@dataclass
class SimulationEvent:
    """Base class for all simulation events."""

    timestamp: datetime = field(default_factory=datetime.now)
    game_id: Optional[UUID] = None


@dataclass
class PossessionCompleted(SimulationEvent):
    """Fired after every possession of a simulated game."""

    possession_number: int = 0
    offense_is_home: bool = True
    player_id: Optional[UUID] = None
    shot_type: Optional[ShotType] = None  # None for a turnover
    made: bool = False
    points: int = 0
    rebounder_id: Optional[UUID] = None
    offensive_rebound: bool = False
    assist_id: Optional[UUID] = None
    turnover: bool = False
    steal_id: Optional[UUID] = None
    block_id: Optional[UUID] = None
    description: str = ""

    # Score after the possession
    home_score: int = 0
    away_score: int = 0


@dataclass
class GameCompleted(SimulationEvent):
    """Fired when a game finishes."""

    home_team_id: Optional[UUID] = None
    away_team_id: Optional[UUID] = None
    home_score: int = 0
    away_score: int = 0
    possessions: int = 0

    @property
    def is_tie(self) -> bool:
        return self.home_score == self.away_score


@dataclass
class SkillUpgraded(SimulationEvent):
    """Fired when development raises a skill."""

    player_id: Optional[UUID] = None
    skill: Optional[Skill] = None
    new_value: int = 0


@dataclass
class PlayerRetired(SimulationEvent):
    """Fired when aging ends a player's career."""

    player_id: Optional[UUID] = None
    team_id: Optional[UUID] = None
    age: int = 0
    reason: Optional[RetirementReason] = None


@dataclass
class SeasonCompleted(SimulationEvent):
    """Fired once a season boundary has been processed."""

    season: int = 0
    games_played: int = 0
    retirements: int = 0
    rookies_added: int = 0
