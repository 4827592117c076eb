"""Pydantic schemas for handing simulation state to external storage."""

from typing import Optional

from pydantic import BaseModel, Field


class SkillRatingsSchema(BaseModel):
    """The seven skill ratings."""

    shooting: int = Field(ge=0, le=99)
    rebounding: int = Field(ge=0, le=99)
    passing: int = Field(ge=0, le=99)
    ball_handling: int = Field(ge=0, le=99)
    perimeter_defense: int = Field(ge=0, le=99)
    post_defense: int = Field(ge=0, le=99)
    inside_shooting: int = Field(ge=0, le=99)

    @classmethod
    def from_model(cls, skills) -> "SkillRatingsSchema":
        """Create from SkillRatings."""
        return cls(**skills.to_dict())


class PotentialSchema(BaseModel):
    """Potential ceilings; hidden ceilings are omitted unless requested."""

    tier: str
    overall_potential: int
    is_hidden: bool = True
    max_skills: Optional[dict[str, int]] = None

    @classmethod
    def from_model(cls, potential, reveal_hidden: bool = False) -> "PotentialSchema":
        show = reveal_hidden or not potential.is_hidden
        return cls(
            tier=potential.tier.value,
            overall_potential=potential.overall_potential,
            is_hidden=potential.is_hidden,
            max_skills=potential.to_dict()["max_skills"] if show else None,
        )


class PlayerSchema(BaseModel):
    """Player information."""

    id: str
    first_name: str
    last_name: str
    role: str
    age: int
    nationality: str
    height_cm: int
    overall: int = 0
    experience_years: int = 0
    archetype: Optional[str] = None
    retired: bool = False
    retirement_reason: Optional[str] = None

    skills: SkillRatingsSchema
    potential: PotentialSchema
    skill_experience: dict[str, int] = {}
    total_experience: int = 0
    development_rate: float = Field(default=1.0, ge=0.1, le=3.0)

    @classmethod
    def from_model(cls, player, reveal_hidden: bool = False) -> "PlayerSchema":
        """Create from PlayerRecord."""
        development = player.development
        return cls(
            id=str(player.id),
            first_name=player.first_name,
            last_name=player.last_name,
            role=player.role.value,
            age=player.age,
            nationality=player.nationality,
            height_cm=player.height_cm,
            overall=player.overall,
            experience_years=player.experience_years,
            archetype=player.archetype.value if player.archetype else None,
            retired=player.retired,
            retirement_reason=player.retirement_reason.value if player.retirement_reason else None,
            skills=SkillRatingsSchema.from_model(player.skills),
            potential=PotentialSchema.from_model(player.potential, reveal_hidden),
            skill_experience={s.value: xp for s, xp in development.skill_experience.items()},
            total_experience=development.total_experience,
            development_rate=development.development_rate,
        )


class BoxScoreEntrySchema(BaseModel):
    """One player's line in a box score."""

    player_id: str
    points: int = 0
    rebounds: int = 0
    offensive_rebounds: int = 0
    defensive_rebounds: int = 0
    assists: int = 0
    turnovers: int = 0
    steals: int = 0
    blocks: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0

    @classmethod
    def from_model(cls, player_id, entry) -> "BoxScoreEntrySchema":
        return cls(
            player_id=str(player_id),
            points=entry.points,
            rebounds=entry.rebounds,
            offensive_rebounds=entry.offensive_rebounds,
            defensive_rebounds=entry.defensive_rebounds,
            assists=entry.assists,
            turnovers=entry.turnovers,
            steals=entry.steals,
            blocks=entry.blocks,
            field_goals_made=entry.field_goals_made,
            field_goals_attempted=entry.field_goals_attempted,
            three_pointers_made=entry.three_pointers_made,
            three_pointers_attempted=entry.three_pointers_attempted,
        )


class GameResultSchema(BaseModel):
    """Final score and box score of a game."""

    game_id: str
    home_team_id: Optional[str] = None
    away_team_id: Optional[str] = None
    home_score: int
    away_score: int
    possessions: int
    home_box: list[BoxScoreEntrySchema] = []
    away_box: list[BoxScoreEntrySchema] = []

    @classmethod
    def from_model(cls, result) -> "GameResultSchema":
        """Create from GameResult."""
        box = result.box_score
        return cls(
            game_id=str(result.game_id),
            home_team_id=str(result.home_team_id) if result.home_team_id else None,
            away_team_id=str(result.away_team_id) if result.away_team_id else None,
            home_score=result.home_score,
            away_score=result.away_score,
            possessions=result.possessions,
            home_box=[BoxScoreEntrySchema.from_model(pid, box[pid]) for pid in box.home_player_ids],
            away_box=[BoxScoreEntrySchema.from_model(pid, box[pid]) for pid in box.away_player_ids],
        )


class SkillChangeSchema(BaseModel):
    old: int
    new: int
    delta: int


class AgingResultSchema(BaseModel):
    """Outcome of one season boundary for a player."""

    player_id: str
    previous_age: int
    new_age: int
    skill_changes: dict[str, SkillChangeSchema] = {}
    retired: bool = False
    reason: Optional[str] = None
    reason_description: str = ""

    @classmethod
    def from_model(cls, result) -> "AgingResultSchema":
        """Create from AgingResult."""
        return cls(
            player_id=str(result.player_id),
            previous_age=result.previous_age,
            new_age=result.new_age,
            skill_changes={
                skill.value: SkillChangeSchema(**change.to_dict())
                for skill, change in result.skill_changes.items()
            },
            retired=result.retired,
            reason=result.reason.value if result.reason else None,
            reason_description=result.reason_description,
        )
