"""Box score models."""

from dataclasses import dataclass, field, fields
from typing import Iterator, Optional
from uuid import UUID

from tipoff.core.enums import ShotType


@dataclass
class BoxScoreEntry:
    """Counting statistics for one player in one game."""

    points: int = 0
    offensive_rebounds: int = 0
    defensive_rebounds: int = 0
    assists: int = 0
    turnovers: int = 0
    steals: int = 0
    blocks: int = 0

    inside_made: int = 0
    inside_attempted: int = 0
    midrange_made: int = 0
    midrange_attempted: int = 0
    three_made: int = 0
    three_attempted: int = 0

    @property
    def rebounds(self) -> int:
        return self.offensive_rebounds + self.defensive_rebounds

    @property
    def field_goals_made(self) -> int:
        return self.inside_made + self.midrange_made + self.three_made

    @property
    def field_goals_attempted(self) -> int:
        return self.inside_attempted + self.midrange_attempted + self.three_attempted

    @property
    def three_pointers_made(self) -> int:
        return self.three_made

    @property
    def three_pointers_attempted(self) -> int:
        return self.three_attempted

    @property
    def field_goal_pct(self) -> float:
        """Field goal percentage as a fraction (0.0 with no attempts)."""
        attempts = self.field_goals_attempted
        return self.field_goals_made / attempts if attempts > 0 else 0.0

    @property
    def three_point_pct(self) -> float:
        return self.three_made / self.three_attempted if self.three_attempted > 0 else 0.0

    def record_shot(self, shot_type: ShotType, made: bool) -> None:
        """Record a field goal attempt, adding points when made."""
        if shot_type == ShotType.INSIDE:
            self.inside_attempted += 1
            self.inside_made += int(made)
        elif shot_type == ShotType.MIDRANGE:
            self.midrange_attempted += 1
            self.midrange_made += int(made)
        else:
            self.three_attempted += 1
            self.three_made += int(made)
        if made:
            self.points += shot_type.points

    def add(self, other: "BoxScoreEntry") -> None:
        """Add another entry to this one (season totals)."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["rebounds"] = self.rebounds
        data["field_goals_made"] = self.field_goals_made
        data["field_goals_attempted"] = self.field_goals_attempted
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "BoxScoreEntry":
        names = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in data.items() if k in names})


@dataclass
class BoxScore:
    """
    Box score for a single game.

    Dense: every player on both rosters has an entry, even with no stats.
    """

    home_team_id: Optional[UUID] = None
    away_team_id: Optional[UUID] = None
    home_player_ids: list[UUID] = field(default_factory=list)
    away_player_ids: list[UUID] = field(default_factory=list)
    entries: dict[UUID, BoxScoreEntry] = field(default_factory=dict)

    def register(self, player_id: UUID, is_home: bool) -> BoxScoreEntry:
        """Add an empty entry for a player."""
        (self.home_player_ids if is_home else self.away_player_ids).append(player_id)
        entry = BoxScoreEntry()
        self.entries[player_id] = entry
        return entry

    def get(self, player_id: UUID) -> Optional[BoxScoreEntry]:
        return self.entries.get(player_id)

    def __getitem__(self, player_id: UUID) -> BoxScoreEntry:
        return self.entries[player_id]

    def __contains__(self, player_id: UUID) -> bool:
        return player_id in self.entries

    def __iter__(self) -> Iterator[UUID]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def team_entries(self, home: bool) -> list[BoxScoreEntry]:
        ids = self.home_player_ids if home else self.away_player_ids
        return [self.entries[pid] for pid in ids]

    def team_points(self, home: bool) -> int:
        """Sum of player points for one side."""
        return sum(e.points for e in self.team_entries(home))

    def team_totals(self, home: bool) -> BoxScoreEntry:
        total = BoxScoreEntry()
        for entry in self.team_entries(home):
            total.add(entry)
        return total

    def to_dict(self) -> dict:
        return {
            "home_team_id": str(self.home_team_id) if self.home_team_id else None,
            "away_team_id": str(self.away_team_id) if self.away_team_id else None,
            "home_player_ids": [str(pid) for pid in self.home_player_ids],
            "away_player_ids": [str(pid) for pid in self.away_player_ids],
            "entries": {str(pid): e.to_dict() for pid, e in self.entries.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BoxScore":
        home_id = data.get("home_team_id")
        away_id = data.get("away_team_id")
        return cls(
            home_team_id=UUID(home_id) if home_id else None,
            away_team_id=UUID(away_id) if away_id else None,
            home_player_ids=[UUID(pid) for pid in data.get("home_player_ids", [])],
            away_player_ids=[UUID(pid) for pid in data.get("away_player_ids", [])],
            entries={
                UUID(pid): BoxScoreEntry.from_dict(e)
                for pid, e in data.get("entries", {}).items()
            },
        )
