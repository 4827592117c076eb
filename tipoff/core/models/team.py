"""Team roster model."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from tipoff.core.enums import PlayerRole
from tipoff.core.errors import PlayerNotFoundError
from tipoff.core.models.player import PlayerRecord


@dataclass
class Roster:
    """
    A team's ordered list of players plus its win/loss record.

    Player order is preserved; it is the order the simulator samples from
    and the order batch aging reports results in.
    """

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    abbreviation: str = ""
    players: list[PlayerRecord] = field(default_factory=list)
    wins: int = 0
    losses: int = 0

    @property
    def team_id(self) -> UUID:
        return self.id

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def win_pct(self) -> float:
        return self.wins / self.games_played if self.games_played > 0 else 0.0

    def add_player(self, player: PlayerRecord) -> None:
        self.players.append(player)

    def remove_player(self, player_id: UUID) -> Optional[PlayerRecord]:
        """Remove a player, returning it (None if absent)."""
        for i, player in enumerate(self.players):
            if player.id == player_id:
                return self.players.pop(i)
        return None

    def get_player(self, player_id: UUID) -> PlayerRecord:
        """Look up a player by id, raising PlayerNotFoundError if absent."""
        for player in self.players:
            if player.id == player_id:
                return player
        raise PlayerNotFoundError(f"Player {player_id} is not on roster {self.name or self.id}")

    def active_players(self) -> list[PlayerRecord]:
        return [p for p in self.players if not p.retired]

    def players_by_role(self, role: PlayerRole) -> list[PlayerRecord]:
        return [p for p in self.players if p.role == role and not p.retired]

    def remove_retired(self) -> list[PlayerRecord]:
        """Drop retired players and return them."""
        retired = [p for p in self.players if p.retired]
        self.players = [p for p in self.players if not p.retired]
        return retired

    def record_result(self, won: Optional[bool]) -> None:
        """Record a game result. None means a tie, which is not recorded."""
        if won is None:
            return
        if won:
            self.wins += 1
        else:
            self.losses += 1

    def reset_record(self) -> None:
        self.wins = 0
        self.losses = 0

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "abbreviation": self.abbreviation,
            "players": [p.to_dict() for p in self.players],
            "wins": self.wins,
            "losses": self.losses,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Roster":
        return cls(
            id=UUID(data["id"]) if "id" in data else uuid4(),
            name=data.get("name", ""),
            abbreviation=data.get("abbreviation", ""),
            players=[PlayerRecord.from_dict(p) for p in data.get("players", [])],
            wins=int(data.get("wins", 0)),
            losses=int(data.get("losses", 0)),
        )
