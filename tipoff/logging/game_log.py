"""In-memory game log for accumulating play-by-play events."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from tipoff.events import EventBus, GameCompleted, PossessionCompleted


@dataclass
class LogEntry:
    """Single entry in the game log."""

    timestamp: datetime
    possession: int
    event_type: str  # "SHOT", "TURNOVER", "FINAL"
    description: str
    home_score: int
    away_score: int
    offense_is_home: bool = False
    points: int = 0


@dataclass
class LoggedPlayer:
    """Cached identity for play-by-play descriptions."""

    name: str
    role: str
    team_abbrev: str


class GameLog:
    """
    In-memory accumulator for play-by-play events.

    Subscribes to an EventBus for automatic logging, or is fed directly by
    the simulator. Can render a plain-text play-by-play.
    """

    def __init__(
        self,
        home_abbrev: str = "HOME",
        away_abbrev: str = "AWAY",
        home_team_id: Optional[UUID] = None,
        away_team_id: Optional[UUID] = None,
    ) -> None:
        self.home_abbrev = home_abbrev
        self.away_abbrev = away_abbrev
        self.home_team_id = home_team_id
        self.away_team_id = away_team_id
        self.entries: list[LogEntry] = []
        self._players: dict[UUID, LoggedPlayer] = {}

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to events from an event bus."""
        event_bus.subscribe(PossessionCompleted, self.record_possession)
        event_bus.subscribe(GameCompleted, self.record_final)

    def register_player(self, player_id: UUID, name: str, role: str, team_abbrev: str) -> None:
        self._players[player_id] = LoggedPlayer(name, role, team_abbrev)

    def player_name(self, player_id: Optional[UUID]) -> str:
        if player_id is None:
            return "Unknown"
        cached = self._players.get(player_id)
        return cached.name if cached else "Unknown"

    def add_entry(
        self,
        possession: int,
        event_type: str,
        description: str,
        home_score: int,
        away_score: int,
        **kwargs,
    ) -> None:
        """Add a log entry manually."""
        self.entries.append(
            LogEntry(
                timestamp=datetime.now(),
                possession=possession,
                event_type=event_type,
                description=description,
                home_score=home_score,
                away_score=away_score,
                **kwargs,
            )
        )

    def record_possession(self, event: PossessionCompleted) -> None:
        """Append a possession, describing it from the event if needed."""
        description = event.description or self._describe(event)
        self.add_entry(
            possession=event.possession_number,
            event_type="TURNOVER" if event.turnover else "SHOT",
            description=description,
            home_score=event.home_score,
            away_score=event.away_score,
            offense_is_home=event.offense_is_home,
            points=event.points,
        )

    def record_final(self, event: GameCompleted) -> None:
        self.add_entry(
            possession=event.possessions,
            event_type="FINAL",
            description=f"Final: {self.away_abbrev} {event.away_score}, {self.home_abbrev} {event.home_score}",
            home_score=event.home_score,
            away_score=event.away_score,
        )

    def _describe(self, event: PossessionCompleted) -> str:
        shooter = self.player_name(event.player_id)
        if event.turnover:
            text = f"{shooter} turnover"
            if event.steal_id:
                text += f" (stolen by {self.player_name(event.steal_id)})"
            return text

        shot = event.shot_type.value if event.shot_type else "shot"
        if event.made:
            text = f"{shooter} makes {shot} ({event.points} pts)"
            if event.assist_id:
                text += f", assist {self.player_name(event.assist_id)}"
            return text

        text = f"{shooter} misses {shot}"
        if event.block_id:
            text += f", blocked by {self.player_name(event.block_id)}"
        if event.rebounder_id:
            kind = "offensive" if event.offensive_rebound else "defensive"
            text += f"; {kind} rebound {self.player_name(event.rebounder_id)}"
        return text

    @property
    def scoring_entries(self) -> list[LogEntry]:
        return [e for e in self.entries if e.points > 0]

    def largest_lead(self) -> tuple[int, int]:
        """Largest (home lead, away lead) reached during the game."""
        home_lead = max((e.home_score - e.away_score for e in self.entries), default=0)
        away_lead = max((e.away_score - e.home_score for e in self.entries), default=0)
        return max(0, home_lead), max(0, away_lead)

    def to_text(self) -> str:
        """Render the play-by-play, one line per entry."""
        lines = []
        for entry in self.entries:
            team = self.home_abbrev if entry.offense_is_home else self.away_abbrev
            prefix = "" if entry.event_type == "FINAL" else f"#{entry.possession:<4}{team:<5}"
            lines.append(
                f"{prefix}{entry.description}  [{self.away_abbrev} {entry.away_score} - "
                f"{self.home_abbrev} {entry.home_score}]"
            )
        return "\n".join(lines)
