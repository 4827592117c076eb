"""Possession-level game simulation."""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union
from uuid import UUID, uuid4

from tipoff.config import SimulationConfig
from tipoff.core.enums import PlayerRole, ShotType, Skill
from tipoff.core.errors import ConfigurationError
from tipoff.core.models.player import PlayerRecord
from tipoff.core.models.stats import BoxScore
from tipoff.core.models.team import Roster
from tipoff.events.bus import EventBus
from tipoff.events.types import GameCompleted, PossessionCompleted
from tipoff.logging.game_log import GameLog


logger = logging.getLogger(__name__)

TeamInput = Union[Roster, Sequence[PlayerRecord]]

# Assist chance before skill scaling, by shot type
ASSIST_BASE_CHANCE: dict[ShotType, float] = {
    ShotType.INSIDE: 0.45,
    ShotType.MIDRANGE: 0.65,
    ShotType.THREE: 0.85,
}

ASSIST_ROLE_MULTIPLIER: dict[PlayerRole, float] = {
    PlayerRole.PG: 1.3,
    PlayerRole.SG: 1.1,
    PlayerRole.SF: 1.15,
    PlayerRole.PF: 0.9,
    PlayerRole.C: 0.8,
}

MIN_ASSIST_CHANCE = 0.05
MAX_ASSIST_CHANCE = 0.95
MIN_TURNOVER_CHANCE = 0.01
MAX_TURNOVER_CHANCE = 0.20
STEAL_ON_TURNOVER_CHANCE = 0.5


def make_threshold(shot_type: ShotType, shooter: PlayerRecord) -> int:
    """Lowest shot quality (0-99) that results in a make."""
    if shot_type == ShotType.INSIDE:
        return 100 - (30 + 2 * shooter.skills[Skill.INSIDE_SHOOTING])
    if shot_type == ShotType.MIDRANGE:
        return 100 - (25 + 2 * shooter.skills[Skill.SHOOTING])
    return 100 - (25 + shooter.skills[Skill.SHOOTING])


@dataclass
class GameResult:
    """Final score and box score of one simulated game."""

    home_score: int
    away_score: int
    box_score: BoxScore
    possessions: int
    game_id: UUID = field(default_factory=uuid4)
    home_team_id: Optional[UUID] = None
    away_team_id: Optional[UUID] = None
    log: Optional[GameLog] = None

    @property
    def is_tie(self) -> bool:
        return self.home_score == self.away_score

    @property
    def home_won(self) -> Optional[bool]:
        """True for a home win, False for an away win, None for a tie."""
        if self.is_tie:
            return None
        return self.home_score > self.away_score

    @property
    def winner(self) -> Optional[UUID]:
        """Team id of the winning roster, None for a tie."""
        if self.is_tie:
            return None
        return self.home_team_id if self.home_won else self.away_team_id

    @property
    def final_score(self) -> tuple[int, int]:
        return (self.home_score, self.away_score)

    def to_dict(self) -> dict:
        return {
            "game_id": str(self.game_id),
            "home_team_id": str(self.home_team_id) if self.home_team_id else None,
            "away_team_id": str(self.away_team_id) if self.away_team_id else None,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "possessions": self.possessions,
            "box_score": self.box_score.to_dict(),
        }


@dataclass
class _Side:
    """Per-game view of one team."""

    players: list[PlayerRecord]
    team_id: Optional[UUID]
    abbrev: str
    is_home: bool
    score: int = 0


@dataclass
class _Possession:
    """What happened on one possession."""

    shooter: Optional[PlayerRecord] = None
    shot_type: Optional[ShotType] = None
    made: bool = False
    retained: bool = False
    rebounder: Optional[PlayerRecord] = None
    offensive_rebound: bool = False
    assister: Optional[PlayerRecord] = None
    turnover: bool = False
    stealer: Optional[PlayerRecord] = None
    blocker: Optional[PlayerRecord] = None


class PossessionSimulator:
    """
    Simulates a game one possession at a time.

    Each possession a random player of the team with the ball shoots; the
    make probability is linear in the shooter's relevant skill. Every miss
    is rebounded by someone: a random player of the shooting team contests
    first and, if they lose the board, a random defender collects it.

    Input players are read, never modified. Each simulator owns its random
    source, so independent games can run on separate simulators in
    parallel.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            config: Simulation settings (read from environment if None)
            rng: Random source (seeded from config if None)
            event_bus: Event bus for notifications (creates new if None)
        """
        self.config = config or SimulationConfig.from_env()
        self.rng = rng or self.config.make_rng()
        self.event_bus = event_bus or EventBus()

    # =========================================================================
    # Public API
    # =========================================================================

    def simulate_game(
        self,
        home: TeamInput,
        away: TeamInput,
        possession_range: Optional[tuple[int, int]] = None,
    ) -> GameResult:
        """
        Simulate a full game.

        Args:
            home: Home roster (or ordered list of players)
            away: Away roster (or ordered list of players)
            possession_range: Inclusive (min, max) possession count;
                defaults to the configured range

        Returns:
            GameResult with final score and dense box score
        """
        low, high = possession_range or self.config.possession_range
        if low < 0 or high < low:
            raise ConfigurationError([f"Invalid possession range ({low}, {high})"])

        home_side = self._side(home, is_home=True)
        away_side = self._side(away, is_home=False)
        game_id = uuid4()

        box = BoxScore(home_team_id=home_side.team_id, away_team_id=away_side.team_id)
        for player in home_side.players:
            box.register(player.id, is_home=True)
        for player in away_side.players:
            box.register(player.id, is_home=False)

        log = self._create_log(home_side, away_side) if self.config.record_game_log else None
        emit = log is not None or self.event_bus.wants(PossessionCompleted)

        possessions = self.rng.randint(low, high)
        home_has_ball = self.rng.random() < 0.5

        for number in range(1, possessions + 1):
            offense, defense = (home_side, away_side) if home_has_ball else (away_side, home_side)
            outcome = self._play_possession(offense, defense, box)

            if emit:
                event = self._possession_event(game_id, number, offense, outcome, home_side, away_side)
                if log is not None:
                    log.record_possession(event)
                self.event_bus.emit(event)

            home_has_ball = self._possession_after(home_has_ball, outcome.retained)

        result = GameResult(
            home_score=home_side.score,
            away_score=away_side.score,
            box_score=box,
            possessions=possessions,
            game_id=game_id,
            home_team_id=home_side.team_id,
            away_team_id=away_side.team_id,
            log=log,
        )

        final = GameCompleted(
            game_id=game_id,
            home_team_id=home_side.team_id,
            away_team_id=away_side.team_id,
            home_score=result.home_score,
            away_score=result.away_score,
            possessions=possessions,
        )
        if log is not None:
            log.record_final(final)
        self.event_bus.emit(final)

        logger.debug(
            "Game %s: %s %d - %s %d (%d possessions)",
            game_id, home_side.abbrev, result.home_score,
            away_side.abbrev, result.away_score, possessions,
        )
        return result

    # =========================================================================
    # Possession Resolution
    # =========================================================================

    def _possession_after(self, home_has_ball: bool, retained: bool) -> bool:
        """Which side has the ball next: True for home."""
        return home_has_ball if retained else not home_has_ball

    def _play_possession(self, offense: _Side, defense: _Side, box: BoxScore) -> _Possession:
        outcome = _Possession()
        if not offense.players:
            return outcome

        shooter = self.rng.choice(offense.players)
        outcome.shooter = shooter
        shooter_line = box[shooter.id]

        if self.config.model_defense_events and self._resolve_turnover(shooter, defense, box, outcome):
            return outcome

        shot_type = self.rng.choice(list(ShotType))
        quality = self.rng.randrange(100)
        outcome.shot_type = shot_type

        blocked = (
            self.config.model_defense_events
            and shot_type == ShotType.INSIDE
            and self._resolve_block(defense, box, outcome)
        )
        made = not blocked and quality >= make_threshold(shot_type, shooter)
        outcome.made = made
        shooter_line.record_shot(shot_type, made)

        if made:
            offense.score += shot_type.points
            if self.config.model_assists:
                self._resolve_assist(shooter, shot_type, offense, box, outcome)
            return outcome

        self._resolve_rebound(offense, defense, box, outcome)
        return outcome

    def _resolve_rebound(
        self,
        offense: _Side,
        defense: _Side,
        box: BoxScore,
        outcome: _Possession,
    ) -> None:
        """The shooting side contests first; otherwise a defender secures it."""
        contester = self.rng.choice(offense.players)
        quality = self.rng.randrange(100)
        if quality >= 100 - contester.skills[Skill.REBOUNDING]:
            box[contester.id].offensive_rebounds += 1
            outcome.rebounder = contester
            outcome.offensive_rebound = True
            outcome.retained = True
            return

        if defense.players:
            rebounder = self.rng.choice(defense.players)
            box[rebounder.id].defensive_rebounds += 1
            outcome.rebounder = rebounder

    def _resolve_assist(
        self,
        shooter: PlayerRecord,
        shot_type: ShotType,
        offense: _Side,
        box: BoxScore,
        outcome: _Possession,
    ) -> None:
        teammates = [p for p in offense.players if p.id != shooter.id]
        if not teammates:
            return
        passer = self.rng.choice(teammates)
        chance = (
            ASSIST_BASE_CHANCE[shot_type]
            * passer.skills[Skill.PASSING] / 100
            * shooter.skills[Skill.BALL_HANDLING] / 100
            * ASSIST_ROLE_MULTIPLIER[passer.role]
        )
        chance = max(MIN_ASSIST_CHANCE, min(MAX_ASSIST_CHANCE, chance))
        if self.rng.random() < chance:
            box[passer.id].assists += 1
            outcome.assister = passer

    def _resolve_turnover(
        self,
        handler: PlayerRecord,
        defense: _Side,
        box: BoxScore,
        outcome: _Possession,
    ) -> bool:
        pressure = sum(
            p.skills[Skill.PERIMETER_DEFENSE] * 0.3 for p in defense.players if p.role.is_guard
        )
        chance = (100 - handler.skills[Skill.BALL_HANDLING] + pressure) / 1000
        chance = max(MIN_TURNOVER_CHANCE, min(MAX_TURNOVER_CHANCE, chance))
        if self.rng.random() >= chance:
            return False

        box[handler.id].turnovers += 1
        outcome.turnover = True
        if defense.players and self.rng.random() < STEAL_ON_TURNOVER_CHANCE:
            stealer = self._weighted_defender(defense.players)
            box[stealer.id].steals += 1
            outcome.stealer = stealer
        return True

    def _weighted_defender(self, defenders: list[PlayerRecord]) -> PlayerRecord:
        weights = [
            p.skills[Skill.PERIMETER_DEFENSE] * (1.5 if p.role.is_guard else 1.0)
            for p in defenders
        ]
        if sum(weights) <= 0:
            return self.rng.choice(defenders)
        return self.rng.choices(defenders, weights=weights, k=1)[0]

    def _resolve_block(self, defense: _Side, box: BoxScore, outcome: _Possession) -> bool:
        for defender in defense.players:
            if self.rng.random() < defender.skills[Skill.POST_DEFENSE] / 2000:
                box[defender.id].blocks += 1
                outcome.blocker = defender
                return True
        return False

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _side(team: TeamInput, is_home: bool) -> _Side:
        if isinstance(team, Roster):
            return _Side(
                players=team.active_players(),
                team_id=team.id,
                abbrev=team.abbreviation or team.name or ("HOME" if is_home else "AWAY"),
                is_home=is_home,
            )
        return _Side(
            players=[p for p in team if not p.retired],
            team_id=None,
            abbrev="HOME" if is_home else "AWAY",
            is_home=is_home,
        )

    @staticmethod
    def _create_log(home: _Side, away: _Side) -> GameLog:
        log = GameLog(
            home_abbrev=home.abbrev,
            away_abbrev=away.abbrev,
            home_team_id=home.team_id,
            away_team_id=away.team_id,
        )
        for side in (home, away):
            for player in side.players:
                log.register_player(player.id, player.name, player.role.value, side.abbrev)
        return log

    @staticmethod
    def _possession_event(
        game_id: UUID,
        number: int,
        offense: _Side,
        outcome: _Possession,
        home: _Side,
        away: _Side,
    ) -> PossessionCompleted:
        def pid(player: Optional[PlayerRecord]) -> Optional[UUID]:
            return player.id if player else None

        return PossessionCompleted(
            game_id=game_id,
            possession_number=number,
            offense_is_home=offense.is_home,
            player_id=pid(outcome.shooter),
            shot_type=outcome.shot_type,
            made=outcome.made,
            points=outcome.shot_type.points if outcome.made and outcome.shot_type else 0,
            rebounder_id=pid(outcome.rebounder),
            offensive_rebound=outcome.offensive_rebound,
            assist_id=pid(outcome.assister),
            turnover=outcome.turnover,
            steal_id=pid(outcome.stealer),
            block_id=pid(outcome.blocker),
            home_score=home.score,
            away_score=away.score,
        )
