"""
Season orchestration.

Drives the yearly loop: simulate every game on a matchday, then develop
the players who took part, and at the season boundary age everyone,
retire players and refill rosters with rookies. The schedule itself is
supplied by the caller as lists of (home, away) pairs.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Union
from uuid import UUID

from tipoff.config import SimulationConfig
from tipoff.core.aging import AgingResult, process_player_aging
from tipoff.core.development import develop_after_game
from tipoff.core.errors import TeamNotFoundError
from tipoff.core.models.player import PlayerRecord
from tipoff.core.models.team import Roster
from tipoff.events.bus import EventBus
from tipoff.events.types import PlayerRetired, SeasonCompleted, SkillUpgraded
from tipoff.generators.player import fill_roster
from tipoff.simulation.engine import GameResult, PossessionSimulator


logger = logging.getLogger(__name__)

TeamKey = Union[UUID, str]
Matchup = tuple[TeamKey, TeamKey]


@dataclass
class PlayerCareerHistory:
    """Season-by-season snapshots of one player."""

    player_id: str
    player_name: str
    role: str
    entries: list = field(default_factory=list)

    def add_entry(self, entry: dict) -> None:
        self.entries.append(entry)

    def get_career_arc(self) -> list:
        """Overall rating by season, for charting."""
        return [
            {"season": e["season"], "age": e["age_after"], "overall": e["overall_after"]}
            for e in self.entries
        ]


@dataclass
class SeasonSummary:
    """What happened over one season."""

    season: int
    games_played: int = 0
    aging_results: list[AgingResult] = field(default_factory=list)
    retired: list[PlayerRecord] = field(default_factory=list)
    rookies_added: list[PlayerRecord] = field(default_factory=list)
    standings: list[tuple[str, int, int]] = field(default_factory=list)


class SeasonOrchestrator:
    """
    Runs seasons over a fixed set of rosters.

    Games on a matchday are all simulated before any development is
    applied, so no game reads skills that another game's development has
    already changed.
    """

    def __init__(
        self,
        rosters: Iterable[Roster],
        config: Optional[SimulationConfig] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        coach_bonuses: Optional[dict[UUID, float]] = None,
        progress_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config or SimulationConfig.from_env()
        self.rng = rng or self.config.make_rng()
        self.event_bus = event_bus or EventBus()
        self.simulator = PossessionSimulator(self.config, self.rng, self.event_bus)
        self.rosters: dict[UUID, Roster] = {roster.id: roster for roster in rosters}
        self.coach_bonuses = coach_bonuses or {}
        self.progress_callback = progress_callback

        self.season = 1
        self.games_played = 0
        self.histories: dict[str, PlayerCareerHistory] = {}

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_roster(self, key: TeamKey) -> Roster:
        """Resolve a team by id, name or abbreviation."""
        if isinstance(key, UUID):
            roster = self.rosters.get(key)
            if roster is not None:
                return roster
        else:
            for roster in self.rosters.values():
                if key in (roster.name, roster.abbreviation):
                    return roster
        raise TeamNotFoundError(f"Unknown team: {key}")

    # =========================================================================
    # Games
    # =========================================================================

    def play_matchday(self, matchups: Iterable[Matchup]) -> list[GameResult]:
        """
        Simulate every matchup, then apply development for all of them.

        All teams are resolved before any game is played, so an unknown
        team fails the whole matchday without partial results. Events from
        the matchday reach subscribers once it has been fully applied.
        """
        pairs = [(self.get_roster(home), self.get_roster(away)) for home, away in matchups]

        with self.event_bus.deferred():
            results = [self.simulator.simulate_game(home, away) for home, away in pairs]

            for (home, away), result in zip(pairs, results):
                home.record_result(result.home_won)
                away.record_result(None if result.home_won is None else not result.home_won)
                self._develop_participants(home, result)
                self._develop_participants(away, result)

        self.games_played += len(results)
        return results

    def _develop_participants(self, roster: Roster, result: GameResult) -> None:
        coach_bonus = self.coach_bonuses.get(roster.id)
        for player in roster.active_players():
            stats = result.box_score.get(player.id)
            if stats is None:
                continue
            upgrades = develop_after_game(player, stats, coach_bonus)
            for skill in upgrades:
                self.event_bus.emit(
                    SkillUpgraded(
                        game_id=result.game_id,
                        player_id=player.id,
                        skill=skill,
                        new_value=player.skills[skill],
                    )
                )

    # =========================================================================
    # Season Boundary
    # =========================================================================

    def end_season(self) -> SeasonSummary:
        """Age every player, remove retirees, refill rosters with rookies."""
        summary = SeasonSummary(season=self.season, games_played=self.games_played)
        used_names = {p.name for r in self.rosters.values() for p in r.players}

        for roster in self.rosters.values():
            for player in roster.active_players():
                overall_before = player.overall
                result = process_player_aging(player, self.rng)
                summary.aging_results.append(result)
                self._record_history(player, result, overall_before)
                if result.retired:
                    self.event_bus.emit(
                        PlayerRetired(
                            player_id=player.id,
                            team_id=roster.id,
                            age=player.age,
                            reason=result.reason,
                        )
                    )

            summary.retired.extend(roster.remove_retired())
            summary.rookies_added.extend(
                fill_roster(roster, self.config.min_roster_size, self.rng, used_names)
            )

        summary.standings = sorted(
            ((r.name, r.wins, r.losses) for r in self.rosters.values()),
            key=lambda row: (-row[1], row[2]),
        )

        self._log(
            f"Season {self.season}: {summary.games_played} games, "
            f"{len(summary.retired)} retired, {len(summary.rookies_added)} rookies"
        )
        self.event_bus.emit(
            SeasonCompleted(
                season=self.season,
                games_played=summary.games_played,
                retirements=len(summary.retired),
                rookies_added=len(summary.rookies_added),
            )
        )

        for roster in self.rosters.values():
            roster.reset_record()
        self.season += 1
        self.games_played = 0
        return summary

    def run_season(self, matchdays: Iterable[Iterable[Matchup]]) -> SeasonSummary:
        """Play each matchday in order, then close out the season."""
        for matchday in matchdays:
            self.play_matchday(matchday)
        return self.end_season()

    def _record_history(self, player: PlayerRecord, result: AgingResult, overall_before: int) -> None:
        key = str(player.id)
        if key not in self.histories:
            self.histories[key] = PlayerCareerHistory(
                player_id=key,
                player_name=player.name,
                role=player.role.value,
            )
        self.histories[key].add_entry({
            "season": self.season,
            "age_before": result.previous_age,
            "age_after": result.new_age,
            "overall_before": overall_before,
            "overall_after": player.overall,
            "retired": result.retired,
        })

    def _log(self, message: str) -> None:
        logger.info(message)
        if self.progress_callback:
            self.progress_callback(message)
