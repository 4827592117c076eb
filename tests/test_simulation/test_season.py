"""Tests for the season orchestrator."""

import random

import pytest

from tipoff.config import SimulationConfig
from tipoff.core.enums import RetirementReason
from tipoff.core.errors import TeamNotFoundError
from tipoff.events import EventBus, GameCompleted, PlayerRetired, SeasonCompleted, SkillUpgraded
from tipoff.simulation import SeasonOrchestrator


@pytest.fixture
def season_config() -> SimulationConfig:
    return SimulationConfig(
        min_possessions=60,
        max_possessions=80,
        model_assists=True,
        model_defense_events=False,
        record_game_log=False,
        min_roster_size=7,
        max_roster_size=9,
        seed=None,
    )


@pytest.fixture
def orchestrator(home_roster, away_roster, season_config):
    return SeasonOrchestrator(
        [home_roster, away_roster],
        config=season_config,
        rng=random.Random(42),
        event_bus=EventBus(),
    )


class TestLookup:
    """Resolving teams."""

    def test_by_id_name_and_abbreviation(self, orchestrator, home_roster):
        assert orchestrator.get_roster(home_roster.id) is home_roster
        assert orchestrator.get_roster("Harbor City Gulls") is home_roster
        assert orchestrator.get_roster("HCG") is home_roster

    def test_unknown_team(self, orchestrator):
        with pytest.raises(TeamNotFoundError):
            orchestrator.get_roster("Nowhere Nomads")

    def test_unknown_team_fails_whole_matchday(self, orchestrator, home_roster, away_roster):
        with pytest.raises(TeamNotFoundError):
            orchestrator.play_matchday([("HCG", "RRC"), ("HCG", "XXX")])
        assert orchestrator.games_played == 0
        assert home_roster.games_played == 0
        assert all(p.development.total_experience == 0 for p in home_roster.players)


class TestMatchday:
    """Playing games and developing players."""

    def test_records_updated(self, orchestrator, home_roster, away_roster):
        results = orchestrator.play_matchday([(home_roster.id, away_roster.id)])
        assert len(results) == 1
        result = results[0]
        if result.is_tie:
            assert home_roster.games_played == away_roster.games_played == 0
        else:
            assert home_roster.wins + away_roster.wins == 1
            assert home_roster.wins == int(result.home_won)
        assert orchestrator.games_played == 1

    def test_participants_gain_experience(self, orchestrator, home_roster, away_roster):
        orchestrator.play_matchday([("HCG", "RRC")])
        for player in home_roster.players + away_roster.players:
            assert player.development.total_experience > 0

    def test_upgrade_events_match_skills(self, orchestrator, home_roster, away_roster):
        upgrades = []
        orchestrator.event_bus.subscribe(SkillUpgraded, upgrades.append)
        for _ in range(10):
            orchestrator.play_matchday([("HCG", "RRC"), ("RRC", "HCG")])

        assert upgrades
        players = {p.id: p for p in home_roster.players + away_roster.players}
        for event in upgrades:
            assert players[event.player_id].skills[event.skill] >= event.new_value

    def test_events_arrive_after_matchday_applied(self, orchestrator, home_roster):
        experience_seen = []
        orchestrator.event_bus.subscribe(
            GameCompleted,
            lambda e: experience_seen.append(
                sum(p.development.total_experience for p in home_roster.players)
            ),
        )

        orchestrator.play_matchday([("HCG", "RRC"), ("RRC", "HCG")])

        final = sum(p.development.total_experience for p in home_roster.players)
        assert final > 0
        assert experience_seen == [final, final]
        assert orchestrator.event_bus.pending_count == 0


class TestSeasonBoundary:
    """Aging, retirement and refilling."""

    def test_everyone_ages(self, orchestrator, home_roster):
        ages = [p.age for p in home_roster.players]
        orchestrator.end_season()
        veterans = [p for p in home_roster.players if not p.is_rookie]
        assert [p.age for p in veterans] == [a + 1 for a in ages]

    def test_retirees_removed_and_replaced(self, orchestrator, home_roster):
        retired_events = []
        orchestrator.event_bus.subscribe(PlayerRetired, retired_events.append)
        old_timer = home_roster.players[0]
        old_timer.age = 45

        summary = orchestrator.end_season()

        assert old_timer in summary.retired
        assert old_timer.retirement_reason == RetirementReason.AGE
        assert old_timer not in home_roster.players
        assert [e.player_id for e in retired_events] == [old_timer.id]
        assert retired_events[0].team_id == home_roster.id

    def test_rosters_refilled_to_minimum(self, orchestrator, home_roster, away_roster):
        summary = orchestrator.end_season()
        assert home_roster.size >= 7
        assert away_roster.size >= 7
        assert len(summary.rookies_added) >= 4
        assert all(p.is_rookie for p in summary.rookies_added)

    def test_records_reset_and_season_advances(self, orchestrator, home_roster):
        completed = []
        orchestrator.event_bus.subscribe(SeasonCompleted, completed.append)
        orchestrator.play_matchday([("HCG", "RRC")])

        summary = orchestrator.end_season()

        assert summary.season == 1
        assert summary.games_played == 1
        assert orchestrator.season == 2
        assert orchestrator.games_played == 0
        assert home_roster.games_played == 0
        assert completed[0].season == 1

    def test_standings_sorted_by_wins(self, orchestrator, home_roster, away_roster):
        home_roster.wins, home_roster.losses = 1, 3
        away_roster.wins, away_roster.losses = 3, 1
        summary = orchestrator.end_season()
        assert summary.standings[0] == ("Red Rock Coyotes", 3, 1)

    def test_career_history(self, orchestrator, home_roster):
        player = home_roster.players[2]
        orchestrator.end_season()
        orchestrator.end_season()
        arc = orchestrator.histories[str(player.id)].get_career_arc()
        assert [entry["season"] for entry in arc] == [1, 2]


class TestRunSeason:
    def test_full_season(self, orchestrator, home_roster, away_roster):
        messages = []
        orchestrator.progress_callback = messages.append
        schedule = [[("HCG", "RRC")], [("RRC", "HCG")], [("HCG", "RRC")]]

        summary = orchestrator.run_season(schedule)

        assert summary.games_played == 3
        assert len(summary.aging_results) >= 10
        assert messages and messages[0].startswith("Season 1")
