"""Tests for the Roster model."""

from uuid import uuid4

import pytest

from tipoff.core.enums import PlayerRole, RetirementReason
from tipoff.core.errors import PlayerNotFoundError
from tipoff.core.models.team import Roster


class TestRosterPlayers:
    """Adding, finding and removing players."""

    def test_add_and_get(self, home_roster, player_factory):
        player = player_factory()
        home_roster.add_player(player)
        assert home_roster.size == 6
        assert home_roster.get_player(player.id) is player

    def test_get_missing_raises(self, home_roster):
        with pytest.raises(PlayerNotFoundError):
            home_roster.get_player(uuid4())

    def test_not_found_is_a_key_error(self, home_roster):
        with pytest.raises(KeyError):
            home_roster.get_player(uuid4())

    def test_remove_player(self, home_roster):
        first = home_roster.players[0]
        assert home_roster.remove_player(first.id) is first
        assert home_roster.remove_player(first.id) is None
        assert home_roster.size == 4

    def test_team_id_is_roster_id(self, home_roster):
        assert home_roster.team_id == home_roster.id

    def test_order_preserved(self, home_roster):
        assert [p.role for p in home_roster.players] == list(PlayerRole)

    def test_players_by_role_excludes_retired(self, home_roster):
        center = home_roster.players_by_role(PlayerRole.C)[0]
        center.retire(RetirementReason.AGE)
        assert home_roster.players_by_role(PlayerRole.C) == []
        assert center not in home_roster.active_players()

    def test_remove_retired(self, home_roster):
        retiree = home_roster.players[1]
        retiree.retire(RetirementReason.PERFORMANCE)
        assert home_roster.remove_retired() == [retiree]
        assert retiree not in home_roster.players


class TestRosterRecord:
    """Win/loss bookkeeping."""

    def test_record_results(self):
        roster = Roster(name="Test")
        roster.record_result(True)
        roster.record_result(True)
        roster.record_result(False)
        assert (roster.wins, roster.losses) == (2, 1)
        assert roster.win_pct == pytest.approx(2 / 3)

    def test_tie_not_recorded(self):
        roster = Roster(name="Test")
        roster.record_result(None)
        assert roster.games_played == 0
        assert roster.win_pct == 0.0

    def test_reset_record(self):
        roster = Roster(name="Test", wins=5, losses=3)
        roster.reset_record()
        assert roster.games_played == 0

    def test_dict_round_trip(self, home_roster):
        home_roster.record_result(True)
        restored = Roster.from_dict(home_roster.to_dict())
        assert restored.id == home_roster.id
        assert restored.abbreviation == "HCG"
        assert [p.id for p in restored.players] == [p.id for p in home_roster.players]
        assert restored.wins == 1
