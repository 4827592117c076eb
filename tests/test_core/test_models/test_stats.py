"""Tests for box score models."""

from uuid import uuid4

from tipoff.core.enums import ShotType
from tipoff.core.models.stats import BoxScore, BoxScoreEntry


class TestBoxScoreEntry:
    """Tests for a single stat line."""

    def test_record_made_shots(self):
        entry = BoxScoreEntry()
        entry.record_shot(ShotType.INSIDE, True)
        entry.record_shot(ShotType.THREE, True)
        entry.record_shot(ShotType.MIDRANGE, False)

        assert entry.points == 5
        assert entry.field_goals_made == 2
        assert entry.field_goals_attempted == 3
        assert entry.three_pointers_made == 1
        assert entry.three_pointers_attempted == 1

    def test_percentages(self):
        entry = BoxScoreEntry()
        assert entry.field_goal_pct == 0.0
        assert entry.three_point_pct == 0.0
        entry.record_shot(ShotType.THREE, True)
        entry.record_shot(ShotType.THREE, False)
        assert entry.field_goal_pct == 0.5
        assert entry.three_point_pct == 0.5

    def test_rebounds(self):
        entry = BoxScoreEntry(offensive_rebounds=2, defensive_rebounds=5)
        assert entry.rebounds == 7

    def test_add(self):
        total = BoxScoreEntry(points=10, assists=2)
        total.add(BoxScoreEntry(points=4, assists=1, steals=3))
        assert (total.points, total.assists, total.steals) == (14, 3, 3)

    def test_dict_round_trip(self):
        entry = BoxScoreEntry(points=12, offensive_rebounds=1, inside_made=6, inside_attempted=9)
        data = entry.to_dict()
        assert data["rebounds"] == 1
        assert BoxScoreEntry.from_dict(data) == entry


class TestBoxScore:
    """Tests for the game box score."""

    def test_register_is_dense(self):
        box = BoxScore()
        home_ids = [uuid4() for _ in range(3)]
        away_ids = [uuid4() for _ in range(2)]
        for pid in home_ids:
            box.register(pid, is_home=True)
        for pid in away_ids:
            box.register(pid, is_home=False)

        assert len(box) == 5
        assert all(pid in box for pid in home_ids + away_ids)
        assert box.home_player_ids == home_ids
        assert box[home_ids[0]] == BoxScoreEntry()

    def test_team_points_and_totals(self):
        box = BoxScore()
        a, b, c = uuid4(), uuid4(), uuid4()
        box.register(a, True).points = 10
        box.register(b, True).points = 7
        box.register(c, False).points = 3

        assert box.team_points(home=True) == 17
        assert box.team_points(home=False) == 3
        assert box.team_totals(home=True).points == 17

    def test_get_missing(self):
        assert BoxScore().get(uuid4()) is None

    def test_dict_round_trip(self):
        box = BoxScore(home_team_id=uuid4(), away_team_id=uuid4())
        pid = uuid4()
        box.register(pid, True).assists = 4
        restored = BoxScore.from_dict(box.to_dict())
        assert restored.home_team_id == box.home_team_id
        assert restored[pid].assists == 4
        assert restored.home_player_ids == [pid]
