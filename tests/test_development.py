"""Tests for the player development system."""

import pytest

from tipoff.core.development import (
    ROLE_POTENTIAL_ADJUSTMENTS,
    award_performance_experience,
    award_training_experience,
    calculate_base_experience,
    calculate_potential_tier,
    apply_role_potential_adjustments,
    develop_after_game,
    distribute_experience,
    process_skill_upgrades,
    round_half_up,
    update_development_rate,
    upgrade_cost,
)
from tipoff.core.enums import PlayerRole, PotentialTier, ShotType, Skill
from tipoff.core.models.stats import BoxScoreEntry


# =============================================================================
# Helpers
# =============================================================================

class TestHelpers:
    """Rounding and cost helpers."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    def test_upgrade_cost_tiers(self):
        assert [upgrade_cost(i) for i in range(4)] == [100, 200, 300, 400]


# =============================================================================
# Base Experience
# =============================================================================

class TestBaseExperience:
    """Experience earned from a stat line."""

    def test_empty_line_gets_base(self):
        assert calculate_base_experience(BoxScoreEntry()) == 20

    def test_clamped_to_maximum(self):
        assert calculate_base_experience(BoxScoreEntry(points=500)) == 200

    def test_category_weights(self):
        stats = BoxScoreEntry(offensive_rebounds=2, defensive_rebounds=3, assists=4)
        # 20 + 5 * 3 + 4 * 4
        assert calculate_base_experience(stats) == 51

    def test_poor_shooting_penalty(self):
        stats = BoxScoreEntry()
        stats.record_shot(ShotType.INSIDE, True)
        for _ in range(3):
            stats.record_shot(ShotType.INSIDE, False)
        # 20 + 2 points * 2 + 1 make * 2 - 10
        assert calculate_base_experience(stats) == 16

    def test_never_below_minimum(self):
        stats = BoxScoreEntry()
        for _ in range(10):
            stats.record_shot(ShotType.THREE, False)
        assert calculate_base_experience(stats) == 10


# =============================================================================
# Distribution
# =============================================================================

class TestDistribution:
    """Splitting an experience pool across skills."""

    def test_zero_weights_split_evenly(self):
        split = distribute_experience(10, {})
        assert sum(split.values()) == 10
        assert split[Skill.SHOOTING] == 2
        assert split[Skill.REBOUNDING] == 2
        assert split[Skill.PASSING] == 2
        assert split[Skill.INSIDE_SHOOTING] == 1

    def test_proportional(self):
        split = distribute_experience(100, {Skill.SHOOTING: 3.0, Skill.PASSING: 1.0})
        assert split[Skill.SHOOTING] == 75
        assert split[Skill.PASSING] == 25
        assert split[Skill.REBOUNDING] == 0

    def test_non_positive_total(self):
        assert all(v == 0 for v in distribute_experience(0, {Skill.SHOOTING: 1.0}).values())


class TestAwardPerformance:
    """Game experience awards."""

    def test_quiet_game_goes_to_defense(self, average_player):
        awarded = award_performance_experience(average_player, BoxScoreEntry(), age_modifier=1.0)
        assert awarded[Skill.PERIMETER_DEFENSE] == 12
        assert awarded[Skill.POST_DEFENSE] == 8
        assert average_player.development.total_experience == 20

    def test_age_modifier_scales_pool(self, average_player):
        awarded = award_performance_experience(average_player, BoxScoreEntry(), age_modifier=2.0)
        assert sum(awarded.values()) == 40

    def test_coach_bonus_clamped(self, player_factory):
        generous = player_factory()
        capped = player_factory()
        a = award_performance_experience(generous, BoxScoreEntry(), 1.0, coach_bonus=5.0)
        b = award_performance_experience(capped, BoxScoreEntry(), 1.0, coach_bonus=0.3)
        assert a == b

    def test_scorer_earns_shooting(self, average_player):
        stats = BoxScoreEntry()
        for _ in range(8):
            stats.record_shot(ShotType.THREE, True)
        awarded = award_performance_experience(average_player, stats, 1.0)
        assert awarded[Skill.SHOOTING] > awarded[Skill.PASSING]
        assert awarded[Skill.SHOOTING] > 0


class TestAwardTraining:
    """Training session awards."""

    def test_focus_and_related_split(self, average_player):
        awarded = award_training_experience(average_player, Skill.SHOOTING, 5, age_modifier=1.0)
        assert awarded[Skill.SHOOTING] == 35
        assert awarded[Skill.INSIDE_SHOOTING] == 7
        assert awarded[Skill.BALL_HANDLING] == 7
        assert awarded[Skill.PASSING] == 0
        assert average_player.development.experience(Skill.SHOOTING) == 35

    def test_default_age_modifier_from_curve(self, player_factory):
        player = player_factory(age=28)
        awarded = award_training_experience(player, Skill.PASSING, 10)
        # 100 * 1.2 peak multiplier
        assert sum(awarded.values()) == 120


# =============================================================================
# Upgrades
# =============================================================================

class TestSkillUpgrades:
    """Converting banked experience into skill points."""

    def test_tiered_cost_scenario(self, player_factory):
        """250 experience at value 10 buys one point; the next would cost 200."""
        player = player_factory(value=10)
        player.development.add_experience(Skill.SHOOTING, 250)

        upgraded = process_skill_upgrades(player)

        assert upgraded == [Skill.SHOOTING]
        assert player.skills[Skill.SHOOTING] == 11
        assert player.development.experience(Skill.SHOOTING) == 150

    def test_one_entry_per_point(self, player_factory):
        player = player_factory(value=10)
        player.development.add_experience(Skill.PASSING, 300)
        assert process_skill_upgrades(player) == [Skill.PASSING, Skill.PASSING]
        assert player.skills[Skill.PASSING] == 12
        assert player.development.experience(Skill.PASSING) == 0

    def test_cost_tier_resets_each_pass(self, player_factory):
        """Banking a season of experience pays tiered costs; per-game passes do not."""
        banked = player_factory(value=10)
        per_game = player_factory(value=10)

        for _ in range(6):
            banked.development.add_experience(Skill.SHOOTING, 100)
            per_game.development.add_experience(Skill.SHOOTING, 100)
            process_skill_upgrades(per_game)
        season_end = process_skill_upgrades(banked)

        # 100 + 200 + 300 in a single pass
        assert season_end == [Skill.SHOOTING] * 3
        assert banked.skills[Skill.SHOOTING] == 13
        assert banked.development.experience(Skill.SHOOTING) == 0

        assert per_game.skills[Skill.SHOOTING] == 16
        assert per_game.development.experience(Skill.SHOOTING) == 0

    def test_no_experience_is_noop(self, average_player):
        before = average_player.skills.to_dict()
        assert process_skill_upgrades(average_player) == []
        assert average_player.skills.to_dict() == before

    def test_leftover_below_cost_is_noop(self, player_factory):
        player = player_factory(value=10)
        player.development.add_experience(Skill.SHOOTING, 90)
        assert process_skill_upgrades(player) == []
        assert player.development.experience(Skill.SHOOTING) == 90

    def test_ceiling_blocks_upgrade(self, player_factory):
        player = player_factory(value=90, cap=90)
        player.development.add_experience(Skill.SHOOTING, 500)
        assert process_skill_upgrades(player) == []
        assert player.development.experience(Skill.SHOOTING) == 500

    def test_stops_at_ceiling(self, player_factory):
        player = player_factory(value=89, cap=90)
        player.development.add_experience(Skill.REBOUNDING, 1000)
        assert process_skill_upgrades(player) == [Skill.REBOUNDING]
        assert player.skills[Skill.REBOUNDING] == 90
        assert player.development.experience(Skill.REBOUNDING) == 900

    def test_develop_after_game(self, average_player):
        stats = BoxScoreEntry()
        for _ in range(20):
            stats.record_shot(ShotType.INSIDE, True)
        average_player.development.add_experience(Skill.INSIDE_SHOOTING, 90)

        upgraded = develop_after_game(average_player, stats)

        assert upgraded == [Skill.INSIDE_SHOOTING]
        assert average_player.skills[Skill.INSIDE_SHOOTING] == 51
        assert average_player.skills[Skill.SHOOTING] == 50


# =============================================================================
# Rates and Potential
# =============================================================================

class TestRatesAndPotential:
    """Development rate and potential tier estimation."""

    def test_update_development_rate(self, player_factory):
        player = player_factory(age=28)
        assert update_development_rate(player) == pytest.approx(1.2)
        assert update_development_rate(player, coach_bonus=0.1) == pytest.approx(1.3)

    @pytest.mark.parametrize("age,value,expected", [
        (21, 90, PotentialTier.ELITE),
        (21, 70, PotentialTier.SILVER),
        (24, 72, PotentialTier.SILVER),
        (24, 60, PotentialTier.BRONZE),
        (30, 96, PotentialTier.GOLD),
        (30, 50, PotentialTier.BRONZE),
    ])
    def test_calculate_potential_tier(self, player_factory, age, value, expected):
        assert calculate_potential_tier(player_factory(value=value, age=age)) == expected

    def test_role_adjustments(self, player_factory):
        center = player_factory(role=PlayerRole.C, cap=90)
        apply_role_potential_adjustments(center)
        for skill, boost in ROLE_POTENTIAL_ADJUSTMENTS[PlayerRole.C].items():
            assert center.potential.cap(skill) == 90 + boost
        assert center.potential.cap(Skill.PASSING) == 90

    def test_role_adjustments_clamped(self, player_factory):
        guard = player_factory(role=PlayerRole.PG, cap=97)
        apply_role_potential_adjustments(guard)
        assert guard.potential.cap(Skill.PASSING) == 99
